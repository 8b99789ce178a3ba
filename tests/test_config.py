"""
Tests for configuration, preferences, signals and session state.
"""

import pytest

from game_system import AudioConfig, GameConfig, GameSession, InMemoryPreferences, Signal, TimingConfig


class TestGameConfig:

    def test_defaults(self):
        config = GameConfig()
        assert config.timing.initial_delay_ms == 500
        assert config.timing.highlight_ms == 300
        assert config.timing.gap_ms == 300
        assert config.timing.round_pause_ms == 1000
        assert config.target_fps == 50.0
        config.validate()

    @pytest.mark.parametrize("length, expected", [(0, 0), (1, 800), (2, 1400), (5, 3200)])
    def test_playback_duration(self, length, expected):
        assert GameConfig().playback_duration_ms(length) == expected

    @pytest.mark.parametrize("config", [
        GameConfig(frame_duration_ms=0),
        GameConfig(timing=TimingConfig(gap_ms=-1)),
        GameConfig(timing=TimingConfig(highlight_ms=0)),
        GameConfig(audio=AudioConfig(sample_rate=0)),
        GameConfig(audio=AudioConfig(channels=3)),
        GameConfig(audio=AudioConfig(default_volume=1.5)),
    ])
    def test_invalid(self, config):
        with pytest.raises(ValueError):
            config.validate()


class TestPreferences:

    def test_defaults(self):
        prefs = InMemoryPreferences()
        assert prefs.get_high_score() == 0
        assert not prefs.is_muted()
        assert prefs.get_volume() == pytest.approx(0.7)

    def test_volume_clamped(self):
        prefs = InMemoryPreferences(volume=2.0)
        assert prefs.get_volume() == 1.0
        prefs.set_volume(-0.5)
        assert prefs.get_volume() == 0.0

    def test_negative_high_score_rejected(self):
        with pytest.raises(ValueError):
            InMemoryPreferences(high_score=-1)
        with pytest.raises(ValueError):
            InMemoryPreferences().set_high_score(-3)

    def test_round_trip(self):
        prefs = InMemoryPreferences()
        prefs.set_high_score(12)
        prefs.set_muted(True)
        assert prefs.get_high_score() == 12
        assert prefs.is_muted()


def test_signal_str():
    assert str(Signal.YELLOW) == "yellow"


class TestGameSession:

    def test_lifecycle(self):
        session = GameSession()
        assert not session.is_active
        assert not session.accepts_input

        session.start()
        assert session.is_active
        assert session.level == 0
        assert session.score == 0

        session.advance_level()
        assert session.level == 1
        assert session.score == 0

        session.advance_level()
        assert session.level == 2
        assert session.score == 1

        session.is_playing_back = True
        assert not session.accepts_input
        session.is_playing_back = False
        assert session.accepts_input

        session.end()
        assert not session.is_active
        assert session.score == 1
