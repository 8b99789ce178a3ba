"""
Tests for PlaybackScript step generation.
"""

from game_system import GameConfig, PlaybackPhase, PlaybackScript, Signal, TimingConfig


RED, BLUE, GREEN = Signal.RED, Signal.BLUE, Signal.GREEN


def steps_of(script):
    return [(step.signal, step.phase, step.delay_ms) for step in script]


def test_single_signal():
    script = PlaybackScript([RED], TimingConfig())
    assert steps_of(script) == [
        (RED, PlaybackPhase.ACTIVATE, 500),
        (RED, PlaybackPhase.DEACTIVATE, 300),
    ]


def test_three_signals():
    script = PlaybackScript([RED, BLUE, RED], TimingConfig())
    assert steps_of(script) == [
        (RED, PlaybackPhase.ACTIVATE, 500),
        (RED, PlaybackPhase.DEACTIVATE, 300),
        (BLUE, PlaybackPhase.ACTIVATE, 300),
        (BLUE, PlaybackPhase.DEACTIVATE, 300),
        (RED, PlaybackPhase.ACTIVATE, 300),
        (RED, PlaybackPhase.DEACTIVATE, 300),
    ]
    assert len(script) == 6


def test_highlights_never_overlap():
    script = PlaybackScript([RED, GREEN, GREEN, BLUE], TimingConfig())
    active = None
    for step in script:
        if step.phase is PlaybackPhase.ACTIVATE:
            assert active is None
            active = step.signal
        else:
            assert active == step.signal
            active = None
    assert active is None


def test_empty_pattern():
    script = PlaybackScript([], TimingConfig())
    assert list(script) == []


def test_step_delays_add_up_to_playback_duration():
    config = GameConfig()
    for length in range(1, 8):
        script = PlaybackScript([GREEN] * length, config.timing)
        assert sum(step.delay_ms for step in script) == config.playback_duration_ms(length)


def test_script_is_restartable():
    script = PlaybackScript([RED, BLUE], TimingConfig())
    assert steps_of(script) == steps_of(script)


def test_pattern_is_snapshotted():
    pattern = [RED]
    script = PlaybackScript(pattern, TimingConfig())
    pattern.append(BLUE)
    assert len(script) == 2


def test_custom_timing():
    timing = TimingConfig(initial_delay_ms=100, highlight_ms=50, gap_ms=25)
    script = PlaybackScript([RED, BLUE], timing)
    assert [step.delay_ms for step in script] == [100, 50, 25, 50]
