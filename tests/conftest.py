"""Pytest configuration - fake clock, recording listener and engine factories.

Nothing here needs an audio device: engines are built with the
MockSoundController and a TimerScheduler driven by a FakeClock, so a whole
game can be played by advancing time by hand.
"""
from __future__ import annotations

import logging
import random
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from audio_system import MockSoundController  # noqa: E402
from game_system import GameConfig, IGameListener, InMemoryPreferences, SequenceEngine, Signal  # noqa: E402
from hybridLogger import HybridLogger  # noqa: E402
from utils import TimerScheduler  # noqa: E402


class FakeClock:
    """Manually advanced clock (seconds)"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


class RecordingListener(IGameListener):
    """Stores every outbound event as (name, arg)"""

    def __init__(self):
        self.events = []

    def on_signal_activate(self, signal):
        self.events.append(("activate", signal))

    def on_signal_deactivate(self, signal):
        self.events.append(("deactivate", signal))

    def on_signal_pressed(self, signal):
        self.events.append(("pressed", signal))

    def on_level_changed(self, level):
        self.events.append(("level", level))

    def on_score_changed(self, score):
        self.events.append(("score", score))

    def on_game_over(self, final_score):
        self.events.append(("game_over", final_score))

    def on_high_score_changed(self, high_score):
        self.events.append(("high_score", high_score))

    def named(self, name):
        return [arg for event, arg in self.events if event == name]


class ScriptedRandom(random.Random):
    """Random source whose choice() returns predefined signals in order"""

    def __init__(self, picks):
        super().__init__(0)
        self.picks = list(picks)

    def choice(self, seq):
        return self.picks.pop(0)


class EngineHarness:
    """Engine plus the fakes around it, with helpers to play through rounds"""

    def __init__(self, logger, rng=None, preferences=None, config=None):
        self.clock = FakeClock()
        self.config = config or GameConfig()
        self.listener = RecordingListener()
        self.sound = MockSoundController(logger)
        self.preferences = preferences or InMemoryPreferences()
        self.engine = SequenceEngine(
            sound_controller=self.sound,
            logger=logger,
            preferences=self.preferences,
            config=self.config,
            listeners=[self.listener],
            rng=rng or random.Random(1234),
            scheduler=TimerScheduler(clock=self.clock),
        )

    def advance(self, ms: float) -> None:
        """Run the frame loop for ms milliseconds, one update() per frame"""
        frame = self.config.frame_duration_ms
        remaining = ms
        while remaining > 0:
            step = min(frame, remaining)
            self.clock.advance_ms(step)
            self.engine.update()
            remaining -= step

    def stall(self, ms: float) -> None:
        """A single late frame: the clock jumps by ms before the next update()"""
        self.clock.advance_ms(ms)
        self.engine.update()

    def finish_playback(self) -> None:
        """Advance exactly through the playback of the current pattern"""
        self.advance(self.config.playback_duration_ms(len(self.engine.pattern)))

    def finish_round_pause(self) -> None:
        """After a completed round: wait the pause and the next playback"""
        self.advance(self.config.timing.round_pause_ms)
        self.finish_playback()

    def enter_pattern(self) -> None:
        for signal in list(self.engine.pattern):
            assert self.engine.signal_selected(signal)

    def start_and_reach_level(self, level: int) -> None:
        """Start a game and play correctly until the given level is awaiting input"""
        self.engine.start_game()
        self.finish_playback()
        while self.engine.session.level < level:
            self.enter_pattern()
            self.finish_round_pause()


def wrong_signal_for(signal: Signal) -> Signal:
    return next(s for s in Signal if s != signal)


@pytest.fixture
def logger():
    main_logger = HybridLogger("SimonTest", log_dir=None)
    yield main_logger.get_class_logger("Test", logging.DEBUG)
    main_logger.cleanup()


@pytest.fixture
def harness(logger):
    return EngineHarness(logger)


@pytest.fixture
def make_harness(logger):
    def factory(**kwargs):
        return EngineHarness(logger, **kwargs)
    return factory
