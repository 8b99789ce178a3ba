"""
Timed playback of a pattern as a lazy sequence of steps
"""

import enum
from dataclasses import dataclass
from typing import Iterator, Sequence

from .config import TimingConfig
from .signals import Signal


class PlaybackPhase(enum.Enum):
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"


@dataclass(frozen=True)
class PlaybackStep:
    """One timed step: wait delay_ms, then apply phase to signal"""
    signal: Signal
    phase: PlaybackPhase
    delay_ms: int


class PlaybackScript:
    """
    Restartable description of one playback run.

    Iterating yields the steps of the run in order; each step's delay is
    measured from the previous step (the first from the start of playback).
    Highlights never overlap: every ACTIVATE is followed by the DEACTIVATE
    of the same signal before the next ACTIVATE.

    The pattern is snapshotted so the script stays valid if the caller's
    list grows later.

    Example (pattern [RED, BLUE], default timing):
        (RED, ACTIVATE, 500), (RED, DEACTIVATE, 300),
        (BLUE, ACTIVATE, 300), (BLUE, DEACTIVATE, 300)
    """

    def __init__(self, pattern: Sequence[Signal], timing: TimingConfig):
        self.pattern = tuple(pattern)
        self.timing = timing

    def __iter__(self) -> Iterator[PlaybackStep]:
        for index, signal in enumerate(self.pattern):
            delay = self.timing.initial_delay_ms if index == 0 else self.timing.gap_ms
            yield PlaybackStep(signal, PlaybackPhase.ACTIVATE, delay)
            yield PlaybackStep(signal, PlaybackPhase.DEACTIVATE, self.timing.highlight_ms)

    def __len__(self) -> int:
        return 2 * len(self.pattern)

