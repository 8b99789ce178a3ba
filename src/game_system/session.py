"""
GameSession - level/score bookkeeping of one game
"""

from dataclasses import dataclass


@dataclass
class GameSession:
    """
    Mutable session counters, owned by the SequenceEngine.

    While active, score == level - 1 (score counts completed levels).
    Input is accepted only when active and not playing back.
    """
    level: int = 0
    score: int = 0
    is_playing_back: bool = False
    is_active: bool = False

    @property
    def accepts_input(self) -> bool:
        return self.is_active and not self.is_playing_back

    def start(self) -> None:
        """Counters for a fresh game"""
        self.level = 0
        self.score = 0
        self.is_playing_back = False
        self.is_active = True

    def advance_level(self) -> None:
        self.level += 1
        self.score = self.level - 1

    def end(self) -> None:
        """Back to idle defaults. score keeps the final value for display."""
        self.level = 0
        self.is_playing_back = False
        self.is_active = False

    def __str__(self) -> str:
        return (
            f"GameSession(level={self.level}, score={self.score}, "
            f"playing_back={self.is_playing_back}, active={self.is_active})"
        )
