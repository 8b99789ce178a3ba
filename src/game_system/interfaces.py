"""
Abstract interfaces between the sequence engine and its collaborators
"""

from abc import ABC, abstractmethod

from .signals import Signal


class IGameListener(ABC):
    """
    Receiver of the engine's outbound events (display, score board, ...).

    Every method is a no-op by default so implementations only override
    what they care about.
    """

    def on_signal_activate(self, signal: Signal) -> None:
        """Signal lit during playback"""
        pass

    def on_signal_deactivate(self, signal: Signal) -> None:
        """Signal unlit during playback"""
        pass

    def on_signal_pressed(self, signal: Signal) -> None:
        """Player input was accepted (press feedback)"""
        pass

    def on_level_changed(self, level: int) -> None:
        pass

    def on_score_changed(self, score: int) -> None:
        pass

    def on_game_over(self, final_score: int) -> None:
        pass

    def on_high_score_changed(self, high_score: int) -> None:
        pass


class IPreferences(ABC):
    """
    Narrow port to persisted player preferences.

    The engine reads these at session boundaries only (construction,
    start of a game, game over) and when the player changes audio settings.
    Storage is up to the implementation.
    """

    @abstractmethod
    def get_high_score(self) -> int:
        pass

    @abstractmethod
    def set_high_score(self, score: int) -> None:
        pass

    @abstractmethod
    def is_muted(self) -> bool:
        pass

    @abstractmethod
    def set_muted(self, muted: bool) -> None:
        pass

    @abstractmethod
    def get_volume(self) -> float:
        """Volume in [0, 1]"""
        pass

    @abstractmethod
    def set_volume(self, volume: float) -> None:
        pass
