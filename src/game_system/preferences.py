"""
In-memory preferences adapter
"""

from .interfaces import IPreferences


class InMemoryPreferences(IPreferences):
    """Preferences kept for the lifetime of the process only"""

    def __init__(self, high_score: int = 0, muted: bool = False, volume: float = 0.7):
        if high_score < 0:
            raise ValueError(f"High score must be non-negative, got {high_score}")
        self._high_score = high_score
        self._muted = muted
        self._volume = clamp_volume(volume)

    def get_high_score(self) -> int:
        return self._high_score

    def set_high_score(self, score: int) -> None:
        if score < 0:
            raise ValueError(f"High score must be non-negative, got {score}")
        self._high_score = score

    def is_muted(self) -> bool:
        return self._muted

    def set_muted(self, muted: bool) -> None:
        self._muted = bool(muted)

    def get_volume(self) -> float:
        return self._volume

    def set_volume(self, volume: float) -> None:
        self._volume = clamp_volume(volume)

    def __str__(self) -> str:
        return f"InMemoryPreferences(high_score={self._high_score}, muted={self._muted}, volume={self._volume:.2f})"


def clamp_volume(volume: float) -> float:
    """Clamp volume to the 0.0-1.0 range"""
    return max(0.0, min(1.0, float(volume)))
