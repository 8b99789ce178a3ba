"""
Game sound identifiers, shared by synthesis and playback
"""

import enum
from pathlib import Path
from typing import Optional

from game_system.signals import Signal


class GameSounds(enum.Enum):
    """Game sound effects - value is the name of the fallback sound file"""
    RED_SOUND = "red"
    BLUE_SOUND = "blue"
    GREEN_SOUND = "green"
    YELLOW_SOUND = "yellow"
    WRONG_SOUND = "wrong"

    @classmethod
    def for_signal(cls, signal: Signal) -> 'GameSounds':
        """Sound played when signal is shown or pressed"""
        return cls(signal.value)

    def get_sound_path(self, sounds_folder: str) -> Optional[Path]:
        """
        Find the pre-rendered fallback file for this sound.

        Any file named <value>.<ext> in sounds_folder matches; the format is
        whatever pygame can load.

        Returns:
            Path of the first match (sorted by name), or None
        """
        folder = Path(sounds_folder)
        if not folder.is_dir():
            return None
        matches = sorted(p for p in folder.glob(f"{self.value}.*") if p.is_file())
        return matches[0] if matches else None
