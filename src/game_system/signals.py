"""
The four colored signals of the game
"""

import enum


class Signal(enum.Enum):
    """Game signals - value is the color name used for sounds and display"""
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"

    def __str__(self) -> str:
        return self.value
