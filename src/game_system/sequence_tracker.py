"""
Player input tracker for positional pattern validation
"""

from typing import List, Optional, Sequence

from .signals import Signal


class PlayerInputTracker:
    """
    Holds the player's reproduction attempt for the current level.

    Each entry is compared with the pattern at the same index the moment it
    arrives. There is no correction: once an entry mismatches, the attempt
    is failed and further entries are refused.

    Example:
        tracker = PlayerInputTracker()
        tracker.start_round([Signal.RED, Signal.BLUE])
        tracker.add(Signal.RED)    # Returns True
        tracker.is_complete()      # False, one more entry needed
        tracker.add(Signal.GREEN)  # Returns False - mismatch at index 1
    """

    def __init__(self):
        self.entries: List[Signal] = []
        self._target: Sequence[Signal] = ()
        self.failed = False

    def start_round(self, target: Sequence[Signal]) -> None:
        """
        Clear the buffer and set the pattern to compare against.

        Args:
            target: The pattern for this level (kept by reference, not copied)
        """
        self.entries = []
        self._target = target
        self.failed = False

    def reset(self) -> None:
        """Clear entries and target"""
        self.start_round(())

    def add(self, signal: Signal) -> bool:
        """
        Append an entry and compare it with the pattern at the same index.

        Args:
            signal: The signal the player selected

        Returns:
            True if the entry matched, False on mismatch

        Raises:
            RuntimeError: If the attempt is already failed or complete
        """
        if self.failed:
            raise RuntimeError("Cannot add input after a mismatch")
        if self.is_complete():
            raise RuntimeError(
                f"Input buffer already holds the full pattern ({len(self._target)} entries)"
            )

        index = len(self.entries)
        self.entries.append(signal)
        if self._target[index] != signal:
            self.failed = True
            return False
        return True

    def is_complete(self) -> bool:
        """True when every pattern position has been matched"""
        return not self.failed and len(self.entries) == len(self._target) > 0

    def expected_next(self) -> Optional[Signal]:
        """The signal the player has to select next (None if done or failed)"""
        if self.failed or len(self.entries) >= len(self._target):
            return None
        return self._target[len(self.entries)]

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        entries = ",".join(signal.value for signal in self.entries)
        return f"PlayerInputTracker(entries=[{entries}], target_length={len(self._target)}, failed={self.failed})"
