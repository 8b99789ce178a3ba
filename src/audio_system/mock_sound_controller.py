"""
Mock Sound Controller - No-op implementation for testing without audio hardware
"""

from typing import List, Optional, Tuple


class MockSoundController:
    """
    Mock implementation of SoundController that performs no audio operations.

    Remembers what would have been played so tests can check it.
    """

    def __init__(self, logger, synthesizer=None, volume: float = 0.7, muted: bool = False):
        """
        Initialize mock sound controller.

        Args:
            logger: ClassLogger instance for logging
            synthesizer: Optional ToneSynthesizer (buffers are generated but never played)
            volume: Initial volume
            muted: Initial mute flag
        """
        self.logger = logger
        self.synthesizer = synthesizer
        self.volume = volume
        self.muted = muted
        self.audio_available = False

        # (sound, volume) for every play that would have been audible
        self.played: List[Tuple[object, float]] = []

        if self.synthesizer is not None:
            self.synthesizer.generate_all()

        self.logger.info("🔇 MockSoundController initialized (audio disabled)")

    def play(self, buffer, volume: float) -> None:
        """Mock: Record the buffer's sound instead of playing it"""
        self.played.append((buffer.sound, volume))
        self.logger.debug(f"Mock: Playing buffer {buffer.sound} at volume {volume}")
        return None

    def play_sound(self, sound) -> None:
        """
        Mock: Record a game sound unless muted.

        Args:
            sound: GameSounds enum value
        """
        if self.muted:
            return None
        self.played.append((sound, self.volume))
        self.logger.debug(f"Mock: Playing sound {sound} at volume {self.volume}")
        return None

    def set_volume(self, volume: float) -> None:
        self.volume = max(0.0, min(1.0, volume))

    def set_muted(self, muted: bool) -> None:
        self.muted = muted

    def last_played(self) -> Optional[object]:
        """Sound of the most recent play, or None"""
        return self.played[-1][0] if self.played else None

    def cleanup(self) -> None:
        """Mock: Nothing to release"""
        self.logger.debug("Mock: cleanup")
