"""
Game system configuration
"""

from dataclasses import dataclass, field


@dataclass
class TimingConfig:
    """Fixed delays of the playback protocol (milliseconds)"""
    initial_delay_ms: int = 500   # before the first signal of a round
    highlight_ms: int = 300       # how long a signal stays active
    gap_ms: int = 300             # between deactivate and the next activate
    round_pause_ms: int = 1000    # after a completed round, before the next one


@dataclass
class AudioConfig:
    """Audio output configuration"""
    sample_rate: int = 44100
    mixer_buffer: int = 512       # smaller = lower latency, but risk crackles
    channels: int = 1
    sounds_folder: str = "sounds"  # fallback files: <folder>/<sound name>.<ext>
    default_volume: float = 0.7
    muted: bool = False


@dataclass
class GameConfig:
    """Main game system configuration"""

    timing: TimingConfig = field(default_factory=TimingConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)

    frame_duration_ms: float = 20.0  # 50 FPS

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def playback_duration_ms(self, pattern_length: int) -> int:
        """
        Total playback time for a pattern of the given length.

        The gap after the last signal is not waited for: input opens as soon
        as the last signal is deactivated.
        """
        if pattern_length <= 0:
            return 0
        return (self.timing.initial_delay_ms
                + pattern_length * self.timing.highlight_ms
                + (pattern_length - 1) * self.timing.gap_ms)

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        timing = self.timing
        for name in ("initial_delay_ms", "highlight_ms", "gap_ms", "round_pause_ms"):
            if getattr(timing, name) < 0:
                raise ValueError(f"Timing {name} must be non-negative, got {getattr(timing, name)}")
        if timing.highlight_ms == 0:
            raise ValueError("Highlight duration must be positive")

        audio = self.audio
        if audio.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {audio.sample_rate}")
        if audio.channels not in (1, 2):
            raise ValueError(f"Audio channels must be 1 or 2, got {audio.channels}")
        if not (0.0 <= audio.default_volume <= 1.0):
            raise ValueError(f"Default volume must be 0.0-1.0, got {audio.default_volume}")
