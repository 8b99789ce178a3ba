"""
Tone Synthesizer - closed-form waveforms for the game sounds
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np

from .game_sounds import GameSounds


# Per-signal tones: decaying sine
SIGNAL_FREQUENCIES = {
    GameSounds.RED_SOUND: 220.0,     # A3
    GameSounds.GREEN_SOUND: 277.0,   # C#4
    GameSounds.YELLOW_SOUND: 330.0,  # E4
    GameSounds.BLUE_SOUND: 392.0,    # G4
}
SIGNAL_TONE_DURATION = 0.3
SIGNAL_TONE_DECAY = 3.0
SIGNAL_TONE_GAIN = 0.3

# Failure sound: three close low partials summed without normalization
WRONG_FREQUENCIES = (150.0, 200.0, 250.0)
WRONG_DURATION = 0.5
WRONG_DECAY = 2.0
WRONG_GAIN = 0.2


@dataclass(frozen=True)
class ToneBuffer:
    """
    Immutable mono sample buffer for one game sound.

    samples is a read-only float32 array with values in [-1, 1].
    """
    sound: GameSounds
    samples: np.ndarray
    sample_rate: int

    def __post_init__(self):
        self.samples.flags.writeable = False

    @property
    def duration(self) -> float:
        """Length in seconds"""
        return len(self.samples) / self.sample_rate

    def __len__(self) -> int:
        return len(self.samples)


def sample_count(sample_rate: int, duration: float) -> int:
    """Number of samples for duration seconds at sample_rate"""
    return int(round(sample_rate * duration))


class ToneSynthesizer:
    """
    Builds and caches one ToneBuffer per game sound.

    Buffers are pure functions of the sound and the sample rate, generated
    once (generate_all() at startup) and reused for every play.
    """

    def __init__(self, sample_rate: int = 44100, logger=None):
        """
        Args:
            sample_rate: Output sample rate in Hz
            logger: Optional ClassLogger instance for logging
        """
        if sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {sample_rate}")
        self.sample_rate = sample_rate
        self.logger = logger
        self._cache: Dict[GameSounds, ToneBuffer] = {}

    def generate(self, sound: GameSounds) -> ToneBuffer:
        """Return the buffer for sound, synthesizing it on first request"""
        buffer = self._cache.get(sound)
        if buffer is None:
            if sound is GameSounds.WRONG_SOUND:
                samples = self._wrong_tone()
            else:
                samples = self._signal_tone(SIGNAL_FREQUENCIES[sound])
            buffer = ToneBuffer(sound, samples, self.sample_rate)
            self._cache[sound] = buffer
            if self.logger:
                self.logger.debug(f"Generated {sound.name}: {len(buffer)} samples @ {self.sample_rate}Hz")
        return buffer

    def generate_all(self) -> Dict[GameSounds, ToneBuffer]:
        """Synthesize every game sound (call once at startup)"""
        return {sound: self.generate(sound) for sound in GameSounds}

    def _time_axis(self, duration: float) -> np.ndarray:
        # t = i / sr, exactly
        return np.arange(sample_count(self.sample_rate, duration), dtype=np.float64) / self.sample_rate

    def _signal_tone(self, frequency: float) -> np.ndarray:
        t = self._time_axis(SIGNAL_TONE_DURATION)
        envelope = np.exp(-SIGNAL_TONE_DECAY * t)
        wave = np.sin(2 * np.pi * frequency * t) * envelope * SIGNAL_TONE_GAIN
        return wave.astype(np.float32)

    def _wrong_tone(self) -> np.ndarray:
        t = self._time_axis(WRONG_DURATION)
        envelope = np.exp(-WRONG_DECAY * t)
        chord = sum(np.sin(2 * np.pi * freq * t) for freq in WRONG_FREQUENCIES)
        return (chord * envelope * WRONG_GAIN).astype(np.float32)
