"""
Sound Controller - Renders game sounds through pygame
"""

from typing import Dict, Optional, TYPE_CHECKING

import numpy as np
import pygame
import pygame.sndarray

from .tone_synth import ToneSynthesizer

if TYPE_CHECKING:
    from .game_sounds import GameSounds
    from .tone_synth import ToneBuffer
    from game_system.config import AudioConfig


class SoundController:
    """
    Controls all audio playback for the game system.

    Plays the synthesized tone buffers through pygame.mixer. Audio is never
    allowed to break the game: a mixer that cannot start makes every play a
    no-op, and a buffer that cannot be turned into a pygame Sound falls back
    to a pre-rendered file from the sounds folder.
    """

    def __init__(self, synthesizer: 'ToneSynthesizer', logger, audio_config: Optional['AudioConfig'] = None):
        """
        Initialize pygame mixer and pre-render every tone buffer.

        Args:
            synthesizer: ToneSynthesizer whose buffers are played
            logger: ClassLogger instance for logging
            audio_config: Mixer settings, fallback folder, initial volume/mute
        """
        if audio_config is None:
            from game_system.config import AudioConfig
            audio_config = AudioConfig()

        self.synthesizer = synthesizer
        self.logger = logger
        self.config = audio_config
        self.sounds_folder = audio_config.sounds_folder
        self.volume = audio_config.default_volume
        self.muted = audio_config.muted

        self.mixer = pygame.mixer
        self._sound_objects: Dict['GameSounds', pygame.mixer.Sound] = {}
        self._fallback_sounds: Dict['GameSounds', pygame.mixer.Sound] = {}

        self.audio_available = self._init_mixer()

        # Tones are synthesized eagerly so nothing is computed on the input path
        buffers = self.synthesizer.generate_all()
        if self.audio_available:
            self._prepare_sounds(buffers.values())

    def _init_mixer(self) -> bool:
        """Start pygame mixer. Returns False (and logs) if there is no usable audio device."""
        try:
            self.mixer.pre_init(
                frequency=self.synthesizer.sample_rate,
                size=-16,
                channels=self.config.channels,
                buffer=self.config.mixer_buffer
            )
            self.mixer.init()
        except (pygame.error, OSError) as e:
            self.logger.warning(f"🔇 Audio output unavailable, game continues silently: {e}")
            return False

        mixer_settings = self.mixer.get_init()
        if not mixer_settings:
            self.logger.warning("🔇 Mixer did not start, game continues silently")
            return False

        frequency = mixer_settings[0]
        if frequency != self.synthesizer.sample_rate:
            # Mixer was already running at another rate: synthesize at its rate instead
            self.logger.warning(
                f"Mixer runs at {frequency}Hz, not {self.synthesizer.sample_rate}Hz - re-synthesizing tones"
            )
            self.synthesizer = ToneSynthesizer(sample_rate=frequency, logger=self.synthesizer.logger)
        self.logger.info(f"Mixer initialized: {mixer_settings}")
        return True

    def _ensure_mixer(self) -> bool:
        """Lazily resume a mixer that was shut down after a successful start"""
        if self.mixer.get_init():
            return True
        if not self.audio_available:
            return False

        self.logger.info("Mixer was stopped - resuming")
        self._sound_objects.clear()
        self._fallback_sounds.clear()
        self.audio_available = self._init_mixer()
        if self.audio_available:
            self._prepare_sounds(self.synthesizer.generate_all().values())
        return self.audio_available

    def _prepare_sounds(self, buffers) -> None:
        for buffer in buffers:
            try:
                self._sound_objects[buffer.sound] = self._to_pygame_sound(buffer)
            except (pygame.error, ValueError) as e:
                self.logger.warning(f"Cannot render {buffer.sound.name} from buffer, will use file fallback: {e}")

    def _to_pygame_sound(self, buffer: 'ToneBuffer') -> pygame.mixer.Sound:
        """Convert a float buffer to a 16-bit pygame Sound matching the mixer channel count"""
        pcm = (np.clip(buffer.samples, -1.0, 1.0) * 32767).astype(np.int16)
        channels = self.mixer.get_init()[2]
        if channels > 1:
            pcm = np.column_stack([pcm] * channels)
        return pygame.sndarray.make_sound(np.ascontiguousarray(pcm))

    def play(self, buffer: 'ToneBuffer', volume: float) -> Optional[pygame.mixer.Channel]:
        """
        Play a tone buffer with the given gain, fire-and-forget.

        Args:
            buffer: ToneBuffer to render
            volume: Gain (0.0 to 1.0)

        Returns:
            pygame.mixer.Channel the sound plays on, or None if nothing plays
        """
        if not self._ensure_mixer():
            return None

        sound = self._sound_objects.get(buffer.sound)
        if sound is None:
            return self._play_fallback(buffer.sound, volume)

        try:
            sound.set_volume(volume)
            return sound.play()
        except pygame.error as e:
            self.logger.warning(f"Failed to play {buffer.sound.name}: {e}")
            return self._play_fallback(buffer.sound, volume)

    def _play_fallback(self, sound: 'GameSounds', volume: float) -> Optional[pygame.mixer.Channel]:
        """Play the pre-rendered file for sound, if there is one"""
        sound_obj = self._fallback_sounds.get(sound)
        if sound_obj is None:
            sound_path = sound.get_sound_path(self.sounds_folder)
            if sound_path is None:
                self.logger.debug(f"No fallback file for {sound.name} in {self.sounds_folder}")
                return None
            try:
                sound_obj = self.mixer.Sound(str(sound_path))
            except (pygame.error, FileNotFoundError) as e:
                self.logger.warning(f"Failed to load fallback sound {sound_path}: {e}")
                return None
            self._fallback_sounds[sound] = sound_obj

        try:
            sound_obj.set_volume(volume)
            return sound_obj.play()
        except pygame.error as e:
            self.logger.warning(f"Failed to play fallback sound {sound.name}: {e}")
            return None

    def play_sound(self, sound: 'GameSounds') -> Optional[pygame.mixer.Channel]:
        """
        Play a game sound at the current volume (no-op while muted).

        Args:
            sound: GameSounds enum value to play
        """
        if self.muted:
            return None
        return self.play(self.synthesizer.generate(sound), self.volume)

    def set_volume(self, volume: float) -> None:
        """
        Set playback volume.

        Args:
            volume: Volume level, clamped to 0.0-1.0
        """
        self.volume = max(0.0, min(1.0, volume))

    def set_muted(self, muted: bool) -> None:
        self.muted = muted
        if muted and self.mixer.get_init():
            self.mixer.stop()

    def cleanup(self) -> None:
        """Release the audio device"""
        self._sound_objects.clear()
        self._fallback_sounds.clear()
        if self.mixer.get_init():
            self.mixer.quit()
        self.audio_available = False
