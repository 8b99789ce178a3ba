"""
Audio System Module

Provides tone synthesis and sound playback for the Simon game.

The pygame-backed SoundController lives in audio_system.sound_controller;
everything exported here works without an audio backend.
"""

from .game_sounds import GameSounds
from .tone_synth import ToneSynthesizer, ToneBuffer
from .mock_sound_controller import MockSoundController

__all__ = [
    'GameSounds',
    'ToneSynthesizer',
    'ToneBuffer',
    'MockSoundController'
]
