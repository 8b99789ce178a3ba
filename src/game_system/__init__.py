"""
Game System - State machine based Simon memory game

This module provides the sequence engine: game session, random pattern
growth, timed playback and incremental validation of the player's input.
"""

from .signals import Signal
from .session import GameSession
from .states import GameState, IdleState, PlaybackState, InputWaitState, GameOverState
from .playback import PlaybackScript, PlaybackStep, PlaybackPhase
from .sequence_tracker import PlayerInputTracker
from .sequence_engine import SequenceEngine
from .interfaces import IGameListener, IPreferences
from .preferences import InMemoryPreferences
from .config import GameConfig, TimingConfig, AudioConfig

__all__ = [
    "Signal",
    "GameSession",
    # States
    "GameState",
    "IdleState",
    "PlaybackState",
    "InputWaitState",
    "GameOverState",
    # Playback
    "PlaybackScript",
    "PlaybackStep",
    "PlaybackPhase",
    "PlayerInputTracker",
    "SequenceEngine",
    # Collaborator ports
    "IGameListener",
    "IPreferences",
    "InMemoryPreferences",
    # Configuration
    "GameConfig",
    "TimingConfig",
    "AudioConfig"
]
