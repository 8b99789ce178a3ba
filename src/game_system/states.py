"""
Game state base class and concrete implementations
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, TYPE_CHECKING

from .playback import PlaybackPhase, PlaybackScript, PlaybackStep

if TYPE_CHECKING:
    from game_system.sequence_engine import SequenceEngine
    from game_system.signals import Signal


class GameState(ABC):
    """
    Abstract base class for all game states.

    Each state represents a distinct phase of a game with its own:
    - Player input handling
    - Timed actions (scheduled through the engine, generation-tagged)
    - State transition conditions

    Transitions are returned, never performed directly: handle_signal() and
    on_enter() return the next state (or None to stay), and timer callbacks
    hand the next state to engine.transition_to().
    """

    def __init__(self, engine: 'SequenceEngine'):
        self.engine: 'SequenceEngine' = engine
        self.logger = engine.logger.create_class_logger(self.__class__.__name__)

    def handle_signal(self, signal: 'Signal') -> Optional['GameState']:
        """
        Handle a player selection. Only called while the session accepts input.

        Returns:
            New GameState instance if transition needed, None to stay
        """
        self.logger.debug(f"Ignoring {signal} in {self.__class__.__name__}")
        return None

    def on_enter(self) -> Optional['GameState']:
        """Called when entering this state. May return an immediate follow-up state."""
        return self.custom_on_enter()

    def on_exit(self) -> None:
        """Called when exiting this state"""
        self.custom_on_exit()

    @abstractmethod
    def custom_on_enter(self) -> Optional['GameState']:
        """Custom enter logic (override in subclasses)"""
        pass

    def custom_on_exit(self) -> None:
        """Custom exit logic (override if needed)"""
        pass


class IdleState(GameState):
    """
    Idle - no game running, waiting for start_game().

    Transitions:
    - start_game() → PlaybackState (driven by the engine)
    """

    def custom_on_enter(self) -> Optional[GameState]:
        self.engine.session.is_active = False
        self.engine.session.is_playing_back = False
        return None


class PlaybackState(GameState):
    """
    Playback - appends one random signal and replays the whole pattern.

    Timeline (default timing): optional round pause, then 500ms before the
    first signal, each signal active for 300ms, 300ms gap between signals.
    Input is refused for the whole duration, pause included.

    Transitions:
    - Last signal deactivated → InputWaitState
    """

    def __init__(self, engine: 'SequenceEngine', pause_ms: int = 0):
        """
        Args:
            engine: Owning SequenceEngine
            pause_ms: Wait before the new round starts (used after a completed round)
        """
        super().__init__(engine)
        self.pause_ms = pause_ms
        self._steps: Optional[Iterator[PlaybackStep]] = None

    def custom_on_enter(self) -> Optional[GameState]:
        self.engine.session.is_playing_back = True
        if self.pause_ms > 0:
            self.engine.schedule(self.pause_ms, self._begin_round)
        else:
            self._begin_round()
        return None

    def custom_on_exit(self) -> None:
        self.engine.session.is_playing_back = False
        self._steps = None

    def _begin_round(self) -> None:
        signal = self.engine.start_next_level()
        self.logger.info(
            f"Level {self.engine.session.level}: added {signal}, playing {len(self.engine.pattern)} signals "
            f"({self.engine.config.playback_duration_ms(len(self.engine.pattern))}ms)"
        )
        self._steps = iter(PlaybackScript(self.engine.pattern, self.engine.config.timing))
        self._schedule_next_step()

    def _schedule_next_step(self) -> None:
        step = next(self._steps, None)
        if step is None:
            self.engine.transition_to(InputWaitState(self.engine))
            return
        self.engine.schedule(step.delay_ms, lambda: self._run_step(step))

    def _run_step(self, step: PlaybackStep) -> None:
        if step.phase is PlaybackPhase.ACTIVATE:
            self.engine.emit("on_signal_activate", step.signal)
            self.engine.play_signal_sound(step.signal)
        else:
            self.engine.emit("on_signal_deactivate", step.signal)
        self._schedule_next_step()


class InputWaitState(GameState):
    """
    InputWait - player reproduces the pattern, checked entry by entry.

    Transitions:
    - Wrong entry → GameOverState
    - Full pattern matched → PlaybackState (after the round pause)
    """

    def custom_on_enter(self) -> Optional[GameState]:
        self.engine.session.is_playing_back = False
        self.logger.debug(f"Waiting for {len(self.engine.pattern)} inputs")
        return None

    def handle_signal(self, signal: 'Signal') -> Optional[GameState]:
        tracker = self.engine.input_tracker
        position = len(tracker)
        expected = tracker.expected_next()

        self.engine.emit("on_signal_pressed", signal)
        self.engine.play_signal_sound(signal)

        if not tracker.add(signal):
            self.logger.info(
                f"Wrong input at position {position + 1}: got {signal}, expected {expected}"
            )
            return GameOverState(self.engine)

        if tracker.is_complete():
            self.logger.debug(f"Level {self.engine.session.level} complete")
            return PlaybackState(self.engine, pause_ms=self.engine.config.timing.round_pause_ms)

        return None


class GameOverState(GameState):
    """
    GameOver - plays the failure sound, records the score, resets the session.

    Transitions:
    - Immediately → IdleState
    """

    def custom_on_enter(self) -> Optional[GameState]:
        from audio_system.game_sounds import GameSounds

        engine = self.engine
        engine.sound_controller.play_sound(GameSounds.WRONG_SOUND)

        final_score = engine.session.score
        engine.final_score = final_score
        if final_score > engine.high_score:
            engine.record_high_score(final_score)

        self.logger.info(f"Game over - final score {final_score} (high score {engine.high_score})")
        engine.emit("on_game_over", final_score)

        engine.reset_session()
        return IdleState(engine)
