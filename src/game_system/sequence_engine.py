"""
Sequence Engine - owns the game session and drives the state machine
"""

import random
import time
from typing import List, Optional, TYPE_CHECKING

from utils import TimerScheduler
from .config import GameConfig
from .preferences import InMemoryPreferences, clamp_volume
from .sequence_tracker import PlayerInputTracker
from .session import GameSession
from .signals import Signal
from .states import GameState, IdleState, PlaybackState

if TYPE_CHECKING:
    from hybridLogger import ClassLogger
    from game_system.interfaces import IGameListener, IPreferences


SIGNALS = tuple(Signal)


class SequenceEngine:
    """
    Main game engine that orchestrates the Simon game.

    Responsibilities:
    - Own the session, the pattern and the player's input buffer
    - Manage state transitions
    - Run timed playback through the TimerScheduler (no sleeping)
    - Forward events to listeners and sounds to the sound controller

    Everything runs on one thread. Timers fire from update(), which the
    frame loop calls. Each game gets a new generation id and timers from an
    older generation are dropped, so a restart can never be disturbed by a
    previous game's pending playback.
    """

    def __init__(self,
                 sound_controller,  # SoundController or MockSoundController
                 logger: 'ClassLogger',
                 preferences: Optional['IPreferences'] = None,
                 config: Optional[GameConfig] = None,
                 listeners: Optional[List['IGameListener']] = None,
                 rng: Optional[random.Random] = None,
                 scheduler: Optional[TimerScheduler] = None):
        """
        Initialize the sequence engine.

        Args:
            sound_controller: Plays game sounds (never required to succeed)
            logger: Logger for debugging and monitoring
            preferences: High score / mute / volume port (in-memory if omitted)
            config: Game configuration (defaults if omitted)
            listeners: Receivers of outbound game events
            rng: Random source for new signals (seed it for reproducible games)
            scheduler: Timer queue (pass one with a fake clock in tests)
        """
        self.config = config or GameConfig()
        self.config.validate()

        self.sound_controller = sound_controller
        self.logger = logger
        self.preferences = preferences or InMemoryPreferences(
            muted=self.config.audio.muted,
            volume=self.config.audio.default_volume
        )
        self.listeners: List['IGameListener'] = list(listeners or [])
        self.rng = rng or random.Random()
        self.scheduler = scheduler or TimerScheduler()
        self.target_frame_duration = self.config.frame_duration_ms / 1000.0
        self.running = True

        self.session = GameSession()
        self.pattern: List[Signal] = []
        self.input_tracker = PlayerInputTracker()
        self.generation = 0
        self.final_score: Optional[int] = None
        self.high_score = self.preferences.get_high_score()
        self._apply_audio_preferences()

        self.current_state: GameState = IdleState(self)
        self.current_state.on_enter()

        self.logger.info(f"SequenceEngine initialized: high score {self.high_score}")

    # ------------------------------------------------------------------
    # Inbound events
    # ------------------------------------------------------------------

    def start_game(self) -> bool:
        """
        Start a new game if none is running.

        Returns:
            True if a game was started, False if one is already active
        """
        if self.session.is_active:
            self.logger.debug("start_game ignored - game already running")
            return False
        self._begin_session()
        return True

    def restart_game(self) -> None:
        """Abandon any running game and start a new one immediately"""
        if self.session.is_active:
            self.logger.info(f"Restarting - abandoning game #{self.generation} at level {self.session.level}")
        self._begin_session()

    def signal_selected(self, signal: Signal) -> bool:
        """
        Player selected a signal.

        Returns:
            True if the input was accepted, False if it was ignored
            (no game running, or playback in progress)
        """
        if not self.session.accepts_input:
            self.logger.debug(f"Input {signal} ignored in {self.get_current_state_name()}")
            return False

        new_state = self.current_state.handle_signal(signal)
        if new_state:
            self.transition_to(new_state)
        return True

    def toggle_audio(self) -> bool:
        """
        Flip the mute flag.

        Returns:
            True if audio is now enabled
        """
        muted = not self.preferences.is_muted()
        self.preferences.set_muted(muted)
        self.sound_controller.set_muted(muted)
        self.logger.info(f"Audio {'muted' if muted else 'enabled'}")
        return not muted

    def set_volume(self, volume: float) -> float:
        """
        Set playback volume.

        Returns:
            The applied volume, clamped to 0.0-1.0
        """
        volume = clamp_volume(volume)
        self.preferences.set_volume(volume)
        self.sound_controller.set_volume(volume)
        return volume

    def add_listener(self, listener: 'IGameListener') -> None:
        self.listeners.append(listener)

    # ------------------------------------------------------------------
    # Game loop
    # ------------------------------------------------------------------

    def update(self) -> None:
        """Fire due timers. Call this repeatedly from the main loop."""
        self.scheduler.update()

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Call this from your main() function for automatic frame management.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration*1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.time()

                self.update()

                frame_duration = time.time() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        self.running = False
        self.scheduler.cancel_all()
        if self.sound_controller:
            self.sound_controller.cleanup()
        self.logger.info("Game stopped")

    # ------------------------------------------------------------------
    # Used by the states
    # ------------------------------------------------------------------

    def schedule(self, delay_ms: int, callback) -> int:
        """
        Run callback after delay_ms, unless a new game has started meanwhile.

        Returns:
            Timer handle
        """
        generation = self.generation

        def guarded() -> None:
            if generation != self.generation:
                self.logger.debug(f"Dropped stale timer from game #{generation} (current #{self.generation})")
                return
            callback()

        return self.scheduler.call_later(delay_ms, guarded)

    def transition_to(self, new_state: GameState) -> None:
        """
        Handle transition to a new game state.

        on_enter() may return a follow-up state, which is entered right away.
        """
        while new_state is not None:
            self.current_state.on_exit()

            old_state_name = self.current_state.__class__.__name__
            new_state_name = new_state.__class__.__name__
            self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

            self.current_state = new_state
            new_state = self.current_state.on_enter()

    def next_signal(self) -> Signal:
        """Uniform random choice among the four signals"""
        return self.rng.choice(SIGNALS)

    def start_next_level(self) -> Signal:
        """
        Advance to the next level: bump counters, clear the input buffer and
        append one new signal to the pattern.

        Returns:
            The appended signal
        """
        self.session.advance_level()
        signal = self.next_signal()
        self.pattern.append(signal)
        self.input_tracker.start_round(self.pattern)
        self.emit("on_level_changed", self.session.level)
        self.emit("on_score_changed", self.session.score)
        return signal

    def play_signal_sound(self, signal: Signal) -> None:
        from audio_system.game_sounds import GameSounds
        self.sound_controller.play_sound(GameSounds.for_signal(signal))

    def record_high_score(self, score: int) -> None:
        self.high_score = score
        self.preferences.set_high_score(score)
        self.logger.info(f"🏆 New high score: {score}")
        self.emit("on_high_score_changed", score)

    def reset_session(self) -> None:
        """Back to idle defaults: empty pattern and buffer, level 0, flags cleared"""
        self.session.end()
        self.pattern = []
        self.input_tracker.reset()

    def emit(self, event: str, *args) -> None:
        """Call event on every listener"""
        for listener in self.listeners:
            getattr(listener, event)(*args)

    # ------------------------------------------------------------------

    def _begin_session(self) -> None:
        self.generation += 1
        self._apply_audio_preferences()

        self.session.start()
        self.pattern = []
        self.input_tracker.reset()
        self.final_score = None
        self.logger.info(f"Game #{self.generation} started")

        self.emit("on_score_changed", self.session.score)
        self.emit("on_level_changed", self.session.level)
        self.transition_to(PlaybackState(self))

    def _apply_audio_preferences(self) -> None:
        self.sound_controller.set_muted(self.preferences.is_muted())
        self.sound_controller.set_volume(self.preferences.get_volume())

    def get_current_state_name(self) -> str:
        """Get the name of the current game state."""
        return self.current_state.__class__.__name__
