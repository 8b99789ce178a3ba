#!/usr/bin/env python3
"""
Simon Game Example

Wires the sequence engine to a small pygame window: four colored pads,
keyboard input, synthesized tones.
"""

import sys
import logging
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import pygame

from audio_system import ToneSynthesizer
from audio_system.sound_controller import SoundController
from game_system import GameConfig, IGameListener, InMemoryPreferences, SequenceEngine, Signal
from hybridLogger import HybridLogger


PAD_COLORS = {
    Signal.RED: ((120, 20, 20), (255, 60, 60)),
    Signal.BLUE: ((20, 40, 120), (70, 120, 255)),
    Signal.GREEN: ((20, 100, 30), (70, 230, 90)),
    Signal.YELLOW: ((120, 110, 20), (255, 235, 70)),
}
PAD_POSITIONS = {
    Signal.GREEN: (0, 0),
    Signal.RED: (1, 0),
    Signal.YELLOW: (0, 1),
    Signal.BLUE: (1, 1),
}
KEY_TO_SIGNAL = {
    pygame.K_r: Signal.RED,
    pygame.K_b: Signal.BLUE,
    pygame.K_g: Signal.GREEN,
    pygame.K_y: Signal.YELLOW,
}
PAD_SIZE = 180
PRESS_FLASH_MS = 150


class PadDisplay(IGameListener):
    """Keeps what the window shows in sync with engine events"""

    def __init__(self):
        self.lit = set()
        self.pressed_until = {}
        self.level = 0
        self.score = 0
        self.high_score = 0
        self.message = "Press ENTER to start"

    def on_signal_activate(self, signal: Signal) -> None:
        self.lit.add(signal)

    def on_signal_deactivate(self, signal: Signal) -> None:
        self.lit.discard(signal)

    def on_signal_pressed(self, signal: Signal) -> None:
        self.pressed_until[signal] = pygame.time.get_ticks() + PRESS_FLASH_MS

    def on_level_changed(self, level: int) -> None:
        self.level = level
        self.message = f"Level {level}"

    def on_score_changed(self, score: int) -> None:
        self.score = score

    def on_high_score_changed(self, high_score: int) -> None:
        self.high_score = high_score

    def on_game_over(self, final_score: int) -> None:
        self.lit.clear()
        self.message = f"Game over - score {final_score}. ENTER to play again"

    def draw(self, screen, font) -> None:
        screen.fill((18, 18, 18))
        now = pygame.time.get_ticks()
        for signal, (col, row) in PAD_POSITIONS.items():
            dim, bright = PAD_COLORS[signal]
            is_lit = signal in self.lit or self.pressed_until.get(signal, 0) > now
            rect = pygame.Rect(20 + col * (PAD_SIZE + 10), 20 + row * (PAD_SIZE + 10), PAD_SIZE, PAD_SIZE)
            pygame.draw.rect(screen, bright if is_lit else dim, rect, border_radius=16)

        lines = [
            self.message,
            f"Score: {self.score}   High score: {self.high_score}",
            "[R/G/B/Y] pads | [Enter] start | [Space] restart | [M] mute | [+/-] volume | [Esc] quit",
        ]
        for i, line in enumerate(lines):
            screen.blit(font.render(line, True, (230, 230, 230)), (20, 2 * PAD_SIZE + 50 + i * 24))
        pygame.display.flip()


def create_game_system(display: PadDisplay):
    """
    Create and configure the complete game system.

    Returns:
        (SequenceEngine, HybridLogger)
    """
    config = GameConfig()
    config.validate()

    main_logger = HybridLogger("Simon")
    engine_logger = main_logger.get_class_logger("SequenceEngine", logging.DEBUG)
    audio_logger = main_logger.get_class_logger("SoundController", logging.INFO)

    try:
        synthesizer = ToneSynthesizer(sample_rate=config.audio.sample_rate, logger=audio_logger)
        sound_controller = SoundController(synthesizer, audio_logger, config.audio)

        preferences = InMemoryPreferences(
            muted=config.audio.muted,
            volume=config.audio.default_volume
        )
        engine = SequenceEngine(
            sound_controller=sound_controller,
            logger=engine_logger,
            preferences=preferences,
            config=config,
            listeners=[display]
        )
        display.high_score = engine.high_score
        return engine, main_logger

    except Exception as e:
        main_logger.get_main_logger().error(f"Failed to initialize game system: {e}", exception=e)
        raise


def main():
    display = PadDisplay()
    engine, main_logger = create_game_system(display)

    pygame.init()
    screen = pygame.display.set_mode((2 * PAD_SIZE + 430, 2 * PAD_SIZE + 130))
    pygame.display.set_caption("Simon")
    font = pygame.font.SysFont(None, 22)
    clock = pygame.time.Clock()

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_RETURN:
                        engine.start_game()
                    elif event.key == pygame.K_SPACE:
                        engine.restart_game()
                    elif event.key == pygame.K_m:
                        engine.toggle_audio()
                    elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                        engine.set_volume(engine.preferences.get_volume() + 0.1)
                    elif event.key == pygame.K_MINUS:
                        engine.set_volume(engine.preferences.get_volume() - 0.1)
                    elif event.key in KEY_TO_SIGNAL:
                        engine.signal_selected(KEY_TO_SIGNAL[event.key])

            engine.update()
            display.draw(screen, font)
            clock.tick(engine.config.target_fps)

    except KeyboardInterrupt:
        print("\nGame stopped by user")
    finally:
        engine.stop()
        pygame.quit()
        main_logger.cleanup()


if __name__ == "__main__":
    main()
