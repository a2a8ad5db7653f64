"""
Main game application with PyGame window
"""

import argparse
import logging

import pygame

from classic_pong.core.game import PongGame
from classic_pong.core.input import Key
from classic_pong.core.input import KeyTracker
from classic_pong.core.loop import FixedTimestepLoop
from classic_pong.gui.keymap import get_keymap
from classic_pong.gui.pygame_surface import PygameSurface
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PongApp:
    """Window, keyboard and loop wiring for a Pong game"""

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self.config = config or game_config

        pygame.init()
        size = (self.config.WINDOW_WIDTH, self.config.WINDOW_HEIGHT)
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(self.config.TITLE)

        self.surface = PygameSurface(self.screen)
        self.keymap = get_keymap(self.config.KEYBOARD_LAYOUT)
        logger.info("Using %s keyboard layout", self.config.KEYBOARD_LAYOUT)
        self.key_tracker = KeyTracker()
        self.game = PongGame(self.config, seed=seed)
        self.loop = FixedTimestepLoop(
            self.game,
            self.key_tracker.snapshot,
            ticks_per_second=self.config.TICKS_PER_SECOND,
            max_frame_time=self.config.MAX_FRAME_TIME,
        )

    def handle_event(self, event: pygame.event.Event) -> None:
        """Feeds one pygame event into the key tracker"""
        if event.type == pygame.QUIT:
            self.loop.stop()
            return

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        key = self.keymap.get(event.key)
        if key is None:
            return

        if event.type == pygame.KEYDOWN:
            self.key_tracker.press(key)
            if key is Key.ESCAPE:
                self.loop.stop()
        else:
            self.key_tracker.release(key)

    def poll_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def present(self) -> None:
        pygame.display.flip()

    def run(self, max_frames: int | None = None) -> None:
        """Runs the game until the window is closed or ESC is pressed"""
        try:
            self.loop.run(
                self.surface,
                present=self.present,
                poll_events=self.poll_events,
                max_frames=max_frames,
            )
        finally:
            pygame.quit()


def build_config(args: argparse.Namespace) -> GameConfig:
    """Builds the game configuration from command line arguments"""
    config = GameConfig.load_from_file(args.config) if args.config else GameConfig()
    if args.winning_score is not None:
        config.WINNING_SCORE = args.winning_score
    if args.tps is not None:
        config.TICKS_PER_SECOND = args.tps
    if args.layout is not None:
        config.KEYBOARD_LAYOUT = args.layout
    return config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two player Pong")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--winning-score", type=int, help="Points needed to win")
    parser.add_argument("--tps", type=int, help="Simulation ticks per second")
    parser.add_argument(
        "--layout", choices=["qwerty", "azerty", "qwertz"], help="Keyboard layout"
    )
    parser.add_argument("--seed", type=int, help="Random seed for serve angles")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Entry point of the classic-pong command"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = build_config(args)

    print("=== CLASSIC PONG ===")
    print()
    print("CONTROLS:")
    print("  Player 1 (Left): W/S (Z/S on AZERTY)")
    print("  Player 2 (Right): Up/Down arrows")
    print("  R: Restart after game over")
    print("  ESC: Quit")
    print()
    print(f"First to {config.WINNING_SCORE} wins!")

    PongApp(config, seed=args.seed).run()
