# main.py
import argparse
import logging
from typing import Optional, Sequence, Tuple

import pygame  # type: ignore

from .clock import TickScheduler
from .config import CHARACTERS, DEFAULT_CHARACTER, FPS, TILE, GameConfig
from .controls import Action, Command, action_for_direction, action_for_key, apply, swipe_direction
from .food import BoardFullError
from .game import SnakeGame
from .grid import Cell
from .highscore import FileHighScoreStore, default_store_path
from .render import Layout, Renderer, load_emoji_font

logger = logging.getLogger(__name__)

FLASH_FRAMES = 6


class App:
    """pygame host: owns the window and the frame loop, feeds input to the game."""

    def __init__(self, game: SnakeGame, character: int = 0, fps: int = FPS):
        self.game = game
        self.character = character
        self.fps = fps
        self.scheduler = TickScheduler(game)
        self.layout = Layout(game.config.cols, game.config.rows)
        self.flash = 0
        self.running = False
        self._press: Optional[Tuple[int, int]] = None
        game.add_food_listener(self._on_food)

    def _on_food(self, cell: Cell) -> None:
        self.flash = FLASH_FRAMES

    def stop(self) -> None:
        self.running = False

    def dispatch(self, action: Action) -> None:
        if apply(self.game, action):
            return
        if action.command is Command.NEXT_CHARACTER:
            self.character = (self.character + 1) % len(CHARACTERS)
        elif action.command is Command.PICK_CHARACTER and action.index is not None:
            if action.index < len(CHARACTERS):
                self.character = action.index
        elif action.command is Command.QUIT:
            self.stop()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            action = action_for_key(event.key)
            if action is not None:
                self.dispatch(action)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._press = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._press is not None:
            start, self._press = self._press, None
            swipe = None
            if self.layout.board.collidepoint(start):
                swipe = swipe_direction(event.pos[0] - start[0], event.pos[1] - start[1])
            if swipe is not None:
                self.dispatch(action_for_direction(swipe))
            else:
                action = self.layout.hit(event.pos)
                if action is not None:
                    self.dispatch(action)

    def run(self) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.layout.width, self.layout.height))
            pygame.display.set_caption("Snake Mango 🥭 - pick your character")
            renderer = Renderer(self.layout, emoji_font=load_emoji_font(int(TILE * 0.8)))
            clock = pygame.time.Clock()
            clock.tick()  # first frame has no meaningful delta

            self.running = True
            while self.running:
                # 1) input
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break

                # 2) update, gated by the scheduler
                delta = clock.tick(self.fps)
                try:
                    self.scheduler.on_frame(delta)
                except BoardFullError:
                    logger.info("the snake filled the board")

                # 3) render
                renderer.draw(screen, self.game, self.character, self.flash)
                pygame.display.flip()
                if self.flash:
                    self.flash -= 1
        finally:
            self.game.remove_food_listener(self._on_food)
            pygame.quit()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="snake-mango", description="Grid snake: eat mangoes, grow, don't crash.")
    p.add_argument("--character", default=DEFAULT_CHARACTER,
                   help="emoji to play as, one of: " + " ".join(CHARACTERS))
    p.add_argument("--seed", type=int, default=None, help="seed for food placement")
    p.add_argument("--highscore-file", default=None,
                   help="where the record is kept (default: $SNAKE_MANGO_HIGHSCORE or ~/.snake_mango/highscore)")
    p.add_argument("--fps", type=int, default=FPS, help="render frame cap")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args(argv)
    if args.character not in CHARACTERS:
        p.error(f"unknown character {args.character!r}")
    if args.fps <= 0:
        p.error("--fps must be positive")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = FileHighScoreStore(default_store_path(args.highscore_file))
    game = SnakeGame(GameConfig(seed=args.seed), store=store)
    logger.info("high score %d loaded from %s", game.high_score, store.path)

    App(game, character=CHARACTERS.index(args.character), fps=args.fps).run()


if __name__ == "__main__":
    main()
