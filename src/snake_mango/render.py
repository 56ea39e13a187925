# render.py
from typing import Dict, List, Optional, Tuple
import logging

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    TILE, HUD_H, PAD_H, CHARACTERS, MANGO,
    BG, GRID, PANEL, BORDER, ACCENT, PAUSE_BT, RESET_BT, GREEN, MANGO_C, TEXT,
)
from .controls import Action, Command
from .game import BODY, FOOD, HEAD, Phase, SnakeGame

logger = logging.getLogger(__name__)

EMOJI_FONTS = ["notocoloremoji", "applecoloremoji", "segoeuiemoji", "twemojimozilla"]


# ---------- Layout ----------
class Layout:
    """Screen geometry: HUD on top, board in the middle, direction pad below."""

    def __init__(self, cols: int, rows: int, tile: int = TILE):
        self.tile = tile
        self.width = cols * tile
        self.height = HUD_H + rows * tile + PAD_H
        self.board = pygame.Rect(0, HUD_H, cols * tile, rows * tile)

        self.pause_button = pygame.Rect(self.width - 216, 8, 100, 30)
        self.reset_button = pygame.Rect(self.width - 108, 8, 100, 30)
        self.characters = [pygame.Rect(8 + i * 38, 48, 34, 34) for i in range(len(CHARACTERS))]

        cx, top = self.width // 2, self.board.bottom + 4
        self.pad = {
            Command.MOVE_UP: pygame.Rect(cx - 32, top, 64, 28),
            Command.MOVE_LEFT: pygame.Rect(cx - 104, top + 30, 64, 28),
            Command.MOVE_RIGHT: pygame.Rect(cx + 40, top + 30, 64, 28),
            Command.MOVE_DOWN: pygame.Rect(cx - 32, top + 60, 64, 28),
        }

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(self.board.x + x * self.tile, self.board.y + y * self.tile, self.tile, self.tile)

    def hit(self, pos: Tuple[int, int]) -> Optional[Action]:
        """Button under a click/tap, if any."""
        if self.pause_button.collidepoint(pos):
            return Action(Command.PAUSE)
        if self.reset_button.collidepoint(pos):
            return Action(Command.RESET)
        for i, rect in enumerate(self.characters):
            if rect.collidepoint(pos):
                return Action(Command.PICK_CHARACTER, i)
        for command, rect in self.pad.items():
            if rect.collidepoint(pos):
                return Action(command)
        return None


def load_emoji_font(size: int) -> Optional[pygame.font.Font]:
    path = pygame.font.match_font(EMOJI_FONTS)
    if not path:
        logger.info("no emoji font found, drawing plain tiles")
        return None
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        # bitmap emoji fonts refuse most sizes on older SDL_ttf builds
        logger.info("emoji font %s unusable (%s), drawing plain tiles", path, exc)
        return None


# ---------- Renderer ----------
class Renderer:
    def __init__(
        self,
        layout: Layout,
        font: Optional[pygame.font.Font] = None,
        emoji_font: Optional[pygame.font.Font] = None,
    ):
        self.layout = layout
        self.font = font or pygame.font.SysFont(None, 24)
        self.emoji_font = emoji_font
        self._glyphs: Dict[str, pygame.Surface] = {}

    def _glyph(self, text: str) -> Optional[pygame.Surface]:
        if self.emoji_font is None:
            return None
        if text not in self._glyphs:
            surf = self.emoji_font.render(text, True, TEXT)
            side = int(self.layout.tile * 0.9)
            self._glyphs[text] = pygame.transform.smoothscale(surf, (side, side))
        return self._glyphs[text]

    def _draw_tile(self, screen: pygame.Surface, rect: pygame.Rect, emoji: str, color) -> None:
        glyph = self._glyph(emoji)
        if glyph is None:
            pygame.draw.rect(screen, color, rect.inflate(-2, -2), border_radius=6)
        else:
            screen.blit(glyph, glyph.get_rect(center=rect.center))

    def _button(self, screen: pygame.Surface, rect: pygame.Rect, label: str, color) -> None:
        pygame.draw.rect(screen, color, rect, border_radius=10)
        txt = self.font.render(label, True, TEXT)
        screen.blit(txt, txt.get_rect(center=rect.center))

    def draw(self, screen: pygame.Surface, game: SnakeGame, character: int, flash: int = 0) -> None:
        state = game.state
        lay = self.layout
        screen.fill(BG)

        # grid
        for x in range(0, lay.board.width + 1, lay.tile):
            pygame.draw.line(screen, GRID, (x, lay.board.top), (x, lay.board.bottom))
        for y in range(lay.board.top, lay.board.bottom + 1, lay.tile):
            pygame.draw.line(screen, GRID, (0, y), (lay.board.width, y))

        # food and snake from the board snapshot
        board = game.board()
        for y, x in np.argwhere(board == FOOD):
            self._draw_tile(screen, lay.cell_rect(int(x), int(y)), MANGO, MANGO_C)
        for y, x in np.argwhere((board == BODY) | (board == HEAD)):
            self._draw_tile(screen, lay.cell_rect(int(x), int(y)), CHARACTERS[character], GREEN)

        if flash > 0:
            glow = pygame.Surface(lay.board.size, pygame.SRCALPHA)
            glow.fill((*MANGO_C, 12 * flash))
            screen.blit(glow, lay.board.topleft)

        self._draw_hud(screen, game, character)
        self._draw_pad(screen)

        if state.phase is Phase.PAUSED:
            self._overlay(screen, "Paused", "Press SPACE to continue")
        elif state.phase is Phase.GAME_OVER:
            self._overlay(screen, "GAME OVER", f"Score {state.score}. Press R to restart")

    def _draw_hud(self, screen: pygame.Surface, game: SnakeGame, character: int) -> None:
        lay = self.layout
        pygame.draw.rect(screen, PANEL, (0, 0, lay.width, HUD_H))
        txt = self.font.render(f"Score: {game.score}   Record: {game.high_score}", True, TEXT)
        screen.blit(txt, (8, 14))

        paused = game.phase is Phase.PAUSED
        self._button(screen, lay.pause_button, "Resume" if paused else "Pause", PAUSE_BT)
        self._button(screen, lay.reset_button, "Restart", RESET_BT)

        for i, rect in enumerate(lay.characters):
            selected = i == character
            pygame.draw.rect(screen, BG, rect, border_radius=10)
            pygame.draw.rect(screen, ACCENT if selected else BORDER, rect, width=2, border_radius=10)
            glyph = self._glyph(CHARACTERS[i])
            if glyph is None:
                glyph = self.font.render(str(i + 1), True, TEXT)
            screen.blit(glyph, glyph.get_rect(center=rect.center))

    def _draw_pad(self, screen: pygame.Surface) -> None:
        labels: List[Tuple[Command, str]] = [
            (Command.MOVE_UP, "Up"), (Command.MOVE_LEFT, "Left"),
            (Command.MOVE_RIGHT, "Right"), (Command.MOVE_DOWN, "Down"),
        ]
        for command, label in labels:
            self._button(screen, self.layout.pad[command], label, PANEL)

    def _overlay(self, screen: pygame.Surface, title: str, subtitle: str) -> None:
        board = self.layout.board
        # Dim with translucent overlay
        overlay = pygame.Surface(board.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))  # RGBA
        screen.blit(overlay, board.topleft)

        head = self.font.render(title, True, (240, 240, 250))
        sub = self.font.render(subtitle, True, TEXT)
        screen.blit(head, head.get_rect(center=(board.centerx, board.centery - 16)))
        screen.blit(sub, sub.get_rect(center=(board.centerx, board.centery + 16)))
