"""
Rendering helpers for the Tetris project.

- Pre-render one white cell sprite and one ghost outline per size, tint them per color.
- Cache tinted cell surfaces per (tint, opacity); the falling piece flickers
  through a small set of opacities so the cache stays small.
- Cache text surfaces per (text, size, color).
"""
from __future__ import annotations
import pygame
from typing import Dict, Tuple
from tetris_layout import Dims, QUEUE_SLOT_CELLS, SIDE_PANEL_CELLS
from tetris_piece import WALL_TINT, OPAQUE, Piece

Color = Tuple[int, int, int]

COLORS: Dict[str, Color] = {
    "cyan": (102, 224, 255),
    "blue": (106, 119, 255),
    "orange": (255, 158, 94),
    "yellow": (255, 224, 102),
    "green": (94, 224, 142),
    "purple": (200, 119, 255),
    "red": (255, 102, 119),
    WALL_TINT: (70, 78, 110),
}
BACKGROUND = (10, 13, 34)
TEXT = (230, 235, 250)


def hud_rows(game):
    """Label and value pairs for the HUD; levels are shown 1-based."""
    return (("Score", str(game.score)), ("Level", str(game.level + 1)),
            ("Lines", str(game.lines_cleared)))


class RenderAssets:
    """Holds the pre-rendered sprites and fonts for fast blitting."""
    def __init__(self, dims: Dims):
        self.dims = dims
        self._make_sprites()
        self._tinted: Dict[Tuple[str, int, bool], pygame.Surface] = {}
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._text: Dict[Tuple[str, int, Color], pygame.Surface] = {}

    # ---------- Cell sprites (solid + ghost outline) ----------
    def _make_sprites(self):
        c = self.dims.cell
        self.cell_sprite = pygame.Surface((c, c), pygame.SRCALPHA)
        self.cell_sprite.fill((255, 255, 255, 255), pygame.Rect(1, 1, c - 2, c - 2))
        pygame.draw.rect(self.cell_sprite, (180, 180, 180, 255), (1, 1, c - 2, c - 2), 2)
        self.ghost_sprite = pygame.Surface((c, c), pygame.SRCALPHA)
        pygame.draw.rect(self.ghost_sprite, (255, 255, 255, 255), (4, 4, c - 8, c - 8), 2)

    def _tint(self, tint: str, opacity: int, ghost: bool) -> pygame.Surface:
        key = (tint, opacity, ghost)
        s = self._tinted.get(key)
        if s is None:
            r, g, b = COLORS.get(tint, TEXT)
            s = (self.ghost_sprite if ghost else self.cell_sprite).copy()
            s.fill((r, g, b, opacity), special_flags=pygame.BLEND_RGBA_MULT)
            self._tinted[key] = s
        return s

    # ---------- Render sink primitives ----------
    def draw_cell(self, screen: pygame.Surface, tint: str, px: int, py: int,
                  opacity: int = OPAQUE, ghost: bool = False):
        screen.blit(self._tint(tint, opacity, ghost), (px, py))

    def draw_text(self, screen: pygame.Surface, text: str, size: int, px: int, py: int,
                  color: Color = TEXT):
        key = (text, size, color)
        s = self._text.get(key)
        if s is None:
            font = self._fonts.get(size)
            if font is None:
                font = self._fonts[size] = pygame.font.SysFont(None, size)
            s = self._text[key] = font.render(text, True, color)
        screen.blit(s, (px, py))

    def draw_piece(self, screen: pygame.Surface, piece: Piece, xoff: int, yoff: int,
                   ghost: bool = False):
        c = self.dims.cell
        for x, y in piece.cells():
            self.draw_cell(screen, piece.tint, xoff + x * c, yoff + y * c, piece.opacity, ghost)

    # ---------- Whole frame ----------
    def draw_game(self, screen: pygame.Surface, game) -> None:
        d = self.dims
        c = d.cell
        screen.fill(BACKGROUND)
        for y, row in enumerate(game.board.rows()):
            for x, cell in enumerate(row):
                if cell is not None:
                    self.draw_cell(screen, cell.tint, d.board_x + x * c, d.board_y + y * c)
        self.draw_piece(screen, game.ghost_piece(), d.board_x, d.board_y, ghost=True)
        self.draw_piece(screen, game.falling, d.board_x, d.board_y)
        self.draw_queue(screen, game)
        self.draw_hold(screen, game)
        self.draw_score(screen, game)

    def draw_queue(self, screen: pygame.Surface, game):
        d = self.dims
        c = d.cell
        center_x = d.queue_x + SIDE_PANEL_CELLS * c // 2
        for i, p in enumerate(game.queue):
            p = p.trim_space().at(0, 0)
            xoff = center_x - p.width * c // 2
            yoff = 2 * c + i * QUEUE_SLOT_CELLS * c - p.height * c // 2
            self.draw_piece(screen, p, xoff, yoff)

    def draw_hold(self, screen: pygame.Surface, game):
        if game.hold is None:
            return
        d = self.dims
        c = d.cell
        p = game.hold.trim_space().at(0, 0)
        xoff = d.hold_x + SIDE_PANEL_CELLS * c // 2 - p.width * c // 2
        yoff = 2 * c - p.height * c // 2
        self.draw_piece(screen, p, xoff, yoff)

    def draw_score(self, screen: pygame.Surface, game):
        d = self.dims
        size = max(16, d.cell * 3 // 4)
        x_label, x_value = d.hold_x + d.cell // 2, d.hold_x + d.cell * 3
        rows = hud_rows(game)
        y = d.total_h - len(rows) * size * 3 // 2
        for label, value in rows:
            self.draw_text(screen, label, size, x_label, y)
            self.draw_text(screen, value, size, x_value, y)
            y += size * 3 // 2
