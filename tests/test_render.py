import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from tetris_board import Board
from tetris_game import Game
from tetris_layout import compute_dims, game_dims
from tetris_overlay import DebugOverlay
from tetris_piece import spawn
from tetris_render import COLORS, RenderAssets, hud_rows


def setUpModule():
    pygame.init()


def tearDownModule():
    pygame.quit()


class ScriptedGenerator:
    def __init__(self, names):
        self.names = list(names)
        self.i = 0

    def next_piece(self):
        name = self.names[self.i % len(self.names)]
        self.i += 1
        return spawn(name)


class RecordingAssets(RenderAssets):
    """Keeps every piece and string handed to the drawing primitives."""

    def __init__(self, dims):
        super().__init__(dims)
        self.pieces = []
        self.texts = []

    def draw_piece(self, screen, piece, xoff, yoff, ghost=False):
        self.pieces.append((piece, ghost))
        super().draw_piece(screen, piece, xoff, yoff, ghost)

    def draw_text(self, screen, text, size, px, py, color=(230, 235, 250)):
        self.texts.append(text)
        super().draw_text(screen, text, size, px, py, color)


def make_game(**config):
    return Game(config, generator=ScriptedGenerator("TIOSZJL"))


def close_to(actual, expected, tolerance=3):
    return all(abs(a - e) <= tolerance for a, e in zip(actual, expected))


class LayoutTests(unittest.TestCase):
    def test_board_sets_height(self):
        d = compute_dims(Board(), 3, 32)
        self.assertEqual((d.board_w, d.board_h), (12 * 32, 21 * 32))
        self.assertEqual(d.total_w, 6 * 32 + 12 * 32 + 6 * 32)
        self.assertEqual(d.total_h, 21 * 32)
        self.assertEqual((d.board_x, d.queue_x), (6 * 32, 18 * 32))

    def test_long_queue_sets_height(self):
        d = compute_dims(Board(), 10, 10)
        self.assertEqual(d.total_h, 10 + 3 * 10 * 10)

    def test_cell_size_comes_from_game_config(self):
        d = game_dims(make_game(CELL_SIZE=16))
        self.assertEqual(d.cell, 16)
        self.assertEqual(d.board_w, 12 * 16)


class DrawCellTests(unittest.TestCase):
    def setUp(self):
        self.assets = RenderAssets(compute_dims(Board(), 3, 32))
        self.screen = pygame.Surface((64, 32))

    def test_opaque_cell_takes_tint(self):
        self.assets.draw_cell(self.screen, "red", 0, 0)
        self.assertTrue(close_to(self.screen.get_at((16, 16))[:3], COLORS["red"]))

    def test_opacity_blends_with_background(self):
        self.assets.draw_cell(self.screen, "red", 32, 0, opacity=128)
        r, g, b = self.screen.get_at((48, 16))[:3]
        self.assertTrue(100 < r < 160, r)
        self.assertLess(g, COLORS["red"][1])


class DrawGameTests(unittest.TestCase):
    def setUp(self):
        self.game = make_game()
        self.game.hold_piece()
        dims = game_dims(self.game)
        self.assets = RecordingAssets(dims)
        self.screen = pygame.Surface((dims.total_w, dims.total_h))

    def test_frame_draws_ghost_falling_and_previews(self):
        self.assets.draw_game(self.screen, self.game)
        pieces = self.assets.pieces
        self.assertEqual(len(pieces), 2 + len(self.game.queue) + 1)
        ghost, ghost_flag = pieces[0]
        self.assertTrue(ghost_flag)
        self.assertEqual(ghost, self.game.ghost_piece())
        self.assertEqual(pieces[1], (self.game.falling, False))

    def test_previews_are_trimmed(self):
        self.assets.draw_game(self.screen, self.game)
        previews = [p for p, _ in self.assets.pieces[2:]]
        # queue O, S, Z then the held T
        self.assertEqual([(p.width, p.height) for p in previews], [(2, 2), (3, 2), (3, 2), (3, 2)])
        self.assertTrue(all((p.x, p.y) == (0, 0) for p in previews))
        self.assertEqual(previews[-1].tint, self.game.hold.tint)

    def test_hud_shows_level_one_based(self):
        self.game.level = 2
        self.game.score = 1234
        self.assets.draw_game(self.screen, self.game)
        self.assertEqual(hud_rows(self.game), (("Score", "1234"), ("Level", "3"), ("Lines", "0")))
        self.assertIn("3", self.assets.texts)
        self.assertIn("1234", self.assets.texts)

    def test_fresh_game_is_level_one(self):
        self.assertEqual(hud_rows(make_game())[1], ("Level", "1"))


class DebugOverlayTests(unittest.TestCase):
    def setUp(self):
        self.game = make_game()
        dims = game_dims(self.game)
        self.assets = RecordingAssets(dims)
        self.screen = pygame.Surface((dims.total_w, dims.total_h))

    def test_hidden_by_default(self):
        DebugOverlay().draw(self.screen, self.assets, self.game, 60.0)
        self.assertEqual(self.assets.texts, [])

    def test_draws_debug_lines(self):
        self.game.show_debug = True
        DebugOverlay().draw(self.screen, self.assets, self.game, 60.0)
        self.assertEqual(self.assets.texts, self.game.debug_lines(60.0))


if __name__ == "__main__":
    unittest.main()
