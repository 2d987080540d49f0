import argparse
import logging

import pygame

from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import KeyState
from tetris_keyboard import poll_keyboard
from tetris_layout import game_dims
from tetris_overlay import DebugOverlay
from tetris_render import RenderAssets

logger = logging.getLogger("tetris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Walled Tetris")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="piece randomizer seed")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"],
                   help=f"cell size in pixels (default: {CONFIG['CELL_SIZE']})")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help=f"logging level (default: {CONFIG['LOG_LEVEL']})")
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.SCALED | pygame.RESIZABLE):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(game: Game):
    dims = game_dims(game)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    assets = RenderAssets(dims)
    overlay = DebugOverlay()
    keys = KeyState()
    clock = pygame.time.Clock()

    while True:
        clock.tick(game.config["TPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return
        game.update(poll_keyboard(keys))
        assets.draw_game(screen, game)
        overlay.draw(screen, assets, game, clock.get_fps())
        pygame.display.flip()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    try:
        game = Game({"SEED": args.seed, "CELL_SIZE": args.cell_size})
        logger.info("starting %dx%d board, seed=%s", game.board.width, game.board.height, args.seed)
        run(game)
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
