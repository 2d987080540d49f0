# tetris_layout.py
from dataclasses import dataclass

SIDE_PANEL_CELLS = 6   # hold panel on the left, queue panel on the right
QUEUE_SLOT_CELLS = 3


@dataclass
class Dims:
    cell: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    hold_x: int
    queue_x: int


def compute_dims(board, queue_size: int, cell: int) -> Dims:
    panel_w = SIDE_PANEL_CELLS * cell

    board_w = board.width_with_walls * cell
    board_h = board.height_with_floor * cell

    total_w = panel_w + board_w + panel_w
    total_h = max(board_h, cell + QUEUE_SLOT_CELLS * queue_size * cell)

    board_x = panel_w
    board_y = 0
    hold_x = 0
    queue_x = board_x + board_w

    return Dims(
        cell=cell, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        hold_x=hold_x, queue_x=queue_x,
    )


def game_dims(game) -> Dims:
    c = game.config
    return compute_dims(game.board, c["QUEUE_SIZE"], int(c["CELL_SIZE"]))
