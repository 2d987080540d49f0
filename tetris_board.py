"""Board grid with walls: collision, ghost, commit, line clears"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from tetris_piece import WALL, Piece

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    tint: str


class Board:
    """Flat grid of optional cells surrounded by permanent walls and a floor.

    Cells are indexed ``y * width_with_walls + x``. The border cells are
    always occupied, which is what keeps every collision lookup in range:
    a piece trying to leave the playfield hits a wall cell first.
    """

    def __init__(self, width: int = 10, height: int = 20,
                 wall_thickness: int = 1, floor_thickness: int = 1):
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        if wall_thickness < 1:
            raise ValueError(f"wall thickness must be at least 1, got {wall_thickness}")
        if floor_thickness < 1:
            raise ValueError(f"floor thickness must be at least 1, got {floor_thickness}")
        self.width = width
        self.height = height
        self.wall_thickness = wall_thickness
        self.floor_thickness = floor_thickness
        self.width_with_walls = width + wall_thickness * 2
        self.height_with_floor = height + floor_thickness
        self.cells: List[Optional[Cell]] = [None] * (self.width_with_walls * self.height_with_floor)
        self._place_border_cells()

    def _place_border_cells(self):
        wall = Cell(WALL.tint)
        for y in range(self.height_with_floor):
            for x in range(self.width_with_walls):
                if not self.is_playable(x, y):
                    self.cells[self.index(x, y)] = wall

    def is_playable(self, x: int, y: int) -> bool:
        return (self.wall_thickness <= x < self.width_with_walls - self.wall_thickness
                and y < self.height)

    def index(self, x: int, y: int) -> int:
        return y * self.width_with_walls + x

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        return self.cells[self.index(x, y)]

    def is_occupied(self, x: int, y: int) -> bool:
        return self.cells[self.index(x, y)] is not None

    def rows(self) -> List[List[Optional[Cell]]]:
        w = self.width_with_walls
        return [self.cells[y * w:(y + 1) * w] for y in range(self.height_with_floor)]

    def spawn_x(self, piece: Piece) -> int:
        return self.width_with_walls // 2 - piece.width // 2

    # ---------- collision ----------
    def fits(self, piece: Piece) -> bool:
        return all(not self.is_occupied(x, y) for x, y in piece.cells())

    def can_move(self, piece: Piece, dx: int, dy: int) -> bool:
        return all(not self.is_occupied(x + dx, y + dy) for x, y in piece.cells())

    def can_rotate(self, piece: Piece) -> bool:
        if len(piece.mask) == 4:
            return False
        return self.fits(piece.rotate())

    def ghost(self, piece: Piece) -> Piece:
        p = piece
        while self.can_move(p, 0, 1):
            p = p.moved(0, 1)
        return p

    def drop_distance(self, piece: Piece) -> int:
        return self.ghost(piece).y - piece.y

    # ---------- lock & clear ----------
    def commit(self, piece: Piece) -> Piece:
        """Drop the piece to its resting row and write its cells into the grid."""
        landed = self.ghost(piece)
        cell = Cell(landed.tint)
        for x, y in landed.cells():
            self.cells[self.index(x, y)] = cell
        logger.debug("committed %s at (%d, %d)", landed.tint, landed.x, landed.y)
        return landed

    def is_row_full(self, y: int) -> bool:
        return all(self.is_occupied(x, y)
                   for x in range(self.wall_thickness, self.width_with_walls - self.wall_thickness))

    def clear_lines(self) -> int:
        cleared = 0
        for y in range(self.height):
            if self.is_row_full(y):
                self.remove_row(y)
                cleared += 1
        if cleared:
            logger.debug("cleared %d line(s)", cleared)
        return cleared

    def remove_row(self, row: int):
        """Shift every row above ``row`` down by one inside the playable columns."""
        cols = range(self.wall_thickness, self.width_with_walls - self.wall_thickness)
        for y in range(row, 0, -1):
            for x in cols:
                self.cells[self.index(x, y)] = self.cells[self.index(x, y - 1)]
        for x in cols:
            self.cells[self.index(x, 0)] = None
