"""Piece model, catalog, rotation and trimming"""
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import List, Mapping, Tuple

WALL_TINT = "wall"
OPAQUE = 255

# new_mask[ROTATE_INDICES[n][i]] = mask[i], 90 degrees clockwise
ROTATE_INDICES: Mapping[int, Tuple[int, ...]] = MappingProxyType({
    9: (2, 5, 8,
        1, 4, 7,
        0, 3, 6),
    16: (3, 7, 11, 15,
         2, 6, 10, 14,
         1, 5, 9, 13,
         0, 4, 8, 12),
})


@dataclass(frozen=True)
class Piece:
    mask: Tuple[int, ...]
    width: int
    height: int
    tint: str
    x: int = 0
    y: int = 0
    orientation: int = 0  # 0=spawn, counts clockwise turns mod 4
    opacity: int = OPAQUE

    def __post_init__(self):
        if len(self.mask) != self.width * self.height:
            raise ValueError(
                f"mask of length {len(self.mask)} does not fit {self.width}x{self.height}")
        object.__setattr__(self, "mask", tuple(1 if v else 0 for v in self.mask))

    def clone(self) -> "Piece":
        return replace(self, mask=tuple(self.mask))

    def at(self, x: int, y: int) -> "Piece":
        return replace(self, x=x, y=y)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def with_opacity(self, opacity: int) -> "Piece":
        return replace(self, opacity=max(0, min(OPAQUE, opacity)))

    def rotate(self) -> "Piece":
        """Return the piece turned 90 degrees clockwise.

        The 2x2 piece and any mask size without a permutation table are
        returned unchanged.
        """
        if self.width < 3:
            return self
        table = ROTATE_INDICES.get(len(self.mask))
        if table is None:
            return self
        new_mask = [0] * len(self.mask)
        for i, v in enumerate(self.mask):
            new_mask[table[i]] = v
        return replace(self, mask=tuple(new_mask), orientation=(self.orientation + 1) % 4)

    def reset_rotation(self) -> "Piece":
        p = self
        while p.orientation != 0:
            turned = p.rotate()
            if turned is p:
                return replace(p, orientation=0)
            p = turned
        return p

    def trim_space(self) -> "Piece":
        """Return the piece cut down to the bounding box of its occupied cells.

        Only meant for display; the position and tint are kept, the
        orientation is reset because the mask no longer matches a rotation
        table.
        """
        occupied = [i for i, v in enumerate(self.mask) if v]
        if not occupied:
            raise ValueError("cannot trim a piece without occupied cells")
        xs = [i % self.width for i in occupied]
        ys = [i // self.width for i in occupied]
        min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
        w = max_x - min_x + 1
        h = max_y - min_y + 1
        new_mask = tuple(
            self.mask[(y + min_y) * self.width + x + min_x]
            for y in range(h) for x in range(w)
        )
        return replace(self, mask=new_mask, width=w, height=h, orientation=0)

    def offsets(self) -> List[Tuple[int, int]]:
        """Mask-relative (col, row) of every occupied cell."""
        return [(i % self.width, i // self.width) for i, v in enumerate(self.mask) if v]

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute board (x, y) of every occupied cell."""
        return [(self.x + c, self.y + r) for c, r in self.offsets()]


def _template(rows, tint):
    return Piece(tuple(v for row in rows for v in row), len(rows[0]), len(rows), tint)


CATALOG: Mapping[str, Piece] = MappingProxyType({
    "I": _template([[0, 0, 0, 0],
                    [0, 0, 0, 0],
                    [1, 1, 1, 1],
                    [0, 0, 0, 0]], "cyan"),
    "J": _template([[1, 0, 0],
                    [1, 1, 1],
                    [0, 0, 0]], "blue"),
    "L": _template([[0, 0, 1],
                    [1, 1, 1],
                    [0, 0, 0]], "orange"),
    "O": _template([[1, 1],
                    [1, 1]], "yellow"),
    "S": _template([[0, 1, 1],
                    [1, 1, 0],
                    [0, 0, 0]], "green"),
    "T": _template([[0, 1, 0],
                    [1, 1, 1],
                    [0, 0, 0]], "purple"),
    "Z": _template([[1, 1, 0],
                    [0, 1, 1],
                    [0, 0, 0]], "red"),
})

PLAYABLE: Tuple[str, ...] = tuple(CATALOG)

# Styling filler for border cells, never spawned
WALL = _template([[1]], WALL_TINT)


def spawn(name: str, catalog: Mapping[str, Piece] = CATALOG) -> Piece:
    """Fresh spawn-orientation copy of a template, unplaced and fully opaque."""
    return catalog[name].clone().at(0, 0).with_opacity(OPAQUE).reset_rotation()
