"""Uniform piece randomizer"""
import random
from typing import Mapping, Optional

from tetris_piece import CATALOG, PLAYABLE, Piece, spawn


class PieceGenerator:
    """Independent uniform draws over the seven playable shapes.

    There is no bag and no repeat rejection, so droughts and runs of the same
    piece are possible.
    """

    def __init__(self, seed: Optional[int] = None, catalog: Mapping[str, Piece] = CATALOG):
        self.catalog = catalog
        self.names = tuple(n for n in PLAYABLE if n in catalog)
        if not self.names:
            raise ValueError(f"catalog has none of the playable shapes {', '.join(PLAYABLE)}")
        self._rng = random.Random(seed)

    def next_piece(self) -> Piece:
        return spawn(self._rng.choice(self.names), self.catalog)
