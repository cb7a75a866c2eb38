"""Piece model, shape table, spawn policy"""
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from blockfall_config import CONFIG

MASK = 4
EMPTY, INACTIVE, ACTIVE = 0, 1, 2

Shape = List[List[int]]

SHAPES: Tuple[Shape, ...] = (
    [[0,0,0,0],
     [0,0,0,0],
     [2,2,0,0],
     [2,2,0,0]],
)

def first_shape(shapes: Sequence[Shape]) -> int:
    return 0

@dataclass
class Piece:
    shape: Shape
    x: int  # row offset, anchors the bottom of the mask
    y: int  # column offset

    @staticmethod
    def spawn(shape: Shape) -> "Piece":
        return Piece([r[:] for r in shape], CONFIG["SPAWN_ROW"], 0)

def piece_cells(piece: Piece, height: int, width: int) -> Iterator[Tuple[int,int,int]]:
    """Yield (row, col, value) for occupied mask cells that project onto the grid.

    Rows still above the grid, rows past the bottom and columns past the
    right edge are dropped silently.
    """
    for i, row in enumerate(piece.shape):
        if i + piece.x < MASK: continue
        r = i + piece.x - MASK
        if r >= height: continue
        for j, v in enumerate(row):
            if not v: continue
            c = j + piece.y
            if c >= width: continue
            yield r, c, v
