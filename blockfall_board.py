"""Grid helpers: clear, collide, freeze, draw"""
from typing import List
from blockfall_piece import Piece, EMPTY, INACTIVE, ACTIVE, piece_cells

Grid = List[List[int]]

def make_grid(height: int, width: int) -> Grid:
    return [[EMPTY] * width for _ in range(height)]

def clear_active(grid: Grid):
    for row in grid:
        for c, v in enumerate(row):
            if v == ACTIVE: row[c] = EMPTY

def collide(grid: Grid, piece: Piece) -> bool:
    """Return True if the piece cannot fall one more row.

    Looks one row ahead: a cell whose next row reaches the floor trigger
    (the last row) or sits on a settled block stops the piece.
    """
    height, width = len(grid), len(grid[0])
    for r, c, _ in piece_cells(piece, height, width):
        if r + 1 >= height - 1: return True
        if grid[r+1][c] == INACTIVE: return True
    return False

def freeze(grid: Grid, piece: Piece):
    """Write the piece into the grid as settled blocks (active 2 -> 1)."""
    for r, c, v in piece_cells(piece, len(grid), len(grid[0])):
        grid[r][c] = v // 2

def draw(grid: Grid, piece: Piece):
    for r, c, v in piece_cells(piece, len(grid), len(grid[0])):
        grid[r][c] = v

def add_in_range(init: int, delta: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, init + delta))
