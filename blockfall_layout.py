# blockfall_layout.py
from dataclasses import dataclass
from blockfall_config import CONFIG

@dataclass
class Dims:
    cell: int
    margin: int
    title_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

def compute_dims(width: int, height: int) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 12
    title_h = 32

    board_w = width * cell
    board_h = height * cell

    total_w = margin + board_w + margin
    total_h = margin + title_h + board_h + margin

    board_x = margin
    board_y = margin + title_h

    return Dims(
        cell=cell, margin=margin, title_h=title_h,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
    )
