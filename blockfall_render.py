"""
Rendering helpers for the falling-block grid.

- Map every grid tag to a display category (empty / inactive / active).
- Pre-render the static background (grid lines) and one cell Surface per category.
- Cache the title surface; it only changes when the game ends.
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional, Tuple
from blockfall_engine import Snapshot
from blockfall_layout import Dims

CELL_CLASSES: Dict[int, str] = {0: "empty", 1: "inactive", 2: "active"}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "empty": (10,13,34),
    "inactive": (106,119,255),
    "active": (255,158,94),
}

def cell_class(tag: int) -> str:
    return CELL_CLASSES.get(tag, "active")

def title_class(ended: bool) -> str:
    return "end" if ended else "running"

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, width: int, height: int):
        self.dims = dims
        self.font = font
        self.width = width
        self.height = height
        self._make_static()
        self._make_cells()
        self._title: Optional[pygame.Surface] = None
        self._title_state = ""

    # ---------- Static background (grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(COLORS["empty"])
        grid_col = (40,50,90)
        for x in range(self.width+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.height+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    # ---------- One sprite per cell category ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for name in ("inactive", "active"):
            s = pygame.Surface((c-2, c-2))
            s.fill(COLORS[name])
            self.cell_surf[name] = s

    def title_surface(self, ended: bool) -> pygame.Surface:
        state = title_class(ended)
        if state != self._title_state:
            self._title_state = state
            text = "You lose" if ended else ""
            self._title = self.font.render(text, True, (255,220,220))
        return self._title

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        screen.blit(self.bg, (0,0))
        for i, row in enumerate(snap.grid):
            for j, tag in enumerate(row):
                name = cell_class(tag)
                if name == "empty": continue
                screen.blit(self.cell_surf[name], (d.board_x + j*d.cell + 1, d.board_y + i*d.cell + 1))
        screen.blit(self.title_surface(snap.ended), (d.board_x, d.margin))
