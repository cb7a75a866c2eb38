"""
Simulation engine for the falling-block game.

The engine owns the grid, the falling piece and the end flag. The host calls
advance() once per timer tick and shift() on directional input, then reads a
snapshot() to render. Both calls run to completion synchronously; nothing in
here blocks or locks.

Grid tags: 0 empty, 1 settled, 2 active (the falling piece).
"""
import logging
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from blockfall_board import Grid, make_grid, clear_active, collide, freeze, draw, add_in_range
from blockfall_config import CONFIG
from blockfall_piece import Piece, Shape, SHAPES, MASK, first_shape

log = logging.getLogger(__name__)

LEFT, RIGHT, DOWN = "left", "right", "down"
DIRECTIONS = (LEFT, RIGHT, DOWN)

SpawnPolicy = Callable[[Sequence[Shape]], int]

@dataclass
class GameState:
    grid: Grid
    piece: Piece
    ended: bool = False

@dataclass(frozen=True)
class Snapshot:
    grid: Tuple[Tuple[int, ...], ...]
    ended: bool

class Engine:
    def __init__(self, width: int = 20, height: int = 40,
                 shapes: Sequence[Shape] = SHAPES,
                 spawn_policy: SpawnPolicy = first_shape):
        if width < 2 or height < MASK:
            raise ValueError(f"grid must be at least {MASK} rows by 2 columns, got {height}x{width}")
        if not shapes:
            raise ValueError("at least one shape is required")
        for s in shapes:
            if len(s) != MASK or any(len(r) != MASK for r in s):
                raise ValueError(f"shapes must be {MASK}x{MASK} masks")
        self.width = width
        self.height = height
        self.shapes = list(shapes)
        self.spawn_policy = spawn_policy
        self.state = GameState(make_grid(height, width), self.spawn())

    # ---------- convenience accessors ----------
    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def piece(self) -> Piece:
        return self.state.piece

    @property
    def ended(self) -> bool:
        return self.state.ended

    def spawn(self) -> Piece:
        return Piece.spawn(self.shapes[self.spawn_policy(self.shapes)])

    # ---------- tick ----------
    def advance(self) -> bool:
        """Run one timer tick. Returns False once the game is over."""
        st = self.state
        if st.ended:
            return False
        clear_active(st.grid)
        if collide(st.grid, st.piece):
            freeze(st.grid, st.piece)
            log.debug("froze piece at x=%d y=%d", st.piece.x, st.piece.y)
            st.piece = self.spawn()
            if collide(st.grid, st.piece):
                st.ended = True
                log.info("game over: spawned piece collides immediately")
                return True
        st.piece.x += 1
        draw(st.grid, st.piece)
        return True

    # ---------- input ----------
    def shift(self, direction: str):
        """Move the falling piece; clamped, no collision check until the next tick."""
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction {direction!r}")
        st = self.state
        if st.ended:
            return
        p = st.piece
        if direction == LEFT:
            p.y = add_in_range(p.y, -1, 0, self.width - CONFIG["SHIFT_MARGIN"])
            log.info("Left: %d", p.y)
        elif direction == RIGHT:
            p.y = add_in_range(p.y, 1, 0, self.width - CONFIG["SHIFT_MARGIN"])
            log.info("Right: %d", p.y)
        else:
            p.x = add_in_range(p.x, 1, 0, self.height)
            log.info("Down: %d", p.x)

    def snapshot(self) -> Snapshot:
        return Snapshot(tuple(tuple(r) for r in self.state.grid), self.state.ended)
