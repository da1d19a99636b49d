"""The playing field: falling piece movement, landing and row clearing."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from enum import IntEnum

from .blocks import next_block

ROWS = 20
COLUMNS = 10
CELL_SIZE = 25
SPAWN_COLUMN = 3

Position = tuple[int, int]


class Cell(IntEnum):
    """State of a single grid cell."""

    EMPTY = 0
    FALLING = 1
    PLACED = 2


def new_grid(rows: int = ROWS, columns: int = COLUMNS) -> list[list[Cell]]:
    """Return an empty grid of the given size."""
    if rows <= 0 or columns <= 0:
        raise ValueError("grid dimensions must be positive")
    return [[Cell.EMPTY] * columns for _ in range(rows)]


class Board:
    """A grid holding one falling piece and any number of placed cells."""

    def __init__(
        self,
        grid: Sequence[Sequence[int]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng
        self.points = 0
        if grid is None:
            self.grid = new_grid()
            self.spawn()
            return
        self.grid = [[Cell(value) for value in row] for row in grid]
        if not self.grid or not self.grid[0]:
            raise ValueError("grid must not be empty")
        if any(len(row) != len(self.grid[0]) for row in self.grid):
            raise ValueError("grid rows must all have the same length")

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return len(self.grid[0])

    def _inside(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def _falling_cells(self) -> list[Position]:
        return [
            (r, c)
            for r, row in enumerate(self.grid)
            for c, cell in enumerate(row)
            if cell == Cell.FALLING
        ]

    def _relocate(self, cells: Iterable[Position], targets: Iterable[Position]) -> None:
        for r, c in cells:
            self.grid[r][c] = Cell.EMPTY
        for r, c in targets:
            self.grid[r][c] = Cell.FALLING

    def _try_move(self, targets: list[Position], cells: list[Position]) -> bool:
        if not cells:
            return False
        if any(
            not self._inside(r, c) or self.grid[r][c] == Cell.PLACED for r, c in targets
        ):
            return False
        self._relocate(cells, targets)
        return True

    def _shift(self, d_row: int, d_column: int) -> bool:
        cells = self._falling_cells()
        targets = [(r + d_row, c + d_column) for r, c in cells]
        return self._try_move(targets, cells)

    def spawn(self) -> None:
        """Place a new random piece at the top of the grid."""
        shape = next_block(self.rng)
        cells = [
            (r, SPAWN_COLUMN + c)
            for r, line in enumerate(shape)
            for c, filled in enumerate(line)
            if filled
        ]
        if not all(self._inside(r, c) for r, c in cells):
            raise ValueError("grid is too small to spawn a piece")
        for r, c in cells:
            self.grid[r][c] = Cell.FALLING

    def clear_rows(self) -> int:
        """Remove rows made only of placed cells; return how many were removed."""
        kept = [row for row in self.grid if not all(cell == Cell.PLACED for cell in row)]
        cleared = self.rows - len(kept)
        self.grid = new_grid(cleared, self.columns)[:cleared] + kept if cleared else kept
        self.points += cleared
        return cleared

    def move_left(self) -> bool:
        """Shift the falling piece one column left; return whether it moved."""
        return self._shift(0, -1)

    def move_right(self) -> bool:
        """Shift the falling piece one column right; return whether it moved."""
        return self._shift(0, 1)

    def move_down(self) -> bool:
        """Shift the falling piece one row down; return whether it moved."""
        return self._shift(1, 0)

    def rotate(self) -> bool:
        """Rotate the falling piece a quarter turn about its top-left cell."""
        cells = self._falling_cells()
        if not cells:
            return False
        pivot_row, pivot_column = cells[0]
        targets = [
            (pivot_row + (c - pivot_column), pivot_column - (r - pivot_row))
            for r, c in cells
        ]
        return self._try_move(targets, cells)

    def tick(self) -> bool:
        """Advance the falling piece by one step.

        Returns True when the piece landed; in that case full rows are
        cleared, the score is updated and a new piece is spawned.
        """
        cells = self._falling_cells()
        if not cells:
            return False
        landed = any(
            r == self.rows - 1 or self.grid[r + 1][c] == Cell.PLACED for r, c in cells
        )
        if not landed:
            self._relocate(cells, [(r + 1, c) for r, c in cells])
            return False
        for r, c in cells:
            self.grid[r][c] = Cell.PLACED
        self.clear_rows()
        self.spawn()
        return True

    def screen_coordinates(self) -> list[list[tuple[int, int]]]:
        """Return the pixel position of every cell, indexed like the grid."""
        return [
            [(c * CELL_SIZE, r * CELL_SIZE) for c in range(self.columns)]
            for r in range(self.rows)
        ]