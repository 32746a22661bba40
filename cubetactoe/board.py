"""A single 3x3 tic-tac-toe grid."""

from __future__ import annotations

import sys
from typing import TextIO

EMPTY = "-"
SIZE = 3


class Board:
    """A 3x3 grid of cells, each holding a player's symbol or ``EMPTY``."""

    def __init__(self) -> None:
        self._grid = [[EMPTY] * SIZE for _ in range(SIZE)]

    def __repr__(self) -> str:
        rows = "/".join("".join(row) for row in self._grid)
        return f"Board({rows!r})"

    def render(self) -> str:
        """Return the grid as text, one row per line."""
        return "".join(
            "".join(f"{cell} " for cell in row) + "\n" for row in self._grid
        )

    def display(self, out: TextIO | None = None) -> None:
        """Write the rendered grid to ``out`` (standard output by default)."""
        (out or sys.stdout).write(self.render())

    def place_mark(self, row: int, col: int, symbol: str) -> bool:
        """Put ``symbol`` at (row, col); return False if off the grid or taken."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            return False
        if self._grid[row][col] != EMPTY:
            return False
        self._grid[row][col] = symbol
        return True

    def _lines(self):
        grid = self._grid
        for i in range(SIZE):
            yield grid[i]
            yield [grid[r][i] for r in range(SIZE)]
        yield [grid[i][i] for i in range(SIZE)]
        yield [grid[i][SIZE - 1 - i] for i in range(SIZE)]

    def has_win(self) -> bool:
        """Return True if any row, column or diagonal holds one symbol."""
        return any(
            line[0] != EMPTY and all(cell == line[0] for cell in line)
            for line in self._lines()
        )

    def is_full(self) -> bool:
        """Return True if no cell is empty."""
        return all(cell != EMPTY for row in self._grid for cell in row)

    def cell(self, row: int, col: int) -> str:
        """Return the symbol at (row, col)."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._grid[row][col]