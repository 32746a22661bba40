"""Three stacked boards forming the playing cube."""

from __future__ import annotations

import copy
import sys
from typing import TextIO

from .board import EMPTY, SIZE, Board

_INDEX_ERROR = "Board index must be between 1 and 3."


class CubeBoard:
    """Three ``Board`` layers that together make a 3D board."""

    def __init__(self) -> None:
        self._boards = [Board() for _ in range(SIZE)]

    def render(self) -> str:
        """Return every layer as text, each headed by its 1-based number."""
        return "".join(
            f"Board {number}:\n{board.render()}"
            for number, board in enumerate(self._boards, start=1)
        )

    def display(self, out: TextIO | None = None) -> None:
        """Write the rendered cube to ``out`` (standard output by default)."""
        (out or sys.stdout).write(self.render())

    def place_mark(self, board: int, row: int, col: int, symbol: str) -> bool:
        """Put ``symbol`` on a layer; return False if the move is not possible."""
        if not 0 <= board < SIZE:
            return False
        return self._boards[board].place_mark(row, col, symbol)

    def _column_wins(self, cells) -> bool:
        for row, col in cells:
            symbol = self._boards[0].cell(row, col)
            if symbol != EMPTY and all(
                layer.cell(row, col) == symbol for layer in self._boards[1:]
            ):
                return True
        return False

    def has_win(self) -> bool:
        """Return True if a layer has a line or a cell position matches through all layers."""
        if any(board.has_win() for board in self._boards):
            return True
        positions = [(row, col) for row in range(SIZE) for col in range(SIZE)]
        diagonals = [(i, i) for i in range(SIZE)] + [
            (i, SIZE - 1 - i) for i in range(SIZE)
        ]
        return self._column_wins(positions) or self._column_wins(diagonals)

    def is_full(self) -> bool:
        """Return True if every layer is full."""
        return all(board.is_full() for board in self._boards)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < SIZE:
            raise IndexError(_INDEX_ERROR)

    def __getitem__(self, index: int) -> Board:
        self._check_index(index)
        return self._boards[index]

    def __setitem__(self, index: int, board: Board) -> None:
        self._check_index(index)
        self._boards[index] = copy.deepcopy(board)

    def __len__(self) -> int:
        return len(self._boards)