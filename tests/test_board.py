import io

import pytest

from cubetactoe.board import Board


def test_new_board_is_empty():
    board = Board()
    assert all(board.cell(r, c) == "-" for r in range(3) for c in range(3))
    assert not board.is_full()
    assert not board.has_win()


def test_place_mark_sets_cell():
    board = Board()
    assert board.place_mark(1, 2, "X") is True
    assert board.cell(1, 2) == "X"


def test_place_mark_on_occupied_cell_fails():
    board = Board()
    board.place_mark(0, 0, "X")
    assert board.place_mark(0, 0, "O") is False
    assert board.cell(0, 0) == "X"


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_place_mark_out_of_range_fails(row, col):
    board = Board()
    assert board.place_mark(row, col, "X") is False
    assert not any(board.cell(r, c) != "-" for r in range(3) for c in range(3))


@pytest.mark.parametrize(
    "cells",
    [
        [(0, 0), (0, 1), (0, 2)],
        [(2, 0), (2, 1), (2, 2)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ],
)
def test_lines_win(cells):
    board = Board()
    for row, col in cells[:-1]:
        board.place_mark(row, col, "O")
    assert not board.has_win()
    board.place_mark(*cells[-1], "O")
    assert board.has_win()


def test_mixed_line_is_not_a_win():
    board = Board()
    board.place_mark(0, 0, "X")
    board.place_mark(0, 1, "O")
    board.place_mark(0, 2, "X")
    assert not board.has_win()


def test_full_board_without_win():
    board = Board()
    pattern = ["XOX", "XOO", "OXX"]
    for r, line in enumerate(pattern):
        for c, symbol in enumerate(line):
            assert board.place_mark(r, c, symbol)
    assert board.is_full()
    assert not board.has_win()


def test_render_empty_board():
    assert Board().render() == "- - - \n" * 3


def test_display_writes_render():
    board = Board()
    board.place_mark(1, 1, "X")
    out = io.StringIO()
    board.display(out)
    assert out.getvalue() == board.render()
    assert out.getvalue().splitlines()[1].split() == ["-", "X", "-"]


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 1)])
def test_cell_out_of_range_raises(row, col):
    with pytest.raises(IndexError):
        Board().cell(row, col)