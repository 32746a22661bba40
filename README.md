# cubetactoe

Tic-tac-toe for two players on a 3×3×3 cube. The cube is three stacked 3×3
boards. The players take turns placing their marks, and the first to complete
a line of three wins.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library. It needs
Python 3.10 or later.

## Playing

```
cubetactoe
```

`python -m cubetactoe.game` does the same. Player P1 plays `X` and moves
first. Player P2 plays `O`. Before each turn all three boards are printed,
each under a heading `Board 1:`, `Board 2:`, `Board 3:`, with empty cells
shown as `-`. The game then asks for three numbers from 1 to 3:

```
Enter Board [1-3], Row [1-3], Column [1-3]: 2 2 2
```

The numbers may be split over several lines. If the cell is outside the cube
or already taken, the game prints `Invalid move, try again.` and the same
player moves again. The game ends when a player completes a line
(`Player P1 is the winner!!`) or when every cell is filled (`It's a draw!`).
It also stops, with no result, when input ends or when something other than a
whole number is typed.

### Winning lines

- any row, column or diagonal inside one board;
- the same cell on all three boards, straight down through the cube.

Lines that slant from one board to the next, such as the cube's corner-to-
corner diagonals, do not count.

## Using it from Python

```python
from cubetactoe.cube import CubeBoard
from cubetactoe.player import Player
from cubetactoe.game import Game

cube = CubeBoard()
cube.place_mark(0, 1, 1, "X")   # board, row, column, all counted from 0
print(cube.render())
print(cube.has_win())           # False
print(cube[0].cell(1, 1))       # "X"

game = Game(Player("Ann", "X"), Player("Bob", "O"))
winner = game.play([(1, 1, 1), (1, 2, 1), (2, 1, 1), (2, 2, 2), (3, 1, 1)])
print(winner.name)              # "Ann"
```

- `Board` is one 3×3 grid: `place_mark(row, col, symbol)` returns `False` for
  a cell off the grid or already taken; `has_win()`, `is_full()`,
  `cell(row, col)` (raises `IndexError` off the grid), `render()` and
  `display(out)`.
- `CubeBoard` holds three boards. `cube[i]` returns a layer and `cube[i] = board`
  stores a copy of one; an index outside 0–2 raises `IndexError`.
  `place_mark(board, row, col, symbol)`, `has_win()`, `is_full()`, `render()`
  and `display(out)` work on the whole cube.
- `Player` is a dataclass with `name` (default `""`) and `symbol`
  (default `"X"`).
- `Game(player1, player2)` keeps `player1`, `player2`, `cube` and
  `current_player`. `next_turn()` hands the turn over and `has_winner()` checks
  the cube. `play(moves, out)` takes an iterable of `(board, row, column)`
  moves numbered from 1, as at the prompt, writes the game to `out` (standard
  output by default) and returns the winning `Player`, or `None` on a draw or
  when the moves run out.

## What it does not do

There is no computer opponent, no saving or loading of games, and no play over
a network. Both players share one console.

## Running the tests

```
pip install ".[test]"
pytest
```