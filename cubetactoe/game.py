"""Turn handling and the interactive game loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .cube import CubeBoard
from .player import Player

Move = tuple[int, int, int]


class Game:
    """A game of 3D tic-tac-toe between two players; ``player1`` moves first."""

    def __init__(self, player1: Player, player2: Player) -> None:
        self.player1 = player1
        self.player2 = player2
        self.cube = CubeBoard()
        self.current_player = player1

    def next_turn(self) -> None:
        """Hand the turn to the other player."""
        self.current_player = (
            self.player2 if self.current_player is self.player1 else self.player1
        )

    def has_winner(self) -> bool:
        """Return True if the cube holds a winning line."""
        return self.cube.has_win()

    def play(
        self, moves: Iterable[Move], out: TextIO | None = None
    ) -> Player | None:
        """Play 1-based (board, row, column) moves until the game ends.

        Returns the winning player, or None on a draw or when the moves run out.
        """
        out = out or sys.stdout
        pending = iter(moves)
        while True:
            self.cube.display(out)
            player = self.current_player
            out.write(f"{player.name}'s Turn ({player.symbol})\n")
            out.write("Enter Board [1-3], Row [1-3], Column [1-3]: ")
            out.flush()
            move = next(pending, None)
            if move is None:
                return None
            board, row, col = move

            if self.cube.place_mark(board - 1, row - 1, col - 1, player.symbol):
                if self.cube.has_win():
                    self.cube.display(out)
                    out.write(f"Player {player.name} is the winner!!\n")
                    out.write("-- GAME OVER --\n")
                    return player
                self.next_turn()
            else:
                out.write("Invalid move, try again.\n")

            if self.cube.is_full():
                self.cube.display(out)
                out.write("It's a draw!\n")
                out.write("-- GAME OVER --\n")
                return None


def _read_moves(stream: TextIO) -> Iterator[Move]:
    """Yield moves from whitespace-separated integers, stopping at bad input."""

    def tokens() -> Iterator[int]:
        for line in stream:
            for word in line.split():
                try:
                    yield int(word)
                except ValueError:
                    return

    numbers = tokens()
    while True:
        triple = [next(numbers, None) for _ in range(3)]
        if None in triple:
            return
        yield (triple[0], triple[1], triple[2])


def main(argv: list[str] | None = None) -> int:
    """Play a game on the terminal between players P1 (X) and P2 (O)."""
    parser = argparse.ArgumentParser(
        prog="cubetactoe", description="Two-player 3D tic-tac-toe."
    )
    parser.parse_args(argv)
    game = Game(Player("P1", "X"), Player("P2", "O"))
    game.play(_read_moves(sys.stdin), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())