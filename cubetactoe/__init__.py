"""Three-dimensional tic-tac-toe on a 3x3x3 cube, with a console game."""

__version__ = "0.1.0"
__all__ = ["board", "cube", "game", "player"]