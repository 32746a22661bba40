"""Players of the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """A named player who marks cells with ``symbol``."""

    name: str = ""
    symbol: str = "X"