"""
serializer.py — GridState → display grid.

Several things can share a cell (a zombie standing on the exit, the
player caught by a zombie).  Each cell is labelled with exactly one
CellKind, the first one in PRECEDENCE that is present:

    PLAYER  >  ZOMBIE  >  WALL  >  EXIT  >  EMPTY
"""

from __future__ import annotations

from enum import Enum

from zombie_escape.constants import (
    EMPTY_CHAR, EXIT_CHAR, PLAYER_CHAR, WALL_CHAR, ZOMBIE_CHAR,
)
from zombie_escape.state import GridState


class CellKind(Enum):
    PLAYER = PLAYER_CHAR
    ZOMBIE = ZOMBIE_CHAR
    WALL   = WALL_CHAR
    EXIT   = EXIT_CHAR
    EMPTY  = EMPTY_CHAR


PRECEDENCE = (
    CellKind.PLAYER,
    CellKind.ZOMBIE,
    CellKind.WALL,
    CellKind.EXIT,
    CellKind.EMPTY,
)


def _present(state: GridState, kind: CellKind, x: int, y: int) -> bool:
    if kind is CellKind.PLAYER:
        return state.player == (x, y)
    if kind is CellKind.ZOMBIE:
        return state.zombie_at(x, y) is not None
    if kind is CellKind.WALL:
        return state.is_wall(x, y)
    if kind is CellKind.EXIT:
        return state.exit == (x, y)
    return True


def cell_kind(state: GridState, x: int, y: int) -> CellKind:
    """The single label shown for (x, y)."""
    return next(k for k in PRECEDENCE if _present(state, k, x, y))


def serialize(state: GridState) -> list:
    """
    Render *state* as one glyph string per row, in the layout alphabet.

    A freshly loaded layout with one 'P' and one 'E' serializes back to
    the same rows.
    """
    return [
        "".join(cell_kind(state, x, y).value for x in range(state.width))
        for y in range(state.height)
    ]
