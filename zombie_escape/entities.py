"""
entities.py — Game entity classes for Zombie Escape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Status(Enum):
    """Outcome of a level attempt.  ESCAPED and CAUGHT are terminal."""

    IN_PROGRESS = "in_progress"
    ESCAPED     = "escaped"
    CAUGHT      = "caught"

    @property
    def is_terminal(self) -> bool:
        return self is not Status.IN_PROGRESS


class Zombie:
    """
    A single pursuer on the grid.

    Attributes
    ----------
    zombie_id : int  – assigned in level-scan order starting at 0.
                       Never reassigned; decides movement order.
    x, y      : int  – current cell.
    """

    def __init__(self, zombie_id: int, x: int, y: int):
        self.zombie_id = zombie_id
        self.x = x
        self.y = y

    @property
    def position(self):
        """The (x, y) cell the zombie stands on."""
        return (self.x, self.y)

    def __repr__(self):
        return f"Zombie(id={self.zombie_id}, x={self.x}, y={self.y})"


@dataclass(frozen=True)
class MoveResult:
    """
    Result of one directional intent.

    trapped_count is None when the turn was decided before the zombie
    phase ran (rejected move, terminal state, capture or escape on the
    player's own step).
    """

    moved: bool
    status: Status
    trapped_count: Optional[int] = None
