"""
state.py — The authoritative grid model for one level attempt.

A GridState is built by level_manager.load_level() and mutated only by
the turn resolver in engine.py.  Everything else reads it, either
through the accessors below or through a snapshot() copy.
"""

from __future__ import annotations

import copy

from zombie_escape.entities import Status, Zombie


class GridState:
    """
    Mutable state of a single level attempt.

    Attributes
    ----------
    width, height : int            – grid dimensions (both > 0).
    player        : (x, y)         – the controllable agent.
    exit          : (x, y)         – the goal cell.
    walls         : frozenset      – wall cells, fixed at load.
    zombies       : list[Zombie]   – ordered by zombie_id.
    turn          : int            – accepted player moves so far.
    status        : Status
    """

    def __init__(self, width: int, height: int, player: tuple, exit_pos: tuple,
                 walls, zombies: list):
        self.width   = width
        self.height  = height
        self.player  = player
        self.exit    = exit_pos
        self.walls   = frozenset(walls)
        self.zombies = sorted(zombies, key=lambda z: z.zombie_id)
        self.turn    = 0
        self.status  = Status.IN_PROGRESS

    # ── Read-only queries ──

    @property
    def dimensions(self):
        """(width, height)"""
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, x: int, y: int) -> bool:
        return (x, y) in self.walls

    def zombie_at(self, x: int, y: int, exclude_id: int = None):
        """Return the zombie on (x, y), ignoring *exclude_id*, or None."""
        for z in self.zombies:
            if z.x == x and z.y == y and z.zombie_id != exclude_id:
                return z
        return None

    def player_caught(self) -> bool:
        """True when any zombie shares the player's cell."""
        return self.zombie_at(*self.player) is not None

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    # ── Copies ──

    def snapshot(self) -> GridState:
        """An independent deep copy for readers outside the engine."""
        return copy.deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, GridState):
            return NotImplemented
        return (
            self.dimensions == other.dimensions
            and self.player == other.player
            and self.exit == other.exit
            and self.walls == other.walls
            and [(z.zombie_id, z.position) for z in self.zombies]
            == [(z.zombie_id, z.position) for z in other.zombies]
            and self.turn == other.turn
            and self.status == other.status
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"GridState({self.width}x{self.height}, turn={self.turn}, "
            f"status={self.status.value}, player={self.player}, "
            f"zombies={len(self.zombies)})"
        )
