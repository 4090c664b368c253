"""
engine.py — Core game logic for Zombie Escape.

Contains move legality, the zombies' greedy chase rule, and the turn
resolver that sequences one player move followed by the zombie phase.
No I/O or rendering happens here; every function works on the
GridState it is handed, so any number of sessions can run side by side.
"""

from __future__ import annotations

import logging
from typing import Optional

from zombie_escape.config import EngineConfig
from zombie_escape.entities import MoveResult, Status, Zombie
from zombie_escape.state import GridState

log = logging.getLogger(__name__)

_DEFAULT_CONFIG = EngineConfig()


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


# ═══════════════════════════════════════════════════════════════════════════
#  MOVEMENT VALIDATOR
# ═══════════════════════════════════════════════════════════════════════════

def is_valid_player_move(state: GridState, x: int, y: int) -> bool:
    """
    True iff (x, y) is on the grid and not a wall.

    A zombie on the cell does NOT block the player: walking into one is
    a legal move that ends in capture.
    """
    return state.in_bounds(x, y) and not state.is_wall(x, y)


def can_zombie_enter(state: GridState, x: int, y: int, zombie_id: int) -> bool:
    """
    True iff (x, y) is on the grid, not a wall, and not held by another
    zombie.  The player's cell is enterable (that is how capture works).

    Reads live state: a zombie that already moved this sub-step blocks
    the cell it moved into.
    """
    if not state.in_bounds(x, y) or state.is_wall(x, y):
        return False
    return state.zombie_at(x, y, exclude_id=zombie_id) is None


# ═══════════════════════════════════════════════════════════════════════════
#  ZOMBIE DECISION LOGIC
# ═══════════════════════════════════════════════════════════════════════════

def zombie_candidates(zombie: Zombie, player: tuple):
    """
    Pick the primary and secondary step for *zombie* chasing *player*.

        |dx| >  |dy|  →  primary horizontal, secondary vertical (if dy != 0)
        |dx| <= |dy|  →  primary vertical,   secondary horizontal (if dx != 0)

    Exact ties go vertical first.

    Returns
    -------
    (primary: (sx, sy), secondary: (sx, sy) or None)
    """
    dx = player[0] - zombie.x
    dy = player[1] - zombie.y

    if abs(dx) > abs(dy):
        primary   = (_sign(dx), 0)
        secondary = (0, _sign(dy)) if dy != 0 else None
    else:
        primary   = (0, _sign(dy))
        secondary = (_sign(dx), 0) if dx != 0 else None
    return primary, secondary


def _try_zombie_step(state: GridState, zombie: Zombie, step: tuple) -> bool:
    """Move *zombie* by *step* if the target cell allows it."""
    nx, ny = zombie.x + step[0], zombie.y + step[1]
    if not can_zombie_enter(state, nx, ny, zombie.zombie_id):
        return False
    zombie.x, zombie.y = nx, ny
    return True


def step_zombies(state: GridState) -> int:
    """
    Run one zombie sub-step over every zombie in id order.

    Each zombie tries its primary step, then its secondary step.  A
    zombie that manages neither stays put and counts as trapped.

    Returns
    -------
    The number of trapped zombies in this sub-step.
    """
    trapped = 0
    for zombie in state.zombies:
        primary, secondary = zombie_candidates(zombie, state.player)
        if _try_zombie_step(state, zombie, primary):
            continue
        if secondary is not None and _try_zombie_step(state, zombie, secondary):
            continue
        trapped += 1
    return trapped


# ═══════════════════════════════════════════════════════════════════════════
#  TURN RESOLVER
# ═══════════════════════════════════════════════════════════════════════════

def _finish(state: GridState, status: Status) -> None:
    state.status = status
    log.info("Level %s on turn %d", status.value, state.turn)


def move_player(state: GridState, dx: int, dy: int,
                config: Optional[EngineConfig] = None) -> MoveResult:
    """
    Resolve one directional intent (dx, dy) against *state*.

    Exactly one of dx, dy is expected to be non-zero; the caller is
    responsible for never sending diagonals or no-ops.

    Order of resolution
    -------------------
    1) Terminal state         → no-op, frozen status returned.
    2) Target off-grid / wall → no-op, turn unchanged.
    3) Commit player move, turn += 1.
    4) Zombie on the new cell → CAUGHT.
    5) New cell is the exit   → ESCAPED.
    6) config.pursuer_steps zombie sub-steps; capture after any of them
       → CAUGHT, remaining sub-steps skipped.

    The exit is only checked after the player's own step: zombies can
    cause a loss but never a win.
    """
    config = config or _DEFAULT_CONFIG

    if state.status.is_terminal:
        return MoveResult(moved=False, status=state.status)

    nx, ny = state.player[0] + dx, state.player[1] + dy
    if not is_valid_player_move(state, nx, ny):
        return MoveResult(moved=False, status=state.status)

    state.player = (nx, ny)
    state.turn += 1
    log.debug("Turn %d: player -> (%d,%d)", state.turn, nx, ny)

    if state.player_caught():
        _finish(state, Status.CAUGHT)
        return MoveResult(moved=True, status=state.status)

    if state.player == state.exit:
        _finish(state, Status.ESCAPED)
        return MoveResult(moved=True, status=state.status)

    trapped_total = 0
    for sub_step in range(config.pursuer_steps):
        trapped = step_zombies(state)
        trapped_total += trapped
        log.debug("Turn %d sub-step %d: %d trapped",
                  state.turn, sub_step + 1, trapped)
        if state.player_caught():
            _finish(state, Status.CAUGHT)
            break

    return MoveResult(moved=True, status=state.status,
                      trapped_count=trapped_total)
