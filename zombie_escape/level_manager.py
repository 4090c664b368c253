"""
level_manager.py — Data-driven level loader for Zombie Escape.

load_level() translates a plain list of row strings into a fresh
GridState.  load_level_data() does the same for a catalogue entry
(see zombie_escape.levels) and also returns the level's display name.
"""

from __future__ import annotations

import logging

from zombie_escape.constants import (
    EXIT_CHAR, LAYOUT_CHARS, PLAYER_CHAR, WALL_CHAR, ZOMBIE_CHAR,
)
from zombie_escape.entities import Zombie
from zombie_escape.state import GridState

log = logging.getLogger(__name__)


class LevelFormatError(ValueError):
    """A layout that cannot be played.  Raised at load time only."""


def load_level(layout) -> GridState:
    """
    Parse a layout into a GridState.

    Expected layout
    ---------------
    An ordered sequence of equal-length strings, one per row:

        'P'  →  player start       'Z'  →  zombie start
        '#'  →  wall               'E'  →  exit
        '.'  →  empty cell

    Parsing algorithm
    -----------------
    1) height = row count, width = length of the first row.  Every row
       must have that width.

    2) Scan row-major (y outer, x inner).  Each 'Z' gets the next
       sequential zombie_id starting at 0.

    3) If 'P' or 'E' appears more than once, the LAST one in scan order
       wins.  This is load-order behaviour, not an error; it is logged
       as a warning.

    Raises
    ------
    LevelFormatError – empty layout, a bare string instead of rows,
                       ragged rows, unknown characters, or no 'P' / no 'E'.

    Returns
    -------
    GridState with turn == 0 and status == IN_PROGRESS.
    """
    if isinstance(layout, str):
        raise LevelFormatError(
            "Layout must be a sequence of row strings, not a single string.")
    rows = list(layout) if layout is not None else []
    if not rows or not rows[0]:
        raise LevelFormatError("Layout is empty.")

    height = len(rows)
    width  = len(rows[0])

    player   = None
    exit_pos = None
    walls    = set()
    zombies  = []
    n_players = n_exits = 0

    for y, row in enumerate(rows):
        if len(row) != width:
            raise LevelFormatError(
                f"Row {y} has length {len(row)}; expected {width} "
                f"(the width of row 0).")
        for x, ch in enumerate(row):
            if ch not in LAYOUT_CHARS:
                raise LevelFormatError(
                    f"Unknown character {ch!r} at ({x},{y}).")
            if ch == PLAYER_CHAR:
                player = (x, y)
                n_players += 1
            elif ch == EXIT_CHAR:
                exit_pos = (x, y)
                n_exits += 1
            elif ch == WALL_CHAR:
                walls.add((x, y))
            elif ch == ZOMBIE_CHAR:
                zombies.append(Zombie(len(zombies), x, y))

    if player is None:
        raise LevelFormatError(f"Layout has no player start ('{PLAYER_CHAR}').")
    if exit_pos is None:
        raise LevelFormatError(f"Layout has no exit ('{EXIT_CHAR}').")

    if n_players > 1:
        log.warning("Layout has %d player markers; using the last at %s",
                    n_players, player)
    if n_exits > 1:
        log.warning("Layout has %d exit markers; using the last at %s",
                    n_exits, exit_pos)

    log.debug("Loaded %dx%d layout: %d zombie(s), %d wall(s)",
              width, height, len(zombies), len(walls))
    return GridState(width, height, player, exit_pos, walls, zombies)


def load_level_data(level_data: dict):
    """
    Load a catalogue entry.

    Expected schema
    ---------------
    {
        "name":  str,          # human-readable title (optional)
        "tier":  str,          # difficulty tier (see TIER_ORDER)
        "score": int,          # ordering within the tier
        "grid":  [str, ...],   # layout, as accepted by load_level()
    }

    Returns
    -------
    (name: str, state: GridState)
    """
    if "grid" not in level_data:
        raise LevelFormatError("Level data has no 'grid' entry.")
    name = level_data.get("name", "Unnamed Level")
    return name, load_level(level_data["grid"])
