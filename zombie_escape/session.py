"""
session.py — One player's game, start to finish.

A GameSession owns exactly one GridState at a time and is the only
thing that mutates it.  There is no module-level engine: a server that
hosts many games keeps one GameSession per game.  Every call takes the
session's lock, so two turn resolutions never interleave on the same
state.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Optional

from zombie_escape import levels as catalogue
from zombie_escape.config import EngineConfig
from zombie_escape.engine import move_player
from zombie_escape.entities import MoveResult
from zombie_escape.level_manager import load_level, load_level_data
from zombie_escape.serializer import serialize
from zombie_escape.state import GridState

log = logging.getLogger(__name__)


class GameSession:
    """
    Level progression and the engine's public surface.

    Parameters
    ----------
    config : EngineConfig or None – turn-resolver settings.
    levels : list or None         – catalogue to play; defaults to the
                                    built-in LEVELS.
    """

    def __init__(self, config: Optional[EngineConfig] = None, levels=None):
        self.config = config or EngineConfig()
        self.levels = catalogue.LEVELS if levels is None else list(levels)
        self.level_number = None   # 1-based; None for ad-hoc/tier layouts
        self.level_name = ""
        self._layout = None
        self._state = None
        self._lock = threading.Lock()

    # ── Loading ──

    def load_level(self, layout, name: str = "") -> GridState:
        """
        Replace the current state with a fresh one built from *layout*.
        The layout is ad-hoc, so the session leaves the catalogue.
        """
        state = self._install(load_level(layout), layout, name)
        self.level_number = None
        return state

    def _install(self, state: GridState, layout, name: str) -> GridState:
        with self._lock:
            self._layout = list(layout)
            self._state = state
            self.level_name = name
        return state

    def start_level(self, number: int) -> GridState:
        """
        Load catalogue level *number* (1-based).  Numbers past the end of
        the catalogue wrap back to level 1.
        """
        if not self.levels:
            raise RuntimeError("No levels available.")
        if number > len(self.levels):
            log.info("Level %d past the end of the catalogue; back to 1", number)
            number = 1
        level_data = catalogue.get_level(number, self.levels)
        if level_data is None:
            raise ValueError(f"Level {number} not found.  "
                             f"Available: 1-{len(self.levels)}")
        name, state = load_level_data(level_data)
        self._install(state, level_data["grid"], name)
        self.level_number = number
        log.debug("Started level %d (%s)", number, name)
        return state

    def next_level(self) -> GridState:
        return self.start_level((self.level_number or 0) + 1)

    def start_random_from_tier(self, tier: str, rng: Optional[random.Random] = None) -> GridState:
        """Load a random catalogue level from *tier*."""
        pool = catalogue.levels_in_tier(tier, self.levels)
        if not pool:
            raise ValueError(f"No levels in tier {tier!r}.")
        level_data = (rng or random).choice(pool)
        name, state = load_level_data(level_data)
        self._install(state, level_data["grid"], name)
        self.level_number = None
        return state

    def restart(self) -> GridState:
        """Reload the current layout from scratch."""
        if self._layout is None:
            raise RuntimeError("No level loaded.")
        return self._install(load_level(self._layout), self._layout,
                             self.level_name)

    # ── Turn resolution ──

    def move_player(self, dx: int, dy: int) -> MoveResult:
        with self._lock:
            self._require_state()
            return move_player(self._state, dx, dy, self.config)

    # ── Read-only accessors ──

    @property
    def state(self) -> GridState:
        """The live state.  Callers must not mutate it; use snapshot()."""
        return self._state

    @property
    def dimensions(self):
        with self._lock:
            self._require_state()
            return self._state.dimensions

    def is_wall(self, x: int, y: int) -> bool:
        with self._lock:
            self._require_state()
            return self._state.is_wall(x, y)

    def snapshot(self) -> GridState:
        with self._lock:
            self._require_state()
            return self._state.snapshot()

    def display_grid(self) -> list:
        with self._lock:
            self._require_state()
            return serialize(self._state)

    def _require_state(self) -> None:
        if self._state is None:
            raise RuntimeError("No level loaded.")
