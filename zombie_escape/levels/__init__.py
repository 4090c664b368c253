"""
zombie_escape.levels — Built-in level data for Zombie Escape.

Each sub-module exports a single LEVEL_DATA dict.  This __init__
aggregates them into the LEVELS list, ordered by difficulty tier
(TIER_ORDER) and then by score within a tier.  To add a new level,
create level_NN.py with a LEVEL_DATA dict and add it to _ALL below.
"""

from __future__ import annotations

from zombie_escape.constants import TIER_ORDER
from zombie_escape.levels.level_01 import LEVEL_DATA as _L01
from zombie_escape.levels.level_02 import LEVEL_DATA as _L02
from zombie_escape.levels.level_03 import LEVEL_DATA as _L03
from zombie_escape.levels.level_04 import LEVEL_DATA as _L04
from zombie_escape.levels.level_05 import LEVEL_DATA as _L05

_ALL = [_L01, _L02, _L03, _L04, _L05]


def sort_levels(levels) -> list:
    """Order level dicts by tier, then by ascending score.  Unknown tiers are dropped."""
    known = [lv for lv in levels if lv.get("tier") in TIER_ORDER]
    return sorted(known, key=lambda lv: (TIER_ORDER.index(lv["tier"]),
                                         lv.get("score", 0)))


LEVELS = sort_levels(_ALL)


def level_count(levels=None) -> int:
    return len(LEVELS if levels is None else levels)


def get_level(number: int, levels=None):
    """Level dict for 1-based *number*, or None when out of range."""
    levels = LEVELS if levels is None else levels
    if not 1 <= number <= len(levels):
        return None
    return levels[number - 1]


def levels_in_tier(tier: str, levels=None) -> list:
    levels = LEVELS if levels is None else levels
    return [lv for lv in levels if lv.get("tier") == tier]


def available_tiers(levels=None) -> list:
    """Tiers, in TIER_ORDER, that have at least one level."""
    return [t for t in TIER_ORDER if levels_in_tier(t, levels)]
