"""
constants.py — Shared constants for Zombie Escape.

Layout glyphs, directional data, key bindings, ANSI codes and the
default pursuit speed live here so every other module can import them
from a single authoritative source.
"""

# ═══════════════════════════════════════════════════════════════════════════
#  LAYOUT GLYPHS
# ═══════════════════════════════════════════════════════════════════════════

PLAYER_CHAR = "P"
ZOMBIE_CHAR = "Z"
WALL_CHAR   = "#"
EXIT_CHAR   = "E"
EMPTY_CHAR  = "."

LAYOUT_CHARS = frozenset(
    (PLAYER_CHAR, ZOMBIE_CHAR, WALL_CHAR, EXIT_CHAR, EMPTY_CHAR)
)

# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

# (dx, dy) for each compass direction.  y grows downward (row index).
DIR_DELTA = {
    "up":    ( 0, -1),
    "down":  ( 0,  1),
    "left":  (-1,  0),
    "right": ( 1,  0),
}

# Console input → direction name.
KEY_BINDINGS = {
    "w": "up",    "up":    "up",
    "s": "down",  "down":  "down",
    "a": "left",  "left":  "left",
    "d": "right", "right": "right",
}

# ═══════════════════════════════════════════════════════════════════════════
#  PURSUIT
# ═══════════════════════════════════════════════════════════════════════════

# Zombie sub-steps resolved after every accepted player move.
PURSUER_STEPS = 2

# ═══════════════════════════════════════════════════════════════════════════
#  LEVEL CATALOGUE
# ═══════════════════════════════════════════════════════════════════════════

TIER_ORDER = ("beginner", "easy", "medium", "hard", "expert")

# ═══════════════════════════════════════════════════════════════════════════
#  ANSI ESCAPE CODES
# ═══════════════════════════════════════════════════════════════════════════

ANSI_RESET = "\033[0m"
ANSI_BOLD  = "\033[1m"
ANSI_DIM   = "\033[2m"

ANSI_COLORS = {
    "red":     "\033[91m",
    "green":   "\033[92m",
    "yellow":  "\033[93m",
    "blue":    "\033[94m",
    "magenta": "\033[95m",
    "cyan":    "\033[96m",
    "white":   "\033[97m",
}
