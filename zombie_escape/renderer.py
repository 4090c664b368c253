"""
renderer.py — Terminal rendering for Zombie Escape.

Handles screen clearing and drawing the ANSI-colored game board from
the serializer's display grid.
"""

import os

from zombie_escape.constants import (
    ANSI_BOLD, ANSI_COLORS, ANSI_DIM, ANSI_RESET,
)
from zombie_escape.entities import Status
from zombie_escape.serializer import CellKind, cell_kind
from zombie_escape.state import GridState

# CellKind → (display_char, ansi_color_code)
CELL_STYLE = {
    CellKind.PLAYER: ("@", ANSI_COLORS["cyan"]),
    CellKind.ZOMBIE: ("Z", ANSI_COLORS["green"]),
    CellKind.WALL:   ("#", ANSI_COLORS["white"]),
    CellKind.EXIT:   ("E", ANSI_COLORS["yellow"]),
    CellKind.EMPTY:  (".", ANSI_DIM),
}


def clear_screen():
    """Clear the terminal (cross-platform)."""
    os.system("cls" if os.name == "nt" else "clear")


def render(state: GridState, title: str = "", level_label: str = ""):
    """Print the full game board."""

    # ── Header ──
    print()
    print(f"  {ANSI_BOLD}========= ZOMBIE ESCAPE ========={ANSI_RESET}")
    if title:
        print(f"  {title}")
    if level_label:
        print(f"  Level: {level_label}")
    print(f"  Turn: {state.turn}    Zombies: {len(state.zombies)}")
    print()

    # ── Column numbers ──
    header = "    " + " ".join(f"{x % 10}" for x in range(state.width))
    print(f"  {ANSI_DIM}{header}{ANSI_RESET}")

    inner_width = state.width * 2 + 1
    print(f"    +{'-' * inner_width}+")

    # ── Grid rows ──
    for y in range(state.height):
        parts = []
        for x in range(state.width):
            kind = cell_kind(state, x, y)
            ch, ansi = CELL_STYLE[kind]
            if kind is CellKind.PLAYER and state.status is Status.CAUGHT:
                ansi = ANSI_COLORS["red"]
            parts.append(f"{ansi}{ANSI_BOLD}{ch}{ANSI_RESET}")
        print(f"  {y % 10} | {' '.join(parts)} |")

    print(f"    +{'-' * inner_width}+")
    print()
