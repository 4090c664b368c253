#!/usr/bin/env python3
"""
main.py — Entry point for Zombie Escape.

Run from the repository root:
    python main.py            # plays from Level 1
    python main.py 3          # starts at Level 3
    python main.py hard       # random levels from the "hard" tier
    python main.py -v ...     # debug logging to stderr
"""

import logging
import os
import sys

from zombie_escape.constants import (
    ANSI_BOLD, ANSI_COLORS, ANSI_RESET, DIR_DELTA, KEY_BINDINGS, TIER_ORDER,
)
from zombie_escape.entities import Status
from zombie_escape.renderer import clear_screen, render
from zombie_escape.session import GameSession

log = logging.getLogger("main")


def enable_windows_ansi():
    """Enable virtual-terminal processing on Windows 10+ for ANSI codes."""
    if os.name == "nt":
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            # ENABLE_PROCESSED_OUTPUT | ENABLE_WRAP_AT_EOL | ENABLE_VIRTUAL_TERMINAL
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
        except (AttributeError, OSError):
            pass   # colors may not render


def parse_args(argv):
    """Return (verbose, level_number, tier) from the command line."""
    verbose = "-v" in argv or "--verbose" in argv
    rest = [a for a in argv if a not in ("-v", "--verbose")]
    level_number, tier = 1, None
    if rest:
        arg = rest[0].lower()
        if arg in TIER_ORDER:
            tier = arg
        else:
            try:
                level_number = int(arg)
            except ValueError:
                print(f"Unknown level or tier '{rest[0]}'.  "
                      f"Tiers: {', '.join(TIER_ORDER)}")
                sys.exit(1)
    return verbose, level_number, tier


def main():
    enable_windows_ansi()
    verbose, level_number, tier = parse_args(sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    session = GameSession()

    def start_next(first=False):
        if tier:
            session.start_random_from_tier(tier)
        elif first:
            session.start_level(level_number)
        else:
            session.next_level()

    try:
        start_next(first=True)
    except ValueError as e:
        log.error("Cannot start: %s", e)
        print(f"  {e}")
        sys.exit(1)

    # Helper: redraw the whole screen.
    def refresh():
        clear_screen()
        label = tier.upper() if tier else str(session.level_number)
        render(session.state, title=session.level_name, level_label=label)

    refresh()
    prompt = "  Move [w/a/s/d]  (r = restart, q = quit): "

    # ── Main input loop ──
    while True:
        try:
            choice = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            print("\n  Goodbye!")
            sys.exit(0)

        if choice in ("q", "quit", "exit"):
            print("  Goodbye!")
            sys.exit(0)

        if choice == "r":
            session.restart()
            refresh()
            continue

        if choice not in KEY_BINDINGS:
            input(f"  '{choice}' is not a move.  Press Enter...")
            refresh()
            continue

        dx, dy = DIR_DELTA[KEY_BINDINGS[choice]]
        result = session.move_player(dx, dy)
        refresh()

        if not result.moved:
            print("  Blocked!")
        elif result.status is Status.ESCAPED:
            turns = session.state.turn
            print(f"  {ANSI_COLORS['yellow']}{ANSI_BOLD}Escaped in {turns} "
                  f"turn(s)!{ANSI_RESET}")
            input("  Press Enter for the next level...")
            start_next()
            refresh()
        elif result.status is Status.CAUGHT:
            print(f"  {ANSI_COLORS['red']}{ANSI_BOLD}Caught by a zombie!"
                  f"{ANSI_RESET}")
            input("  Press Enter to try again...")
            session.restart()
            refresh()
        elif result.trapped_count:
            print(f"  {result.trapped_count} zombie move(s) blocked.")


if __name__ == "__main__":
    main()
