"""
level_03.py — Level 3: "Queue"

Two zombies wait below a wall with a single gap near the exit.
Zombie 0 moves first each sub-step, but zombie 1 stands in its way,
so it can only shuffle into the cell zombie 1 just left.  Both follow
the player along row 2; zombie 1 squeezes through the gap
one step too late.

      Col  0   1   2   3   4   5   6   7   8
 Row 0   [ P   .   .   .   .   .   .   .   E ]
 Row 1   [ #   #   #   #   #   #   #   .   # ]
 Row 2   [ Z   Z   .   .   .   .   .   .   . ]

Solution: right × 8.
"""

LEVEL_DATA = {
    "name": "Level 3 — Queue",
    "tier": "easy",
    "score": 10,
    "grid": [
        "P.......E",
        "#######.#",
        "ZZ.......",
    ],
}
