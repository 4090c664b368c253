"""
level_04.py — Level 4: "Cups"

Two zombies sit in wall cups that open upward, a third waits behind a
pillar at the start of the player's row.  A zombie in a cup is stuck
for as long as the player stays below it: both of its candidate steps
run into the cup's walls.  The pillar zombie is stuck while the player
shares its row, because a zombie lined up on one axis has no second
choice.

      Col  0   1   2   3   4   5   6   7   8
 Row 0   [ .   .   .   .   .   .   .   .   . ]
 Row 1   [ .   #   Z   #   .   #   Z   #   . ]
 Row 2   [ .   #   #   #   .   #   #   #   . ]
 Row 3   [ .   .   .   .   .   .   .   .   . ]
 Row 4   [ Z   #   P   .   .   .   .   .   E ]

Solution: right × 6.  Stepping up frees the pillar zombie.
"""

LEVEL_DATA = {
    "name": "Level 4 — Cups",
    "tier": "medium",
    "score": 20,
    "grid": [
        ".........",
        ".#Z#.#Z#.",
        ".###.###.",
        ".........",
        "Z#P.....E",
    ],
}
