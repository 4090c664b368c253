"""
level_02.py — Level 2: "Behind Bars"

The zombie starts on the far side of a wall column.  It always tries
the axis with the larger gap first, so it presses against the wall
while the player walks along the top row.

      Col  0   1   2   3   4   5   6
 Row 0   [ P   .   .   .   .   .   E ]
 Row 1   [ #   #   #   #   #   .   # ]
 Row 2   [ Z   .   .   .   .   .   . ]
"""

LEVEL_DATA = {
    "name": "Level 2 — Behind Bars",
    "tier": "beginner",
    "score": 2,
    "grid": [
        "P.....E",
        "#####.#",
        "Z......",
    ],
}
