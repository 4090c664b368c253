"""
level_05.py — Level 5: "Horde"

Four zombies: two in cups above the corridor, one in an upside-down
cup below it, one behind the pillar at the corridor's start.  Every
one of them is stuck only while the player holds row 3.

      Col  0   1   2   3   4   5   6   7   8   9  10
 Row 0   [ .   .   .   .   .   .   .   .   .   .   . ]
 Row 1   [ .   #   Z   #   .   .   .   #   Z   #   . ]
 Row 2   [ .   #   #   #   .   .   .   #   #   #   . ]
 Row 3   [ Z   #   P   .   .   .   .   .   .   .   E ]
 Row 4   [ .   .   .   .   #   #   #   .   .   .   . ]
 Row 5   [ .   .   .   .   #   Z   #   .   .   .   . ]
 Row 6   [ .   .   .   .   .   .   .   .   .   .   . ]

Solution: right × 8.
"""

LEVEL_DATA = {
    "name": "Level 5 — Horde",
    "tier": "hard",
    "score": 30,
    "grid": [
        "...........",
        ".#Z#...#Z#.",
        ".###...###.",
        "Z#P.......E",
        "....###....",
        "....#Z#....",
        "...........",
    ],
}
