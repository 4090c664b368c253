"""
level_01.py — Level 1: "Open Road"

Grid encoding rules:
  'P'  =  player start        'Z'  =  zombie start
  '#'  =  wall                'E'  =  exit
  '.'  =  empty cell

No zombies yet: walk right four times to reach the exit.

      Col  0   1   2   3   4   5   6
 Row 0   [ .   .   .   .   .   .   . ]
 Row 1   [ .   P   .   .   .   E   . ]
 Row 2   [ .   .   .   .   .   .   . ]
"""

LEVEL_DATA = {
    "name": "Level 1 — Open Road",
    "tier": "beginner",
    "score": 1,
    "grid": [
        ".......",
        ".P...E.",
        ".......",
    ],
}
