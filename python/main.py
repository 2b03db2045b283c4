#!/usr/bin/env python3
"""Eight Puzzle.

Usage::

    python main.py play                      # Rich terminal game
    python main.py play --shuffle --seed 7   # start from a scramble
    python main.py check 1,3,2,4,7,5,_,8,6   # solvability
    python main.py hint 1,2,3,4,5,6,7,_,8    # best next tile
    python main.py solve 1,3,2,4,7,5,_,8,6   # full shortest path
    python main.py shuffle --steps 50        # print a solvable scramble
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli.commands import app  # noqa: E402

if __name__ == "__main__":
    app()
