#!/usr/bin/env python3
"""Sliding N-puzzle.

Usage::

    python main.py play           # interactive 3×3
    python main.py play -s 5      # 5×5
    python main.py shuffle --seed 1
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle_host.main import app  # noqa: E402

if __name__ == "__main__":
    app()
