"""
Shared constants for the knight's tour search.

Board limits, CLI defaults and the canonical knight offsets live here so the
table builder, the CLI and the experiment runner agree on them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

# ==== Board limits =========================================================

# Smallest board with an open tour.
MIN_GRID: int = 5

# Exhaustive search is hopeless well before this; it also bounds the CLI input.
MAX_GRID: int = 11

# 8 is a standard chessboard.
DEFAULT_GRID: int = 8

# Largest square index accepted on the command line.
MAX_PATH_VALUE: int = 127

# ==== Knight moves =========================================================

# (d_rank, d_file), lexicographic. Enumeration order of tours follows this list.
KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-2, -1),
    (-2, +1),
    (-1, -2),
    (-1, +2),
    (+1, -2),
    (+1, +2),
    (+2, -1),
    (+2, +1),
)

MAX_MOVES: int = len(KNIGHT_OFFSETS)

# Marks unused slots of the move table; never a valid square.
END: int = -1

# ==== Experiments ==========================================================

DEFAULT_RESULTS: Path = Path("results/last_run.csv")
