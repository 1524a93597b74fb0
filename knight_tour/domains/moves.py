from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from knight_tour.config import END, KNIGHT_OFFSETS, MAX_GRID, MAX_MOVES
from knight_tour.domains.board import file, rank, square
from knight_tour.logging_utils import get_logger

logger = get_logger()


@dataclass(frozen=True, eq=False)
class MoveTable:
    """
    Legal knight moves for every square of an n×n board.

    targets : (n*n, 8) int16, destinations in canonical offset order, END-padded
    counts  : (n*n,)   number of real destinations per square
    origin  : (n*n*8,) square owning each slot of the flattened targets
    """
    n: int
    targets: np.ndarray
    counts: np.ndarray
    origin: np.ndarray

    @property
    def size(self) -> int:
        return self.n * self.n

    def moves(self, sq: int) -> Tuple[int, ...]:
        return tuple(int(t) for t in self.targets[sq, : self.counts[sq]])

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        """Plain-int move lists, indexed by square."""
        return tuple(self.moves(sq) for sq in range(self.size))

    def is_move(self, a: int, b: int) -> bool:
        if not (0 <= a < self.size and 0 <= b < self.size):
            return False
        return bool((self.targets[a, : self.counts[a]] == b).any())

    def square_of_slot(self, slot: int) -> int:
        """Which square a flattened slot index (sq*8 + cursor) belongs to."""
        return int(self.origin[slot])

    def describe(self) -> List[str]:
        n = self.n
        out: List[str] = []
        for sq in range(self.size):
            dests = " ".join(f"{t}({rank(t, n)},{file(t, n)})" for t in self.moves(sq))
            out.append(f"{sq} (r:{rank(sq, n)}, f:{file(sq, n)}) -> {dests}")
        out.append("")
        for sq in range(self.size):
            row = self.origin[sq * MAX_MOVES:(sq + 1) * MAX_MOVES]
            out.append(f"{sq:02d} index  " + " ".join(f"{int(v):02d}" for v in row))
        return out


def build_move_table(n: int) -> MoveTable:
    """Pure function of n; the returned arrays are read-only."""
    if not 1 <= n <= MAX_GRID:
        raise ValueError(f"grid size {n} out of range 1-{MAX_GRID}")

    size = n * n
    targets = np.full((size, MAX_MOVES), END, dtype=np.int16)
    counts = np.zeros(size, dtype=np.int8)

    for sq in range(size):
        r, f = rank(sq, n), file(sq, n)
        k = 0
        for dr, df in KNIGHT_OFFSETS:
            dest = square(r + dr, f + df, n)
            if dest >= 0:
                targets[sq, k] = dest
                k += 1
        counts[sq] = k

    origin = np.repeat(np.arange(size, dtype=np.int16), MAX_MOVES)

    for arr in (targets, counts, origin):
        arr.flags.writeable = False

    logger.debug("Built move table for %dx%d (%d moves)", n, n, int(counts.sum()))
    return MoveTable(n=n, targets=targets, counts=counts, origin=origin)
