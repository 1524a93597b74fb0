from __future__ import annotations
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Iterator, Optional, Sequence, Tuple

from knight_tour.domains.moves import MoveTable, build_move_table
from knight_tour.logging_utils import get_logger
from knight_tour.search.validate import seed_state

logger = get_logger()

Path = Tuple[int, ...]


@dataclass(frozen=True)
class Solution:
    index: int        # 1-based completion counter
    path: Path
    dead_ends: int    # dead ends seen so far in the run


class TourSearch:
    """
    Iterative backtracking over knight paths, starting from a validated prefix.

    State is a fixed-size arena of (square, cursor) frames plus a visited
    tally; advancing and retreating are O(1). The move table is only read.

    pinned=False keeps the start square as the only fixed frame, so the
    search goes on to the prefix's untried alternatives once its extensions
    are done. pinned=True enumerates extensions of the whole prefix only.
    """

    def __init__(
        self,
        table: MoveTable,
        path: Sequence[int],
        pinned: bool = False,
        on_step: Optional[Callable[[Path], None]] = None,
    ):
        seed = seed_state(table, path)
        size = table.size
        self.table = table
        self.size = size
        self.start = seed.squares[0]
        self.on_step = on_step

        self._moves = table.rows()
        self.visited = seed.visited
        self.squares = [0] * size
        self.cursors = [0] * size
        self.squares[: seed.depth] = seed.squares
        self.cursors[: seed.depth] = seed.cursors
        self.depth = seed.depth
        self.floor = seed.depth if pinned else 1

        self.paths = 0
        self.dead_ends = 0
        self.exhausted = False

    def path(self) -> Path:
        return tuple(self.squares[: self.depth])

    def solutions(self) -> Iterator[Solution]:
        """
        Yield every tour reachable from the current state, in canonical order.
        Stopping early leaves the engine resumable from where it paused.
        """
        moves, visited = self._moves, self.visited
        squares, cursors = self.squares, self.cursors
        size, floor, on_step = self.size, self.floor, self.on_step
        depth = self.depth

        while not self.exhausted:
            top = depth - 1
            options = moves[squares[top]]
            c = cursors[top]

            if c < len(options):
                nxt = options[c]
                if visited[nxt]:
                    # been there, try the next candidate
                    self.dead_ends += 1
                    cursors[top] = c + 1
                    continue

                visited[nxt] = True
                squares[depth] = nxt
                cursors[depth] = 0
                depth += 1
                if on_step is not None:
                    on_step(tuple(squares[:depth]))

                if depth == size:
                    self.paths += 1
                    found = Solution(self.paths, tuple(squares), self.dead_ends)
                    # the leaf has nowhere to go; drop it before handing out
                    # the tour so a paused search is already past it
                    depth -= 1
                    visited[nxt] = False
                    cursors[top] = c + 1
                    self.depth = depth
                    yield found
                continue

            # candidates of the deepest frame used up
            if depth == floor:
                self.exhausted = True
                break
            depth -= 1
            visited[squares[depth]] = False
            cursors[depth - 1] += 1

        self.depth = depth
        logger.debug(
            "Search from %d exhausted on %dx%d: %d paths, %d dead ends",
            self.start, self.table.n, self.table.n, self.paths, self.dead_ends,
        )

    def run(
        self,
        max_paths: Optional[int] = None,
        on_path: Optional[Callable[[Solution], None]] = None,
    ):
        """
        Drive the search to exhaustion, or until max_paths more tours were
        found. Returns a flat result record; its counts cover this call only.
        """
        t0 = perf_counter()
        paths0, dead0 = self.paths, self.dead_ends
        first: Optional[Path] = None
        termination = "exhausted"
        if max_paths is not None and max_paths <= 0:
            termination = "limit"
        else:
            for sol in self.solutions():
                if first is None:
                    first = sol.path
                if on_path is not None:
                    on_path(sol)
                if max_paths is not None and self.paths - paths0 >= max_paths:
                    termination = "limit"
                    break
        return {
            "algorithm": "backtrack",
            "grid": self.table.n,
            "start": self.start,
            "paths": self.paths - paths0,
            "dead_ends": self.dead_ends - dead0,
            "first_path": first,
            "time": perf_counter() - t0,
            "termination": termination,
        }

    def check_invariants(self) -> None:
        """Assert tally and stack agree; for tests and debugging."""
        live = self.squares[: self.depth]
        assert len(set(live)) == self.depth, "repeated square on the stack"
        assert sum(self.visited) == self.depth, "tally out of sync with stack"
        assert all(self.visited[s] for s in live)
        for a, b in zip(live, live[1:]):
            assert b in self._moves[a], f"{a} -> {b} is not a knight move"


def initialize(n: int, path: Sequence[int] = (0,), **kwargs) -> TourSearch:
    """Build the table for n and seed a search from path; raises PathError."""
    table = build_move_table(n)
    return TourSearch(table, path, **kwargs)
