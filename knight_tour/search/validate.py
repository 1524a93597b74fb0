from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from knight_tour.domains.moves import MoveTable
from knight_tour.logging_utils import get_logger

logger = get_logger()


class PathError(ValueError):
    """An initial path the search cannot start from. `code` is the CLI exit code."""
    code = 0


class RepeatedSquare(PathError):
    code = 1

    def __init__(self, square: int):
        super().__init__(f"Illegal, SEARCHPOSITION {square} is repeated!")
        self.square = square


class Unreachable(PathError):
    code = 2

    def __init__(self, square: int, target: int | None = None):
        if target is None:
            msg = f"Illegal, SEARCHPOSITION {square} is a dead end, no unvisited move left."
        else:
            msg = f"Illegal, SEARCHPOSITION {target} is inaccessible from {square}."
        super().__init__(msg)
        self.square = square
        self.target = target


class PathTooLong(PathError):
    code = 3

    def __init__(self, length: int, n: int):
        super().__init__(f"Illegal path length ({length}) is too big for {n} x {n} grid.")
        self.length = length


class OutOfRange(PathError):
    code = 4

    def __init__(self, square: int, n: int):
        super().__init__(f"Illegal path element, {square} is too big for {n} x {n} grid.")
        self.square = square


@dataclass
class SeedState:
    """Search state equivalent to having walked `squares` in canonical order."""
    visited: List[bool]
    squares: List[int]
    cursors: List[int]

    @property
    def depth(self) -> int:
        return len(self.squares)


def seed_state(table: MoveTable, path: Sequence[int]) -> SeedState:
    """
    Validate `path` against `table` and build the frames that resume search
    right after it.

    Frame k (not last) gets the index of path[k+1] in path[k]'s move list, so
    backtracking into it carries on with the next untried candidate. The last
    frame points at its first unvisited destination.
    Raises a PathError subclass on the first offending element.
    """
    path = [int(s) for s in path]
    if not path:
        raise ValueError("initial path must contain at least one square")

    n, size = table.n, table.size
    try:
        if len(path) > size:
            raise PathTooLong(len(path), n)

        visited = [False] * size
        squares: List[int] = []
        cursors: List[int] = []
        for sq in path:
            if not 0 <= sq < size:
                raise OutOfRange(sq, n)
            if visited[sq]:
                raise RepeatedSquare(sq)
            if squares:
                prev = squares[-1]
                options = table.moves(prev)
                if sq not in options:
                    raise Unreachable(prev, sq)
                cursors[-1] = options.index(sq)
            visited[sq] = True
            squares.append(sq)
            cursors.append(0)

        last = squares[-1]
        for i, t in enumerate(table.moves(last)):
            if not visited[t]:
                cursors[-1] = i
                break
        else:
            raise Unreachable(last)
    except PathError as e:
        logger.debug("Rejected initial path %s: %s", path, e)
        raise

    return SeedState(visited=visited, squares=squares, cursors=cursors)
