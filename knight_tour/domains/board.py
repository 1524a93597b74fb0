from __future__ import annotations
from typing import List

Square = int

def rank(i: Square, n: int) -> int:
    """1-based rank of square i on an n×n board."""
    return i // n + 1

def file(i: Square, n: int) -> int:
    """1-based file of square i on an n×n board."""
    return i % n + 1

def square(r: int, f: int, n: int) -> Square:
    """Inverse of rank/file. Returns -1 when (r, f) is off the board."""
    if 1 <= r <= n and 1 <= f <= n:
        return (r - 1) * n + (f - 1)
    return -1

def is_knight_move(a: Square, b: Square, n: int) -> bool:
    """Geometric check, independent of any precomputed table."""
    ra, fa = divmod(a, n)
    rb, fb = divmod(b, n)
    return {abs(ra - rb), abs(fa - fb)} == {1, 2}

def symmetric_starts(n: int) -> List[Square]:
    """
    One representative start square per symmetry class of the board
    (rotations and reflections), e.g. 6 squares for n=5.
    """
    half = (n - 1) // 2
    return [i for i in range(n * n) if i // n <= i % n <= half]

def coordinate_grid(n: int) -> str:
    """
    Text diagram of the square numbering. 0 is bottom left, numbers go up a
    column first and then wrap to the next column on the right.
    """
    lines = []
    for row in range(n):
        cells = [f"{j - row:4d}" for j in range(n - 1, n * n, n)]
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"

def format_path(path, n: int | None = None) -> str:
    """Space separated squares; with n, each square also gets its (rank,file)."""
    if n is None:
        return " ".join(str(s) for s in path)
    return " ".join(f"{s}({rank(s, n)},{file(s, n)})" for s in path)
