import numpy as np
import pytest

from knight_tour.config import END, MAX_GRID, MIN_GRID
from knight_tour.domains.moves import build_move_table

GRIDS = list(range(MIN_GRID, MAX_GRID + 1))


def test_corner_and_center_moves_follow_offset_order(table5):
    assert table5.moves(0) == (7, 11)
    assert table5.moves(12) == (1, 3, 5, 9, 15, 19, 21, 23)
    assert table5.moves(7) == (0, 4, 10, 14, 16, 18)


@pytest.mark.parametrize("n", GRIDS)
def test_table_is_symmetric(n):
    table = build_move_table(n)
    for a in range(table.size):
        for b in table.moves(a):
            assert a in table.moves(b), f"{a}->{b} without {b}->{a} on {n}x{n}"


@pytest.mark.parametrize("n", GRIDS)
def test_move_counts_between_two_and_eight(n):
    table = build_move_table(n)
    assert table.counts.min() == 2
    assert table.counts.max() == 8
    for corner in (0, n - 1, n * (n - 1), n * n - 1):
        assert table.counts[corner] == 2


@pytest.mark.parametrize("n", GRIDS)
def test_move_lists_have_no_duplicates_or_self_moves(n):
    table = build_move_table(n)
    for sq in range(table.size):
        moves = table.moves(sq)
        assert len(set(moves)) == len(moves)
        assert sq not in moves
        # padding sits only after the real moves
        assert all(t == END for t in table.targets[sq, len(moves):])


def test_build_is_idempotent():
    a = build_move_table(7)
    b = build_move_table(7)
    assert a is not b
    assert np.array_equal(a.targets, b.targets)
    assert np.array_equal(a.counts, b.counts)
    assert np.array_equal(a.origin, b.origin)


def test_largest_board_keeps_sentinel_out_of_range():
    table = build_move_table(MAX_GRID)
    valid = table.targets[table.targets != END]
    assert valid.min() == 0
    assert valid.max() == table.size - 1
    assert not 0 <= END < table.size


def test_reverse_index_maps_slots_to_squares(table8):
    assert table8.origin.shape == (table8.size * 8,)
    for sq in (0, 9, 27, 63):
        for k in range(8):
            assert table8.square_of_slot(sq * 8 + k) == sq


def test_table_is_read_only(table5):
    with pytest.raises(ValueError):
        table5.targets[0, 0] = 3


@pytest.mark.parametrize("n", [0, MAX_GRID + 1])
def test_rejects_grid_out_of_range(n):
    with pytest.raises(ValueError):
        build_move_table(n)


def test_is_move(table5):
    assert table5.is_move(0, 7)
    assert not table5.is_move(0, 1)
    assert not table5.is_move(0, 25)


def test_describe_lists_moves_then_reverse_index(table5):
    lines = table5.describe()
    assert lines[0] == "0 (r:1, f:1) -> 7(2,3) 11(3,2)"
    assert len(lines) == 2 * table5.size + 1
    assert lines[-1].startswith("24 index  24 24")
