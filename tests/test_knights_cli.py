import pytest

from knight_tour.experiments import knights
from knight_tour.search.backtrack import initialize


def test_help_prints_notes_and_grid(capsys):
    assert knights.main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "COORDINATE SYSTEM" in out
    assert "   0   8  16  24  32  40  48  56" in out
    assert "path 1 found" not in out


def test_help_uses_requested_grid(capsys):
    assert knights.main(["--grid=5", "--help"]) == 0
    assert "   0   5  10  15  20" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["-g=4"], ["--grid=12"], ["-g", "3"]])
def test_grid_out_of_range(argv, capsys):
    assert knights.main(argv) == knights.EXIT_GRID
    assert "out of range of 5-11" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["-x"], ["--bogus"], ["abc"], ["-g=five"]])
def test_illegal_option(argv, capsys):
    assert knights.main(argv) == knights.EXIT_OPTION
    assert "try --help" in capsys.readouterr().out


def test_too_many_path_elements():
    assert knights.main(["-g=5"] + ["0"] * 26) == knights.EXIT_TOO_MANY


@pytest.mark.parametrize("value", ["128", "-5"])
def test_path_value_out_of_range(value):
    assert knights.main([value]) == knights.EXIT_VALUE


def test_unreachable_path_returns_validator_code(capsys):
    assert knights.main(["-g=5", "0", "1"]) == 2
    out = capsys.readouterr().out
    assert "inaccessible from 0" in out
    assert "initial stack" not in out


def test_repeated_path_returns_validator_code():
    assert knights.main(["-g=5", "0", "7", "0"]) == 1


def test_first_path_on_5x5(capsys):
    assert knights.main(["-g=5", "-n=1"]) == 0
    out = capsys.readouterr().out
    assert "initial stack: 0" in out
    assert "path 1 found after" in out
    assert "stopped after 1 paths" in out


def test_pinned_prefix_exhausts(capsys):
    tour = next(initialize(5, [0]).solutions()).path
    argv = ["--grid=5", "--pin"] + [str(s) for s in tour[:22]]
    assert knights.main(argv) == 0
    out = capsys.readouterr().out
    assert " ".join(str(s) for s in tour) in out
    assert "ALL DONE! have exhausted all paths on grid of 5 starting with 0" in out
    assert "total paths found" in out


def test_verbose_prints_table_and_prefixes(capsys):
    assert knights.main(["-g=5", "-v", "-n=1"]) == 0
    out = capsys.readouterr().out
    assert "0 (r:1, f:1) -> 7(2,3) 11(3,2)" in out
    assert "\n0 7\n" in out


@pytest.mark.parametrize("argv", [["-n=0"], ["--max-paths=-1"], ["-g=5", "-n", "0"]])
def test_max_paths_below_one_is_rejected(argv, capsys):
    assert knights.main(argv) == knights.EXIT_OPTION
    out = capsys.readouterr().out
    assert "at least 1" in out
    assert "initial stack" not in out
