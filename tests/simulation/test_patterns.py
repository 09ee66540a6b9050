import pytest

from sparse_life.errors import PatternError
from sparse_life.models.board import Board
from sparse_life.simulation.patterns import get_pattern, pattern_names, place_pattern


def test_pattern_names():
    assert pattern_names() == [
        "acorn",
        "blinker",
        "block",
        "glider",
        "glider_gun",
        "rpentomino",
    ]


@pytest.mark.parametrize(
    "name,shape,cells",
    [
        ("block", (2, 2), 4),
        ("blinker", (1, 3), 3),
        ("glider", (3, 3), 5),
        ("rpentomino", (3, 3), 5),
        ("acorn", (3, 7), 7),
        ("glider_gun", (9, 36), 36),
    ],
)
def test_pattern_shapes(name, shape, cells):
    pattern = get_pattern(name)
    assert pattern.shape == shape
    assert int(pattern.sum()) == cells


def test_get_pattern_is_case_insensitive_and_copies():
    pattern = get_pattern("Glider")
    pattern[:] = 0
    assert int(get_pattern("glider").sum()) == 5


def test_unknown_pattern():
    with pytest.raises(PatternError) as excinfo:
        get_pattern("spaceship")
    assert excinfo.value.name == "spaceship"
    assert "glider" in str(excinfo.value)


def test_place_pattern_offsets_cells():
    board = Board(10, 10)
    placed = place_pattern(board, "glider", 3, 4)
    assert placed == 5
    assert board.living == {(4, 4), (5, 5), (3, 6), (4, 6), (5, 6)}


def test_place_pattern_clips_at_edge():
    board = Board(5, 5)
    placed = place_pattern(board, "blinker", 3, 0)
    assert placed == 2
    assert board.living == {(3, 0), (4, 0)}


def test_placed_block_is_still_life():
    board = Board(6, 6)
    place_pattern(board, "block", 2, 2)
    before = board.living
    board.step()
    assert board.living == before
