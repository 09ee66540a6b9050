import numpy as np
import pytest

from sparse_life.simulation.life_rules import LifeRules


@pytest.mark.parametrize(
    "alive,neighbors,expected",
    [
        (True, 0, False),
        (True, 1, False),
        (True, 2, True),
        (True, 3, True),
        (True, 4, False),
        (True, 8, False),
        (False, 2, False),
        (False, 3, True),
        (False, 4, False),
        (False, 0, False),
    ],
)
def test_next_state_table(alive, neighbors, expected):
    assert LifeRules.next_state(alive, neighbors) is expected


def test_count_neighbors_ignores_cells_off_the_grid():
    cells = np.ones((3, 3), dtype=np.uint8)
    assert LifeRules.count_neighbors(cells, 1, 1) == 8
    assert LifeRules.count_neighbors(cells, 0, 0) == 3
    assert LifeRules.count_neighbors(cells, 2, 1) == 5


def test_dense_blinker_oscillates_without_wrapping():
    cells = np.zeros((5, 5), dtype=np.uint8)
    cells[2, 1:4] = 1

    after = LifeRules.compute_next_generation(cells)
    expected = np.zeros((5, 5), dtype=np.uint8)
    expected[1:4, 2] = 1
    np.testing.assert_array_equal(after, expected)

    np.testing.assert_array_equal(LifeRules.compute_next_generation(after), cells)


def test_dense_edges_do_not_wrap():
    cells = np.zeros((4, 4), dtype=np.uint8)
    cells[0, 0:3] = 1
    after = LifeRules.compute_next_generation(cells)
    # A wrapping grid would also give birth on the bottom row
    assert after[3].sum() == 0
    assert after[0, 1] == 1
    assert after[1, 1] == 1


def test_dense_step_agrees_with_count_neighbors():
    rng = np.random.default_rng(7)
    cells = (rng.random((8, 9)) < 0.4).astype(np.uint8)
    after = LifeRules.compute_next_generation(cells)
    for y in range(8):
        for x in range(9):
            n = LifeRules.count_neighbors(cells, x, y)
            assert bool(after[y, x]) == LifeRules.next_state(bool(cells[y, x]), n)
