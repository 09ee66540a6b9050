import pytest

from sparse_life.config import LifeConfig
from sparse_life.errors import PatternError
from sparse_life.models.board import Board
from sparse_life.simulation.simulator import Simulator


def test_simulator_creates_configured_board(simulator):
    assert simulator.board.width == 10
    assert simulator.board.height == 10
    assert simulator.generation == 0


def test_simulator_wraps_existing_board(config):
    board = Board(4, 4)
    board.spawn((1, 1))
    simulator = Simulator(config, board)
    assert simulator.board is board
    assert simulator.stats.population == 1


def test_step_records_births_and_deaths(simulator):
    simulator.board.spawn_all([(1, 2), (2, 2), (3, 2)])
    simulator.step()

    assert simulator.generation == 1
    assert simulator.stats.births == 2
    assert simulator.stats.deaths == 2
    assert simulator.stats.population == 3


def test_run(simulator):
    simulator.board.spawn_all([(1, 2), (2, 2), (3, 2)])
    simulator.run(4)
    assert simulator.generation == 4
    assert simulator.board.living == {(1, 2), (2, 2), (3, 2)}
    assert simulator.stats.total_births == 8


def test_clear_resets_generation(simulator):
    simulator.board.spawn((5, 5))
    simulator.run(2)
    simulator.clear()
    assert simulator.generation == 0
    assert simulator.board.population == 0


def test_initialize_pattern_centers_by_default(simulator):
    placed = simulator.initialize_pattern("block")
    assert placed == 4
    assert simulator.board.living == {(4, 4), (5, 4), (4, 5), (5, 5)}
    assert simulator.stats.population == 4


def test_initialize_pattern_at_position(simulator):
    simulator.board.spawn((9, 9))
    simulator.initialize_pattern("blinker", 0, 0)
    assert simulator.board.living == {(0, 0), (1, 0), (2, 0)}


def test_initialize_pattern_unknown(simulator):
    with pytest.raises(PatternError):
        simulator.initialize_pattern("nope")


def test_initialize_random_is_reproducible():
    config = LifeConfig(grid_width=20, grid_height=15)
    first = Simulator(config)
    second = Simulator(config)

    count = first.initialize_random(0.3, seed=42)
    second.initialize_random(0.3, seed=42)

    assert count == first.board.population
    assert 0 < count < 20 * 15
    assert first.board.living == second.board.living


def test_initialize_random_density_bounds(simulator):
    assert simulator.initialize_random(0.0, seed=1) == 0
    assert simulator.initialize_random(1.0, seed=1) == 100
