import io

import pytest

from sparse_life.config import LifeConfig
from sparse_life.errors import ConfigurationError
from sparse_life.main import (
    create_config_from_args,
    main,
    parse_args,
    read_input,
    run_repl,
    seed_simulator,
)
from sparse_life.simulation.simulator import Simulator


def run_session(text: str, config: LifeConfig = None) -> str:
    config = config or LifeConfig(anim_delay=0.0)
    stdout = io.StringIO()
    run_repl(Simulator(config), stdin=io.StringIO(text), stdout=stdout)
    return stdout.getvalue()


def test_parse_args_defaults():
    args = parse_args([])
    assert args.mode == "repl"
    assert args.grid == "30x30"
    assert args.pattern == "none"
    assert args.log_level == "WARNING"


def test_create_config_from_args():
    args = parse_args(["--grid", "80X60", "--fps", "20", "--no-stats", "--anim-delay", "0"])
    config = create_config_from_args(args)
    assert config.grid_width == 80
    assert config.grid_height == 60
    assert config.fps == 20
    assert config.show_stats is False
    assert config.anim_delay == 0


@pytest.mark.parametrize("grid", ["80", "axb", "10x10x10"])
def test_bad_grid_format(grid):
    with pytest.raises(ConfigurationError) as excinfo:
        create_config_from_args(parse_args(["--grid", grid]))
    assert excinfo.value.config_key == "grid"


def test_zero_grid_rejected():
    with pytest.raises(ConfigurationError):
        create_config_from_args(parse_args(["--grid", "0x10"]))


def test_unknown_pattern_rejected_by_parser():
    with pytest.raises(SystemExit):
        parse_args(["--pattern", "spaceship"])


def test_seed_simulator():
    simulator = Simulator(LifeConfig(grid_width=10, grid_height=10))
    seed_simulator(simulator, "none")
    assert simulator.board.population == 0

    seed_simulator(simulator, "glider")
    assert simulator.board.population == 5

    seed_simulator(simulator, "random", seed=3)
    assert simulator.board.population > 0


def test_read_input_prompts_and_strips():
    stdout = io.StringIO()
    assert read_input(io.StringIO("  next \n"), stdout, "> ") == "next"
    assert stdout.getvalue() == "> "
    assert read_input(io.StringIO(""), stdout, "> ") is None


def test_repl_session():
    out = run_session("set 1 2 true\nset 2 2 true\nset 3 2 true\nnext\nget 2 1\nget 1 2\nexit\n")
    assert out == "> " * 5 + "true\n" + "> false\n" + "> Bye!\n"


def test_repl_stops_at_end_of_input():
    out = run_session("next\n")
    assert out == "> > \nBye!\n"


def test_repl_ignores_commands_after_exit():
    out = run_session("exit\nget 0 0\n")
    assert out == "> Bye!\n"


def test_main_runs_repl(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("set 0 0 true\nget 0 0\nexit\n"))
    main(["--anim-delay", "0"])
    assert capsys.readouterr().out == "> > true\n> Bye!\n"


def test_main_exits_on_bad_config(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--grid", "oops"])
    assert excinfo.value.code == 1
    assert "Invalid grid format" in capsys.readouterr().out
