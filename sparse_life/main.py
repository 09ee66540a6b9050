"""Main entry point for sparse_life."""

import argparse
import logging
import sys
from typing import Optional, TextIO

from sparse_life.commands import CommandProcessor, CommandResult
from sparse_life.config import DEFAULT_DENSITY, LifeConfig
from sparse_life.errors import ConfigurationError, PatternError
from sparse_life.renderers.terminal import TerminalRenderer
from sparse_life.simulation.patterns import pattern_names
from sparse_life.simulation.simulator import Simulator

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life on a sparse board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  repl    - Interactive command loop on stdin/stdout (default)
  window  - Animated pygame window

Examples:
  # Interactive session on the default 30x30 board
  python -m sparse_life

  # Start from a glider on a larger board
  python -m sparse_life --grid 80x60 --pattern glider

  # Animate a glider gun in a window
  python -m sparse_life --mode window --grid 60x40 --pattern glider_gun
        """,
    )

    parser.add_argument(
        "--mode",
        "-m",
        choices=["repl", "window"],
        default="repl",
        help="Run mode: repl or window (default: repl)",
    )
    parser.add_argument(
        "--grid",
        type=str,
        default="30x30",
        help="Grid dimensions as WIDTHxHEIGHT (e.g., 30x30)",
    )
    parser.add_argument(
        "--pattern",
        type=str,
        default="none",
        choices=["none", "random"] + pattern_names(),
        help="Initial pattern for the board",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_DENSITY,
        help="Cell density for random pattern (0.0-1.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random pattern",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=16,
        help="Size of each cell in pixels (window mode)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=10,
        help="Target frames per second (window mode)",
    )
    parser.add_argument(
        "--anim-delay",
        type=float,
        default=0.1,
        help="Seconds between frames of the 'anim' command (repl mode)",
    )
    parser.add_argument(
        "--no-stats",
        action="store_true",
        help="Hide the stats panel (window mode)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for messages on stderr",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> LifeConfig:
    """
    Create a LifeConfig from parsed arguments.

    Raises:
        ConfigurationError: If the grid format or any value is invalid.
    """
    try:
        width, height = map(int, args.grid.lower().split("x"))
    except ValueError:
        raise ConfigurationError(
            "grid", f"Invalid grid format '{args.grid}'. Use WIDTHxHEIGHT (e.g., 30x30)"
        ) from None

    return LifeConfig(
        grid_width=width,
        grid_height=height,
        cell_size=args.cell_size,
        fps=args.fps,
        show_stats=not args.no_stats,
        anim_delay=args.anim_delay,
        density=args.density,
    ).validate()


def seed_simulator(simulator: Simulator, pattern: str, seed: Optional[int] = None) -> None:
    """Apply the initial pattern chosen on the command line."""
    if pattern == "none":
        return
    if pattern == "random":
        simulator.initialize_random(simulator.config.density, seed)
    else:
        simulator.initialize_pattern(pattern)


def read_input(stdin: TextIO, stdout: TextIO, prompt: str) -> Optional[str]:
    """
    Prompt for and read one command line.

    Returns:
        The stripped line, or None at end of input.
    """
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def run_repl(
    simulator: Simulator,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """
    Run the interactive command loop until `exit` or end of input.

    Args:
        simulator: Simulator the commands act on.
        stdin: Stream to read commands from (default: sys.stdin).
        stdout: Stream for prompts and command output (default: sys.stdout).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    config = simulator.config
    renderer = TerminalRenderer(stdout, config)
    processor = CommandProcessor(simulator, config, stdout, renderer)

    while True:
        line = read_input(stdin, stdout, config.prompt)
        if line is None:
            stdout.write("\n")
            break
        if processor.process(line) is CommandResult.EXIT:
            break

    stdout.write("Bye!\n")
    stdout.flush()


def run_window(simulator: Simulator, pattern: str, seed: Optional[int] = None) -> None:
    """
    Run the simulation as an animated pygame window.

    Args:
        simulator: Simulator to animate.
        pattern: Initial pattern name, used again on reset.
        seed: Seed for the random pattern.
    """
    from sparse_life.renderers.pygame_grid import PygameGridRenderer

    config = simulator.config

    print("=" * 60)
    print("sparse_life - Window Mode")
    print("=" * 60)
    print(f"Grid: {config.grid_width}x{config.grid_height}")
    print(f"Pattern: {pattern}")
    print(f"FPS: {config.fps}")
    print("=" * 60)
    print("Controls:")
    print("  SPACE     - Pause/Resume")
    print("  N / →     - Step once (when paused)")
    print("  R         - Reset simulation")
    print("  ↑ / ↓     - Speed up/down")
    print("  Q / ESC   - Quit")
    print("=" * 60)

    renderer = PygameGridRenderer(config)

    running = True
    paused = False

    try:
        while running:
            result = renderer.render(simulator.board, simulator.stats, paused)

            if result.should_quit:
                running = False
            elif result.toggle_pause:
                paused = not paused
                print(f"{'Paused' if paused else 'Resumed'}")
            elif result.step_once and paused:
                simulator.step()
            elif result.reset:
                simulator.clear()
                seed_simulator(simulator, pattern, seed)
                print("Reset simulation")
            elif result.speed_up:
                config.fps = min(60, config.fps + 2)
                print(f"Speed: {config.fps} FPS")
            elif result.speed_down:
                config.fps = max(1, config.fps - 2)
                print(f"Speed: {config.fps} FPS")

            if not paused:
                simulator.step()

    finally:
        renderer.cleanup()

    print(f"\nSimulation ended at generation {simulator.generation}")
    print(f"Final population: {simulator.stats.population}")


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = create_config_from_args(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    simulator = Simulator(config)
    try:
        seed_simulator(simulator, args.pattern, args.seed)
    except PatternError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    logger.info(f"Starting {args.mode} mode on a {config.grid_width}x{config.grid_height} board")

    if args.mode == "repl":
        run_repl(simulator)
    elif args.mode == "window":
        run_window(simulator, args.pattern, args.seed)


if __name__ == "__main__":
    main()
