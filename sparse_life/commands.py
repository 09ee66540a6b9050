"""Text command layer mapping input lines to simulator calls.

Recognized commands:
    get 5 9            print whether a cell is alive
    set 5 9 true       set the state of a cell
    next               advance by one generation
    run 10             advance by n generations
    anim 10            advance by n generations, drawing after each
    print              draw the current board
    pattern glider 3 4 place a named pattern with its corner at x y
    clear              kill every cell
    stats              print generation statistics
    exit               leave the command loop
"""

import logging
import re
import time
from enum import Enum
from typing import Callable, List, TextIO, Tuple

from sparse_life.config import LifeConfig
from sparse_life.errors import PatternError
from sparse_life.renderers.terminal import TerminalRenderer
from sparse_life.simulation.patterns import place_pattern
from sparse_life.simulation.simulator import Simulator

logger = logging.getLogger(__name__)


class CommandResult(Enum):
    """What the command loop should do after a command."""

    CONTINUE = "continue"
    EXIT = "exit"


USAGE = """\
Use one of the following:

set x:int y:int v:bool   set the state of a cell e.g.: set 5 9 true
get x:int y:int          get the state of a cell e.g.: get 5 9
next                     advance the state by one step
run n:int                advance the state by n steps e.g.: run 10
anim n:int               advance the state by n steps and print the board after each step e.g.: anim 10
print                    display the current state
pattern name x:int y:int place a named pattern e.g.: pattern glider 3 4
clear                    kill every cell
stats                    show generation statistics
exit                     exit the application"""

# Regex patterns for each command, matched against the whole stripped line
COMMAND_PATTERNS = {
    # get 5 9
    "get": re.compile(r"get ([0-9]+) ([0-9]+)"),
    # set 5 9 true
    "set": re.compile(r"set ([0-9]+) ([0-9]+) (true|false)"),
    "next": re.compile(r"next"),
    # run 10
    "run": re.compile(r"run ([0-9]+)"),
    # anim 10
    "anim": re.compile(r"anim ([0-9]+)"),
    "print": re.compile(r"print"),
    # pattern glider 3 4
    "pattern": re.compile(r"pattern ([A-Za-z_]+) ([0-9]+) ([0-9]+)"),
    "clear": re.compile(r"clear"),
    "stats": re.compile(r"stats"),
    "exit": re.compile(r"exit"),
}

Handler = Callable[[re.Match[str]], CommandResult]


class CommandProcessor:
    """
    Dispatches command lines to a simulator.

    Holds no simulation state of its own: every command reads or mutates
    the simulator's board and writes its answer to the output stream.
    """

    def __init__(
        self,
        simulator: Simulator,
        config: LifeConfig,
        output: TextIO,
        renderer: TerminalRenderer,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the command processor.

        Args:
            simulator: Simulator whose board the commands act on.
            config: Session configuration.
            output: Stream for command output.
            renderer: Renderer used by `print` and `anim`.
            sleep: Function used to pause between animation frames.
        """
        self.simulator = simulator
        self.config = config
        self.output = output
        self.renderer = renderer
        self._sleep = sleep

        self._handlers: List[Tuple[str, Handler]] = [
            ("get", self._handle_get),
            ("set", self._handle_set),
            ("next", self._handle_next),
            ("run", self._handle_run),
            ("anim", self._handle_anim),
            ("print", self._handle_print),
            ("pattern", self._handle_pattern),
            ("clear", self._handle_clear),
            ("stats", self._handle_stats),
            ("exit", self._handle_exit),
        ]

    def process(self, line: str) -> CommandResult:
        """
        Run a single command line.

        Args:
            line: Raw input line; surrounding whitespace is ignored.

        Returns:
            CommandResult.EXIT for `exit`, CONTINUE otherwise.
        """
        line = line.strip()
        for name, handler in self._handlers:
            match = COMMAND_PATTERNS[name].fullmatch(line)
            if match:
                logger.debug(f"Dispatching '{name}' command: {line!r}")
                return handler(match)

        return self._handle_unknown(line)

    def _write(self, text: str) -> None:
        self.output.write(text + "\n")

    def _handle_get(self, match: re.Match[str]) -> CommandResult:
        cell = (int(match.group(1)), int(match.group(2)))
        self._write("true" if self.simulator.board.is_alive(cell) else "false")
        return CommandResult.CONTINUE

    def _handle_set(self, match: re.Match[str]) -> CommandResult:
        cell = (int(match.group(1)), int(match.group(2)))
        if match.group(3) == "true":
            self.simulator.board.spawn(cell)
        else:
            self.simulator.board.kill(cell)
        self.simulator.refresh()
        return CommandResult.CONTINUE

    def _handle_next(self, match: re.Match[str]) -> CommandResult:
        self.simulator.step()
        return CommandResult.CONTINUE

    def _handle_run(self, match: re.Match[str]) -> CommandResult:
        self.simulator.run(int(match.group(1)))
        return CommandResult.CONTINUE

    def _handle_anim(self, match: re.Match[str]) -> CommandResult:
        frames = int(match.group(1))
        for frame in range(frames):
            self.simulator.step()
            self.renderer.render(self.simulator.board)
            if self.config.anim_delay and frame < frames - 1:
                self._sleep(self.config.anim_delay)
        return CommandResult.CONTINUE

    def _handle_print(self, match: re.Match[str]) -> CommandResult:
        self.renderer.render(self.simulator.board)
        return CommandResult.CONTINUE

    def _handle_pattern(self, match: re.Match[str]) -> CommandResult:
        name = match.group(1)
        x, y = int(match.group(2)), int(match.group(3))
        try:
            placed = place_pattern(self.simulator.board, name, x, y)
        except PatternError as exc:
            self._write(str(exc))
            return CommandResult.CONTINUE
        self.simulator.refresh()
        logger.info(f"Placed pattern '{name}' at ({x}, {y}): {placed} cells")
        return CommandResult.CONTINUE

    def _handle_clear(self, match: re.Match[str]) -> CommandResult:
        self.simulator.clear()
        return CommandResult.CONTINUE

    def _handle_stats(self, match: re.Match[str]) -> CommandResult:
        stats = self.simulator.stats
        board = self.simulator.board
        self._write(f"generation: {stats.generation}")
        self._write(f"population: {stats.population} (peak {stats.peak_population})")
        self._write(f"last step:  +{stats.births} -{stats.deaths}")
        self._write(f"board:      {board.width}x{board.height}")
        return CommandResult.CONTINUE

    def _handle_exit(self, match: re.Match[str]) -> CommandResult:
        return CommandResult.EXIT

    def _handle_unknown(self, line: str) -> CommandResult:
        self._write(f"Unknown command: {line}")
        self._write(USAGE)
        return CommandResult.CONTINUE
