"""Pygame-based grid renderer for Game of Life visualization."""

import pygame
from dataclasses import dataclass
from typing import Tuple

from sparse_life.config import (
    LifeConfig,
    ALIVE_COLOR,
    DEAD_COLOR,
    BACKGROUND_COLOR,
)
from sparse_life.models.board import Board, Cell
from sparse_life.models.life_stats import LifeStats
from sparse_life.renderers.stats_panel import StatsPanel


@dataclass
class RenderResult:
    """Result of a render call with user input information."""

    should_quit: bool = False
    toggle_pause: bool = False
    step_once: bool = False
    reset: bool = False
    speed_up: bool = False
    speed_down: bool = False


class PygameGridRenderer:
    """
    Renders the board in a window with an optional stats sidebar.

    Dead cells are drawn as a dim grid, living cells on top of them; only
    the living set is walked for the bright cells.
    """

    def __init__(self, config: LifeConfig):
        """
        Initialize the pygame renderer.

        Args:
            config: Session configuration.
        """
        self.config = config
        self.cell_size = config.cell_size

        pygame.init()
        pygame.display.set_caption("sparse_life")

        self.screen = pygame.display.set_mode((config.window_width, config.window_height))

        if config.show_stats:
            self.stats_panel = StatsPanel(
                self.screen,
                x_offset=config.grid_pixel_width,
                width=config.window_width - config.grid_pixel_width,
                height=config.window_height,
            )
        else:
            self.stats_panel = None

        self.clock = pygame.time.Clock()

    def cell_rect(self, cell: Cell) -> Tuple[int, int, int, int]:
        """Pixel rectangle of a cell, leaving a 1px gap for the grid effect."""
        x, y = cell
        return (
            x * self.cell_size,
            y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def render(
        self,
        board: Board,
        stats: LifeStats,
        paused: bool = False,
    ) -> RenderResult:
        """
        Render the complete visualization frame.

        Args:
            board: Board to draw.
            stats: Current simulation statistics.
            paused: Whether simulation is paused.

        Returns:
            RenderResult with user input flags.
        """
        result = self.poll_events()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_cells(board)

        if self.stats_panel:
            self.stats_panel.render(stats, paused)

        if paused:
            self._draw_pause_overlay()

        pygame.display.flip()
        self.clock.tick(self.config.fps)

        return result

    def poll_events(self) -> RenderResult:
        """Translate pending pygame events into a RenderResult."""
        result = RenderResult()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result.should_quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    result.should_quit = True
                elif event.key == pygame.K_SPACE:
                    result.toggle_pause = True
                elif event.key == pygame.K_n or event.key == pygame.K_RIGHT:
                    result.step_once = True
                elif event.key == pygame.K_r:
                    result.reset = True
                elif event.key == pygame.K_UP or event.key == pygame.K_EQUALS:
                    result.speed_up = True
                elif event.key == pygame.K_DOWN or event.key == pygame.K_MINUS:
                    result.speed_down = True
        return result

    def _draw_cells(self, board: Board) -> None:
        """Draw the dead grid, then every living cell."""
        for y in range(board.height):
            for x in range(board.width):
                pygame.draw.rect(self.screen, DEAD_COLOR, self.cell_rect((x, y)))

        for cell in board.living_cells:
            pygame.draw.rect(self.screen, ALIVE_COLOR, self.cell_rect(cell))

    def _draw_pause_overlay(self) -> None:
        """Draw a semi-transparent pause indicator."""
        overlay = pygame.Surface(
            (self.config.grid_pixel_width, self.config.grid_pixel_height),
            pygame.SRCALPHA,
        )
        overlay.fill((0, 0, 0, 100))
        self.screen.blit(overlay, (0, 0))

        font = pygame.font.SysFont("monospace", 32, bold=True)
        text = font.render("PAUSED", True, (255, 255, 255))
        text_rect = text.get_rect(
            center=(
                self.config.grid_pixel_width // 2,
                self.config.grid_pixel_height // 2,
            )
        )
        self.screen.blit(text, text_rect)

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
