"""Stats panel renderer for generation statistics."""

import pygame
from typing import Optional

from sparse_life.config import (
    STATS_PANEL_BG,
    TEXT_COLOR,
    TEXT_HIGHLIGHT_COLOR,
    ALIVE_COLOR,
)
from sparse_life.models.life_stats import LifeStats


class StatsPanel:
    """
    Renders the statistics sidebar panel.

    Displays:
    - Current generation and population
    - Births and deaths of the last step, plus running totals
    - Keyboard controls
    """

    def __init__(
        self,
        screen: pygame.Surface,
        x_offset: int,
        width: int,
        height: int,
    ):
        """
        Initialize the stats panel.

        Args:
            screen: Pygame surface to draw on.
            x_offset: X position where panel starts.
            width: Width of the panel.
            height: Height of the panel.
        """
        self.screen = screen
        self.x = x_offset
        self.width = width
        self.height = height

        pygame.font.init()
        self.title_font = pygame.font.SysFont("monospace", 16, bold=True)
        self.header_font = pygame.font.SysFont("monospace", 14, bold=True)
        self.font = pygame.font.SysFont("monospace", 12)

        self.padding = 10
        self.line_height = 18
        self.section_gap = 10

    def render(self, stats: LifeStats, paused: bool = False) -> None:
        """
        Render the stats panel.

        Args:
            stats: Current simulation statistics.
            paused: Whether simulation is paused.
        """
        pygame.draw.rect(
            self.screen,
            STATS_PANEL_BG,
            (self.x, 0, self.width, self.height),
        )
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x, 0),
            (self.x, self.height),
            2,
        )

        y = self.padding
        y = self._draw_text("═══ Life ═══", y, self.title_font, TEXT_HIGHLIGHT_COLOR, center=True)
        y += self.section_gap

        status = "PAUSED" if paused else "RUNNING"
        status_color = (255, 200, 0) if paused else (0, 255, 100)
        y = self._draw_text(f"Status: {status}", y, self.header_font, status_color)
        y += self.section_gap // 2

        y = self._draw_text(f"Generation: {stats.generation}", y, self.header_font)
        y = self._draw_text(f"Live Cells: {stats.population}", y, color=ALIVE_COLOR)
        y = self._draw_text(f"Peak: {stats.peak_population}", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        y = self._draw_text("─── Last step ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR)
        y = self._draw_text(f"  Births: {stats.births}", y)
        y = self._draw_text(f"  Deaths: {stats.deaths}", y)
        y = self._draw_text(f"  Net:    {stats.net_change:+d}", y)
        y += self.section_gap // 2

        y = self._draw_text("─── Totals ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR)
        y = self._draw_text(f"  Births: {stats.total_births}", y)
        y = self._draw_text(f"  Deaths: {stats.total_deaths}", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        y = self._draw_text("─── Controls ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR)
        y = self._draw_text("  SPACE: Pause/Resume", y)
        y = self._draw_text("  N/→: Step once", y)
        y = self._draw_text("  R: Reset", y)
        y = self._draw_text("  ↑/↓: Speed +/-", y)
        y = self._draw_text("  Q/ESC: Quit", y)

    def _draw_text(
        self,
        text: str,
        y: int,
        font: Optional[pygame.font.Font] = None,
        color: tuple = TEXT_COLOR,
        center: bool = False,
    ) -> int:
        """
        Draw text at the specified position.

        Returns:
            Y position after this text (for chaining).
        """
        if font is None:
            font = self.font

        surface = font.render(text, True, color)

        if center:
            x = self.x + (self.width - surface.get_width()) // 2
        else:
            x = self.x + self.padding

        self.screen.blit(surface, (x, y))
        return y + self.line_height

    def _draw_separator(self, y: int) -> int:
        """Draw a horizontal separator line."""
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x + self.padding, y),
            (self.x + self.width - self.padding, y),
            1,
        )
        return y + 5
