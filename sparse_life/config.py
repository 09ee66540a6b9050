"""Configuration and constants for sparse_life."""

from dataclasses import dataclass
from typing import Tuple

from sparse_life.errors import ConfigurationError

# ==============================================================================
# Color Scheme
# ==============================================================================

ALIVE_COLOR: Tuple[int, int, int] = (255, 210, 80)
DEAD_COLOR: Tuple[int, int, int] = (30, 30, 40)
BACKGROUND_COLOR: Tuple[int, int, int] = (20, 20, 20)
STATS_PANEL_BG: Tuple[int, int, int] = (30, 30, 40)
TEXT_COLOR: Tuple[int, int, int] = (220, 220, 220)
TEXT_HIGHLIGHT_COLOR: Tuple[int, int, int] = (255, 255, 255)

# ==============================================================================
# Layout Constants
# ==============================================================================

STATS_PANEL_WIDTH: int = 220
STATS_PANEL_MIN_HEIGHT: int = 360
DEFAULT_CELL_SIZE: int = 16
MIN_CELL_SIZE: int = 4
MAX_CELL_SIZE: int = 40

# ==============================================================================
# Terminal Constants
# ==============================================================================

DEFAULT_PROMPT: str = "> "
ALIVE_GLYPH: str = "\U0001F41E"  # lady beetle
DEAD_GLYPH: str = "  "
# The glyph above occupies two terminal columns
GLYPH_COLUMNS: int = 2
EMPTY_BOARD_MESSAGE: str = "There are no living cells"

# ==============================================================================
# Simulation Constants
# ==============================================================================

DEFAULT_GRID_WIDTH: int = 30
DEFAULT_GRID_HEIGHT: int = 30
DEFAULT_FPS: int = 10
DEFAULT_ANIM_DELAY: float = 0.1  # seconds between frames of `anim n`
DEFAULT_DENSITY: float = 0.3
MIN_FPS: int = 1
MAX_FPS: int = 60


# ==============================================================================
# Configuration Dataclass
# ==============================================================================


@dataclass
class LifeConfig:
    """Configuration for a sparse_life session."""

    # Grid dimensions
    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT

    # Window display settings
    cell_size: int = DEFAULT_CELL_SIZE
    fps: int = DEFAULT_FPS
    show_stats: bool = True

    # Terminal settings
    prompt: str = DEFAULT_PROMPT
    alive_glyph: str = ALIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH
    glyph_columns: int = GLYPH_COLUMNS
    anim_delay: float = DEFAULT_ANIM_DELAY

    # Seeding
    density: float = DEFAULT_DENSITY

    def validate(self) -> "LifeConfig":
        """
        Check every field for a usable value.

        Returns:
            This config, so calls can be chained.

        Raises:
            ConfigurationError: If any value is out of range.
        """
        if self.grid_width <= 0:
            raise ConfigurationError("grid_width", f"must be positive, got {self.grid_width}")
        if self.grid_height <= 0:
            raise ConfigurationError(
                "grid_height", f"must be positive, got {self.grid_height}"
            )
        if not MIN_CELL_SIZE <= self.cell_size <= MAX_CELL_SIZE:
            raise ConfigurationError(
                "cell_size",
                f"must be between {MIN_CELL_SIZE} and {MAX_CELL_SIZE}, got {self.cell_size}",
            )
        if not MIN_FPS <= self.fps <= MAX_FPS:
            raise ConfigurationError(
                "fps", f"must be between {MIN_FPS} and {MAX_FPS}, got {self.fps}"
            )
        if self.anim_delay < 0:
            raise ConfigurationError(
                "anim_delay", f"must not be negative, got {self.anim_delay}"
            )
        if not 0.0 <= self.density <= 1.0:
            raise ConfigurationError(
                "density", f"must be between 0.0 and 1.0, got {self.density}"
            )
        if self.glyph_columns <= 0:
            raise ConfigurationError(
                "glyph_columns", f"must be positive, got {self.glyph_columns}"
            )
        return self

    @property
    def grid_pixel_width(self) -> int:
        """Width of the grid area in pixels."""
        return self.grid_width * self.cell_size

    @property
    def grid_pixel_height(self) -> int:
        """Height of the grid area in pixels."""
        return self.grid_height * self.cell_size

    @property
    def window_width(self) -> int:
        """Total window width including stats panel."""
        if self.show_stats:
            return self.grid_pixel_width + STATS_PANEL_WIDTH
        return self.grid_pixel_width

    @property
    def window_height(self) -> int:
        """Total window height."""
        if self.show_stats:
            return max(self.grid_pixel_height, STATS_PANEL_MIN_HEIGHT)
        return self.grid_pixel_height
