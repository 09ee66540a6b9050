"""
Pytest configuration and shared fixtures for the sparse_life test suite.
"""

import io
import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'sparse_life' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# pygame tests draw to an off-screen display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from sparse_life.config import LifeConfig  # noqa: E402
from sparse_life.models.board import Board  # noqa: E402
from sparse_life.renderers.terminal import TerminalRenderer  # noqa: E402
from sparse_life.simulation.simulator import Simulator  # noqa: E402


@pytest.fixture
def config():
    """Small configuration with no animation delay."""
    return LifeConfig(grid_width=10, grid_height=10, anim_delay=0.0)


@pytest.fixture
def board():
    """Empty 10x10 board."""
    return Board(10, 10)


@pytest.fixture
def simulator(config):
    """Simulator over an empty board of the configured size."""
    return Simulator(config)


@pytest.fixture
def output():
    """In-memory text stream."""
    return io.StringIO()


@pytest.fixture
def plain_renderer(output, config):
    """Terminal renderer forced into plain text mode."""
    return TerminalRenderer(output, config, ansi=False)
