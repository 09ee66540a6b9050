"""Renderers package for sparse_life.

The pygame renderers are imported from their own modules so the terminal
path does not initialize pygame.
"""

from sparse_life.renderers.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
