"""Simulation package for Game of Life rules and seed patterns."""

from sparse_life.simulation.life_rules import LifeRules
from sparse_life.simulation.patterns import get_pattern, pattern_names, place_pattern

__all__ = ["LifeRules", "get_pattern", "pattern_names", "place_pattern"]
