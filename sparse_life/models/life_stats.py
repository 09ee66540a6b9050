"""Generation statistics model."""

from dataclasses import dataclass


@dataclass
class LifeStats:
    """Statistics for a running simulation."""

    generation: int = 0
    population: int = 0

    # Changes made by the most recent step
    births: int = 0
    deaths: int = 0

    # Running totals
    total_births: int = 0
    total_deaths: int = 0
    peak_population: int = 0

    def record_step(self, births: int, deaths: int, population: int) -> None:
        """Record the outcome of one generation."""
        self.generation += 1
        self.births = births
        self.deaths = deaths
        self.total_births += births
        self.total_deaths += deaths
        self.observe_population(population)

    def observe_population(self, population: int) -> None:
        """Update population after a step or a direct edit."""
        self.population = population
        if population > self.peak_population:
            self.peak_population = population

    @property
    def net_change(self) -> int:
        """Population change caused by the most recent step."""
        return self.births - self.deaths

    def reset(self) -> None:
        """Reset all statistics."""
        self.generation = 0
        self.population = 0
        self.births = 0
        self.deaths = 0
        self.total_births = 0
        self.total_deaths = 0
        self.peak_population = 0
