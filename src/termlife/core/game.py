"""Conway's Game of Life run driver with automatic reseeding."""

from typing import Any, Deque, Dict, List, Optional, Tuple
from collections import deque
from dataclasses import dataclass
import numpy as np

from .grid import Grid

RESET_STAGNATION = "stagnation"
RESET_MAX_GENERATIONS = "max_generations"


@dataclass(frozen=True)
class LifeConfig:
    """Numeric parameters of a simulation process."""

    size: int = 60
    init_lives: int = 35
    init_neighbors: int = 2
    generations_till_reset: int = 150
    max_dead_generations: int = 10
    refresh_rate: int = 125  # milliseconds

    def __post_init__(self) -> None:
        errors = []
        for name in ("init_lives", "generations_till_reset", "max_dead_generations", "refresh_rate"):
            if getattr(self, name) < 0:
                errors.append(f"{name} must be non-negative")
        if not 0 <= self.init_neighbors < 4:
            errors.append("init_neighbors must be between 0 and 3")
        if errors:
            raise ValueError("; ".join(errors))

    @property
    def max_size(self) -> int:
        """Total number of cells on the grid."""
        return self.size * self.size

    @property
    def refresh_seconds(self) -> float:
        return self.refresh_rate / 1000


class GameOfLife:
    """Drives successive runs of the Game of Life on one grid.

    A run ends and the grid is reseeded when the population has been
    empty or unchanged for more than ``max_dead_generations`` ticks, or
    when the generation counter reaches ``generations_till_reset``.
    """

    def __init__(
        self,
        config: LifeConfig,
        grid: Optional[Grid] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """Initialize the driver.

        Args:
            config: Simulation parameters
            grid: Grid to drive; a new one of ``config.size`` is made if omitted
            rng: Random source for seeding; defaults to the grid's own
        """
        self.config = config
        self.grid = grid if grid is not None else Grid(config.size, rng=rng)
        self.rng = rng if rng is not None else self.grid.rng

        self.runs = 1
        self.generation = 0
        self.prev_population = 0
        self.dead_generations = 0
        self.last_reset_reason: Optional[str] = None
        self._population_history: Deque[int] = deque(maxlen=100)

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.num_live()

    @property
    def population_history(self) -> List[int]:
        """Populations of recent generations."""
        return list(self._population_history)

    def start(self) -> None:
        """Seed the first run."""
        self._reseed()

    def step(self) -> int:
        """Advance one generation.

        Returns:
            Population of the new generation
        """
        self.generation += 1
        self.grid.next()

        population = self.grid.num_live()
        self._population_history.append(population)
        return population

    def check_reset(self, population: int) -> Optional[str]:
        """Apply the reset policy after a step.

        The dead generation counter is bumped after the threshold test, so
        a stagnating run resets one tick later than ``max_dead_generations``
        alone would suggest.

        Args:
            population: Population returned by the last step()

        Returns:
            Reason of the reset that happened, or None
        """
        reason = None

        if population == 0 or population == self.prev_population:
            if self.dead_generations > self.config.max_dead_generations:
                self.reset()
                reason = RESET_STAGNATION
            self.dead_generations += 1

        if self.generation == self.config.generations_till_reset:
            self.reset()
            reason = RESET_MAX_GENERATIONS

        self.prev_population = population
        self.last_reset_reason = reason
        return reason

    def tick(self) -> Tuple[int, Optional[str]]:
        """Step once and apply the reset policy."""
        population = self.step()
        return population, self.check_reset(population)

    def reset(self) -> None:
        """End the current run and seed a new one on a cleared grid."""
        self.runs += 1
        self.generation = 0
        self.dead_generations = 0
        self._population_history.clear()
        self._reseed()

    def _reseed(self) -> None:
        self.grid.clear()
        self.grid.seed(self.config.init_lives, self.config.init_neighbors, rng=self.rng)
        self._population_history.append(self.grid.num_live())

    def status_lines(self, population: Optional[int] = None) -> List[str]:
        """Status text shown under the grid.

        Args:
            population: Population to report; the grid's current one if omitted
        """
        if population is None:
            population = self.population
        return [
            f"Runs: {self.runs}",
            f"Generation: {self.generation}",
            f"Total population: {population}/{self.config.max_size}",
        ]

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        return float(np.mean(np.diff(recent_history)))

    def get_statistics(self) -> Dict[str, Any]:
        """Get a snapshot of the current run."""
        population = self.population
        bbox = self.grid.get_bounding_box()

        return {
            "runs": self.runs,
            "generation": self.generation,
            "dead_generations": self.dead_generations,
            "population": population,
            "max_size": self.config.max_size,
            "population_density": population / self.config.max_size if self.config.max_size else 0.0,
            "population_change_rate": self.get_population_change_rate(),
            "tracked_cells": self.grid.tracked_count,
            "bounding_box": bbox,
            "last_reset_reason": self.last_reset_reason,
        }
