import enum
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np

from .distances import DistanceTable
from .errors import ConfigurationError
from .evaluation import FitnessEvaluator
from .operators import Tour, crossover, mutate, select_elite

logger = logging.getLogger(__name__)


@dataclass
class EvolutionConfig:
    population_size: int = 40
    mutation_chance: float = 0.2
    random_seed: Optional[int] = None
    # Only used when cities are generated rather than loaded.
    cities_count: int = 10
    map_width: int = 100

    def __post_init__(self):
        if self.population_size < 2:
            raise ConfigurationError(
                f"population_size must be at least 2, got {self.population_size}"
            )
        if self.cities_count < 2:
            raise ConfigurationError(f"cities_count must be at least 2, got {self.cities_count}")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ConfigurationError(
                f"mutation_chance must lie in [0, 1], got {self.mutation_chance}"
            )
        if self.map_width < 1:
            raise ConfigurationError(f"map_width must be positive, got {self.map_width}")

    def make_rng(self) -> random.Random:
        # None seeds from system entropy.
        return random.Random(self.random_seed)


class SearchState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"
    EVALUATING = "evaluating"
    REPRODUCING = "reproducing"
    READY = "ready"


class EvolutionarySearch:
    """
    Elitist GA over a fixed city set.

    Every generation breeds the whole next population from the two fittest
    tours of the current one; the best tour ever seen is kept separately.
    """

    def __init__(
        self,
        config: EvolutionConfig,
        table: DistanceTable,
        rng: random.Random = None,
    ):
        if table.cities_count < 2:
            raise ConfigurationError(
                f"at least 2 cities are required, got {table.cities_count}"
            )
        self.cfg = config
        self.table = table
        self.rng = rng or config.make_rng()
        self.evaluator = FitnessEvaluator(table)
        self.population: List[Tour] = []
        self.best: Tour = Tour()
        self.generation = 0
        self.state = SearchState.UNINITIALIZED

    @property
    def cities_count(self) -> int:
        return self.table.cities_count

    def seed(self) -> None:
        seed_tour = Tour.identity(self.cities_count)
        self.evaluator.evaluate(seed_tour, store=True)
        population = [seed_tour]
        for _ in range(self.cfg.population_size - 1):
            shuffled = seed_tour.copy()
            self.rng.shuffle(shuffled.nodes)
            population.append(shuffled)
        self.population = population
        self.best = seed_tour.copy()
        self.generation = 0
        self.state = SearchState.SEEDED
        self._evaluate()
        logger.debug(
            "seeded %d tours, initial best %.3f", len(self.population), self.best.fitness
        )

    def _evaluate(self) -> None:
        self.state = SearchState.EVALUATING
        self.best = self.evaluator.update_best(self.population, self.best)
        self.state = SearchState.READY

    def _reproduce(self) -> List[Tour]:
        self.state = SearchState.REPRODUCING
        first, second = select_elite(self.population)
        if first < 0 or second < 0:
            raise ConfigurationError("an elite pair needs at least 2 tours in the population")
        parent_a = self.population[first]
        parent_b = self.population[second]
        next_gen: List[Tour] = []
        while len(next_gen) < self.cfg.population_size:
            child_a, child_b = crossover(parent_a, parent_b)
            mutate(child_a, self.cfg.mutation_chance, self.rng)
            mutate(child_b, self.cfg.mutation_chance, self.rng)
            next_gen.append(child_a)
            next_gen.append(child_b)
        # Odd sizes overshoot by one child; keep insertion order.
        return next_gen[: self.cfg.population_size]

    def step(self) -> None:
        if self.state is SearchState.UNINITIALIZED:
            self.seed()
        self._evaluate()
        self.population = self._reproduce()
        self._evaluate()
        self.generation += 1

    def run(
        self, generations: int, callback: Callable[["EvolutionarySearch"], None] = None
    ) -> Tour:
        for _ in range(generations):
            self.step()
            if callback is not None:
                callback(self)
        return self.best

    def stats(self) -> Dict[str, float]:
        """Population best/mean/worst for the current generation, plus the best ever seen."""
        fitness = np.array([t.fitness for t in self.population], dtype=np.float64)
        if fitness.size == 0:
            inf = float("inf")
            return {
                "generation": self.generation,
                "best": inf,
                "mean": inf,
                "worst": inf,
                "best_ever": float(self.best.fitness),
            }
        return {
            "generation": self.generation,
            "best": float(fitness.min()),
            "mean": float(fitness.mean()),
            "worst": float(fitness.max()),
            "best_ever": float(self.best.fitness),
        }
