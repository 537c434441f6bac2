import logging
from typing import Iterable, Sequence

from .distances import DistanceTable
from .operators.base import Tour

logger = logging.getLogger(__name__)


def tour_length(table: DistanceTable, nodes: Sequence[int]) -> float:
    # Open path: no edge from the last city back to the first.
    dist = 0.0
    for i in range(1, len(nodes)):
        dist += table.distance(nodes[i - 1], nodes[i])
    return dist


class FitnessEvaluator:
    def __init__(self, table: DistanceTable):
        self.table = table

    def evaluate(self, tour: Tour, store: bool = False) -> float:
        length = tour_length(self.table, tour.nodes)
        if store:
            tour.fitness = length
        return length

    def update_best(self, population: Iterable[Tour], best: Tour) -> Tour:
        """
        Refresh the fitness of every tour and return the best tour seen so far.

        Each candidate is compared against the running best, so several
        improvements within one pass compound. The returned tour never aliases
        a population member.
        """
        for tour in population:
            self.evaluate(tour, store=True)
            if tour.fitness < best.fitness:
                logger.debug("best improved %.3f -> %.3f", best.fitness, tour.fitness)
                best = tour.copy()
        return best
