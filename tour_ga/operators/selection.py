from typing import Sequence, Tuple

from .base import Tour


def select_elite(population: Sequence[Tour]) -> Tuple[int, int]:
    """Indices of the two fittest tours; -1 where no such tour exists."""
    first = second = float("inf")
    first_idx = second_idx = -1
    for i, tour in enumerate(population):
        if tour.fitness < first:
            second, second_idx = first, first_idx
            first, first_idx = tour.fitness, i
        elif tour.fitness < second:
            second, second_idx = tour.fitness, i
    return first_idx, second_idx
