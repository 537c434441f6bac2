from .base import Tour, check_permutation, is_permutation
from .crossover import crossover
from .mutation import mutate
from .selection import select_elite

__all__ = [
    "Tour",
    "check_permutation",
    "is_permutation",
    "crossover",
    "mutate",
    "select_elite",
]
