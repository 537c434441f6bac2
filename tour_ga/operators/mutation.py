import random

from .base import Tour


def mutate(tour: Tour, mutation_chance: float, rng: random.Random) -> Tour:
    """
    Swap mutation, in place.

    One draw per position; a draw strictly above `mutation_chance` swaps two
    uniformly chosen positions (possibly the same one). Higher values of
    `mutation_chance` therefore mean fewer swaps, and 1.0 disables mutation.
    """
    nodes = tour.nodes
    n = len(nodes)
    for _ in range(n):
        if rng.random() > mutation_chance:
            i = rng.randrange(n)
            j = rng.randrange(n)
            nodes[i], nodes[j] = nodes[j], nodes[i]
    tour.fitness = float("inf")
    return tour
