import random

from tour_ga.data import generate_cities
from tour_ga.distances import DistanceTable
from tour_ga.evolutionary import EvolutionConfig, EvolutionarySearch


def main():
    cfg = EvolutionConfig(population_size=12, cities_count=15, random_seed=123)
    rng = random.Random(cfg.random_seed)
    cities = generate_cities(cfg.cities_count, rng, width=cfg.map_width)
    table = DistanceTable.from_cities(cities)

    search = EvolutionarySearch(cfg, table, rng=rng)
    search.seed()
    generations = 5
    for g in range(generations):
        search.step()
        print(f"gen {g+1}: best={search.best.nodes} length={search.best.fitness:.2f}")


if __name__ == "__main__":
    main()
