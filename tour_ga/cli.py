import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List

from tour_ga.data import City, generate_cities, load_map, tour_graph, write_dot
from tour_ga.distances import DistanceTable
from tour_ga.errors import ConfigurationError, MapFileError, MapFormatError
from tour_ga.evolutionary import EvolutionConfig, EvolutionarySearch

logger = logging.getLogger("tour_ga")

# Dump the table and whole population only when both are this small.
DUMP_LIMIT = 10


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


def format_table(table: DistanceTable) -> str:
    lines = ["distance table: {"]
    for (a, b), d in table.items():
        lines.append(f"\t{a:>2} to {b:>2} is {d:.3f}")
    lines.append("}")
    return "\n".join(lines)


def format_population(search: EvolutionarySearch, cities: List[City]) -> str:
    lines = ["population: {"]
    for tour in search.population:
        nodes = " ".join(str(n) for n in tour.nodes)
        lines.append(f"\t[ {nodes} ] {tour.fitness:.3f}")
    lines.append("}")
    best = " ".join(f"{n}({cities[n].x},{cities[n].y})" for n in search.best.nodes)
    lines.append(f"best: [ {best} ] with length {search.best.fitness:.3f}")
    return "\n".join(lines)


def setup(
    cities: List[City], cfg: EvolutionConfig, rng: random.Random = None
) -> EvolutionarySearch:
    t0 = time.perf_counter()
    table = DistanceTable.from_cities(cities)
    t1 = time.perf_counter()
    logger.info(f"distance table ready: {len(table)} entries in {t1 - t0:.4f}s")
    search = EvolutionarySearch(cfg, table, rng=rng)
    search.seed()
    t2 = time.perf_counter()
    logger.info(f"first population ready: {len(search.population)} tours in {t2 - t1:.4f}s")
    return search


def evolve(search: EvolutionarySearch, cities: List[City], generations: int, output: Path) -> int:
    small = search.cities_count <= DUMP_LIMIT and search.cfg.population_size <= DUMP_LIMIT
    if small:
        print(format_table(search.table))
        print(format_population(search, cities))

    def report(s: EvolutionarySearch) -> None:
        st = s.stats()
        logger.info(
            f"gen {st['generation']}: best={st['best_ever']:.2f} "
            f"population best={st['best']:.2f} mean={st['mean']:.2f}"
        )
        if small:
            print(format_population(s, cities))

    t0 = time.perf_counter()
    best = search.run(generations, callback=report)
    logger.info(f"{generations} generations in {time.perf_counter() - t0:.2f}s")
    print(f"Final stats after {generations} generations")
    print(format_population(search, cities))

    try:
        write_dot(tour_graph(cities, best.nodes), output)
    except OSError as exc:
        logger.error(f"couldn't open file '{output}': {exc.strerror or exc}")
        return 1
    logger.info(f"graph of best tour (length {best.fitness:.2f}) written to {output}")
    return 0


def _config(args, cities_count: int) -> EvolutionConfig:
    return EvolutionConfig(
        population_size=args.population,
        mutation_chance=args.mutation_chance,
        random_seed=args.seed,
        cities_count=cities_count,
    )


def auto(args) -> int:
    cfg = _config(args, args.cities)
    t0 = time.perf_counter()
    rng = cfg.make_rng()
    cities = generate_cities(cfg.cities_count, rng, width=cfg.map_width)
    logger.info(f"generated {len(cities)} cities in {time.perf_counter() - t0:.4f}s")
    search = setup(cities, cfg, rng)
    return evolve(search, cities, args.generations, Path(args.output))


def manual(args) -> int:
    t0 = time.perf_counter()
    cities = load_map(args.path)
    logger.info(f"loaded {len(cities)} cities from {args.path} in {time.perf_counter() - t0:.4f}s")
    cfg = _config(args, max(len(cities), 2))
    search = setup(cities, cfg)
    return evolve(search, cities, args.generations, Path(args.output))


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--population", type=int, default=40)
    parser.add_argument("--generations", type=int, default=100)
    parser.add_argument("--mutation-chance", type=float, default=0.2)
    parser.add_argument("--seed", type=int, default=None, help="fix the random source")
    parser.add_argument("--output", default="graph.dot", help="DOT file for the best tour")
    parser.add_argument("-v", "--verbose", action="store_true")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Genetic TSP solver")
    subparsers = parser.add_subparsers(dest="command", required=True)

    auto_parser = subparsers.add_parser("auto", help="Evolve tours over randomly placed cities")
    auto_parser.add_argument("--cities", type=int, default=10)
    _add_common(auto_parser)
    auto_parser.set_defaults(func=auto)

    map_parser = subparsers.add_parser("map", help="Evolve tours over cities read from a map file")
    map_parser.add_argument("path", help="plain-text map (count, then x y pairs) or TSPLIB .tsp")
    _add_common(map_parser)
    map_parser.set_defaults(func=manual)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except (ConfigurationError, MapFileError, MapFormatError) as exc:
        logger.error(str(exc))
        return 2


if __name__ == "__main__":
    sys.exit(main())
