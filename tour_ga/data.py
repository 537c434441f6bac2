import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Union

import networkx as nx
import numpy as np
import tsplib95
from tsplib95.exceptions import TsplibError

from .errors import MapFileError, MapFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class City:
    id: int
    x: int
    y: int

    def distance_to(self, other: "City") -> float:
        return float(np.hypot(self.x - other.x, self.y - other.y))


def generate_cities(count: int, rng: random.Random, width: int = 100) -> List[City]:
    """Place `count` cities at integer coordinates drawn uniformly from 1..width."""
    return [City(id=i, x=rng.randint(1, width), y=rng.randint(1, width)) for i in range(count)]


def parse_map(text: str) -> List[City]:
    tokens = text.split()
    if not tokens:
        raise MapFormatError("map is empty")
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise MapFormatError(f"map contains a non-integer token: {exc}") from None
    count = values[0]
    if count < 0:
        raise MapFormatError(f"negative city count {count}")
    coords = values[1:]
    if len(coords) < 2 * count:
        raise MapFormatError(
            f"map declares {count} cities but holds {len(coords) // 2} coordinate pairs"
        )
    return [City(id=i, x=coords[2 * i], y=coords[2 * i + 1]) for i in range(count)]


def _load_tsplib(path: Path) -> List[City]:
    try:
        problem = tsplib95.load(str(path))
    except TsplibError as exc:
        raise MapFormatError(f"{path} is not a valid TSPLIB file: {exc}") from exc
    if not problem.node_coords:
        raise MapFormatError(f"{path} has no NODE_COORD_SECTION")
    cities = []
    for i, node in enumerate(sorted(problem.node_coords)):
        x, y = problem.node_coords[node][:2]
        cities.append(City(id=i, x=int(round(x)), y=int(round(y))))
    return cities


def load_map(path: PathLike) -> List[City]:
    """Read cities from a plain-text map, or from a TSPLIB file if it ends in .tsp."""
    path = Path(path)
    try:
        if path.suffix.lower() == ".tsp":
            cities = _load_tsplib(path)
        else:
            cities = parse_map(path.read_text())
    except UnicodeDecodeError as exc:
        raise MapFormatError(f"map file '{path}' is not text: {exc.reason}") from exc
    except OSError as exc:
        raise MapFileError(f"couldn't open map file '{path}': {exc.strerror or exc}") from exc
    logger.debug("loaded %d cities from %s", len(cities), path)
    return cities


def save_map(cities: Sequence[City], path: PathLike) -> None:
    lines = [str(len(cities))]
    lines.extend(f"{c.x} {c.y}" for c in cities)
    Path(path).write_text("\n".join(lines) + "\n")


def tour_graph(cities: Sequence[City], nodes: Iterable[int]) -> nx.DiGraph:
    """Directed graph of the cities with one edge per consecutive pair of the (open) tour."""
    graph = nx.DiGraph()
    for city in cities:
        graph.add_node(city.id, label=city.id, pos=f"{city.x},{city.y}!")
    nodes = list(nodes)
    for order, (a, b) in enumerate(zip(nodes[:-1], nodes[1:])):
        graph.add_edge(a, b, order=order)
    return graph


def format_dot(graph: nx.DiGraph) -> str:
    out = ["digraph {"]
    for node, attrs in graph.nodes(data=True):
        out.append(f"\t{node} [")
        out.append(f"\t\tlabel = {attrs.get('label', node)}")
        out.append(f"\t\tpos = \"{attrs['pos']}\"")
        out.append("\t]")
    for a, b, _ in sorted(graph.edges(data="order", default=0), key=lambda e: e[2]):
        out.append(f"\t{a} -> {b}")
    out.append("}")
    return "\n".join(out) + "\n"


def write_dot(graph: nx.DiGraph, path: PathLike) -> None:
    Path(path).write_text(format_dot(graph))
