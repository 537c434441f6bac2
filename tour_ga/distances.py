import logging
from typing import Dict, Iterator, Sequence, Tuple

import numpy as np

from .data import City
from .errors import MissingDistanceError

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]


def pair_key(a: int, b: int) -> Pair:
    return (a, b) if a < b else (b, a)


class DistanceTable:
    """
    Euclidean distance for every unordered pair of distinct cities,
    keyed by (smaller id, larger id). Read-only once built.
    """

    def __init__(self, distances: Dict[Pair, float], cities_count: int):
        self._dist = dict(distances)
        self._count = cities_count

    @classmethod
    def from_cities(cls, cities: Sequence[City]) -> "DistanceTable":
        ids = np.array([c.id for c in cities], dtype=np.int64)
        xs = np.array([c.x for c in cities], dtype=np.float64)
        ys = np.array([c.y for c in cities], dtype=np.float64)
        # Upper triangle only; the lower one is served through pair_key.
        rows, cols = np.triu_indices(len(cities), k=1)
        values = np.hypot(xs[rows] - xs[cols], ys[rows] - ys[cols])
        distances = {
            pair_key(int(ids[i]), int(ids[j])): float(d) for i, j, d in zip(rows, cols, values)
        }
        logger.debug("distance table built: %d entries for %d cities", len(distances), len(cities))
        return cls(distances, len(cities))

    @property
    def cities_count(self) -> int:
        return self._count

    def distance(self, a: int, b: int) -> float:
        try:
            return self._dist[pair_key(a, b)]
        except KeyError:
            raise MissingDistanceError(a, b) from None

    def __len__(self) -> int:
        return len(self._dist)

    def __contains__(self, pair) -> bool:
        a, b = pair
        return pair_key(a, b) in self._dist

    def items(self) -> Iterator[Tuple[Pair, float]]:
        return iter(sorted(self._dist.items()))
