from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass
class Tour:
    nodes: List[int] = field(default_factory=list)
    # Stale until recomputed by the evaluator.
    fitness: float = float("inf")

    @classmethod
    def identity(cls, count: int) -> "Tour":
        return cls(nodes=list(range(count)))

    def copy(self) -> "Tour":
        return Tour(nodes=list(self.nodes), fitness=self.fitness)

    def __len__(self) -> int:
        return len(self.nodes)


def is_permutation(nodes: Sequence[int], count: int) -> bool:
    return len(nodes) == count and set(nodes) == set(range(count))


def check_permutation(tour: Tour, count: int) -> None:
    if not is_permutation(tour.nodes, count):
        raise ValueError(f"tour {tour.nodes} is not a permutation of 0..{count - 1}")
