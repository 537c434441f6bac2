from typing import List, Sequence, Tuple

from .base import Tour, check_permutation


def _fill(head: Sequence[int], donor: Sequence[int], size: int) -> List[int]:
    child = list(head)
    seen = set(child)
    for node in donor:
        if len(child) >= size:
            break
        if node not in seen:
            child.append(node)
            seen.add(node)
    return child


def crossover(parent_a: Tour, parent_b: Tour) -> Tuple[Tour, Tour]:
    """
    Order-preserving crossover.

    Each child keeps the first half of its own parent verbatim and takes the
    remaining cities in the order they appear in the other parent.
    """
    n = len(parent_a.nodes)
    if len(parent_b.nodes) != n:
        raise ValueError(f"parents differ in length: {n} != {len(parent_b.nodes)}")
    check_permutation(parent_a, n)
    check_permutation(parent_b, n)
    half = n // 2
    child_a = _fill(parent_a.nodes[:half], parent_b.nodes, n)
    child_b = _fill(parent_b.nodes[:half], parent_a.nodes, n)
    return Tour(nodes=child_a), Tour(nodes=child_b)
