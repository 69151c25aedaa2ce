"""
Local search refinement applied to offspring after mutation.

Two moves per individual, both in place:
- swap: exchange two random positions. Clique membership is order
  independent, so this never changes fitness; it only reorders the
  sequence that the next crossover splices.
- greedy extension: append the lowest-indexed vertex that keeps the
  individual a clique.
"""

import random
from typing import List, Optional

from ..core.graph import Graph


def swap_vertices(individual: List[int], rng: random.Random) -> None:
    """Exchange two randomly chosen positions (which may coincide)."""
    if not individual:
        return
    i = rng.randrange(len(individual))
    j = rng.randrange(len(individual))
    individual[i], individual[j] = individual[j], individual[i]


def extend_clique(
    individual: List[int],
    graph: Graph,
    max_size: Optional[int] = None,
) -> Optional[int]:
    """
    Append at most one vertex that keeps the individual a clique.

    Vertices are scanned in index order and the first one adjacent to every
    current member is taken. An individual that is not itself a clique
    cannot be extended this way.

    Args:
        individual: Individual to extend in place
        graph: Graph being searched
        max_size: Do nothing once the individual has this many vertices

    Returns:
        The appended vertex, or None if nothing was added
    """
    if max_size is not None and len(individual) >= max_size:
        return None
    if not graph.is_clique(individual):
        return None

    if individual:
        candidates = set.intersection(*(graph.neighbors(v) for v in individual))
        candidates.difference_update(individual)
    else:
        candidates = set(range(graph.num_nodes))

    if not candidates:
        return None

    vertex = min(candidates)
    individual.append(vertex)
    return vertex


def local_search(
    offspring: List[List[int]],
    graph: Graph,
    rng: random.Random,
    max_size: Optional[int] = None,
) -> int:
    """
    Swap then greedily extend every offspring individual.

    Returns:
        Number of individuals that gained a vertex
    """
    extended = 0
    for individual in offspring:
        swap_vertices(individual, rng)
        if extend_clique(individual, graph, max_size=max_size) is not None:
            extended += 1
    return extended
