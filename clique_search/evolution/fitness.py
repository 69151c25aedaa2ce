"""
Fitness evaluation for the evolutionary clique search.

An individual's fitness is the size of the largest clique found among its
own vertices. Detection is an exhaustive bitmask enumeration over the
individual's subsets, which is only feasible because individuals stay
small (clique size plus whatever local search adds).
"""

from typing import List, Dict, FrozenSet, Optional, Sequence

from ..core.graph import Graph


# 2^25 subsets is already far beyond what a generation can afford
MAX_EXHAUSTIVE_VERTICES = 25


def find_largest_clique(individual: Sequence[int], graph: Graph) -> List[int]:
    """
    Find the largest subsequence of an individual that is a clique.

    Subsets are enumerated by bitmask in increasing numeric order, where
    bit j selects individual[j]. The first subset of maximal cardinality
    wins, so ties are broken by bitmask value.

    Args:
        individual: Candidate vertex sequence
        graph: Graph the clique must exist in

    Returns:
        Clique vertices in the individual's order (empty for an empty individual)
    """
    k = len(individual)
    if k > MAX_EXHAUSTIVE_VERTICES:
        raise ValueError(
            f"Individual has {k} vertices; exhaustive clique search is limited "
            f"to {MAX_EXHAUSTIVE_VERTICES}"
        )

    best_mask = 0
    best_size = 0

    for mask in range(1, 1 << k):
        size = mask.bit_count()
        # Only a strictly larger subset can replace the current best
        if size <= best_size:
            continue
        subset = [individual[j] for j in range(k) if mask >> j & 1]
        if graph.is_clique(subset):
            best_mask = mask
            best_size = size

    return [individual[j] for j in range(k) if best_mask >> j & 1]


def clique_fitness(individual: Sequence[int], graph: Graph) -> int:
    """Size of the largest clique within the individual."""
    return len(find_largest_clique(individual, graph))


def evaluate_fitness(
    population: Sequence[Sequence[int]],
    graph: Graph,
    cache: Optional[Dict[FrozenSet[int], int]] = None,
) -> List[int]:
    """
    Evaluate fitness for every individual of a population.

    Args:
        population: Individuals to score
        graph: Graph being searched
        cache: Optional memo keyed by vertex set. Fitness does not depend on
            vertex order, so individuals that differ only by a swap share
            an entry.

    Returns:
        One fitness value per individual, in population order
    """
    if cache is None:
        return [clique_fitness(ind, graph) for ind in population]

    fitnesses = []
    for ind in population:
        key = frozenset(ind)
        if key not in cache:
            cache[key] = clique_fitness(ind, graph)
        fitnesses.append(cache[key])
    return fitnesses
