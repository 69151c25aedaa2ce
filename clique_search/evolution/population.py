"""
Population management for the evolutionary clique search.

Handles:
- Initial population creation (random distinct vertex draws)
- Elitist (mu + lambda) formation of the next generation
- Population statistics
"""

import random
from typing import List, Dict, Any, Optional, Sequence, FrozenSet

import numpy as np

from ..core.graph import Graph
from .fitness import evaluate_fitness


def create_individual(
    num_nodes: int,
    clique_size: int,
    rng: random.Random,
) -> List[int]:
    """
    Draw clique_size distinct random vertices.

    Duplicate draws are discarded until enough distinct vertices exist;
    the resulting order is the draw order.
    """
    if clique_size > num_nodes:
        raise ValueError(f"Cannot draw {clique_size} distinct vertices from {num_nodes}")

    individual = []
    seen = set()
    while len(individual) < clique_size:
        v = rng.randrange(num_nodes)
        if v not in seen:
            seen.add(v)
            individual.append(v)
    return individual


def initialize_population(
    num_nodes: int,
    clique_size: int,
    population_size: int,
    rng: random.Random,
) -> List[List[int]]:
    """
    Create the generation-0 population.

    Individuals carry no fitness requirement and may have no internal
    edges at all.

    Args:
        num_nodes: Number of graph vertices
        clique_size: Vertices per individual
        population_size: Number of individuals
        rng: Random stream

    Returns:
        List of individuals
    """
    return [create_individual(num_nodes, clique_size, rng) for _ in range(population_size)]


def form_new_population(
    population: Sequence[List[int]],
    offspring: Sequence[List[int]],
    graph: Graph,
    population_size: Optional[int] = None,
    cache: Optional[Dict[FrozenSet[int], int]] = None,
) -> List[List[int]]:
    """
    Elitist selection over parents plus offspring.

    The combined pool (parents first, then offspring) is sorted by fitness
    descending; ties keep their pool order. The top population_size
    individuals survive.

    Args:
        population: Current parents
        offspring: Children produced this generation
        graph: Graph being searched
        population_size: Survivors to keep (default: len(population))
        cache: Optional fitness memo passed to evaluate_fitness

    Returns:
        Next-generation population
    """
    if population_size is None:
        population_size = len(population)

    combined = list(population) + list(offspring)
    fitnesses = evaluate_fitness(combined, graph, cache=cache)

    # sorted() is stable, so equal fitness keeps concatenation order
    order = sorted(range(len(combined)), key=lambda i: fitnesses[i], reverse=True)

    return [combined[i] for i in order[:population_size]]


def get_population_stats(
    population: Sequence[Sequence[int]],
    fitnesses: Sequence[int],
) -> Dict[str, Any]:
    """
    Compute statistics about the population.

    Args:
        population: List of individuals
        fitnesses: Fitness per individual, same order

    Returns:
        Dictionary with population statistics
    """
    if not population:
        return {'size': 0}

    lengths = [len(ind) for ind in population]

    return {
        'size': len(population),
        'best_fitness': int(max(fitnesses)),
        'mean_fitness': float(np.mean(fitnesses)),
        'min_fitness': int(min(fitnesses)),
        'std_fitness': float(np.std(fitnesses)),
        'mean_length': float(np.mean(lengths)),
        'length_range': (min(lengths), max(lengths)),
        'unique_individuals': len({frozenset(ind) for ind in population}),
    }
