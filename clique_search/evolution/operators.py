"""
Variation operators: crossover and mutation.

Individuals are ordered vertex sequences. Crossover splices a prefix of one
parent onto the suffix of another; mutation swaps one vertex for a vertex
not yet present. Both keep the no-duplicates invariant of an individual.
"""

import random
from typing import List, Optional, Sequence


# =============================================================================
# Crossover Operators
# =============================================================================

def splice_crossover(
    parent1: Sequence[int],
    parent2: Sequence[int],
    rng: random.Random,
) -> Optional[List[int]]:
    """
    Single-point splice crossover producing one child.

    Example:
        Parent 1: [4, 9, 2]
        Parent 2: [7, 4, 5]
        Crossover at 2:
        Child:    [4, 9, 5]
        Crossover at 1 gives [4, 4, 5], deduplicated to [4, 5].

    Args:
        parent1: Parent contributing the prefix
        parent2: Parent contributing the suffix
        rng: Random stream

    Returns:
        Child with duplicates removed (first occurrence kept), or None when
        the shorter parent has fewer than 2 vertices and no split point exists
    """
    min_length = min(len(parent1), len(parent2))
    if min_length < 2:
        return None

    point = rng.randint(1, min_length - 1)

    child = []
    seen = set()
    for v in list(parent1[:point]) + list(parent2[point:]):
        if v not in seen:
            seen.add(v)
            child.append(v)
    return child


def crossover(
    population: Sequence[Sequence[int]],
    crossover_rate: float,
    rng: random.Random,
    n_attempts: Optional[int] = None,
) -> List[List[int]]:
    """
    Produce offspring by splice crossover of randomly chosen parents.

    Each attempt is skipped with probability 1 - crossover_rate. Parents are
    drawn uniformly with replacement, so a parent may cross with itself.

    Args:
        population: Current population
        crossover_rate: Probability that an attempt produces a child
        rng: Random stream
        n_attempts: Number of attempts (default: half the population size)

    Returns:
        List of children (at most n_attempts)
    """
    if n_attempts is None:
        n_attempts = len(population) // 2

    offspring = []
    for _ in range(n_attempts):
        if not rng.random() < crossover_rate:
            continue
        parent1 = population[rng.randrange(len(population))]
        parent2 = population[rng.randrange(len(population))]

        child = splice_crossover(parent1, parent2, rng)
        if child is not None:
            offspring.append(child)

    return offspring


# =============================================================================
# Mutation Operators
# =============================================================================

def mutate_individual(
    individual: List[int],
    num_nodes: int,
    rng: random.Random,
    max_attempts: int = 100,
) -> bool:
    """
    Replace one random vertex with a vertex not already in the individual.

    Modifies the individual in place. Fresh vertices are resampled up to
    max_attempts times; after that the replacement is drawn directly from
    the unused vertices.

    Args:
        individual: Individual to mutate
        num_nodes: Number of graph vertices
        rng: Random stream
        max_attempts: Resampling bound before falling back

    Returns:
        True if a vertex was replaced; False when the individual is empty or
        already spans every vertex
    """
    if not individual or len(individual) >= num_nodes:
        return False

    index = rng.randrange(len(individual))
    present = set(individual)

    for _ in range(max_attempts):
        new_node = rng.randrange(num_nodes)
        if new_node not in present:
            individual[index] = new_node
            return True

    unused = [v for v in range(num_nodes) if v not in present]
    individual[index] = rng.choice(unused)
    return True


def mutate(
    offspring: List[List[int]],
    num_nodes: int,
    mutation_rate: float,
    rng: random.Random,
    max_attempts: int = 100,
) -> int:
    """
    Mutate each offspring independently with probability mutation_rate.

    Returns:
        Number of individuals that were changed
    """
    mutated = 0
    for individual in offspring:
        if not rng.random() < mutation_rate:
            continue
        if mutate_individual(individual, num_nodes, rng, max_attempts=max_attempts):
            mutated += 1
    return mutated
