"""
Evolutionary clique search.

This module provides a genetic algorithm with local search for finding a
clique of a target size in an undirected graph.

Key components:
- Fitness: exhaustive largest-clique detection within an individual
- Operators: splice crossover and unique-vertex mutation
- Local search: swap and greedy clique extension
- Population: initialization and elitist selection
- CliqueSearchEngine: main generation loop

Example usage:
    from clique_search.evolution import CliqueSearchEngine, SearchConfig

    config = SearchConfig(clique_size=4, seed=7)
    engine = CliqueSearchEngine(config)
    result = engine.evolve()

    if result.succeeded:
        print(f"Clique: {result.clique}")
"""

from .fitness import (
    MAX_EXHAUSTIVE_VERTICES,
    find_largest_clique,
    clique_fitness,
    evaluate_fitness,
)
from .operators import (
    splice_crossover,
    crossover,
    mutate_individual,
    mutate,
)
from .local_search import swap_vertices, extend_clique, local_search
from .population import (
    create_individual,
    initialize_population,
    form_new_population,
    get_population_stats,
)
from .history import GenerationStats, SearchHistory
from .engine import CliqueSearchEngine, SearchConfig, SearchResult, SearchState

__all__ = [
    # Core classes
    'CliqueSearchEngine',
    'SearchConfig',
    'SearchResult',
    'SearchState',
    'SearchHistory',
    'GenerationStats',
    # Fitness
    'MAX_EXHAUSTIVE_VERTICES',
    'find_largest_clique',
    'clique_fitness',
    'evaluate_fitness',
    # Operators
    'splice_crossover',
    'crossover',
    'mutate_individual',
    'mutate',
    # Local search
    'swap_vertices',
    'extend_clique',
    'local_search',
    # Population
    'create_individual',
    'initialize_population',
    'form_new_population',
    'get_population_stats',
]
