#!/usr/bin/env python3
"""
Clique search run.

Generates a random graph and evolves a population of candidate vertex sets
until a clique of the target size is found or the generation budget runs
out.

Usage:
    python -m clique_search [options]

Options:
    --population N      Population size (default: 50)
    --generations N     Maximum number of generations (default: 100)
    --crossover-rate R  Crossover probability per attempt (default: 1.0)
    --mutation-rate R   Mutation probability per offspring (default: 0.1)
    --clique-size N     Target clique size (default: 3)
    --nodes N           Number of graph vertices (default: 300)
    --min-degree N      Minimum drawn vertex degree (default: 2)
    --max-degree N      Maximum drawn vertex degree (default: 30)
    --seed N            Random seed for reproducibility
"""

import argparse
import random
from typing import List, Optional

from .core.graph import generate_graph
from .evolution.engine import CliqueSearchEngine, SearchConfig, SearchResult


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description='Evolutionary search for a clique of a target size'
    )
    parser.add_argument(
        '--population', type=int, default=None,
        help='Population size (default: 50)'
    )
    parser.add_argument(
        '--generations', type=int, default=None,
        help='Maximum number of generations (default: 100)'
    )
    parser.add_argument(
        '--crossover-rate', type=float, default=None,
        help='Crossover probability per attempt (default: 1.0)'
    )
    parser.add_argument(
        '--mutation-rate', type=float, default=None,
        help='Mutation probability per offspring (default: 0.1)'
    )
    parser.add_argument(
        '--clique-size', type=int, default=None,
        help='Target clique size (default: 3)'
    )
    parser.add_argument(
        '--nodes', type=int, default=None,
        help='Number of graph vertices (default: 300)'
    )
    parser.add_argument(
        '--min-degree', type=int, default=None,
        help='Minimum drawn vertex degree (default: 2)'
    )
    parser.add_argument(
        '--max-degree', type=int, default=None,
        help='Maximum drawn vertex degree (default: 30)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for reproducibility'
    )
    return parser.parse_args(argv)


def build_config(args) -> SearchConfig:
    """Apply command-line overrides on top of the default configuration."""
    overrides = {
        'population_size': args.population,
        'max_generations': args.generations,
        'crossover_rate': args.crossover_rate,
        'mutation_rate': args.mutation_rate,
        'clique_size': args.clique_size,
        'num_nodes': args.nodes,
        'min_degree': args.min_degree,
        'max_degree': args.max_degree,
        'seed': args.seed,
    }
    return SearchConfig.from_dict({k: v for k, v in overrides.items() if v is not None})


def progress_callback(gen: int, total: int, stats: dict):
    """Print the best fitness of each generation."""
    print(f"Generation {gen}: Best Fitness = {stats['best_fitness']}")


def print_result(result: SearchResult):
    if result.succeeded:
        print("Target clique size found!")
        print(f"Clique Found: {','.join(str(v) for v in result.clique)}")
        print(f"Clique Size: {len(result.clique)}")
    else:
        print("Target clique size not found.")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = build_config(args)

    rng = random.Random(config.seed)
    graph = generate_graph(config.num_nodes, config.min_degree, config.max_degree, rng)
    print(f"Graph generated with {graph.num_nodes} nodes.")

    engine = CliqueSearchEngine(config, graph=graph, rng=rng)
    engine.initialize_population()
    result = engine.evolve(progress_callback=progress_callback)

    print_result(result)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
