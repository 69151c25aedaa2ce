"""
Generation history for clique search runs.

Records per-generation statistics so a finished run can be inspected
without re-running it.
"""

from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Optional, Sequence
from datetime import datetime

from .population import get_population_stats


@dataclass
class GenerationStats:
    """Statistics for a single generation."""
    generation: int
    best_fitness: int
    mean_fitness: float
    min_fitness: int
    std_fitness: float
    population_size: int
    unique_individuals: int
    mean_length: float
    evaluations_this_gen: int
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SearchHistory:
    """
    Tracks search progress over generations.
    """

    def __init__(self):
        self.generations: List[GenerationStats] = []
        self.best_individual_per_gen: List[Optional[List[int]]] = []
        self.fitness_trajectory: List[int] = []

    def record_generation(
        self,
        generation: int,
        population: Sequence[Sequence[int]],
        fitnesses: Sequence[int],
        evaluations: int,
    ) -> GenerationStats:
        """
        Record statistics for an evaluated generation.

        Args:
            generation: Generation number (1-based)
            population: Current population
            fitnesses: Fitness per individual, same order
            evaluations: New fitness evaluations since the previous record,
                including the selection step that produced this population

        Returns:
            GenerationStats for this generation
        """
        stats = get_population_stats(population, fitnesses)

        if population:
            best_idx = max(range(len(population)), key=lambda i: fitnesses[i])
            self.best_individual_per_gen.append(list(population[best_idx]))
        else:
            self.best_individual_per_gen.append(None)

        gen_stats = GenerationStats(
            generation=generation,
            best_fitness=stats.get('best_fitness', 0),
            mean_fitness=stats.get('mean_fitness', 0.0),
            min_fitness=stats.get('min_fitness', 0),
            std_fitness=stats.get('std_fitness', 0.0),
            population_size=stats['size'],
            unique_individuals=stats.get('unique_individuals', 0),
            mean_length=stats.get('mean_length', 0.0),
            evaluations_this_gen=evaluations,
            timestamp=datetime.now().isoformat(),
        )

        self.generations.append(gen_stats)
        self.fitness_trajectory.append(gen_stats.best_fitness)

        return gen_stats

    def best_fitness(self) -> int:
        """Best fitness seen over the whole run."""
        return max(self.fitness_trajectory) if self.fitness_trajectory else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generations': [g.to_dict() for g in self.generations],
            'best_individual_per_gen': self.best_individual_per_gen,
            'fitness_trajectory': self.fitness_trajectory,
        }
