"""
Main evolutionary search engine.

Orchestrates the search loop:
1. Generate graph and initialize population
2. Evaluate fitness and record statistics
3. Stop if the target clique size is reached
4. Create offspring via crossover and mutation
5. Refine offspring with local search
6. Form the next population by elitist selection
7. Repeat until the generation budget is exhausted
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Dict, Any, Optional, Callable, FrozenSet
import random
import time

from ..core.graph import Graph, generate_graph
from .fitness import MAX_EXHAUSTIVE_VERTICES, evaluate_fitness, find_largest_clique
from .operators import crossover, mutate
from .local_search import local_search
from .population import initialize_population, form_new_population
from .history import SearchHistory


# camelCase option names accepted alongside the field names
OPTION_ALIASES = {
    'populationSize': 'population_size',
    'maxGenerations': 'max_generations',
    'crossoverRate': 'crossover_rate',
    'mutationRate': 'mutation_rate',
    'cliqueSize': 'clique_size',
    'numNodes': 'num_nodes',
    'minDegree': 'min_degree',
    'maxDegree': 'max_degree',
    'maxIndividualSize': 'max_individual_size',
    'maxMutationAttempts': 'max_mutation_attempts',
}


DEFAULT_MAX_INDIVIDUAL_SIZE = 20


class SearchState(Enum):
    RUNNING = 'running'
    SUCCEEDED = 'succeeded'
    EXHAUSTED = 'exhausted'


@dataclass
class SearchConfig:
    """Configuration for a clique search run."""
    # Population parameters
    population_size: int = 50
    max_generations: int = 100

    # Evolution rates
    crossover_rate: float = 1.0
    mutation_rate: float = 0.1

    # Target
    clique_size: int = 3

    # Graph generation
    num_nodes: int = 300
    min_degree: int = 2
    max_degree: int = 30

    # Containment bounds
    # None: 20, raised to clique_size for larger targets
    max_individual_size: Optional[int] = None
    max_mutation_attempts: int = 100

    # Reproducibility
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate parameter ranges."""
        if self.population_size < 1:
            raise ValueError(f"population_size must be positive, got {self.population_size}")
        if self.max_generations < 0:
            raise ValueError(f"max_generations must be non-negative, got {self.max_generations}")
        for name in ('crossover_rate', 'mutation_rate'):
            rate = getattr(self, name)
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{name} {rate} out of range [0.0, 1.0]")
        if self.clique_size < 1:
            raise ValueError(f"clique_size must be at least 1, got {self.clique_size}")
        # Only binding when the graph is generated from this config;
        # CliqueSearchEngine checks a supplied graph against its own order
        if self.clique_size > self.num_nodes:
            raise ValueError(
                f"clique_size ({self.clique_size}) cannot exceed num_nodes ({self.num_nodes})"
            )
        if self.min_degree < 0:
            raise ValueError(f"min_degree must be non-negative, got {self.min_degree}")
        if self.min_degree > self.max_degree:
            raise ValueError(
                f"min_degree ({self.min_degree}) must not exceed max_degree ({self.max_degree})"
            )
        if self.clique_size > MAX_EXHAUSTIVE_VERTICES:
            raise ValueError(
                f"clique_size ({self.clique_size}) exceeds the exhaustive search limit "
                f"({MAX_EXHAUSTIVE_VERTICES})"
            )
        if self.max_individual_size is None:
            self.max_individual_size = min(
                max(DEFAULT_MAX_INDIVIDUAL_SIZE, self.clique_size), MAX_EXHAUSTIVE_VERTICES
            )
        if not self.clique_size <= self.max_individual_size <= MAX_EXHAUSTIVE_VERTICES:
            raise ValueError(
                f"max_individual_size {self.max_individual_size} out of range "
                f"[{self.clique_size}, {MAX_EXHAUSTIVE_VERTICES}]"
            )
        if self.max_mutation_attempts < 1:
            raise ValueError(f"max_mutation_attempts must be positive, got {self.max_mutation_attempts}")

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchConfig':
        """Create from a dictionary of field names or camelCase option names."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown option: {key}")
            kwargs[name] = value
        return cls(**kwargs)


@dataclass
class SearchResult:
    """Results from a clique search run."""
    state: SearchState
    generations_completed: int
    best_fitness: int
    best_individual: List[int]
    clique: List[int]
    total_evaluations: int
    history: SearchHistory
    final_population: List[List[int]] = field(default_factory=list)
    runtime_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.state is SearchState.SUCCEEDED

    def summary(self) -> str:
        """Generate summary string."""
        lines = [
            f"State: {self.state.value}",
            f"Generations: {self.generations_completed}",
            f"Total evaluations: {self.total_evaluations}",
            f"Best fitness: {self.best_fitness}",
            f"Runtime: {self.runtime_seconds:.1f}s",
        ]
        if self.clique:
            lines.append(f"Clique: {','.join(str(v) for v in self.clique)}")
        return '\n'.join(lines)


class CliqueSearchEngine:
    """
    Evolutionary search for a clique of a target size.

    The engine owns the graph and the current population. All randomness
    comes from a single random.Random stream so that a seeded run is
    reproducible.
    """

    def __init__(
        self,
        config: SearchConfig,
        graph: Optional[Graph] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize search engine.

        Args:
            config: Search configuration
            graph: Graph to search (generated from config if not provided)
            rng: Random stream (seeded from config.seed if not provided)
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

        if graph is None:
            graph = generate_graph(
                config.num_nodes, config.min_degree, config.max_degree, self.rng
            )
        if config.clique_size > graph.num_nodes:
            raise ValueError(
                f"clique_size ({config.clique_size}) cannot exceed graph order ({graph.num_nodes})"
            )
        self.graph = graph

        self.population: List[List[int]] = []
        self.history = SearchHistory()
        self.generation = 0
        self.total_evaluations = 0
        self.state = SearchState.RUNNING

        self._fitness_cache: Dict[FrozenSet[int], int] = {}
        self._evaluations_at_last_record = 0

    def initialize_population(self) -> None:
        """Create the generation-0 population."""
        self.population = initialize_population(
            num_nodes=self.graph.num_nodes,
            clique_size=self.config.clique_size,
            population_size=self.config.population_size,
            rng=self.rng,
        )
        self.generation = 0
        self.total_evaluations = 0
        self.history = SearchHistory()
        self.state = SearchState.RUNNING
        self._evaluations_at_last_record = 0

    def _evaluate(self, individuals: List[List[int]]) -> List[int]:
        before = len(self._fitness_cache)
        fitnesses = evaluate_fitness(individuals, self.graph, cache=self._fitness_cache)
        self.total_evaluations += len(self._fitness_cache) - before
        return fitnesses

    def evaluate_population(self) -> List[int]:
        """Fitness of every individual in the current population."""
        return self._evaluate(self.population)

    def run_generation(self) -> int:
        """
        Execute one variation and selection step.

        Returns:
            Number of offspring produced
        """
        # 1. Crossover
        offspring = crossover(
            self.population,
            crossover_rate=self.config.crossover_rate,
            rng=self.rng,
            n_attempts=self.config.population_size // 2,
        )

        # 2. Mutation
        mutate(
            offspring,
            num_nodes=self.graph.num_nodes,
            mutation_rate=self.config.mutation_rate,
            rng=self.rng,
            max_attempts=self.config.max_mutation_attempts,
        )

        # 3. Local search
        local_search(
            offspring,
            self.graph,
            rng=self.rng,
            max_size=self.config.max_individual_size,
        )

        # 4. Form new population
        before = len(self._fitness_cache)
        self.population = form_new_population(
            self.population,
            offspring,
            self.graph,
            population_size=self.config.population_size,
            cache=self._fitness_cache,
        )
        self.total_evaluations += len(self._fitness_cache) - before

        return len(offspring)

    def best_individual(self) -> List[int]:
        """
        Return the fittest individual of the current population.

        Each individual is re-scored on its own; the first one with the
        highest fitness wins.
        """
        if not self.population:
            return []
        fitnesses = evaluate_fitness(self.population, self.graph)
        best_idx = max(range(len(self.population)), key=lambda i: fitnesses[i])
        return list(self.population[best_idx])

    def evolve(
        self,
        progress_callback: Optional[Callable[[int, int, Dict], None]] = None,
    ) -> SearchResult:
        """
        Run the search until the target is reached or the budget runs out.

        Args:
            progress_callback: Optional callback(gen, max_gens, stats) invoked
                after each generation is evaluated

        Returns:
            SearchResult with the terminal state and the clique found
        """
        if not self.population:
            self.initialize_population()

        start_time = time.time()
        self.state = SearchState.RUNNING

        for _ in range(self.config.max_generations):
            self.generation += 1

            fitnesses = self.evaluate_population()
            stats = self.history.record_generation(
                generation=self.generation,
                population=self.population,
                fitnesses=fitnesses,
                evaluations=self.total_evaluations - self._evaluations_at_last_record,
            )
            self._evaluations_at_last_record = self.total_evaluations

            if progress_callback:
                progress_callback(self.generation, self.config.max_generations, stats.to_dict())

            if stats.best_fitness >= self.config.clique_size:
                self.state = SearchState.SUCCEEDED
                break

            self.run_generation()

        if self.state is SearchState.RUNNING:
            self.state = SearchState.EXHAUSTED

        best = self.best_individual()
        clique = find_largest_clique(best, self.graph) if self.state is SearchState.SUCCEEDED else []

        return SearchResult(
            state=self.state,
            generations_completed=self.generation,
            best_fitness=self.history.best_fitness(),
            best_individual=best,
            clique=clique,
            total_evaluations=self.total_evaluations,
            history=self.history,
            final_population=self.population,
            runtime_seconds=time.time() - start_time,
        )
