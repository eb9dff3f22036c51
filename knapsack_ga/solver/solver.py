"""Main genetic algorithm solver for the 0/1 knapsack problem.

Key Design Decisions:
- Chromosome: one boolean gene per catalog item
- Fitness: total selected value, forced to 0 when over capacity
- Initialization: coin-flip walk over the catalog that stops at capacity
- Breeding: generation + one mutant + one crossover child per individual (3x pool)
- Selection: stable sort by fitness, truncate back to the population size
- Termination: fixed iteration count, no convergence check

Important:
- The random source is owned by the solver instance, never module-global
- The current generation is replaced, not mutated, on every iteration
"""

import logging
import random
from typing import List, Optional, Sequence

from knapsack_ga.models.item import Item, ItemLike, to_catalog
from knapsack_ga.solver.breeding import breed
from knapsack_ga.solver.config import GeneticConfig
from knapsack_ga.solver.fitness import evaluate_fitness
from knapsack_ga.solver.operators import random_individual
from knapsack_ga.solver.selection import natural_selection
from knapsack_ga.solver.types import Individual, Population

logger = logging.getLogger(__name__)


class KnapsackSolver:
    """Genetic algorithm solver for a single knapsack instance.
    
    Attributes:
        items: Immutable item catalog
        config: Run parameters
        generation: Current generation, empty until solve() runs
        history: Best fitness of generation[0] after initialization and after each iteration
    """
    
    def __init__(
        self,
        items: Sequence[ItemLike],
        config: GeneticConfig,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the solver and its random source."""
        self.items = to_catalog(items)
        self.config = config
        if rng is not None:
            self.rng = rng
        elif config.seed is not None:
            self.rng = random.Random(config.seed)
        else:
            self.rng = random.Random(random.SystemRandom().getrandbits(64))
        self.generation: Population = []
        self.history: List[int] = []
        
        logger.info(
            f"KnapsackSolver initialized: items={len(self.items)}, "
            f"capacity={config.capacity}, pop={config.population_size}, "
            f"iterations={config.iteration_count}, seed={config.seed}"
        )
    
    def fitness(self, individual: Individual) -> int:
        return evaluate_fitness(individual, self.items, self.config.capacity)
    
    def generate_initial_population(self) -> Population:
        """Generate population_size random individuals."""
        return [
            random_individual(self.items, self.config.capacity, self.rng)
            for _ in range(self.config.population_size)
        ]
    
    def select(self, pool: Population) -> Population:
        return natural_selection(
            pool, self.config.population_size, self.items, self.config.capacity
        )
    
    def solve(self) -> Individual:
        """Run the genetic algorithm and return the fittest individual found.
        
        Runs exactly iteration_count breed/select cycles. With zero
        iterations the initial population is only ranked, so the best
        random individual is returned.
        """
        self.history = []
        self.generation = self.select(self.generate_initial_population())
        best_fitness = self.fitness(self.generation[0])
        self.history.append(best_fitness)
        
        logger.info(f"GA Initial: best={best_fitness}, pop={len(self.generation)}")
        
        interval = self.config.log_interval
        for iteration in range(self.config.iteration_count):
            pool = breed(self.generation, self.rng)
            self.generation = self.select(pool)
            
            current_best = self.fitness(self.generation[0])
            self.history.append(current_best)
            if current_best > best_fitness:
                logger.debug(
                    f"Iter {iteration + 1}: best={current_best} (improved {current_best - best_fitness})"
                )
                best_fitness = current_best
            if interval and (iteration + 1) % interval == 0:
                logger.debug(f"Iter {iteration + 1}/{self.config.iteration_count}: best={best_fitness}")
        
        best = self.generation[0]
        logger.info(
            f"GA Final: best={best_fitness} with {len(best.selected_indices())} items "
            f"after {self.config.iteration_count} iterations"
        )
        return best


def solve(
    catalog: Sequence[ItemLike],
    capacity: int,
    population_size: int,
    iteration_count: int,
    seed: Optional[int] = None,
) -> List[bool]:
    """Solve a knapsack instance with the genetic algorithm.
    
    Args:
        catalog: Ordered items or (value, weight) pairs
        capacity: Maximum total weight
        population_size: Individuals kept per generation
        iteration_count: Breed/select cycles to run
        seed: Optional seed for reproducible runs
        
    Returns:
        Selection flags, one per catalog item
        
    Raises:
        ConfigurationError: population_size <= 0 or iteration_count < 0
    """
    config = GeneticConfig(
        capacity=capacity,
        population_size=population_size,
        iteration_count=iteration_count,
        seed=seed,
    )
    return KnapsackSolver(catalog, config).solve().to_list()
