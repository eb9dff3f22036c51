"""Natural selection: elitist truncation of a candidate pool."""

from typing import Sequence

from knapsack_ga.models.item import Item
from knapsack_ga.solver.fitness import evaluate_fitness
from knapsack_ga.solver.types import Population


def rank_population(pool: Population, items: Sequence[Item], capacity: int) -> Population:
    """Sort a pool by fitness, highest first.
    
    Fitness is evaluated once per candidate. The sort is stable, so equal
    fitness keeps pool order.
    """
    scored = [(evaluate_fitness(ind, items, capacity), ind) for ind in pool]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [ind for _, ind in scored]


def natural_selection(
    pool: Population,
    target_size: int,
    items: Sequence[Item],
    capacity: int,
) -> Population:
    """Cull a pool down to its target_size fittest individuals.
    
    Hard truncation: no lower-fitness candidate is ever kept over a
    higher-fitness one.
    """
    if target_size < 0:
        raise ValueError(f"target_size must be >= 0, got {target_size}")
    if len(pool) < target_size:
        raise ValueError(
            f"Pool of {len(pool)} is smaller than target size {target_size}"
        )
    return rank_population(pool, items, capacity)[:target_size]
