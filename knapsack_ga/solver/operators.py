"""Genetic operators: random initialization, mutation, crossover.

Every operator takes the run's random source explicitly and returns a new
individual; parents are never modified. None of the operators check
feasibility, overweight children are scored 0 downstream.
"""

import random
from typing import Optional, Sequence

from knapsack_ga.models.item import Item
from knapsack_ga.solver.types import Individual


def random_individual(
    items: Sequence[Item],
    capacity: int,
    rng: random.Random,
) -> Individual:
    """Generate a random individual biased toward feasibility.
    
    Walks the catalog in order flipping a fair coin per item. A selected
    item adds its weight to a running total; as soon as that total would
    exceed the capacity generation stops and every remaining gene stays
    unselected.
    """
    genes = [False] * len(items)
    weight = 0
    for i, item in enumerate(items):
        if rng.random() < 0.5:
            weight += item.weight
            if weight > capacity:
                break
            genes[i] = True
    return Individual(genes)


def mutate(parent: Individual, rng: random.Random) -> Individual:
    """Return a copy of parent with one uniformly chosen gene flipped.
    
    A zero-length parent has nothing to flip and is returned as an equal copy.
    """
    if len(parent) == 0:
        return Individual(parent)
    index = rng.randrange(len(parent))
    return parent.flipped(index)


def crossover(
    parent1: Individual,
    parent2: Individual,
    rng: random.Random,
    index: Optional[int] = None,
) -> Individual:
    """Single-point crossover.
    
    Picks a crossover index uniformly over [0, N) unless one is given. The
    child takes genes [0, index) from parent1 and [index, N) from parent2,
    so index 0 reproduces parent2 entirely.
    
    Args:
        parent1: Donor of the leading genes
        parent2: Donor of the trailing genes, from index onward
        rng: Run random source
        index: Fixed crossover index, drawn at random when None
        
    Returns:
        New child individual
    """
    if len(parent1) != len(parent2):
        raise ValueError(
            f"Parents differ in length: {len(parent1)} != {len(parent2)}"
        )
    length = len(parent1)
    if length == 0:
        return Individual()
    if index is None:
        index = rng.randrange(length)
    elif not 0 <= index < length:
        raise ValueError(f"Crossover index {index} out of range [0, {length})")
    return Individual(parent1.genes[:index] + parent2.genes[index:])
