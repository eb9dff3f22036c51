"""Fitness evaluation for the genetic knapsack solver.

Fitness is the total value of the selected items. Capacity is a hard
constraint: any individual whose selected weight exceeds the capacity
scores 0, which ties it with the empty selection and ranks it below
every feasible individual of positive value.
"""

from typing import Sequence, Tuple

from knapsack_ga.models.item import Item
from knapsack_ga.solver.types import Individual


def total_value_and_weight(individual: Individual, items: Sequence[Item]) -> Tuple[int, int]:
    """Sum value and weight over the selected genes in a single pass."""
    value = 0
    weight = 0
    for gene, item in zip(individual, items):
        if gene:
            value += item.value
            weight += item.weight
    return value, weight


def evaluate_fitness(individual: Individual, items: Sequence[Item], capacity: int) -> int:
    """Evaluate an individual against the catalog and capacity.
    
    Args:
        individual: Solution to evaluate
        items: Item catalog, same length as the individual
        capacity: Maximum feasible total weight
        
    Returns:
        Total selected value, or 0 if the selection is overweight
    """
    value, weight = total_value_and_weight(individual, items)
    if weight > capacity:
        return 0
    return value
