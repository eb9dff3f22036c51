"""Genetic algorithm solver for the 0/1 knapsack problem."""

from .models import Item, KnapsackProblem
from .solver import ConfigurationError, GeneticConfig, KnapsackSolver, solve

__all__ = [
    "Item",
    "KnapsackProblem",
    "ConfigurationError",
    "GeneticConfig",
    "KnapsackSolver",
    "solve",
]
