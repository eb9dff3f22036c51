"""Genetic algorithm solver modules."""

from knapsack_ga.solver.config import ConfigurationError, GeneticConfig, FAST_CONFIG
from knapsack_ga.solver.types import Individual, Population
from knapsack_ga.solver.fitness import evaluate_fitness, total_value_and_weight
from knapsack_ga.solver.operators import random_individual, mutate, crossover
from knapsack_ga.solver.selection import natural_selection, rank_population
from knapsack_ga.solver.breeding import breed
from knapsack_ga.solver.solver import KnapsackSolver, solve

__all__ = [
    "ConfigurationError",
    "GeneticConfig",
    "FAST_CONFIG",
    "Individual",
    "Population",
    "evaluate_fitness",
    "total_value_and_weight",
    "random_individual",
    "mutate",
    "crossover",
    "natural_selection",
    "rank_population",
    "breed",
    "KnapsackSolver",
    "solve",
]
