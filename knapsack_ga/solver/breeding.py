"""Breeding: expand a generation into a candidate pool three times its size."""

import random

from knapsack_ga.solver.operators import crossover, mutate
from knapsack_ga.solver.types import Population


def breed(population: Population, rng: random.Random) -> Population:
    """Breed a candidate pool from the current generation.
    
    The pool starts with the generation itself, then for every individual
    appends one mutant and one crossover child with a partner drawn
    uniformly from the generation (possibly the individual itself).
    The result always holds exactly 3 * len(population) individuals.
    """
    pool = list(population)
    for individual in population:
        pool.append(mutate(individual, rng))
        partner = population[rng.randrange(len(population))]
        pool.append(crossover(individual, partner, rng))
    return pool
