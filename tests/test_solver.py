"""Tests for the solver loop and the solve() entry point."""

import random

import pytest

from knapsack_ga.data_loader import generate_knapsack_problem
from knapsack_ga.models.item import to_catalog
from knapsack_ga.solver import solve
from knapsack_ga.solver.config import ConfigurationError, GeneticConfig
from knapsack_ga.solver.fitness import evaluate_fitness
from knapsack_ga.solver.operators import random_individual
from knapsack_ga.solver.solver import KnapsackSolver
from knapsack_ga.solver.types import Individual


def test_classic_instance_reaches_optimum(classic_items):
    """Test the classic instance converges to value 220 under a fixed seed."""
    config = GeneticConfig(capacity=50, population_size=10, iteration_count=200, seed=42)
    solver = KnapsackSolver(classic_items, config)
    best = solver.solve()
    assert evaluate_fitness(best, classic_items, 50) == 220
    assert best == Individual([False, True, True])


def test_solve_returns_flags():
    """Test solve() accepts pairs and returns a list of flags."""
    selection = solve([(60, 10), (100, 20), (120, 30)], 50, 10, 200, seed=7)
    assert isinstance(selection, list)
    assert selection == [False, True, True]


def test_generation_size_is_restored(classic_items):
    """Test the generation is truncated back to the population size."""
    config = GeneticConfig(capacity=50, population_size=6, iteration_count=5, seed=1)
    solver = KnapsackSolver(classic_items, config)
    solver.solve()
    assert len(solver.generation) == 6


def test_best_fitness_never_decreases():
    """Test the best fitness is non-decreasing across iterations."""
    problem = generate_knapsack_problem(30, seed=11, capacity=300)
    config = GeneticConfig(capacity=300, population_size=8, iteration_count=300, seed=5)
    solver = KnapsackSolver(problem.items, config)
    best = solver.solve()
    history = solver.history
    assert len(history) == 301
    assert all(a <= b for a, b in zip(history, history[1:]))
    assert history[-1] == evaluate_fitness(best, problem.items, 300)


def test_deterministic_under_fixed_seed():
    """Test identical seeds give identical selections."""
    problem = generate_knapsack_problem(25, seed=3, capacity=250)
    runs = [
        solve(problem.items, problem.capacity, 12, 150, seed=99)
        for _ in range(2)
    ]
    assert runs[0] == runs[1]


def test_injected_random_source(classic_items):
    """Test an injected random source drives the run."""
    config = GeneticConfig(capacity=50, population_size=4, iteration_count=20)
    first = KnapsackSolver(classic_items, config, rng=random.Random(8)).solve()
    second = KnapsackSolver(classic_items, config, rng=random.Random(8)).solve()
    assert first == second


def test_zero_iterations_returns_best_initial(classic_items):
    """Test zero iterations returns the fittest initial individual."""
    config = GeneticConfig(capacity=50, population_size=10, iteration_count=0, seed=21)
    solver = KnapsackSolver(classic_items, config)
    best = solver.solve()
    
    # Replay the initial population from the same seed
    rng = random.Random(21)
    initial = [random_individual(classic_items, 50, rng) for _ in range(10)]
    expected = max(evaluate_fitness(ind, classic_items, 50) for ind in initial)
    assert evaluate_fitness(best, classic_items, 50) == expected
    assert best in initial
    assert solver.history == [expected]


def test_empty_catalog():
    """Test an empty catalog yields an empty selection."""
    assert solve([], 10, 5, 10, seed=1) == []


def test_single_item_catalog():
    """Test one-item catalogs select the item only when it fits."""
    assert solve([(5, 3)], 10, 4, 50, seed=2) == [True]
    assert solve([(5, 30)], 10, 4, 50, seed=2) == [False]


def test_negative_capacity_scores_zero():
    """Test negative capacity returns a zero-fitness empty selection."""
    items = to_catalog([(5, 1), (7, 2)])
    selection = solve(items, -1, 5, 20, seed=4)
    assert len(selection) == 2
    assert evaluate_fitness(Individual(selection), items, -1) == 0
    assert selection == [False, False]


def test_zero_capacity_keeps_zero_weight_items():
    """Test zero capacity selects exactly the zero-weight items."""
    items = to_catalog([(5, 0), (7, 2)])
    selection = solve(items, 0, 5, 20, seed=4)
    assert selection == [True, False]
    assert evaluate_fitness(Individual(selection), items, 0) == 5


def test_invalid_configuration_rejected():
    """Test invalid population size or iteration count is rejected."""
    with pytest.raises(ConfigurationError):
        solve([(1, 1)], 10, 0, 10)
    with pytest.raises(ConfigurationError):
        solve([(1, 1)], 10, 5, -1)


def test_unseeded_runs_still_valid(classic_items):
    """Test entropy-seeded runs return a feasible positive selection."""
    selection = solve(classic_items, 50, 10, 50)
    best = Individual(selection)
    assert len(best) == 3
    assert evaluate_fitness(best, classic_items, 50) > 0
