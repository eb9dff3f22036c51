"""Shared fixtures."""

import random

import pytest

from knapsack_ga.models.item import to_catalog


@pytest.fixture
def classic_items():
    """Classic three-item instance; optimum is items 1 and 2 (value 220, weight 50)."""
    return to_catalog([(60, 10), (100, 20), (120, 30)])


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)
