"""Problem sources: seeded random generation and CSV loading."""

import logging
import random
import pandas as pd

from .models.item import Item, KnapsackProblem
from .config import (
    MIN_ITEM_VALUE,
    MAX_ITEM_VALUE,
    MIN_ITEM_WEIGHT,
    MAX_ITEM_WEIGHT,
)

logger = logging.getLogger(__name__)


def generate_knapsack_problem(size: int, seed: int, capacity: int = 500) -> KnapsackProblem:
    """
    Generate a random problem instance from an explicit seed.
    
    Values and weights are drawn uniformly from their configured ranges,
    value first for each item, so the same seed always yields the same
    instance.
    
    Args:
        size: Number of items
        seed: Seed for the generator
        capacity: Knapsack capacity
        
    Returns:
        KnapsackProblem instance
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    rng = random.Random(seed)
    items = []
    for _ in range(size):
        value = rng.randint(MIN_ITEM_VALUE, MAX_ITEM_VALUE)
        weight = rng.randint(MIN_ITEM_WEIGHT, MAX_ITEM_WEIGHT)
        items.append(Item(value=value, weight=weight))
    logger.debug(f"Generated {size} items with seed {seed}")
    return KnapsackProblem(items=tuple(items), capacity=capacity)


def load_problem_csv(csv_path: str, capacity: int, sep: str = ",") -> KnapsackProblem:
    """
    Parse a CSV with value and weight columns into a problem instance.
    
    Row order defines item order.
    
    Args:
        csv_path: Path to CSV file
        capacity: Knapsack capacity
        sep: Column separator
        
    Returns:
        KnapsackProblem instance
    """
    df = pd.read_csv(csv_path, sep=sep)
    logger.info(f"Loaded items CSV with {len(df)} rows")
    
    required_cols = ["value", "weight"]
    for col in required_cols:
        if col not in df.columns:
            raise ValueError(f"Missing required column: {col}")
    
    items = []
    for index, row in df.iterrows():
        value = _whole_number(row["value"], "value", index)
        weight = _whole_number(row["weight"], "weight", index)
        items.append(Item(value=value, weight=weight))

    return KnapsackProblem(items=tuple(items), capacity=capacity)


def _whole_number(raw, column: str, row_index) -> int:
    """Convert a CSV cell to int, rejecting fractional or missing values."""
    if pd.isna(raw) or raw != int(raw):
        raise ValueError(f"Row {row_index}: {column} must be a whole number, got {raw!r}")
    return int(raw)
