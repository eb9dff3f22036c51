"""Configuration module for demo defaults and settings."""

from typing import Optional
from pydantic_settings import BaseSettings


# Problem generation ranges (inclusive)
MIN_ITEM_VALUE = 1
MAX_ITEM_VALUE = 100
MIN_ITEM_WEIGHT = 1
MAX_ITEM_WEIGHT = 100


class Config(BaseSettings):
    """Application configuration with environment variable support.
    
    Every field can be overridden with a KNAPSACK_GA_ prefixed environment
    variable or a .env file, e.g. KNAPSACK_GA_POPULATION_SIZE=50.
    """
    
    # Demo problem instance
    PROBLEM_SIZE: int = 50
    PROBLEM_SEED: int = 57
    CAPACITY: int = 500
    
    # Solver parameters
    POPULATION_SIZE: int = 30
    ITERATION_COUNT: int = 50000
    SOLVER_SEED: Optional[int] = None
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_INTERVAL: int = 1000
    
    model_config = {
        "env_prefix": "KNAPSACK_GA_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
