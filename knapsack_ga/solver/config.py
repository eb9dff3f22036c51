"""Configuration for the genetic knapsack solver.

Contains the run parameters and their validation. A run is fully described
by the capacity, the target population size and the number of
breed/select iterations; there is no convergence-based stopping.

Speed vs quality tradeoff:
- FAST: pop=10, iterations=200 - small instances, tests
- DEFAULT: pop=30, iterations=50000 - the reference demo instance
"""

from dataclasses import dataclass
from typing import Optional


class ConfigurationError(ValueError):
    """Raised when a solver is configured with invalid run parameters."""


@dataclass(frozen=True)
class GeneticConfig:
    """Configuration for one genetic solver run.
    
    Attributes:
        capacity: Maximum total weight of a feasible selection
        population_size: Number of individuals kept after every selection
        iteration_count: Number of breed/select cycles to run
        seed: Optional seed for the run's random source; None draws from OS entropy
        log_interval: Log progress every this many iterations (0 disables)
    """
    capacity: int
    population_size: int = 30
    iteration_count: int = 50000
    seed: Optional[int] = None
    log_interval: int = 1000
    
    def __post_init__(self) -> None:
        for name in ("capacity", "population_size", "iteration_count", "log_interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.population_size <= 0:
            raise ConfigurationError(
                f"population_size must be >= 1, got {self.population_size}"
            )
        if self.iteration_count < 0:
            raise ConfigurationError(
                f"iteration_count must be >= 0, got {self.iteration_count}"
            )
        if self.log_interval < 0:
            raise ConfigurationError(f"log_interval must be >= 0, got {self.log_interval}")


# Preset for small instances
FAST_CONFIG = GeneticConfig(
    capacity=50,
    population_size=10,
    iteration_count=200,
    log_interval=0,
)
