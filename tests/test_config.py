"""Tests for configuration."""

import pytest

from knapsack_ga.config import Config
from knapsack_ga.solver.config import ConfigurationError, GeneticConfig, FAST_CONFIG


def test_genetic_config_defaults():
    """Test run parameter defaults."""
    config = GeneticConfig(capacity=100)
    assert config.population_size == 30
    assert config.iteration_count == 50000
    assert config.seed is None


def test_zero_iterations_allowed():
    """Test zero iterations is a valid configuration."""
    assert GeneticConfig(capacity=10, iteration_count=0).iteration_count == 0


@pytest.mark.parametrize("population_size", [0, -1])
def test_rejects_non_positive_population(population_size):
    """Test population size below 1 is rejected."""
    with pytest.raises(ConfigurationError):
        GeneticConfig(capacity=10, population_size=population_size)


def test_rejects_negative_iterations():
    """Test negative iteration count is rejected."""
    with pytest.raises(ConfigurationError):
        GeneticConfig(capacity=10, iteration_count=-1)


def test_rejects_non_integer_parameters():
    """Test fractional run parameters are rejected."""
    with pytest.raises(ConfigurationError):
        GeneticConfig(capacity=10, population_size=2.5)


def test_configuration_error_is_value_error():
    """Test configuration errors are ValueErrors."""
    assert issubclass(ConfigurationError, ValueError)


def test_fast_config():
    """Test the small-instance preset."""
    assert FAST_CONFIG.population_size == 10
    assert FAST_CONFIG.iteration_count == 200


def test_settings_defaults(monkeypatch):
    """Test application settings defaults match the demo instance."""
    monkeypatch.delenv("KNAPSACK_GA_POPULATION_SIZE", raising=False)
    config = Config()
    assert config.PROBLEM_SIZE == 50
    assert config.PROBLEM_SEED == 57
    assert config.CAPACITY == 500
    assert config.POPULATION_SIZE == 30


def test_settings_from_environment(monkeypatch):
    """Test settings are overridden by prefixed environment variables."""
    monkeypatch.setenv("KNAPSACK_GA_POPULATION_SIZE", "12")
    assert Config().POPULATION_SIZE == 12
