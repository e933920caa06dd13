"""Shared pytest fixtures for the firegrid test suite.

This module provides reusable fixtures for testing firegrid components,
including seeded and scripted random number generators and small grids.
"""

import pytest
import numpy as np
from unittest.mock import MagicMock


# ============================================================================
# Random Number Generator Fixtures
# ============================================================================

@pytest.fixture
def seeded_rng():
    """Provide seeded random number generator for reproducible tests.

    Returns:
        np.random.Generator: Seeded RNG with seed 42.
    """
    return np.random.default_rng(42)


@pytest.fixture
def rng_factory():
    """Provide factory for creating seeded random number generators.

    Returns:
        Callable: Function that takes a seed and returns an RNG.
    """
    def _create_rng(seed=42):
        return np.random.default_rng(seed)
    return _create_rng


@pytest.fixture
def constant_rng():
    """Provide factory for mock generators whose draws are all the same value.

    A draw of 0.0 ignites every untouched neighbor tested with a non-zero
    probability; a draw of 0.99 ignites only neighbors whose probability is 1.0.

    Returns:
        Callable: Function that takes the draw value and returns a MagicMock
                  standing in for np.random.Generator.
    """
    def _create_rng(value=0.0):
        mock = MagicMock()
        mock.random.return_value = value
        return mock
    return _create_rng


@pytest.fixture
def scripted_rng():
    """Provide factory for mock generators that return a fixed draw sequence.

    Returns:
        Callable: Function that takes a list of draws and returns a MagicMock.
    """
    def _create_rng(draws):
        mock = MagicMock()
        mock.random.side_effect = list(draws)
        return mock
    return _create_rng


# ============================================================================
# Simulation Fixtures
# ============================================================================

@pytest.fixture
def small_fire(constant_rng):
    """Provide a 3x3 sim whose every draw is 0.0 (deterministic spread).

    Returns:
        FireSim: 3x3 grid with nothing ignited.
    """
    from firegrid.fire_simulator.fire import FireSim
    return FireSim(size=3, rng=constant_rng(0.0))


@pytest.fixture
def default_fire():
    """Provide a default 11x11 sim with a seeded generator.

    Returns:
        FireSim: 11x11 grid with nothing ignited.
    """
    from firegrid.fire_simulator.fire import FireSim
    return FireSim(size=11, seed=1234)
