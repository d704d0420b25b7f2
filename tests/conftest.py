#!/usr/bin/env python3
"""
Pytest configuration and fixtures for the ABSCAB numerical core tests.

This file contains shared test fixtures, configuration, and utilities
used across the test suite.
"""

import math

import pytest
import numpy as np


@pytest.fixture(scope="session")
def random_seed():
    """Seed shared by the generators of the data fixtures."""
    return 42


@pytest.fixture
def rng(random_seed):
    """Seeded NumPy generator."""
    return np.random.default_rng(random_seed)


@pytest.fixture
def simple_data():
    """Simple test data for basic functionality tests."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def interleaved_magnitudes(rng):
    """Small terms interleaved with large cancelling ones."""
    n = 2000
    large = rng.uniform(1e15, 1e16, n // 2)
    small = rng.uniform(0.0, 1.0, n)
    data = np.concatenate([large, -large, small])
    rng.shuffle(data)
    return data


@pytest.fixture
def ill_conditioned_data(rng):
    """Ill-conditioned data spanning many orders of magnitude."""
    n = 1000
    exponents = rng.uniform(-10, 10, n)
    signs = rng.choice([-1.0, 1.0], n)
    return signs * 10.0 ** exponents


@pytest.fixture
def modulus_grid():
    """Squared moduli covering [0, 1) with points crowding towards 1."""
    return np.concatenate([
        np.linspace(0.0, 0.9, 46),
        1.0 - np.logspace(-2, -12, 21),
    ])


class AccuracyChecker:
    """Utility class for checking numerical accuracy."""

    @staticmethod
    def relative_error(computed: float, reference: float) -> float:
        """Calculate relative error."""
        if reference == 0:
            return abs(computed)
        return abs(computed - reference) / abs(reference)

    @staticmethod
    def exact_sum(values) -> float:
        """Correctly rounded sum for reference."""
        return math.fsum(np.asarray(values, dtype=np.float64).ravel().tolist())


@pytest.fixture
def accuracy_checker():
    """Fixture providing accuracy checking utilities."""
    return AccuracyChecker()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "million" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)

