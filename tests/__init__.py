"""
Test suite for the ABSCAB numerical core.

Test Structure:
- test_summation.py: Tests for the compensated accumulator
- test_algorithms.py: Tests for sequence reductions
- test_elliptic.py: Tests for cel and the complete elliptic integrals
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run tests with coverage
    pytest --cov=abscab

    # Skip the million-term summation test
    pytest -m "not slow"
"""
