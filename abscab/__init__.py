"""
ABSCAB numerical core

Numerical building blocks for magnetic-field and geometry kernels.

This library provides:
- Second-order compensated (Kahan-Babuska) summation
- Bulirsch's general complete elliptic integral cel
- Complete elliptic integrals of the first and second kind
"""

import logging

from .summation import CompensatedAccumulator, compensated_add
from .elliptic import (
    cel,
    elliptic_k,
    elliptic_e,
    EllipticConvergenceError,
    EllipticDomainError,
)
from .algorithms import (
    compensated_sum,
    compensated_mean,
    compensated_dot,
    naive_sum,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__author__ = "ABSCAB Contributors"

__all__ = [
    "CompensatedAccumulator",
    "compensated_add",
    "cel",
    "elliptic_k",
    "elliptic_e",
    "EllipticConvergenceError",
    "EllipticDomainError",
    "compensated_sum",
    "compensated_mean",
    "compensated_dot",
    "naive_sum",
]
