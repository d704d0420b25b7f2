"""
Sequence reductions built on compensated summation.

Each helper walks its input in order and feeds every element through
:func:`abscab.summation.compensated_add`. Inputs may be Python sequences,
NumPy arrays or PyTorch tensors; all arithmetic happens in double precision.
"""

from typing import Iterable, List, Union

import numpy as np
import torch

from .summation import CompensatedAccumulator, compensated_add

ArrayLike = Union[List[float], Iterable[float], np.ndarray, torch.Tensor]


def _as_float64(values: ArrayLike) -> np.ndarray:
    """Flatten ``values`` into a contiguous float64 array on the CPU."""
    if isinstance(values, torch.Tensor):
        values = values.detach().cpu().to(torch.float64).numpy()
    elif not isinstance(values, np.ndarray):
        values = np.fromiter((float(v) for v in values), dtype=np.float64)
    return np.ascontiguousarray(values, dtype=np.float64).ravel()


def naive_sum(values: ArrayLike) -> float:
    """
    Left-to-right summation without any compensation.

    Args:
        values: Sequence of values to sum

    Returns:
        Plain floating-point sum
    """
    total = 0.0
    for value in _as_float64(values).tolist():
        total += value
    return total


def compensated_sum(values: ArrayLike) -> float:
    """
    Compute sum using second-order compensated summation.

    Args:
        values: Sequence of values to sum

    Returns:
        Compensated sum with reduced floating-point error
    """
    acc = CompensatedAccumulator()
    for value in _as_float64(values).tolist():
        compensated_add(acc, value)
    return acc.total()


def compensated_mean(values: ArrayLike) -> float:
    """
    Compute mean using compensated summation.

    Args:
        values: Sequence of values

    Returns:
        Compensated mean, 0.0 for empty input
    """
    data = _as_float64(values)
    if data.size == 0:
        return 0.0
    return compensated_sum(data) / data.size


def compensated_dot(a: ArrayLike, b: ArrayLike) -> float:
    """
    Compute dot product with error compensation.

    The products are formed in double precision; only their summation
    is compensated.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Compensated dot product
    """
    a = _as_float64(a)
    b = _as_float64(b)
    if a.shape != b.shape:
        raise ValueError(f"Vectors must have same shape, got {a.shape} and {b.shape}")
    return compensated_sum(a * b)
