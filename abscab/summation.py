"""
Second-order compensated summation.

This module contains the accumulator and the single-step update of the
generalized Kahan-Babuska summation algorithm listed in
A. Klein, "A Generalized Kahan-Babuska-Summation-Algorithm",
Computing 76, 279-293 (2006), doi: 10.1007/s00607-005-0139-x
"""

from typing import Union

import numpy as np


class CompensatedAccumulator:
    """
    Running sum with two orders of round-off compensation.

    The represented total is always ``sum + first_order_correction +
    second_order_correction``; none of the fields alone holds it.

    Attributes:
        sum: The running sum
        first_order_correction: Accumulated rounding error of ``sum``
        second_order_correction: Accumulated rounding error of the first-order correction
    """

    __slots__ = ("sum", "first_order_correction", "second_order_correction")

    def __init__(self, initial: float = 0.0):
        """
        Initialize the accumulator.

        Args:
            initial: Starting value of the running sum
        """
        self.sum = float(initial)
        self.first_order_correction = 0.0
        self.second_order_correction = 0.0

    def add(self, contribution: Union[float, np.floating]) -> "CompensatedAccumulator":
        """
        Add a single contribution with compensation.

        Args:
            contribution: Value to add to the accumulator

        Returns:
            The accumulator itself
        """
        compensated_add(self, contribution)
        return self

    def total(self) -> float:
        """Get compensated sum."""
        return (self.sum + self.first_order_correction) + self.second_order_correction

    def reset(self):
        """Reset the accumulator to zero."""
        self.sum = 0.0
        self.first_order_correction = 0.0
        self.second_order_correction = 0.0

    def __float__(self) -> float:
        return self.total()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(sum={self.sum!r}, "
                f"first_order_correction={self.first_order_correction!r}, "
                f"second_order_correction={self.second_order_correction!r})")


def compensated_add(accumulator: CompensatedAccumulator,
                    contribution: Union[float, np.floating]) -> None:
    """
    Add a single contribution to the sum held in ``accumulator``.

    The rounding error of each addition is recovered with Neumaier's
    magnitude-ordered correction and folded into the first-order
    correction the same way; what is lost there is collected in the
    second-order correction without further compensation.

    Args:
        accumulator: Accumulator updated in place
        contribution: Contribution to add to the sum
    """
    contribution = float(contribution)

    s = accumulator.sum
    cs = accumulator.first_order_correction
    ccs = accumulator.second_order_correction

    t = s + contribution
    if abs(s) >= abs(contribution):
        c = (s - t) + contribution
    else:
        c = (contribution - t) + s
    s = t

    t2 = cs + c
    if abs(cs) >= abs(c):
        cc = (cs - t2) + c
    else:
        cc = (c - t2) + cs
    cs = t2
    ccs += cc

    accumulator.sum = s
    accumulator.first_order_correction = cs
    accumulator.second_order_correction = ccs
