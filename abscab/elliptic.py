"""
Complete elliptic integrals.

Implements the general complete elliptic integral ``cel`` introduced by
R. Bulirsch (1969) and the classical integrals of the first and second kind
derived from it. The routines follow a set of three articles:

* https://doi.org/10.1007/BF01397975 (Part I)
* https://doi.org/10.1007/BF01436529 (Part II)
* https://doi.org/10.1007/BF02165405 (Part III)
"""

import logging
import math
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

# machine epsilon of IEEE-754 double precision
EPS = float(np.finfo(np.float64).eps)

SQRT_EPS = math.sqrt(EPS)

PI_2 = math.pi / 2.0

# quadratic convergence reaches double precision long before this
MAX_ITERATIONS = 50

# above this, nu * mu can overflow during the iteration
REFLECT_K_C = 1.0 / EPS


class EllipticConvergenceError(ArithmeticError):
    """Raised when the ``cel`` iteration fails to produce a finite, converged value."""

    def __init__(self, k_c: float, p: float, a: float, b: float, iterations: int,
                 reason: Optional[str] = None):
        self.k_c = k_c
        self.p = p
        self.a = a
        self.b = b
        self.iterations = iterations
        if reason is None:
            reason = f"did not converge within {iterations} iterations"
        super().__init__(f"cel(k_c={k_c!r}, p={p!r}, a={a!r}, b={b!r}) {reason}")


class EllipticDomainError(ValueError):
    """Raised when the squared modulus lies outside the domain of K and E."""


def cel(k_c: float, p: float, a: float, b: float,
        max_iterations: int = MAX_ITERATIONS) -> float:
    r"""
    Compute the general complete elliptic integral.

    From "Numerical Calculation of Elliptic Integrals and Elliptic
    Functions. III" by R. Bulirsch, Numerische Mathematik 13, 305-315 (1969):

    .. math::

        cel(k_c, p, a, b) = \int_0^{\pi/2}
            \frac{a \cos^2\varphi + b \sin^2\varphi}
                 {\cos^2\varphi + p \sin^2\varphi}
            \frac{d\varphi}{\sqrt{\cos^2\varphi + k_c^2 \sin^2\varphi}}

    Args:
        k_c: Complementary modulus; only its absolute value matters
        p: Parameter p of cel
        a: Parameter a of cel
        b: Parameter b of cel
        max_iterations: Upper bound on the number of Landen steps

    Returns:
        The value of cel(k_c, p, a, b); ``inf`` if ``k_c == 0`` and ``b != 0``

    Raises:
        EllipticConvergenceError: If the iteration does not converge
            within ``max_iterations`` steps, or finite arguments drive it
            out of the finite range
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be positive, got {max_iterations}")

    k_c, p, a, b = float(k_c), float(p), float(a), float(b)
    args = (k_c, p, a, b)

    if k_c == 0.0:
        if b != 0.0:
            logger.debug("cel diverges for k_c=0 and b=%r", b)
            return math.inf
        k_c = SQRT_EPS * SQRT_EPS
    else:
        k_c = abs(k_c)

    # phi -> pi/2 - phi: cel(k_c, p, a, b) = cel(1/k_c, 1/p, b, a) / (p * k_c)
    scale = 1.0
    if p > 0.0 and k_c > REFLECT_K_C:
        scale = 1.0 / p / k_c
        k_c = 1.0 / k_c
        p = 1.0 / p
        a, b = b, a

    m = 1.0  # mu
    e = k_c  # nu * mu; nu itself is kept in k_c

    if p > 0.0:
        p = math.sqrt(p)
        b = b / p
    else:
        f = k_c * k_c
        q = 1.0 - f
        g = 1.0 - p
        f -= p
        q *= b - a * p
        p = math.sqrt(f / g)
        a = (a - b) / g
        b = -q / (g * g * p) + a * p

    for iteration in range(1, max_iterations + 1):
        f = a
        a += b / p
        g = e / p
        b += f * g
        b += b
        p += g

        g = m
        m += k_c
        if abs(g - k_c) > g * SQRT_EPS:
            k_c = math.sqrt(e)
            k_c += k_c
            e = k_c * m
        else:
            break
    else:
        logger.error("cel%r failed to converge within %d iterations", args, max_iterations)
        raise EllipticConvergenceError(*args, iterations=max_iterations)

    result = PI_2 * (a * m + b) / (m * (m + p)) * scale

    # a NaN in the iteration state also ends the loop above
    if not math.isfinite(result) and all(math.isfinite(x) for x in args):
        logger.error("cel%r left the finite range after %d iterations", args, iteration)
        raise EllipticConvergenceError(
            *args, iterations=iteration,
            reason=f"left the finite range after {iteration} iterations")

    logger.debug("cel converged after %d iterations", iteration)
    return result


def _complementary_modulus_squared(k_sq: float) -> float:
    k_sq = float(k_sq)
    if k_sq > 1.0:
        raise EllipticDomainError(f"squared modulus must not exceed 1, got {k_sq!r}")
    return 1.0 - k_sq


def elliptic_k(k_sq: float) -> float:
    """
    Complete elliptic integral of the first kind K(k).

    Evaluated as cel(k_c, 1, 1, 1) with k^2 + k_c^2 = 1. Diverges
    logarithmically for ``k_sq -> 1`` and returns ``inf`` at ``k_sq == 1``.

    Args:
        k_sq: Square of the modulus, k_sq = k*k

    Returns:
        K(k)
    """
    kc_sq = _complementary_modulus_squared(k_sq)
    return cel(math.sqrt(kc_sq), 1.0, 1.0, 1.0)


def elliptic_e(k_sq: float) -> float:
    """
    Complete elliptic integral of the second kind E(k).

    Evaluated as cel(k_c, 1, 1, k_c^2) with k^2 + k_c^2 = 1; finite on
    the whole interval ``0 <= k_sq <= 1``.

    Args:
        k_sq: Square of the modulus, k_sq = k*k

    Returns:
        E(k)
    """
    kc_sq = _complementary_modulus_squared(k_sq)
    return cel(math.sqrt(kc_sq), 1.0, 1.0, kc_sq)
