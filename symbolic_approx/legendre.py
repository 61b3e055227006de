"""
Legendre approximation: projecting a function onto orthogonal polynomials.

The Legendre polynomials L_0, L_1, ... are orthogonal on [-1, 1]:

    <L_i, L_j> = 0            for i != j
    <L_i, L_i> = 2 / (2i + 1)

so the best degree-(n-1) approximation of f in the L2 sense is

    p(x) = sum_{k<n} a_k L_k(x),   a_k = (2k + 1)/2 * <f, L_k>

with the inner products computed by quadrature. Accuracy is whatever the
chosen quadrature rule and n deliver; nothing here is exact.
"""

import logging
import math
import numpy as np
from typing import List

from .coefficients import poly_mul, poly_derivative, poly_scale
from .constructors import const, add, mul, poly
from .exceptions import PreconditionError
from .expression import Expression
from .polynomial import Polynomial
from .quadrature import IntMethod, inner_product
from .sampling import ScalarFunction, check_count

logger = logging.getLogger(__name__)

LEGENDRE_INTERVAL = (-1.0, 1.0)


def legendre_rodrigues(k: int) -> np.ndarray:
    """Coefficients of L_k via Rodrigues' formula.

        L_k(x) = 1 / (2^k k!) * d^k/dx^k (x^2 - 1)^k
    """
    if k < 0:
        raise PreconditionError(f"Legendre index must be >= 0, got {k}")

    # (x^2 - 1)^k
    coeffs = np.array([1.0])
    for _ in range(k):
        coeffs = poly_mul(coeffs, [-1.0, 0.0, 1.0])

    # k-th derivative
    for _ in range(k):
        coeffs = poly_derivative(coeffs)

    return poly_scale(coeffs, 1.0 / (2.0 ** k * math.factorial(k)))


def legendre_basis(n: int) -> List[Polynomial]:
    """L_0 .. L_{n-1} as Polynomials."""
    return [Polynomial(legendre_rodrigues(k)) for k in range(n)]


def legendre_coefficients(
    f: ScalarFunction, n: int, method: IntMethod
) -> np.ndarray:
    """a_0 .. a_{n-1} for the projection of f onto L_0 .. L_{n-1}."""
    n = check_count(n, "number of Legendre terms")
    coefficients = np.zeros(n)
    for k in range(n):
        basis_fn = poly(legendre_rodrigues(k))
        product = inner_product(f, basis_fn, LEGENDRE_INTERVAL, method)
        coefficients[k] = (2.0 * k + 1.0) / 2.0 * product
        logger.debug("Legendre a_%d = %.6g", k, coefficients[k])
    return coefficients


def legendre_approx(f: ScalarFunction, n: int, method: IntMethod) -> Expression:
    """sum_k a_k * L_k as an expression tree in x_0."""
    coefficients = legendre_coefficients(f, n, method)
    p = const(0.0)
    for k, a in enumerate(coefficients):
        component = mul(const(float(a)), poly(legendre_rodrigues(k)))
        p = add(p, component)
    logger.debug("Legendre approximation with %d terms: %s", n, p)
    return p


def legendre_polynomial(f: ScalarFunction, n: int, method: IntMethod) -> Polynomial:
    """The same projection collapsed into a single Polynomial."""
    coefficients = legendre_coefficients(f, n, method)
    total = np.zeros(n)
    for k, a in enumerate(coefficients):
        basis = legendre_rodrigues(k)
        total[: len(basis)] += a * basis
    return Polynomial(total)
