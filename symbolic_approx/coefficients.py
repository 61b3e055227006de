"""
Dense-coefficient polynomial arithmetic.

A coefficient sequence [c_0, c_1, ..., c_d] represents
    p(x) = c_0 + c_1*x + ... + c_d*x^d
(lowest power first, unlike np.polyval). Every function here returns a
fresh numpy array and leaves its inputs untouched.
"""

import numpy as np
from typing import Sequence, Union

ArrayLike = Union[float, np.ndarray]


def as_coefficients(coeffs: Sequence[float]) -> np.ndarray:
    """Copy a coefficient sequence into a 1-D float array."""
    return np.array(coeffs, dtype=float).reshape(-1)


def poly_eval(coeffs: Sequence[float], x: ArrayLike) -> ArrayLike:
    """Evaluate sum(c_k * x^k). Works elementwise on arrays of x.

    An empty sequence is the zero polynomial.
    """
    c = as_coefficients(coeffs)
    if len(c) == 0:
        return np.zeros_like(np.asarray(x, dtype=float))
    return np.polynomial.polynomial.polyval(x, c)


def poly_scale(coeffs: Sequence[float], scalar: float) -> np.ndarray:
    """Multiply every coefficient by scalar."""
    return as_coefficients(coeffs) * scalar


def poly_mul(coeffs1: Sequence[float], coeffs2: Sequence[float]) -> np.ndarray:
    """Product of two polynomials (discrete convolution).

    Output length is len(coeffs1) + len(coeffs2) - 1.
    """
    a = as_coefficients(coeffs1)
    b = as_coefficients(coeffs2)
    if len(a) == 0 or len(b) == 0:
        return np.zeros(0)
    return np.convolve(a, b)


def poly_derivative(coeffs: Sequence[float]) -> np.ndarray:
    """d/dx: drops c_0, c_k moves to position k-1 as k*c_k."""
    c = as_coefficients(coeffs)
    return c[1:] * np.arange(1, len(c), dtype=float)


def poly_trim(coeffs: Sequence[float]) -> np.ndarray:
    """Strip trailing coefficients that are exactly zero."""
    c = as_coefficients(coeffs)
    nonzero = np.flatnonzero(c != 0.0)
    if len(nonzero) == 0:
        return np.zeros(0)
    return c[: nonzero[-1] + 1]
