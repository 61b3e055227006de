"""
Polynomial: an immutable single-variable polynomial value.

Wraps a coefficient array [c_0, ..., c_d] (lowest power first). The array
is read-only; every operation returns a new Polynomial, so fitting steps
can be chained and compared without aliasing surprises.
"""

import numpy as np
from typing import Optional, Sequence

from .coefficients import (
    as_coefficients,
    poly_eval,
    poly_scale,
    poly_mul,
    poly_derivative,
    poly_trim,
)
from .constructors import X, const, mul, powi, poly, sum_of
from .exceptions import PreconditionError
from .expression import Expression


class Polynomial:
    """p(x) = c_0 + c_1*x + ... + c_d*x^d, with at least one coefficient."""

    def __init__(self, coefficients: Sequence[float]):
        coeffs = as_coefficients(coefficients)
        if len(coeffs) == 0:
            raise PreconditionError("a polynomial needs at least one coefficient")
        coeffs.flags.writeable = False
        self._coefficients = coeffs

    @classmethod
    def random(
        cls, degree: int, rng: Optional[np.random.Generator] = None
    ) -> "Polynomial":
        """Coefficients drawn uniformly from [-1, 1)."""
        if degree < 0:
            raise PreconditionError(f"degree must be >= 0, got {degree}")
        rng = rng if rng is not None else np.random.default_rng()
        return cls(rng.uniform(-1.0, 1.0, degree + 1))

    @property
    def coefficients(self) -> np.ndarray:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    # --- Evaluation ---

    def evaluate(self, x):
        """p(x) for a scalar or elementwise over an array."""
        result = poly_eval(self._coefficients, x)
        if np.ndim(result) == 0:
            return float(result)
        return result

    def eval_one(self, x: float) -> float:
        return float(poly_eval(self._coefficients, float(x)))

    def eval_many(self, xs: np.ndarray) -> np.ndarray:
        return poly_eval(self._coefficients, np.asarray(xs, dtype=float))

    # --- Arithmetic (always a new Polynomial) ---

    def scale(self, scalar: float) -> "Polynomial":
        return Polynomial(poly_scale(self._coefficients, scalar))

    def multiply(self, other: "Polynomial") -> "Polynomial":
        return Polynomial(poly_mul(self._coefficients, other.coefficients))

    def derivative(self) -> "Polynomial":
        """d/dx. The derivative of a constant is the zero polynomial [0]."""
        coeffs = poly_derivative(self._coefficients)
        if len(coeffs) == 0:
            return Polynomial([0.0])
        return Polynomial(coeffs)

    def trim(self) -> "Polynomial":
        """Drop trailing zero coefficients, keeping at least c_0."""
        coeffs = poly_trim(self._coefficients)
        if len(coeffs) == 0:
            return Polynomial([0.0])
        return Polynomial(coeffs)

    # --- Conversion to expressions ---

    def to_expression(self) -> Expression:
        """Compact Poly node (or Constant for degree 0 / all zero)."""
        return poly(self._coefficients)

    def to_function_of_x(self) -> Expression:
        """Expanded form: a Sum of c_k * x^k terms, zero terms skipped."""
        terms = []
        for k, c in enumerate(self._coefficients):
            if c != 0.0:
                terms.append(mul(const(float(c)), powi(X, k)))
        return sum_of(terms)

    # --- Value semantics ---

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return np.array_equal(self._coefficients, other.coefficients)

    def __hash__(self):
        return hash(tuple(self._coefficients.tolist()))

    def __len__(self):
        return len(self._coefficients)

    def __repr__(self):
        return f"Polynomial({self._coefficients.tolist()})"

    def __str__(self):
        parts = []
        for k, c in enumerate(self._coefficients):
            if k == 0:
                parts.append(f"{c:.4f}")
            elif k == 1:
                parts.append(f"{c:.4f}*x")
            else:
                parts.append(f"{c:.4f}*x^{k}")
        return " + ".join(parts)
