"""
Deterministic numerical integration over a bounded interval.

Three rules, each with n subintervals of width delta = (b - a) / n:

  midpoint               sum_i f(a + (i + 1/2) delta) * delta
  trapezoidal            sum_i (f(x_i) + f(x_{i+1})) * delta / 2
  composite trapezoidal  sum_i w_i f(x_i) * delta,  w_0 = w_n = 1/2, else 1

Trapezoidal and composite trapezoidal agree up to rounding, but the
composite form evaluates each node once (n + 1 evaluations instead of 2n),
which matters when f is expensive.

The integrand may be an Expression, a Polynomial, or any callable of one
float. n must be an integer >= 1; anything else is rejected before any
evaluation.
"""

import copy
import numpy as np
from dataclasses import dataclass
from enum import Enum

from .constructors import mul
from .expression import Expression
from .sampling import Interval, ScalarFunction, check_count, evaluate_many


class QuadratureRule(str, Enum):
    """Supported quadrature rules."""

    MIDPOINT = "midpoint"
    TRAPEZOIDAL = "trapezoidal"
    COMPOSITE_TRAPEZOIDAL = "composite_trapezoidal"


@dataclass(frozen=True)
class IntMethod:
    """A quadrature rule together with its subdivision count."""

    rule: QuadratureRule
    subdivisions: int

    def __post_init__(self):
        object.__setattr__(self, "rule", QuadratureRule(self.rule))
        subdivisions = check_count(self.subdivisions, "subdivision count")
        object.__setattr__(self, "subdivisions", subdivisions)

    @classmethod
    def midpoint(cls, n: int) -> "IntMethod":
        return cls(QuadratureRule.MIDPOINT, n)

    @classmethod
    def trapezoidal(cls, n: int) -> "IntMethod":
        return cls(QuadratureRule.TRAPEZOIDAL, n)

    @classmethod
    def composite_trapezoidal(cls, n: int) -> "IntMethod":
        return cls(QuadratureRule.COMPOSITE_TRAPEZOIDAL, n)


# ================================================================
# RULES
# ================================================================

def int_midpoint(f: ScalarFunction, interval: Interval, n: int) -> float:
    n = check_count(n, "subdivision count")
    a, b = interval
    delta = (b - a) / n
    xs = a + delta / 2.0 + delta * np.arange(n, dtype=float)
    return float(np.sum(evaluate_many(f, xs) * delta))


def int_trapezoidal(f: ScalarFunction, interval: Interval, n: int) -> float:
    n = check_count(n, "subdivision count")
    a, b = interval
    delta = (b - a) / n
    i = np.arange(n, dtype=float)
    # left and right endpoint of every subinterval
    left = evaluate_many(f, a + delta * i)
    right = evaluate_many(f, a + delta * (i + 1.0))
    return float(np.sum((left + right) * delta / 2.0))


def int_composite_trapezoidal(f: ScalarFunction, interval: Interval, n: int) -> float:
    n = check_count(n, "subdivision count")
    a, b = interval
    delta = (b - a) / n
    xs = a + delta * np.arange(n + 1, dtype=float)
    weights = np.ones(n + 1)
    weights[0] = weights[-1] = 0.5
    return float(np.sum(weights * evaluate_many(f, xs) * delta))


_RULES = {
    QuadratureRule.MIDPOINT: int_midpoint,
    QuadratureRule.TRAPEZOIDAL: int_trapezoidal,
    QuadratureRule.COMPOSITE_TRAPEZOIDAL: int_composite_trapezoidal,
}


def integrate(f: ScalarFunction, interval: Interval, method: IntMethod) -> float:
    """Approximate the integral of f over interval with the given rule."""
    return _RULES[method.rule](f, interval, method.subdivisions)


def inner_product(
    f: ScalarFunction, g: ScalarFunction, interval: Interval, method: IntMethod
) -> float:
    """<f, g> = integral of f*g over interval."""
    if isinstance(f, Expression) and isinstance(g, Expression):
        product = mul(copy.deepcopy(f), copy.deepcopy(g))
    else:
        product = _ProductFunction(f, g)
    return integrate(product, interval, method)


class _ProductFunction:
    """Pointwise product of two scalar functions."""

    def __init__(self, f: ScalarFunction, g: ScalarFunction):
        self.f = f
        self.g = g

    def eval_one(self, x: float) -> float:
        return float(self.eval_many(np.array([x]))[0])

    def eval_many(self, xs: np.ndarray) -> np.ndarray:
        with np.errstate(invalid="ignore", over="ignore"):
            return evaluate_many(self.f, xs) * evaluate_many(self.g, xs)
