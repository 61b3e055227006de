"""
Sampling helpers shared by quadrature, fitting and the drawing layer.

Anything that can be sampled is a scalar function of one variable. Three
shapes are accepted:
  - objects with eval_one(x) (Expression, Polynomial, NeuralNetwork)
  - the same objects with eval_many(xs) for vectorised evaluation
  - plain callables f(x) -> float
"""

import numpy as np
from typing import Any, List, Tuple, Optional

from .exceptions import PreconditionError

Interval = Tuple[float, float]
ScalarFunction = Any  # eval_one/eval_many object or plain callable


def evaluate_one(fn: ScalarFunction, x: float) -> float:
    if hasattr(fn, "eval_one"):
        return float(fn.eval_one(x))
    if callable(fn):
        return float(fn(x))
    raise TypeError(f"cannot evaluate object of type {type(fn).__name__}")


def evaluate_many(fn: ScalarFunction, xs: np.ndarray) -> np.ndarray:
    """Evaluate fn at every point of xs, vectorised when fn supports it."""
    xs = np.asarray(xs, dtype=float)
    if hasattr(fn, "eval_many"):
        return np.asarray(fn.eval_many(xs), dtype=float)
    return np.array([evaluate_one(fn, x) for x in xs], dtype=float)


def check_count(n: int, name: str) -> int:
    """Validate a positive integer count (steps, subdivisions, sample size)."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise PreconditionError(f"{name} must be an integer, got {n!r}")
    if n < 1:
        raise PreconditionError(f"{name} must be >= 1, got {n}")
    return int(n)


def sample_interval_equidistributed(interval: Interval, steps: int) -> np.ndarray:
    """x_i = a + i*(b - a)/steps for i = 0..steps inclusive."""
    steps = check_count(steps, "steps")
    a, b = interval
    delta = (b - a) / steps
    return a + delta * np.arange(steps + 1, dtype=float)


def sample_interval_random(
    interval: Interval,
    size: int,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """`size` independent uniform points in [a, b)."""
    size = check_count(size, "sample size")
    rng = rng if rng is not None else np.random.default_rng()
    a, b = interval
    return rng.uniform(a, b, size)


def sample(fn: ScalarFunction, interval: Interval, steps: int) -> List[Tuple[float, float]]:
    """Sample fn at steps + 1 equidistributed points.

    Returns a list of (x_i, f(x_i)) pairs, the format a drawing layer
    consumes. Deterministic for a deterministic fn.
    """
    xs = sample_interval_equidistributed(interval, steps)
    ys = evaluate_many(fn, xs)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]
