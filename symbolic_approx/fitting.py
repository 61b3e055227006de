"""
Gradient-descent fitting of polynomial coefficients.

One step draws random points x_1..x_m in the interval and moves each
coefficient against the sampled gradient of the squared error:

    g_k = mean_j[(p(x_j) - f(x_j)) * x_j^k]
    c_k <- c_k - step_size * g_k

The true derivative of (p - f)^2 carries a factor 2; it is folded into
the step size. Steps never mutate their input: each returns a new
Polynomial. The random generator is always passed in, so seeded runs are
reproducible.
"""

import logging
import numpy as np
from typing import List, Optional

from .exceptions import PreconditionError
from .polynomial import Polynomial
from .sampling import (
    Interval,
    ScalarFunction,
    check_count,
    evaluate_many,
    sample_interval_equidistributed,
    sample_interval_random,
)

logger = logging.getLogger(__name__)


def average_error_gradient(
    f: ScalarFunction, polynomial: Polynomial, xs: np.ndarray
) -> np.ndarray:
    """mean over xs of (p(x) - f(x)) * x^k, for k = 0..degree."""
    xs = np.asarray(xs, dtype=float)
    residual = polynomial.eval_many(xs) - evaluate_many(f, xs)
    powers = xs[:, np.newaxis] ** np.arange(polynomial.degree + 1)
    return np.mean(residual[:, np.newaxis] * powers, axis=0)


def compute_gradient_descent_step(
    f: ScalarFunction,
    polynomial: Polynomial,
    interval: Interval,
    sample_size: int,
    step_size: float,
    rng: Optional[np.random.Generator] = None,
) -> Polynomial:
    """Return the polynomial after one stochastic gradient-descent step."""
    sample_size = check_count(sample_size, "sample_size")
    xs = sample_interval_random(interval, sample_size, rng)
    grad = average_error_gradient(f, polynomial, xs)
    return Polynomial(polynomial.coefficients - step_size * grad)


def mean_squared_error(
    f: ScalarFunction, polynomial: Polynomial, interval: Interval, steps: int = 200
) -> float:
    """MSE of p against f on steps + 1 equidistributed points."""
    xs = sample_interval_equidistributed(interval, steps)
    diff = polynomial.eval_many(xs) - evaluate_many(f, xs)
    return float(np.mean(diff ** 2))


class GradientDescentFitter:
    """Iterates gradient-descent steps with a decaying step size.

    step t uses step_size / (1 + decay * t). No convergence test: the
    caller decides how many steps to take.

    Usage:
        fitter = GradientDescentFitter(f, Polynomial.random(3, rng), (-1, 1), rng=rng)
        for _ in range(100):
            fitter.step()
        fitter.polynomial, fitter.history
    """

    def __init__(
        self,
        target: ScalarFunction,
        initial: Polynomial,
        interval: Interval,
        sample_size: int = 1000,
        step_size: float = 0.1,
        decay: float = 0.0,
        rng: Optional[np.random.Generator] = None,
        error_steps: int = 200,
    ):
        if step_size <= 0:
            raise PreconditionError(f"step_size must be > 0, got {step_size}")
        if decay < 0:
            raise PreconditionError(f"decay must be >= 0, got {decay}")
        self.target = target
        self.polynomial = initial
        self.interval = interval
        self.sample_size = sample_size
        self.step_size = step_size
        self.decay = decay
        self.rng = rng if rng is not None else np.random.default_rng()
        self.error_steps = error_steps

        self._step_count: int = 0
        self.history: List[float] = [self.error()]

    @property
    def step_count(self) -> int:
        return self._step_count

    def current_step_size(self) -> float:
        return self.step_size / (1.0 + self.decay * self._step_count)

    def error(self) -> float:
        return mean_squared_error(
            self.target, self.polynomial, self.interval, self.error_steps
        )

    def step(self) -> Polynomial:
        """Take one step, record the new MSE and return the new polynomial."""
        self.polynomial = compute_gradient_descent_step(
            self.target,
            self.polynomial,
            self.interval,
            self.sample_size,
            self.current_step_size(),
            self.rng,
        )
        self._step_count += 1
        mse = self.error()
        self.history.append(mse)
        logger.debug("gradient step %d: mse=%.6g", self._step_count, mse)
        return self.polynomial

    def run(self, steps: int) -> Polynomial:
        for _ in range(steps):
            self.step()
        logger.info(
            "fitted degree-%d polynomial in %d steps, mse=%.6g",
            self.polynomial.degree,
            self._step_count,
            self.history[-1],
        )
        return self.polynomial
