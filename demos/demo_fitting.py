#!/usr/bin/env python3
"""
Demo: Fit a cubic to sin(2x) by stochastic gradient descent, and compare
with the Legendre projection and a small neural network.

Each frame takes one gradient step, exactly as an animated host would.
We print the mean squared error every few frames. It MUST decrease.
"""

import sys
import os
import logging
import numpy as np

# Add parent directory to path so we can import symbolic_approx
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from symbolic_approx import (
    X,
    const,
    mul,
    sin,
    mean_squared_error,
    legendre_polynomial,
    sample_interval_equidistributed,
    NeuralNetwork,
    Workbench,
    configure,
)


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=" * 60)
    print("GRADIENT DESCENT FITTING DEMO")
    print("=" * 60)
    print()

    settings = configure(
        polynomial_degree=3,
        step_size=0.8,
        step_decay=0.005,
        sample_size=2000,
        quadrature_subdivisions=5000,
        seed=42,
    )
    f = sin(mul(const(2.0), X))
    print(f"Target: f(x) = {f} on {settings.interval}")
    print()

    bench = Workbench(settings)
    initial = bench.start_fit(f)
    print(f"Initial polynomial: {initial}")
    print()

    frames = 300
    print(f"{'Frame':>6}  {'MSE':>12}  {'Step size':>10}")
    print("-" * 32)
    first = None
    for frame in range(1, frames + 1):
        info = bench.fit_step()
        if first is None:
            first = info["mse"]
        if frame % 30 == 0:
            print(f"{frame:>6}  {info['mse']:>12.3e}  {info['step_size']:>10.4f}")

    fitted = bench.fitted
    final = mean_squared_error(f, fitted, settings.interval)
    print()
    print(f"Fitted polynomial:  {fitted}")
    if final < first:
        print("SUCCESS: gradient descent reduced the error.")
    else:
        print("FAILURE: error did not decrease.")

    # --- Legendre comparison ---
    best = legendre_polynomial(f, settings.polynomial_degree + 1, settings.int_method())
    print(f"Legendre (same degree): {best}")
    print(f"  MSE gradient descent: {final:.3e}")
    print(f"  MSE legendre:         {mean_squared_error(f, best, settings.interval):.3e}")

    # --- Neural network comparison ---
    print()
    print("-" * 60)
    print("NEURAL NETWORK (1-16-1, leaky ReLU)")
    print("-" * 60)
    net = NeuralNetwork(1, 16, 1, settings.make_rng())
    xs = sample_interval_equidistributed(settings.interval, 64)
    inputs = [np.array([x]) for x in xs]
    targets = [np.array([y]) for y in f.eval_many(xs)]
    for epoch in range(1, 2001):
        mse = net.train_batch(inputs, targets, learning_rate=0.02)
        if epoch % 400 == 0:
            print(f"  epoch {epoch:>5}  mse={mse:.3e}")


if __name__ == "__main__":
    main()
