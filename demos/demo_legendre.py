#!/usr/bin/env python3
"""
Demo: Legendre projection of f(x) = e^(-x^2) * (1 - x) on [-1, 1].

For n = 1..10 terms we project f onto span(L_0..L_{n-1}) using the
configured quadrature rule and report the maximum error over a grid.
The error MUST shrink as terms are added.

Then the derivative is taken symbolically and compared against a central
difference, and the approximation is sampled the way a drawing host would
receive it.
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
    exp,
    mul,
    neg,
    pdv,
    powi,
    sub,
    legendre_polynomial,
    sample_interval_equidistributed,
    Workbench,
    configure,
)


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=" * 60)
    print("LEGENDRE PROJECTION DEMO")
    print("=" * 60)
    print()

    settings = configure(quadrature_subdivisions=5000, sample_steps=40)
    method = settings.int_method()

    f = mul(exp(neg(powi(X, 2))), sub(const(1.0), X))
    print(f"Target:     f(x) = {f}")
    print(f"Quadrature: {method.rule.value} with {method.subdivisions} subdivisions")
    print()

    xs = sample_interval_equidistributed(settings.interval, 400)
    target = f.eval_many(xs)

    print(f"{'Terms':>6}  {'Max error':>12}")
    print("-" * 22)
    errors = []
    for n in range(1, 11):
        p = legendre_polynomial(f, n, method)
        err = float(np.max(np.abs(p.eval_many(xs) - target)))
        errors.append(err)
        print(f"{n:>6}  {err:>12.3e}")

    print()
    if errors[-1] < errors[0]:
        print("SUCCESS: error shrinks as basis functions are added.")
    else:
        print("FAILURE: error did not shrink.")

    # --- Symbolic derivative ---
    print()
    print("-" * 60)
    print("SYMBOLIC DERIVATIVE")
    print("-" * 60)
    df = pdv(f, 0)
    print(f"f'(x) = {df}")
    h = 1e-6
    for x in [-0.5, 0.0, 0.5]:
        numerical = (f.eval_one(x + h) - f.eval_one(x - h)) / (2.0 * h)
        print(f"  x={x:+.2f}  symbolic={df.eval_one(x):+.8f}  numerical={numerical:+.8f}")

    # --- What a drawing host receives ---
    print()
    print("-" * 60)
    print("SAMPLES FOR THE DRAWING LAYER")
    print("-" * 60)
    bench = Workbench(settings)
    approx = bench.approximate(f)
    lines = bench.curves({"f": f, "legendre": approx})
    for name, points in lines.items():
        head = ", ".join(f"({x:+.2f}, {y:+.4f})" for x, y in points[:3])
        print(f"  {name:<10} {len(points)} points: {head}, ...")


if __name__ == "__main__":
    main()
