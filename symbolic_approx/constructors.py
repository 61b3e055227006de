"""
Simplifying constructors: the normal way to build expression trees.

Each builder folds a fixed set of algebraic identities before allocating
a node, so trees stay small under repeated manipulation (differentiation
in particular multiplies tree size without folding). Rules are checked
most specific first:

  const (+ - * /) const       -> const
  0 + f, f + 0, f - 0         -> f
  0 - f                       -> neg(f)
  0 * f, f * 0                -> 0
  1 * f, f * 1, f / 1         -> f
  neg(neg(f))                 -> f
  neg(const(c))               -> const(-c)
  poly(a) * poly(b)           -> poly(a conv b)
  sin/cos/tan/exp/log(const)  -> const
  powi(const(c), n)           -> const(c^n)
  powi(f, 0), powi(f, 1)      -> 1, f
  poly([]), poly([c])         -> const(0), const(c)

sum_of and product_of never simplify: they are accumulation points.
Nothing else is rewritten.
"""

import numpy as np
from typing import Iterable, Sequence

from .coefficients import poly_mul, poly_trim
from .expression import (
    Expression,
    Variable,
    Constant,
    Add,
    Sub,
    Mul,
    Div,
    Neg,
    Sin,
    Cos,
    Tan,
    Exp,
    Log,
    Sum,
    Product,
    IntPower,
    Poly,
    PolyWithFnCoeffs,
)


def _is_const(f: Expression, value=None) -> bool:
    if not isinstance(f, Constant):
        return False
    return value is None or f.value == value


def _fold(ufunc, *values: float) -> Constant:
    # IEEE results (inf, nan) instead of exceptions
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return Constant(float(ufunc(*(np.float64(v) for v in values))))


# ================================================================
# LEAVES
# ================================================================

def var(i: int) -> Variable:
    return Variable(i)


def const(c: float) -> Constant:
    return Constant(c)


X = Variable(0)
Y = Variable(1)
Z = Variable(2)


# ================================================================
# ARITHMETIC
# ================================================================

def add(f: Expression, g: Expression) -> Expression:
    if _is_const(f) and _is_const(g):
        return _fold(np.add, f.value, g.value)
    if _is_const(f, 0.0):
        return g
    if _is_const(g, 0.0):
        return f
    return Add(f, g)


def sub(f: Expression, g: Expression) -> Expression:
    if _is_const(f) and _is_const(g):
        return _fold(np.subtract, f.value, g.value)
    if _is_const(g, 0.0):
        return f
    if _is_const(f, 0.0):
        return neg(g)
    return Sub(f, g)


def mul(f: Expression, g: Expression) -> Expression:
    if _is_const(f) and _is_const(g):
        return _fold(np.multiply, f.value, g.value)
    if _is_const(f, 0.0) or _is_const(g, 0.0):
        return Constant(0.0)
    if _is_const(f, 1.0):
        return g
    if _is_const(g, 1.0):
        return f
    if isinstance(f, Poly) and isinstance(g, Poly):
        return poly(poly_mul(f.coefficients, g.coefficients))
    return Mul(f, g)


def div(f: Expression, g: Expression) -> Expression:
    if _is_const(f) and _is_const(g):
        return _fold(np.divide, f.value, g.value)
    if _is_const(g, 1.0):
        return f
    return Div(f, g)


def neg(f: Expression) -> Expression:
    if isinstance(f, Neg):
        return f.operand
    if _is_const(f):
        return Constant(-f.value)
    return Neg(f)


# ================================================================
# TRANSCENDENTAL
# ================================================================

def sin(f: Expression) -> Expression:
    if _is_const(f):
        return _fold(np.sin, f.value)
    return Sin(f)


def cos(f: Expression) -> Expression:
    if _is_const(f):
        return _fold(np.cos, f.value)
    return Cos(f)


def tan(f: Expression) -> Expression:
    if _is_const(f):
        return _fold(np.tan, f.value)
    return Tan(f)


def exp(f: Expression) -> Expression:
    if _is_const(f):
        return _fold(np.exp, f.value)
    return Exp(f)


def log(f: Expression) -> Expression:
    if _is_const(f):
        return _fold(np.log, f.value)
    return Log(f)


# ================================================================
# N-ARY, POWERS, POLYNOMIALS
# ================================================================

def sum_of(fs: Iterable[Expression]) -> Sum:
    return Sum(tuple(fs))


def product_of(fs: Iterable[Expression]) -> Product:
    return Product(tuple(fs))


def powi(f: Expression, n: int) -> Expression:
    if _is_const(f):
        return _fold(np.power, f.value, float(n))
    if n == 0:
        return Constant(1.0)
    if n == 1:
        return f
    return IntPower(f, n)


def poly(coefficients: Sequence[float]) -> Expression:
    """Polynomial in x_0. Fewer than two coefficients give a Constant."""
    coeffs = poly_trim(coefficients)
    if len(coeffs) == 0:
        return Constant(0.0)
    if len(coeffs) == 1:
        return Constant(coeffs[0])
    return Poly(tuple(coeffs))


def poly_fn_coeffs(coefficients: Sequence[Expression], i: int) -> PolyWithFnCoeffs:
    """Polynomial in x_i whose coefficients are expressions."""
    return PolyWithFnCoeffs(tuple(coefficients), i)
