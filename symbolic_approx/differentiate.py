"""
Symbolic differentiation.

pdv(f, i) returns a new tree for the partial derivative of f with respect
to x_i. There is one rule per node class, registered on `pdv` below; an
unregistered class raises NotImplementedError, so a new node type cannot
slip through silently. The input tree is never modified, and any subtree
that appears in the result more than once is deep-copied.

Results are assembled with the simplifying constructors, which keeps the
zeros and ones produced by the rules out of the tree.
"""

import copy
from functools import singledispatch

from .constructors import (
    const,
    add,
    sub,
    mul,
    div,
    neg,
    sin,
    cos,
    exp,
    powi,
    poly,
    sum_of,
    product_of,
    poly_fn_coeffs,
)
from .coefficients import poly_derivative
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


def _copy(f: Expression) -> Expression:
    return copy.deepcopy(f)


@singledispatch
def pdv(f: Expression, i: int) -> Expression:
    """Partial derivative of f with respect to x_i."""
    raise NotImplementedError(f"no derivative rule for {type(f).__name__}")


@pdv.register
def _(f: Variable, i: int) -> Expression:
    return const(1.0) if f.index == i else const(0.0)


@pdv.register
def _(f: Constant, i: int) -> Expression:
    return const(0.0)


@pdv.register
def _(f: Add, i: int) -> Expression:
    return add(pdv(f.left, i), pdv(f.right, i))


@pdv.register
def _(f: Sub, i: int) -> Expression:
    return sub(pdv(f.left, i), pdv(f.right, i))


@pdv.register
def _(f: Neg, i: int) -> Expression:
    return neg(pdv(f.operand, i))


@pdv.register
def _(f: Mul, i: int) -> Expression:
    # f'g + fg'
    return add(
        mul(pdv(f.left, i), _copy(f.right)),
        mul(_copy(f.left), pdv(f.right, i)),
    )


@pdv.register
def _(f: Div, i: int) -> Expression:
    # (f'g - fg') / g^2
    numerator = sub(
        mul(pdv(f.left, i), _copy(f.right)),
        mul(_copy(f.left), pdv(f.right, i)),
    )
    return div(numerator, mul(_copy(f.right), _copy(f.right)))


# ================================================================
# CHAIN RULE
# ================================================================

@pdv.register
def _(f: Sin, i: int) -> Expression:
    return mul(cos(_copy(f.operand)), pdv(f.operand, i))


@pdv.register
def _(f: Cos, i: int) -> Expression:
    return mul(neg(sin(_copy(f.operand))), pdv(f.operand, i))


@pdv.register
def _(f: Tan, i: int) -> Expression:
    # sec^2 = 1 / cos^2
    return mul(div(const(1.0), powi(cos(_copy(f.operand)), 2)), pdv(f.operand, i))


@pdv.register
def _(f: Exp, i: int) -> Expression:
    return mul(exp(_copy(f.operand)), pdv(f.operand, i))


@pdv.register
def _(f: Log, i: int) -> Expression:
    return mul(div(const(1.0), _copy(f.operand)), pdv(f.operand, i))


@pdv.register
def _(f: IntPower, i: int) -> Expression:
    # n * f^(n-1) * f'
    n = f.exponent
    return mul(const(float(n)), mul(powi(_copy(f.operand), n - 1), pdv(f.operand, i)))


# ================================================================
# N-ARY
# ================================================================

@pdv.register
def _(f: Sum, i: int) -> Expression:
    return sum_of(pdv(term, i) for term in f.terms)


@pdv.register
def _(f: Product, i: int) -> Expression:
    # sum over j of f_j' * (product of the others)
    summands = []
    for j, factor in enumerate(f.factors):
        others = [_copy(g) for k, g in enumerate(f.factors) if k != j]
        summands.append(mul(pdv(factor, i), product_of(others)))
    return sum_of(summands)


# ================================================================
# POLYNOMIALS
# ================================================================

@pdv.register
def _(f: Poly, i: int) -> Expression:
    # Poly is a function of x_0 only
    if i != 0:
        return const(0.0)
    return poly(poly_derivative(f.coefficients))


@pdv.register
def _(f: PolyWithFnCoeffs, i: int) -> Expression:
    # d/dx_i sum_k f_k * x_j^k
    #   = sum_k [f_k' * x_j^k + f_k * k * x_j^(k-1) * (i == j)]
    # which is again a polynomial in x_j with coefficients
    #   g_k = f_k' + (k + 1) * f_{k+1} * (i == j)
    fs = f.coefficients
    new_coeffs = []
    for k, fk in enumerate(fs):
        g = pdv(fk, i)
        if i == f.index and k + 1 < len(fs):
            g = add(g, mul(const(float(k + 1)), _copy(fs[k + 1])))
        new_coeffs.append(g)
    return poly_fn_coeffs(new_coeffs, f.index)
