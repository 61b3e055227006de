"""Tests for the simplifying expression constructors."""

import math
import pytest

from symbolic_approx.constructors import (
    X,
    Y,
    const,
    add,
    sub,
    mul,
    div,
    neg,
    sin,
    cos,
    tan,
    exp,
    log,
    powi,
    poly,
    sum_of,
    product_of,
)
from symbolic_approx.expression import (
    Constant,
    Add,
    Sub,
    Mul,
    Div,
    Neg,
    Sin,
    Exp,
    Log,
    Sum,
    Product,
    IntPower,
    Poly,
)


# ================================================================
# CONSTANT FOLDING
# ================================================================

class TestConstantFolding:

    def test_add_constants(self):
        assert add(const(2.0), const(3.0)) == Constant(5.0)

    def test_sub_mul_div_constants(self):
        assert sub(const(2.0), const(3.0)) == Constant(-1.0)
        assert mul(const(2.0), const(3.0)) == Constant(6.0)
        assert div(const(3.0), const(2.0)) == Constant(1.5)

    def test_divide_constant_by_zero_is_ieee(self):
        assert div(const(1.0), const(0.0)) == Constant(math.inf)
        assert math.isnan(div(const(0.0), const(0.0)).value)

    def test_transcendentals_fold(self):
        for build, fn in [(sin, math.sin), (cos, math.cos), (tan, math.tan),
                          (exp, math.exp), (log, math.log)]:
            folded = build(const(0.5))
            assert isinstance(folded, Constant)
            assert folded.value == pytest.approx(fn(0.5), rel=1e-14)

    def test_log_of_zero_folds_to_minus_infinity(self):
        assert log(const(0.0)) == Constant(-math.inf)

    def test_power_of_constant(self):
        assert powi(const(2.0), 10) == Constant(1024.0)
        assert powi(const(0.0), -1) == Constant(math.inf)


# ================================================================
# IDENTITIES
# ================================================================

class TestAdditiveIdentities:

    def test_zero_plus_f(self):
        assert add(const(0.0), X) is X

    def test_f_plus_zero(self):
        assert add(X, const(0.0)) is X

    def test_f_minus_zero(self):
        assert sub(X, const(0.0)) is X

    def test_zero_minus_f(self):
        assert sub(const(0.0), X) == Neg(X)

    def test_generic_nodes(self):
        assert add(X, Y) == Add(X, Y)
        assert sub(X, Y) == Sub(X, Y)


class TestMultiplicativeIdentities:

    def test_zero_absorbs(self):
        assert mul(const(0.0), sin(X)) == Constant(0.0)
        assert mul(sin(X), const(0.0)) == Constant(0.0)

    def test_one_is_identity(self):
        assert mul(const(1.0), X) is X
        assert mul(X, const(1.0)) is X
        assert div(X, const(1.0)) is X

    def test_generic_nodes(self):
        assert mul(X, Y) == Mul(X, Y)
        assert div(X, Y) == Div(X, Y)
        assert div(const(1.0), X) == Div(Constant(1.0), X)

    def test_poly_times_poly_stays_poly(self):
        # (1 + 2x)(3 + 4x)
        result = mul(poly([1.0, 2.0]), poly([3.0, 4.0]))
        assert result == Poly((3.0, 10.0, 8.0))


class TestNegation:

    def test_double_negation(self):
        assert neg(neg(X)) is X

    def test_negated_constant(self):
        assert neg(const(2.0)) == Constant(-2.0)

    def test_generic(self):
        assert neg(X) == Neg(X)


class TestPowers:

    def test_power_zero(self):
        assert powi(X, 0) == Constant(1.0)

    def test_power_one(self):
        assert powi(X, 1) is X

    def test_generic(self):
        assert powi(X, 3) == IntPower(X, 3)


class TestPolyConstructor:

    def test_empty_is_zero(self):
        assert poly([]) == Constant(0.0)

    def test_single_coefficient_is_constant(self):
        assert poly([4.0]) == Constant(4.0)

    def test_trailing_zeros_stripped(self):
        assert poly([1.0, 2.0, 0.0, 0.0]) == Poly((1.0, 2.0))

    def test_trailing_zeros_down_to_constant(self):
        assert poly([3.0, 0.0]) == Constant(3.0)
        assert poly([0.0, 0.0, 0.0]) == Constant(0.0)


class TestNoSimplification:

    def test_sum_keeps_everything(self):
        s = sum_of([const(0.0), X, const(0.0)])
        assert s == Sum((Constant(0.0), X, Constant(0.0)))

    def test_product_keeps_everything(self):
        p = product_of([const(1.0), const(2.0)])
        assert isinstance(p, Product)
        assert len(p.factors) == 2

    def test_nonconstant_transcendentals(self):
        assert sin(X) == Sin(X)
        assert exp(X) == Exp(X)
        assert log(X) == Log(X)


class TestTreeSize:

    def test_folding_keeps_derivative_chains_small(self):
        # ((0 + 1) * 1) folds all the way down
        assert mul(add(const(0.0), const(1.0)), const(1.0)) == Constant(1.0)
