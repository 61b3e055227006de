"""Tests for coefficient arithmetic and the Polynomial value type."""

import numpy as np
import pytest

from symbolic_approx import PreconditionError
from symbolic_approx.coefficients import (
    poly_eval,
    poly_scale,
    poly_mul,
    poly_derivative,
    poly_trim,
)
from symbolic_approx.expression import Constant, Poly, Sum
from symbolic_approx.polynomial import Polynomial
from symbolic_approx.sampling import sample_interval_equidistributed


# ================================================================
# COEFFICIENT ARITHMETIC
# ================================================================

class TestCoefficientArithmetic:

    def test_eval_matches_horner(self):
        coeffs = [1.0, -2.0, 0.5, 3.0]
        for x in [-2.0, -0.3, 0.0, 1.0, 4.5]:
            horner = 0.0
            for c in reversed(coeffs):
                horner = horner * x + c
            assert poly_eval(coeffs, x) == pytest.approx(horner, rel=1e-12)

    def test_eval_vectorised(self):
        x = np.array([0.0, 1.0, 2.0, 3.0])
        np.testing.assert_allclose(poly_eval([0.0, 0.0, 1.0], x), [0.0, 1.0, 4.0, 9.0])

    def test_scale(self):
        np.testing.assert_allclose(poly_scale([1.0, -2.0, 3.0], 2.0), [2.0, -4.0, 6.0])

    def test_multiply_convolution(self):
        # (1 + 2x)(3 + 4x) = 3 + 10x + 8x^2
        np.testing.assert_array_equal(poly_mul([1.0, 2.0], [3.0, 4.0]), [3.0, 10.0, 8.0])

    def test_multiply_length(self):
        result = poly_mul([1.0, 1.0, 1.0], [2.0, 0.0, 0.0, 5.0])
        assert len(result) == 3 + 4 - 1

    def test_derivative_drops_constant(self):
        # d/dx (5 + 3x + 2x^2 + x^3) = 3 + 4x + 3x^2
        np.testing.assert_array_equal(
            poly_derivative([5.0, 3.0, 2.0, 1.0]), [3.0, 4.0, 3.0]
        )

    def test_derivative_of_constant_is_empty(self):
        assert len(poly_derivative([7.0])) == 0

    def test_trim_strips_trailing_zeros(self):
        np.testing.assert_array_equal(poly_trim([1.0, 0.0, 2.0, 0.0, 0.0]), [1.0, 0.0, 2.0])

    def test_trim_all_zero_is_empty(self):
        assert len(poly_trim([0.0, 0.0])) == 0

    def test_inputs_not_mutated(self):
        coeffs = np.array([1.0, 2.0, 3.0])
        poly_scale(coeffs, 10.0)
        poly_derivative(coeffs)
        poly_mul(coeffs, coeffs)
        np.testing.assert_array_equal(coeffs, [1.0, 2.0, 3.0])


# ================================================================
# POLYNOMIAL VALUE TYPE
# ================================================================

class TestPolynomial:

    def test_degree(self):
        assert Polynomial([1.0, 2.0, 3.0]).degree == 2
        assert Polynomial([4.0]).degree == 0

    def test_empty_rejected(self):
        with pytest.raises(PreconditionError):
            Polynomial([])

    def test_empty_rejected_as_value_error(self):
        with pytest.raises(ValueError):
            Polynomial([])

    def test_coefficients_are_read_only(self):
        p = Polynomial([1.0, 2.0])
        with pytest.raises(ValueError):
            p.coefficients[0] = 5.0

    def test_source_array_not_aliased(self):
        source = np.array([1.0, 2.0])
        p = Polynomial(source)
        source[0] = 100.0
        assert p.coefficients[0] == 1.0

    def test_evaluate(self):
        p = Polynomial([1.0, 0.0, 2.0])  # 1 + 2x^2
        assert p.evaluate(3.0) == pytest.approx(19.0)
        assert isinstance(p.evaluate(3.0), float)

    def test_eval_one_accepts_numpy_scalar(self):
        p = Polynomial([1.0, 0.0, 2.0])
        value = p.eval_one(np.float32(3.0))
        assert type(value) is float
        assert value == pytest.approx(19.0)

    def test_multiply_returns_new(self):
        p = Polynomial([1.0, 2.0])
        q = Polynomial([3.0, 4.0])
        r = p.multiply(q)
        assert r == Polynomial([3.0, 10.0, 8.0])
        assert p == Polynomial([1.0, 2.0])

    def test_scale_returns_new(self):
        p = Polynomial([1.0, 2.0])
        assert p.scale(3.0) == Polynomial([3.0, 6.0])
        assert p == Polynomial([1.0, 2.0])

    def test_derivative_of_constant_is_zero(self):
        assert Polynomial([5.0]).derivative() == Polynomial([0.0])

    def test_trim_keeps_constant(self):
        assert Polynomial([0.0, 0.0]).trim() == Polynomial([0.0])
        assert Polynomial([1.0, 2.0, 0.0]).trim() == Polynomial([1.0, 2.0])

    def test_random_is_reproducible(self):
        p1 = Polynomial.random(4, np.random.default_rng(7))
        p2 = Polynomial.random(4, np.random.default_rng(7))
        assert p1 == p2
        assert p1.degree == 4
        assert np.all(np.abs(p1.coefficients) <= 1.0)

    def test_random_negative_degree_rejected(self):
        with pytest.raises(PreconditionError):
            Polynomial.random(-1, np.random.default_rng(0))


# ================================================================
# CONVERSION TO EXPRESSIONS
# ================================================================

class TestPolynomialConversion:

    def test_to_expression_is_compact(self):
        expr = Polynomial([1.0, 2.0, 3.0]).to_expression()
        assert isinstance(expr, Poly)
        assert expr.coefficients == (1.0, 2.0, 3.0)

    def test_to_expression_degenerates_to_constant(self):
        assert Polynomial([4.0]).to_expression() == Constant(4.0)
        assert Polynomial([4.0, 0.0, 0.0]).to_expression() == Constant(4.0)

    def test_round_trip_matches_direct_evaluation(self):
        p = Polynomial.random(5, np.random.default_rng(3))
        compact = p.to_expression()
        expanded = p.to_function_of_x()
        for x in sample_interval_equidistributed((-2.0, 2.0), 19):
            assert compact.evaluate([x]) == pytest.approx(p.evaluate(x), rel=1e-12, abs=1e-12)
            assert expanded.evaluate([x]) == pytest.approx(p.evaluate(x), rel=1e-10, abs=1e-12)

    def test_function_of_x_skips_zero_terms(self):
        expr = Polynomial([0.0, 2.0, 0.0, 1.0]).to_function_of_x()
        assert isinstance(expr, Sum)
        assert len(expr.terms) == 2
