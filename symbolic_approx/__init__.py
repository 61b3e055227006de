"""
symbolic_approx: symbolic expressions and numerical function approximation.

Build functions as expression trees, differentiate them symbolically,
integrate them numerically, and approximate them with polynomials either by
Legendre projection or by gradient descent. Every representation can be
sampled into (x, y) pairs for a drawing layer.
"""

from .exceptions import ApproximationError, PreconditionError
from .coefficients import poly_eval, poly_scale, poly_mul, poly_derivative, poly_trim
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
from .constructors import (
    X,
    Y,
    Z,
    var,
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
    poly_fn_coeffs,
)
from .differentiate import pdv
from .polynomial import Polynomial
from .sampling import (
    sample,
    sample_interval_equidistributed,
    sample_interval_random,
)
from .quadrature import (
    QuadratureRule,
    IntMethod,
    integrate,
    inner_product,
    int_midpoint,
    int_trapezoidal,
    int_composite_trapezoidal,
)
from .legendre import (
    legendre_rodrigues,
    legendre_basis,
    legendre_coefficients,
    legendre_approx,
    legendre_polynomial,
)
from .fitting import (
    compute_gradient_descent_step,
    mean_squared_error,
    GradientDescentFitter,
)
from .network import NeuralNetwork
from .config import ApproximationSettings, get_settings, configure
from .workbench import Workbench

__all__ = [
    "ApproximationError",
    "PreconditionError",
    "poly_eval",
    "poly_scale",
    "poly_mul",
    "poly_derivative",
    "poly_trim",
    "Expression",
    "Variable",
    "Constant",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Neg",
    "Sin",
    "Cos",
    "Tan",
    "Exp",
    "Log",
    "Sum",
    "Product",
    "IntPower",
    "Poly",
    "PolyWithFnCoeffs",
    "X",
    "Y",
    "Z",
    "var",
    "const",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "sin",
    "cos",
    "tan",
    "exp",
    "log",
    "powi",
    "poly",
    "sum_of",
    "product_of",
    "poly_fn_coeffs",
    "pdv",
    "Polynomial",
    "sample",
    "sample_interval_equidistributed",
    "sample_interval_random",
    "QuadratureRule",
    "IntMethod",
    "integrate",
    "inner_product",
    "int_midpoint",
    "int_trapezoidal",
    "int_composite_trapezoidal",
    "legendre_rodrigues",
    "legendre_basis",
    "legendre_coefficients",
    "legendre_approx",
    "legendre_polynomial",
    "compute_gradient_descent_step",
    "mean_squared_error",
    "GradientDescentFitter",
    "NeuralNetwork",
    "ApproximationSettings",
    "get_settings",
    "configure",
    "Workbench",
]
