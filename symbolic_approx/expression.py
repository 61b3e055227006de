"""
Expression trees: scalar functions of one or more variables.

An expression is a tree of immutable nodes. Leaves pick a component of the
input vector (Variable) or hold a number (Constant); inner nodes combine
their children arithmetically or apply a transcendental function.

Evaluation is structural recursion over the tree. Arguments may be plain
floats or equally-shaped numpy arrays, in which case the whole tree is
evaluated elementwise in one pass (used by quadrature).

Numeric degeneracy is not an error:
  - x / 0 and log(x <= 0) follow IEEE-754 (inf / nan)
  - a Variable whose index is past the end of the arguments reads 0.0

Nodes are normally built through the simplifying constructors in
`constructors`, not by calling these classes directly.
"""

import functools
import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple, FrozenSet, List

from .coefficients import poly_eval
from .exceptions import PreconditionError
from .sampling import Interval, sample


def _arg(args: Sequence[np.ndarray], index: int):
    # out-of-range variables read as 0.0
    if 0 <= index < len(args):
        return args[index]
    return np.float64(0.0)


def _format_number(c: float) -> str:
    return f"{c:g}"


def _format_power(name: str, k: int) -> str:
    if k == 1:
        return name
    return f"{name}^{k}"


# ================================================================
# BASE CLASS
# ================================================================

class Expression:
    """A node in an expression tree."""

    def evaluate(self, args: Sequence, strict: bool = False):
        """Evaluate the tree at the point `args` = (x_0, x_1, ...).

        With strict=True, referencing a variable past the end of `args`
        raises PreconditionError instead of reading 0.0.
        """
        values = [np.asarray(a, dtype=float) for a in args]
        if strict:
            missing = sorted(i for i in self.variables() if i >= len(values))
            if missing:
                raise PreconditionError(
                    f"expression uses variables {missing} but only "
                    f"{len(values)} arguments were given"
                )
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = self._evaluate(values)
        if np.ndim(result) == 0:
            return float(result)
        return result

    def eval_one(self, x: float) -> float:
        """Evaluate as a function of x_0 alone."""
        return self.evaluate([x])

    def eval_many(self, xs: np.ndarray) -> np.ndarray:
        """Evaluate as a function of x_0 at every point of `xs`."""
        xs = np.asarray(xs, dtype=float)
        return np.broadcast_to(self.evaluate([xs]), xs.shape).astype(float)

    def sample(self, interval: Interval, steps: int) -> List[Tuple[float, float]]:
        return sample(self, interval, steps)

    def children(self) -> Tuple["Expression", ...]:
        return ()

    def variables(self) -> FrozenSet[int]:
        """Indices of every variable the expression depends on."""
        found = frozenset()
        for child in self.children():
            found = found | child.variables()
        return found

    # --- Subclasses implement ---

    def _evaluate(self, args: List[np.ndarray]):
        raise NotImplementedError


# ================================================================
# LEAVES
# ================================================================

@dataclass(frozen=True)
class Variable(Expression):
    """Selects x_index from the argument vector."""

    index: int

    def _evaluate(self, args):
        return _arg(args, self.index)

    def variables(self) -> FrozenSet[int]:
        return frozenset([self.index])

    def __str__(self):
        return f"x_{self.index}"


@dataclass(frozen=True)
class Constant(Expression):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def _evaluate(self, args):
        return np.float64(self.value)

    def __str__(self):
        return _format_number(self.value)


# ================================================================
# ARITHMETIC
# ================================================================

@dataclass(frozen=True)
class _Binary(Expression):
    left: Expression
    right: Expression

    ufunc = None
    template = ""

    def children(self):
        return (self.left, self.right)

    def _evaluate(self, args):
        return self.ufunc(self.left._evaluate(args), self.right._evaluate(args))

    def __str__(self):
        return self.template.format(self.left, self.right)


class Add(_Binary):
    ufunc = np.add
    template = "({} + {})"


class Sub(_Binary):
    ufunc = np.subtract
    template = "({} - {})"


class Mul(_Binary):
    ufunc = np.multiply
    template = "({}*{})"


class Div(_Binary):
    ufunc = np.divide
    template = "({}/{})"


@dataclass(frozen=True)
class _Unary(Expression):
    operand: Expression

    ufunc = None
    name = ""

    def children(self):
        return (self.operand,)

    def _evaluate(self, args):
        return self.ufunc(self.operand._evaluate(args))

    def __str__(self):
        return f"{self.name}({self.operand})"


class Neg(_Unary):
    ufunc = np.negative

    def __str__(self):
        return f"-{self.operand}"


# ================================================================
# TRANSCENDENTAL
# ================================================================

class Sin(_Unary):
    ufunc = np.sin
    name = "sin"


class Cos(_Unary):
    ufunc = np.cos
    name = "cos"


class Tan(_Unary):
    ufunc = np.tan
    name = "tan"


class Exp(_Unary):
    ufunc = np.exp
    name = "exp"


class Log(_Unary):
    """Natural logarithm."""

    ufunc = np.log
    name = "log"


# ================================================================
# N-ARY AND POWERS
# ================================================================

@dataclass(frozen=True)
class Sum(Expression):
    """f_1 + f_2 + ... evaluated as a single fold. Empty sum is 0."""

    terms: Tuple[Expression, ...]

    def __post_init__(self):
        object.__setattr__(self, "terms", tuple(self.terms))

    def children(self):
        return self.terms

    def _evaluate(self, args):
        return functools.reduce(
            np.add, (f._evaluate(args) for f in self.terms), np.float64(0.0)
        )

    def __str__(self):
        return "(" + " + ".join(str(f) for f in self.terms) + ")"


@dataclass(frozen=True)
class Product(Expression):
    """f_1 * f_2 * ... evaluated as a single fold. Empty product is 1."""

    factors: Tuple[Expression, ...]

    def __post_init__(self):
        object.__setattr__(self, "factors", tuple(self.factors))

    def children(self):
        return self.factors

    def _evaluate(self, args):
        return functools.reduce(
            np.multiply, (f._evaluate(args) for f in self.factors), np.float64(1.0)
        )

    def __str__(self):
        return "(" + " * ".join(str(f) for f in self.factors) + ")"


@dataclass(frozen=True)
class IntPower(Expression):
    operand: Expression
    exponent: int

    def __post_init__(self):
        object.__setattr__(self, "exponent", int(self.exponent))

    def children(self):
        return (self.operand,)

    def _evaluate(self, args):
        return np.power(self.operand._evaluate(args), float(self.exponent))

    def __str__(self):
        return f"({self.operand}^{self.exponent})"


# ================================================================
# POLYNOMIALS
# ================================================================

@dataclass(frozen=True)
class Poly(Expression):
    """c_0 + c_1*x_0 + ... + c_d*x_0^d with constant coefficients.

    Built through `constructors.poly`, which trims trailing zeros and
    degenerates to a Constant below two coefficients.
    """

    coefficients: Tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(
            self, "coefficients", tuple(float(c) for c in self.coefficients)
        )

    def _evaluate(self, args):
        return poly_eval(self.coefficients, _arg(args, 0))

    def variables(self) -> FrozenSet[int]:
        return frozenset([0])

    def __str__(self):
        parts = []
        for k, c in enumerate(self.coefficients):
            if k == 0:
                parts.append(_format_number(c))
            else:
                parts.append(f"{_format_number(c)}*{_format_power('x_0', k)}")
        return "(" + " + ".join(parts) + ")"


@dataclass(frozen=True)
class PolyWithFnCoeffs(Expression):
    """f_0 + f_1*x_j + ... + f_d*x_j^d where every f_k is an expression.

    The coefficients may themselves depend on any variable, x_j included.
    """

    coefficients: Tuple[Expression, ...]
    index: int

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(self.coefficients))

    def children(self):
        return self.coefficients

    def variables(self) -> FrozenSet[int]:
        return super().variables() | frozenset([self.index])

    def _evaluate(self, args):
        x = _arg(args, self.index)
        total = np.float64(0.0)
        for k, f in enumerate(self.coefficients):
            total = total + f._evaluate(args) * np.power(x, float(k))
        return total

    def __str__(self):
        name = f"x_{self.index}"
        parts = []
        for k, f in enumerate(self.coefficients):
            if k == 0:
                parts.append(str(f))
            else:
                parts.append(f"{f}*{_format_power(name, k)}")
        return "(" + " + ".join(parts) + ")"
