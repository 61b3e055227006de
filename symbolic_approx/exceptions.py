"""
Error types raised at the package boundary.

Numeric degeneracy (division by zero, log of a non-positive value,
out-of-range variables) is never an error here: it propagates as IEEE
values. Only precondition violations are raised, before any work starts.
"""


class ApproximationError(Exception):
    """Base class for errors raised by symbolic_approx."""


class PreconditionError(ApproximationError, ValueError):
    """An argument is outside the domain an operation accepts.

    Subclasses ValueError so generic callers can keep catching that.
    """
