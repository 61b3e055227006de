"""
Workbench: the host-facing wrapper around the approximation core.

A drawing host runs a frame loop; each frame it may refine a fit and then
asks for the sample sequences to draw. The Workbench keeps that state and
reads every numeric parameter from ApproximationSettings:

  - approximate(f) -> Expression : Legendre projection of f
  - start_fit(f)                 : begin fitting a random polynomial to f
  - fit_step() -> dict           : one gradient-descent step + diagnostics
  - curve(fn) -> [(x, y), ...]   : samples of fn over the configured interval
  - curves({name: fn}) -> dict   : the same for several functions

Nothing here draws; it only hands (x, y) sequences across the boundary.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .config import ApproximationSettings, get_settings
from .exceptions import ApproximationError
from .expression import Expression
from .fitting import GradientDescentFitter
from .legendre import legendre_approx
from .polynomial import Polynomial
from .sampling import ScalarFunction, sample

logger = logging.getLogger(__name__)


class Workbench:
    """Holds the per-session approximation state for a drawing host.

    Usage:
        wb = Workbench()
        p = wb.approximate(f)
        wb.start_fit(f)
        for frame in frames:
            wb.fit_step()
            lines = wb.curves({"f": f, "legendre": p, "fit": wb.fitted})
    """

    def __init__(self, settings: Optional[ApproximationSettings] = None):
        self.settings = settings if settings is not None else get_settings()
        self._rng = self.settings.make_rng()
        self._fitter: Optional[GradientDescentFitter] = None

    # --- Legendre ---

    def approximate(self, f: ScalarFunction, terms: Optional[int] = None) -> Expression:
        n = terms if terms is not None else self.settings.legendre_terms
        method = self.settings.int_method()
        logger.info(
            "Legendre projection: %d terms, %s(%d)",
            n,
            method.rule.value,
            method.subdivisions,
        )
        return legendre_approx(f, n, method)

    # --- Gradient descent ---

    def start_fit(
        self, f: ScalarFunction, initial: Optional[Polynomial] = None
    ) -> Polynomial:
        s = self.settings
        if initial is None:
            initial = Polynomial.random(s.polynomial_degree, self._rng)
        self._fitter = GradientDescentFitter(
            f,
            initial,
            s.interval,
            sample_size=s.sample_size,
            step_size=s.step_size,
            decay=s.step_decay,
            rng=self._rng,
        )
        return initial

    @property
    def fitted(self) -> Optional[Polynomial]:
        return self._fitter.polynomial if self._fitter is not None else None

    def fit_step(self) -> dict:
        if self._fitter is None:
            raise ApproximationError("fit_step() called before start_fit()")
        polynomial = self._fitter.step()
        return {
            "step": self._fitter.step_count,
            "mse": self._fitter.history[-1],
            "step_size": self._fitter.current_step_size(),
            "formula": str(polynomial),
        }

    # --- Samples for the drawing layer ---

    def curve(self, fn: ScalarFunction) -> List[Tuple[float, float]]:
        return sample(fn, self.settings.interval, self.settings.sample_steps)

    def curves(
        self, functions: Dict[str, ScalarFunction]
    ) -> Dict[str, List[Tuple[float, float]]]:
        return {
            name: self.curve(fn) for name, fn in functions.items() if fn is not None
        }
