"""
Configuration for hosts that drive the approximation loop.

Uses pydantic-settings for validated numeric parameters. Every field can
be overridden through an environment variable with the SYMAPPROX_ prefix,
e.g. SYMAPPROX_LEGENDRE_TERMS=12. No settings file is read.
"""

import logging
import numpy as np
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .quadrature import IntMethod, QuadratureRule
from .sampling import Interval

logger = logging.getLogger(__name__)


class ApproximationSettings(BaseSettings):
    """Interval, resolution and optimiser parameters."""

    model_config = SettingsConfigDict(env_prefix="SYMAPPROX_")

    # Visible / fitting interval
    interval_left: float = Field(default=-1.0)
    interval_right: float = Field(default=1.0)

    # Points handed to the drawing layer per curve
    sample_steps: int = Field(default=500, ge=1)

    # Quadrature
    quadrature_rule: QuadratureRule = Field(default=QuadratureRule.COMPOSITE_TRAPEZOIDAL)
    quadrature_subdivisions: int = Field(default=10000, ge=1)

    # Legendre projection
    legendre_terms: int = Field(default=8, ge=1, le=64)

    # Gradient descent
    polynomial_degree: int = Field(default=3, ge=0, le=64)
    step_size: float = Field(default=0.1, gt=0.0)
    step_decay: float = Field(default=0.0, ge=0.0)
    sample_size: int = Field(default=1000, ge=1)
    seed: Optional[int] = Field(default=None)

    @model_validator(mode="after")
    def check_interval(self) -> "ApproximationSettings":
        if not self.interval_right > self.interval_left:
            raise ValueError(
                f"interval_right ({self.interval_right}) must be greater than "
                f"interval_left ({self.interval_left})"
            )
        return self

    @property
    def interval(self) -> Interval:
        return (self.interval_left, self.interval_right)

    def int_method(self) -> IntMethod:
        return IntMethod(self.quadrature_rule, self.quadrature_subdivisions)

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


_settings: Optional[ApproximationSettings] = None


def get_settings() -> ApproximationSettings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = ApproximationSettings()
        logger.debug("loaded settings: %s", _settings)
    return _settings


def configure(
    settings: Optional[ApproximationSettings] = None, **kwargs
) -> ApproximationSettings:
    """Replace the global settings, from an instance or keyword overrides."""
    global _settings
    if settings is not None:
        _settings = settings
    else:
        _settings = ApproximationSettings(**kwargs)
    return _settings
