"""Curve schema models for the easing engine.

This module defines the curve primitives shared across the package:
- CurveKind: The closed set of named easing curves
- CurvePoint: A single sampled point (t, v) of a curve

Curve values are not bounded to [0, 1]; back, elastic and bounce curves
overshoot mid-curve and baked points keep that overshoot.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CurveKind(str, Enum):
    """Identifiers for built-in easing curves.

    Ordered from the flattest to the sharpest family:
    linear, sinusoidal, circular, quadratic, cubic, quartic, quintic,
    exponential. Back, elastic and bounce overshoot the [0, 1] range.
    """

    # Sentinel for "no curve specified"; evaluates as CUBIC_IN_OUT
    NONE = "none"

    LINEAR = "linear"

    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"

    QUADRATIC_IN = "quadratic_in"
    QUADRATIC_OUT = "quadratic_out"
    QUADRATIC_IN_OUT = "quadratic_in_out"

    QUARTIC_IN = "quartic_in"
    QUARTIC_OUT = "quartic_out"
    QUARTIC_IN_OUT = "quartic_in_out"

    QUINTIC_IN = "quintic_in"
    QUINTIC_OUT = "quintic_out"
    QUINTIC_IN_OUT = "quintic_in_out"

    SINUSOIDAL_IN = "sinusoidal_in"
    SINUSOIDAL_OUT = "sinusoidal_out"
    SINUSOIDAL_IN_OUT = "sinusoidal_in_out"

    EXPONENTIAL_IN = "exponential_in"
    EXPONENTIAL_OUT = "exponential_out"
    EXPONENTIAL_IN_OUT = "exponential_in_out"

    CIRCULAR_IN = "circular_in"
    CIRCULAR_OUT = "circular_out"
    CIRCULAR_IN_OUT = "circular_in_out"

    # Overshoot at start/end
    BACK_IN = "back_in"
    BACK_OUT = "back_out"
    BACK_IN_OUT = "back_in_out"

    # Springs well past the range
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"

    # Bounces inside the range
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN_OUT = "bounce_in_out"


class CurvePoint(BaseModel):
    """A single sampled point on an easing curve.

    This model is immutable (frozen=True).

    Attributes:
        t: Normalized time in range [0, 1].
        v: Curve value at t. Unbounded so overshoot survives baking.

    Example:
        >>> point = CurvePoint(t=0.5, v=0.875)
        >>> point.t
        0.5
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., description="Curve value at t")
