"""Curve sampling infrastructure.

This module bakes easing curves onto uniform grids, either as CurvePoints
or as numpy arrays, and linearly interpolates between baked points.
"""

from __future__ import annotations

import logging

import numpy as np

from tweenkit.core.curves.easing import get_easing
from tweenkit.core.curves.models import CurveKind, CurvePoint

logger = logging.getLogger(__name__)


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1].

    Returns N samples: [0.0, 1/(N-1), ..., 1.0]. Both endpoints are
    included so a baked curve starts and ends exactly where the curve does.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values in [0, 1].

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]


def bake_curve(kind: CurveKind | str | None, n_samples: int) -> list[CurvePoint]:
    """Sample an easing curve into a list of points.

    Args:
        kind: Curve to bake.
        n_samples: Number of samples (must be >= 2).

    Returns:
        CurvePoints with uniformly spaced t, including t=0 and t=1.

    Raises:
        ValueError: If n_samples < 2.
        InvalidCurveKindError: If kind names no curve.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    easing = get_easing(kind)
    points = [CurvePoint(t=t, v=easing(t)) for t in sample_uniform_grid(n_samples)]
    logger.debug(f"Baked curve {kind} with {n_samples} samples")
    return points


def bake_curve_array(kind: CurveKind | str | None, n_samples: int) -> np.ndarray:
    """Sample an easing curve into a (n_samples, 2) array of (t, v) rows."""
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    easing = get_easing(kind)
    t_grid = np.linspace(0.0, 1.0, n_samples)
    values = np.fromiter((easing(float(t)) for t in t_grid), dtype=float, count=n_samples)
    return np.column_stack((t_grid, values))


def interpolate_linear(points: list[CurvePoint], t: float) -> float:
    """Linearly interpolate value at time t.

    Given a list of curve points with non-decreasing t values,
    find the value at the specified time using linear interpolation.

    If t is before the first point, returns the first point's value.
    If t is after the last point, returns the last point's value.

    Args:
        points: List of CurvePoints with non-decreasing t values.
        t: Time value in [0, 1] at which to interpolate.

    Returns:
        Interpolated value at time t.

    Raises:
        ValueError: If points is empty or t is outside [0, 1].

    Example:
        >>> points = [CurvePoint(t=0.0, v=0.0), CurvePoint(t=1.0, v=1.0)]
        >>> interpolate_linear(points, 0.5)
        0.5
    """
    if not points:
        raise ValueError("points cannot be empty")
    if not (0.0 <= t <= 1.0):
        raise ValueError(f"t must be in [0, 1], got {t}")

    if t <= points[0].t:
        return points[0].v
    if t >= points[-1].t:
        return points[-1].v

    for i in range(len(points) - 1):
        if points[i].t <= t <= points[i + 1].t:
            t0, v0 = points[i].t, points[i].v
            t1, v1 = points[i + 1].t, points[i + 1].v
            if t1 > t0:
                alpha = (t - t0) / (t1 - t0)
                return v0 + alpha * (v1 - v0)
            # Degenerate case: same t values
            return v0

    return points[-1].v
