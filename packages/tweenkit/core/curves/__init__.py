"""Easing curves: formulas, evaluation and baking."""

from tweenkit.core.curves.easing import (
    EASING_FUNCTIONS,
    InvalidCurveKindError,
    evaluate_normalized,
    evaluate_range,
    evaluate_range_2d,
    get_easing,
    normalized_progress,
    resolve_kind,
)
from tweenkit.core.curves.models import CurveKind, CurvePoint
from tweenkit.core.curves.sampling import (
    bake_curve,
    bake_curve_array,
    interpolate_linear,
    sample_uniform_grid,
)

__all__ = [
    "EASING_FUNCTIONS",
    "CurveKind",
    "CurvePoint",
    "InvalidCurveKindError",
    "bake_curve",
    "bake_curve_array",
    "evaluate_normalized",
    "evaluate_range",
    "evaluate_range_2d",
    "get_easing",
    "interpolate_linear",
    "normalized_progress",
    "resolve_kind",
    "sample_uniform_grid",
]
