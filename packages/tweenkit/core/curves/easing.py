"""Easing curve formulas and evaluation.

Every curve is a pure function of normalized progress t in [0, 1]. The
formulas keep their exact constants (back overshoot 1.70158, elastic
period 0.4, bounce coefficient 7.5625) so animations sampled here match
frame-for-frame with the UI they were tuned against.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import math

from tweenkit.core.curves.models import CurveKind
from tweenkit.core.utils.math import clamp01, lerp

EasingFn = Callable[[float], float]
Vector2 = tuple[float, float]

ELASTIC_AMPLITUDE = 1.0
ELASTIC_PERIOD = 0.4

BACK_OVERSHOOT = 1.70158
BACK_SCALE = 2.70158

BOUNCE_COEFFICIENT = 7.5625
BOUNCE_1 = 1.0 / 2.75
BOUNCE_2 = 2.0 / 2.75
BOUNCE_3 = 1.5 / 2.75
BOUNCE_4 = 2.5 / 2.75
BOUNCE_5 = 2.25 / 2.75
BOUNCE_6 = 2.625 / 2.75


class InvalidCurveKindError(ValueError):
    """Raised when a value does not name a CurveKind."""


def linear(t: float) -> float:
    return t


def quadratic_in(t: float) -> float:
    return t * t


def quadratic_out(t: float) -> float:
    return -t * (t - 2)


def quadratic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t
    t -= 1
    return -0.5 * (t * (t - 2) - 1)


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    t -= 1
    return t * t * t + 1


def cubic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t * t
    t -= 2
    return 0.5 * (t * t * t + 2)


def quartic_in(t: float) -> float:
    return t * t * t * t


def quartic_out(t: float) -> float:
    t -= 1
    return -(t * t * t * t - 1)


def quartic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t * t * t
    t -= 2
    return -0.5 * (t * t * t * t - 2)


def quintic_in(t: float) -> float:
    return t * t * t * t * t


def quintic_out(t: float) -> float:
    t -= 1
    return t * t * t * t * t + 1


def quintic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t * t * t * t
    t -= 2
    return 0.5 * (t * t * t * t * t + 2)


def sinusoidal_in(t: float) -> float:
    return 1 - math.cos(t * (math.pi / 2))


def sinusoidal_out(t: float) -> float:
    return math.sin(t * (math.pi / 2))


def sinusoidal_in_out(t: float) -> float:
    return -0.5 * (math.cos(math.pi * t) - 1)


def exponential_in(t: float) -> float:
    return math.pow(2, 10 * (t - 1))


def exponential_out(t: float) -> float:
    return -math.pow(2, -10 * t) + 1


def exponential_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * math.pow(2, 10 * (t - 1))
    t -= 1
    return 0.5 * (-math.pow(2, -10 * t) + 2)


def circular_in(t: float) -> float:
    return -(math.sqrt(1 - t * t) - 1)


def circular_out(t: float) -> float:
    t -= 1
    return math.sqrt(1 - t * t)


def circular_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return -0.5 * (math.sqrt(1 - t * t) - 1)
    t -= 2
    return 0.5 * (math.sqrt(1 - t * t) + 1)


def back_in(t: float) -> float:
    return t * t * (BACK_SCALE * t - BACK_OVERSHOOT)


def back_out(t: float) -> float:
    u = t - 1
    return 1 - u * u * (-BACK_SCALE * u - BACK_OVERSHOOT)


def back_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return back_in(t) / 2
    return back_out(t - 1) / 2 + 0.5


def _elastic_phase() -> float:
    return ELASTIC_PERIOD / (2 * math.pi) * math.asin(1 / ELASTIC_AMPLITUDE)


def elastic_in(t: float) -> float:
    t -= 1
    s = _elastic_phase()
    return -(
        ELASTIC_AMPLITUDE
        * math.pow(2, 10 * t)
        * math.sin((t - s) * (2 * math.pi) / ELASTIC_PERIOD)
    )


def elastic_out(t: float) -> float:
    s = _elastic_phase()
    return (
        ELASTIC_AMPLITUDE
        * math.pow(2, -10 * t)
        * math.sin((t - s) * (2 * math.pi) / ELASTIC_PERIOD)
        + 1
    )


def elastic_in_out(t: float) -> float:
    # Split at 0.5 with half amplitude each side; phase is a quarter period
    t -= 0.5
    wave = math.sin((t - ELASTIC_PERIOD / 4) * (2 * math.pi) / ELASTIC_PERIOD)
    if t < 0:
        return -0.5 * (math.pow(2, 10 * t) * wave)
    return math.pow(2, -10 * t) * wave * 0.5 + 1


def bounce_out(t: float) -> float:
    if t < BOUNCE_1:
        return BOUNCE_COEFFICIENT * t * t
    if t < BOUNCE_2:
        return BOUNCE_COEFFICIENT * (t - BOUNCE_3) * (t - BOUNCE_3) + 0.75
    if t < BOUNCE_4:
        return BOUNCE_COEFFICIENT * (t - BOUNCE_5) * (t - BOUNCE_5) + 0.9375
    return BOUNCE_COEFFICIENT * (t - BOUNCE_6) * (t - BOUNCE_6) + 0.984375


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return bounce_in(t * 2) / 2
    return bounce_out(t * 2 - 1) / 2 + 0.5


EASING_FUNCTIONS: dict[CurveKind, EasingFn] = {
    CurveKind.NONE: cubic_in_out,
    CurveKind.LINEAR: linear,
    CurveKind.CUBIC_IN: cubic_in,
    CurveKind.CUBIC_OUT: cubic_out,
    CurveKind.CUBIC_IN_OUT: cubic_in_out,
    CurveKind.QUADRATIC_IN: quadratic_in,
    CurveKind.QUADRATIC_OUT: quadratic_out,
    CurveKind.QUADRATIC_IN_OUT: quadratic_in_out,
    CurveKind.QUARTIC_IN: quartic_in,
    CurveKind.QUARTIC_OUT: quartic_out,
    CurveKind.QUARTIC_IN_OUT: quartic_in_out,
    CurveKind.QUINTIC_IN: quintic_in,
    CurveKind.QUINTIC_OUT: quintic_out,
    CurveKind.QUINTIC_IN_OUT: quintic_in_out,
    CurveKind.SINUSOIDAL_IN: sinusoidal_in,
    CurveKind.SINUSOIDAL_OUT: sinusoidal_out,
    CurveKind.SINUSOIDAL_IN_OUT: sinusoidal_in_out,
    CurveKind.EXPONENTIAL_IN: exponential_in,
    CurveKind.EXPONENTIAL_OUT: exponential_out,
    CurveKind.EXPONENTIAL_IN_OUT: exponential_in_out,
    CurveKind.CIRCULAR_IN: circular_in,
    CurveKind.CIRCULAR_OUT: circular_out,
    CurveKind.CIRCULAR_IN_OUT: circular_in_out,
    CurveKind.BACK_IN: back_in,
    CurveKind.BACK_OUT: back_out,
    CurveKind.BACK_IN_OUT: back_in_out,
    CurveKind.ELASTIC_IN: elastic_in,
    CurveKind.ELASTIC_OUT: elastic_out,
    CurveKind.ELASTIC_IN_OUT: elastic_in_out,
    CurveKind.BOUNCE_IN: bounce_in,
    CurveKind.BOUNCE_OUT: bounce_out,
    CurveKind.BOUNCE_IN_OUT: bounce_in_out,
}


def resolve_kind(kind: CurveKind | str | None) -> CurveKind:
    """Coerce a curve identifier to a CurveKind.

    Accepts a CurveKind, its value ("cubic_out"), its member name
    ("CUBIC_OUT"), or None for the default curve.

    Raises:
        InvalidCurveKindError: If the value names no curve.
    """
    if kind is None:
        return CurveKind.NONE
    if isinstance(kind, CurveKind):
        return kind
    if isinstance(kind, str):
        try:
            return CurveKind(kind.strip().lower())
        except ValueError:
            pass
    raise InvalidCurveKindError(f"Unknown curve kind: {kind!r}")


def get_easing(kind: CurveKind | str | None = CurveKind.NONE) -> EasingFn:
    """Return the formula registered for a curve kind."""
    return EASING_FUNCTIONS[resolve_kind(kind)]


def normalized_progress(current_time: float, total_time: float) -> float:
    """Return current_time / total_time clamped to [0, 1].

    A zero or negative total_time means the transition is already
    complete, so progress is 1.0.
    """
    if total_time <= 0:
        return 1.0
    return clamp01(current_time / total_time)


def evaluate_normalized(
    current_time: float,
    total_time: float,
    kind: CurveKind | str | None = CurveKind.NONE,
) -> float:
    """Evaluate an easing curve at a point in time.

    Args:
        current_time: Elapsed time, in the same unit as total_time.
        total_time: Duration of the transition.
        kind: Curve to sample. None/CurveKind.NONE use cubic in-out.

    Returns:
        Raw curve value. Overshoot curves may leave [0, 1]. A zero or
        negative total_time returns exactly 1.0.

    Example:
        >>> evaluate_normalized(0.5, 1.0, CurveKind.CUBIC_OUT)
        0.875
    """
    easing = get_easing(kind)
    if total_time <= 0:
        return 1.0
    return easing(clamp01(current_time / total_time))


def evaluate_range(
    current_time: float,
    total_time: float,
    start: float,
    end: float,
    kind: CurveKind | str | None = CurveKind.NONE,
) -> float:
    """Map an eased point in time onto [start, end].

    A zero or negative total_time returns end.
    """
    return lerp(start, end, evaluate_normalized(current_time, total_time, kind))


def evaluate_range_2d(
    current_time: float,
    total_time: float,
    start: Sequence[float],
    end: Sequence[float],
    kind: CurveKind | str | None = CurveKind.NONE,
) -> Vector2:
    """Map an eased point in time onto a 2D segment.

    Both axes share one curve sample so the motion stays on a straight
    line between start and end.

    Raises:
        ValueError: If start or end does not have exactly two components.
    """
    if len(start) != 2 or len(end) != 2:
        raise ValueError("start and end must be 2D vectors")

    v = evaluate_normalized(current_time, total_time, kind)
    return (lerp(start[0], end[0], v), lerp(start[1], end[1], v))
