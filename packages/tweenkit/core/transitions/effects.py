"""Resolve transition effects into property values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from tweenkit.core.curves.easing import evaluate_normalized, evaluate_range
from tweenkit.core.curves.models import CurveKind
from tweenkit.core.transitions.models import EffectType, TransitionEffect, TransitionFrame

_FIELD_BY_TYPE: dict[EffectType, str] = {
    EffectType.MOVE_X: "x",
    EffectType.MOVE_Y: "y",
    EffectType.SCALE_X: "scale_x",
    EffectType.SCALE_Y: "scale_y",
    EffectType.ROTATE_Z: "rotate_z",
}


def hidden_value(effect: TransitionEffect, size: Sequence[float] = (0.0, 0.0)) -> float:
    """Return the property value of an effect when fully hidden.

    Args:
        effect: Effect to inspect (must not be FADE).
        size: Target (width, height), used by moves.
    """
    if effect.type == EffectType.MOVE_X:
        return effect.pos + size[0] * effect.ratio
    if effect.type == EffectType.MOVE_Y:
        return effect.pos + size[1] * effect.ratio
    if effect.type == EffectType.FADE:
        raise ValueError("fade has no positional hidden value")
    return effect.pos + effect.ratio


def resolve_effect(
    effect: TransitionEffect,
    visibility: float,
    size: Sequence[float] = (0.0, 0.0),
) -> float | None:
    """Resolve one effect at a visibility value.

    Returns None for non-fade effects whose ease is NONE.
    """
    if effect.type == EffectType.FADE:
        return evaluate_normalized(visibility, 1)
    if effect.ease == CurveKind.NONE:
        return None
    return evaluate_range(visibility, 1, hidden_value(effect, size), effect.pos, effect.ease)


def resolve_frame(
    effects: Iterable[TransitionEffect],
    visibility: float,
    size: Sequence[float] = (0.0, 0.0),
) -> TransitionFrame:
    """Resolve all effects at a visibility value.

    Later effects of the same type override earlier ones.

    Args:
        effects: Effects to apply, in order.
        visibility: 0 (hidden) to 1 (shown).
        size: Target (width, height), used by moves.

    Example:
        >>> fx = [TransitionEffect(type=EffectType.MOVE_X, pos=0.0, ratio=-1.0)]
        >>> resolve_frame(fx, 1.0, size=(200.0, 100.0)).x
        0.0
    """
    values: dict[str, Any] = {"visibility": visibility}
    for effect in effects:
        value = resolve_effect(effect, visibility, size)
        if value is None:
            continue
        if effect.type == EffectType.FADE:
            values["alpha"] = value
        else:
            values[_FIELD_BY_TYPE[effect.type]] = value
    return TransitionFrame(**values)
