"""UI transitions driven by easing curves."""

from tweenkit.core.transitions.driver import TransitionDriver, TransitionPhase
from tweenkit.core.transitions.effects import hidden_value, resolve_effect, resolve_frame
from tweenkit.core.transitions.models import (
    EffectType,
    TransitionEffect,
    TransitionFrame,
    TransitionSettings,
)

__all__ = [
    "EffectType",
    "TransitionDriver",
    "TransitionEffect",
    "TransitionFrame",
    "TransitionPhase",
    "TransitionSettings",
    "hidden_value",
    "resolve_effect",
    "resolve_frame",
]
