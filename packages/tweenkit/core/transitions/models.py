"""Transition models.

A transition maps one visibility value (0 = hidden, 1 = shown) onto a set
of UI properties. Each TransitionEffect drives one property; the resolved
values for a single visibility are returned as a TransitionFrame.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tweenkit.core.curves.models import CurveKind


class EffectType(str, Enum):
    """Property driven by a transition effect."""

    FADE = "fade"
    MOVE_X = "move_x"
    MOVE_Y = "move_y"
    SCALE_X = "scale_x"
    SCALE_Y = "scale_y"
    ROTATE_Z = "rotate_z"


class TransitionEffect(BaseModel):
    """One animated property of a transition.

    Attributes:
        type: Property to drive.
        pos: Rest value reached when fully shown.
        ratio: Displacement when hidden. For moves this is a multiple of the
            target width/height (-1 slides in from the left/bottom); for
            scale and rotation it is added to pos directly.
        ease: Curve used for the property. Fade always uses the default
            curve; other types are inert when ease is NONE.
    """

    model_config = ConfigDict(extra="forbid")

    type: EffectType = EffectType.FADE
    pos: float = 0.0
    ratio: float = -1.0
    ease: CurveKind = CurveKind.CUBIC_OUT


class TransitionSettings(BaseModel):
    """Timing and behaviour of a show/hide transition."""

    model_config = ConfigDict(extra="forbid")

    total_time: float = Field(
        default=0.3, ge=0.05, le=10.0, description="Seconds for a full show or hide"
    )
    delay_before_show: float = Field(default=0.0, ge=0.0, le=10.0)
    delay_before_hide: float = Field(default=0.0, ge=0.0, le=10.0)
    auto_activate: bool = Field(
        default=False, description="Activate on show, deactivate when hidden"
    )
    auto_block_input: bool = Field(
        default=True, description="Accept input only while (nearly) shown"
    )
    initial_value: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Visibility at construction"
    )
    effects: list[TransitionEffect] = Field(default_factory=list)


class TransitionFrame(BaseModel):
    """Property values resolved for one visibility value.

    Only the properties driven by an effect are set; the rest stay None.
    """

    model_config = ConfigDict(frozen=True)

    visibility: float
    alpha: float | None = None
    x: float | None = None
    y: float | None = None
    scale_x: float | None = None
    scale_y: float | None = None
    rotate_z: float | None = None
