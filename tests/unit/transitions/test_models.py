"""Tests for transition models."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from tweenkit.core.curves.models import CurveKind
from tweenkit.core.transitions.models import (
    EffectType,
    TransitionEffect,
    TransitionFrame,
    TransitionSettings,
)


class TestTransitionEffect:
    """Tests for TransitionEffect defaults and parsing."""

    def test_defaults(self) -> None:
        effect = TransitionEffect()
        assert effect.type == EffectType.FADE
        assert effect.pos == 0.0
        assert effect.ratio == -1.0
        assert effect.ease == CurveKind.CUBIC_OUT

    def test_parses_strings(self) -> None:
        effect = TransitionEffect.model_validate(
            {"type": "move_y", "pos": 12.0, "ratio": 1.0, "ease": "bounce_out"}
        )
        assert effect.type == EffectType.MOVE_Y
        assert effect.ease == CurveKind.BOUNCE_OUT

    def test_unknown_ease_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TransitionEffect.model_validate({"ease": "wobble"})


class TestTransitionSettings:
    """Tests for TransitionSettings validation."""

    def test_defaults(self) -> None:
        settings = TransitionSettings()
        assert settings.total_time == 0.3
        assert settings.delay_before_show == 0.0
        assert settings.delay_before_hide == 0.0
        assert settings.auto_activate is False
        assert settings.auto_block_input is True
        assert settings.initial_value == 1.0
        assert settings.effects == []

    @pytest.mark.parametrize("total_time", [0.0, 0.01, 10.5])
    def test_total_time_bounds(self, total_time: float) -> None:
        with pytest.raises(ValidationError):
            TransitionSettings(total_time=total_time)

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TransitionSettings(delay_before_show=-1.0)

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TransitionSettings.model_validate({"duration": 1.0})


class TestTransitionFrame:
    """Tests for TransitionFrame."""

    def test_unset_properties_are_none(self) -> None:
        frame = TransitionFrame(visibility=0.5)
        assert frame.alpha is None
        assert frame.x is None
        assert frame.rotate_z is None
