"""Tests for resolving transition effects."""

from __future__ import annotations

import pytest

from tweenkit.core.curves.models import CurveKind
from tweenkit.core.transitions.effects import hidden_value, resolve_effect, resolve_frame
from tweenkit.core.transitions.models import EffectType, TransitionEffect

SIZE = (200.0, 100.0)


class TestHiddenValue:
    """Tests for hidden_value."""

    def test_move_x_uses_width(self) -> None:
        effect = TransitionEffect(type=EffectType.MOVE_X, pos=10.0, ratio=-1.0)
        assert hidden_value(effect, SIZE) == -190.0

    def test_move_y_uses_height(self) -> None:
        effect = TransitionEffect(type=EffectType.MOVE_Y, pos=0.0, ratio=0.5)
        assert hidden_value(effect, SIZE) == 50.0

    def test_scale_adds_ratio(self) -> None:
        effect = TransitionEffect(type=EffectType.SCALE_X, pos=1.0, ratio=-1.0)
        assert hidden_value(effect, SIZE) == 0.0

    def test_rotate_adds_ratio(self) -> None:
        effect = TransitionEffect(type=EffectType.ROTATE_Z, pos=0.0, ratio=90.0)
        assert hidden_value(effect, SIZE) == 90.0

    def test_fade_raises(self) -> None:
        with pytest.raises(ValueError, match="fade"):
            hidden_value(TransitionEffect(type=EffectType.FADE), SIZE)


class TestResolveEffect:
    """Tests for resolve_effect."""

    def test_fade_uses_default_curve(self) -> None:
        """Fade ignores its ease and always uses cubic in-out."""
        effect = TransitionEffect(type=EffectType.FADE, ease=CurveKind.LINEAR)
        assert resolve_effect(effect, 0.25) == pytest.approx(0.0625)
        assert resolve_effect(effect, 0.5) == pytest.approx(0.5)

    def test_fade_endpoints(self) -> None:
        effect = TransitionEffect(type=EffectType.FADE)
        assert resolve_effect(effect, 0.0) == 0.0
        assert resolve_effect(effect, 1.0) == pytest.approx(1.0)

    def test_move_x_linear(self) -> None:
        effect = TransitionEffect(
            type=EffectType.MOVE_X, pos=10.0, ratio=-1.0, ease=CurveKind.LINEAR
        )
        assert resolve_effect(effect, 0.0, SIZE) == -190.0
        assert resolve_effect(effect, 0.5, SIZE) == -90.0
        assert resolve_effect(effect, 1.0, SIZE) == 10.0

    def test_none_ease_is_inert(self) -> None:
        effect = TransitionEffect(type=EffectType.MOVE_X, ease=CurveKind.NONE)
        assert resolve_effect(effect, 0.5, SIZE) is None

    def test_scale_with_cubic_out(self) -> None:
        effect = TransitionEffect(type=EffectType.SCALE_Y, pos=1.0, ratio=-1.0)
        assert resolve_effect(effect, 0.5) == pytest.approx(0.875)


class TestResolveFrame:
    """Tests for resolve_frame."""

    def test_no_effects(self) -> None:
        frame = resolve_frame([], 0.4)
        assert frame.visibility == 0.4
        assert frame.alpha is None
        assert frame.x is None

    def test_sets_each_property(self) -> None:
        effects = [
            TransitionEffect(type=EffectType.FADE),
            TransitionEffect(type=EffectType.MOVE_X, pos=0.0, ratio=-1.0),
            TransitionEffect(type=EffectType.MOVE_Y, pos=5.0, ratio=1.0),
            TransitionEffect(type=EffectType.SCALE_X, pos=1.0, ratio=-0.5),
            TransitionEffect(type=EffectType.SCALE_Y, pos=1.0, ratio=-0.5),
            TransitionEffect(type=EffectType.ROTATE_Z, pos=0.0, ratio=45.0),
        ]
        frame = resolve_frame(effects, 1.0, SIZE)
        assert frame.alpha == pytest.approx(1.0)
        assert frame.x == pytest.approx(0.0)
        assert frame.y == pytest.approx(5.0)
        assert frame.scale_x == pytest.approx(1.0)
        assert frame.scale_y == pytest.approx(1.0)
        assert frame.rotate_z == pytest.approx(0.0)

    def test_hidden_frame(self) -> None:
        effects = [
            TransitionEffect(type=EffectType.FADE),
            TransitionEffect(type=EffectType.MOVE_Y, pos=5.0, ratio=1.0),
        ]
        frame = resolve_frame(effects, 0.0, SIZE)
        assert frame.alpha == 0.0
        assert frame.y == 105.0

    def test_later_effect_wins(self) -> None:
        effects = [
            TransitionEffect(type=EffectType.ROTATE_Z, pos=0.0, ratio=90.0, ease=CurveKind.LINEAR),
            TransitionEffect(type=EffectType.ROTATE_Z, pos=0.0, ratio=10.0, ease=CurveKind.LINEAR),
        ]
        assert resolve_frame(effects, 0.0).rotate_z == 10.0

    def test_inert_effect_does_not_override(self) -> None:
        effects = [
            TransitionEffect(type=EffectType.MOVE_X, pos=3.0, ease=CurveKind.LINEAR),
            TransitionEffect(type=EffectType.MOVE_X, pos=99.0, ease=CurveKind.NONE),
        ]
        assert resolve_frame(effects, 1.0, SIZE).x == 3.0
