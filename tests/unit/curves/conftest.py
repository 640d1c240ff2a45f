"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from tweenkit.core.curves.models import CurvePoint


@pytest.fixture
def simple_linear_points() -> list[CurvePoint]:
    """Create simple linear curve points from 0 to 1."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.5, v=0.5),
        CurvePoint(t=1.0, v=1.0),
    ]


@pytest.fixture
def overshoot_points() -> list[CurvePoint]:
    """Create points that rise past 1 and settle back."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.5, v=1.2),
        CurvePoint(t=1.0, v=1.0),
    ]
