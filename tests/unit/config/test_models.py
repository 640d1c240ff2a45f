"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import pytest

from tweenkit.core.config.models import AppConfig, ConfigBase, LoggingConfig
from tweenkit.core.curves.models import CurveKind


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.structured is False
        assert config.filename is None

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="TRACE")

    def test_rejects_lowercase_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="debug")


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()
        assert config.default_curve == CurveKind.NONE
        assert config.bake_samples == 32
        assert config.transition.total_time == 0.3

    def test_default_path(self):
        assert AppConfig.default_path() == Path("tweenkit.yaml")

    def test_curve_from_value(self):
        assert AppConfig(default_curve="quartic_in").default_curve == CurveKind.QUARTIC_IN

    def test_bake_samples_minimum(self):
        with pytest.raises(ValidationError):
            AppConfig(bake_samples=1)

    def test_nested_transition(self):
        config = AppConfig.model_validate({"transition": {"total_time": 1.5}})
        assert config.transition.total_time == 1.5


class TestConfigBase:
    """Tests for ConfigBase."""

    def test_default_path_required(self):
        with pytest.raises(NotImplementedError):
            ConfigBase.default_path()
