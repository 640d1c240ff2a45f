"""Configuration models for tweenkit."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from tweenkit.core.curves.models import CurveKind
from tweenkit.core.transitions.models import TransitionSettings


class ConfigBase(BaseModel):
    """Base class for tweenkit configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stdout when unset")


class AppConfig(ConfigBase):
    """Application-level configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    default_curve: CurveKind = Field(
        default=CurveKind.NONE, description="Curve used when a command names none"
    )
    bake_samples: int = Field(default=32, ge=2, description="Default sample count for baking")

    transition: TransitionSettings = Field(default_factory=TransitionSettings)

    @classmethod
    def default_path(cls) -> Path:
        return Path("tweenkit.yaml")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load app config, falling back to defaults when the file is absent."""
        from tweenkit.core.config.loader import load_app_config

        return load_app_config(path)  # type: ignore[return-value]
