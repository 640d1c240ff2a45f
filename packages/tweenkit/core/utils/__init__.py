"""Shared utilities for tweenkit."""

from tweenkit.core.utils.json import read_json, write_json
from tweenkit.core.utils.math import clamp, clamp01, lerp

__all__ = [
    "clamp",
    "clamp01",
    "lerp",
    "read_json",
    "write_json",
]
