"""Domain-level error types for the level meter.

Saturating at a bound is not an error; these types only cover configurations
for which no valid state exists.
"""
from __future__ import annotations


class LevelMeterError(Exception):
    """Base class for level meter errors (code + user-presentable message)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class InvalidBoundsError(LevelMeterError, ValueError):
    """Raised when a model is configured with ``min_value > max_value``."""

    def __init__(self, min_value: int, max_value: int):
        super().__init__(
            "invalid_bounds",
            f"min_value ({min_value}) must not exceed max_value ({max_value}).",
        )
        self.min_value = min_value
        self.max_value = max_value


class InvalidGeometryError(LevelMeterError, ValueError):
    """Raised for negative container dimensions or rendering before layout."""

    def __init__(self, message: str):
        super().__init__("invalid_geometry", message)


__all__ = ["InvalidBoundsError", "InvalidGeometryError", "LevelMeterError"]
