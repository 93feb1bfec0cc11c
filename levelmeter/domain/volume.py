"""Bounded volume value shared by the view model and the app bootstrap."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidBoundsError

MIN_VOLUME = 0
MAX_VOLUME = 10

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class VolumeBounds:
    """Inclusive integer range a volume value is clamped into."""

    min_value: int = MIN_VOLUME
    """Lowest reachable value (the floor)."""

    max_value: int = MAX_VOLUME
    """Highest reachable value (the ceiling)."""

    def __post_init__(self) -> None:
        for name in ("min_value", "max_value"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"VolumeBounds.{name} must be an int.")
        if self.min_value > self.max_value:
            raise InvalidBoundsError(self.min_value, self.max_value)

    @property
    def span(self) -> int:
        return self.max_value - self.min_value

    @property
    def midpoint(self) -> int:
        """Default starting value: half the span above the floor, integer division."""
        return self.min_value + self.span // 2

    def clamp(self, value: int) -> int:
        return max(self.min_value, min(int(value), self.max_value))


class VolumeModel:
    """Single source of truth for the current level.

    The value is clamped, never wrapped: ``increase`` at the ceiling and
    ``decrease`` at the floor leave it unchanged.
    """

    def __init__(
        self,
        min_value: int = MIN_VOLUME,
        max_value: int = MAX_VOLUME,
        *,
        initial: Optional[int] = None,
    ) -> None:
        self.bounds = VolumeBounds(min_value, max_value)
        start = self.bounds.midpoint if initial is None else initial
        self._value = self.bounds.clamp(start)

    @classmethod
    def from_bounds(cls, bounds: VolumeBounds, *, initial: Optional[int] = None) -> "VolumeModel":
        return cls(bounds.min_value, bounds.max_value, initial=initial)

    @property
    def min_value(self) -> int:
        return self.bounds.min_value

    @property
    def max_value(self) -> int:
        return self.bounds.max_value

    @property
    def value(self) -> int:
        return self._value

    # ---- Mutators ----
    def increase(self) -> int:
        if self._value >= self.max_value:
            _log.debug("Volume already at ceiling (%d)", self.max_value)
        self._value = min(self._value + 1, self.max_value)
        return self._value

    def decrease(self) -> int:
        if self._value <= self.min_value:
            _log.debug("Volume already at floor (%d)", self.min_value)
        self._value = max(self._value - 1, self.min_value)
        return self._value

    # ---- Queries ----
    def current_value(self) -> int:
        return self._value

    def fraction(self) -> float:
        """Normalized position of the value within its bounds, in [0.0, 1.0].

        A degenerate range (``min_value == max_value``) is always full.
        """
        span = self.bounds.span
        if span == 0:
            return 1.0
        return (self._value - self.min_value) / span

    def at_min(self) -> bool:
        return self._value <= self.min_value

    def at_max(self) -> bool:
        return self._value >= self.max_value

    def __repr__(self) -> str:
        return (
            f"VolumeModel(value={self._value}, "
            f"min_value={self.min_value}, max_value={self.max_value})"
        )


__all__ = ["MAX_VOLUME", "MIN_VOLUME", "VolumeBounds", "VolumeModel"]
