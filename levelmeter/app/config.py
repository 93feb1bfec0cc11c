"""Typed defaults for the level meter window and model.

There is no configuration file and no command-line surface; this dataclass
only keeps the numbers in one place. Logging level is the sole environment
override (see :mod:`levelmeter.utils.logging`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..domain.volume import MAX_VOLUME, MIN_VOLUME, VolumeBounds

Rect = Tuple[int, int, int, int]  # x, y, width, height


@dataclass(frozen=True)
class MeterConfig:
    """Window geometry and volume bounds used by :class:`levelmeter.app.main.App`."""

    title: str = "Python Tk GUI Level Demo"
    window_size: Tuple[int, int] = (375, 225)

    min_value: int = MIN_VOLUME
    max_value: int = MAX_VOLUME
    initial_value: Optional[int] = None

    back_panel: Rect = (25, 25, 325, 100)
    down_button: Rect = (25, 150, 150, 50)
    up_button: Rect = (200, 150, 150, 50)
    status_y: int = 203

    def bounds(self) -> VolumeBounds:
        """Validate and return the volume bounds (raises ``InvalidBoundsError``)."""
        return VolumeBounds(self.min_value, self.max_value)


__all__ = ["MeterConfig", "Rect"]
