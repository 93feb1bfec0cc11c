from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..domain.errors import InvalidGeometryError
from ..domain.volume import VolumeModel


@dataclass(frozen=True)
class BarGeometry:
    """View-facing DTO describing where the level panel sits in the back panel."""

    x: int
    y: int
    width: int
    height: int
    value: int
    at_min: bool
    at_max: bool


@dataclass
class MeterVM:
    """Turns model state into bar geometry and button presses into model mutations.

    Responsibilities
    - Hold the container size fixed at layout time
    - Recompute ``bar_width = floor(container_width * model.fraction())``
      on every update; no diffing, the state space is a single integer
    - Borrow the model per call; never construct or own it

    Toolkit-free: the window registers ``on_bar_changed`` and forwards its
    two button events to the ``on_*_pressed`` handlers.
    """

    on_bar_changed: Optional[Callable[[BarGeometry], None]] = None

    container_width: Optional[int] = field(default=None, init=False)
    container_height: Optional[int] = field(default=None, init=False)
    _bar_width: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    # ---- Layout ----
    def layout(self, container_width: int, container_height: int) -> None:
        """Fix the drawable area. Negative sizes are programming errors."""
        width = self._coerce_dimension("container_width", container_width)
        height = self._coerce_dimension("container_height", container_height)
        self.container_width = width
        self.container_height = height
        self._bar_width = min(self._bar_width, width)
        self._log.debug("Meter laid out at %dx%d", width, height)

    @property
    def is_laid_out(self) -> bool:
        return self.container_width is not None and self.container_height is not None

    @property
    def bar_width(self) -> int:
        return self._bar_width

    # ---- Render ----
    def render(self, model: VolumeModel) -> BarGeometry:
        if not self.is_laid_out:
            raise InvalidGeometryError("MeterVM.render called before layout().")
        width = self.compute_bar_width(self.container_width, model.fraction())
        self._bar_width = width
        geometry = BarGeometry(
            x=0,
            y=0,
            width=width,
            height=int(self.container_height),
            value=model.current_value(),
            at_min=model.at_min(),
            at_max=model.at_max(),
        )
        if self.on_bar_changed:
            self.on_bar_changed(geometry)
        return geometry

    # ---- Input handlers (bound to the two buttons) ----
    def on_increase_pressed(self, model: VolumeModel) -> BarGeometry:
        model.increase()
        return self.render(model)

    def on_decrease_pressed(self, model: VolumeModel) -> BarGeometry:
        model.decrease()
        return self.render(model)

    # ---- Helpers ----
    @staticmethod
    def compute_bar_width(container_width: int, fraction: float) -> int:
        """Return ``floor(container_width * fraction)`` kept within ``[0, container_width]``."""
        clamped = min(max(float(fraction), 0.0), 1.0)
        return max(0, min(int(math.floor(container_width * clamped)), container_width))

    @staticmethod
    def _coerce_dimension(name: str, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidGeometryError(f"{name} must be an int, got {value!r}.")
        if value < 0:
            raise InvalidGeometryError(f"{name} must be non-negative, got {value}.")
        return value


__all__ = ["BarGeometry", "MeterVM"]
