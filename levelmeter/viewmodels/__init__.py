"""ViewModel package for the level meter's UI state and command surface.

Call context:
    ``levelmeter/app/main.py`` imports :class:`MeterVM` to bind the window's
    button callbacks to model mutations and bar re-renders.

Dependencies:
    Modules in this package depend on domain types only. No Tk imports live
    here, so geometry and handlers stay testable without a display.

Responsibilities:
    - Derive view-facing geometry DTOs from the volume model.
    - Route user intents (increase/decrease) into model mutations.
"""

from .meter_vm import BarGeometry, MeterVM

__all__ = ["BarGeometry", "MeterVM"]
