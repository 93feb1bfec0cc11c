# levelmeter/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView

# ---- Model / ViewModel ----
from ..domain.volume import VolumeModel
from ..viewmodels.meter_vm import BarGeometry, MeterVM
from .config import MeterConfig
from ..utils import logging as logging_utils


class App:
    """Bootstrap: own the model, wire the window <-> MeterVM, run the Tk loop."""

    def __init__(self, config: Optional[MeterConfig] = None) -> None:
        level = logging_utils.configure_root()
        self._log = logging.getLogger(__name__)
        self._log.debug("Effective log level: %s", logging_utils.level_name(level))

        self.config = config or MeterConfig()

        # ---- Model (owned here; the view model only borrows it) ----
        self.model = VolumeModel.from_bounds(
            self.config.bounds(), initial=self.config.initial_value
        )

        # ---- Window with button callback wiring ----
        self.win = MainWindowView(
            config=self.config,
            on_increase=self._on_increase,
            on_decrease=self._on_decrease,
        )

        # ---- ViewModel ----
        self.meter_vm = MeterVM(on_bar_changed=self._apply_bar_geometry)

        self._initial_layout()
        self._log.info(
            "Level meter ready (value=%d, range=%d..%d)",
            self.model.current_value(),
            self.model.min_value,
            self.model.max_value,
        )

    def _initial_layout(self) -> None:
        width, height = self.win.container_size()
        self.meter_vm.layout(width, height)
        self.meter_vm.render(self.model)

    # ==================================================================
    # Event handlers (dispatched by the Tk loop, one at a time)
    # ==================================================================
    def _on_increase(self) -> None:
        self.meter_vm.on_increase_pressed(self.model)
        self._log.debug("Volume up -> %d", self.model.current_value())

    def _on_decrease(self) -> None:
        self.meter_vm.on_decrease_pressed(self.model)
        self._log.debug("Volume down -> %d", self.model.current_value())

    # ==================================================================
    # VM -> View
    # ==================================================================
    def _apply_bar_geometry(self, geometry: BarGeometry) -> None:
        self.win.set_bar_geometry(geometry)
        self.win.set_status_message(
            f"Volume: {geometry.value} / {self.model.max_value}"
        )


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
