"""
MainWindowView
--------------
Tkinter main window for the level meter demo. This file contains **only View
code**: no clamping, no width math. It exposes callback hooks that the app
bootstrap connects to :class:`levelmeter.viewmodels.MeterVM`.

Notes:
- Fixed-size, non-resizable window with manual (``place``) layout:
  * a black back panel acting as the meter body
  * a yellow level panel inside it, resized from ``BarGeometry``
  * "Down" and "Up" buttons below, plus a small status line
- All external interactions are signaled via callbacks passed to the constructor.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Tuple

from ...viewmodels.meter_vm import BarGeometry
from ..config import MeterConfig, Rect
from . import theme
from .view_utils import safe_call


class MainWindowView(tk.Tk):
    """Top-level application window hosting the level meter.

    The window owns widgets only. The back panel's size is fixed here and
    queried once by the bootstrap through :meth:`container_size`.
    """

    # ---- Callback type aliases (callables injected from the bootstrap) ----
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        config: Optional[MeterConfig] = None,
        on_increase: OnVoid = None,
        on_decrease: OnVoid = None,
    ) -> None:
        super().__init__()
        self._config = config or MeterConfig()

        # Keep references to callbacks (can be None; safe_call guards)
        self._on_increase = on_increase
        self._on_decrease = on_decrease

        self._configure_window()
        theme.apply_dark_theme(self)
        self._build_meter(self._config.back_panel)
        self._build_buttons()
        self._build_statusbar()

        # Keyboard shortcuts mirror the two buttons
        for sequence in ("<Up>", "<plus>", "<KP_Add>"):
            self.bind(sequence, lambda e: self._increase_clicked())
        for sequence in ("<Down>", "<minus>", "<KP_Subtract>"):
            self.bind(sequence, lambda e: self._decrease_clicked())

        self._center_on_screen()

    # ------------------------------------------------------------------
    # Window
    # ------------------------------------------------------------------
    def _configure_window(self) -> None:
        width, height = self._config.window_size
        self.title(self._config.title)
        self.geometry(f"{width}x{height}")
        self.resizable(False, False)

    def _center_on_screen(self) -> None:
        self.update_idletasks()
        width, height = self._config.window_size
        x = max(0, (self.winfo_screenwidth() - width) // 2)
        y = max(0, (self.winfo_screenheight() - height) // 2)
        self.geometry(f"{width}x{height}+{x}+{y}")

    # ------------------------------------------------------------------
    # Meter (back panel + level panel)
    # ------------------------------------------------------------------
    def _build_meter(self, rect: Rect) -> None:
        x, y, width, height = rect
        # The 'back' of the level meter; its size never changes
        self._back_panel = tk.Frame(
            self, width=width, height=height, bg=theme.METER_BACK, highlightthickness=0
        )
        self._back_panel.place(x=x, y=y, width=width, height=height)

        # Sits inside the back panel so resizing it is relative to the origin
        self._level_panel = tk.Frame(
            self._back_panel, bg=theme.METER_LEVEL, highlightthickness=0
        )
        self._level_panel.place(x=0, y=0, width=width, height=height)

    # ------------------------------------------------------------------
    # Buttons / Status
    # ------------------------------------------------------------------
    def _build_buttons(self) -> None:
        x, y, width, height = self._config.down_button
        self._down_button = ttk.Button(
            self, text="Down", style="Meter.TButton", command=self._decrease_clicked
        )
        self._down_button.place(x=x, y=y, width=width, height=height)

        x, y, width, height = self._config.up_button
        self._up_button = ttk.Button(
            self, text="Up", style="Meter.TButton", command=self._increase_clicked
        )
        self._up_button.place(x=x, y=y, width=width, height=height)

    def _build_statusbar(self) -> None:
        self._status_var = tk.StringVar(value="")
        x = self._config.back_panel[0]
        ttk.Label(self, textvariable=self._status_var, style="Status.TLabel").place(
            x=x, y=self._config.status_y
        )

    def _increase_clicked(self) -> None:
        safe_call(self._on_increase)

    def _decrease_clicked(self) -> None:
        safe_call(self._on_decrease)

    # ------------------------------------------------------------------
    # Public API (called by the bootstrap)
    # ------------------------------------------------------------------
    def container_size(self) -> Tuple[int, int]:
        """Return the back panel's (width, height) in pixels."""
        _, _, width, height = self._config.back_panel
        return int(width), int(height)

    def set_bar_geometry(self, geometry: BarGeometry) -> None:
        """Resize the level panel and reflect the at-bound state on the buttons."""
        self._level_panel.place_configure(
            x=geometry.x, y=geometry.y, width=geometry.width, height=geometry.height
        )
        self._up_button.state(["disabled"] if geometry.at_max else ["!disabled"])
        self._down_button.state(["disabled"] if geometry.at_min else ["!disabled"])

    def set_status_message(self, text: str) -> None:
        self._status_var.set(text)
