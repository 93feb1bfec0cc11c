"""Flat dark visual theme for the level meter window.

Centralizes ttk style tokens and the meter colours so the window class only
deals with layout and callbacks.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

WINDOW_BG = "#3c3f41"
TEXT = "#dfe1e5"
MUTED = "#9da0a8"
BUTTON_BG = "#4e5254"
BUTTON_ACTIVE = "#5c6164"
BUTTON_DISABLED_FG = "#6f737a"
BORDER = "#5e6060"

METER_BACK = "#000000"
METER_LEVEL = "#ffff00"

BASE_FONT = ("Helvetica", 24)
STATUS_FONT = ("Helvetica", 11)


def apply_dark_theme(root: tk.Misc) -> None:
    """Apply a flat dark ttk + tk theme to the whole application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=WINDOW_BG)

    style.configure(".", background=WINDOW_BG, foreground=TEXT)
    style.configure("TFrame", background=WINDOW_BG)
    style.configure("TLabel", background=WINDOW_BG, foreground=TEXT)
    style.configure("Status.TLabel", background=WINDOW_BG, foreground=MUTED, font=STATUS_FONT)

    style.configure(
        "Meter.TButton",
        font=BASE_FONT,
        padding=(10, 6),
        background=BUTTON_BG,
        foreground=TEXT,
        bordercolor=BORDER,
        lightcolor=BUTTON_BG,
        darkcolor=BUTTON_BG,
        relief="flat",
    )
    style.map(
        "Meter.TButton",
        background=[("disabled", WINDOW_BG), ("active", BUTTON_ACTIVE)],
        foreground=[("disabled", BUTTON_DISABLED_FG)],
    )
