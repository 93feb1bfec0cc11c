"""Tkinter level meter demo: a bounded volume value shown as a resizable bar."""

__version__ = "0.1.0"
