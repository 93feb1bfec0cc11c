"""Application composition layer for the Tkinter level meter.

The bootstrap in this package wires the window, the meter view model, and the
volume model into a runnable desktop demo without placing logic in views.
"""
