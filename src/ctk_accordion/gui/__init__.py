"""
GUI module for the accordion package.

This module provides the CustomTkinter binding of the accordion widget and
a small demo window built on it.
"""

from .ctk_host import AccordionFrame, CtkCanvasObject, CtkHeaderButton
from .main_window import MainWindow

__all__ = [
    "AccordionFrame",
    "CtkCanvasObject",
    "CtkHeaderButton",
    "MainWindow",
]
