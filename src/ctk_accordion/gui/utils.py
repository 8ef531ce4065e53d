"""
GUI utilities and helper functions.

Window-placement helpers shared by the demo application.
"""

import customtkinter as ctk


def center_window(window: ctk.CTk, width: int, height: int) -> None:
    """Size ``window`` to ``width`` x ``height`` and center it on screen."""
    window.update_idletasks()
    x = max(0, (window.winfo_screenwidth() - width) // 2)
    y = max(0, (window.winfo_screenheight() - height) // 2)
    window.geometry(f"{width}x{height}+{x}+{y}")
