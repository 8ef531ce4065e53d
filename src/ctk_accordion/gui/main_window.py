"""
Demo window for the accordion widget.

Shows an accordion with a few sample sections and a control bar that
exercises every container operation: open all, close all, multi-open mode,
adding and removing sections.
"""

import logging
from typing import Optional

import customtkinter as ctk

from ..config import AccordionSettings, get_config
from ..theme import Theme, set_theme
from .ctk_host import AccordionFrame
from .utils import center_window

logger = logging.getLogger(__name__)


class MainWindow:
    """Main window of the accordion demo application."""

    def __init__(self, config: Optional[AccordionSettings] = None):
        self.config = config or get_config()
        self.theme = Theme.from_settings(self.config)
        set_theme(self.theme)

        self._section_counter = 0

        self._setup_gui()

        logger.info("MainWindow initialized successfully")

    def _setup_gui(self) -> None:
        """Initialize the GUI components."""
        ctk.set_appearance_mode(self.config.appearance_mode)
        ctk.set_default_color_theme(self.config.color_theme)

        self.root = ctk.CTk()
        self.root.title("Accordion Demo")
        self.root.minsize(320, 240)
        center_window(self.root, self.config.window_width, self.config.window_height)

        self.root.grid_columnconfigure(0, weight=1)
        self.root.grid_rowconfigure(0, weight=0)  # Controls - fixed height
        self.root.grid_rowconfigure(1, weight=1)  # Accordion - expandable
        self.root.grid_rowconfigure(2, weight=0)  # Status bar

        self._create_controls()

        self.scroll_frame = ctk.CTkScrollableFrame(self.root)
        self.scroll_frame.grid(row=1, column=0, sticky="nsew", padx=5, pady=5)
        self.scroll_frame.grid_columnconfigure(0, weight=1)

        self.accordion = AccordionFrame(
            self.scroll_frame,
            multi_open=self.config.multi_open,
            theme=self.theme,
        )
        self.accordion.grid(row=0, column=0, sticky="ew")

        self._add_text_section("Overview", "An accordion stacks titled sections.\n"
                               "Tap a header to expand or collapse it.")
        self._add_slider_section("Appearance")
        self._add_text_section("Notes", "In single-open mode, opening a section\n"
                               "collapses every other one.")

        self.status_label = ctk.CTkLabel(self.root, text="Ready", anchor="w")
        self.status_label.grid(row=2, column=0, sticky="ew", padx=10, pady=(0, 5))

        self.root.protocol("WM_DELETE_WINDOW", self._on_closing)

    def _create_controls(self) -> None:
        controls = ctk.CTkFrame(self.root)
        controls.grid(row=0, column=0, sticky="ew", padx=5, pady=(5, 0))

        ctk.CTkButton(controls, text="Open all", width=80, command=self._open_all).pack(
            side="left", padx=4, pady=4
        )
        ctk.CTkButton(controls, text="Close all", width=80, command=self._close_all).pack(
            side="left", padx=4, pady=4
        )
        ctk.CTkButton(controls, text="Add", width=60, command=self._add_section).pack(
            side="left", padx=4, pady=4
        )
        ctk.CTkButton(controls, text="Remove", width=60, command=self._remove_last).pack(
            side="left", padx=4, pady=4
        )

        self.multi_open_var = ctk.BooleanVar(value=self.config.multi_open)
        ctk.CTkSwitch(
            controls,
            text="Multi-open",
            variable=self.multi_open_var,
            command=self._on_multi_open_changed,
        ).pack(side="right", padx=4, pady=4)

    def _add_text_section(self, title: str, text: str) -> None:
        label = ctk.CTkLabel(self.accordion, text=text, justify="left", anchor="w")
        self.accordion.add_section(title, label)

    def _add_slider_section(self, title: str) -> None:
        pane = ctk.CTkFrame(self.accordion)
        ctk.CTkLabel(pane, text="Scale").pack(anchor="w", padx=8, pady=(8, 0))
        ctk.CTkSlider(pane, from_=0.5, to=2.0).pack(fill="x", padx=8, pady=8)
        self.accordion.add_section(title, pane)

    def _open_all(self) -> None:
        self.accordion.container.open_all()
        if self.accordion.container.multi_open:
            self._update_status("All sections opened")
        else:
            self._update_status("Open all needs multi-open mode")

    def _close_all(self) -> None:
        self.accordion.container.close_all()
        self._update_status("All sections closed")

    def _add_section(self) -> None:
        self._section_counter += 1
        title = f"Section {self._section_counter}"
        self._add_text_section(title, f"Content of {title.lower()}.")
        self._update_status(f"Added {title}")

    def _remove_last(self) -> None:
        items = self.accordion.items
        if not items:
            self._update_status("Nothing to remove")
            return
        item = items[-1]
        self.accordion.container.remove(item)
        item.detail.widget.destroy()
        self._update_status(f"Removed {item.title}")

    def _on_multi_open_changed(self) -> None:
        self.accordion.container.multi_open = self.multi_open_var.get()
        self._update_status(
            "Multi-open mode" if self.accordion.container.multi_open else "Single-open mode"
        )

    def _update_status(self, message: str) -> None:
        self.status_label.configure(text=message)
        logger.info(message)

    def _on_closing(self) -> None:
        logger.info("Closing accordion demo")
        self.accordion.destroy()
        self.root.destroy()

    def run(self) -> None:
        """Start the Tk main loop."""
        self.root.mainloop()
