"""
CustomTkinter binding for accordion widgets.

This module adapts tkinter/CustomTkinter widgets to the canvas-object
protocol used by renderers and provides ``AccordionFrame``, a CTkFrame that
hosts an ``AccordionContainer``. Children are positioned with the place
geometry manager in device pixels, so the frame sets its own requested
height from the accordion's minimum size.
"""

import logging
import tkinter
from typing import Any, List, Optional

import customtkinter as ctk

from .. import canvas
from ..exceptions import ErrorCodes, GUIError
from ..geometry import Position, Size
from ..theme import Theme
from ..widget import AccordionContainer, AccordionItem, Button, destroy_renderer

logger = logging.getLogger(__name__)


class CtkCanvasObject:
    """Wraps a tkinter widget so a renderer can size, place and hide it."""

    def __init__(self, widget: Any):
        if not isinstance(widget, tkinter.Misc) or not hasattr(widget, "place_configure"):
            raise GUIError(
                f"{type(widget).__name__} cannot be placed inside an accordion",
                error_code=ErrorCodes.GUI_NOT_PLACEABLE,
            )
        self.widget = widget
        self.position = Position()
        self.size = Size()
        self.hidden = False

    def min_size(self) -> Size:
        return Size(self.widget.winfo_reqwidth(), self.widget.winfo_reqheight())

    def move(self, pos: Position) -> None:
        self.position = pos
        self._place()

    def resize(self, size: Size) -> None:
        self.size = size
        self._place()

    def show(self) -> None:
        self.hidden = False
        self._place()

    def hide(self) -> None:
        self.hidden = True
        # CTk widgets override place(); the plain tkinter call works for both
        tkinter.Place.place_forget(self.widget)

    def visible(self) -> bool:
        return not self.hidden

    def refresh(self) -> None:
        canvas.refresh(self)

    def _place(self) -> None:
        if self.hidden:
            return
        options = {"x": self.position.x, "y": self.position.y}
        if self.size.width and self.size.height:
            options["width"] = self.size.width
            options["height"] = self.size.height
        tkinter.Place.place_configure(self.widget, **options)


class CtkHeaderButton(Button):
    """A header Button drawn with a CTkButton."""

    def __init__(self, parent: Any, theme: Optional[Theme] = None, **kwargs):
        super().__init__(theme=theme)
        kwargs.setdefault("anchor", "w")
        kwargs.setdefault("corner_radius", 6)
        self.view = CtkCanvasObject(
            ctk.CTkButton(parent, text="", command=self.tapped, **kwargs)
        )

    @property
    def widget(self) -> ctk.CTkButton:
        return self.view.widget

    def min_size(self) -> Size:
        return self.view.min_size()

    def move(self, pos: Position) -> None:
        super().move(pos)
        self.view.move(pos)

    def resize(self, size: Size) -> None:
        super().resize(size)
        self.view.resize(size)

    def show(self) -> None:
        super().show()
        self.view.show()

    def hide(self) -> None:
        super().hide()
        self.view.hide()

    def refresh(self) -> None:
        """Mirror text, icon and visibility onto the CTkButton."""
        label = f"{self.icon}  {self.text}" if self.icon else self.text
        self.widget.configure(text=label)
        if self.hidden:
            self.view.hide()
        else:
            self.view.show()
        canvas.refresh(self)


class AccordionFrame(ctk.CTkFrame):
    """A CTkFrame displaying an accordion of titled sections.

    Detail widgets must be children of this frame. Use ``add_section`` to
    wrap a widget and append it in one step.
    """

    def __init__(
        self,
        parent,
        *items: AccordionItem,
        multi_open: bool = False,
        theme: Optional[Theme] = None,
        **kwargs
    ):
        self.container = AccordionContainer(
            *items,
            multi_open=multi_open,
            button_factory=self._create_header,
            theme=theme,
        )
        self._hosted_details: List[Any] = []
        kwargs.setdefault("fg_color", self.container.current_theme().background_color())
        super().__init__(parent, **kwargs)

        canvas.add_refresh_listener(self._on_canvas_refresh)
        self.bind("<Configure>", self._on_configure, add="+")
        self.container.refresh()
        # Header sizes are only known once Tk has processed geometry requests
        self.after_idle(self.container.refresh)

        logger.debug(f"AccordionFrame created with {len(items)} item(s)")

    @property
    def items(self):
        return self.container.items

    def add_section(self, title: str, widget: Any) -> AccordionItem:
        """Append a section whose detail pane is ``widget``."""
        if getattr(widget, "master", None) is not self:
            raise GUIError(
                f"Section {title!r} detail must be created with this AccordionFrame as its parent",
                error_code=ErrorCodes.GUI_COMPONENT_ERROR,
            )
        item = AccordionItem(title, CtkCanvasObject(widget))
        self.container.append(item)
        return item

    def destroy(self) -> None:
        canvas.remove_refresh_listener(self._on_canvas_refresh)
        destroy_renderer(self.container)
        super().destroy()

    def _create_header(self) -> CtkHeaderButton:
        return CtkHeaderButton(self, theme=self.container.theme)

    def _on_configure(self, event) -> None:
        self.container.resize(Size(event.width, event.height))

    def _on_canvas_refresh(self, obj: Any) -> None:
        if obj is not self.container:
            return
        min_size = self.container.min_size()
        # Request size in device pixels, bypassing CTk's widget scaling
        tkinter.Frame.configure(self, height=max(min_size.height, 1))

        # Details of removed sections are no longer laid out and must be un-placed
        current = [ai.detail for ai in self.container.items]
        for detail in self._hosted_details:
            if not any(detail is d for d in current):
                detail.hide()
        self._hosted_details = current
