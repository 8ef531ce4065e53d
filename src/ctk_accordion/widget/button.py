"""
Toolkit-neutral push button used for accordion headers.

The button carries a text, an optional icon glyph and a tap callback. Host
bindings subclass it to mirror that state onto a real toolkit button.
"""

import logging
import math
from typing import Callable, List, Optional

from .. import canvas
from .. import theme as theme_module
from ..geometry import Size
from ..theme import Theme
from .base import BaseWidget, WidgetRenderer

logger = logging.getLogger(__name__)

# Average glyph advance as a fraction of the font size.
CHAR_WIDTH_RATIO = 0.6


class Button(BaseWidget):
    """A tappable button with a title and an optional icon."""

    def __init__(
        self,
        text: str = "",
        icon: Optional[str] = None,
        on_tapped: Optional[Callable[[], None]] = None,
        theme: Optional[Theme] = None,
    ):
        super().__init__()
        self.text = text
        self.icon = icon
        self.on_tapped = on_tapped
        self.theme = theme

    def tapped(self) -> None:
        """Invoke the tap callback, ignoring taps while hidden."""
        if self.hidden or self.on_tapped is None:
            return
        self.on_tapped()

    def current_theme(self) -> Theme:
        return self.theme or theme_module.current_theme()

    def create_renderer(self) -> WidgetRenderer:
        return _ButtonRenderer(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(text={self.text!r}, icon={self.icon!r}, hidden={self.hidden})"


class _ButtonRenderer(WidgetRenderer):
    """Sizes a button from its text metrics."""

    def __init__(self, button: Button):
        self.button = button

    def min_size(self) -> Size:
        t = self.button.current_theme()
        pad = t.padding()
        size = t.text_size()

        width = math.ceil(len(self.button.text) * size * CHAR_WIDTH_RATIO)
        if self.button.icon:
            if width:
                width += pad
            width += size
        return Size(width + pad * 4, size + pad * 4)

    def layout(self, size: Size) -> None:
        pass

    def objects(self) -> List:
        return []

    def background_color(self) -> str:
        return self.button.current_theme().background_color()

    def refresh(self) -> None:
        canvas.refresh(self.button)
