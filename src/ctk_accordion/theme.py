"""
Theme service for accordion widgets.

A theme supplies the padding between stacked elements, the background
colour, and the glyphs drawn on headers for expanding and collapsing a
section. The module keeps a current theme that renderers read through the
shortcut functions at the bottom of this module.
"""

import logging
from typing import Optional

from .config import AccordionSettings
from .exceptions import ErrorCodes, ThemeError

logger = logging.getLogger(__name__)


class Theme:
    """Padding, colour and icon values consumed by renderers."""

    def __init__(
        self,
        padding: int = 4,
        background_color: str = "#2b2b2b",
        expand_icon: str = "▼",
        collapse_icon: str = "▲",
        text_size: int = 14,
    ):
        if padding < 0:
            raise ThemeError(
                f"Theme padding must not be negative, got {padding}",
                error_code=ErrorCodes.THEME_INVALID,
            )
        self._padding = padding
        self._background_color = background_color
        self._expand_icon = expand_icon
        self._collapse_icon = collapse_icon
        self._text_size = text_size

    @classmethod
    def from_settings(cls, settings: AccordionSettings) -> "Theme":
        """Build a theme from validated settings."""
        return cls(
            padding=settings.padding,
            background_color=settings.background_color,
            expand_icon=settings.expand_icon,
            collapse_icon=settings.collapse_icon,
            text_size=settings.text_size,
        )

    def padding(self) -> int:
        return self._padding

    def background_color(self) -> str:
        return self._background_color

    def expand_icon(self) -> str:
        """Glyph shown on the header of a closed section."""
        return self._expand_icon

    def collapse_icon(self) -> str:
        """Glyph shown on the header of an open section."""
        return self._collapse_icon

    def text_size(self) -> int:
        return self._text_size

    def __repr__(self) -> str:
        return (
            f"Theme(padding={self._padding}, background_color={self._background_color!r}, "
            f"expand_icon={self._expand_icon!r}, collapse_icon={self._collapse_icon!r})"
        )


_current_theme = Theme()


def current_theme() -> Theme:
    """Get the theme renderers currently draw with."""
    return _current_theme


def set_theme(theme: Optional[Theme]) -> None:
    """Install a theme; ``None`` restores the default theme."""
    global _current_theme
    _current_theme = theme if theme is not None else Theme()
    logger.debug(f"Theme set to {_current_theme!r}")


def padding() -> int:
    return _current_theme.padding()


def background_color() -> str:
    return _current_theme.background_color()


def expand_icon() -> str:
    return _current_theme.expand_icon()


def collapse_icon() -> str:
    return _current_theme.collapse_icon()


def text_size() -> int:
    return _current_theme.text_size()
