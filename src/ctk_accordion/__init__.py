"""
Accordion widget for CustomTkinter applications.

An accordion is a vertically stacked list of titled sections where each
section can be expanded to reveal a detail pane or collapsed to show only
its header.
"""

__version__ = "1.0.0"

from .config import AccordionSettings, get_config
from .exceptions import AccordionError, ConfigurationError, GUIError, ThemeError
from .geometry import Position, Size
from .theme import Theme, current_theme, set_theme
from .widget import (
    AccordionContainer,
    AccordionContainerRenderer,
    AccordionItem,
    Button,
    new_accordion_container,
    new_accordion_item,
)

__all__ = [
    "__version__",
    "AccordionSettings",
    "get_config",
    "AccordionError",
    "ConfigurationError",
    "GUIError",
    "ThemeError",
    "Position",
    "Size",
    "Theme",
    "current_theme",
    "set_theme",
    "AccordionContainer",
    "AccordionContainerRenderer",
    "AccordionItem",
    "Button",
    "new_accordion_container",
    "new_accordion_item",
]
