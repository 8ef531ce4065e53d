"""
Widgets for the accordion package.

This module provides the toolkit-neutral widget layer: the base widget and
renderer plumbing, the header button, and the accordion container itself.
"""

from .base import BaseWidget, CanvasObject, WidgetRenderer, destroy_renderer, renderer
from .button import Button
from .accordion import (
    AccordionContainer,
    AccordionContainerRenderer,
    AccordionItem,
    new_accordion_container,
    new_accordion_item,
)

__all__ = [
    "BaseWidget",
    "CanvasObject",
    "WidgetRenderer",
    "renderer",
    "destroy_renderer",
    "Button",
    "AccordionContainer",
    "AccordionContainerRenderer",
    "AccordionItem",
    "new_accordion_container",
    "new_accordion_item",
]
