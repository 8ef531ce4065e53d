"""
Base classes shared by every widget in the package.

A widget keeps only its own geometry and visibility; drawing and sizing are
delegated to a renderer that is created on first use and cached until
``destroy_renderer`` is called.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Protocol, runtime_checkable

from ..geometry import Position, Size

logger = logging.getLogger(__name__)


@runtime_checkable
class CanvasObject(Protocol):
    """Anything that can be sized, placed and shown by a renderer."""

    def min_size(self) -> Size: ...

    def move(self, pos: Position) -> None: ...

    def resize(self, size: Size) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def visible(self) -> bool: ...

    def refresh(self) -> None: ...


class WidgetRenderer(ABC):
    """Renderer interface the host drives for each widget."""

    @abstractmethod
    def min_size(self) -> Size:
        """Size the widget should not shrink below."""

    @abstractmethod
    def layout(self, size: Size) -> None:
        """Position and size the child objects within ``size``."""

    @abstractmethod
    def objects(self) -> List[Any]:
        """Child objects to draw, in drawing order."""

    @abstractmethod
    def background_color(self) -> str:
        pass

    @abstractmethod
    def refresh(self) -> None:
        pass

    def destroy(self) -> None:
        pass


def renderer(widget: "BaseWidget") -> WidgetRenderer:
    """Get the cached renderer for ``widget``, creating it on first use."""
    r = getattr(widget, "_renderer", None)
    if r is None:
        r = widget.create_renderer()
        widget._renderer = r
        logger.debug(f"Created renderer for {type(widget).__name__}")
    return r


def has_renderer(widget: "BaseWidget") -> bool:
    return getattr(widget, "_renderer", None) is not None


def destroy_renderer(widget: "BaseWidget") -> None:
    """Drop the cached renderer for ``widget`` after destroying it."""
    r = getattr(widget, "_renderer", None)
    widget._renderer = None
    if r is not None:
        r.destroy()


class BaseWidget(ABC):
    """Geometry, visibility and renderer plumbing common to all widgets."""

    def __init__(self):
        self.size = Size()
        self.position = Position()
        self.hidden = False
        self._renderer: Any = None

    @abstractmethod
    def create_renderer(self) -> WidgetRenderer:
        """Build a new renderer for this widget."""

    def min_size(self) -> Size:
        return renderer(self).min_size()

    def move(self, pos: Position) -> None:
        self.position = pos

    def resize(self, size: Size) -> None:
        if size == self.size:
            return
        self.size = size
        if has_renderer(self):
            renderer(self).layout(size)

    def show(self) -> None:
        self.hidden = False

    def hide(self) -> None:
        self.hidden = True

    def visible(self) -> bool:
        return not self.hidden

    def refresh(self) -> None:
        """Re-sync the renderer with this widget's state."""
        renderer(self).refresh()
