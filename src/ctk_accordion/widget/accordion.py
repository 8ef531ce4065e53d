"""
Accordion container widget.

An accordion displays a vertical list of items. Each item is represented by
a header button that reveals, or hides, a detail pane when tapped. In the
default single-open mode opening one item closes all the others; with
``multi_open`` set the items open and close independently.

Usage:
    accordion = AccordionContainer(
        AccordionItem("General", general_pane),
        AccordionItem("Advanced", advanced_pane),
    )
    accordion.open(0)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .. import canvas
from .. import theme as theme_module
from ..geometry import Position, Size
from ..theme import Theme
from .base import BaseWidget, CanvasObject, WidgetRenderer
from .button import Button

logger = logging.getLogger(__name__)

ButtonFactory = Callable[[], Button]


@dataclass(eq=False)
class AccordionItem:
    """One section of an accordion: a title, a detail pane and an open flag.

    Items compare by identity. Writing ``open`` directly bypasses the
    single-open rule until the container next opens or closes an item.
    """
    title: str
    detail: CanvasObject
    open: bool = False


def new_accordion_item(title: str, detail: CanvasObject) -> AccordionItem:
    """Create a closed accordion item."""
    return AccordionItem(title=title, detail=detail)


class AccordionContainer(BaseWidget):
    """A vertically stacked list of expandable items."""

    def __init__(
        self,
        *items: AccordionItem,
        multi_open: bool = False,
        button_factory: Optional[ButtonFactory] = None,
        theme: Optional[Theme] = None,
    ):
        super().__init__()
        self.items: List[AccordionItem] = list(items)
        self.multi_open = multi_open
        self.button_factory = button_factory or self._default_button
        self.theme = theme

    def current_theme(self) -> Theme:
        return self.theme or theme_module.current_theme()

    def append(self, item: AccordionItem) -> None:
        """Add an item to the end of the accordion."""
        self.items.append(item)
        self.refresh()

    def remove(self, item: AccordionItem) -> None:
        """Remove the given item; does nothing if it is not present."""
        for i, ai in enumerate(self.items):
            if ai is item:
                self.remove_index(i)
                return
        logger.debug(f"remove: item {item!r} not in accordion")

    def remove_index(self, index: int) -> None:
        """Remove the item at ``index``; out-of-range indices are ignored."""
        if not self._in_range(index):
            logger.debug(f"remove_index: index {index} out of range")
            return
        del self.items[index]
        self.refresh()

    def open(self, index: int) -> None:
        """Expand the item at ``index``.

        Unless ``multi_open`` is set, every other item is collapsed.
        """
        if not self._in_range(index):
            logger.debug(f"open: index {index} out of range")
            return
        for i, ai in enumerate(self.items):
            if i == index:
                ai.open = True
            elif not self.multi_open:
                ai.open = False
        self.refresh()

    def open_all(self) -> None:
        """Expand every item. Only applies when ``multi_open`` is set."""
        if not self.multi_open:
            return
        for ai in self.items:
            ai.open = True
        self.refresh()

    def close(self, index: int) -> None:
        """Collapse the item at ``index``."""
        if not self._in_range(index):
            logger.debug(f"close: index {index} out of range")
            return
        self.items[index].open = False
        self.refresh()

    def close_all(self) -> None:
        """Collapse every item."""
        for ai in self.items:
            ai.open = False
        self.refresh()

    def toggle_for_index(self, index: int) -> Callable[[], None]:
        """Build the tap handler for the header at ``index``."""
        def toggle() -> None:
            if not self._in_range(index):
                logger.debug(f"toggle: stale header index {index}")
                return
            if self.items[index].open:
                self.close(index)
            else:
                self.open(index)
        return toggle

    def create_renderer(self) -> WidgetRenderer:
        r = AccordionContainerRenderer(self)
        r.update_objects()
        return r

    def _default_button(self) -> Button:
        return Button(theme=self.theme)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.items)


def new_accordion_container(*items: AccordionItem) -> AccordionContainer:
    """Create a single-open accordion holding ``items`` in order."""
    return AccordionContainer(*items)


class AccordionContainerRenderer(WidgetRenderer):
    """Lays out header buttons and detail panes for an AccordionContainer.

    Header buttons are cached in ``headers``. When the item count shrinks
    the surplus headers are hidden, not discarded, and are reused if the
    count grows again.
    """

    def __init__(self, container: AccordionContainer):
        self.container = container
        self.headers: List[Button] = []

    def min_size(self) -> Size:
        self._ensure_headers()
        pad = self.container.current_theme().padding()
        width = 0
        height = 0
        for i, ai in enumerate(self.container.items):
            if i != 0:
                height += pad
            header_min = self.headers[i].min_size()
            width = max(width, header_min.width)
            height += header_min.height
            if ai.open:
                height += pad
                detail_min = ai.detail.min_size()
                width = max(width, detail_min.width)
                height += detail_min.height
        return Size(width, height)

    def layout(self, size: Size) -> None:
        self._ensure_headers()
        pad = self.container.current_theme().padding()
        x = 0
        y = 0
        for i, ai in enumerate(self.container.items):
            if i != 0:
                y += pad
            header = self.headers[i]
            header.move(Position(x, y))
            header_height = header.min_size().height
            header.resize(Size(size.width, header_height))
            y += header_height
            if ai.open:
                y += pad
                detail = ai.detail
                detail.move(Position(x, y))
                detail_height = detail.min_size().height
                detail.resize(Size(size.width, detail_height))
                y += detail_height

    def background_color(self) -> str:
        return self.container.current_theme().background_color()

    def objects(self) -> List[Any]:
        """Active headers in order, followed by every item's detail pane."""
        count = len(self.container.items)
        objects: List[Any] = list(self.headers[:count])
        objects.extend(ai.detail for ai in self.container.items)
        return objects

    def refresh(self) -> None:
        self.update_objects()
        self.layout(self.container.size)
        canvas.refresh(self.container)

    def update_objects(self) -> None:
        """Sync the header cache with the container's current items."""
        t = self.container.current_theme()
        items = self.container.items
        for i, ai in enumerate(items):
            if i < len(self.headers):
                header = self.headers[i]
            else:
                header = self.container.button_factory()
                self.headers.append(header)
            header.hidden = False
            header.text = ai.title
            header.on_tapped = self.container.toggle_for_index(i)
            if ai.open:
                header.icon = t.collapse_icon()
                ai.detail.show()
            else:
                header.icon = t.expand_icon()
                ai.detail.hide()
            header.refresh()

        for header in self.headers[len(items):]:
            header.hide()

    def destroy(self) -> None:
        pass

    def _ensure_headers(self) -> None:
        # Items appended to the public list without a refresh have no header yet.
        if len(self.headers) < len(self.container.items):
            self.update_objects()
