"""
Redraw hook shared by widgets and the host that paints them.

Widgets call ``refresh(obj)`` when they need repainting; the host toolkit
registers a listener that performs the repaint.
"""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

_refresh_listeners: List[Callable[[Any], None]] = []


def add_refresh_listener(callback: Callable[[Any], None]) -> None:
    """Register a callback invoked with every object that requests a repaint."""
    if callback not in _refresh_listeners:
        _refresh_listeners.append(callback)


def remove_refresh_listener(callback: Callable[[Any], None]) -> None:
    """Unregister a repaint callback."""
    if callback in _refresh_listeners:
        _refresh_listeners.remove(callback)


def refresh(obj: Any) -> None:
    """Request a repaint of ``obj`` from every registered listener."""
    for callback in list(_refresh_listeners):
        try:
            callback(obj)
        except Exception as e:
            logger.error(f"Error in refresh listener {callback!r}: {e}", exc_info=True)
