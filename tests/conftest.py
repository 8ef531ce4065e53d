"""
Pytest configuration and shared fixtures.

This module provides fixed-metric stand-ins for header buttons and detail
panes so renderer geometry can be checked without a display.
"""

import pytest

from ctk_accordion import canvas
from ctk_accordion import theme as theme_module
from ctk_accordion.config import AccordionSettings
from ctk_accordion.geometry import Position, Size
from ctk_accordion.theme import Theme
from ctk_accordion.widget import AccordionContainer, AccordionItem, Button

PADDING = 4
HEADER_MIN = Size(100, 20)
DETAIL_MIN = Size(200, 60)


class FixedButton(Button):
    """Header button with a fixed minimum size that counts refreshes."""

    def __init__(self, min_size: Size = HEADER_MIN):
        super().__init__()
        self._min = min_size
        self.refresh_count = 0

    def min_size(self) -> Size:
        return self._min

    def refresh(self) -> None:
        self.refresh_count += 1


class FakeDetail:
    """Detail pane with a fixed minimum size that records placement."""

    def __init__(self, name: str = "detail", min_size: Size = DETAIL_MIN):
        self.name = name
        self._min = min_size
        self.position = Position()
        self.size = Size()
        self.hidden = False

    def min_size(self) -> Size:
        return self._min

    def move(self, pos: Position) -> None:
        self.position = pos

    def resize(self, size: Size) -> None:
        self.size = size

    def show(self) -> None:
        self.hidden = False

    def hide(self) -> None:
        self.hidden = True

    def visible(self) -> bool:
        return not self.hidden

    def refresh(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"FakeDetail({self.name!r})"


@pytest.fixture
def test_theme():
    """Theme with the padding used by the geometry scenarios."""
    return Theme(padding=PADDING, background_color="#101010", expand_icon="v", collapse_icon="^")


@pytest.fixture
def make_item():
    """Factory for closed items backed by FakeDetail panes."""
    def _make(title: str = "Item", min_size: Size = DETAIL_MIN) -> AccordionItem:
        return AccordionItem(title, FakeDetail(title, min_size))
    return _make


@pytest.fixture
def make_accordion(test_theme):
    """Factory for containers whose headers are FixedButtons."""
    def _make(*items: AccordionItem, multi_open: bool = False) -> AccordionContainer:
        return AccordionContainer(
            *items,
            multi_open=multi_open,
            button_factory=FixedButton,
            theme=test_theme,
        )
    return _make


@pytest.fixture
def test_settings():
    return AccordionSettings(padding=PADDING, background_color="#101010")


@pytest.fixture(autouse=True)
def isolate_globals():
    """Restore the current theme and drop refresh listeners after each test."""
    yield
    theme_module.set_theme(None)
    canvas._refresh_listeners.clear()


@pytest.fixture
def refresh_log():
    """Record every object passed to the canvas redraw hook."""
    seen = []
    canvas.add_refresh_listener(seen.append)
    return seen


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "gui: mark test as exercising the CustomTkinter binding")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to tests that carry no other category."""
    for item in items:
        if not any(marker.name in ["integration", "gui"] for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
