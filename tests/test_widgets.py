"""
Tests for the widget layer shared by all widgets.

This module tests the header button, the renderer cache, the redraw hook
and the theme service.
"""

import logging

import pytest
from unittest.mock import MagicMock

from ctk_accordion import canvas
from ctk_accordion import theme as theme_module
from ctk_accordion.exceptions import ThemeError
from ctk_accordion.geometry import Position, Size
from ctk_accordion.theme import Theme
from ctk_accordion.widget import Button, destroy_renderer, renderer
from ctk_accordion.widget.base import has_renderer


class TestButton:
    """Test the toolkit-neutral button."""

    def test_min_size_from_text_and_icon(self):
        """Test minimum size for a label with text and an icon."""
        button = Button("Hi", icon="v", theme=Theme(padding=4, text_size=14))

        assert button.min_size() == Size(51, 30)

    def test_min_size_icon_only(self):
        """Test minimum size when only an icon is set."""
        button = Button(icon="v", theme=Theme(padding=4, text_size=14))

        assert button.min_size() == Size(30, 30)

    def test_min_size_follows_current_theme(self):
        """Test that minimum size tracks the current theme when none is pinned."""
        button = Button("Hi")
        theme_module.set_theme(Theme(padding=0, text_size=12))

        assert button.min_size() == Size(15, 12)

    def test_tapped_invokes_callback(self):
        """Test that tapping calls the tap handler."""
        callback = MagicMock()
        button = Button("Go", on_tapped=callback)

        button.tapped()

        callback.assert_called_once_with()

    def test_hidden_button_ignores_taps(self):
        """Test that a hidden button does not fire its handler."""
        callback = MagicMock()
        button = Button("Go", on_tapped=callback)
        button.hide()

        button.tapped()

        callback.assert_not_called()
        assert button.visible() is False

    def test_tap_without_callback_is_harmless(self):
        """Test tapping a button with no handler."""
        Button("Go").tapped()

    def test_refresh_requests_redraw(self, refresh_log):
        """Test that refresh notifies the canvas."""
        button = Button("Go")

        button.refresh()

        assert refresh_log == [button]


class TestRendererCache:
    """Test lazy renderer creation and destruction."""

    def test_renderer_is_created_once(self):
        """Test that the renderer is cached per widget."""
        button = Button("Go")

        assert has_renderer(button) is False
        first = renderer(button)
        assert renderer(button) is first
        assert has_renderer(button) is True

    def test_destroy_renderer_calls_destroy(self):
        """Test that destroying the renderer drops the cache entry."""
        button = Button("Go")
        r = renderer(button)
        r.destroy = MagicMock()

        destroy_renderer(button)

        r.destroy.assert_called_once_with()
        assert has_renderer(button) is False
        assert renderer(button) is not r

    def test_destroy_without_renderer_is_noop(self):
        """Test destroying a renderer that was never created."""
        destroy_renderer(Button("Go"))

    def test_move_and_resize_record_geometry(self):
        """Test that move and resize store position and size."""
        button = Button("Go")

        button.move(Position(3, 7))
        button.resize(Size(40, 12))

        assert button.position == Position(3, 7)
        assert button.size == Size(40, 12)


class TestCanvasRefresh:
    """Test the redraw hook."""

    def test_listeners_receive_object(self):
        """Test that listeners get the refreshed object."""
        seen = []
        canvas.add_refresh_listener(seen.append)
        canvas.add_refresh_listener(seen.append)

        canvas.refresh("widget")

        assert seen == ["widget"]

    def test_removed_listener_is_not_called(self):
        """Test removing a redraw listener."""
        listener = MagicMock()
        canvas.add_refresh_listener(listener)
        canvas.remove_refresh_listener(listener)
        canvas.remove_refresh_listener(listener)

        canvas.refresh("widget")

        listener.assert_not_called()

    def test_failing_listener_does_not_block_others(self, caplog):
        """Test that a raising listener is logged and skipped."""
        seen = []
        canvas.add_refresh_listener(MagicMock(side_effect=RuntimeError("boom")))
        canvas.add_refresh_listener(seen.append)

        with caplog.at_level(logging.ERROR, logger="ctk_accordion.canvas"):
            canvas.refresh("widget")

        assert seen == ["widget"]
        assert "boom" in caplog.text


class TestTheme:
    """Test the theme service."""

    def test_from_settings(self, test_settings):
        """Test building a theme from settings."""
        t = Theme.from_settings(test_settings)

        assert t.padding() == 4
        assert t.background_color() == "#101010"
        assert t.expand_icon() == "▼"
        assert t.collapse_icon() == "▲"

    def test_module_shortcuts_read_current_theme(self, test_theme):
        """Test the module-level theme accessors."""
        theme_module.set_theme(test_theme)

        assert theme_module.current_theme() is test_theme
        assert theme_module.padding() == 4
        assert theme_module.background_color() == "#101010"
        assert theme_module.expand_icon() == "v"
        assert theme_module.collapse_icon() == "^"

    def test_set_theme_none_restores_default(self, test_theme):
        """Test that set_theme(None) restores the default theme."""
        theme_module.set_theme(test_theme)
        theme_module.set_theme(None)

        assert theme_module.current_theme() is not test_theme
        assert theme_module.text_size() == 14

    def test_negative_padding_rejected(self):
        """Test that negative padding raises ThemeError."""
        with pytest.raises(ThemeError) as exc_info:
            Theme(padding=-1)

        assert exc_info.value.to_dict()["error_code"] == "E1101"


class TestGeometry:
    """Test the size and position helpers."""

    def test_size_max_and_add(self):
        """Test Size.max and Size.add."""
        assert Size(3, 9).max(Size(5, 2)) == Size(5, 9)
        assert Size(3, 9).add(Size(5, 2)) == Size(8, 11)

    def test_position_add(self):
        """Test Position.add."""
        assert Position(1, 2).add(dy=5) == Position(1, 7)
