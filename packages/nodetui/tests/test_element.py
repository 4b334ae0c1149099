"""
Tests for Element geometry, rendering, registries and visibility.
"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from nodetui.element import Element, resolve_size
from nodetui.types import Coords


# =============================================================================
# resolve_size
# =============================================================================


class TestResolveSize:
    def test_absolute(self):
        assert resolve_size(7, 100) == 7

    def test_percentage(self):
        assert resolve_size("50%", 30) == 15
        assert resolve_size("33%", 10) == 3

    def test_none_is_zero(self):
        assert resolve_size(None, 30) == 0


# =============================================================================
# Geometry
# =============================================================================


class TestGeometry:
    def test_fills_parent_by_default(self, screen):
        el = Element({"parent": screen})
        assert el.render() == Coords(0, 80, 0, 24)
        assert el.lpos == Coords(0, 80, 0, 24)

    def test_explicit_box(self, screen):
        el = Element({"parent": screen, "left": 3, "top": 2, "width": 10, "height": 4})
        assert el.render() == Coords(3, 13, 2, 6)

    def test_right_and_bottom_anchor(self, screen):
        el = Element({"parent": screen, "right": 5, "bottom": 1, "width": 10, "height": 2})
        assert el.render() == Coords(65, 75, 21, 23)

    def test_left_and_right_stretch(self, screen):
        el = Element({"parent": screen, "left": 10, "right": 10, "top": 0, "height": 1})
        assert el.render() == Coords(10, 70, 0, 1)

    def test_percentages(self, screen):
        el = Element({"parent": screen, "left": "25%", "width": "50%", "height": "25%"})
        assert el.render() == Coords(20, 60, 0, 6)

    def test_invalid_size_rejected(self, screen):
        with pytest.raises(ValidationError):
            Element({"parent": screen, "width": "wide"})

    def test_child_placed_inside_border_and_padding(self, screen):
        parent = Element({
            "parent": screen,
            "left": 0,
            "top": 0,
            "width": 20,
            "height": 10,
            "border": True,
            "padding": 1,
        })
        child = Element({"parent": parent})

        screen.render()

        assert parent.lpos == Coords(0, 20, 0, 10)
        assert parent.inner_box() == Coords(2, 18, 2, 8)
        assert child.lpos == Coords(2, 18, 2, 8)

    def test_child_outside_parent_is_clipped(self, screen):
        parent = Element({"parent": screen, "left": 0, "top": 0, "width": 20, "height": 5})
        child = Element({"parent": parent, "left": 30, "top": 0, "width": 5, "height": 1})

        screen.render()

        assert child.lpos is not None
        assert child.lpos.width == 0
        assert not child.lpos.has_area()

    def test_width_property_tracks_parent(self, screen):
        el = Element({"parent": screen, "width": "50%"})
        assert el.width == 40
        screen.resize(100, 30)
        assert el.width == 50


class TestShrink:
    def test_shrinks_to_content(self, screen):
        el = Element({"parent": screen, "shrink": True, "content": "hello\nhi"})
        assert el.render() == Coords(0, 5, 0, 2)

    def test_wide_characters_take_two_cells(self, screen):
        el = Element({"parent": screen, "shrink": True, "content": "日本"})
        assert el.width == 4

    def test_ansi_codes_are_not_measured(self, screen):
        el = Element({"parent": screen, "shrink": True, "content": "\x1b[1mbold\x1b[0m"})
        assert el.width == 4

    def test_border_and_padding_are_added(self, screen):
        el = Element({
            "parent": screen,
            "shrink": True,
            "content": "abc",
            "border": True,
            "padding": {"left": 1, "right": 2},
        })
        assert el.width == 3 + 2 + 3
        assert el.height == 1 + 2

    def test_shrinks_around_children(self, screen):
        el = Element({"parent": screen, "shrink": True})
        Element({"parent": el, "left": 2, "top": 1, "width": 6, "height": 3})
        assert (el.width, el.height) == (8, 4)


# =============================================================================
# Rendering
# =============================================================================


class TestRendering:
    def test_detached_element_does_not_render(self, screen):
        el = Element({"screen": screen})
        assert el.render() is None
        assert el.lpos is None

    def test_hidden_element_does_not_render(self, screen):
        el = Element({"parent": screen, "hidden": True})
        child = Element({"parent": el})

        screen.render()

        assert el.lpos is None
        assert child.lpos is None

    def test_render_events(self, screen):
        el = Element({"parent": screen, "width": 4, "height": 2})
        calls = []
        el.on("prerender", lambda: calls.append("prerender"))
        el.on("render", lambda coords: calls.append(coords))

        el.render()

        assert calls == ["prerender", Coords(0, 4, 0, 2)]

    def test_paint_order_during_screen_render(self, screen):
        a = Element({"parent": screen})
        a_child = Element({"parent": a})
        b = Element({"parent": screen})

        screen.render()

        assert (a.index, a_child.index, b.index) == (0, 1, 2)

    def test_render_outside_screen_pass_keeps_index(self, screen):
        el = Element({"parent": screen})
        el.render()
        assert el.index == -1

    def test_screen_render_counts_passes(self, screen):
        spy = MagicMock()
        screen.on("render", spy)
        screen.render()
        screen.render()
        assert screen.render_count == 2
        assert spy.call_count == 2

    def test_set_content(self, screen):
        el = Element({"parent": screen})
        spy = MagicMock()
        el.on("set_content", spy)
        el.set_content("hi")
        assert el.content == "hi"
        spy.assert_called_once_with()

    def test_remove_clears_position(self, screen):
        el = Element({"parent": screen})
        el.render()
        screen.remove(el)
        assert el.lpos is None


# =============================================================================
# Screen registries
# =============================================================================


class TestRegistries:
    def test_attached_interactive_element_is_registered(self, screen):
        el = Element({"parent": screen, "clickable": True, "keyable": True})
        assert el in screen.clickable
        assert el in screen.keyable

    def test_mouse_and_keys_imply_registration(self, screen):
        el = Element({"parent": screen, "mouse": True, "keys": True})
        assert el.clickable and el.keyable
        assert el in screen.clickable
        assert el in screen.keyable

    def test_detached_element_registers_on_attach(self, screen):
        el = Element({"screen": screen, "clickable": True})
        assert el not in screen.clickable
        screen.append(el)
        assert screen.clickable.count(el) == 1

    def test_removal_unregisters(self, screen):
        el = Element({"parent": screen, "clickable": True, "keyable": True})
        screen.remove(el)
        assert el not in screen.clickable
        assert el not in screen.keyable

    def test_descendant_unregisters_when_ancestor_removed(self, screen):
        parent = Element({"parent": screen})
        child = Element({"parent": parent, "clickable": True})
        screen.remove(parent)
        assert child not in screen.clickable

    def test_destroy_unregisters(self, screen):
        el = Element({"parent": screen, "keyable": True})
        el.destroy()
        assert el not in screen.keyable

    def test_plain_element_is_not_registered(self, screen):
        Element({"parent": screen})
        assert screen.clickable == []
        assert screen.keyable == []


# =============================================================================
# Visibility and focus
# =============================================================================


class TestVisibility:
    def test_hide_and_show_events(self, screen):
        el = Element({"parent": screen})
        events = []
        el.on("hide", lambda: events.append("hide"))
        el.on("show", lambda: events.append("show"))

        el.hide()
        el.hide()
        el.show()
        el.show()

        assert events == ["hide", "show"]

    def test_toggle(self, screen):
        el = Element({"parent": screen})
        el.toggle()
        assert el.hidden
        el.toggle()
        assert not el.hidden

    def test_hide_clears_position(self, screen):
        el = Element({"parent": screen})
        el.render()
        el.hide()
        assert el.lpos is None

    def test_hidden_ancestor_makes_descendant_invisible(self, screen):
        parent = Element({"parent": screen})
        child = Element({"parent": parent})
        assert child.visible
        parent.hide()
        assert not child.visible

    def test_hiding_focused_element_rewinds_focus(self, screen):
        a = Element({"parent": screen})
        b = Element({"parent": screen})
        b.focus()
        assert b.focused

        b.hide()

        assert screen.focused is a
        assert not b.focused
