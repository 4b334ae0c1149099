"""
Layout - container that positions its children automatically

Two modes are supported:

- ``inline``: children flow left to right and wrap into rows; each child is
  then pulled up to the bottom of the horizontally closest child of the
  previous row, so rows of uneven height pack without gaps.
- ``grid``: children flow the same way but every child starts on a column
  boundary sized to the widest child.

Placement is strictly sequential: a child is placed from the boxes already
resolved for the siblings before it.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, ClassVar

from nodetui.element import Element
from nodetui.errors import LayoutConfigError
from nodetui.types import Coords, LayoutOptions

logger = logging.getLogger(__name__)

Placement = Callable[[Element, int], Any]
"""Places child ``el`` at index ``i``; returning False skips the child."""

RendererFactory = Callable[["Layout", Coords], Placement]


class Layout(Element):
    """
    Container that places children without explicit coordinates.

    Args:
        options: LayoutOptions or dict. Needs a ``width`` (or both ``left``
            and ``right``) and a ``height`` (or both ``top`` and
            ``bottom``). ``renderer`` may replace the built-in placement;
            it is called as ``renderer(layout, inner_box)`` on every render
            and must return a Placement.

    Raises:
        LayoutConfigError: if the width or height cannot be resolved
    """

    kind: ClassVar[str] = "layout"
    options_model: ClassVar[type[LayoutOptions]] = LayoutOptions

    def __init__(self, options: LayoutOptions | dict[str, Any] | None = None) -> None:
        opts = self.options_model.model_validate(options or {})
        if (opts.width is None and (opts.left is None or opts.right is None)) or (
            opts.height is None and (opts.top is None or opts.bottom is None)
        ):
            raise LayoutConfigError("`Layout` must have a width and height!")

        self.layout_mode = opts.layout
        self._renderer_factory: RendererFactory | None = opts.renderer

        super().__init__(opts)

    # -------------------------------------------------------------------------
    # Sibling lookups
    # -------------------------------------------------------------------------

    @staticmethod
    def is_rendered(el: Element) -> bool:
        """True if ``el`` was placed with a positive width and height."""
        return el.lpos is not None and el.lpos.has_area()

    def get_last(self, i: int) -> Element | None:
        """Return the nearest child before index ``i`` that was rendered."""
        for j in range(i - 1, -1, -1):
            el = self.children[j]
            if isinstance(el, Element) and self.is_rendered(el):
                return el
        return None

    def get_last_coords(self, i: int) -> Coords | None:
        last = self.get_last(i)
        return last.lpos if last is not None else None

    def _row_height(self, start: int, end: int) -> int:
        height = 0
        for el in self.children[start:end]:
            if isinstance(el, Element) and self.is_rendered(el):
                assert el.lpos is not None
                height = max(height, el.lpos.height)
        return height

    @staticmethod
    def _auto_size(el: Element) -> None:
        if el.position.width is None or el.position.height is None:
            el.shrink = True

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def renderer(self, coords: Coords) -> Placement:
        """
        Build the placement function for one render pass.

        Args:
            coords: The layout's inner box (border and padding removed)

        Returns:
            Callable placing child ``el`` at index ``i`` by setting its
            ``position.left`` / ``position.top`` relative to ``coords``
        """
        width = coords.width
        xi = coords.xi
        yi = coords.yi
        mode = self.layout_mode

        # Current row offset in cells, and the index of the first child of
        # the current and previous rows
        row_offset = 0
        row_index = 0
        last_row_index = 0

        high_width = 0
        if mode == "grid":
            for el in self.children:
                if isinstance(el, Element):
                    self._auto_size(el)
                    high_width = max(high_width, el.width)

        def place(el: Element, i: int) -> None:
            nonlocal row_offset, row_index, last_row_index

            self._auto_size(el)

            last = self.get_last(i)
            if last is None or last.lpos is None:
                el.position.left = 0
                el.position.top = 0
            else:
                left = last.lpos.xl - xi
                if mode == "grid":
                    # Align to the column boundary of the widest child
                    left += high_width - last.lpos.width

                if left + el.width <= width:
                    el.position.left = left
                    el.position.top = row_offset
                else:
                    row_offset += self._row_height(row_index, i)
                    last_row_index = row_index
                    row_index = i
                    el.position.left = 0
                    el.position.top = row_offset

            if mode == "inline":
                above: Element | None = None
                distance = math.inf
                for sibling in self.children[last_row_index:row_index]:
                    if not isinstance(sibling, Element) or not self.is_rendered(sibling):
                        continue
                    assert sibling.lpos is not None
                    d = abs(el.position.left - (sibling.lpos.xi - xi))
                    if d < distance:
                        above = sibling
                        distance = d
                if above is not None and above.lpos is not None:
                    el.position.top = above.lpos.yl - yi

        return place

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_coords(self) -> Coords | None:
        """Resolve the layout's own box without rendering any child."""
        children = self.children
        self.children = []
        try:
            return self._render()
        finally:
            self.children = children

    def render(self) -> Coords | None:
        """
        Resolve the layout's box, then place and render each child in order.

        Returns:
            The layout's box, or None if it could not be placed or has no
            inner area
        """
        self._claim_paint_index()
        self._emit("prerender", ())

        coords = self._render_coords()
        if coords is None:
            self.lpos = None
            return None

        inner = self.inner_box()
        if inner is None or inner.width <= 0 or inner.height <= 0:
            logger.debug("%r has no inner area, skipping children", self)
            self.lpos = None
            for el in self.children:
                el.clear_pos()
            return None

        if self._renderer_factory is not None:
            place = self._renderer_factory(self, inner)
        else:
            place = self.renderer(inner)

        for i, el in enumerate(list(self.children)):
            if not isinstance(el, Element):
                continue
            if place(el, i) is False:
                el.clear_pos()
                continue
            el.render()

        self._emit("render", (coords,))
        return coords
