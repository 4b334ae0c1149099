"""
Element - a node occupying a rectangle of the screen

An element resolves its absolute box from its ``position`` relative to the
parent's inner box (the parent's box minus border and padding). The result
of the last successful render is kept in ``lpos``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from nodetui.helpers import remove_if_exists
from nodetui.node import Node
from nodetui.types import Coords, ElementOptions, Position, SizeValue
from nodetui.utils import content_size


def resolve_size(value: SizeValue | None, total: int) -> int:
    """
    Resolve an absolute or percentage size against ``total`` cells.

    Example:
        >>> resolve_size("50%", 30)
        15
    """
    if value is None:
        return 0
    if isinstance(value, str):
        return int(total * float(value[:-1]) / 100)
    return value


class Element(Node):
    """
    Positioned node.

    Position fields left as None fall back to the parent's edges: an element
    without width or right fills the parent horizontally, unless ``shrink``
    is set, in which case it is sized to its content.
    """

    kind: ClassVar[str] = "element"
    options_model: ClassVar[type[ElementOptions]] = ElementOptions

    def __init__(self, options: ElementOptions | dict[str, Any] | None = None) -> None:
        opts = self.options_model.model_validate(options or {})

        self.position = Position(
            left=opts.left,
            top=opts.top,
            right=opts.right,
            bottom=opts.bottom,
            width=opts.width,
            height=opts.height,
        )
        self.border = opts.border
        self.padding = opts.padding
        self.shrink = opts.shrink
        self.hidden = opts.hidden
        self.content = opts.content
        self.clickable = opts.clickable or opts.mouse
        self.keyable = opts.keyable or opts.keys
        self.auto_focus = opts.auto_focus

        super().__init__(opts)

        self.on("attach", self._register_interactive)
        self.on("detach", self._unregister_interactive)
        if not self.detached:
            self._register_interactive()

    # -------------------------------------------------------------------------
    # Screen registries
    # -------------------------------------------------------------------------

    def _register_interactive(self) -> None:
        screen = self.screen
        if screen is None:
            return
        if self.clickable and not any(el is self for el in screen.clickable):
            screen.clickable.append(self)
        if self.keyable and not any(el is self for el in screen.keyable):
            screen.keyable.append(self)

    def _unregister_interactive(self) -> None:
        screen = self.screen
        if screen is None:
            return
        remove_if_exists(screen.clickable, self)
        remove_if_exists(screen.keyable, self)

    def free(self) -> None:
        self._unregister_interactive()

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def inner_box(self) -> Coords | None:
        """The last rendered box minus border and padding, or None if unrendered."""
        if self.lpos is None:
            return None
        edge = 1 if self.border else 0
        p = self.padding
        return self.lpos.inset(
            left=edge + p.left,
            top=edge + p.top,
            right=edge + p.right,
            bottom=edge + p.bottom,
        )

    def _parent_box(self) -> Coords | None:
        parent = self.parent
        if parent is None:
            return None
        if isinstance(parent, Element):
            return parent.inner_box()
        return parent.lpos

    def _shrink_size(self) -> tuple[int, int]:
        width, height = content_size(self.content)
        for child in self.children:
            if not isinstance(child, Element):
                continue
            pos = child.position
            if isinstance(pos.width, int):
                left = pos.left if isinstance(pos.left, int) else 0
                width = max(width, left + pos.width)
            if isinstance(pos.height, int):
                top = pos.top if isinstance(pos.top, int) else 0
                height = max(height, top + pos.height)
        edge = 2 if self.border else 0
        p = self.padding
        return width + edge + p.left + p.right, height + edge + p.top + p.bottom

    def _get_width(self, parent: Coords | None) -> int:
        pos = self.position
        total = parent.width if parent is not None else 0
        if pos.width is not None:
            return resolve_size(pos.width, total)
        if self.shrink:
            return self._shrink_size()[0]
        return total - resolve_size(pos.left, total) - resolve_size(pos.right, total)

    def _get_height(self, parent: Coords | None) -> int:
        pos = self.position
        total = parent.height if parent is not None else 0
        if pos.height is not None:
            return resolve_size(pos.height, total)
        if self.shrink:
            return self._shrink_size()[1]
        return total - resolve_size(pos.top, total) - resolve_size(pos.bottom, total)

    @property
    def width(self) -> int:
        """Width in cells, resolved against the parent's current inner box."""
        return self._get_width(self._parent_box())

    @property
    def height(self) -> int:
        return self._get_height(self._parent_box())

    def _get_coords(self) -> Coords | None:
        """
        Compute the absolute box this element occupies.

        The box is clipped to the parent's inner box; an element pushed
        entirely outside of it ends up with zero width or height.

        Returns:
            The box, or None if the element is detached, hidden or its
            parent has not been rendered
        """
        if self.detached or self.hidden:
            return None
        parent = self._parent_box()
        if parent is None:
            return None

        pos = self.position
        width = self._get_width(parent)
        height = self._get_height(parent)

        if pos.left is None and pos.right is not None:
            xi = parent.xl - resolve_size(pos.right, parent.width) - width
        else:
            xi = parent.xi + resolve_size(pos.left, parent.width)

        if pos.top is None and pos.bottom is not None:
            yi = parent.yl - resolve_size(pos.bottom, parent.height) - height
        else:
            yi = parent.yi + resolve_size(pos.top, parent.height)

        xl = min(xi + width, parent.xl)
        yl = min(yi + height, parent.yl)
        xi = max(xi, parent.xi)
        yi = max(yi, parent.yi)
        return Coords(xi=xi, xl=max(xl, xi), yi=yi, yl=max(yl, yi))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _claim_paint_index(self) -> None:
        screen = self.screen
        if screen is None:
            return
        index = screen.next_paint_index()
        if index != -1:
            self.index = index

    def _render(self) -> Coords | None:
        coords = self._get_coords()
        if coords is None:
            self.lpos = None
            return None
        self.lpos = coords
        for child in list(self.children):
            if isinstance(child, Element):
                child.render()
        return coords

    def render(self) -> Coords | None:
        """
        Resolve this element's box and render its children inside it.

        Returns:
            The resolved box, or None if the element could not be placed
        """
        self._claim_paint_index()
        self._emit("prerender", ())
        coords = self._render()
        if coords is not None:
            self._emit("render", (coords,))
        return coords

    def set_content(self, content: str) -> None:
        self.content = content
        self._emit("set_content", ())

    # -------------------------------------------------------------------------
    # Visibility and focus
    # -------------------------------------------------------------------------

    @property
    def visible(self) -> bool:
        """True if neither this element nor any ancestor element is hidden."""
        el: Node | None = self
        while el is not None:
            if isinstance(el, Element) and el.hidden:
                return False
            el = el.parent
        return True

    def show(self) -> None:
        if not self.hidden:
            return
        self.hidden = False
        self.emit("show")

    def hide(self) -> None:
        if self.hidden:
            return
        self.clear_pos()
        self.hidden = True
        self.emit("hide")
        screen = self.screen
        if screen is not None and screen.focused is self:
            screen.rewind_focus()

    def toggle(self) -> None:
        if self.hidden:
            self.show()
        else:
            self.hide()

    def focus(self) -> None:
        screen = self.screen
        if screen is not None:
            screen.focused = self

    @property
    def focused(self) -> bool:
        screen = self.screen
        return screen is not None and screen.focused is self
