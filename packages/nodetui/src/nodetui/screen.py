"""
Screen - root of an element tree

The screen owns focus state, the clickable/keyable registries and the
render pass. It does not talk to a terminal: a backend drives it by calling
``render()`` and feeding input through ``dispatch_key`` / ``dispatch_mouse``.

Every live screen is tracked in a process-wide registry so that nodes
created without ``parent`` or ``screen`` can find the screen when exactly
one exists.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from nodetui.config import get_default_size
from nodetui.element import Element
from nodetui.helpers import hsort, remove_if_exists
from nodetui.node import Node
from nodetui.types import Coords, KeyEvent, ScreenOptions

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

FOCUS_HISTORY_LIMIT = 10

MOUSE_ACTIONS = frozenset({
    "move",
    "drag",
    "btndown",
    "btnup",
    "click",
    "dblclick",
    "mousewheel",
})
"""Event names an input backend may pass to ``dispatch_mouse``."""


class Screen(Node):
    """
    Root node of a tree.

    Args:
        options: ScreenOptions or dict. ``columns`` / ``rows`` default to
            the environment's terminal size (see ``nodetui.config``).
    """

    kind: ClassVar[str] = "screen"
    options_model: ClassVar[type[ScreenOptions]] = ScreenOptions

    _instances: ClassVar[list[Screen]] = []
    _global: ClassVar[Screen | None] = None

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def __init__(self, options: ScreenOptions | dict[str, Any] | None = None) -> None:
        # Focus and registries must exist before Node appends initial children
        self.clickable: list[Element] = []
        self.keyable: list[Element] = []
        self._history: list[Node] = []
        self._saved_focus: Node | None = None
        self._ci = -1
        self.render_count = 0

        super().__init__(options)

        default_columns, default_rows = get_default_size()
        self.columns = self.options.columns or default_columns
        self.rows = self.options.rows or default_rows
        self.lpos = Coords(xi=0, xl=self.columns, yi=0, yl=self.rows)

        Screen._instances.append(self)
        if Screen._global is None:
            Screen._global = self
        logger.debug("screen %r registered (%d alive)", self, len(Screen._instances))

    # -------------------------------------------------------------------------
    # Process-wide registry
    # -------------------------------------------------------------------------

    @classmethod
    def total(cls) -> int:
        """Number of screens alive in this process."""
        return len(cls._instances)

    @classmethod
    def global_screen(cls) -> Screen | None:
        """The default screen: the first one created that is still alive."""
        return cls._global

    @classmethod
    def instances(cls) -> list[Screen]:
        return list(cls._instances)

    def _bubbles(self) -> bool:
        return False

    def destroy(self) -> None:
        remove_if_exists(Screen._instances, self)
        if Screen._global is self:
            Screen._global = Screen._instances[0] if Screen._instances else None
        logger.debug("screen %r unregistered (%d alive)", self, len(Screen._instances))
        super().destroy()

    def resize(self, columns: int, rows: int) -> None:
        self.columns = columns
        self.rows = rows
        self.lpos = Coords(xi=0, xl=columns, yi=0, yl=rows)
        self.emit("resize")

    def clear_pos(self) -> None:
        # The screen always covers the whole terminal
        return

    # -------------------------------------------------------------------------
    # Focus
    # -------------------------------------------------------------------------

    @property
    def focused(self) -> Node | None:
        return self._history[-1] if self._history else None

    @focused.setter
    def focused(self, el: Node | None) -> None:
        if el is None:
            old = self.focused
            self._history.clear()
            if old is not None:
                old.emit("blur", None)
            return
        self.focus_push(el)

    def _focus(self, cur: Node | None, old: Node | None) -> None:
        logger.debug("focus %r -> %r", old, cur)
        if old is not None and old is not cur:
            old.emit("blur", cur)
        if cur is not None:
            cur.emit("focus", old)

    def focus_push(self, el: Node) -> None:
        old = self.focused
        if old is el:
            return
        if len(self._history) == FOCUS_HISTORY_LIMIT:
            self._history.pop(0)
        self._history.append(el)
        self._focus(el, old)

    def focus_pop(self) -> Node | None:
        """Drop the current focus and return to the previous entry in history."""
        if not self._history:
            return None
        old = self._history.pop()
        if self._history:
            self._focus(self._history[-1], old)
        return old

    def rewind_focus(self) -> Node | None:
        """
        Move focus back to the most recent element in history that is still
        attached and visible. Clears focus if there is none.

        Returns:
            The newly focused node, or None
        """
        old = self._history.pop() if self._history else None
        while self._history:
            el = self._history.pop()
            if not el.detached and getattr(el, "visible", True):
                self._history.append(el)
                self._focus(el, old)
                return el
        if old is not None:
            old.emit("blur", None)
        return None

    def save_focus(self) -> Node | None:
        self._saved_focus = self.focused
        return self._saved_focus

    def restore_focus(self) -> Node | None:
        saved = self._saved_focus
        if saved is None:
            return None
        self._saved_focus = None
        self.focused = saved
        return saved

    def focus_offset(self, offset: int) -> None:
        """Move focus ``offset`` steps through the visible keyable elements."""
        shown = [el for el in self.keyable if not el.detached and el.visible]
        if not shown or not offset:
            return
        current = self.focused
        i = next((n for n, el in enumerate(shown) if el is current), -1)
        if i == -1 and offset < 0:
            i = 0
        self.focused = shown[(i + offset) % len(shown)]

    def focus_next(self) -> None:
        self.focus_offset(1)

    def focus_previous(self) -> None:
        self.focus_offset(-1)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def next_paint_index(self) -> int:
        """Hand out paint indices during a render pass; -1 outside of one."""
        if self._ci == -1:
            return -1
        index = self._ci
        self._ci += 1
        return index

    def render(self) -> None:
        """Resolve the boxes of every element in the tree, in paint order."""
        self._emit("prerender", ())
        self._ci = 0
        try:
            for child in list(self.children):
                if isinstance(child, Element):
                    child.render()
        finally:
            self._ci = -1
        self.render_count += 1
        self._emit("render", ())

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def element_at(self, x: int, y: int) -> Element | None:
        """Return the topmost visible clickable element covering cell (x, y)."""
        candidates = [
            el for el in self.clickable
            if not el.detached and el.visible and el.lpos is not None
        ]
        for el in hsort(candidates):
            if el.lpos is not None and el.lpos.contains(x, y):
                return el
        return None

    def dispatch_mouse(
        self,
        action: str,
        buttons: int,
        modifiers: int,
        x: int,
        y: int,
        wheel_dx: int = 0,
        wheel_dy: int = 0,
    ) -> Element | None:
        """
        Route a decoded mouse notification to the element under the pointer.

        The screen always receives the event first. ``click`` focuses the
        target when its ``auto_focus`` is set.

        Args:
            action: One of MOUSE_ACTIONS
            buttons: Button bitmask as reported by the input backend
            modifiers: Modifier bitmask
            x: Column
            y: Row
            wheel_dx: Horizontal wheel delta (``mousewheel`` only)
            wheel_dy: Vertical wheel delta (``mousewheel`` only)

        Returns:
            The element that received the event, or None

        Raises:
            ValueError: if ``action`` is not a known mouse action
        """
        if action not in MOUSE_ACTIONS:
            raise ValueError(f"Unknown mouse action: {action!r}")

        args: tuple[int, ...] = (buttons, modifiers, x, y)
        if action == "mousewheel":
            args += (wheel_dx, wheel_dy)

        self.emit(action, *args)

        target = self.element_at(x, y)
        if target is None:
            return None
        if action == "click" and target.auto_focus:
            target.focus()
        target.emit(action, *args)
        return target

    def dispatch_key(self, ch: str | None, key: KeyEvent | dict[str, Any]) -> bool | None:
        """
        Deliver a ``keypress`` to the screen, then to the focused element if
        it is keyable.

        Returns:
            The focused element's dispatch result, or the screen's when no
            keyable element has focus
        """
        key = KeyEvent.model_validate(key)
        result = self.emit("keypress", ch, key)
        focused = self.focused
        if isinstance(focused, Element) and focused.keyable:
            return focused.emit("keypress", ch, key)
        return result
