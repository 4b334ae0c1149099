"""
Node - base of the element tree

A node owns an ordered list of children and keeps weak back-references to
its parent and its screen. Tree mutations notify listeners through the
node's EventEmitter:

- ``reparent`` (new parent or None) on the moved node
- ``adopt`` (child) / ``remove`` (child) on the parent
- ``attach`` / ``detach`` on every node whose reachability changes
- ``destroy`` on every node of a destroyed subtree
"""

from __future__ import annotations

import itertools
import logging
import weakref
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from nodetui.errors import CrossScreenError, NoActiveScreenError
from nodetui.events import EventEmitter
from nodetui.helpers import remove_if_exists
from nodetui.types import Coords, NodeOptions

if TYPE_CHECKING:
    from nodetui.screen import Screen

logger = logging.getLogger(__name__)

NodeVisitor = Callable[["Node"], Any]

_uid_counter = itertools.count()

_UNSET = object()


class Node(EventEmitter):
    """
    Base tree node.

    Args:
        options: NodeOptions or a dict of the same fields. ``screen`` and
            ``parent`` decide which screen the node belongs to; ``children``
            are appended in order after construction.
    """

    kind: ClassVar[str] = "node"
    options_model: ClassVar[type[NodeOptions]] = NodeOptions

    def __init__(self, options: NodeOptions | dict[str, Any] | None = None) -> None:
        super().__init__()
        self.options = self.options_model.model_validate(options or {})

        self.uid = next(_uid_counter)
        self.children: list[Node] = []
        self.data: dict[str, Any] = {}
        self.lpos: Coords | None = None
        self.destroyed = False
        self.index = -1

        self._parent_ref: weakref.ReferenceType[Node] | None = None
        self._screen_ref: weakref.ReferenceType[Screen] | None = None
        self.screen = self._resolve_screen(self.options)

        # Only the screen starts out reachable from itself
        self.detached = self.kind != "screen"

        parent = self.options.parent
        children = list(self.options.children)
        # Tree links live only in the weak back-references from here on
        self.options = self.options.model_copy(
            update={"screen": None, "parent": None, "children": []}
        )

        if parent is not None:
            parent.append(self)

        for child in children:
            self.append(child)

    def _resolve_screen(self, opts: NodeOptions) -> Screen | None:
        if opts.screen is not None:
            return opts.screen
        if self.kind == "screen":
            return self  # type: ignore[return-value]
        if opts.parent is not None:
            return opts.parent.screen

        from nodetui.screen import Screen

        if Screen.total() == 1:
            return Screen.global_screen()
        if Screen.total() == 0:
            raise NoActiveScreenError(f"No active screen for {self.kind} #{self.uid}")
        raise NoActiveScreenError(
            f"{self.kind} #{self.uid} needs a `parent` or `screen` option "
            "when more than one screen is alive"
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} #{self.uid}>"

    # -------------------------------------------------------------------------
    # Back-references
    # -------------------------------------------------------------------------

    @property
    def parent(self) -> Node | None:  # type: ignore[override]
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: Node | None) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def screen(self) -> Screen | None:
        return self._screen_ref() if self._screen_ref is not None else None

    @screen.setter
    def screen(self, value: Screen | None) -> None:
        self._screen_ref = weakref.ref(value) if value is not None else None

    # -------------------------------------------------------------------------
    # Tree mutation
    # -------------------------------------------------------------------------

    def insert(self, element: Node, i: int) -> None:
        """
        Insert ``element`` as a child at index ``i``.

        The element is first detached from its current parent. Nodes of the
        inserted subtree that become reachable from the screen receive
        ``attach``.

        Raises:
            CrossScreenError: if the element belongs to another screen
        """
        if element.screen is not None and element.screen is not self.screen:
            raise CrossScreenError(element, self)

        element.detach()
        element.parent = self
        element.screen = self.screen

        if i == 0:
            self.children.insert(0, element)
        elif i == len(self.children):
            self.children.append(element)
        else:
            self.children.insert(i, element)

        logger.debug("insert %r into %r at %d", element, self, i)

        element.emit("reparent", self)
        self.emit("adopt", element)

        detached = self.detached

        def visit(el: Node) -> None:
            changed = el.detached != detached
            el.detached = detached
            if changed and not detached:
                el.emit("attach")
            for child in list(el.children):
                visit(child)

        visit(element)

        screen = self.screen
        if screen is not None and screen.focused is None:
            screen.focused = element

    def prepend(self, element: Node) -> None:
        self.insert(element, 0)

    def append(self, element: Node) -> None:
        self.insert(element, len(self.children))

    def insert_before(self, element: Node, other: Node) -> None:
        i = self._child_index(other)
        if i != -1:
            self.insert(element, i)

    def insert_after(self, element: Node, other: Node) -> None:
        i = self._child_index(other)
        if i != -1:
            self.insert(element, i + 1)

    def _child_index(self, other: Node) -> int:
        for i, child in enumerate(self.children):
            if child is other:
                return i
        return -1

    def remove(self, element: Node) -> None:
        """
        Remove a direct child. Nodes of the removed subtree that were
        reachable receive ``detach``. Does nothing if ``element`` isn't a
        child of this node.
        """
        if element.parent is not self:
            return

        i = self._child_index(element)
        if i == -1:
            return

        element.clear_pos()
        element.parent = None
        del self.children[i]

        screen = self.screen
        if screen is not None:
            remove_if_exists(screen.clickable, element)
            remove_if_exists(screen.keyable, element)

        logger.debug("remove %r from %r", element, self)

        element.emit("reparent", None)
        self.emit("remove", element)

        def visit(el: Node) -> None:
            changed = el.detached is not True
            el.detached = True
            if changed:
                el.emit("detach")
            for child in list(el.children):
                visit(child)

        visit(element)

        if screen is not None and screen.focused is element:
            screen.rewind_focus()

    def detach(self) -> None:
        """Remove this node from its parent, if it has one."""
        parent = self.parent
        if parent is not None:
            parent.remove(self)

    def clear_pos(self) -> None:
        self.lpos = None

    def free(self) -> None:
        """Release resources held by this node. Called once by destroy()."""

    def destroy(self) -> None:
        """
        Detach this node and finalize it and every descendant.

        Each node of the subtree gets ``free()`` called, is marked
        destroyed and receives ``destroy``, exactly once.
        """
        self.detach()
        logger.debug("destroy %r", self)
        for el in self.collect_descendants(include_self=True):
            el.free()
            el.destroyed = True
            el.emit("destroy")

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def for_descendants(self, visit: NodeVisitor, include_self: bool = False) -> None:
        """Call ``visit`` on every descendant, depth-first pre-order."""
        if include_self:
            visit(self)

        def walk(el: Node) -> None:
            for child in list(el.children):
                visit(child)
                walk(child)

        walk(self)

    def for_ancestors(self, visit: NodeVisitor, include_self: bool = False) -> None:
        """Call ``visit`` on each ancestor, nearest first."""
        if include_self:
            visit(self)
        el = self.parent
        while el is not None:
            visit(el)
            el = el.parent

    def collect_descendants(self, include_self: bool = False) -> list[Node]:
        out: list[Node] = []
        self.for_descendants(out.append, include_self)
        return out

    def collect_ancestors(self, include_self: bool = False) -> list[Node]:
        out: list[Node] = []
        self.for_ancestors(out.append, include_self)
        return out

    def emit_descendants(
        self,
        type: str,
        *args: Any,
        visitor: NodeVisitor | None = None,
    ) -> None:
        """
        Emit an event on this node and every descendant.

        Args:
            type: Event name
            *args: Event arguments
            visitor: Optional callback run on each node right before its dispatch
        """
        def each(el: Node) -> None:
            if visitor is not None:
                visitor(el)
            el.emit(type, *args)

        self.for_descendants(each, include_self=True)

    def emit_ancestors(
        self,
        type: str,
        *args: Any,
        visitor: NodeVisitor | None = None,
    ) -> None:
        """Emit an event on this node and each ancestor, nearest first."""
        def each(el: Node) -> None:
            if visitor is not None:
                visitor(el)
            el.emit(type, *args)

        self.for_ancestors(each, include_self=True)

    def has_descendant(self, target: Node) -> bool:
        for child in self.children:
            if child is target or child.has_descendant(target):
                return True
        return False

    def has_ancestor(self, target: Node) -> bool:
        el = self.parent
        while el is not None:
            if el is target:
                return True
            el = el.parent
        return False

    # -------------------------------------------------------------------------
    # Local data
    # -------------------------------------------------------------------------

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value stored under ``name``, or ``default`` if it was never set."""
        value = self.data.get(name, _UNSET)
        return default if value is _UNSET else value

    def set(self, name: str, value: Any) -> None:
        self.data[name] = value
