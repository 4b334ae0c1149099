"""
Exception types raised by nodetui.

Tree and layout invariant violations are raised synchronously at the call
site. Event faults travel through the ``error`` channel and only surface
here when nobody listens for them.
"""

from __future__ import annotations

from typing import Any


class NodeTuiError(Exception):
    """Base class for all nodetui errors."""


class CrossScreenError(NodeTuiError):
    """Raised when a node is inserted into a tree owned by a different screen."""

    def __init__(self, node: Any, target: Any) -> None:
        super().__init__(
            f"Cannot switch a node's screen: {node.kind} #{node.uid} belongs to "
            f"another screen than {target.kind} #{target.uid}"
        )
        self.node = node
        self.target = target


class LayoutConfigError(NodeTuiError, ValueError):
    """Raised when a layout container cannot resolve its width or height."""


class NoActiveScreenError(NodeTuiError):
    """Raised when a node cannot determine which screen it belongs to."""


class UnhandledErrorEvent(NodeTuiError):
    """
    Raised when ``error`` is emitted on a node without ``error`` listeners
    and the payload is not an exception itself.
    """

    def __init__(self, payload: Any = None) -> None:
        super().__init__(f"Unhandled 'error' event: {payload!r}")
        self.payload = payload
