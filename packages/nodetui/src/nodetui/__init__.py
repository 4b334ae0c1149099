"""
nodetui: element tree, bubbling event bus and automatic layout for terminal UIs

The core is made of three pieces:
- EventEmitter: per-node listeners with ancestor bubbling and cancellation
- Node / Element / Screen: the ownership tree, focus and coordinate boxes
- Layout: inline and grid placement of children without coordinates
"""

from nodetui.config import VERSION
from nodetui.element import Element, resolve_size
from nodetui.errors import (
    CrossScreenError,
    LayoutConfigError,
    NodeTuiError,
    NoActiveScreenError,
    UnhandledErrorEvent,
)
from nodetui.events import ElementEvent, EventEmitter, Listener
from nodetui.helpers import asort, hsort, remove_if_exists
from nodetui.layout import Layout, Placement
from nodetui.node import Node
from nodetui.screen import MOUSE_ACTIONS, Screen
from nodetui.types import (
    Coords,
    CheckboxOptions,
    ElementOptions,
    KeyEvent,
    LayoutMode,
    LayoutOptions,
    LineOptions,
    NodeOptions,
    Padding,
    Position,
    ScreenOptions,
    SizeValue,
)
from nodetui.utils import visible_width

from nodetui.widgets import (
    Box,
    Button,
    Checkbox,
    Input,
    Line,
)

__version__ = VERSION

__all__ = [
    "EventEmitter",
    "ElementEvent",
    "Listener",
    "Node",
    "Element",
    "resolve_size",
    "Screen",
    "MOUSE_ACTIONS",
    "Layout",
    "Placement",
    "NodeTuiError",
    "CrossScreenError",
    "LayoutConfigError",
    "NoActiveScreenError",
    "UnhandledErrorEvent",
    "Coords",
    "Position",
    "Padding",
    "SizeValue",
    "LayoutMode",
    "NodeOptions",
    "ElementOptions",
    "LayoutOptions",
    "ScreenOptions",
    "CheckboxOptions",
    "LineOptions",
    "KeyEvent",
    "Box",
    "Input",
    "Button",
    "Checkbox",
    "Line",
    "remove_if_exists",
    "asort",
    "hsort",
    "visible_width",
]
