"""
Thin element specializations built on the core tree and event bus.
"""

from nodetui.widgets.box import Box, Input
from nodetui.widgets.button import Button
from nodetui.widgets.checkbox import Checkbox
from nodetui.widgets.line import Line

__all__ = [
    "Box",
    "Input",
    "Button",
    "Checkbox",
    "Line",
]
