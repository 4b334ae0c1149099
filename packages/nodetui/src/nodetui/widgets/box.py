"""
Box and Input - plain rectangular elements.
"""

from __future__ import annotations

from typing import Any, ClassVar

from nodetui.element import Element
from nodetui.types import ElementOptions


class Box(Element):
    """Element with no behavior of its own."""

    kind: ClassVar[str] = "box"


class Input(Box):
    """
    Base of the interactive widgets.

    Inputs receive ``keypress`` while focused unless created with
    ``keyable=False``.
    """

    kind: ClassVar[str] = "input"

    def __init__(self, options: ElementOptions | dict[str, Any] | None = None) -> None:
        opts = self.options_model.model_validate(options or {})
        if "keyable" not in opts.model_fields_set and "keys" not in opts.model_fields_set:
            opts = opts.model_copy(update={"keyable": True})
        super().__init__(opts)
