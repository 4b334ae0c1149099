"""
Line - a one cell wide or tall separator.
"""

from __future__ import annotations

from typing import Any, ClassVar

from nodetui.types import LineOptions
from nodetui.widgets.box import Box

VERTICAL_CH = "│"
HORIZONTAL_CH = "─"


class Line(Box):
    kind: ClassVar[str] = "line"
    options_model: ClassVar[type[LineOptions]] = LineOptions

    def __init__(self, options: LineOptions | dict[str, Any] | None = None) -> None:
        opts = self.options_model.model_validate(options or {})
        if opts.orientation == "vertical":
            opts = opts.model_copy(update={"width": 1})
        else:
            opts = opts.model_copy(update={"height": 1})
        super().__init__(opts)

        self.orientation = opts.orientation
        if opts.line_type == "line":
            self.ch = HORIZONTAL_CH if self.orientation == "horizontal" else VERTICAL_CH
        else:
            self.ch = opts.ch or " "
