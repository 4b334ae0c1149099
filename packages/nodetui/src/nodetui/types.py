from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nodetui.config import DEFAULT_LAYOUT_MODE

LayoutMode = Literal["inline", "grid"]

Orientation = Literal["vertical", "horizontal"]

SizeValue = int | str
"""Absolute cell count, or a percentage of the parent's inner box ("50%")."""


def _check_size(value: SizeValue | None) -> SizeValue | None:
    if value is None or isinstance(value, int):
        return value
    text = value.strip()
    if not text.endswith("%"):
        raise ValueError(f"size must be an int or a percentage like '50%', got {value!r}")
    float(text[:-1])
    return text


# =============================================================================
# Geometry
# =============================================================================


@dataclass
class Coords:
    """Resolved rectangle in cell coordinates; ``xl`` and ``yl`` are exclusive."""

    xi: int
    xl: int
    yi: int
    yl: int

    @property
    def width(self) -> int:
        return self.xl - self.xi

    @property
    def height(self) -> int:
        return self.yl - self.yi

    def has_area(self) -> bool:
        return self.width > 0 and self.height > 0

    def contains(self, x: int, y: int) -> bool:
        return self.xi <= x < self.xl and self.yi <= y < self.yl

    def inset(self, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> Coords:
        return Coords(
            xi=self.xi + left,
            xl=self.xl - right,
            yi=self.yi + top,
            yl=self.yl - bottom,
        )


@dataclass
class Position:
    """Requested placement of an element relative to its parent's inner box."""

    left: SizeValue | None = None
    top: SizeValue | None = None
    right: SizeValue | None = None
    bottom: SizeValue | None = None
    width: SizeValue | None = None
    height: SizeValue | None = None


# =============================================================================
# Options
# =============================================================================


class Padding(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, data: Any) -> Any:
        if isinstance(data, int):
            return {"left": data, "top": data, "right": data, "bottom": data}
        return data

    @property
    def any(self) -> bool:
        return bool(self.left or self.top or self.right or self.bottom)


class NodeOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)
    screen: Any = None
    parent: Any = None
    children: list[Any] = Field(default_factory=list)


class ScreenOptions(NodeOptions):
    columns: int | None = Field(default=None, gt=0)
    rows: int | None = Field(default=None, gt=0)


class ElementOptions(NodeOptions):
    left: SizeValue | None = None
    top: SizeValue | None = None
    right: SizeValue | None = None
    bottom: SizeValue | None = None
    width: SizeValue | None = None
    height: SizeValue | None = None
    border: bool = False
    padding: Padding = Field(default_factory=Padding)
    shrink: bool = False
    hidden: bool = False
    content: str = ""
    clickable: bool = False
    keyable: bool = False
    mouse: bool = False
    keys: bool = False
    auto_focus: bool = Field(default=True, alias="autoFocus")

    @field_validator("left", "top", "right", "bottom", "width", "height", mode="after")
    @classmethod
    def _validate_size(cls, value: SizeValue | None) -> SizeValue | None:
        return _check_size(value)


class LayoutOptions(ElementOptions):
    layout: LayoutMode = DEFAULT_LAYOUT_MODE  # type: ignore[assignment]
    renderer: Callable[..., Any] | None = None


class CheckboxOptions(ElementOptions):
    text: str = ""
    checked: bool = False


class LineOptions(ElementOptions):
    orientation: Orientation = "vertical"
    line_type: Literal["line", "bg"] = Field(default="line", alias="type")
    ch: str | None = None


# =============================================================================
# Input payloads
# =============================================================================


class KeyEvent(BaseModel):
    """Decoded key carried as the second argument of ``keypress`` events."""

    model_config = ConfigDict(populate_by_name=True)
    name: str
    full: str | None = None
    ctrl: bool = False
    meta: bool = False
    shift: bool = False

    @model_validator(mode="after")
    def _default_full(self) -> KeyEvent:
        if self.full is None:
            self.full = self.name
        return self
