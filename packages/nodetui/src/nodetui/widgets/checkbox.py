"""
Checkbox - a two-state input rendered as ``[x] text``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from nodetui.types import CheckboxOptions, KeyEvent
from nodetui.widgets.box import Input

TOGGLE_KEYS = ("enter", "space")


class Checkbox(Input):
    kind: ClassVar[str] = "checkbox"
    options_model: ClassVar[type[CheckboxOptions]] = CheckboxOptions

    def __init__(self, options: CheckboxOptions | dict[str, Any] | None = None) -> None:
        opts = self.options_model.model_validate(options or {})
        super().__init__(opts)

        self.text = opts.text or opts.content
        self.checked = opts.checked
        self._refresh_content()

        self.on("keypress", self._on_keypress)
        if opts.mouse:
            self.on("click", lambda *args: self._toggle_and_render())

    def _refresh_content(self) -> None:
        self.set_content(f"[{'x' if self.checked else ' '}] {self.text}")

    def _on_keypress(self, ch: str | None, key: KeyEvent) -> None:
        if key.name in TOGGLE_KEYS:
            self._toggle_and_render()

    def _toggle_and_render(self) -> None:
        self.toggle()
        screen = self.screen
        if screen is not None:
            screen.render()

    @property
    def value(self) -> bool:
        return self.checked

    def check(self) -> None:
        if self.checked:
            return
        self.checked = True
        self._refresh_content()
        self.emit("check")

    def uncheck(self) -> None:
        if not self.checked:
            return
        self.checked = False
        self._refresh_content()
        self.emit("uncheck")

    def toggle(self) -> None:
        """Flip the checked state. Unlike Element.toggle, visibility is untouched."""
        if self.checked:
            self.uncheck()
        else:
            self.check()
