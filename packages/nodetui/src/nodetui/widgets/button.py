"""
Button - an input that emits ``press``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from nodetui.types import ElementOptions, KeyEvent
from nodetui.widgets.box import Input

PRESS_KEYS = ("enter", "space")


class Button(Input):
    """
    Pressed with Enter or Space while focused, or with a click when created
    with ``mouse=True``. Buttons do not take focus on click by themselves;
    ``press()`` focuses them.
    """

    kind: ClassVar[str] = "button"

    def __init__(self, options: ElementOptions | dict[str, Any] | None = None) -> None:
        opts = self.options_model.model_validate(options or {})
        if "auto_focus" not in opts.model_fields_set:
            opts = opts.model_copy(update={"auto_focus": False})
        super().__init__(opts)

        self.value: bool | None = None

        self.on("keypress", self._on_keypress)
        if opts.mouse:
            self.on("click", lambda *args: self.press())

    def _on_keypress(self, ch: str | None, key: KeyEvent) -> bool | None:
        if key.name in PRESS_KEYS:
            return self.press()
        return None

    def press(self) -> bool | None:
        """
        Focus the button and emit ``press``. ``value`` is True while the
        ``press`` listeners run.

        Returns:
            The result of the ``press`` dispatch
        """
        self.focus()
        self.value = True
        try:
            return self.emit("press")
        finally:
            self.value = None
