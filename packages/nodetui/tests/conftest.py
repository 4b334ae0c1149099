"""
Shared pytest fixtures for nodetui tests.
"""

from __future__ import annotations

from typing import Any, Callable, Generator

import pytest

from nodetui.screen import Screen


# =============================================================================
# Screen Fixtures
# =============================================================================


def _destroy_all_screens() -> None:
    for screen in Screen.instances():
        screen.destroy()


@pytest.fixture(autouse=True)
def fresh_screen_registry() -> Generator[None, None, None]:
    """Make sure every test starts and ends with no live screen."""
    _destroy_all_screens()
    yield
    _destroy_all_screens()


@pytest.fixture
def screen() -> Screen:
    """Provide an 80x24 screen."""
    return Screen({"columns": 80, "rows": 24})


@pytest.fixture
def screen_factory() -> Callable[..., Screen]:
    """Provide a factory for additional screens."""
    def create(columns: int = 80, rows: int = 24) -> Screen:
        return Screen({"columns": columns, "rows": rows})
    return create


# =============================================================================
# Listener Fixtures
# =============================================================================


class Recorder:
    """Collects (name, args) for every call made to listeners it creates."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def listener(self, name: str, result: Any = None) -> Callable[..., Any]:
        def fn(*args: Any) -> Any:
            self.calls.append((name, args))
            return result
        return fn

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def recorder() -> Recorder:
    """Provide a call recorder for listeners."""
    return Recorder()
