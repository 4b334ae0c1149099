"""
Small sequence helpers shared by the tree, the screen and widgets.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Protocol, TypeVar


class NameSortable(Protocol):
    name: str


class IndexSortable(Protocol):
    index: int


N = TypeVar("N", bound=NameSortable)
I = TypeVar("I", bound=IndexSortable)


def remove_if_exists(items: list[Any], item: Any) -> int:
    """
    Remove ``item`` from ``items`` if present.

    Args:
        items: List to remove from (mutated in place)
        item: Element to remove, matched by identity

    Returns:
        The index the item was removed from, or -1 if it wasn't there
    """
    for i, existing in enumerate(items):
        if existing is item:
            del items[i]
            return i
    return -1


def _compare_names(obj_a: NameSortable, obj_b: NameSortable) -> int:
    a = obj_a.name.lower()
    b = obj_b.name.lower()
    if a[:1] == "." and b[:1] == ".":
        a, b = a[1:2], b[1:2]
    else:
        a, b = a[:1], b[:1]
    return (a > b) - (a < b)


def asort(items: list[N]) -> list[N]:
    """
    Sort objects with a ``name`` case-insensitively by first letter only.

    If both names start with ``.``, their second letters are compared
    instead. Sorts in place and returns the list.
    """
    items.sort(key=cmp_to_key(_compare_names))
    return items


def hsort(items: list[I]) -> list[I]:
    """Sort objects in place by their ``index`` field, highest first."""
    items.sort(key=lambda x: x.index, reverse=True)
    return items
