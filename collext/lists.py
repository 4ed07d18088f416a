"""List helpers – in-place add/remove with identity-aware membership."""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Number
from typing import Any, TypeVar

T = TypeVar("T")

_SCALAR_TYPES = (str, bytes, Number)


def _matches(a: Any, b: Any) -> bool:
    # Scalars compare by value, containers and other objects by identity.
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, _SCALAR_TYPES) and isinstance(b, _SCALAR_TYPES):
        return a == b
    return False


def contains(target: Iterable[Any], item: Any) -> bool:
    """Return True if *item* is already in *target*."""
    return any(_matches(existing, item) for existing in target)


def add_items(target: list[T], items: Iterable[T]) -> list[T]:
    """Append all *items* to *target*, duplicates included, and return *target*."""
    for item in items:
        target.append(item)
    return target


def add_uniq(target: list[Any], item: Any) -> bool:
    """Append *item* unless it is already present.

    A list is added element by element.  Returns whether *target* changed.
    """
    if isinstance(item, list):
        changed = False
        for element in item:
            if add_uniq(target, element):
                changed = True
        return changed

    if contains(target, item):
        return False
    target.append(item)
    return True


def _remove_where(target: list[Any], predicate) -> bool:
    kept = [element for element in target if not predicate(element)]
    if len(kept) == len(target):
        return False
    target[:] = kept
    return True


def remove_item(target: list[Any], item: Any) -> bool:
    """Remove every occurrence of *item* from *target*; return whether it changed."""
    return _remove_where(target, lambda element: _matches(element, item))


def remove_items(target: list[Any], items: Iterable[Any]) -> bool:
    """Remove every element of *target* that matches one of *items*."""
    items = list(items)
    return _remove_where(target, lambda element: contains(items, element))
