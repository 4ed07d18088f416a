"""Values module – checks whether nested data carries anything worth keeping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Number
from typing import Any

logger = logging.getLogger(__name__)

PRIVATE_PREFIXES = ("$", "_")

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


class CircularReferenceError(ValueError):
    """Raised when a structure refers back to one of its own ancestors."""

    def __init__(self, obj: object) -> None:
        super().__init__(f"Circular reference to {type(obj).__name__} at 0x{id(obj):x}")
        self.obj = obj


class _Undefined:
    """Marker for a value that was never set (``None`` is a real value)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def is_container(value: object) -> bool:
    """Return True for mappings and non-string collections."""
    return isinstance(value, Mapping) or isinstance(value, _SEQUENCE_TYPES)


def _values_of(obj: Any) -> list[Any]:
    if isinstance(obj, Mapping):
        return list(obj.values())
    return list(obj)


def has_values(obj: Any, ancestors: list[Any] | None = None) -> bool:
    """Return True if *obj* holds at least one value that is not ``None``.

    Nested mappings and collections are searched recursively.  ``0``,
    ``False`` and ``""`` all count as values.

    *ancestors* is the path of containers currently being visited.  It is
    compared by identity, so the same object may appear under two sibling
    keys, but a container that contains one of its own ancestors raises
    :class:`CircularReferenceError`.
    """
    if ancestors is None:
        ancestors = []

    if not is_container(obj) or len(obj) == 0:
        return False

    ancestors.append(obj)
    try:
        for value in _values_of(obj):
            if is_container(value):
                if any(value is seen for seen in ancestors):
                    logger.debug("Cycle detected at depth %d", len(ancestors))
                    raise CircularReferenceError(value)
                if has_values(value, ancestors):
                    return True
            elif value is not None and value is not UNDEFINED:
                return True
        return False
    finally:
        ancestors.pop()


def is_defined(value: object) -> bool:
    """Inverse of an "is undefined" check: only :data:`UNDEFINED` is not defined."""
    return value is not UNDEFINED


def _is_number(value: object) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_nan(value: object) -> bool:
    # NaN is the only number not equal to itself, for float and Decimal alike.
    return value != value


def is_valuable(value: object) -> bool:
    """Return True if *value* carries something meaningful.

    Numbers (except NaN), booleans and containers always count, even
    ``0``, ``False`` and ``{}``.  Strings count when non-empty.
    """
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, bool) or is_container(value):
        return True
    if _is_number(value):
        return not _is_nan(value)
    if isinstance(value, (str, bytes)):
        return len(value) > 0
    return True


def limit_to(value: object, min_value: float, max_value: float) -> float:
    """Clamp *value* to ``[min_value, max_value]``; non-numbers and NaN give *min_value*."""
    if not _is_number(value) or _is_nan(value):
        return min_value
    if value > max_value:
        return max_value
    if value < min_value:
        return min_value
    return value


def _is_private(key: object, prefixes: tuple[str, ...]) -> bool:
    return isinstance(key, str) and key.startswith(prefixes)


def omit_private_fields(obj: Any, prefixes: tuple[str, ...] | list[str] = PRIVATE_PREFIXES) -> Any:
    """Return a copy of *obj* without keys that start with a private prefix.

    Nested mappings are cleaned recursively and lists/tuples are mapped
    element by element.  Anything else is returned as is.
    """
    prefixes = tuple(prefixes)

    if isinstance(obj, (list, tuple)):
        items = [omit_private_fields(item, prefixes) for item in obj]
        if hasattr(obj, "_fields"):
            return type(obj)(*items)
        return type(obj)(items)

    if not isinstance(obj, Mapping):
        return obj

    return {
        key: omit_private_fields(value, prefixes)
        for key, value in obj.items()
        if not _is_private(key, prefixes)
    }


def is_equal(a: Any, b: Any) -> bool:
    """Deep equality that never treats a bool as equal to a number."""
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return a.keys() == b.keys() and all(is_equal(a[key], b[key]) for key in a)
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def clear_defaults(obj: Mapping[str, Any], defaults: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Drop private, empty and default-valued fields from *obj*.

    Meant for trimming query parameters before they go out.  Emptiness is
    decided by :func:`is_valuable`, equality by :func:`is_equal`.  A
    non-mapping *obj* gives an empty dict.
    """
    if not isinstance(obj, Mapping):
        return {}
    defaults = defaults or {}
    result: dict[str, Any] = {}

    for key, value in omit_private_fields(obj).items():
        if not is_valuable(value):
            continue
        if key in defaults and is_equal(defaults[key], value):
            continue
        result[key] = value

    return result
