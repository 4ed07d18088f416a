"""Keys module – renames dict keys and converts them between naming styles."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from collext.words import words


def rename_fields(obj: Any, mapping: Mapping[str, str]) -> Any:
    """Rename keys of *obj* in place following an ``old -> new`` *mapping*.

    Example::

        rename_fields({"x": 2, "y": 3}, {"x": "a", "y": "b"})
        # {"a": 2, "b": 3}

    Non-mappings are returned unchanged.
    """
    if not isinstance(obj, MutableMapping):
        return obj
    for old, new in mapping.items():
        if new != old and old in obj:
            obj[new] = obj.pop(old)
    return obj


# Latin letters with no canonical decomposition.
_LIGATURES = {
    "\xc6": "Ae", "\xe6": "ae", "\xd8": "O", "\xf8": "o", "\xdf": "ss",
    "\xd0": "D", "\xf0": "d", "\xde": "Th", "\xfe": "th",
    "\u0110": "D", "\u0111": "d", "\u0141": "L", "\u0142": "l", "\u0152": "Oe", "\u0153": "oe",
}


def deburr(text: str) -> str:
    """Strip accents from Latin-1 and Latin Extended-A letters (``Crème`` -> ``Creme``).

    Other scripts, Cyrillic included, are left alone.
    """
    out = []
    for char in text:
        if "\xc0" <= char <= "\u017f":
            if char in _LIGATURES:
                char = _LIGATURES[char]
            else:
                char = "".join(c for c in unicodedata.normalize("NFD", char) if not unicodedata.combining(c))
        out.append(char)
    return "".join(out)


def camel_case(text: str) -> str:
    parts = words(deburr(text))
    if not parts:
        return ""
    head, *tail = parts
    return head.lower() + "".join(part.capitalize() for part in tail)


def snake_case(text: str) -> str:
    return "_".join(part.lower() for part in words(deburr(text)))


def _convert_keys(obj: Any, convert: Callable[[str], str]) -> Any:
    if not isinstance(obj, MutableMapping):
        return obj

    renames: dict[str, str] = {}
    for key, value in obj.items():
        if isinstance(value, (list, tuple)):
            for item in value:
                _convert_keys(item, convert)
        elif isinstance(value, MutableMapping):
            _convert_keys(value, convert)
        if isinstance(key, str):
            renames[key] = convert(key)

    return rename_fields(obj, renames)


def camelize_keys(obj: Any) -> Any:
    """Recursively rename every key of *obj* to camelCase, in place."""
    return _convert_keys(obj, camel_case)


def snake_case_keys(obj: Any) -> Any:
    """Recursively rename every key of *obj* to snake_case, in place."""
    return _convert_keys(obj, snake_case)
