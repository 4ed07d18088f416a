"""Keypress module – turns a keypress event into the character it types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from collext.keys import snake_case_keys

# Codes below this are control keys (Enter, Tab, Backspace, …).
_FIRST_PRINTABLE = 32


@dataclass
class KeypressEvent:
    """The code fields of a ``keypress`` event."""

    which: int | None = None
    key_code: int = 0
    char_code: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> KeypressEvent:
        """Build an event from a dict with either ``keyCode`` or ``key_code`` style keys."""
        fields = snake_case_keys(dict(data))
        return cls(
            which=fields.get("which"),
            key_code=fields.get("key_code") or 0,
            char_code=fields.get("char_code") or 0,
        )


def get_char_from_keypress(event: KeypressEvent) -> str | None:
    """Return the typed character, or None if the key does not type anything."""
    if event.which is None:
        # Legacy events only fill in key_code.
        if event.key_code < _FIRST_PRINTABLE:
            return None
        return chr(event.key_code)

    if event.which != 0 and event.char_code != 0:
        if event.which < _FIRST_PRINTABLE:
            return None
        return chr(event.which)

    return None
