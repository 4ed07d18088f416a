"""Truncate module – shortens strings, optionally on word boundaries."""

from __future__ import annotations

import re

# Whitespace and separator code points that may start a new word.
SPLIT_CHARS = (
    "\u0009\u000A\u000B\u000C\u000D\u0020\u00A0\u1680\u180E\u2000\u2001\u2002\u2003"
    "\u2004\u2005\u2006\u2007\u2008\u2009\u200A\u202F\u205F\u2028\u2029\u3000\uFEFF"
)

ELLIPSIS = "…"

_SPLIT_RE = re.compile("(?=[" + SPLIT_CHARS + "])")


def split_words(text: str) -> list[str]:
    """Split *text* before every separator, keeping the separator on the next fragment."""
    return [fragment for fragment in _SPLIT_RE.split(text) if fragment]


def truncate(text: object, limit: int, by_word: bool = False) -> str:
    """Cut *text* down to *limit* characters and append ``…`` if anything was dropped.

    ``None`` becomes an empty string; anything else goes through ``str()``.
    Strings that fit in ``limit + len(ELLIPSIS)`` are returned untouched, so
    a single trailing character is never swapped for an ellipsis.

    With *by_word* the cut only falls on a separator from :data:`SPLIT_CHARS`.
    """
    if text is None:
        return ""
    text = str(text)

    bound = limit + len(ELLIPSIS)
    if len(text) <= bound:
        return text

    if not by_word:
        return text[:limit] + ELLIPSIS

    result = ""
    for fragment in split_words(text):
        if len(result) + len(fragment) >= bound:
            break
        result += fragment
    return result + ELLIPSIS
