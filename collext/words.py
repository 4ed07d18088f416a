"""Words module – regex word tokenizer with Cyrillic support."""

from __future__ import annotations

import re

_LATIN_UPPER = "A-Z\\xc0-\\xd6\\xd8-\\xde"
_LATIN_LOWER = "a-z\\xdf-\\xf6\\xf8-\\xff"
_CYRILLIC_UPPER = "\\u0401\\u0410-\\u042F"
_CYRILLIC_LOWER = "\\u0451\\u0430-\\u044F"


def _build_pattern(upper_chars: str, lower_chars: str) -> re.Pattern[str]:
    upper = f"[{upper_chars}]"
    lower = f"[{lower_chars}]+"
    # Order matters: an acronym before a capitalised word ("XMLHttp") wins first.
    return re.compile(
        f"{upper}+(?={upper}{lower})|{upper}?{lower}|{upper}+|[0-9]+"
    )


LATIN_WORDS_RE = _build_pattern(_LATIN_UPPER, _LATIN_LOWER)
WORDS_RE = _build_pattern(_LATIN_UPPER + _CYRILLIC_UPPER, _LATIN_LOWER + _CYRILLIC_LOWER)


def words(text: str, pattern: str | re.Pattern[str] | None = None) -> list[str]:
    """Split *text* into words on case changes, separators and digit runs.

    Latin and Cyrillic letters are recognised by default, so
    ``words("приветМир")`` gives ``["привет", "Мир"]``.  Pass *pattern* to
    tokenize with a custom regex instead.
    """
    if pattern is None:
        regex = WORDS_RE
    elif isinstance(pattern, str):
        regex = re.compile(pattern)
    else:
        regex = pattern
    return regex.findall(str(text))


def latin_words(text: str) -> list[str]:
    """Tokenize like :func:`words` but only recognise Latin letters."""
    return words(text, LATIN_WORDS_RE)
