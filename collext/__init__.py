"""collext – small helpers for lists, dicts and strings."""

from collext.inherit import inherit, is_future
from collext.keypress import KeypressEvent, get_char_from_keypress
from collext.keys import camel_case, camelize_keys, rename_fields, snake_case, snake_case_keys
from collext.lists import add_items, add_uniq, remove_item, remove_items
from collext.truncate import ELLIPSIS, truncate
from collext.values import (
    UNDEFINED,
    CircularReferenceError,
    clear_defaults,
    has_values,
    is_defined,
    is_valuable,
    limit_to,
    omit_private_fields,
)
from collext.wait import Waiter, wait_for
from collext.words import latin_words, words

__version__ = "0.1.0"

__all__ = [
    "ELLIPSIS",
    "UNDEFINED",
    "CircularReferenceError",
    "KeypressEvent",
    "Waiter",
    "add_items",
    "add_uniq",
    "camel_case",
    "camelize_keys",
    "clear_defaults",
    "get_char_from_keypress",
    "has_values",
    "inherit",
    "is_defined",
    "is_future",
    "is_valuable",
    "latin_words",
    "limit_to",
    "omit_private_fields",
    "remove_item",
    "remove_items",
    "rename_fields",
    "snake_case",
    "snake_case_keys",
    "truncate",
    "wait_for",
    "words",
]
