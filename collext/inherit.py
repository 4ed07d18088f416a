"""Class helpers – explicit subclass composition and future detection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Attributes every class body gets for free; copying them would break the new class.
_SKIP_ATTRS = {"__dict__", "__weakref__"}


def inherit(child: type, parent: type, overrides: Mapping[str, Any] | None = None) -> type:
    """Return a copy of *child* that derives from *parent*.

    The new class keeps *child*'s name and own attributes, gets *parent* as
    its base and then has *overrides* applied on top.  Nothing is
    instantiated, so *parent*'s ``__init__`` only runs when the child calls it.
    Methods of *child* should call the parent explicitly rather than through
    zero-argument ``super()``, which stays bound to the original class.
    """
    slots = vars(child).get("__slots__", ())
    skip = _SKIP_ATTRS | ({slots} if isinstance(slots, str) else set(slots))
    namespace = {key: value for key, value in vars(child).items() if key not in skip}
    namespace.update(overrides or {})
    return type(child.__name__, (parent,), namespace)


def is_future(obj: object) -> bool:
    """Return True if *obj* looks like a future (``asyncio`` or ``concurrent.futures``)."""
    return all(
        callable(getattr(obj, name, None))
        for name in ("add_done_callback", "result", "cancel")
    )
