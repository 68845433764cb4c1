"""EqDict — dictionary keyed by the structure of its keys.

Logical keys are turned into canonical keys with ``to_key``; entries are
stored under that string, so keys that are equal in structure (records
with the same fields in any order, equal lists, equal scalars) find the
same entry. Iteration decodes the canonical keys back into plain values.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from .errors import KeyConflictError
from .fields import assign, declares_member
from .keys import from_key, to_key
from .predicates import is_key, is_some, req

logger = logging.getLogger(__name__)


class EqDict:
    """Structural-key dictionary.

    Usage::

        d = EqDict()
        d.set({"one": 10, "two": 20}, "val")
        d.get({"two": 20, "one": 10})   # → "val"
        d.to_plain()                    # → {'{"one":10,"two":20}': 'val'}

    A canonical key that names a member of the class (``"null"`` when a
    subclass defines ``null()``) cannot be set: ``set`` raises
    KeyConflictError and ``delete`` reports ``False``.
    """

    def __init__(self, val: Any = None) -> None:
        self._entries: dict[str, Any] = {}
        if is_some(val):
            assign(self, val)

    def field_map(self) -> dict[str, Any]:
        return self._entries

    # -- Logical keys ---------------------------------------------------

    def has(self, key: Any) -> bool:
        return self.has_raw(to_key(key))

    def get(self, key: Any, default: Any = None) -> Any:
        return self.get_raw(to_key(key), default)

    def set(self, key: Any, value: Any) -> EqDict:
        return self.set_raw(to_key(key), value)

    def delete(self, key: Any) -> bool:
        return self.delete_raw(to_key(key))

    # -- Canonical keys -------------------------------------------------

    def has_raw(self, key: str) -> bool:
        req(key, is_key)
        return key in self._entries

    def get_raw(self, key: str, default: Any = None) -> Any:
        return self._entries[key] if self.has_raw(key) else default

    def set_raw(self, key: str, value: Any) -> EqDict:
        if not self.has_raw(key) and declares_member(self, key):
            raise KeyConflictError(key, getattr(self, key))
        self._entries[key] = value
        return self

    def delete_raw(self, key: str) -> bool:
        if not self.has_raw(key):
            if declares_member(self, key):
                logger.debug("Refusing to delete member %r of %s", key, type(self).__name__)
            return False
        del self._entries[key]
        return True

    # -- Iteration ------------------------------------------------------

    def for_each(self, fn: Callable[[Any, Any, EqDict], Any]) -> None:
        """Call ``fn(value, key, self)`` for every entry."""
        req(fn, callable)
        for key, value in list(self._entries.items()):
            fn(value, from_key(key), self)

    def keys(self) -> Iterator[Any]:
        for key in list(self._entries):
            yield from_key(key)

    def values(self) -> Iterator[Any]:
        for key in list(self._entries):
            yield self.get_raw(key)

    def entries(self) -> Iterator[tuple[Any, Any]]:
        for key in list(self._entries):
            yield from_key(key), self.get_raw(key)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    # -- Conversion -----------------------------------------------------

    def to_plain(self) -> dict[str, Any]:
        return dict(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"
