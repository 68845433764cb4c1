"""Enhanced collections and their class-coercing variants.

``Arr`` and ``Dict`` wrap a list and a string-keyed dict. The ``Cls*``
variants declare an element class in the ``cls`` class attribute and pass
every written value through ``to_inst``::

    class Points(ClsArr):
        cls = Point

    pts = Points([{"x": 1}])
    pts.push({"x": 2}, Point({"x": 3}))
    # every element is exactly a Point; the prebuilt one is kept as is

Batched writes are atomic while ``Config.atomic_batches`` is set (the
default): all values are coerced before any is stored.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSequence, MutableSet
from typing import Any, Callable

from .coerce import to_inst
from .config import get_config
from .predicates import is_int, is_key, is_nil, is_record, req, req_arg_len


def _commit_batch(items: Iterable[Any], coerce: Callable[[Any], Any], commit: Callable[[Any], None]) -> None:
    if get_config().atomic_batches:
        staged = [coerce(item) for item in items]
        for item in staged:
            commit(item)
    else:
        for item in items:
            commit(coerce(item))


def _is_length(value: Any) -> bool:
    return is_int(value) and value >= 0


def _is_iterable_source(value: Any) -> bool:
    return isinstance(value, Iterable) and not is_record(value) and not callable(value)


def _iter_pairs(value: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return list(value.items())
    req(value, _is_iterable_source)
    return list(value)


class _Coercing:
    """Mixin for collections whose values must be exact ``cls`` instances."""

    cls: type | None = None

    def _coerce(self, value: Any) -> Any:
        if self.cls is None:
            return value
        return to_inst(value, self.cls)


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------

class Arr(MutableSequence):
    """List wrapper taking at most one constructor argument.

    ``Arr()`` and ``Arr(None)`` are empty, ``Arr(n)`` holds *n* ``None``
    slots, and any other iterable (except records) supplies the items.
    """

    def __init__(self, *args: Any) -> None:
        req_arg_len(len(args), 0, 1)
        self._items: list[Any] = []
        val = args[0] if args else None
        if is_nil(val):
            return
        if is_int(val):
            req(val, _is_length)
            self.push(*([None] * val))
        else:
            req(val, _is_iterable_source)
            self.push(*val)

    def _coerce(self, value: Any) -> Any:
        return value

    # -- MutableSequence ------------------------------------------------

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._items[index] = [self._coerce(item) for item in value]
        else:
            self._items[index] = self._coerce(value)

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, self._coerce(value))

    def extend(self, values: Iterable[Any]) -> None:
        self._splice(len(self._items), list(values))

    # -- Batched writes -------------------------------------------------

    def push(self, *vals: Any) -> Arr:
        self._splice(len(self._items), vals)
        return self

    def unshift(self, *vals: Any) -> Arr:
        self._splice(0, vals)
        return self

    def _splice(self, index: int, vals: Iterable[Any]) -> None:
        if get_config().atomic_batches:
            self._items[index:index] = [self._coerce(item) for item in vals]
        else:
            for offset, item in enumerate(vals):
                self._items.insert(index + offset, self._coerce(item))

    # -- Conversion -----------------------------------------------------

    def to_plain(self) -> list[Any]:
        return list(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Arr):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class ClsArr(_Coercing, Arr):
    """``Arr`` whose elements are always exact ``cls`` instances."""


# ---------------------------------------------------------------------------
# Sets
# ---------------------------------------------------------------------------

class ClsSet(_Coercing, MutableSet):
    """Insertion-ordered set whose members are exact ``cls`` instances.

    Members are kept by identity, so ``cls`` need not be hashable and two
    equal but distinct instances are both kept.
    """

    def __init__(self, val: Iterable[Any] | None = None) -> None:
        self._members: dict[int, Any] = {}
        if is_nil(val):
            return
        req(val, _is_iterable_source)
        _commit_batch(list(val), self._coerce, self._store)

    def _store(self, value: Any) -> None:
        self._members[id(value)] = value

    def add(self, value: Any) -> None:
        self._store(self._coerce(value))

    def discard(self, value: Any) -> None:
        if value in self:
            del self._members[id(value)]

    def __contains__(self, value: object) -> bool:
        return self._members.get(id(value)) is value

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._members.values()))

    def __len__(self) -> int:
        return len(self._members)

    def to_plain(self) -> list[Any]:
        return list(self._members.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._members.values())!r})"


# ---------------------------------------------------------------------------
# Maps
# ---------------------------------------------------------------------------

class _Entries(MutableMapping):
    """Ordered mapping whose writes go through ``_check_key`` and ``_coerce``."""

    def __init__(self, val: Any = None) -> None:
        self._entries: dict[Any, Any] = {}
        self.patch(val)

    def _check_key(self, key: Any) -> Any:
        return key

    def _coerce(self, value: Any) -> Any:
        return value

    def _coerce_pair(self, pair: tuple[Any, Any]) -> tuple[Any, Any]:
        key, value = pair
        return self._check_key(key), self._coerce(value)

    def _store(self, pair: tuple[Any, Any]) -> None:
        key, value = pair
        self._entries[key] = value

    def set(self, key: Any, value: Any) -> _Entries:
        self._store(self._coerce_pair((key, value)))
        return self

    def patch(self, val: Any) -> _Entries:
        """Merge a mapping or an iterable of ``(key, value)`` pairs."""
        if is_nil(val):
            return self
        _commit_batch(_iter_pairs(val), self._coerce_pair, self._store)
        return self

    def update(self, other: Any = (), /, **kwargs: Any) -> None:
        self.patch(other)
        self.patch(kwargs)

    def __getitem__(self, key: Any) -> Any:
        return self._entries[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class Dict(_Entries):
    """String-keyed ordered mapping that round-trips through a record."""

    def _check_key(self, key: Any) -> str:
        return req(key, is_key)

    def to_plain(self) -> dict[str, Any]:
        return dict(self._entries)


class ClsDict(_Coercing, Dict):
    """``Dict`` whose values are always exact ``cls`` instances."""


class ClsMap(_Coercing, _Entries):
    """Mapping with arbitrary keys whose values are exact ``cls`` instances."""
