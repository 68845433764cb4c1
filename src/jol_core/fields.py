"""Field assignment and the ``Obj`` value-object base.

A field may be written onto a target only when the target does not declare
a member of that name, or when the target already holds it as its own
public field. Methods, properties and private attributes are never shadowed.
"""

from __future__ import annotations

from typing import Any, Iterator

from .config import get_config
from .errors import TypeMismatchError, show
from .model import FieldMap, Record, Undefined
from .predicates import (
    is_exact_instance,
    is_key,
    is_nil,
    is_record,
    is_struct_like,
    req,
)


def assign(target: Any, source: Any = Undefined) -> Any:
    """Copy the own public fields of *source* onto *target* and return it.

    *source* must be a record or an exact instance of ``type(target)``.
    A missing source is a no-op unless ``Config.strict_assign`` is set.
    """
    req(target, is_struct_like)
    if is_nil(source):
        if get_config().strict_assign:
            _mismatch(target, source)
        return target

    _req_assignable(target, source)
    for key, value in list(iter_fields(source)):
        if not declares_member(target, key) or owns_field(target, key):
            _write_field(target, key, value)
    return target


def iter_fields(value: Record | FieldMap | object) -> Iterator[tuple[str, Any]]:
    """Yield the own public fields of *value* in insertion order."""
    if is_record(value):
        for key, item in value.items():
            req(key, is_key)
            yield key, item
    elif isinstance(value, FieldMap):
        yield from value.field_map().items()
    else:
        for key, item in vars(value).items():
            if not key.startswith("_"):
                yield key, item


def owns_field(target: Any, key: str) -> bool:
    if is_record(target):
        return key in target
    if isinstance(target, FieldMap):
        return key in target.field_map()
    return not key.startswith("_") and key in getattr(target, "__dict__", {})


def declares_member(target: Any, key: str) -> bool:
    """True if *key* names any attribute of *target* outside its field map.

    Lookup is static: class attributes are inspected on the class, so no
    property getter runs. Private (``_``-prefixed) names count as members of
    every target that keeps its fields in ``__dict__``.
    """
    if is_record(target):
        return False
    if key.startswith("_") and not isinstance(target, FieldMap):
        return True
    return hasattr(type(target), key) or key in getattr(target, "__dict__", {})


def _write_field(target: Any, key: str, value: Any) -> None:
    if is_record(target):
        target[key] = value
    elif isinstance(target, FieldMap):
        target.field_map()[key] = value
    else:
        setattr(target, key, value)


def _req_assignable(target: Any, source: Any) -> None:
    if is_struct_like(source) and (is_record(source) or is_exact_instance(source, type(target))):
        return
    _mismatch(target, source)


def _mismatch(target: Any, source: Any) -> None:
    raise TypeMismatchError(
        f"can't assign {show(source)} due to type mismatch",
        value=show(source),
        test=type(target).__name__,
    )


class Obj:
    """Lightweight value object populated from a record.

    Subclasses get a one-argument constructor that coercing collections can
    call directly::

        class Point(Obj):
            pass

        Point({"x": 1, "y": 2}).x  # 1
    """

    def __init__(self, val: Any = Undefined) -> None:
        if val is not Undefined and is_nil(val):
            _mismatch(self, val)
        assign(self, val)

    def to_plain(self) -> dict[str, Any]:
        return dict(iter_fields(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_plain()!r})"
