"""Shared value model: the Undefined sentinel and plain-value aliases."""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable


# ---------------------------------------------------------------------------
# Undefined — singleton for "no value at all"
# ---------------------------------------------------------------------------

class _UndefinedType:
    """Sentinel distinct from ``None``: marks an absent argument or key."""

    _instance: _UndefinedType | None = None

    def __new__(cls) -> _UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Undefined"


Undefined = _UndefinedType()


# ---------------------------------------------------------------------------
# Plain values
# ---------------------------------------------------------------------------

Primitive = Union[str, int, float, bool, bytes, None, _UndefinedType]
PlainValue = Union[
    Primitive,
    list["PlainValue"],
    tuple["PlainValue", ...],
    dict[str, "PlainValue"],
]
Record = dict[str, Any]


# ---------------------------------------------------------------------------
# Capability protocols
# ---------------------------------------------------------------------------

@runtime_checkable
class Normalizable(Protocol):
    """Values that can reduce themselves to a plain form."""

    def to_plain(self) -> Any: ...


@runtime_checkable
class FieldMap(Protocol):
    """Objects that keep their own fields in an explicit ordered mapping."""

    def field_map(self) -> dict[str, Any]: ...
