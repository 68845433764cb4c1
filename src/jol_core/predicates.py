"""Classification predicates shared by every other module.

All predicates are pure and total: they accept any value and return a bool.
``req`` and ``req_arg_len`` turn a failed check into the matching error.
"""

from __future__ import annotations

from typing import Any, Callable

from .errors import ArgumentCountError, TypeMismatchError, show
from .model import Undefined

_PRIMITIVE_TYPES = (str, int, float, bool, bytes)
_PLAIN_SCALAR_TYPES = (str, int, float, bool)


# === Nullish ===

def is_nil(value: Any) -> bool:
    """True for ``None`` and ``Undefined``."""
    return value is None or value is Undefined


def is_some(value: Any) -> bool:
    return not is_nil(value)


# === Shape ===

def is_primitive(value: Any) -> bool:
    return is_nil(value) or isinstance(value, _PRIMITIVE_TYPES)


def is_composite(value: Any) -> bool:
    """True for objects and callables, False for primitives."""
    return not is_primitive(value)


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_key(value: Any) -> bool:
    return is_str(value)


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_record(value: Any) -> bool:
    """True iff *value* is exactly a ``dict``.

    Subclasses of ``dict`` and other mappings carry behavior of their own and
    are not records.
    """
    return type(value) is dict


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_struct_like(value: Any) -> bool:
    """True for non-callable objects that are not sequences.

    These are the values allowed as targets and sources of field assignment.
    """
    return is_composite(value) and not is_sequence(value) and not callable(value)


# === Class membership ===

def is_instance(value: Any, cls: type) -> bool:
    """Non-primitive *value* is an instance of *cls* or of a subclass."""
    return is_composite(value) and isinstance(value, cls)


def is_exact_instance(value: Any, cls: type) -> bool:
    """Non-primitive *value* whose runtime class is exactly *cls*."""
    return is_composite(value) and type(value) is cls


# === Plain values ===

def is_plain(value: Any = Undefined) -> bool:
    """True for values that encode to JSON without further reduction.

    Examples:
        >>> is_plain({"one": [{}]})
        True
        >>> is_plain({"one": object()})
        False
    """
    if is_sequence(value):
        return all(is_plain(item) for item in value)
    if is_record(value):
        return all(is_key(key) and is_plain(item) for key, item in value.items())
    return is_nil(value) or isinstance(value, _PLAIN_SCALAR_TYPES)


# === Requirements ===

def req(value: Any, test: Callable[[Any], bool]) -> Any:
    """Return *value* if it satisfies *test*, else raise TypeMismatchError."""
    if not test(value):
        raise TypeMismatchError(
            f"expected {show(value)} to satisfy test {show(test)}",
            value=show(value),
            test=show(test),
        )
    return value


def req_arg_len(count: int, minimum: int, maximum: int) -> None:
    if not minimum <= count <= maximum:
        raise ArgumentCountError(count, minimum, maximum)
