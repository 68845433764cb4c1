"""Instance coercion: turn raw values into instances of a declared class."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .predicates import is_exact_instance, is_instance, is_nil, req

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_class(value: Any) -> bool:
    return isinstance(value, type)


def to_inst(value: Any, cls: type[T]) -> T:
    """Return *value* if its class is exactly *cls*, else ``cls(value)``.

    Instances of a superclass or subclass are rebuilt, so the result always
    has ``type(result) is cls``. Shape validation is left to the constructor.
    """
    req(cls, _is_class)
    if is_exact_instance(value, cls):
        return value
    logger.debug("Constructing %s from %s", cls.__name__, type(value).__name__)
    return cls(value)


def to_inst_compat(value: Any, cls: type[T]) -> T:
    """Like ``to_inst`` but instances of any subclass of *cls* pass through."""
    req(cls, _is_class)
    if is_instance(value, cls):
        return value
    logger.debug("Constructing %s from %s", cls.__name__, type(value).__name__)
    return cls(value)


def to_inst_opt(value: Any, cls: type[T]) -> T | Any:
    """``to_inst`` that lets ``None`` and ``Undefined`` through untouched."""
    if is_nil(value):
        return value
    return to_inst(value, cls)
