"""Exception hierarchy for jol_core."""

from __future__ import annotations

import json
from typing import Any


class JolError(Exception):
    """Base exception for jol_core."""

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ArgumentCountError(JolError, TypeError):
    """A constructor received more arguments than it accepts."""

    code: str = "ARGUMENT_COUNT_ERROR"

    def __init__(self, count: int, minimum: int, maximum: int) -> None:
        super().__init__(
            f"expected between {minimum} and {maximum} args, got {count}",
            count=count,
            minimum=minimum,
            maximum=maximum,
        )


class TypeMismatchError(JolError, TypeError):
    """A value failed a required-shape predicate."""

    code: str = "TYPE_MISMATCH"


class KeyConflictError(JolError, LookupError):
    """A structural dictionary key collides with a declared member."""

    code: str = "KEY_CONFLICT"

    def __init__(self, key: str, existing: Any) -> None:
        self.key = key
        self.existing = existing
        super().__init__(
            f"can't set {show(key)} due to conflict with {show(existing)}",
            key=key,
            existing=show(existing),
        )


# ---- Printable form ---------------------------------------------------------

def show(value: Any) -> str:
    """Render *value* for error messages.

    Callables and classes show their name; strings, sequences and records
    show as JSON when they can be encoded; everything else uses ``repr``.
    """
    if callable(value) and getattr(value, "__name__", None):
        return value.__name__
    if isinstance(value, (str, list, tuple)) or type(value) is dict:
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            return repr(value)
    return repr(value)
