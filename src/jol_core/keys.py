"""Canonical keys: deterministic JSON text for arbitrary nested values.

Two values that are structurally equal produce the same key regardless of
record field order::

    to_key({"one": 10, "two": 20}) == to_key({"two": 20, "one": 10})
    # both are '{"one":10,"two":20}'

Values are first reduced through their ``to_plain()`` hook until the result
stops changing, then normalized recursively:

- callables become ``null``
- sequences keep their order, records are sorted by field name
- non-finite floats become ``null``; integral floats below 2**53 encode like integers
- anything still not plain is rejected with TypeMismatchError
"""

from __future__ import annotations

import json
import math
from typing import Any, Callable

from .model import Normalizable, PlainValue, Undefined
from .predicates import is_key, is_nil, is_plain, is_record, is_sequence, is_str, req


def to_key(value: Any = Undefined) -> str:
    """Return the canonical key of *value*; ``Undefined`` encodes as ``""``."""
    return _to_json(stabilize(value))


def from_key(text: Any) -> Any:
    """Decode a canonical key back into a plain value.

    The empty key (and a missing one) decodes to ``Undefined``.
    """
    if is_nil(text) or text == "":
        return Undefined
    req(text, is_str)
    return json.loads(text)


def stabilize(value: Any) -> PlainValue:
    """Return the normalized plain structure that ``to_key`` encodes."""
    value = settle(value, _maybe_to_plain)
    if callable(value):
        return None
    if isinstance(value, float):
        return _stabilize_float(value)
    if is_sequence(value):
        return [_stabilize_item(item) for item in value]
    if is_record(value):
        return _stabilize_record(value)
    req(value, is_plain)
    return value


def settle(value: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply *fn* repeatedly until it returns its argument unchanged."""
    while True:
        reduced = fn(value)
        if reduced is value:
            return value
        value = reduced


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _maybe_to_plain(value: Any) -> Any:
    if isinstance(value, type) or not isinstance(value, Normalizable):
        return value
    hook = value.to_plain
    if not callable(hook):
        return value
    return hook()


# integral floats from 2**53 up keep their float form
_EXACT_INT_LIMIT = 2.0**53


def _stabilize_float(value: float) -> float | int | None:
    # JSON has no representation for nan/inf
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < _EXACT_INT_LIMIT:
        return int(value)
    return value


def _stabilize_item(value: Any) -> Any:
    out = stabilize(value)
    return None if out is Undefined else out


def _stabilize_record(value: dict) -> dict:
    for key in value:
        req(key, is_key)
    out = {}
    for key in sorted(value):
        item = stabilize(value[key])
        if item is not Undefined:
            out[key] = item
    return out


def _to_json(value: Any) -> str:
    if value is Undefined:
        return ""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
