"""Que — deferred callback queue with pause/flush semantics."""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from .predicates import req

logger = logging.getLogger(__name__)

Callback = Callable[[], object]


class Que:
    """Ordered set of zero-argument callbacks.

    While paused (the initial state) ``add`` stores callbacks, de-duplicated
    by identity. ``flush`` switches to flushing mode and runs the stored
    callbacks in insertion order, removing each one before calling it; from
    then on ``add`` runs callbacks immediately until ``pause`` is called.
    """

    def __init__(self) -> None:
        self._pending: dict[Callback, None] = {}
        self.flushing = False

    def add(self, fn: Callback) -> Que:
        req(fn, callable)
        if self.flushing:
            fn()
        else:
            self._pending[fn] = None
        return self

    def delete(self, fn: Callback) -> bool:
        if fn in self._pending:
            del self._pending[fn]
            return True
        return False

    def pause(self) -> Que:
        self.flushing = False
        return self

    def flush(self) -> Que:
        self.flushing = True
        if self._pending:
            logger.debug("Flushing %d deferred callback(s)", len(self._pending))
        # Callbacks stored during the drain (after a pause) wait for the next flush.
        for fn in list(self._pending):
            if fn not in self._pending:
                continue
            del self._pending[fn]
            fn()
        return self

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[Callback]:
        return iter(list(self._pending))

    def __contains__(self, fn: object) -> bool:
        try:
            return fn in self._pending
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"Que(pending={len(self._pending)}, flushing={self.flushing})"
