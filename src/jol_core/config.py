"""Runtime policy configuration for jol_core."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def get_env(name: str, default: str | None = None) -> str | None:
    return os.environ.get(name, default)


def get_bool_env(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment.

    Unrecognized values fall back to *default*.
    """
    raw = get_env(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


class Config(BaseModel):
    """Policies for the behavioral forks of the collection primitives."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    # Coerce every value of a batch before committing any of them.
    atomic_batches: bool = True
    # Raise instead of no-op when ``assign`` gets no source.
    strict_assign: bool = False

    @classmethod
    def from_env(cls) -> Config:
        return cls(
            atomic_batches=get_bool_env("JOL_ATOMIC_BATCHES", True),
            strict_assign=get_bool_env("JOL_STRICT_ASSIGN", False),
        )


_config: Config | None = None


def get_config() -> Config:
    """Return the process-wide config, loading it from the environment once."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Replace the process-wide config; ``None`` reloads from the environment."""
    global _config
    _config = config


@contextmanager
def override_config(**changes: Any) -> Iterator[Config]:
    """Temporarily apply *changes* on top of the current config."""
    previous = get_config()
    current = previous.model_copy(update=changes)
    set_config(current)
    try:
        yield current
    finally:
        set_config(previous)


__all__ = [
    "Config",
    "get_bool_env",
    "get_config",
    "get_env",
    "override_config",
    "set_config",
]
