"""Shared fixtures for jol_core tests."""

import pytest

from jol_core.config import Config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default policies."""
    set_config(Config())
    yield
    set_config(None)
