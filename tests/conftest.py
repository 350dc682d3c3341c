"""Pytest configuration and fixtures.

Provides environment isolation and config reset so tracing settings from
one test never leak into another. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from resultant import config as config_module
from resultant.error import Error

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultant_env(monkeypatch):
    """Clear RESULTANT_* env vars and the cached process config per test."""
    for key in list(os.environ.keys()):
        if key.startswith(config_module.ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def not_found() -> Error:
    """A representative business error."""
    return Error.not_found("Order.NotFound", "The order does not exist.")


@pytest.fixture
def trace_caplog(caplog):
    """Capture DEBUG records from the tracing logger."""
    caplog.set_level(logging.DEBUG, logger="resultant.trace")
    return caplog
