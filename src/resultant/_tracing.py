"""Opt-in diagnostic logging for failure values.

Failures are ordinary return values, so they never show up in tracebacks.
When enabled through configuration, these hooks leave a DEBUG breadcrumb
at the point a failure is created or a validation pass is aggregated.

A misconfigured environment never stops a failure from being built: the
hooks fall back to tracing disabled and warn once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resultant.config import FrozenConfig, current_config
from resultant.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from resultant.error import Error

logger = logging.getLogger("resultant.trace")

_DISABLED = FrozenConfig(trace_failures=False, trace_validation=False, max_traced_errors=10)
_WARNED_BAD_CONFIG = False


def _trace_config() -> FrozenConfig:
    global _WARNED_BAD_CONFIG
    try:
        return current_config()
    except ConfigurationError as e:
        if not _WARNED_BAD_CONFIG:
            _WARNED_BAD_CONFIG = True
            logger.warning("Failure tracing disabled: %s", e)
        return _DISABLED


def trace_failure(error: Error) -> None:
    """Log a constructed failure when ``trace_failures`` is enabled."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if not _trace_config().trace_failures:
        return
    logger.debug(
        "Failure created: code=%s category=%s message=%s",
        error.code,
        error.category.value,
        error.message,
    )


def trace_validation(errors: Sequence[Error]) -> None:
    """Log an aggregated validation result when ``trace_validation`` is enabled."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    cfg = _trace_config()
    if not cfg.trace_validation:
        return
    shown = [e.message for e in errors[: cfg.max_traced_errors]]
    hidden = len(errors) - len(shown)
    suffix = f" (+{hidden} more)" if hidden > 0 else ""
    logger.debug(
        "Validation failed with %d error(s): %s%s",
        len(errors),
        "; ".join(shown),
        suffix,
    )
