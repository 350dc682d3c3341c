"""resultant: a small functional-outcome algebra.

Public API:
    - Outcome / Success / Failure: result of an operation that may fail
    - Option / Some / Nothing: presence or absence of a value
    - ValidationOutcome / Validator: evaluate-all validation
    - Error / ErrorCategory: immutable failure descriptors
    - to_outcome / to_option: conversions between Option and Outcome
    - *_async helpers: awaitable Option combinators
"""

from __future__ import annotations

import logging

from resultant.config import FrozenConfig, Settings, config_scope, resolve_config
from resultant.conversions import to_option, to_outcome
from resultant.error import Error, ErrorCategory
from resultant.errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidStateError,
    InvariantViolationError,
    ResultantError,
)
from resultant.option import Nothing, Option, Some, first_or_none, single_or_none
from resultant.option_async import (
    as_awaitable,
    bind_async,
    do_async,
    map_async,
    match_async,
    to_option_async,
)
from resultant.outcome import Failure, Outcome, Success
from resultant.validation import Rule, ValidationOutcome, Validator, validate

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultant")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultant").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Error",
    "ErrorCategory",
    "Failure",
    "FrozenConfig",
    "InvalidArgumentError",
    "InvalidStateError",
    "InvariantViolationError",
    "Nothing",
    "Option",
    "Outcome",
    "ResultantError",
    "Rule",
    "Settings",
    "Some",
    "Success",
    "ValidationOutcome",
    "Validator",
    "as_awaitable",
    "bind_async",
    "config_scope",
    "do_async",
    "first_or_none",
    "map_async",
    "match_async",
    "resolve_config",
    "single_or_none",
    "to_option",
    "to_option_async",
    "to_outcome",
    "validate",
]
