"""Internal validation helpers used across the value types.

Centralizes constructor checks so every type reports argument problems
with the same exception shape and message layout.
"""

from __future__ import annotations

import typing

from resultant.errors import InvalidArgumentError, ResultantError

if typing.TYPE_CHECKING:
    from collections.abc import Callable


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[ResultantError] = InvalidArgumentError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _require_callable(func: Callable[..., typing.Any] | None, field_name: str) -> None:
    """Reject ``None`` and other non-callables passed where a function is expected."""
    _require(
        condition=callable(func),
        message="must be callable",
        field_name=field_name,
    )
