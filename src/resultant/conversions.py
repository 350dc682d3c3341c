"""Bridges between ``Option`` and ``Outcome``.

Repositories typically hand back ``Option[Entity]``; handlers downstream
want an ``Outcome[Entity]`` with a reportable error. These two functions
are the only sanctioned crossing points.
"""

from __future__ import annotations

import typing

from .error import Error
from .option import Option
from .outcome import Failure, Outcome, Success

NULL_VALUE_CODE = "Error.NullValue"


def to_outcome[T](option: Option[T], error_message: str) -> Outcome[T]:
    """Return ``Success(value)``, or a failure coded ``"Error.NullValue"``.

    The failure carries ``error_message`` as its message and the
    ``failure`` category.
    """
    if option.has_value:
        return Success(option.value_or_raise())
    return Failure(Error.failure(NULL_VALUE_CODE, error_message))


def to_option[T](outcome: Outcome[T]) -> Option[T]:
    """Return ``Some(value)`` for a success carrying a value, else ``Nothing``.

    Failures (validation outcomes included) and untyped successes, whose
    value is ``None``, both map to ``Nothing``.
    """
    if outcome.failed:
        return Option.none()
    return Option.of(typing.cast("T | None", outcome.value))
