"""Outcome monad for explicit, value-based error handling.

An ``Outcome`` is either a ``Success`` carrying a value or a ``Failure``
carrying an ``Error``. Failures are returned, not raised, which keeps
business errors a predictable part of the data flow and leaves exceptions
for genuine contract violations.

The arms are frozen dataclasses, so structural pattern matching works::

    match outcome:
        case Success(value):
            ...
        case Failure(error):
            ...

The untyped outcome (an operation with nothing to return) is simply
``Outcome[None]``, produced by ``Outcome.success()``.
"""

from __future__ import annotations

import dataclasses
import typing

from ._tracing import trace_failure
from ._validation import _require, _require_callable
from .error import Error
from .errors import InvalidStateError, InvariantViolationError

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from .option import Option


class Outcome[T]:
    """Base of the ``Success`` / ``Failure`` tagged union.

    Construct instances through the static factories; every arm funnels
    through ``_check_consistency`` so an outcome can never pair success
    with an error or failure with ``Error.NONE``.
    """

    __slots__ = ()

    # Payload provided by the arms: a field on one side, a property on the other.
    error: Error
    value: T

    @property
    def succeeded(self) -> bool:
        raise NotImplementedError

    @property
    def failed(self) -> bool:
        return not self.succeeded

    # --- Factories ---

    @staticmethod
    def success[V](value: V = None) -> Success[V]:  # type: ignore[assignment]
        """Create a successful outcome, optionally carrying ``value``."""
        return Success(value)

    @staticmethod
    def failure[V](error: Error) -> Failure[V]:
        """Create a failed outcome carrying ``error``."""
        return Failure(error)

    @staticmethod
    def from_error[V](error: Error) -> Failure[V]:
        """Explicit ``Error`` to failed-outcome coercion."""
        return Failure(error)

    @staticmethod
    def of[V](value: V | None) -> Outcome[V]:
        """Explicit value to outcome coercion.

        ``None`` becomes a failure with ``Error.NULL_VALUE``; anything else
        (including falsy values such as ``0`` or ``""``) is a success.
        """
        if value is None:
            return Failure(Error.NULL_VALUE)
        return Success(value)

    @staticmethod
    def create(condition_or_value: typing.Any) -> Outcome[typing.Any]:
        """Map a boolean or a nullable value onto success or failure.

        - ``bool``: success when true, else failure with ``Error.CONDITION_NOT_MET``.
        - anything else: same rule as ``Outcome.of`` (``None`` fails with
          ``Error.NULL_VALUE``).

        Use ``Outcome.of`` to wrap a boolean *value* instead of testing it.
        """
        if isinstance(condition_or_value, bool):
            return Success(None) if condition_or_value else Failure(Error.CONDITION_NOT_MET)
        return Outcome.of(condition_or_value)

    # --- Hooks ---

    def on_success(self, action: Callable[[T], typing.Any]) -> typing.Self:
        """Run ``action(value)`` when successful; return the receiver unchanged.

        ``action`` always takes one argument, including on an untyped
        ``Outcome[None]`` where it receives ``None``; wrap a zero-argument
        callable as ``lambda _: action()``.
        """
        _require_callable(action, "action")
        if self.succeeded:
            action(self.value)
        return self

    def on_failure(self, action: Callable[[Error], typing.Any]) -> typing.Self:
        """Run ``action(error)`` when failed; return the receiver unchanged."""
        _require_callable(action, "action")
        if self.failed:
            action(self.error)
        return self

    # --- Combinators ---

    def map[U](self, mapper: Callable[[T], U]) -> Outcome[U]:
        """Transform the value of a success; pass failures through untouched.

        ``mapper`` is never invoked on a failure, and the failure keeps the
        very same error instance.
        """
        _require_callable(mapper, "mapper")
        if self.succeeded:
            return Success(mapper(self.value))
        return typing.cast("Outcome[U]", self)

    def bind[U](self, binder: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Chain an outcome-returning step; failures short-circuit like ``map``."""
        _require_callable(binder, "binder")
        if self.succeeded:
            return binder(self.value)
        return typing.cast("Outcome[U]", self)

    def match[R](
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[Error], R],
    ) -> R:
        """Exhaustive case analysis returning whichever branch's result."""
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        if self.succeeded:
            return on_success(self.value)
        return on_failure(self.error)

    def value_or(self, default: T) -> T:
        """Return the value of a success, or ``default`` for a failure."""
        return self.value if self.succeeded else default

    def to_option(self) -> Option[T]:
        """Convert to ``Some(value)`` on success, ``Nothing`` otherwise."""
        from .conversions import to_option

        return to_option(self)


def _check_consistency(outcome: Outcome[typing.Any]) -> None:
    """Enforce ``succeeded`` iff ``error == Error.NONE``."""
    _require(
        condition=isinstance(outcome.error, Error),
        message=f"must be an Error, got {type(outcome.error).__name__}",
        exc=InvariantViolationError,
        field_name="error",
    )
    _require(
        condition=outcome.succeeded == (outcome.error == Error.NONE),
        message=(
            "a success cannot carry an error"
            if outcome.succeeded
            else "a failure must carry an error other than Error.NONE"
        ),
        exc=InvariantViolationError,
        field_name="outcome",
    )


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T](Outcome[T]):
    """A successful outcome carrying ``value``."""

    value: T  # type: ignore[misc]

    def __post_init__(self) -> None:
        _check_consistency(self)

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def error(self) -> Error:
        return Error.NONE

    def __str__(self) -> str:
        return "Success" if self.value is None else f"Success: {self.value}"


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T](Outcome[T]):
    """A failed outcome carrying a single ``error``."""

    error: Error  # type: ignore[misc]

    def __post_init__(self) -> None:
        _check_consistency(self)
        trace_failure(self.error)

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def value(self) -> T:
        raise InvalidStateError(
            "The value of a failed outcome cannot be accessed",
            hint="Check `succeeded` or use match()/value_or() first.",
        )

    def __str__(self) -> str:
        return f"Failure: {self.error}"
