"""Exception hierarchy for resultant.

Business failures travel as values (``Failure``, ``ValidationOutcome``).
The exceptions below are reserved for programming-contract violations:
impossible states, invalid arguments and misconfiguration.
"""

from __future__ import annotations


class ResultantError(Exception):
    """Base exception for all resultant errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is attached."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class InvariantViolationError(ResultantError):
    """A value was constructed in an impossible state.

    Raised when an outcome pairs success with an error, or failure with
    ``Error.NONE``. This always indicates a caller bug.
    """


class InvalidStateError(ResultantError):
    """An accessor was used in a state where it has no meaning.

    Examples: reading ``value`` from a failed outcome, or calling
    ``value_or_raise()`` on ``Nothing``.
    """


class InvalidArgumentError(ResultantError, ValueError):
    """A factory received an argument it cannot accept."""

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        hint: str | None = None,
    ) -> None:
        self.argument = argument
        msg = message if argument is None else f"{argument}: {message}"
        super().__init__(msg, hint=hint)


class ConfigurationError(ResultantError):
    """Configuration validation or resolution failed."""
