"""Immutable error descriptors carried by failed outcomes.

An ``Error`` names *what* went wrong (``code``), says it for humans
(``message``) and classifies it (``category``). Callers branch on ``code``
and ``category``, so the codes of the shared sentinels are part of the
public contract and must not change.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import ClassVar

from ._validation import _is_blank, _require


class ErrorCategory(str, Enum):
    """Classification of a failure's cause."""

    NONE = "none"
    FAILURE = "failure"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not-found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    GONE = "gone"
    NO_CONTENT = "no-content"
    BAD_REQUEST = "bad-request"
    UNEXPECTED = "unexpected"


@dataclasses.dataclass(frozen=True, slots=True)
class Error:
    """A failure identified by code, message and category.

    The ``Error.NONE`` sentinel is the only instance allowed to have an empty
    code and message; it marks the absence of failure on successful outcomes.
    Every other instance must carry a non-blank code and message.
    """

    code: str
    message: str
    category: ErrorCategory = ErrorCategory.FAILURE

    NONE: ClassVar[Error]
    NULL_VALUE: ClassVar[Error]
    CONDITION_NOT_MET: ClassVar[Error]
    VALIDATION_ERROR: ClassVar[Error]
    UNAUTHORIZED_REQUEST: ClassVar[Error]

    def __post_init__(self) -> None:
        """Validate invariants for the sentinel and regular errors."""
        _require(
            condition=isinstance(self.category, ErrorCategory),
            message=f"must be an ErrorCategory, got {type(self.category).__name__}",
            field_name="category",
        )
        if self.category is ErrorCategory.NONE:
            _require(
                condition=self.code == "" and self.message == "",
                message="the 'none' category is reserved for Error.NONE",
                field_name="category",
            )
            return
        _require(
            condition=not _is_blank(self.code),
            message="cannot be empty",
            field_name="code",
        )
        _require(
            condition=not _is_blank(self.message),
            message="cannot be empty",
            field_name="message",
        )

    # --- Factories ---

    @classmethod
    def failure(cls, code: str, message: str) -> Error:
        """Create a generic failure error."""
        return cls(code, message, ErrorCategory.FAILURE)

    @classmethod
    def validation(cls, code: str, message: str) -> Error:
        """Create a validation error."""
        return cls(code, message, ErrorCategory.VALIDATION)

    @classmethod
    def conflict(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.CONFLICT)

    @classmethod
    def not_found(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.NOT_FOUND)

    @classmethod
    def unauthorized(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.UNAUTHORIZED)

    @classmethod
    def forbidden(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.FORBIDDEN)

    @classmethod
    def gone(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.GONE)

    @classmethod
    def no_content(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.NO_CONTENT)

    @classmethod
    def bad_request(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.BAD_REQUEST)

    @classmethod
    def unexpected(cls, code: str, message: str) -> Error:
        return cls(code, message, ErrorCategory.UNEXPECTED)

    # --- Derivation ---

    def with_details(self, details: str) -> Error:
        """Return a new error whose message is extended by ``" - " + details``.

        Code and category are preserved; the receiver is left untouched.
        ``Error.NONE`` carries no message to extend and is returned as is.
        """
        if self.category is ErrorCategory.NONE:
            return self
        return Error(self.code, f"{self.message} - {details}", self.category)

    def __str__(self) -> str:
        """Return ``"<code>: <message>"``, or ``"None"`` for the sentinel."""
        if self.category is ErrorCategory.NONE:
            return "None"
        return f"{self.code}: {self.message}"


Error.NONE = Error("", "", ErrorCategory.NONE)
Error.NULL_VALUE = Error.failure("Error.NullValue", "The specified result value is null.")
Error.CONDITION_NOT_MET = Error.failure(
    "Error.ConditionNotMet", "The specified condition was not met."
)
Error.VALIDATION_ERROR = Error.validation(
    "Error.ValidationError", "A validation error occurred."
)
Error.UNAUTHORIZED_REQUEST = Error.unauthorized(
    "Error.Unauthorized", "An unauthorized error occurred."
)
