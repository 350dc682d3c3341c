"""Validation outcomes and rule-based validation.

``ValidationOutcome`` is a ``Failure`` that carries *every* violated rule
instead of a single error. Its ``error`` is always the shared
``Error.VALIDATION_ERROR`` sentinel, so code that only knows about
``Outcome`` still sees an ordinary failure; code that cares can check
``isinstance(outcome, ValidationOutcome)`` and read ``errors``.

``Validator.validate`` evaluates all rules before reporting, unlike a
``bind`` chain which stops at the first failure.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import NamedTuple

from ._tracing import trace_validation
from ._validation import _require, _require_callable
from .error import Error
from .outcome import Failure, Outcome, Success

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

VALIDATION_ERROR_CODE = "Error.ValidationError"


@dataclasses.dataclass(frozen=True, slots=True)
class ValidationOutcome[T](Failure[T]):
    """A failed outcome carrying a non-empty, ordered tuple of errors."""

    error: Error = dataclasses.field(default=Error.VALIDATION_ERROR, init=False)
    errors: tuple[Error, ...] = ()

    def __post_init__(self) -> None:
        _require(
            condition=self.errors is not None,
            message="cannot be None",
            field_name="errors",
        )
        errors = tuple(self.errors)
        _require(
            condition=len(errors) > 0,
            message="cannot be empty",
            field_name="errors",
        )
        _require(
            condition=all(isinstance(e, Error) for e in errors),
            message="must contain only Error instances",
            field_name="errors",
        )
        object.__setattr__(self, "errors", errors)
        Failure.__post_init__(self)
        trace_validation(errors)

    @classmethod
    def with_errors(cls, errors: Iterable[Error] | None) -> ValidationOutcome[T]:
        """Create a validation outcome; ``None`` or empty input is rejected."""
        _require(
            condition=errors is not None,
            message="cannot be None",
            field_name="errors",
        )
        return cls(errors=tuple(typing.cast("Iterable[Error]", errors)))

    @classmethod
    def from_outcomes(
        cls, outcomes: Iterable[Outcome[typing.Any]] | None
    ) -> ValidationOutcome[T]:
        """Aggregate the ``error`` of every failed outcome, in input order.

        Raises:
            InvalidArgumentError: If ``outcomes`` is None or none of them failed.
        """
        _require(
            condition=outcomes is not None,
            message="cannot be None",
            field_name="outcomes",
        )
        source = typing.cast("Iterable[Outcome[typing.Any]]", outcomes)
        errors = tuple(o.error for o in source if o.failed)
        _require(
            condition=len(errors) > 0,
            message="no failed outcome to aggregate",
            field_name="outcomes",
        )
        return cls(errors=errors)

    def match_errors[R](
        self,
        on_success: Callable[[T], R],
        on_errors: Callable[[tuple[Error, ...]], R],
    ) -> R:
        """Case analysis whose failure branch receives the full error tuple.

        The inherited ``match`` still hands ``on_failure`` the single
        ``Error.VALIDATION_ERROR``, so code typed against ``Outcome`` keeps working.
        """
        _require_callable(on_success, "on_success")
        _require_callable(on_errors, "on_errors")
        return on_errors(self.errors)

    def __str__(self) -> str:
        return f"Failure: {self.error} [{'; '.join(str(e) for e in self.errors)}]"


class Rule(NamedTuple):
    """A predicate paired with the message reported when it fails."""

    predicate: Callable[[typing.Any], bool]
    message: str


class Validator:
    """Stateless validation of a value against one or many rules."""

    @staticmethod
    def validate[T](
        value: T,
        rules: Callable[[T], bool] | Iterable[tuple[Callable[[T], bool], str]],
        error_message: str | None = None,
    ) -> Outcome[T]:
        """Validate ``value`` against a single rule or a sequence of rules.

        Single rule: ``validate(value, rule, "message")`` returns
        ``Success(value)`` or a plain ``Failure`` with one validation error.

        Many rules: ``validate(value, [(rule, "message"), ...])`` evaluates
        every rule in order. One violation yields a plain ``Failure``; two
        or more yield a ``ValidationOutcome`` listing all of them.
        """
        _require(condition=rules is not None, message="cannot be None", field_name="rules")
        if callable(rules):
            return Validator.validate_rule(value, rules, typing.cast("str", error_message))
        return Validator.validate_rules(value, rules)

    @staticmethod
    def validate_rule[T](
        value: T, rule: Callable[[T], bool], error_message: str
    ) -> Outcome[T]:
        """Single-rule form of ``validate``."""
        _require_callable(rule, "rule")
        _require(
            condition=error_message is not None,
            message="cannot be None",
            field_name="error_message",
        )
        if rule(value):
            return Success(value)
        return Failure(Error.validation(VALIDATION_ERROR_CODE, error_message))

    @staticmethod
    def validate_rules[T](
        value: T, rules: Iterable[tuple[Callable[[T], bool], str]]
    ) -> Outcome[T]:
        """Multi-rule form of ``validate``; never stops at the first violation."""
        _require(condition=rules is not None, message="cannot be None", field_name="rules")
        errors: list[Error] = []
        for index, (rule, message) in enumerate(rules):
            _require_callable(rule, f"rules[{index}]")
            if not rule(value):
                errors.append(Error.validation(VALIDATION_ERROR_CODE, message))

        if not errors:
            return Success(value)
        logger.debug("Validation collected %d error(s)", len(errors))
        if len(errors) == 1:
            return Failure(errors[0])
        return ValidationOutcome.with_errors(errors)


def validate[T](
    value: T,
    rules: Callable[[T], bool] | Iterable[tuple[Callable[[T], bool], str]],
    error_message: str | None = None,
) -> Outcome[T]:
    """Module-level shortcut for ``Validator.validate``."""
    return Validator.validate(value, rules, error_message)
