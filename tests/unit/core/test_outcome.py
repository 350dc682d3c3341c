"""Unit tests for the Outcome tagged union.

Covers construction invariants, the map/bind/match algebra and the
short-circuit behavior of failures.
"""

from __future__ import annotations

import dataclasses

import pytest

from resultant import (
    Error,
    Failure,
    InvalidStateError,
    InvariantViolationError,
    Outcome,
    Success,
)

pytestmark = pytest.mark.unit


class TestConstruction:
    def test_success_without_value(self):
        outcome = Outcome.success()

        assert outcome.succeeded is True
        assert outcome.failed is False
        assert outcome.error is Error.NONE
        assert outcome.value is None

    def test_success_with_value(self):
        outcome = Outcome.success(42)

        assert isinstance(outcome, Success)
        assert outcome.value == 42

    def test_failure_carries_error(self, not_found):
        outcome = Outcome.failure(not_found)

        assert isinstance(outcome, Failure)
        assert outcome.succeeded is False
        assert outcome.failed is True
        assert outcome.error is not_found

    def test_failure_with_none_error_violates_invariant(self):
        with pytest.raises(InvariantViolationError):
            Outcome.failure(Error.NONE)

    def test_failure_with_non_error_violates_invariant(self):
        with pytest.raises(InvariantViolationError):
            Failure("not an error")  # type: ignore[arg-type]

    def test_value_of_failure_raises_invalid_state(self, not_found):
        with pytest.raises(InvalidStateError):
            _ = Outcome.failure(not_found).value

    def test_outcomes_are_immutable(self):
        outcome = Outcome.success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.value = 2  # type: ignore[misc]

    def test_from_error_is_failure(self, not_found):
        assert Outcome.from_error(not_found) == Outcome.failure(not_found)


class TestConditionalConstructors:
    def test_create_true_is_success(self):
        assert Outcome.create(True).succeeded

    def test_create_false_is_condition_not_met(self):
        outcome = Outcome.create(False)

        assert outcome.failed
        assert outcome.error is Error.CONDITION_NOT_MET

    def test_create_value_is_success(self):
        outcome = Outcome.create("abc")

        assert outcome.succeeded
        assert outcome.value == "abc"

    def test_create_none_is_null_value(self):
        outcome = Outcome.create(None)

        assert outcome.failed
        assert outcome.error is Error.NULL_VALUE

    @pytest.mark.parametrize("falsy", [0, "", [], False])
    def test_of_keeps_falsy_values(self, falsy):
        outcome = Outcome.of(falsy)

        assert outcome.succeeded
        assert outcome.value == falsy

    def test_of_none_is_null_value(self):
        assert Outcome.of(None).error is Error.NULL_VALUE


class TestHooks:
    def test_on_success_runs_only_on_success(self, not_found):
        seen: list[int] = []

        ok = Outcome.success(5)
        assert ok.on_success(seen.append) is ok
        Outcome.failure(not_found).on_success(seen.append)

        assert seen == [5]

    def test_on_failure_runs_only_on_failure(self, not_found):
        seen: list[Error] = []

        failed = Outcome.failure(not_found)
        assert failed.on_failure(seen.append) is failed
        Outcome.success(1).on_failure(seen.append)

        assert seen == [not_found]

    def test_hooks_chain_fluently(self):
        calls: list[str] = []

        outcome = (
            Outcome.success("x")
            .on_success(lambda v: calls.append(f"ok:{v}"))
            .on_failure(lambda e: calls.append("failed"))
        )

        assert calls == ["ok:x"]
        assert outcome == Outcome.success("x")

    def test_untyped_success_passes_none_to_on_success(self):
        seen: list[object] = []

        Outcome.success().on_success(seen.append)

        assert seen == [None]


class TestCombinators:
    def test_map_transforms_success(self):
        assert Outcome.success(2).map(lambda v: v * 10) == Outcome.success(20)

    def test_map_on_failure_keeps_same_error_and_skips_mapper(self, not_found):
        def boom(_):
            raise AssertionError("mapper must not run")

        mapped = Outcome.failure(not_found).map(boom)

        assert mapped.failed
        assert mapped.error is not_found

    def test_bind_delegates_to_binder(self, not_found):
        assert Outcome.success(3).bind(lambda v: Outcome.success(v + 1)) == Outcome.success(4)
        assert Outcome.success(3).bind(lambda _: Outcome.failure(not_found)).error is not_found

    def test_bind_on_failure_short_circuits(self, not_found):
        calls: list[int] = []

        result = Outcome.failure(not_found).bind(lambda v: calls.append(v) or Outcome.success(v))

        assert calls == []
        assert result.error is not_found

    def test_first_failure_wins_for_rest_of_chain(self, not_found):
        other = Error.conflict("Order.Locked", "locked")

        result = (
            Outcome.success(1)
            .bind(lambda _: Outcome.failure(not_found))
            .bind(lambda _: Outcome.failure(other))
            .map(lambda v: v + 1)
        )

        assert result.error is not_found

    def test_match_selects_branch(self, not_found):
        assert Outcome.success(2).match(lambda v: v * 2, lambda e: e.code) == 4
        assert Outcome.failure(not_found).match(lambda v: v, lambda e: e.code) == "Order.NotFound"

    def test_value_or(self, not_found):
        assert Outcome.success(1).value_or(9) == 1
        assert Outcome.failure(not_found).value_or(9) == 9

    def test_structural_pattern_matching(self, not_found):
        def describe(outcome):
            match outcome:
                case Success(value):
                    return f"ok {value}"
                case Failure(error):
                    return f"failed {error.code}"

        assert describe(Outcome.success(7)) == "ok 7"
        assert describe(Outcome.failure(not_found)) == "failed Order.NotFound"


class TestRendering:
    def test_str(self, not_found):
        assert str(Outcome.success()) == "Success"
        assert str(Outcome.success(3)) == "Success: 3"
        assert str(Outcome.failure(not_found)) == (
            "Failure: Order.NotFound: The order does not exist."
        )
