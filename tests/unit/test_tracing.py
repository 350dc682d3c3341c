from __future__ import annotations

import logging

import pytest

from resultant import Error, Outcome, ValidationOutcome, _tracing, config_scope
from resultant.config import reset_config

pytestmark = pytest.mark.unit


def test_no_records_by_default(trace_caplog, not_found):
    Outcome.failure(not_found)

    assert trace_caplog.records == []


def test_failure_trace_when_enabled(trace_caplog, not_found):
    with config_scope(trace_failures=True):
        Outcome.failure(not_found)

    messages = [r.getMessage() for r in trace_caplog.records]
    assert any("Order.NotFound" in m and "not-found" in m for m in messages)


def test_validation_trace_truncates_long_error_lists(trace_caplog):
    errors = [Error.validation("Field.Invalid", f"rule {i}") for i in range(5)]

    with config_scope(trace_validation=True, max_traced_errors=2):
        ValidationOutcome.with_errors(errors)

    (record,) = [r for r in trace_caplog.records if "Validation failed" in r.getMessage()]
    message = record.getMessage()
    assert "5 error(s)" in message
    assert "rule 0; rule 1" in message
    assert "rule 2" not in message
    assert "(+3 more)" in message


def test_tracing_does_not_alter_values(not_found):
    with config_scope(trace_failures=True, trace_validation=True):
        traced = Outcome.failure(not_found)

    assert traced == Outcome.failure(not_found)


@pytest.mark.parametrize(
    ("name", "value"),
    [("RESULTANT_MAX_TRACED_ERRORS", "0"), ("RESULTANT_TRACE_FAILURES", "maybe")],
)
def test_invalid_environment_never_breaks_failure_construction(
    trace_caplog, monkeypatch, not_found, name, value
):
    monkeypatch.setenv(name, value)
    monkeypatch.setattr(_tracing, "_WARNED_BAD_CONFIG", False)
    reset_config()

    first = Outcome.failure(not_found)
    second = ValidationOutcome.with_errors([not_found, not_found])

    assert first.error is not_found
    assert second.errors == (not_found, not_found)
    warnings = [r for r in trace_caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Failure tracing disabled" in warnings[0].getMessage()
