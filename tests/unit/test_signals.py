import logging
import sys
from pathlib import Path

import pytest

from assertkit.assertions import python_collection, python_object
from assertkit.config import reset_settings
from assertkit.errors import AssertionFailedError, ScopeError
from assertkit.records import FailureRecord
from assertkit.scope import assertion_scope, open_scope
from assertkit.signals import signal_failure


@pytest.fixture
def breakpoints(monkeypatch):
    calls = []
    monkeypatch.setattr(sys, "breakpointhook", lambda *args, **kwargs: calls.append(args))
    return calls


def test_signal_without_scope_raises_immediately():
    with pytest.raises(AssertionFailedError) as info:
        signal_failure("assert.custom", "  something broke  ")

    record = info.value.record
    assert record.assertion_name == "assert.custom"
    assert record.message == "something broke"
    assert str(info.value) == "assert.custom failed. something broke"
    assert isinstance(info.value, AssertionError)


def test_location_points_at_test_code():
    with pytest.raises(AssertionFailedError) as info:
        python_object.is_true(False)

    location = info.value.record.location
    assert Path(location.filename).name == Path(__file__).name
    assert location.function == "test_location_points_at_test_code"
    assert str(location) == f"{location.filename}:{location.lineno} in {location.function}"


def test_signal_inside_scope_returns_and_collects():
    scope = open_scope()
    try:
        result = signal_failure("assert.custom", "deferred")

        assert result is None
        assert [failure.record.message for failure in scope.failures] == ["deferred"]
        assert scope.failures[0].__traceback__ is not None
    finally:
        with pytest.raises(AssertionFailedError):
            scope.close()


def test_signal_into_closed_scope_fails_loudly():
    scope = open_scope()
    scope.close()

    with pytest.raises(ScopeError):
        scope.add(AssertionFailedError(FailureRecord("assert.custom", "late")))


def test_deferred_failure_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="assertkit")

    with pytest.raises(AssertionFailedError):
        with assertion_scope():
            signal_failure("assert.custom", "deferred")

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Deferred failure of assert.custom") for message in messages)
    assert any("Closed assertion scope with 1 failure(s)" in message for message in messages)


def test_debugger_not_launched_by_default(breakpoints):
    with pytest.raises(AssertionFailedError):
        python_object.is_true(False)

    assert breakpoints == []


def test_debugger_launched_when_enabled(monkeypatch, breakpoints):
    monkeypatch.setenv("ASSERTKIT_LAUNCH_DEBUGGER_ON_FAILURE", "true")
    reset_settings()

    with pytest.raises(AssertionFailedError):
        python_object.is_true(False)

    assert len(breakpoints) == 1


def test_debugger_launched_inside_scope_at_failure_time(monkeypatch, breakpoints):
    monkeypatch.setenv("ASSERTKIT_LAUNCH_DEBUGGER_ON_FAILURE", "1")
    reset_settings()

    with pytest.raises(AssertionFailedError):
        with assertion_scope():
            python_object.is_true(False)
            assert len(breakpoints) == 1


def test_debugger_filter_matches_assertion_name(monkeypatch, breakpoints):
    monkeypatch.setenv("ASSERTKIT_LAUNCH_DEBUGGER_ON_FAILURE", "true")
    monkeypatch.setenv("ASSERTKIT_LAUNCH_DEBUGGER_FILTER", "collection.")
    reset_settings()

    with pytest.raises(AssertionFailedError):
        python_object.is_true(False)
    assert breakpoints == []

    with pytest.raises(AssertionFailedError):
        python_collection.has_count(1, [])
    assert len(breakpoints) == 1


def test_debugger_filter_matches_caller_name(monkeypatch, breakpoints):
    monkeypatch.setenv("ASSERTKIT_LAUNCH_DEBUGGER_ON_FAILURE", "true")
    monkeypatch.setenv("ASSERTKIT_LAUNCH_DEBUGGER_FILTER", "caller_name")
    reset_settings()

    with pytest.raises(AssertionFailedError):
        python_object.is_true(False)

    assert len(breakpoints) == 1
