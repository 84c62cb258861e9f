"""Explicit test outcomes."""

from typing import Any, NoReturn

from assertkit.errors import AssertionInconclusiveError
from assertkit.messages import build_user_message
from assertkit.records import FailureRecord, capture_location
from assertkit.signals import signal_failure


def fail(message: str | None = None, *parameters: Any) -> None:
    """Fail the current test.

    Inside an assertion scope the failure is collected like any other and
    execution continues.
    """
    __tracebackhide__ = True
    signal_failure("assert.fail", build_user_message(message, parameters))


def inconclusive(message: str | None = None, *parameters: Any) -> NoReturn:
    """Stop the current test without a verdict. Always raises, even inside a scope."""
    __tracebackhide__ = True
    raise AssertionInconclusiveError(
        FailureRecord(
            assertion_name="assert.inconclusive",
            message=build_user_message(message, parameters),
            location=capture_location(),
        )
    )
