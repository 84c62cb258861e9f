"""Exception types raised by assertions and assertion scopes."""

from __future__ import annotations

from collections.abc import Sequence

from assertkit import messages
from assertkit.records import FailureRecord, capture_location


class AssertionFailedError(AssertionError):
    """AssertionError with attached FailureRecord."""

    def __init__(self, record: FailureRecord):
        self.record = record
        super().__init__(record.description)


class AggregateAssertionError(AssertionFailedError):
    """Raised when an assertion scope closes with two or more collected failures.

    The individual failures are kept as separate exception objects in
    ``failures`` (each with its own record and traceback) so reporters can
    enumerate them.
    """

    def __init__(self, failures: Sequence[AssertionFailedError]):
        self.failures: tuple[AssertionFailedError, ...] = tuple(failures)
        super().__init__(
            FailureRecord(
                assertion_name="assertion_scope",
                message=messages.AGGREGATE_FAILURE.format(len(self.failures)),
                location=capture_location(),
            )
        )

    @property
    def records(self) -> tuple[FailureRecord, ...]:
        return tuple(failure.record for failure in self.failures)

    def __str__(self) -> str:
        lines = [self.record.message]
        lines.extend(f"  {i}) {failure.record.description}" for i, failure in enumerate(self.failures, start=1))
        return "\n".join(lines)


class AssertionInconclusiveError(Exception):
    """The check could not reach a verdict. Never collected by scopes."""

    def __init__(self, record: FailureRecord):
        self.record = record
        super().__init__(messages.ASSERTION_INCONCLUSIVE.format(record.assertion_name, record.message).strip())


class AssertionUsageError(Exception):
    """The test called an assertion incorrectly (missing argument, bad bound, ...).

    Not an AssertionError, so runners report the test as an error rather than
    a failure.
    """


class ScopeError(AssertionUsageError):
    """Assertion scope misuse: nesting, or adding to a scope that is no longer open."""
