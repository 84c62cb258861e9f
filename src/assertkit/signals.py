"""The single point through which every assertion reports a failure."""

import logging
import sys

from assertkit.config import get_settings
from assertkit.errors import AssertionFailedError
from assertkit.records import FailureLocation, FailureRecord, caller_frame, traceback_from
from assertkit.scope import current_scope

logger = logging.getLogger(__name__)


def signal_failure(assertion_name: str, message: str) -> None:
    """Report a failed check.

    Outside an assertion scope this raises AssertionFailedError immediately.
    Inside one, the error is given a traceback ending at the caller's
    statement, appended to the scope, and this function returns so the test
    carries on with its next statement.

    Parameters
    ----------
    assertion_name : str
        Qualified name of the failing assertion.
    message : str
        Detail text for the failure.

    Raises
    ------
    AssertionFailedError
        When no scope is active.
    ScopeError
        When the ambient scope has already been closed.
    """
    __tracebackhide__ = True
    frame = caller_frame()
    try:
        record = FailureRecord(
            assertion_name=assertion_name,
            message=message.strip(),
            location=FailureLocation.from_frame(frame) if frame is not None else None,
        )
        error = AssertionFailedError(record)
        _maybe_launch_debugger(record)

        scope = current_scope()
        if scope is None:
            raise error

        scope.add(error.with_traceback(traceback_from(frame)))
        logger.debug("Deferred failure of %s at %s", assertion_name, record.location)
    finally:
        del frame


def _maybe_launch_debugger(record: FailureRecord) -> None:
    caller = record.location.function if record.location else None
    if get_settings().should_launch_debugger(record.assertion_name, caller):
        logger.info("Launching debugger for failed %s at %s", record.assertion_name, record.location)
        sys.breakpointhook()
