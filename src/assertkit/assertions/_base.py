"""Shared plumbing for assertion functions."""

from collections.abc import Sequence
from typing import Any

from assertkit import messages
from assertkit.errors import AssertionUsageError
from assertkit.signals import signal_failure


def report(
    assertion_name: str,
    template: str | None,
    message: str | None,
    parameters: Sequence[Any],
    *values: Any,
) -> None:
    """Format a failure message and send it through ``signal_failure``.

    Parameters
    ----------
    assertion_name : str
        Qualified name of the assertion that failed.
    template : str or None
        Message template from :mod:`assertkit.messages`; ``{0}`` receives the
        user message and ``{1}``... receive ``values``. When None the user
        message is used as is.
    message : str or None
        Caller-supplied message.
    parameters : Sequence[Any]
        Composite-format arguments for ``message``.
    """
    __tracebackhide__ = True
    user_message = messages.build_user_message(message, parameters)
    detail = template.format(user_message, *values) if template else user_message
    signal_failure(assertion_name, detail)


def require(value: Any, assertion_name: str, parameter_name: str) -> None:
    """Raise AssertionUsageError when a mandatory argument is None."""
    if value is None:
        raise AssertionUsageError(messages.NULL_PARAMETER.format(assertion_name, parameter_name))


def invalid(assertion_name: str, parameter_name: str, reason: str) -> AssertionUsageError:
    return AssertionUsageError(messages.INVALID_PARAMETER.format(assertion_name, parameter_name, reason))
