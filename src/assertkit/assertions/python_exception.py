"""Assertions about exceptions raised by the code under test.

Only ``Exception`` subclasses are intercepted; ``KeyboardInterrupt``,
``SystemExit`` and other ``BaseException`` subclasses always propagate.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import Any, Generic, TypeVar

from assertkit.assertions._base import report, require
from assertkit.messages import (
    NO_EXCEPTION_THROWN,
    WRONG_EXACT_EXCEPTION_THROWN,
    WRONG_EXCEPTION_THROWN,
    type_name,
)

E = TypeVar("E", bound=BaseException)


def _accepts(expected_type: type[BaseException], error: BaseException, exact: bool) -> bool:
    return type(error) is expected_type if exact else isinstance(error, expected_type)


def _check(
    assertion_name: str,
    expected_type: type[E],
    error: Exception | None,
    exact: bool,
    message: str | None,
    parameters: tuple[Any, ...],
) -> E | None:
    __tracebackhide__ = True
    if error is None:
        report(assertion_name, NO_EXCEPTION_THROWN, message, parameters, type_name(expected_type))
        return None
    if _accepts(expected_type, error, exact):
        return error  # type: ignore[return-value]
    template = WRONG_EXACT_EXCEPTION_THROWN if exact else WRONG_EXCEPTION_THROWN
    report(assertion_name, template, message, parameters, type_name(expected_type), type_name(error), str(error))
    return None


def throws(
    expected_type: type[E], action: Callable[[], Any], message: str | None = None, *parameters: Any
) -> E | None:
    """Call ``action`` and fail unless it raises ``expected_type`` (or a subclass).

    Returns
    -------
    The raised exception, or None when the check failed inside an assertion scope.
    """
    __tracebackhide__ = True
    require(expected_type, "assert.throws", "expected_type")
    require(action, "assert.throws", "action")
    try:
        action()
    except Exception as error:
        return _check("assert.throws", expected_type, error, False, message, parameters)
    return _check("assert.throws", expected_type, None, False, message, parameters)


def throws_exactly(
    expected_type: type[E], action: Callable[[], Any], message: str | None = None, *parameters: Any
) -> E | None:
    """Like :func:`throws`, but a subclass of ``expected_type`` fails."""
    __tracebackhide__ = True
    require(expected_type, "assert.throws_exactly", "expected_type")
    require(action, "assert.throws_exactly", "action")
    try:
        action()
    except Exception as error:
        return _check("assert.throws_exactly", expected_type, error, True, message, parameters)
    return _check("assert.throws_exactly", expected_type, None, True, message, parameters)


async def throws_async(
    expected_type: type[E], action: Callable[[], Awaitable[Any]], message: str | None = None, *parameters: Any
) -> E | None:
    __tracebackhide__ = True
    require(expected_type, "assert.throws_async", "expected_type")
    require(action, "assert.throws_async", "action")
    try:
        await action()
    except Exception as error:
        return _check("assert.throws_async", expected_type, error, False, message, parameters)
    return _check("assert.throws_async", expected_type, None, False, message, parameters)


async def throws_exactly_async(
    expected_type: type[E], action: Callable[[], Awaitable[Any]], message: str | None = None, *parameters: Any
) -> E | None:
    __tracebackhide__ = True
    require(expected_type, "assert.throws_exactly_async", "expected_type")
    require(action, "assert.throws_exactly_async", "action")
    try:
        await action()
    except Exception as error:
        return _check("assert.throws_exactly_async", expected_type, error, True, message, parameters)
    return _check("assert.throws_exactly_async", expected_type, None, True, message, parameters)


class raises(Generic[E]):
    """Context manager form of :func:`throws`.

    The matching exception is suppressed and stored on ``value``::

        with raises(KeyError) as caught:
            lookup["missing"]
        assert caught.value.args == ("missing",)

    A wrong exception type is reported as a failure; inside an assertion
    scope the wrong exception is swallowed so the block counts as one failure.
    """

    def __init__(self, expected_type: type[E], message: str | None = None, *parameters: Any, exact: bool = False):
        require(expected_type, "assert.raises", "expected_type")
        self.expected_type = expected_type
        self.message = message
        self.parameters = parameters
        self.exact = exact
        self.value: E | None = None

    def __enter__(self) -> raises[E]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        __tracebackhide__ = True
        if exc is not None and not isinstance(exc, Exception):
            return False
        self.value = _check("assert.raises", self.expected_type, exc, self.exact, self.message, self.parameters)
        return True
