"""Assertions for single values: truth, None, identity, equality and type."""

import math
from numbers import Number
from typing import Any

from assertkit.assertions._base import invalid, report, require
from assertkit.messages import (
    ARE_EQUAL,
    ARE_EQUAL_CASE,
    ARE_EQUAL_DELTA,
    ARE_EQUAL_DIFFERENT_TYPES,
    ARE_NOT_EQUAL,
    ARE_NOT_EQUAL_DELTA,
    ARE_NOT_SAME,
    ARE_SAME_GIVEN_VALUES,
    IS_EXACT_INSTANCE_OF,
    IS_FALSE,
    IS_INSTANCE_OF,
    IS_NONE,
    IS_NOT_INSTANCE_OF,
    IS_NOT_NONE,
    IS_TRUE,
    render_value,
    type_name,
)


def is_true(condition: Any, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``condition`` is truthy. ``None`` fails."""
    __tracebackhide__ = True
    if condition is None or not condition:
        report("assert.is_true", IS_TRUE, message, parameters, render_value(condition))


def is_false(condition: Any, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``condition`` is falsy and not ``None``."""
    __tracebackhide__ = True
    if condition is None or condition:
        report("assert.is_false", IS_FALSE, message, parameters, render_value(condition))


def is_none(value: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if value is not None:
        report("assert.is_none", IS_NONE, message, parameters, render_value(value))


def is_not_none(value: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if value is None:
        report("assert.is_not_none", IS_NOT_NONE, message, parameters)


def _is_value_type(value: Any) -> bool:
    return isinstance(value, (Number, str, bytes, bool))


def are_same(expected: Any, actual: Any, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``expected`` and ``actual`` are the same object."""
    __tracebackhide__ = True
    if expected is actual:
        return
    if _is_value_type(expected) and _is_value_type(actual):
        report("assert.are_same", ARE_SAME_GIVEN_VALUES, message, parameters)
    else:
        report("assert.are_same", None, message, parameters)


def are_not_same(not_expected: Any, actual: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if not_expected is actual:
        report("assert.are_not_same", ARE_NOT_SAME, message, parameters, render_value(actual))


def _check_delta(assertion_name: str, delta: float) -> None:
    if math.isnan(delta) or delta < 0:
        raise invalid(assertion_name, "delta", "The delta must be a non-negative number.")


def _within_delta(expected: float, actual: float, delta: float) -> bool:
    if math.isnan(expected) or math.isnan(actual):
        return math.isnan(expected) and math.isnan(actual)
    return abs(expected - actual) <= delta


def are_equal(
    expected: Any,
    actual: Any,
    message: str | None = None,
    *parameters: Any,
    delta: float | None = None,
    ignore_case: bool = False,
) -> None:
    """Fail unless ``expected == actual``.

    Parameters
    ----------
    expected : Any
        Value the test expects.
    actual : Any
        Value produced by the code under test.
    message : str or None
        Message included in the failure; formatted with ``parameters``.
    delta : float or None
        For numbers, the largest allowed absolute difference. Two NaNs are
        considered equal.
    ignore_case : bool
        For strings, compare case-insensitively.
    """
    __tracebackhide__ = True
    if delta is not None:
        _check_delta("assert.are_equal", delta)
        if not _within_delta(expected, actual, delta):
            report(
                "assert.are_equal",
                ARE_EQUAL_DELTA,
                message,
                parameters,
                render_value(expected),
                render_value(actual),
                render_value(delta),
            )
        return

    if isinstance(expected, str) and isinstance(actual, str):
        if ignore_case and expected.casefold() == actual.casefold():
            return
        if expected == actual:
            return
        template = ARE_EQUAL_CASE if expected.casefold() == actual.casefold() else ARE_EQUAL
        report("assert.are_equal", template, message, parameters, render_value(expected), render_value(actual))
        return

    if expected == actual:
        return
    if expected is not None and actual is not None and type(expected) is not type(actual):
        report(
            "assert.are_equal",
            ARE_EQUAL_DIFFERENT_TYPES,
            message,
            parameters,
            render_value(expected),
            type_name(expected),
            render_value(actual),
            type_name(actual),
        )
    else:
        report("assert.are_equal", ARE_EQUAL, message, parameters, render_value(expected), render_value(actual))


def are_not_equal(
    not_expected: Any,
    actual: Any,
    message: str | None = None,
    *parameters: Any,
    delta: float | None = None,
    ignore_case: bool = False,
) -> None:
    """Fail when ``not_expected == actual`` (within ``delta`` or ignoring case when given)."""
    __tracebackhide__ = True
    if delta is not None:
        _check_delta("assert.are_not_equal", delta)
        if _within_delta(not_expected, actual, delta):
            report(
                "assert.are_not_equal",
                ARE_NOT_EQUAL_DELTA,
                message,
                parameters,
                render_value(not_expected),
                render_value(actual),
                render_value(delta),
            )
        return

    if ignore_case and isinstance(not_expected, str) and isinstance(actual, str):
        equal = not_expected.casefold() == actual.casefold()
    else:
        equal = not_expected == actual
    if equal:
        report(
            "assert.are_not_equal", ARE_NOT_EQUAL, message, parameters, render_value(not_expected), render_value(actual)
        )


def is_instance_of_type(value: Any, expected_type: type, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``value`` is an instance of ``expected_type`` or a subclass. ``None`` fails."""
    __tracebackhide__ = True
    require(expected_type, "assert.is_instance_of_type", "expected_type")
    if value is None or not isinstance(value, expected_type):
        report(
            "assert.is_instance_of_type",
            IS_INSTANCE_OF,
            message,
            parameters,
            type_name(expected_type),
            "None" if value is None else type_name(value),
        )


def is_not_instance_of_type(value: Any, wrong_type: type, message: str | None = None, *parameters: Any) -> None:
    """Fail when ``value`` is an instance of ``wrong_type``. ``None`` passes."""
    __tracebackhide__ = True
    require(wrong_type, "assert.is_not_instance_of_type", "wrong_type")
    if value is not None and isinstance(value, wrong_type):
        report(
            "assert.is_not_instance_of_type",
            IS_NOT_INSTANCE_OF,
            message,
            parameters,
            type_name(wrong_type),
            type_name(value),
        )


def is_exact_instance_of_type(value: Any, expected_type: type, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``type(value) is expected_type``; subclasses fail."""
    __tracebackhide__ = True
    require(expected_type, "assert.is_exact_instance_of_type", "expected_type")
    if value is None or type(value) is not expected_type:
        report(
            "assert.is_exact_instance_of_type",
            IS_EXACT_INSTANCE_OF,
            message,
            parameters,
            type_name(expected_type),
            "None" if value is None else type_name(value),
        )
