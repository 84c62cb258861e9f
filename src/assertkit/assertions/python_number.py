"""Assertions for ordered values.

The bound comes first and the value under test second:
``is_greater_than(10, value)`` passes when ``value > 10``.
"""

import math
from typing import Any

from assertkit.assertions._base import invalid, report, require
from assertkit.messages import (
    IS_GREATER_THAN,
    IS_GREATER_THAN_OR_EQUAL_TO,
    IS_IN_RANGE,
    IS_LESS_THAN,
    IS_LESS_THAN_OR_EQUAL_TO,
    IS_NEGATIVE,
    IS_POSITIVE,
    RANGE_BOUNDS,
    render_value,
)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_greater_than(lower_bound: Any, value: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if not value > lower_bound:
        report(
            "assert.is_greater_than", IS_GREATER_THAN, message, parameters, render_value(lower_bound), render_value(value)
        )


def is_greater_than_or_equal_to(lower_bound: Any, value: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if not value >= lower_bound:
        report(
            "assert.is_greater_than_or_equal_to",
            IS_GREATER_THAN_OR_EQUAL_TO,
            message,
            parameters,
            render_value(lower_bound),
            render_value(value),
        )


def is_less_than(upper_bound: Any, value: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if not value < upper_bound:
        report("assert.is_less_than", IS_LESS_THAN, message, parameters, render_value(upper_bound), render_value(value))


def is_less_than_or_equal_to(upper_bound: Any, value: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if not value <= upper_bound:
        report(
            "assert.is_less_than_or_equal_to",
            IS_LESS_THAN_OR_EQUAL_TO,
            message,
            parameters,
            render_value(upper_bound),
            render_value(value),
        )


def is_positive(value: Any, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``value > 0``. NaN is neither positive nor negative."""
    __tracebackhide__ = True
    if _is_nan(value) or not value > 0:
        report("assert.is_positive", IS_POSITIVE, message, parameters, render_value(value))


def is_negative(value: Any, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    if _is_nan(value) or not value < 0:
        report("assert.is_negative", IS_NEGATIVE, message, parameters, render_value(value))


def is_in_range(min_value: Any, max_value: Any, value: Any, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``min_value <= value <= max_value``.

    Raises
    ------
    AssertionUsageError
        If a bound is None or ``max_value < min_value``.
    """
    __tracebackhide__ = True
    require(min_value, "assert.is_in_range", "min_value")
    require(max_value, "assert.is_in_range", "max_value")
    if max_value < min_value:
        raise invalid("assert.is_in_range", "max_value", RANGE_BOUNDS)
    if not min_value <= value <= max_value:
        report(
            "assert.is_in_range",
            IS_IN_RANGE,
            message,
            parameters,
            render_value(min_value),
            render_value(max_value),
            render_value(value),
        )
