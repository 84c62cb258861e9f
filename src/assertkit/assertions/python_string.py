"""Assertions for strings.

A None value or substring is a malformed check and raises
AssertionUsageError rather than failing.
"""

import re
from typing import Any

from assertkit.assertions._base import report, require
from assertkit.messages import (
    CONTAINS_FAIL,
    DOES_NOT_CONTAIN_FAIL,
    DOES_NOT_END_WITH_FAIL,
    DOES_NOT_START_WITH_FAIL,
    ENDS_WITH_FAIL,
    IS_MATCH_FAIL,
    IS_NOT_MATCH_FAIL,
    STARTS_WITH_FAIL,
)

Pattern = str | re.Pattern[str]


def _fold(value: str, ignore_case: bool) -> str:
    return value.casefold() if ignore_case else value


def _compile(pattern: Pattern) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def contains(
    value: str, substring: str, message: str | None = None, *parameters: Any, ignore_case: bool = False
) -> None:
    """Fail unless ``substring`` occurs in ``value``."""
    __tracebackhide__ = True
    require(value, "string.contains", "value")
    require(substring, "string.contains", "substring")
    if _fold(substring, ignore_case) not in _fold(value, ignore_case):
        report("string.contains", CONTAINS_FAIL, message, parameters, value, substring)


def does_not_contain(
    value: str, substring: str, message: str | None = None, *parameters: Any, ignore_case: bool = False
) -> None:
    __tracebackhide__ = True
    require(value, "string.does_not_contain", "value")
    require(substring, "string.does_not_contain", "substring")
    if _fold(substring, ignore_case) in _fold(value, ignore_case):
        report("string.does_not_contain", DOES_NOT_CONTAIN_FAIL, message, parameters, value, substring)


def starts_with(
    value: str, prefix: str, message: str | None = None, *parameters: Any, ignore_case: bool = False
) -> None:
    __tracebackhide__ = True
    require(value, "string.starts_with", "value")
    require(prefix, "string.starts_with", "prefix")
    if not _fold(value, ignore_case).startswith(_fold(prefix, ignore_case)):
        report("string.starts_with", STARTS_WITH_FAIL, message, parameters, value, prefix)


def does_not_start_with(
    value: str, prefix: str, message: str | None = None, *parameters: Any, ignore_case: bool = False
) -> None:
    __tracebackhide__ = True
    require(value, "string.does_not_start_with", "value")
    require(prefix, "string.does_not_start_with", "prefix")
    if _fold(value, ignore_case).startswith(_fold(prefix, ignore_case)):
        report("string.does_not_start_with", DOES_NOT_START_WITH_FAIL, message, parameters, value, prefix)


def ends_with(
    value: str, suffix: str, message: str | None = None, *parameters: Any, ignore_case: bool = False
) -> None:
    __tracebackhide__ = True
    require(value, "string.ends_with", "value")
    require(suffix, "string.ends_with", "suffix")
    if not _fold(value, ignore_case).endswith(_fold(suffix, ignore_case)):
        report("string.ends_with", ENDS_WITH_FAIL, message, parameters, value, suffix)


def does_not_end_with(
    value: str, suffix: str, message: str | None = None, *parameters: Any, ignore_case: bool = False
) -> None:
    __tracebackhide__ = True
    require(value, "string.does_not_end_with", "value")
    require(suffix, "string.does_not_end_with", "suffix")
    if _fold(value, ignore_case).endswith(_fold(suffix, ignore_case)):
        report("string.does_not_end_with", DOES_NOT_END_WITH_FAIL, message, parameters, value, suffix)


def matches(value: str, pattern: Pattern, message: str | None = None, *parameters: Any) -> None:
    """Fail unless ``pattern`` matches somewhere in ``value`` (``re.search`` semantics).

    Parameters
    ----------
    value : str
        String under test.
    pattern : str or re.Pattern
        Regular expression; compiled when given as a string.
    """
    __tracebackhide__ = True
    require(value, "string.matches", "value")
    require(pattern, "string.matches", "pattern")
    compiled = _compile(pattern)
    if compiled.search(value) is None:
        report("string.matches", IS_MATCH_FAIL, message, parameters, value, compiled.pattern)


def does_not_match(value: str, pattern: Pattern, message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    require(value, "string.does_not_match", "value")
    require(pattern, "string.does_not_match", "pattern")
    compiled = _compile(pattern)
    if compiled.search(value) is not None:
        report("string.does_not_match", IS_NOT_MATCH_FAIL, message, parameters, value, compiled.pattern)
