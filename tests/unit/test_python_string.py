import re

import pytest

from assertkit.assertions import python_string
from assertkit.errors import AssertionFailedError, AssertionUsageError


def test_contains():
    python_string.contains("hello world", "o w")
    python_string.contains("Hello", "hell", ignore_case=True)
    with pytest.raises(AssertionFailedError) as info:
        python_string.contains("Hello", "hell")

    assert info.value.record.assertion_name == "string.contains"
    assert info.value.record.message == "String 'Hello' does not contain string 'hell'."


def test_does_not_contain():
    python_string.does_not_contain("abc", "d")
    with pytest.raises(AssertionFailedError, match="contains string 'B'"):
        python_string.does_not_contain("abc", "B", ignore_case=True)


def test_prefix_and_suffix():
    python_string.starts_with("prefix-body", "prefix")
    python_string.ends_with("body-SUFFIX", "suffix", ignore_case=True)
    python_string.does_not_start_with("body", "x")
    python_string.does_not_end_with("body", "x")

    with pytest.raises(AssertionFailedError, match="does not start with"):
        python_string.starts_with("body", "prefix")
    with pytest.raises(AssertionFailedError, match="does not end with"):
        python_string.ends_with("body", "suffix")
    with pytest.raises(AssertionFailedError, match="starts with string 'b'"):
        python_string.does_not_start_with("body", "b")
    with pytest.raises(AssertionFailedError, match="ends with string 'Y'"):
        python_string.does_not_end_with("body", "Y", ignore_case=True)


def test_matches_accepts_string_and_compiled_patterns():
    python_string.matches("order-42", r"\d+")
    python_string.matches("ORDER", re.compile("order", re.IGNORECASE))
    python_string.does_not_match("order", r"^\d+$")

    with pytest.raises(AssertionFailedError, match=r"does not match pattern '\^\\d\+\$'"):
        python_string.matches("order", r"^\d+$")
    with pytest.raises(AssertionFailedError, match="matches pattern"):
        python_string.does_not_match("order-42", re.compile(r"\d"))


@pytest.mark.parametrize(
    "check",
    [
        lambda: python_string.contains(None, "a"),
        lambda: python_string.starts_with("a", None),
        lambda: python_string.matches("a", None),
        lambda: python_string.does_not_match(None, "a"),
    ],
)
def test_none_arguments_are_usage_errors(check):
    with pytest.raises(AssertionUsageError, match="cannot be None"):
        check()
