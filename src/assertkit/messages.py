"""Failure message table and formatting helpers.

Templates use positional ``{0}``-style placeholders. Placeholder ``{0}`` is
always the caller-supplied message (possibly empty); the rest are the values
specific to each check.
"""

from collections.abc import Sequence
from typing import Any

from assertkit.config import get_settings

ASSERTION_FAILED = "{0} failed. {1}"
ASSERTION_INCONCLUSIVE = "{0} is inconclusive. {1}"
NULL_PARAMETER = "{0}: the parameter '{1}' is invalid. The value cannot be None."
INVALID_PARAMETER = "{0}: the parameter '{1}' is invalid. {2}"
AGGREGATE_FAILURE = "{0} assertions failed in scope."

# Scopes
NESTED_SCOPE = "An assertion scope is already active. Assertion scopes cannot be nested."
SCOPE_CLOSED = "Cannot add a failure to an assertion scope that is {0}."

# Equality
ARE_EQUAL = "Expected:<{1}>. Actual:<{2}>. {0}"
ARE_EQUAL_DIFFERENT_TYPES = "Expected:<{1} ({2})>. Actual:<{3} ({4})>. {0}"
ARE_EQUAL_CASE = "Expected:<{1}>. Case is different for actual value:<{2}>. {0}"
ARE_EQUAL_DELTA = (
    "Expected a difference no greater than <{3}> between expected value <{1}> and actual value <{2}>. {0}"
)
ARE_NOT_EQUAL = "Expected any value except:<{1}>. Actual:<{2}>. {0}"
ARE_NOT_EQUAL_DELTA = (
    "Expected a difference greater than <{3}> between expected value <{1}> and actual value <{2}>. {0}"
)
ARE_SAME_GIVEN_VALUES = "Do not pass value types to are_same(). Values converted to objects are never the same. {0}"
ARE_NOT_SAME = "Expected any object except <{1}>. {0}"
IS_TRUE = "Expected a true condition. Actual:<{1}>. {0}"
IS_FALSE = "Expected a false condition. Actual:<{1}>. {0}"
IS_NONE = "Expected None. Actual:<{1}>. {0}"
IS_NOT_NONE = "Expected a value other than None. {0}"
IS_INSTANCE_OF = "Expected type:<{1}>. Actual type:<{2}>. {0}"
IS_NOT_INSTANCE_OF = "Wrong type:<{1}>. Actual type:<{2}>. {0}"
IS_EXACT_INSTANCE_OF = "Expected exact type:<{1}>. Actual type:<{2}>. {0}"

# Ordering
IS_GREATER_THAN = "Actual value <{2}> is not greater than expected value <{1}>. {0}"
IS_GREATER_THAN_OR_EQUAL_TO = "Actual value <{2}> is not greater than or equal to expected value <{1}>. {0}"
IS_LESS_THAN = "Actual value <{2}> is not less than expected value <{1}>. {0}"
IS_LESS_THAN_OR_EQUAL_TO = "Actual value <{2}> is not less than or equal to expected value <{1}>. {0}"
IS_POSITIVE = "Expected value <{1}> to be positive. {0}"
IS_NEGATIVE = "Expected value <{1}> to be negative. {0}"
IS_IN_RANGE = "Value '{3}' is not within the expected range [{1}..{2}]. {0}"
RANGE_BOUNDS = "The maximum value must be greater than or equal to the minimum value."

# Collections
ARE_EQUIVALENT = "Expected:<{1}>. Actual:<{2}>. {3} {0}"
ARE_NOT_EQUIVALENT = "Expected any collection except:<{1}>. Actual:<{2}>. {0}"
BOTH_COLLECTIONS_SAME_REFERENCE = "Both collection references point to the same collection object. {0}"
BOTH_COLLECTIONS_EMPTY = "Both collections are empty. {0}"
BOTH_COLLECTIONS_SAME_ELEMENTS = "Both collections contain the same elements. {0}"
COLLECTION_EQUAL_REASON = "{0}({1})"
ELEMENTS_AT_INDEX_DONT_MATCH = "Element at index {0} do not match. Expected:<{1}>. Actual:<{2}>."
NUMBER_OF_ELEMENTS_DIFF = "Different number of elements."
ALL_ITEMS_ARE_UNIQUE = "Duplicate item found:<{1}>. {0}"
ALL_ITEMS_ARE_NOT_NONE = "None element found at index {1}. {0}"
ELEMENT_TYPE_AT_INDEX = "Element at index {1} is not of expected type. Expected:<{2}>. Actual:<{3}>. {0}"
NONE_ELEMENT_TYPE_AT_INDEX = "None element found at index {1}. Expected type:<{2}>. {0}"
IS_SUBSET_OF = "Element <{1}> of the subset is not in the superset. {0}"
IS_NOT_SUBSET_OF = "Expected collection <{1}> not to be a subset of <{2}>. {0}"
CONTAINS_ITEM = "Expected collection to contain the specified item. Item:<{1}>. {0}"
CONTAINS_MATCH = "Expected at least one item to match the predicate. {0}"
DOES_NOT_CONTAIN_ITEM = "Expected collection to not contain the specified item. Item:<{1}>. {0}"
DOES_NOT_CONTAIN_MATCH = "Expected no items to match the predicate. Matched:<{1}>. {0}"
CONTAINS_SINGLE = "Expected collection to contain exactly one element but found {1} element(s). {0}"
CONTAINS_SINGLE_MATCH = "Expected exactly one item to match the predicate but found {1} item(s). {0}"
HAS_COUNT = "Expected collection of size {1}. Actual: {2}. {0}"
IS_NOT_EMPTY = "Expected collection to contain any item but it is empty. {0}"

# Strings
CONTAINS_FAIL = "String '{1}' does not contain string '{2}'. {0}"
DOES_NOT_CONTAIN_FAIL = "String '{1}' contains string '{2}'. {0}"
STARTS_WITH_FAIL = "String '{1}' does not start with string '{2}'. {0}"
DOES_NOT_START_WITH_FAIL = "String '{1}' starts with string '{2}'. {0}"
ENDS_WITH_FAIL = "String '{1}' does not end with string '{2}'. {0}"
DOES_NOT_END_WITH_FAIL = "String '{1}' ends with string '{2}'. {0}"
IS_MATCH_FAIL = "String '{1}' does not match pattern '{2}'. {0}"
IS_NOT_MATCH_FAIL = "String '{1}' matches pattern '{2}'. {0}"

# Exceptions
WRONG_EXCEPTION_THROWN = "Expected exception type:<{1}> but exception type:<{2}> was thrown. {3} {0}"
WRONG_EXACT_EXCEPTION_THROWN = "Expected exact exception type:<{1}> but exception type:<{2}> was thrown. {3} {0}"
NO_EXCEPTION_THROWN = "Expected exception type:<{1}> but no exception was thrown. {0}"


def build_user_message(message: str | None, parameters: Sequence[Any] | None = None) -> str:
    """Format the caller-supplied message with its composite-format parameters."""
    if not message:
        return ""
    if parameters:
        return message.format(*parameters)
    return message


def render_value(value: Any, max_len: int | None = None) -> str:
    """Truncate a repr string if too long."""
    if max_len is None:
        max_len = get_settings().max_value_repr
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def type_name(value_or_type: Any) -> str:
    cls = value_or_type if isinstance(value_or_type, type) else type(value_or_type)
    return f"{cls.__module__}.{cls.__qualname__}" if cls.__module__ != "builtins" else cls.__qualname__


def format_failure(assertion_name: str, detail: str) -> str:
    """Return the final ``"<name> failed. <detail>"`` text."""
    return ASSERTION_FAILED.format(assertion_name, detail).strip()
