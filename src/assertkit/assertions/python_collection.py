"""Assertions for collections.

Unordered checks (:func:`are_equivalent`, :func:`is_subset_of`,
:func:`all_items_are_unique`) are answered by :mod:`assertkit.comparison`;
this module turns a negative answer into a failure message.

Note the two notions of "contains" in play: equivalence counts how often each
element occurs, while subset checks only membership.
"""

from collections.abc import Callable, Iterable
from typing import Any

from assertkit import comparison
from assertkit.assertions._base import report, require
from assertkit.messages import (
    ALL_ITEMS_ARE_NOT_NONE,
    ALL_ITEMS_ARE_UNIQUE,
    ARE_EQUIVALENT,
    ARE_NOT_EQUIVALENT,
    COLLECTION_EQUAL_REASON,
    CONTAINS_ITEM,
    CONTAINS_MATCH,
    CONTAINS_SINGLE,
    CONTAINS_SINGLE_MATCH,
    DOES_NOT_CONTAIN_ITEM,
    DOES_NOT_CONTAIN_MATCH,
    ELEMENT_TYPE_AT_INDEX,
    HAS_COUNT,
    IS_NOT_EMPTY,
    IS_NOT_SUBSET_OF,
    IS_SUBSET_OF,
    NONE_ELEMENT_TYPE_AT_INDEX,
    build_user_message,
    render_value,
    type_name,
)


_EMPTY = object()


def _materialize(collection: Iterable[Any] | None) -> list[Any] | None:
    # Generators can only be walked once; comparisons and messages both need the items.
    return None if collection is None else list(collection)


def are_equivalent(
    expected: Iterable[Any] | None,
    actual: Iterable[Any] | None,
    message: str | None = None,
    *parameters: Any,
    comparer: comparison.Equality | None = None,
) -> None:
    """Fail unless both collections hold the same elements with the same counts, in any order.

    Parameters
    ----------
    expected : Iterable[Any] or None
        Collection the test expects.
    actual : Iterable[Any] or None
        Collection produced by the code under test.
    message : str or None
        Message included in the failure; formatted with ``parameters``.
    comparer : Equality or None
        Equality notion for elements; natural equality when None.

    Examples
    --------
    >>> are_equivalent([1, 2, 2], [2, 1, 2])  # passes
    >>> are_equivalent([1, 1, 2], [1, 2, 2])  # fails: counts differ
    """
    __tracebackhide__ = True
    if expected is not actual:
        expected, actual = _materialize(expected), _materialize(actual)
    equivalent, reason = comparison.compare_equivalence(expected, actual, comparer)
    if not equivalent:
        report(
            "collection.are_equivalent",
            ARE_EQUIVALENT,
            message,
            parameters,
            render_value(expected),
            render_value(actual),
            reason,
        )


def are_not_equivalent(
    not_expected: Iterable[Any] | None,
    actual: Iterable[Any] | None,
    message: str | None = None,
    *parameters: Any,
    comparer: comparison.Equality | None = None,
) -> None:
    """Fail when the collections are equivalent. Exactly one None passes; two Nones fail."""
    __tracebackhide__ = True
    if not_expected is not actual:
        not_expected, actual = _materialize(not_expected), _materialize(actual)
    if not comparison.compare_not_equivalent(not_expected, actual, comparer):
        report(
            "collection.are_not_equivalent",
            ARE_NOT_EQUIVALENT,
            message,
            parameters,
            render_value(not_expected),
            render_value(actual),
        )


def is_subset_of(subset: Iterable[Any], superset: Iterable[Any], message: str | None = None, *parameters: Any) -> None:
    """Fail unless every element of ``subset`` occurs in ``superset``.

    Membership only: ``is_subset_of([1, 1], [1])`` passes.

    Raises
    ------
    AssertionUsageError
        If either collection is None.
    """
    __tracebackhide__ = True
    require(subset, "collection.is_subset_of", "subset")
    require(superset, "collection.is_subset_of", "superset")
    is_subset, first_mismatch = comparison.compare_subset(subset, superset)
    if not is_subset:
        report("collection.is_subset_of", IS_SUBSET_OF, message, parameters, render_value(first_mismatch))


def is_not_subset_of(
    subset: Iterable[Any], superset: Iterable[Any], message: str | None = None, *parameters: Any
) -> None:
    __tracebackhide__ = True
    require(subset, "collection.is_not_subset_of", "subset")
    require(superset, "collection.is_not_subset_of", "superset")
    subset, superset = list(subset), list(superset)
    if comparison.compare_subset(subset, superset).is_subset:
        report(
            "collection.is_not_subset_of",
            IS_NOT_SUBSET_OF,
            message,
            parameters,
            render_value(subset),
            render_value(superset),
        )


def all_items_are_unique(collection: Iterable[Any], message: str | None = None, *parameters: Any) -> None:
    """Fail on the first element that occurs twice. None elements are ignored."""
    __tracebackhide__ = True
    require(collection, "collection.all_items_are_unique", "collection")
    found, duplicate = comparison.find_duplicate(collection)
    if found:
        report("collection.all_items_are_unique", ALL_ITEMS_ARE_UNIQUE, message, parameters, render_value(duplicate))


def all_items_are_not_none(collection: Iterable[Any], message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    require(collection, "collection.all_items_are_not_none", "collection")
    for index, element in enumerate(collection):
        if element is None:
            report("collection.all_items_are_not_none", ALL_ITEMS_ARE_NOT_NONE, message, parameters, index)
            return


def all_items_are_instances_of_type(
    collection: Iterable[Any], expected_type: type, message: str | None = None, *parameters: Any
) -> None:
    """Fail on the first element that is None or not an instance of ``expected_type``."""
    __tracebackhide__ = True
    require(collection, "collection.all_items_are_instances_of_type", "collection")
    require(expected_type, "collection.all_items_are_instances_of_type", "expected_type")
    for index, element in enumerate(collection):
        if element is None:
            report(
                "collection.all_items_are_instances_of_type",
                NONE_ELEMENT_TYPE_AT_INDEX,
                message,
                parameters,
                index,
                type_name(expected_type),
            )
            return
        if not isinstance(element, expected_type):
            report(
                "collection.all_items_are_instances_of_type",
                ELEMENT_TYPE_AT_INDEX,
                message,
                parameters,
                index,
                type_name(expected_type),
                type_name(element),
            )
            return


def _matches(element: Any, item: Any, comparer: comparison.Equality | None) -> bool:
    return comparison.compare_equivalence([element], [item], comparer).equivalent


def contains(
    collection: Iterable[Any],
    element: Any,
    message: str | None = None,
    *parameters: Any,
    comparer: comparison.Equality | None = None,
) -> None:
    __tracebackhide__ = True
    require(collection, "collection.contains", "collection")
    if comparer is None:
        found = element in list(collection)
    else:
        found = any(_matches(element, item, comparer) for item in collection)
    if not found:
        report("collection.contains", CONTAINS_ITEM, message, parameters, render_value(element))


def contains_match(
    collection: Iterable[Any], predicate: Callable[[Any], bool], message: str | None = None, *parameters: Any
) -> None:
    __tracebackhide__ = True
    require(collection, "collection.contains_match", "collection")
    require(predicate, "collection.contains_match", "predicate")
    if not any(predicate(item) for item in collection):
        report("collection.contains_match", CONTAINS_MATCH, message, parameters)


def does_not_contain(
    collection: Iterable[Any],
    element: Any,
    message: str | None = None,
    *parameters: Any,
    comparer: comparison.Equality | None = None,
) -> None:
    __tracebackhide__ = True
    require(collection, "collection.does_not_contain", "collection")
    if comparer is None:
        found = element in list(collection)
    else:
        found = any(_matches(element, item, comparer) for item in collection)
    if found:
        report("collection.does_not_contain", DOES_NOT_CONTAIN_ITEM, message, parameters, render_value(element))


def does_not_contain_match(
    collection: Iterable[Any], predicate: Callable[[Any], bool], message: str | None = None, *parameters: Any
) -> None:
    __tracebackhide__ = True
    require(collection, "collection.does_not_contain_match", "collection")
    require(predicate, "collection.does_not_contain_match", "predicate")
    for item in collection:
        if predicate(item):
            report("collection.does_not_contain_match", DOES_NOT_CONTAIN_MATCH, message, parameters, render_value(item))
            return


def contains_single(
    collection: Iterable[Any],
    message: str | None = None,
    *parameters: Any,
    predicate: Callable[[Any], bool] | None = None,
) -> Any:
    """Return the only element (or the only element matching ``predicate``).

    When the check fails inside an assertion scope, None is returned.
    """
    __tracebackhide__ = True
    require(collection, "collection.contains_single", "collection")
    items = list(collection) if predicate is None else [item for item in collection if predicate(item)]
    if len(items) == 1:
        return items[0]
    template = CONTAINS_SINGLE if predicate is None else CONTAINS_SINGLE_MATCH
    report("collection.contains_single", template, message, parameters, len(items))
    return None


def has_count(expected_count: int, collection: Iterable[Any], message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    require(collection, "collection.has_count", "collection")
    actual_count = sum(1 for _ in collection)
    if actual_count != expected_count:
        report("collection.has_count", HAS_COUNT, message, parameters, expected_count, actual_count)


def is_empty(collection: Iterable[Any], message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    require(collection, "collection.is_empty", "collection")
    actual_count = sum(1 for _ in collection)
    if actual_count:
        report("collection.is_empty", HAS_COUNT, message, parameters, 0, actual_count)


def is_not_empty(collection: Iterable[Any], message: str | None = None, *parameters: Any) -> None:
    __tracebackhide__ = True
    require(collection, "collection.is_not_empty", "collection")
    if next(iter(collection), _EMPTY) is _EMPTY:
        report("collection.is_not_empty", IS_NOT_EMPTY, message, parameters)


def _with_reason(reason: str, message: str | None, parameters: tuple[Any, ...]) -> str:
    user_message = build_user_message(message, parameters)
    return COLLECTION_EQUAL_REASON.format(user_message + " " if user_message else "", reason)


def are_equal(
    expected: Iterable[Any] | None,
    actual: Iterable[Any] | None,
    message: str | None = None,
    *parameters: Any,
    comparer: comparison.Equality | None = None,
) -> None:
    """Fail unless the collections hold equal elements in the same order.

    Nested iterables (other than strings) are compared element by element.
    """
    __tracebackhide__ = True
    equal, reason = comparison.compare_sequences(expected, actual, comparer)
    if not equal:
        report("collection.are_equal", None, _with_reason(reason, message, parameters), ())


def are_not_equal(
    not_expected: Iterable[Any] | None,
    actual: Iterable[Any] | None,
    message: str | None = None,
    *parameters: Any,
    comparer: comparison.Equality | None = None,
) -> None:
    __tracebackhide__ = True
    equal, reason = comparison.compare_sequences(not_expected, actual, comparer)
    if equal:
        report("collection.are_not_equal", None, _with_reason(reason, message, parameters), ())


__all__ = [
    "are_equivalent",
    "are_not_equivalent",
    "is_subset_of",
    "is_not_subset_of",
    "all_items_are_unique",
    "all_items_are_not_none",
    "all_items_are_instances_of_type",
    "contains",
    "contains_match",
    "does_not_contain",
    "does_not_contain_match",
    "contains_single",
    "has_count",
    "is_empty",
    "is_not_empty",
    "are_equal",
    "are_not_equal",
]
