"""Collection comparisons used by the collection assertions.

These functions answer a question and never signal failures themselves; a
negative answer is an ordinary return value.

Equality notions
----------------
Wherever a ``comparer`` is accepted it may be:

- ``None``: natural equality (identity or ``==``, as ``in`` and ``dict`` use),
  except that two float NaNs are equal;
- an :class:`EqualityComparer` providing ``equals`` and ``hash``;
- a plain ``(a, b) -> bool`` callable, matched pairwise.

Elements do not need to be hashable. ``None`` only ever equals ``None`` and
is never passed to a custom comparer.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Mapping, Set
from typing import Any, NamedTuple, Protocol, runtime_checkable

from assertkit import messages
from assertkit.errors import AssertionUsageError

ONE_COLLECTION_NULL = "One collection is null while the other is not."
DIFFERENT_UNIQUE_COUNT = "Collections have different number of unique elements."
DIFFERENT_ELEMENT_COUNTS = "Collections have different element counts."


@runtime_checkable
class EqualityComparer(Protocol):
    """Equality notion with a matching hash, like ``__eq__``/``__hash__`` pairs."""

    def equals(self, x: Any, y: Any) -> bool: ...

    def hash(self, x: Any) -> int: ...


Equality = EqualityComparer | Callable[[Any, Any], bool]


class EquivalenceResult(NamedTuple):
    equivalent: bool
    reason: str = ""


class SubsetResult(NamedTuple):
    is_subset: bool
    first_mismatch: Any = None


class DuplicateResult(NamedTuple):
    found: bool
    duplicate: Any = None


class SequenceResult(NamedTuple):
    equal: bool
    reason: str = ""


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _natural_equals(x: Any, y: Any) -> bool:
    return x is y or bool(x == y) or (_is_nan(x) and _is_nan(y))


class _Matcher:
    """An equality notion resolved to an ``equals`` function and an optional ``hash``."""

    __slots__ = ("equals", "hash", "natural")

    def __init__(self, comparer: Equality | None):
        self.hash: Callable[[Any], int] | None
        self.natural = comparer is None
        if comparer is None:
            self.equals = _natural_equals
            self.hash = hash
        elif isinstance(comparer, EqualityComparer):
            self.equals = comparer.equals
            self.hash = comparer.hash
        elif callable(comparer):
            self.equals = comparer
            self.hash = None
        else:
            raise AssertionUsageError(
                messages.INVALID_PARAMETER.format("comparison", "comparer", f"{comparer!r} is not an equality notion.")
            )

    def same(self, x: Any, y: Any) -> bool:
        if x is None or y is None:
            return x is y
        return bool(self.equals(x, y))


_NONE_BUCKET = object()
_NAN_BUCKET = object()
_LINEAR_BUCKET = object()


class _ElementCounts:
    """Multiset view of a collection: each distinct element and how often it occurs.

    Elements are bucketed by the matcher's hash and matched pairwise within a
    bucket. Elements that cannot be hashed live in a linear bucket; a hashed
    lookup that misses falls back to it, and an unhashable lookup scans every
    bucket, so an unhashable value still matches an equal hashable one.
    """

    __slots__ = ("_matcher", "_buckets", "distinct")

    def __init__(self, matcher: _Matcher):
        self._matcher = matcher
        self._buckets: dict[Any, list[list[Any]]] = {}
        self.distinct = 0

    @classmethod
    def of(cls, items: Iterable[Any], matcher: _Matcher) -> _ElementCounts:
        counts = cls(matcher)
        for item in items:
            counts.add(item)
        return counts

    def _bucket_key(self, element: Any) -> Any:
        if element is None:
            return _NONE_BUCKET
        if self._matcher.hash is None:
            return _LINEAR_BUCKET
        if self._matcher.natural and _is_nan(element):
            return _NAN_BUCKET
        try:
            return self._matcher.hash(element)
        except TypeError:
            return _LINEAR_BUCKET

    def _search(self, element: Any, bucket: list[list[Any]] | None) -> list[Any] | None:
        for entry in bucket or ():
            if self._matcher.same(entry[0], element):
                return entry
        return None

    def _entry(self, element: Any, key: Any) -> list[Any] | None:
        if key is _NONE_BUCKET:
            return self._search(element, self._buckets.get(key))
        if key is _LINEAR_BUCKET:
            for bucket_key, bucket in self._buckets.items():
                if bucket_key is _NONE_BUCKET:
                    continue
                entry = self._search(element, bucket)
                if entry is not None:
                    return entry
            return None
        entry = self._search(element, self._buckets.get(key))
        if entry is None:
            entry = self._search(element, self._buckets.get(_LINEAR_BUCKET))
        return entry

    def add(self, element: Any) -> None:
        key = self._bucket_key(element)
        entry = self._entry(element, key)
        if entry is not None:
            entry[1] += 1
            return
        self._buckets.setdefault(key, []).append([element, 1])
        self.distinct += 1

    def count(self, element: Any) -> int:
        entry = self._entry(element, self._bucket_key(element))
        return entry[1] if entry is not None else 0

    def __contains__(self, element: Any) -> bool:
        return self.count(element) > 0

    def __iter__(self) -> Iterator[tuple[Any, int]]:
        for bucket in self._buckets.values():
            for element, count in bucket:
                yield element, count


def compare_equivalence(
    expected: Iterable[Any] | None,
    actual: Iterable[Any] | None,
    comparer: Equality | None = None,
) -> EquivalenceResult:
    """Check whether two collections hold the same elements with the same multiplicities.

    Order is ignored but counts are not: ``[1, 1, 2]`` and ``[1, 2, 2]`` are
    not equivalent. Two ``None`` collections are equivalent; exactly one
    ``None`` is not. The same object is equivalent to itself without being
    iterated.

    Returns
    -------
    EquivalenceResult
        ``(equivalent, reason)``; ``reason`` is diagnostic text only.
    """
    if expected is actual:
        return EquivalenceResult(True)
    if expected is None or actual is None:
        return EquivalenceResult(False, ONE_COLLECTION_NULL)

    matcher = _Matcher(comparer)
    expected_counts = _ElementCounts.of(expected, matcher)
    actual_counts = _ElementCounts.of(actual, matcher)

    if expected_counts.distinct != actual_counts.distinct:
        return EquivalenceResult(False, DIFFERENT_UNIQUE_COUNT)
    for element, count in expected_counts:
        if actual_counts.count(element) != count:
            return EquivalenceResult(False, DIFFERENT_ELEMENT_COUNTS)
    return EquivalenceResult(True)


def compare_not_equivalent(
    expected: Iterable[Any] | None,
    actual: Iterable[Any] | None,
    comparer: Equality | None = None,
) -> bool:
    return not compare_equivalence(expected, actual, comparer).equivalent


def compare_subset(subset: Iterable[Any], superset: Iterable[Any]) -> SubsetResult:
    """Check that every element of ``subset`` occurs somewhere in ``superset``.

    This is membership only: repeated elements in ``subset`` need just one
    occurrence in ``superset`` (``[1, 1]`` is a subset of ``[1]``), unlike
    :func:`compare_equivalence`, which counts.

    Raises
    ------
    AssertionUsageError
        If either argument is None.
    """
    if subset is None:
        raise AssertionUsageError(messages.NULL_PARAMETER.format("compare_subset", "subset"))
    if superset is None:
        raise AssertionUsageError(messages.NULL_PARAMETER.format("compare_subset", "superset"))

    members = _ElementCounts.of(superset, _Matcher(None))
    for element in subset:
        if element not in members:
            return SubsetResult(False, element)
    return SubsetResult(True)


def find_duplicate(collection: Iterable[Any] | None) -> DuplicateResult:
    """Return the first element seen a second time, scanning once in order.

    ``None`` elements are skipped: they are never duplicates of each other.
    """
    if collection is None:
        return DuplicateResult(False)
    seen = _ElementCounts(_Matcher(None))
    for element in collection:
        if element is None:
            continue
        if element in seen:
            return DuplicateResult(True, element)
        seen.add(element)
    return DuplicateResult(False)


def _is_nested(value: Any) -> bool:
    # Mappings and sets iterate without their values or order; they compare whole.
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray, Mapping, Set))


_END = object()


def compare_sequences(
    expected: Iterable[Any] | None,
    actual: Iterable[Any] | None,
    comparer: Equality | None = None,
) -> SequenceResult:
    """Compare two collections element by element, in order.

    Elements that differ but are both ordered iterables (not strings, mappings
    or sets) are compared recursively; unequal mappings and sets are a
    mismatch at their index. The reason names the first index that differs.
    """
    if expected is actual:
        return SequenceResult(True, messages.BOTH_COLLECTIONS_SAME_REFERENCE.format("").strip())
    if expected is None or actual is None:
        return SequenceResult(False, ONE_COLLECTION_NULL)

    matcher = _Matcher(comparer)
    stack: list[tuple[Iterator[Any], Iterator[Any], int]] = [(iter(expected), iter(actual), 0)]
    while stack:
        expected_iter, actual_iter, position = stack.pop()
        for expected_item in expected_iter:
            actual_item = next(actual_iter, _END)
            if actual_item is _END:
                return SequenceResult(False, messages.NUMBER_OF_ELEMENTS_DIFF)
            if matcher.same(expected_item, actual_item):
                position += 1
                continue
            if _is_nested(expected_item) and _is_nested(actual_item):
                stack.append((expected_iter, actual_iter, position + 1))
                stack.append((iter(expected_item), iter(actual_item), 0))
                break
            return SequenceResult(
                False,
                messages.ELEMENTS_AT_INDEX_DONT_MATCH.format(
                    position, messages.render_value(expected_item), messages.render_value(actual_item)
                ),
            )
        else:
            if next(actual_iter, _END) is not _END:
                return SequenceResult(False, messages.NUMBER_OF_ELEMENTS_DIFF)
    return SequenceResult(True, messages.BOTH_COLLECTIONS_SAME_ELEMENTS.format("").strip())
