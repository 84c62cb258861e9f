"""Assertkit - assertions with multiset comparison and deferred failure scopes."""

from .comparison import (
    EqualityComparer,
    compare_equivalence,
    compare_not_equivalent,
    compare_sequences,
    compare_subset,
    find_duplicate,
)
from .config import AssertionSettings, get_settings, reset_settings
from .errors import (
    AggregateAssertionError,
    AssertionFailedError,
    AssertionInconclusiveError,
    AssertionUsageError,
    ScopeError,
)
from .outcomes import fail, inconclusive
from .records import FailureLocation, FailureRecord
from .scope import AssertionScope, assertion_scope, close_scope, current_scope, open_scope
from .signals import signal_failure
from .version import __version__


__all__ = [
    # Comparison
    "EqualityComparer",
    "compare_equivalence",
    "compare_not_equivalent",
    "compare_subset",
    "compare_sequences",
    "find_duplicate",
    # Scopes and signaling
    "AssertionScope",
    "assertion_scope",
    "open_scope",
    "close_scope",
    "current_scope",
    "signal_failure",
    # Outcomes
    "fail",
    "inconclusive",
    # Errors
    "AssertionFailedError",
    "AggregateAssertionError",
    "AssertionInconclusiveError",
    "AssertionUsageError",
    "ScopeError",
    "FailureLocation",
    "FailureRecord",
    # Configuration
    "AssertionSettings",
    "get_settings",
    "reset_settings",
]
