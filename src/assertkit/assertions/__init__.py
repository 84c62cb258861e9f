"""Assertion library for test validation.

Each module is a family of checks that report failures through
:func:`assertkit.signals.signal_failure`, so all of them honour an active
assertion scope.
"""

from assertkit.assertions import (
    python_collection,
    python_exception,
    python_number,
    python_object,
    python_string,
)
from assertkit.assertions.python_exception import raises, throws, throws_exactly

__all__ = [
    "python_collection",
    "python_exception",
    "python_number",
    "python_object",
    "python_string",
    "raises",
    "throws",
    "throws_exactly",
]
