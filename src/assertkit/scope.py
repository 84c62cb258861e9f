"""Assertion scopes: collect failures from a block of checks and raise them together.

The active scope is held in a ``ContextVar``. It follows the logical flow of
execution across ``await`` points, is inherited by tasks created while it is
active (and by work started with ``contextvars.copy_context().run`` or
``asyncio.to_thread``), and stays invisible to unrelated tasks and threads.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from enum import Enum

from assertkit import messages
from assertkit.errors import AggregateAssertionError, AssertionFailedError, ScopeError

logger = logging.getLogger(__name__)


class ScopeState(Enum):
    OPEN = "open"
    DRAINING = "draining"
    CLOSED = "closed"


@dataclass(slots=True, eq=False)
class AssertionScope:
    """Collector for failures signaled while the scope is active.

    Failures are appended under a lock, so several tasks or threads sharing
    the scope may fail concurrently. Only ``close()`` reads them out, once.
    """

    _failures: list[AssertionFailedError] = field(default_factory=list, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _state: ScopeState = ScopeState.OPEN
    _token: Token[AssertionScope | None] | None = field(default=None, repr=False)

    @property
    def state(self) -> ScopeState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is ScopeState.OPEN

    @property
    def failures(self) -> tuple[AssertionFailedError, ...]:
        """Snapshot of the failures collected so far, in the order they were added."""
        with self._lock:
            return tuple(self._failures)

    def add(self, error: AssertionFailedError) -> None:
        with self._lock:
            if self._state is not ScopeState.OPEN:
                raise ScopeError(messages.SCOPE_CLOSED.format(self._state.value))
            self._failures.append(error)

    def close(self) -> None:
        """Close the scope and raise what it collected.

        No failures: returns normally. One failure: re-raises that exception
        object unchanged. More: raises AggregateAssertionError. Closing an
        already closed scope does nothing.
        """
        __tracebackhide__ = True
        with self._lock:
            if self._state is not ScopeState.OPEN:
                return
            self._state = ScopeState.DRAINING
            failures, self._failures = self._failures, []

        self._release_ambient()
        with self._lock:
            self._state = ScopeState.CLOSED

        logger.debug("Closed assertion scope with %d failure(s)", len(failures))
        if not failures:
            return
        if len(failures) == 1:
            raise failures[0]
        raise AggregateAssertionError(failures)

    def _release_ambient(self) -> None:
        token, self._token = self._token, None
        if token is None:
            return
        try:
            CURRENT_SCOPE.reset(token)
        except ValueError:
            # Token belongs to another Context; clear the marker in this one.
            if CURRENT_SCOPE.get() is self:
                CURRENT_SCOPE.set(None)


CURRENT_SCOPE: ContextVar[AssertionScope | None] = ContextVar("assertion_scope", default=None)


def current_scope() -> AssertionScope | None:
    """Get the ambient assertion scope, or None if failures should raise immediately."""
    return CURRENT_SCOPE.get()


def open_scope() -> AssertionScope:
    """Open a scope and make it the ambient scope for the current context.

    Raises
    ------
    ScopeError
        If a scope is already open in this context. The existing scope is
        left untouched.
    """
    active = CURRENT_SCOPE.get()
    if active is not None and active.state is not ScopeState.CLOSED:
        raise ScopeError(messages.NESTED_SCOPE)
    scope = AssertionScope()
    scope._token = CURRENT_SCOPE.set(scope)
    logger.debug("Opened assertion scope %#x", id(scope))
    return scope


def close_scope(scope: AssertionScope) -> None:
    __tracebackhide__ = True
    scope.close()


@contextmanager
def assertion_scope() -> Iterator[AssertionScope]:
    """Collect assertion failures for the duration of the ``with`` block.

    The scope is closed on every exit path. If the block itself raises while
    failures are pending, the collected failures are raised and the block's
    exception is chained as their ``__context__``.
    """
    scope = open_scope()
    try:
        yield scope
    finally:
        scope.close()
