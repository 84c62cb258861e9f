"""Failure records and call-site capture."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from types import FrameType, TracebackType

from assertkit.messages import format_failure

_PACKAGE = __name__.split(".")[0]
_SKIPPED_MODULES = frozenset({"contextlib"})


@dataclass(frozen=True, slots=True)
class FailureLocation:
    """Source position of the statement that triggered a failure.

    Attributes
    ----------
    filename
        Path of the source file, as reported by the code object.
    lineno
        Line number being executed in that frame when the failure was signaled.
    function
        Name of the function containing the statement.
    """

    filename: str
    lineno: int
    function: str

    @classmethod
    def from_frame(cls, frame: FrameType) -> FailureLocation:
        return cls(filename=frame.f_code.co_filename, lineno=frame.f_lineno, function=frame.f_code.co_name)

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.function}"


@dataclass(frozen=True, slots=True)
class FailureRecord:
    """Immutable description of one failed check.

    Attributes
    ----------
    assertion_name
        Qualified name of the assertion that failed (e.g. ``collection.are_equivalent``).
    message
        Detail text explaining the failure, without the ``"<name> failed."`` prefix.
    location
        Where the assertion was called from, or None when no caller frame was available.
    """

    assertion_name: str
    message: str
    location: FailureLocation | None = None

    @property
    def description(self) -> str:
        return format_failure(self.assertion_name, self.message)


def _is_internal(frame: FrameType) -> bool:
    module_name = frame.f_globals.get("__name__", "")
    return (
        module_name == _PACKAGE
        or module_name.startswith(_PACKAGE + ".")
        or module_name in _SKIPPED_MODULES
    )


def caller_frame() -> FrameType | None:
    """Return the innermost frame outside this package.

    Frames belonging to the toolkit itself (and ``contextlib`` plumbing) are
    skipped so the location points at the test code that made the call.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None and _is_internal(frame):
            frame = frame.f_back
        return frame
    finally:
        del frame


def capture_location() -> FailureLocation | None:
    frame = caller_frame()
    try:
        return FailureLocation.from_frame(frame) if frame is not None else None
    finally:
        del frame


def traceback_from(frame: FrameType | None) -> TracebackType | None:
    """Build a traceback running from the outermost frame down to ``frame``.

    Used for failures that are stored and raised later, so the raised
    exception still ends at the statement that originally failed.
    """
    tb: TracebackType | None = None
    while frame is not None:
        tb = TracebackType(tb, frame, frame.f_lasti, frame.f_lineno)
        frame = frame.f_back
    return tb
