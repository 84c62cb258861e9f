"""Console rendering of assertion failures using Rich."""

from __future__ import annotations

import sys

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel

from assertkit.errors import AggregateAssertionError, AssertionFailedError
from assertkit.records import FailureRecord


class ConsoleReporter:
    """Print assertion failures as Rich panels.

    A single failure becomes one panel; an aggregate becomes a panel holding
    one nested panel per collected failure, in the order they were signaled.
    """

    def __init__(self, console: Console | None = None, color: str = "red") -> None:
        self.console = console or Console(file=sys.__stdout__)
        self.color = color

    def _print_section_header(self, title: str) -> None:
        width = self.console.width
        header_title = f" {title} "
        fill = max(width - len(header_title), 0)
        left = fill // 2
        right = fill - left
        self.console.print("=" * left + header_title + "=" * right)

    def _format_record(self, record: FailureRecord) -> list[str]:
        lines = [record.description]
        if record.location is not None:
            lines.append(f"at {record.location}")
        return lines

    def _build_failure_panel(self, title: str, lines: list[str]) -> Panel:
        return Panel(
            "\n".join(escape(line) for line in lines) or " ",
            title=escape(title),
            title_align="left",
            border_style=self.color,
            expand=True,
            padding=(1, 1),
        )

    def build(self, error: AssertionFailedError) -> Panel:
        """Return the renderable for ``error`` without printing it."""
        if isinstance(error, AggregateAssertionError):
            nested_panels = [
                self._build_failure_panel(f"{index}) {failure.record.assertion_name}", self._format_record(failure.record))
                for index, failure in enumerate(error.failures, start=1)
            ]
            return Panel(
                Group(*nested_panels),
                title=escape(error.record.message),
                title_align="left",
                border_style=self.color,
                expand=True,
                padding=(1, 1),
            )
        return self._build_failure_panel(error.record.assertion_name, self._format_record(error.record))

    def report(self, error: AssertionFailedError) -> None:
        self.console.print()
        self._print_section_header("ASSERTION FAILURES")
        self.console.print(self.build(error))
        self.console.print()
