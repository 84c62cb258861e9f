"""Reporters for assertion failures."""

from assertkit.reports.console import ConsoleReporter

__all__ = ["ConsoleReporter"]
