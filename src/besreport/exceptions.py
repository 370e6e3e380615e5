"""Exception types raised by besreport computations."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for all report failures."""


class InvalidArgumentError(ReportError, ValueError):
    """Malformed input: negative sizes or counts, top_n below 1, bad names."""


class DivisionByZeroError(ReportError, ZeroDivisionError):
    """A percentage was requested against a zero grand total."""


class EmptyInputError(DivisionByZeroError):
    """A size report was requested over no records at all."""
