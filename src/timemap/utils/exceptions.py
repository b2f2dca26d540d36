"""Custom exceptions for timemap."""

from __future__ import annotations


class TimeMapError(Exception):
    """Base exception for timemap."""


class ConfigError(TimeMapError):
    """Invalid schedule configuration."""


class NonMonotonicTimeError(TimeMapError):
    """An instant was not strictly later than the end of the timeline."""


class InvalidCalendarDateError(TimeMapError):
    """A calendar date does not exist (e.g. February 30)."""


class IndexOutOfRangeError(TimeMapError, IndexError):
    """A step index past the end of the timeline."""


class UnknownMonthNameError(TimeMapError):
    """A month token is not in the month-name table."""


class WrongDirectiveKindError(TimeMapError):
    """A directive was routed to the handler for another keyword."""


class InvalidStepLengthError(TimeMapError, ValueError):
    """A TSTEP length is not a finite number of days."""
