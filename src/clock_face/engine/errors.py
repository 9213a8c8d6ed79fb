"""Engine exceptions."""

from __future__ import annotations


class ClockFaceError(Exception):
    """Base class for clock face errors."""


class ClockConfigurationError(ClockFaceError):
    """A clock face was set up wrong: missing hands, bad interval, or started twice."""
