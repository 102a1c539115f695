"""Exceptions raised by Capline."""


class CaplineError(Exception):
    """Base class for Capline errors."""


class FormatError(CaplineError, ValueError):
    """Malformed timestamp, or subtitle content with no parseable entry."""
