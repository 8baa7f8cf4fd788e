"""Exceptions raised by the on-call scheduler."""


class SchedulingError(Exception):
    """Base class for scheduler errors."""


class InputUnreadableError(SchedulingError, ValueError):
    """The availability table could not be read or decoded."""


class ConfigurationError(SchedulingError, ValueError):
    """Requirements or roster cannot be scheduled (e.g. zero people)."""
