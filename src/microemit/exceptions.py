"""
Errors raised by microemit itself.

Exceptions raised inside listeners are never wrapped; they reach the
``emit`` caller unchanged.
"""


class MicroemitError(Exception):
    """Base class for errors raised by the library."""


class InvalidEventError(MicroemitError, ValueError):
    """
    Raised when an operation receives an empty event name.

    This is a programming error on the caller's side and is not retried.
    """

    def __init__(self, message: str = "Event name must not be an empty string.") -> None:
        super().__init__(message)
