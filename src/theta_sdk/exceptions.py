"""Custom exception classes."""

__all__ = [
    "InvalidOptionValueError",
    "NotConnectedError",
    "ThetaError",
    "ThetaWebApiError",
]


class ThetaError(Exception):
    """Base class for all custom THETA client exceptions."""


class ThetaWebApiError(ThetaError):
    """The camera was reached but rejected the request or replied with an unreadable body."""


class NotConnectedError(ThetaError):
    """The camera could not be reached (timeout, refused connection, other transport failure)."""


class InvalidOptionValueError(ThetaError, TypeError):
    """A value of the wrong type was given for a camera option."""
