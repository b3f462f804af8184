"""Exception classes raised while building OSC messages."""

from typing import Any, Optional

__all__ = (
    "EmptyAddressError",
    "InvalidTypeTagError",
    "OSCMessageError",
    "UnsupportedScalarKindError",
)


class OSCMessageError(RuntimeError):
    """Base class for all errors raised by the OSC message builder."""

    pass


class UnsupportedScalarKindError(OSCMessageError):
    """Exception raised when a value in the input data has no OSC type tag
    mapping, e.g. a byte string or an arbitrary object.
    """

    value: Any
    """The value that could not be mapped."""

    def __init__(self, value: Any, message: Optional[str] = None):
        """Constructor.

        Parameters:
            value: the offending value
            message: the error message
        """
        message = (
            message
            or f"Unsupported value of type {type(value).__name__!r}: {value!r}"
        )
        super().__init__(message)
        self.value = value


class EmptyAddressError(OSCMessageError):
    """Exception raised when an OSC message is built with an empty address
    pattern.
    """

    def __init__(self, message: Optional[str] = None):
        message = message or "OSC address pattern must not be empty"
        super().__init__(message)


class InvalidTypeTagError(OSCMessageError, ValueError):
    """Exception raised when a type tag alphabet is configured with something
    that is not a single, non-whitespace character.
    """

    def __init__(self, message: Optional[str] = None):
        message = message or "Type tags must be single non-whitespace characters"
        super().__init__(message)
