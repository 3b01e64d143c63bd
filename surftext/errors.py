"""Exceptions raised by the encoding engine."""

from __future__ import annotations


class EncodingError(ValueError):
    """Base class for every error the encoder signals on bad input."""


class InvalidZoneCountError(EncodingError):
    pass


class AlphabetExhaustedError(EncodingError):
    pass


class OutOfDomainError(EncodingError):
    """A value lies outside the span of the boundary table."""

    def __init__(self, value: float, low: float, high: float) -> None:
        super().__init__(f"Value {value!r} outside classifier domain [{low!r}, {high!r}]")
        self.value = value
        self.low = low
        self.high = high


class NotClassifiedError(EncodingError):
    pass


class SurfaceError(EncodingError):
    pass
