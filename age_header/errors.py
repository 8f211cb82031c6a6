"""
Exception classes for the age header codec.
"""
from __future__ import annotations


class HeaderError(ValueError):
    """Base exception for header encoding/decoding errors."""
    pass


class OutOfBoundsError(HeaderError):
    """Fewer bytes remain than a fixed-size read requires."""

    def __init__(self, message: str, wanted: int, available: int):
        super().__init__(message)
        self.wanted = wanted
        self.available = available


class InvalidHeaderByteError(HeaderError):
    """A text region contains a byte outside the allowed range."""

    def __init__(self, message: str, byte: int, offset: int):
        super().__init__(message)
        self.byte = byte
        self.offset = offset


class InvalidVersionError(HeaderError):
    """The first line is not the expected version string."""

    def __init__(self, message: str, version: str | None = None):
        super().__init__(message)
        self.version = version


class InvalidStanzaError(HeaderError):
    """A recipient stanza is malformed or truncated."""
    pass


class InvalidHeaderError(HeaderError):
    """The header footer or MAC line is malformed."""
    pass


class Base64DecodeError(HeaderError):
    """Text is not valid unpadded standard base64."""
    pass
