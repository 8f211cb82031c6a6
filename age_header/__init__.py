"""
age header - Encoding and decoding of age file headers.

This package converts between the textual header at the start of an
age-encrypted file and a list of recipient stanzas plus the header MAC.
It performs no cryptography: wrapping file keys into stanza bodies and
computing the MAC are left to the caller.

Install the ``pydantic`` extra for `age_header.schemas.inspect_header`.
"""

from age_header.errors import (
    HeaderError,
    OutOfBoundsError,
    InvalidHeaderByteError,
    InvalidVersionError,
    InvalidStanzaError,
    InvalidHeaderError,
    Base64DecodeError,
)
from age_header.encoding import (
    BODY_LINE_SIZE,
    encode_base64,
    decode_base64,
)
from age_header.reader import ByteReader
from age_header.stanza import Stanza
from age_header.header import (
    VERSION_LINE,
    ParsedHeader,
    decode_header,
    encode_header,
    encode_header_no_mac,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "HeaderError",
    "OutOfBoundsError",
    "InvalidHeaderByteError",
    "InvalidVersionError",
    "InvalidStanzaError",
    "InvalidHeaderError",
    "Base64DecodeError",
    # Base64
    "BODY_LINE_SIZE",
    "encode_base64",
    "decode_base64",
    # Header codec
    "ByteReader",
    "Stanza",
    "VERSION_LINE",
    "ParsedHeader",
    "decode_header",
    "encode_header",
    "encode_header_no_mac",
]
