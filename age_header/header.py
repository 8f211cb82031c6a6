"""
age header encoding and decoding.

Wire format:
    age-encryption.org/v1
    -> <type> <arg> ...
    <base64 body line, 48 decoded bytes>
    <final base64 body line, fewer than 48 decoded bytes, may be empty>
    ... more stanzas ...
    --- <base64 MAC>
    <payload>

The MAC covers every byte from the version line through the "---" of the
footer. Decoding returns that region as a slice of the input so it can be
authenticated as-is; encode_header_no_mac() produces the same bytes for
the sending side.
"""
from __future__ import annotations

import logging
from typing import Iterable, NamedTuple

from age_header.encoding import BODY_LINE_SIZE, decode_base64, encode_base64
from age_header.errors import (
    Base64DecodeError,
    InvalidHeaderError,
    InvalidStanzaError,
    InvalidVersionError,
    OutOfBoundsError,
)
from age_header.reader import ByteReader
from age_header.stanza import Stanza

logger = logging.getLogger(__name__)

# Format constants
VERSION_LINE = "age-encryption.org/v1"
STANZA_PREFIX = "-> "
FOOTER = "---"
MAC_PREFIX = FOOTER + " "

_MAC_PREFIX_BYTES = MAC_PREFIX.encode("ascii")


class ParsedHeader(NamedTuple):
    """Decoded header components."""
    recipients: list[Stanza]
    mac: bytes
    header_no_mac: bytes
    rest: bytes


def _parse_stanza(reader: ByteReader) -> Stanza:
    try:
        prefix = reader.read_string(len(STANZA_PREFIX))
    except OutOfBoundsError as e:
        raise InvalidStanzaError("Header truncated before stanza") from e
    if prefix != STANZA_PREFIX:
        raise InvalidStanzaError(f"Invalid stanza prefix: {prefix!r}")

    args_line = reader.read_line()
    if args_line is None:
        raise InvalidStanzaError("Missing stanza argument line")
    args = args_line.split(" ")
    if any(not arg for arg in args):
        raise InvalidStanzaError(f"Empty argument in stanza line: {args_line!r}")

    chunks = []
    while True:
        line = reader.read_line()
        if line is None:
            raise InvalidStanzaError("Unterminated stanza body")
        try:
            chunk = decode_base64(line)
        except Base64DecodeError as e:
            raise InvalidStanzaError(f"Invalid stanza body line: {e}") from e
        if len(chunk) > BODY_LINE_SIZE:
            raise InvalidStanzaError(
                f"Stanza body line too long: {len(chunk)} bytes (max {BODY_LINE_SIZE})"
            )
        chunks.append(chunk)
        # A short line (possibly empty) ends the body
        if len(chunk) < BODY_LINE_SIZE:
            break

    return Stanza(args, b"".join(chunks))


def decode_header(data: bytes | bytearray | memoryview) -> ParsedHeader:
    """
    Decode an age header from the start of a file.

    Args:
        data: File bytes; anything after the MAC line is returned as rest

    Returns:
        ParsedHeader with recipient stanzas, MAC, the MAC-covered bytes
        and the remaining payload

    Raises:
        InvalidVersionError: If the version line is missing or wrong
        InvalidStanzaError: If a stanza is malformed or the header is truncated
        InvalidHeaderError: If the MAC line is missing or malformed
        InvalidHeaderByteError: If a text line contains a disallowed byte
    """
    reader = ByteReader(data)

    version = reader.read_line()
    if version != VERSION_LINE:
        raise InvalidVersionError(f"Invalid version line: {version!r}", version=version)

    recipients = []
    while True:
        recipients.append(_parse_stanza(reader))
        # Peek only; a non-matching footer is the start of the next stanza
        if reader.peek(len(MAC_PREFIX)) == _MAC_PREFIX_BYTES:
            break

    header_no_mac = bytes(reader.prefix(reader.offset + len(FOOTER)))
    reader.read_string(len(MAC_PREFIX))
    mac_line = reader.read_line()
    if mac_line is None:
        raise InvalidHeaderError("Missing MAC line")
    try:
        mac = decode_base64(mac_line)
    except Base64DecodeError as e:
        raise InvalidHeaderError(f"Invalid header MAC: {e}") from e

    logger.debug(
        "Decoded header: %d stanza(s), %d header bytes",
        len(recipients), reader.offset,
    )
    return ParsedHeader(
        recipients=recipients,
        mac=mac,
        header_no_mac=header_no_mac,
        rest=bytes(reader.rest()),
    )


def encode_header_no_mac(recipients: Iterable[Stanza]) -> bytes:
    """
    Encode the MAC-covered part of a header, ending with "---".

    Each body is split into 48-byte lines. A body whose length is a
    multiple of 48, including an empty body, gets a trailing empty line
    so the parser can find its end.

    Raises:
        InvalidHeaderError: If there are no recipient stanzas
    """
    recipients = list(recipients)
    if not recipients:
        raise InvalidHeaderError("Header needs at least one recipient stanza")

    lines = [VERSION_LINE + "\n"]
    for stanza in recipients:
        lines.append(STANZA_PREFIX + " ".join(stanza.args) + "\n")
        body = stanza.body
        for i in range(0, len(body), BODY_LINE_SIZE):
            lines.append(encode_base64(body[i:i + BODY_LINE_SIZE]) + "\n")
        if len(body) % BODY_LINE_SIZE == 0:
            lines.append("\n")
    lines.append(FOOTER)

    # Stanza arguments only hold characters that map to single bytes
    return "".join(lines).encode("latin-1")


def encode_header(recipients: Iterable[Stanza], mac: bytes) -> bytes:
    """
    Encode a complete header, MAC line included.

    Args:
        recipients: Stanzas in wire order
        mac: Header MAC computed over encode_header_no_mac(recipients)

    Returns:
        Header bytes ready to prepend to the payload
    """
    header = encode_header_no_mac(recipients) + f" {encode_base64(mac)}\n".encode("ascii")
    logger.debug("Encoded header: %d bytes", len(header))
    return header
