"""
Base64 helpers for header text lines.

The header uses the standard alphabet without padding. Decoding is strict:
padding, whitespace and non-canonical trailing bits are all rejected, so
every body line has exactly one textual form.
"""

import base64
import binascii

from age_header.errors import Base64DecodeError

# Decoded bytes per stanza body line
BODY_LINE_SIZE = 48


def encode_base64(data: bytes) -> str:
    """Encode bytes to unpadded standard base64."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def decode_base64(text: str) -> bytes:
    """
    Decode unpadded standard base64.

    Args:
        text: Encoded line without padding or line terminator

    Returns:
        Decoded bytes

    Raises:
        Base64DecodeError: If the text is not canonical unpadded base64
    """
    if "=" in text:
        raise Base64DecodeError("Unexpected padding in base64 text")
    if len(text) % 4 == 1:
        raise Base64DecodeError(f"Invalid base64 length: {len(text)}")

    padded = text + "=" * (-len(text) % 4)
    try:
        decoded = base64.b64decode(padded.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as e:
        raise Base64DecodeError(f"Invalid base64 text: {e}") from e

    # Reject encodings with non-zero unused bits
    if encode_base64(decoded) != text:
        raise Base64DecodeError("Non-canonical base64 encoding")
    return decoded
