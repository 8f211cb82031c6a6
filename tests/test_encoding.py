"""Tests for unpadded base64 helpers."""

import pytest

from age_header.encoding import BODY_LINE_SIZE, decode_base64, encode_base64
from age_header.errors import Base64DecodeError


class TestEncodeBase64:
    """Tests for encode_base64()."""

    def test_strips_padding(self):
        """Output never carries '=' padding."""
        assert encode_base64(b"\x00\x00") == "AAA"
        assert encode_base64(b"\x00") == "AA"
        assert encode_base64(b"mac") == "bWFj"

    def test_empty(self):
        """Empty input encodes to empty text."""
        assert encode_base64(b"") == ""

    def test_full_body_line(self):
        """A full body line is 64 characters."""
        assert encode_base64(b"\x00" * BODY_LINE_SIZE) == "A" * 64

    def test_standard_alphabet(self):
        """Uses '+' and '/', not the URL-safe alphabet."""
        assert encode_base64(b"\xfb\xff") == "+/8"


class TestDecodeBase64:
    """Tests for decode_base64()."""

    def test_decode_unpadded(self):
        """Unpadded text decodes."""
        assert decode_base64("AAAA") == b"\x00\x00\x00"
        assert decode_base64("AAA") == b"\x00\x00"
        assert decode_base64("bWFj") == b"mac"

    def test_decode_empty(self):
        """Empty text decodes to empty bytes."""
        assert decode_base64("") == b""

    def test_rejects_padding(self):
        """Padded text raises Base64DecodeError."""
        with pytest.raises(Base64DecodeError, match="padding"):
            decode_base64("AAA=")

    def test_rejects_impossible_length(self):
        """A single trailing character can never be valid."""
        with pytest.raises(Base64DecodeError, match="length"):
            decode_base64("AAAAA")

    def test_rejects_non_canonical(self):
        """Non-zero unused trailing bits are rejected."""
        with pytest.raises(Base64DecodeError, match="Non-canonical"):
            decode_base64("AAB")

    def test_rejects_url_safe_alphabet(self):
        """'-' and '_' are not part of the standard alphabet."""
        with pytest.raises(Base64DecodeError):
            decode_base64("-_8")

    def test_rejects_whitespace(self):
        """Embedded whitespace is rejected."""
        with pytest.raises(Base64DecodeError):
            decode_base64("AA A")

    def test_rejects_non_ascii(self):
        """Non-ASCII characters are rejected."""
        with pytest.raises(Base64DecodeError):
            decode_base64("AA\x88A")
