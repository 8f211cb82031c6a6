"""
Forward-only byte cursor over a header buffer.

Slices are taken from a memoryview over the input, so reads never copy
it (a memoryview argument is copied to bytes once, up front). Every slice
returned as text is checked against the header's text byte range first.
"""
from __future__ import annotations

from age_header.errors import InvalidHeaderByteError, OutOfBoundsError

MIN_TEXT_BYTE = 32
MAX_TEXT_BYTE = 136

_NEWLINE = 0x0A


class ByteReader:
    """
    Sequential reader with string, line and remainder primitives.

    Example:
        reader = ByteReader(b"age-encryption.org/v1\\n-> X25519 ...")
        version = reader.read_line()
        prefix = reader.read_string(3)
    """

    def __init__(self, data: bytes | bytearray | memoryview):
        if not isinstance(data, (bytes, bytearray)):
            data = bytes(data)
        self._data = data
        self._buf = memoryview(data)
        self._pos = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._pos

    def _to_text(self, view: memoryview, start: int) -> str:
        for i, b in enumerate(view):
            if b < MIN_TEXT_BYTE or b > MAX_TEXT_BYTE:
                raise InvalidHeaderByteError(
                    f"Invalid byte 0x{b:02x} in header at offset {start + i}",
                    byte=b,
                    offset=start + i,
                )
        # One character per byte
        return view.tobytes().decode("latin-1")

    def read_string(self, n: int) -> str:
        """
        Consume exactly n bytes and return them as text.

        Raises:
            OutOfBoundsError: If fewer than n bytes remain
            InvalidHeaderByteError: If a byte is outside the text range
        """
        if n > self.remaining:
            raise OutOfBoundsError(
                f"Wanted {n} bytes, only {self.remaining} remain",
                wanted=n,
                available=self.remaining,
            )
        start = self._pos
        view = self._buf[start:start + n]
        text = self._to_text(view, start)
        self._pos += n
        return text

    def read_line(self) -> str | None:
        """
        Consume through the next newline and return the line without it.

        Returns None, consuming nothing, if no newline remains.
        """
        start = self._pos
        end = self._data.find(_NEWLINE, start)
        if end < 0:
            return None
        text = self._to_text(self._buf[start:end], start)
        self._pos = end + 1
        return text

    def peek(self, n: int) -> bytes | None:
        """Return the next n raw bytes without consuming them, or None if short."""
        if n > self.remaining:
            return None
        return self._buf[self._pos:self._pos + n].tobytes()

    def rest(self) -> memoryview:
        """Return all unconsumed bytes without advancing."""
        return self._buf[self._pos:]

    def prefix(self, n: int) -> memoryview:
        """Return the first n bytes of the input, consumed or not."""
        return self._buf[:n]
