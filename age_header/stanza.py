"""
Recipient stanza value type.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from age_header.errors import InvalidStanzaError
from age_header.reader import MAX_TEXT_BYTE, MIN_TEXT_BYTE


@dataclass(frozen=True)
class Stanza:
    """
    One recipient entry in a header.

    The first argument names the recipient type (e.g. "X25519", "scrypt");
    the rest are type-specific. The body is opaque wrapped key material.

    Example:
        stanza = Stanza(["X25519", ephemeral_share], wrapped_key)
        stanza.type  # "X25519"
    """

    args: Sequence[str]
    body: bytes = b""

    def __post_init__(self):
        args = tuple(self.args)
        if not args:
            raise InvalidStanzaError("Stanza needs at least one argument")
        for arg in args:
            _check_arg(arg)
        object.__setattr__(self, "args", args)
        object.__setattr__(self, "body", bytes(self.body))

    @property
    def type(self) -> str:
        """Recipient type, the first argument."""
        return self.args[0]


def _check_arg(arg: str) -> None:
    if not isinstance(arg, str):
        raise InvalidStanzaError(f"Stanza argument must be str, got {type(arg).__name__}")
    if not arg:
        raise InvalidStanzaError("Empty stanza argument")
    for ch in arg:
        # Space separates arguments, so it is excluded here
        if not MIN_TEXT_BYTE < ord(ch) <= MAX_TEXT_BYTE:
            raise InvalidStanzaError(f"Invalid character {ch!r} in stanza argument {arg!r}")
