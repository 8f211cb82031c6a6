"""Header inspection schemas.

Summarises an age header without touching the payload or any key
material, for tooling that needs to report what a file is encrypted to.
Requires the ``pydantic`` extra.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from age_header.encoding import encode_base64
from age_header.header import VERSION_LINE, decode_header


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class StanzaInfo(BaseModel):
    """One recipient stanza, body reduced to its size."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    type: str = Field(description="Recipient type (first stanza argument)")
    args: list[str] = Field(description="Remaining stanza arguments")
    body_size: int = Field(ge=0, description="Decoded body length in bytes")


class HeaderInfo(BaseModel):
    """Summary of a decoded header."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    version: str = Field(default=VERSION_LINE, description="Format version line")
    recipients: list[StanzaInfo] = Field(description="Stanzas in wire order")
    mac: str = Field(description="Header MAC, unpadded base64")
    header_size: int = Field(ge=0, description="Header length including the MAC line")
    payload_size: int = Field(ge=0, description="Bytes following the header")


def inspect_header(data: bytes | bytearray | memoryview) -> HeaderInfo:
    """Decode a header and describe it. Raises the same errors as decode_header()."""
    parsed = decode_header(data)
    recipients = [
        StanzaInfo(type=s.type, args=list(s.args[1:]), body_size=len(s.body))
        for s in parsed.recipients
    ]
    return HeaderInfo(
        recipients=recipients,
        mac=encode_base64(parsed.mac),
        header_size=len(data) - len(parsed.rest),
        payload_size=len(parsed.rest),
    )
