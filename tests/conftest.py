"""Pytest fixtures for header codec tests."""

import os

import pytest
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from age_header import Stanza, encode_base64


def _header_hmac(file_key: bytes) -> hmac.HMAC:
    mac_key = HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=None,
        info=b"header",
    ).derive(file_key)
    return hmac.HMAC(mac_key, hashes.SHA256())


@pytest.fixture
def header_hmac():
    """Factory for HMAC-SHA256 keyed the way age derives its header MAC key."""
    return _header_hmac


@pytest.fixture
def file_key():
    """Random 16-byte file key."""
    return os.urandom(16)


@pytest.fixture
def x25519_stanza():
    """Stanza with a real X25519 ephemeral share and a 32-byte wrapped key."""
    share = X25519PrivateKey.generate().public_key().public_bytes(
        Encoding.Raw, PublicFormat.Raw
    )
    return Stanza(["X25519", encode_base64(share)], os.urandom(32))


@pytest.fixture
def scrypt_stanza():
    """scrypt stanza with salt and work factor arguments."""
    return Stanza(["scrypt", encode_base64(os.urandom(16)), "18"], os.urandom(32))


@pytest.fixture
def mixed_stanzas(x25519_stanza, scrypt_stanza):
    """Stanzas whose bodies cover short, exact-multiple and empty lengths."""
    return [
        x25519_stanza,
        Stanza(["ssh-ed25519", "Xyz012", encode_base64(os.urandom(32))], os.urandom(96)),
        Stanza(["empty-body"], b""),
        Stanza(["long", "a", "b", "c"], os.urandom(150)),
        scrypt_stanza,
    ]
