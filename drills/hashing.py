"""FNV-1a hashing of identifiers and salted scrypt hashing of secrets."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import secrets

SALT_SIZE = 16
HASH_SIZE = 32
_SCRYPT_N = 16384
_SCRYPT_R = 8
_SCRYPT_P = 1
_SCRYPT_MAXMEM = 64 * 1024 * 1024

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193
_UINT32_MASK = 0xFFFFFFFF


def hash_vin(vin: str) -> str:
    """Return the 32-bit FNV-1a hash of ``vin`` as a decimal string."""
    value = _FNV32_OFFSET
    for byte in vin.encode("utf-8"):
        value ^= byte
        value = (value * _FNV32_PRIME) & _UINT32_MASK
    return str(value)


def _scrypt(key: str, salt: bytes) -> bytes:
    return hashlib.scrypt(
        key.encode("utf-8"),
        salt=salt,
        n=_SCRYPT_N,
        r=_SCRYPT_R,
        p=_SCRYPT_P,
        maxmem=_SCRYPT_MAXMEM,
        dklen=HASH_SIZE,
    )


def hash_key_with_salt(key: str) -> str:
    """Hash ``key`` with scrypt and a fresh random salt.

    The result is the base64 encoding of the derived key followed by the salt.
    """
    salt = secrets.token_bytes(SALT_SIZE)
    return base64.b64encode(_scrypt(key, salt) + salt).decode("ascii")


def check_hash_key(key: str, hashed_string: str) -> bool:
    """Return True if ``key`` matches a value made by :func:`hash_key_with_salt`.

    Raises ValueError when ``hashed_string`` is not valid base64 or is too
    short to hold a salt.
    """
    try:
        hashed = base64.b64decode(hashed_string, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 hash: {exc}") from exc
    if len(hashed) < SALT_SIZE:
        raise ValueError("hash is too short to contain a salt")
    stored, salt = hashed[:-SALT_SIZE], hashed[-SALT_SIZE:]
    return hmac.compare_digest(_scrypt(key, salt), stored)