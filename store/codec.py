"""Value encoding: hex for binary keys, verbatim text for everything else."""

from __future__ import annotations

import binascii

from nvram.errors import DecodeError

# configHash is a raw MD5 digest; every other value is text (JSON, strings).
BINARY_KEYS = frozenset({"configHash"})


def is_binary_key(key: str) -> bool:
    return key in BINARY_KEYS


def encode_value(key: str, value: bytes) -> str:
    if is_binary_key(key):
        return value.hex()
    return value.decode("utf-8", "surrogateescape")


def decode_value(key: str, raw: str) -> bytes:
    if is_binary_key(key):
        try:
            return binascii.unhexlify(raw)
        except ValueError as e:
            raise DecodeError(f"decode {key}: {e}") from e
    return raw.encode("utf-8", "surrogateescape")
