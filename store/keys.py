"""Mapping between store keys and NVRAM variable names.

Store keys are stored as `hkt_<key>`. Pairing keys arrive as
`<hex of the controller UUID>.pairing`, which would blow the 64 character
NVRAM name limit, so they are stored as `hkt_p_<UUID>` instead and turned
back into the hex form when enumerating.
"""

from __future__ import annotations

import binascii
from typing import Optional

from common.logger import get_logger

NVRAM_PREFIX = "hkt_"
PAIRING_PREFIX = "p_"
PAIRING_SUFFIX = ".pairing"
MAX_NAME_LENGTH = 64


def is_pairing_key(key: str) -> bool:
    return key.endswith(PAIRING_SUFFIX)


def is_pairing_name(name: str) -> bool:
    return name.startswith(NVRAM_PREFIX + PAIRING_PREFIX)


def _is_safe_name(name: str) -> bool:
    # `show` prints name=value lines; the name must survive that round trip.
    return name.isprintable() and "=" not in name and not any(c.isspace() for c in name)


def _decode_pairing_id(hex_id: str) -> Optional[str]:
    try:
        raw = binascii.unhexlify(hex_id)
        text = raw.decode("utf-8")
    except ValueError:
        return None
    # Only canonical lowercase hex maps back to the same key.
    if raw.hex() != hex_id or not _is_safe_name(text):
        return None
    return text


def nvram_key(key: str) -> str:
    """Convert a store key to an NVRAM variable name.

    A pairing key whose id is not canonical hex of a plain-text name falls
    back to `hkt_<key>`; the entry is then not listed by
    keys_with_suffix(".pairing").
    """
    if is_pairing_key(key):
        hex_id = key[: -len(PAIRING_SUFFIX)]
        text = _decode_pairing_id(hex_id)
        if text is None:
            get_logger(__name__).warning(
                "keys: pairing id is not decodable hex, storing as opaque key key=%s", key
            )
            return NVRAM_PREFIX + key
        return NVRAM_PREFIX + PAIRING_PREFIX + text
    return NVRAM_PREFIX + key


def logical_key(name: str) -> str:
    """Rebuild the store key for an `hkt_p_<UUID>` variable name."""
    text = name[len(NVRAM_PREFIX + PAIRING_PREFIX):]
    return text.encode("utf-8", "surrogateescape").hex() + PAIRING_SUFFIX
