from store.base import StoreBase
from store.codec import BINARY_KEYS, decode_value, encode_value
from store.keys import (
    MAX_NAME_LENGTH,
    NVRAM_PREFIX,
    PAIRING_PREFIX,
    PAIRING_SUFFIX,
    logical_key,
    nvram_key,
)
from store.nvram_store import NvramStore
from store.rwlock import RWLock

__all__ = [
    "StoreBase",
    "NvramStore",
    "RWLock",
    "BINARY_KEYS",
    "encode_value",
    "decode_value",
    "MAX_NAME_LENGTH",
    "NVRAM_PREFIX",
    "PAIRING_PREFIX",
    "PAIRING_SUFFIX",
    "nvram_key",
    "logical_key",
]
