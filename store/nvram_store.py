"""NvramStore: key/value store on router NVRAM with minimal flash commits.

Commit strategy: flash has a limited number of write cycles, so `nvram
commit` only runs when pairing data changes. Other data (uuid, keypair,
schema, version, configHash) is written to the NVRAM working copy but not
committed. That gives:
  - normal startup: 0 flash writes
  - per pairing added: 1 flash write
  - per pairing removed: 1 flash write

If power is lost before the first pairing, the server regenerates the
uncommitted data (new uuid/keypair) on next start. Once paired, the commit
carries every pending change, so keypair and pairings stay in sync.
"""

from __future__ import annotations

from typing import Optional

from common.logger import get_logger
from nvram.base import NvramBase
from nvram.command import NvramCommand
from nvram.errors import ExternalToolError, KeyTooLongError, NotFoundError
from store.base import StoreBase
from store.codec import decode_value, encode_value
from store.keys import (
    MAX_NAME_LENGTH,
    NVRAM_PREFIX,
    PAIRING_SUFFIX,
    is_pairing_key,
    is_pairing_name,
    logical_key,
    nvram_key,
)
from store.rwlock import RWLock


class NvramStore(StoreBase):
    """Store backed by NVRAM variables, one variable per key."""

    def __init__(self, nvram: Optional[NvramBase] = None):
        self.nvram: NvramBase = nvram or NvramCommand()
        self._lock = RWLock()

    @staticmethod
    def _name(key: str) -> str:
        name = nvram_key(key)
        if len(name) > MAX_NAME_LENGTH:
            raise KeyTooLongError(
                f"nvram name for key {key} is {len(name)} chars (max {MAX_NAME_LENGTH})"
            )
        return name

    def set(self, key: str, value: bytes) -> None:
        """Store value; commits to flash only for pairing keys.

        A commit error is raised after the value is already in the working
        copy. It is not rolled back.
        """
        name = self._name(key)
        encoded = encode_value(key, value)
        log = get_logger(__name__)
        with self._lock.write_locked():
            try:
                self.nvram.set(name, encoded)
            except ExternalToolError as e:
                raise ExternalToolError(
                    f"set {key}: {e}", args_=e.args_, returncode=e.returncode, stderr=e.stderr
                ) from e
            log.debug("store: set name=%s bytes=%d", name, len(value))

            if is_pairing_key(key):
                self.nvram.commit()

    def get(self, key: str) -> bytes:
        name = self._name(key)
        with self._lock.read_locked():
            value = self.nvram.get(name)
        if value == "":
            raise NotFoundError(f"no entry for key {key}")
        return decode_value(key, value)

    def delete(self, key: str) -> None:
        name = self._name(key)
        with self._lock.write_locked():
            self.nvram.unset(name)
            get_logger(__name__).debug("store: unset name=%s", name)

            if is_pairing_key(key):
                self.nvram.commit()

    def keys_with_suffix(self, suffix: str) -> list[str]:
        # Exclusive: the dump must not interleave with a mutation.
        with self._lock.write_locked():
            out = self.nvram.show()

        keys: list[str] = []
        for line in out.split("\n"):
            name, sep, _ = line.partition("=")
            if not sep or not name.startswith(NVRAM_PREFIX):
                continue

            if suffix == PAIRING_SUFFIX:
                if is_pairing_name(name):
                    keys.append(logical_key(name))
            else:
                key = name[len(NVRAM_PREFIX):]
                if key.endswith(suffix):
                    keys.append(key)
        return keys
