"""MemoryNvram: in-process NVRAM with the same working-copy/flash split."""

from __future__ import annotations

from typing import Optional

from common.logger import get_logger
from nvram.base import NvramBase


class MemoryNvram(NvramBase):
    """Dict-backed NVRAM.

    `data` is the working copy, `committed` the flash contents as of the last
    commit(), and `commit_count` the number of flash writes.
    """

    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(data or {})
        self.committed: dict[str, str] = dict(self.data)
        self.commit_count = 0

    def get(self, name: str) -> str:
        return self.data.get(name, "")

    def set(self, name: str, value: str) -> None:
        self.data[name] = value

    def unset(self, name: str) -> None:
        self.data.pop(name, None)

    def commit(self) -> None:
        self.commit_count += 1
        self.committed = dict(self.data)
        get_logger(__name__).info(
            "nvram: commit (memory) vars=%d count=%d", len(self.data), self.commit_count
        )

    def show(self) -> str:
        return "\n".join(f"{k}={v}" for k, v in self.data.items())

    def power_cycle(self) -> None:
        """Drop uncommitted changes, as a reboot would."""
        self.data = dict(self.committed)
