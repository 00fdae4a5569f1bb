"""Store base class (abstract).

Servers should depend on this type so the NVRAM store can be replaced by a
filesystem or memory store without touching server logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StoreBase(ABC):
    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store a value under key, replacing any previous value."""
        ...

    @abstractmethod
    def get(self, key: str) -> bytes:
        """Get the value for key; raises NotFoundError when unset."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key."""
        ...

    @abstractmethod
    def keys_with_suffix(self, suffix: str) -> list[str]:
        """List stored keys ending with suffix (any order)."""
        ...
