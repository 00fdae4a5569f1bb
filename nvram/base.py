"""NVRAM adapter base class (abstract).

The store depends on this type, so the real command-line tool can be swapped
for an in-memory implementation (tests, dry runs) without changing store
logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class NvramBase(ABC):
    @abstractmethod
    def get(self, name: str) -> str:
        """Get the raw value of a variable ("" when it is not set)."""
        ...

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Set a variable in the working copy (not durable until commit())."""
        ...

    @abstractmethod
    def unset(self, name: str) -> None:
        """Remove a variable from the working copy."""
        ...

    @abstractmethod
    def commit(self) -> None:
        """Flush the working copy to flash."""
        ...

    @abstractmethod
    def show(self) -> str:
        """Dump every variable as newline-delimited name=value lines."""
        ...
