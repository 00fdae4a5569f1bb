"""Error types raised by the NVRAM adapter and the store built on it."""

from __future__ import annotations

from typing import Optional, Sequence


class NvramError(Exception):
    """Base class for every error raised by this package."""


class ExternalToolError(NvramError):
    """The nvram tool could not be started or exited non-zero."""

    def __init__(
        self,
        message: str,
        args_: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.args_ = list(args_)
        self.returncode = returncode
        self.stderr = stderr


class NotFoundError(NvramError, KeyError):
    """No value is stored under the requested key."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return Exception.__str__(self)


class DecodeError(NvramError, ValueError):
    """A stored hex value could not be decoded back to bytes."""


class KeyTooLongError(NvramError, ValueError):
    """The physical NVRAM name exceeds the firmware's name limit."""
