from nvram.base import NvramBase
from nvram.command import DEFAULT_NVRAM_BIN, NvramCommand
from nvram.errors import (
    DecodeError,
    ExternalToolError,
    KeyTooLongError,
    NotFoundError,
    NvramError,
)
from nvram.memory import MemoryNvram

__all__ = [
    "DEFAULT_NVRAM_BIN",
    "NvramBase",
    "NvramCommand",
    "MemoryNvram",
    "NvramError",
    "ExternalToolError",
    "NotFoundError",
    "DecodeError",
    "KeyTooLongError",
]
