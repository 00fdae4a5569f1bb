"""NvramCommand: drives the firmware's `nvram` command-line tool."""

from __future__ import annotations

import os
import subprocess
from os import getenv
from typing import Optional

from dotenv import load_dotenv

from common.logger import get_logger
from nvram.base import NvramBase
from nvram.errors import ExternalToolError

load_dotenv()

DEFAULT_NVRAM_BIN = "nvram"


class NvramCommand(NvramBase):
    """Runs one `nvram` process per operation.

    Calls block until the tool exits. Nothing is retried and no timeout is
    applied; errors are raised as ExternalToolError.
    """

    def __init__(self, binary: Optional[str] = None):
        self.binary = binary or getenv("NVRAM_BIN") or DEFAULT_NVRAM_BIN

    def _run(self, *args: str) -> str:
        argv = [self.binary, *args]
        log = get_logger(__name__)
        log.debug("nvram: exec %s", args[0])
        try:
            proc = subprocess.run(argv, capture_output=True, check=False)
        except (OSError, ValueError) as e:
            # ValueError: argv the OS cannot take, e.g. an embedded NUL byte.
            raise ExternalToolError(f"nvram {args[0]}: {e}", args_=argv) from e

        if proc.returncode != 0:
            stderr = os.fsdecode(proc.stderr or b"").strip()
            raise ExternalToolError(
                f"nvram {args[0]}: exit status {proc.returncode}"
                + (f": {stderr}" if stderr else ""),
                args_=argv,
                returncode=proc.returncode,
                stderr=stderr,
            )
        return os.fsdecode(proc.stdout or b"")

    def get(self, name: str) -> str:
        return self._run("get", name).strip()

    def set(self, name: str, value: str) -> None:
        self._run("set", f"{name}={value}")

    def unset(self, name: str) -> None:
        self._run("unset", name)

    def commit(self) -> None:
        get_logger(__name__).info("nvram: committing to flash")
        self._run("commit")

    def show(self) -> str:
        # The size summary goes to stderr and is dropped here.
        return self._run("show")
