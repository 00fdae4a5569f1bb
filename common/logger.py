"""Central level-based logger (standard library `logging`).

Every logger handed out lives under the `nvram_store` namespace, so the
embedding server keeps control of the root level and can silence or raise
the store's logging as one unit.

Env:
- LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: INFO)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOGGER_NAME = "nvram_store"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _level_from_env() -> int:
    raw = (os.getenv("LOG_LEVEL") or "INFO").upper().strip()
    return getattr(logging, raw, logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the `nvram_store` namespace.

    A console handler is installed on the root once, only if the host has not
    configured logging. The level is set on the namespace logger, never on
    the root, and refreshed each call so a changed LOG_LEVEL takes effect.
    """
    base = logging.getLogger(LOGGER_NAME)
    if not getattr(base, "_nvram_store_configured", False):
        logging.basicConfig(format=LOG_FORMAT)
        setattr(base, "_nvram_store_configured", True)
    base.setLevel(_level_from_env())
    return base.getChild(name) if name else base
