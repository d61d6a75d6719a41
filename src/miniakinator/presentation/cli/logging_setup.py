"""Process-wide logging configuration for the console app."""
from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "MINIAKINATOR_LOG_LEVEL"

_CONFIGURED = False


def configure_logging(default_level: str = "WARNING") -> None:
    """Attach a single stderr handler to the root logger once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper() or default_level
    level = getattr(logging, level_name, logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
    _CONFIGURED = True
