"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from numvec.config import get_settings

def setup_logging(level: Optional[int] = None) -> None:
    """Configure standard Python logging.

    Call **exactly once** at app startup. ``level`` defaults to NUMVEC_LOG_LEVEL.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return
    if level is None:
        level = get_settings().log_level

    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Server loggers go through the root handler so every line shares one format
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(level)

    setup_logging._configured = True  # type: ignore[attr-defined]
