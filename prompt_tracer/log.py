# prompt_tracer/log.py
from __future__ import annotations

import logging
import os
from typing import Optional


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """Attach one stream handler to the package logger (idempotent).

    Args:
        level: Log level override (default: DEBUG if DEBUG env var, else INFO)
    """
    logger = logging.getLogger("prompt_tracer")
    if level is None:
        level = logging.DEBUG if os.getenv("DEBUG") else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        ))
        logger.addHandler(handler)
    return logger
