"""
Root logger setup.

Applied once per process from `main.create_app`. If handlers are already
attached (uvicorn, pytest), only the level is adjusted.
"""

from __future__ import annotations

import logging

from . import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    numeric_level = getattr(logging, (level or config.log_level()).upper(), logging.INFO)
    root.setLevel(numeric_level)

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
