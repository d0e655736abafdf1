"""Logging setup shared by the API entrypoint and scripts."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging once; later calls only adjust the level."""
    global _configured
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if _configured:
        logging.getLogger().setLevel(level)
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
    # Quiet noisy server loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    _configured = True
