"""Loguru setup for interactive sessions.

The terminal is owned by the UI while the browser runs, so records go to a
rotating file under the platform log directory instead of stderr.
"""

from __future__ import annotations

from pathlib import Path

import platformdirs
from loguru import logger

APP_NAME = "dirjump"
LOG_FILENAME = "dirjump.log"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def default_log_path() -> Path:
    return Path(platformdirs.user_log_dir(appname=APP_NAME, appauthor=False)) / LOG_FILENAME


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> Path:
    """Route ``dirjump`` records to ``log_file`` and return the path used."""
    target = log_file if log_file is not None else default_log_path()
    target.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        str(target),
        format=LOG_FORMAT,
        level=level,
        rotation="5 MB",
        retention=3,
        encoding="utf-8",
    )
    logger.enable(APP_NAME)
    return target
