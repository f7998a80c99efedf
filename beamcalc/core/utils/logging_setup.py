"""
Logging Setup Utilities.

Console output goes through rich; an optional plain-text file keeps the
full DEBUG trail of equation creation (solved reactions, sampling passes)
whatever the console level is.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

PACKAGE_LOGGER = "beamcalc"

# Font discovery, PNG encoding and multipart parsing are chatty at DEBUG
NOISY_LOGGERS = ("matplotlib", "PIL", "multipart", "httpx")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure logging for the beamcalc tools.

    Args:
        level: Console logging level, as a number or a name like ``"debug"``
        log_file: Optional file receiving every beamcalc record at DEBUG

    Returns:
        The ``beamcalc`` package logger
    """
    level = _resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, logging.DEBUG) if log_file else level)
    root_logger.handlers.clear()

    # Source locations only help when tracing equation creation
    console_handler = RichHandler(
        show_time=False,
        show_path=level <= logging.DEBUG,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger(PACKAGE_LOGGER)
