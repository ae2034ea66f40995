"""
Logging setup for sentrel entry points.

Library modules only do ``logger = logging.getLogger(__name__)``; whoever drives
the pipeline calls setup_logging() once.

Example:
    from sentrel_core.logger import setup_logging
    setup_logging(log_file="logs/relations.log")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from sentrel_core.config import settings

_logging_configured = False

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: Optional[int | str] = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
) -> None:
    """
    Configure root logging with a console handler and an optional file handler.

    Only the first call has an effect.

    Args:
        level: Logging level (name or number). Defaults to settings.LOG_LEVEL
        log_file: Optional log file path; parent directories are created
        format_string: Log record format
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level_name = level
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name!r}")

    formatter = logging.Formatter(format_string)
    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)

    _logging_configured = True
