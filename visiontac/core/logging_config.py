"""Root logging setup for the command line."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

# Summary logs stay small; one rotated file is plenty
LOG_FILE_MAX_BYTES = 256 * 1024
LOG_FILE_BACKUP_COUNT = 1

# Handlers added by configure_logging, replaced on the next call
_installed: List[logging.Handler] = []


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    try:
        return LOG_LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level '{level}'") from None


def _build_handlers(console: bool, log_file: Optional[Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    return handlers


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    console: bool = True,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Point the root logger at stderr and/or a rotating log file.

    Handlers from a previous call are closed and replaced, so calling this
    again never stacks output. Handlers installed by anyone else are left
    alone.
    """
    numeric_level = _resolve_level(level)
    root = logging.getLogger()

    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in _build_handlers(console, Path(log_file) if log_file else None):
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed.append(handler)

    root.setLevel(numeric_level)


__all__ = ["LOG_LEVELS", "LOG_FORMAT", "LOG_DATEFMT", "configure_logging"]
