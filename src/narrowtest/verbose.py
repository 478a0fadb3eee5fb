"""Debug logging for failed expectations."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logger(debug_file: Path, verbose: bool = False, logger_name: str = "narrowtest") -> logging.Logger:
    """Send every narrowtest debug record to ``debug_file``.

    Handlers already on the logger, including the package NullHandler and any
    file opened by an earlier call, are closed and replaced.

    Args:
        debug_file: Log file, created along with its parent directories.
        verbose: Also echo records to stderr.
        logger_name: Logger to configure. The default collects records from
            every narrowtest module.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    _close_handlers(logger)
    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(debug_file, mode="a")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)
    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def reset_logger(logger_name: str = "narrowtest") -> None:
    """Close handlers added by setup_logger and restore the silent default."""
    logger = logging.getLogger(logger_name)
    _close_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.addHandler(logging.NullHandler())
