"""Package logger for ssp-mcf.

Every module logs through ``get_logger(__name__)``; records flow to the
``ssp_mcf`` logger, which owns the only handler. Reports go to stdout, so the
handler writes to stderr.
"""
from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "ssp_mcf"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    handler: logging.Handler | None = None,
) -> None:
    """Install the package handler once; later calls do nothing.

    Args:
        level: Level of the ``ssp_mcf`` logger.
        handler: Replacement for the default stderr handler.
    """
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    # pytest's caplog hooks the root logger.
    package_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def level_for_flags(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity switches to a logging level; ``verbose`` wins."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def set_global_log_level(level: int) -> None:
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Forget the package handler so the next call reinstalls it (tests)."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


__all__ = [
    "LOG_FORMAT",
    "get_logger",
    "level_for_flags",
    "reset_logging",
    "set_global_log_level",
    "setup_root_logger",
]
