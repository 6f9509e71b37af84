"""Logging setup shared by every module of the package.

Modules obtain their logger with ``get_logger(__name__)``; the console
handler is installed once by ``setup_logging`` from the CLI entry point.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "schema_interfaces"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger namespace."""
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Install a rich console handler on the package logger.

    Args:
        level: Log level name or number; DEBUG also shows module paths.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=level <= logging.DEBUG,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        _configured = True

    logger.debug("Logging configured (level=%s)", logging.getLevelName(level))
