"""Logging setup shared by the SDK and the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "blcli"

_configured = False


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a rich stderr handler to the package logger.

    Repeated calls only adjust the level. httpx and httpcore are kept at
    WARNING unless DEBUG is requested.
    """

    global _configured

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    logger.setLevel(level)
    library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(library_level)
    return logger
