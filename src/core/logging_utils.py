"""Logging del proyecto.

Todos los loggers cuelgan de `lms_records` y escriben por stderr con Rich;
los tokens nunca se loguean completos.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "lms_records"


def get_logger(module: str) -> logging.Logger:
    """Logger hijo de `lms_records` para un módulo (p.ej. `core.services.session`)."""

    return logging.getLogger(f"{LOGGER_NAME}.{module}")


def setup_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_string(level))
    logger.handlers = []
    logger.propagate = False

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_level=True,
        show_path=False,
    )
    handler.setLevel(_level_from_string(level))
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def redact_token(token: str | None) -> str:
    if not token:
        return "<empty>"
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}…{token[-2:]}"


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.WARNING)
