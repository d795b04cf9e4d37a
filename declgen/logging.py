"""Logger hierarchy and handler setup for declaration runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

ROOT_LOGGER = "declgen"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ProgressFormatter(logging.Formatter):
    """Console format: bare progress lines at INFO, level-tagged lines otherwise.

    Records from below the ``declgen`` root carry their component, so a
    skipped file reads ``[declgen:generator] WARNING ...``.
    """

    def format(self, record: logging.LogRecord) -> str:
        component = record.name[len(ROOT_LOGGER) + 1 :] if record.name != ROOT_LOGGER else ""
        prefix = f"[{ROOT_LOGGER}:{component}]" if component else f"[{ROOT_LOGGER}]"
        message = record.getMessage()
        if record.levelno != logging.INFO:
            message = f"{record.levelname} {message}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"{prefix} {message}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``declgen`` or one of its component loggers."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _build_handlers(level: int, log_file: Path | None) -> List[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(ProgressFormatter())
    handlers: List[logging.Handler] = [console]
    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(sink)
    for handler in handlers:
        handler.setLevel(level)
    return handlers


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console (and optional file) handlers on the ``declgen`` logger.

    Calling it again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(level, log_file):
        logger.addHandler(handler)
    return logger


__all__ = ["ProgressFormatter", "configure_logging", "get_logger"]
