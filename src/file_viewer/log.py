"""Logging setup for the command line tools."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "file_viewer"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """
    Attach handlers to the package logger and return it.

    Console output goes through rich on stderr; ``log_file`` adds a plain
    file handler. Calling this again replaces the previous handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level.upper())
    logger.propagate = False

    stream_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


@contextmanager
def console_suspended() -> Iterator[None]:
    """
    Silence the console handlers while a full-screen view is active.

    File handlers keep receiving records.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    suspended = [h for h in logger.handlers if isinstance(h, RichHandler)]
    for handler in suspended:
        logger.removeHandler(handler)
    # Without any handler, logging falls back to writing on stderr
    placeholder = logging.NullHandler()
    logger.addHandler(placeholder)
    try:
        yield
    finally:
        logger.removeHandler(placeholder)
        for handler in suspended:
            logger.addHandler(handler)
