"""Console logging with color-coded levels."""

from __future__ import annotations

import logging

import click
from colorama import Fore, Style

LOGGER_NAME = "fleep_notify"

LEVEL_COLORS = {
    logging.DEBUG: Style.DIM,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return text
        return f"{color}{text}{Style.RESET_ALL}"


class EchoHandler(logging.Handler):
    """Writes records through click so output follows the active stdout."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=record.levelno >= logging.ERROR)
        except Exception:
            self.handleError(record)


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a single console handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, EchoHandler):
            logger.removeHandler(handler)

    fmt = "%(levelname)s %(name)s: %(message)s" if debug else "%(message)s"
    handler = EchoHandler()
    handler.setFormatter(ColorFormatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
