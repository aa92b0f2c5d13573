"""
Logging helpers shared by the filter commands.

All messages are written to stderr through click so that stdout carries only
filter output and can be piped safely:

    h3ToGeo --kml < cells.txt > cells.kml

Use configure_verbose() once per command to choose between normal and debug
output, then the module-level helpers (debug, progress, success, warn, error).
"""

from __future__ import annotations

import logging

import click

LOGGER_NAME = "h3_filters"

logger = logging.getLogger(LOGGER_NAME)


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes styled records to stderr with click.echo."""

    LEVEL_STYLES = {
        logging.DEBUG: {"dim": True},
        logging.WARNING: {"fg": "yellow"},
        logging.ERROR: {"fg": "red"},
    }

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            style = getattr(record, "style", None) or self.LEVEL_STYLES.get(record.levelno, {})
            click.echo(click.style(message, **style), err=True)
        except Exception:
            self.handleError(record)


def _ensure_handler() -> None:
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        logger.addHandler(ClickEchoHandler())


def configure_verbose(verbose: bool) -> None:
    """
    Configure the package logger for a command run.

    Args:
        verbose: Show debug messages when True, otherwise info and above
    """
    _ensure_handler()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def debug(message: str) -> None:
    logger.debug(message)


def progress(message: str) -> None:
    logger.info(message)


def success(message: str) -> None:
    logger.info(message, extra={"style": {"fg": "green"}})


def warn(message: str) -> None:
    logger.warning(message)


def error(message: str) -> None:
    logger.error(message)
