"""Logging setup for BrightMatch.

Scorers and the compatibility service only emit DEBUG records through
``get_logger`` children and never install handlers themselves. Whoever
embeds the engine owns output: the CLI calls ``configure_logging`` once,
and host applications may instead attach their own handlers to the
``brightmatch`` logger.
"""

import logging
import sys

LOGGER_NAME = "brightmatch"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _resolve_level(level: str | None) -> int:
    # Unknown names degrade to INFO; Settings has already validated them.
    return getattr(logging, (level or "INFO").upper(), logging.INFO)


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Route ``brightmatch`` records to stderr at the given level.

    The first call installs a single stderr handler and stops propagation,
    so a host's root handlers do not print scoring traces twice. Later
    calls only move the level; handlers are never stacked.

    Args:
        level: DEBUG shows per-submission scoring traces; INFO (default)
            shows only CLI progress.
        format_string: Format string for log records.
        date_format: Format string for timestamps.

    Returns:
        The ``brightmatch`` package logger.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for an engine module, e.g. ``get_logger("matching.service")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Drop handlers and restore propagation so tests start from a clean logger."""
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _configured = False
