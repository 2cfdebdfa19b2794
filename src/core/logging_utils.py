"""Shared logging helpers for core services and adapters."""

from __future__ import annotations

import logging
import os
from typing import Final

_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LEVEL_ENV_VAR: Final[str] = "CONSTRUCT_KIT_LOG_LEVEL"


def parse_level(level_str: str | None, default: int) -> int:
    if not level_str:
        return default
    level_str = level_str.strip().upper()
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return mapping.get(level_str, default)


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a logger that emits to stderr.

    Behavior:
    - If `level` is provided it takes precedence.
    - Otherwise `CONSTRUCT_KIT_LOG_LEVEL` is consulted (e.g. DEBUG, INFO).
    - Falls back to WARNING so library use stays quiet by default.

    The logger does not propagate, so an application that configures root
    logging does not print its records twice.
    """
    chosen_level = level if level is not None else parse_level(os.environ.get(_LEVEL_ENV_VAR), logging.WARNING)

    logger = logging.getLogger(name)
    # Re-create handlers to ensure consistent formatting and level
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(chosen_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(chosen_level)
    logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """Adjust every logger previously created by `get_logger` (CLI `--log-level`)."""

    for name, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.Logger):
            continue
        if not (name.startswith("core") or name.startswith("adapters") or name.startswith("cli")):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
