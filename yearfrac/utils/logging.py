"""Logging helpers shared across the package."""

from __future__ import annotations

import logging

PACKAGE_LOGGER_NAME = 'yearfrac'

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger nested under the package logger."""
    if name != PACKAGE_LOGGER_NAME and not name.startswith(f'{PACKAGE_LOGGER_NAME}.'):
        name = f'{PACKAGE_LOGGER_NAME}.{name}'
    return logging.getLogger(name)
