"""Logging helpers for scripts and tests that use fuzzydate."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "fuzzydate"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> logging.Logger:
    """Initialise the root logger once and set the package logger's level.

    The library never calls this itself. ``level`` applies to the ``fuzzydate``
    logger, so ``logging.DEBUG`` surfaces every rejected parse without making
    other libraries noisy. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
