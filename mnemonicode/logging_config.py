"""
Logging setup for the mnemonicode command line.

Library modules only create loggers (``logging.getLogger(__name__)``) and log
at DEBUG; installing handlers is left to the entry point:

    from mnemonicode.logging_config import configure_logging

    log = configure_logging("DEBUG")
    log.debug("starting")

Output goes to stderr through rich so it never mixes with encoded data on
stdout.
"""

import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "MNEMONICODE_LOG_LEVEL"
DEFAULT_LOGGER_NAME = "mnemonicode"


def _parse_level(value: Union[str, int, None]) -> Optional[int]:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.

    Returns None if the value is empty or unrecognized.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    level = getattr(logging, name, None) if name else None
    return level if isinstance(level, int) else None


def configure_logging(level: Union[str, int, None] = None, *, force: bool = False) -> logging.Logger:
    """
    Attach a rich stderr handler to the package logger and return it.

    Args:
        level: Explicit level; falls back to MNEMONICODE_LOG_LEVEL, then WARNING
        force: Replace handlers installed by an earlier call

    Returns:
        The ``mnemonicode`` logger
    """
    resolved = _parse_level(level)
    if resolved is None:
        resolved = _parse_level(os.getenv(LOG_LEVEL_ENV))
    if resolved is None:
        resolved = logging.WARNING

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if force:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
    if not logger.handlers:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(resolved)
    return logger
