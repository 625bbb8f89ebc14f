"""
Logging utilities for the decoder and the CLI.

Library modules log through ``logging.getLogger(__name__)``; the CLI
attaches handlers here.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


ROOT_LOGGER = "splicedrum"


def setup_logger(
    name: str = ROOT_LOGGER,
    log_file: Optional[Path] = None,
    level: int = logging.WARNING,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Set up a logger with a rich console handler and an optional file handler.

    Repeated calls reuse the existing handlers, adjust the console level and
    add a file handler for any log file not attached yet.

    Args:
        name: Logger name
        log_file: Optional path to a detailed log file
        level: Console logging level (default: WARNING)
        console: Rich console to log to (default: stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    console_handler = next((h for h in logger.handlers if isinstance(h, RichHandler)), None)
    if console_handler is None:
        console_handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
        )
        logger.addHandler(console_handler)
    console_handler.setLevel(level)

    if log_file and not _has_file_handler(logger, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # File handler - detailed logging
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    # The logger passes everything its most verbose handler wants
    logger.setLevel(min(handler.level for handler in logger.handlers))
    return logger


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )
