"""
Logging setup for the asmvm command-line tools.

Library modules only create loggers (``logging.getLogger(__name__)``);
handlers are attached here, once, by the CLI.

Console: rich RichHandler on stderr at the requested level (WARNING by default).
File:    optional, captures DEBUG and above in the pipe-separated format.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

__all__ = ['setup_logging', 'verbosity_to_level', 'FILE_FORMAT']

FILE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def verbosity_to_level(verbose: int) -> int:
    """Map a -v count to a console level: 0=WARNING, 1=INFO, 2+=DEBUG."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    name: str = "asmvm",
    console_level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure and return the `name` logger.

    Idempotent: a logger that already has handlers is returned unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    ch = RichHandler(
        level=console_level,
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    ch.setLevel(console_level)
    logger.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
        logger.addHandler(fh)
        logger.info("Log file: %s", log_path)

    logger.debug("Logger initialized: %s (console %s)",
                 name, logging.getLevelName(console_level))
    return logger
