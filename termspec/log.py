#!/usr/bin/env python3
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Config

LOGGER_NAME = "termspec"


def init_logger(
    level: Optional[int] = None,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Console: rich handler on stderr, so diagnostics never land inside the
    completion menu drawn on stdout.
    File (optional): rotating, plain text, UTF-8.
    Calling it again only adds handlers that are still missing.
    """
    if level is None:
        level = Config.get_log_level()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(level, logging.DEBUG) if logfile else level)
    logger.propagate = False

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            rich_tracebacks=False,
        )
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        file_handler = RotatingFileHandler(
            logfile, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger
