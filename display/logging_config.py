"""Logging setup for the triangle display application."""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Configure console (and optional file) logging for the application loggers.

    Covers the 'display' and 'trigeom' namespaces and the top-level CLI.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)

    for name in ("trigeom", "display", "gen_triangle"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Re-running setup replaces handlers instead of duplicating output
        if logger.hasHandlers():
            logger.handlers.clear()
        for h in handlers:
            logger.addHandler(h)

    logging.getLogger("display").debug("Logging initialized.")
