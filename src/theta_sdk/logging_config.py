"""Logging configuration with rich integration for theta-sdk-py.

Every module logs through ``logging.getLogger(__name__)``; nothing is printed
until the application calls ``setup_logging()``.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Logs every request URL and response body at DEBUG
WIRE_LOGGER = "theta_sdk.connection"

NOISY_LOGGERS = ("aiohttp", "asyncio")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: Path | None = None,
    console: Console | None = None,
    show_wire: bool = False,
) -> None:
    """
    Configure logging with rich formatting.

    Camera traffic is logged at DEBUG only when ``show_wire`` is set.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file for file output
        console: Optional rich Console instance (creates new one if not provided)
        show_wire: Log every request and response body
    """
    handlers: list[logging.Handler] = [
        RichHandler(console=console or Console(), rich_tracebacks=True, show_path=False, markup=False)
    ]
    if log_file:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logging.getLogger(WIRE_LOGGER).setLevel(logging.DEBUG if show_wire else max(level, logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
