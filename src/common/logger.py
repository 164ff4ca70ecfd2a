"""Logging utilities backed by rich console output.

Library modules log classification decisions at DEBUG level; the CLI calls
``setup_logging`` once and the reporter prints results through the logger.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Parsed 'dir/file.txt'")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from common.env import env

# Shared console so reporter output and log records interleave correctly
console = Console()
err_console = Console(stderr=True)

# Names of loggers configured by get_logger
_configured: set[str] = set()


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger that writes through rich.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level name. If None, uses LOG_LEVEL from the
               environment, defaulting to INFO.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler())

    # pytest caplog relies on propagation
    logger.propagate = True
    _configured.add(name)

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the command-line entry point.

    Loggers created by get_logger already write to the console; this sets
    their level and optionally mirrors every record to a file.

    Args:
        level: Logging level, overridden by LOG_LEVEL
        log_file: Optional file path to also log to
    """
    level = env.log_level(default=level).upper()

    for name in _configured:
        logging.getLogger(name).setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def error(message: str) -> None:
    """Print an error message with a red X icon to stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}")
