"""
Logging configuration for prize judge.

Sets up loguru with appropriate levels and formatting.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger


def setup_logging(level: str = "INFO", debug: bool = False, log_dir: Path | None = None) -> None:
    """
    Configure loguru logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: If True, enable debug logging and more verbose output
        log_dir: Directory for log files (defaults to the working directory)
    """
    # Remove default handler
    logger.remove()

    # Set log level
    log_level = "DEBUG" if debug else level
    log_dir = Path(log_dir) if log_dir is not None else Path(".")

    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>",
    )

    # Add file handler for important events (INFO and above)
    logger.add(
        log_dir / "prize_judge.log",
        level="INFO",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )

    # Add debug file handler if debug mode
    if debug:
        logger.add(
            log_dir / "prize_judge_debug.log",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="50 MB",
            retention="3 days",
            compression="zip",
        )


def get_logger(name: str | None = None) -> "Logger":
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger (defaults to calling module)

    Returns:
        Logger instance, bound to name when given
    """
    if name:
        return logger.bind(name=name)
    return logger
