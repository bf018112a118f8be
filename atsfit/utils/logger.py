"""
Logging infrastructure for atsfit.

Uses Loguru for structured, easy-to-use logging. The library itself only
emits records; applications (and the bundled CLI) call setup_logging()
to decide where they go.
"""

import sys
from typing import Any

from loguru import logger

from atsfit.utils.config import get_settings


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(level: str | None = None) -> None:
    """
    Configure application-wide logging.

    Replaces Loguru's default sink with a colored stderr sink and, when
    LOG_FILE_PATH is set, a rotating file sink.

    Args:
        level: Optional level override (e.g. from a --verbose flag)
    """
    settings = get_settings()
    log_settings = settings.logging
    effective_level = level or log_settings.level

    logger.remove()
    logger.configure(extra={"name": "atsfit"})

    # Tracebacks with variable values leak résumé content, keep them to development
    enable_diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=effective_level,
            colorize=True,
            backtrace=True,
            diagnose=enable_diagnose,
        )

    if log_settings.file_path is not None:
        log_file = log_settings.file_path
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=log_settings.format,
            level=effective_level,
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            compression="zip",
            backtrace=True,
            diagnose=enable_diagnose,
            enqueue=True,
        )

    logger.debug(f"Logging initialized - Level: {effective_level}")


def get_logger(name: str) -> Any:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name for the logger (typically __name__)

    Returns:
        A configured logger instance
    """
    return logger.bind(name=name)


def preview(text: str, limit: int = 60) -> str:
    """Shorten free text for log messages so whole documents never reach a sink."""
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 3] + "..."
