"""Loguru sinks for the relay and the CLI.

Console output always goes to stderr. A rotating file sink is added when
LOG_FILE (or an explicit log_file) names a path; relay requests, merges and
sync failures then survive a restart of `overload serve`.
"""

import sys
from pathlib import Path

from loguru import logger

from overload.config.settings import Settings, settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str | None = None,
    log_file: str | Path | None = None,
    config: Settings | None = None,
) -> Path | None:
    """Replace loguru's sinks with the console sink and an optional file sink.

    Args:
        level: Minimum level (defaults to LOG_LEVEL)
        log_file: File sink path (defaults to LOG_FILE; empty disables it)
        config: Settings to read defaults from (defaults to the process settings)

    Returns:
        Path of the file sink, or None when logging to stderr only
    """
    config = config or settings
    level = (level or config.log_level).upper()
    log_file = log_file if log_file is not None else config.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if not log_file:
        logger.debug(f"Logging to stderr at {level}")
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path,
        format=FILE_FORMAT,
        level=level,
        rotation=config.log_rotation,
        retention=config.log_retention,
        encoding="utf-8",
        backtrace=True,
    )
    logger.debug(f"Logging to stderr and {log_path} at {level}")
    return log_path
