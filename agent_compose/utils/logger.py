"""
Logging setup for agent loggers.

Every agent logs to ``agent.<name>`` (deprecation warnings from the legacy
construction path included), so configuring the ``agent`` logger covers all
agents of a process.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

AGENT_LOGGER_NAME = "agent"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers installed here, so reconfiguring leaves foreign handlers alone
_HANDLER_MARKER = "_agent_compose_handler"


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {log_level!r}")
    return level


def _build_handlers(
    formatter: logging.Formatter, log_file: Optional[str], overwrite: bool
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(log_path, mode="w" if overwrite else "a", encoding="utf-8")
        )

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
    return handlers


def setup_logger(
    name: str = AGENT_LOGGER_NAME,
    log_level: str = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None,
    overwrite: bool = False,
) -> logging.Logger:
    """
    Attach console (stdout) and optional file output to a logger.

    Calling it again replaces the handlers from the previous call; handlers
    added by other code are kept.

    Args:
        name: Logger name (default: "agent", parent of all agent loggers)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log message format
        log_file: Optional path to log file (parent directories are created)
        overwrite: If True, truncate the log file instead of appending

    Returns:
        Configured logger instance

    Raises:
        ConfigurationError: If log_level is not a known level name
    """
    level = _resolve_level(log_level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(logging.Formatter(log_format), log_file, overwrite):
        logger.addHandler(handler)

    return logger


def setup_logger_from_env(name: str = AGENT_LOGGER_NAME) -> logging.Logger:
    """
    Set up a logger from LOG_LEVEL / LOG_FILE.

    A .env file found from the working directory upwards is loaded first;
    variables already set in the environment take precedence.

    Args:
        name: Logger name (default: "agent")

    Returns:
        Configured logger instance
    """
    load_dotenv(find_dotenv(usecwd=True))

    return setup_logger(
        name,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
    )
