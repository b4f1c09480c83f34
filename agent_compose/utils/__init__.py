"""Shared utilities: exceptions and logging setup."""

from .errors import AgentComposeError, ConfigurationError
from .logger import setup_logger, setup_logger_from_env

__all__ = [
    "AgentComposeError",
    "ConfigurationError",
    "setup_logger",
    "setup_logger_from_env",
]
