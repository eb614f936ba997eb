"""Centralized logging configuration for keyed-cache.

Provides consistent, configurable logging with environment-based control
over verbosity and log format. Only the ``keyed_cache`` logger is touched;
the root logger and handlers owned by the host application are left alone.
"""

import logging
import os
import sys
from typing import Any, Dict
from enum import Enum

PACKAGE_LOGGER = "keyed_cache"


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


def get_format_string(log_format: str) -> str:
    """Get the formatter template for a log format name."""
    if log_format == LogFormat.JSON.value:
        return '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}'
    if log_format == LogFormat.DETAILED.value:
        return "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    return "%(asctime)s - %(levelname)s - %(message)s"


class LoggingConfig:
    """Centralized logging configuration manager."""

    HANDLER_NAME = "keyed_cache.console"

    @classmethod
    def build(cls) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping for the package logger.

        The mapping has no ``root`` section, so a host that owns logging can
        merge it into its own ``dictConfig`` call.
        """
        log_verbosity = os.getenv("LOG_VERBOSITY", "NORMAL").upper()
        log_format = os.getenv("LOG_FORMAT", "simple").lower()
        enable_cache_logging = os.getenv("ENABLE_CACHE_LOGGING", "false").lower() == "true"

        effective_log_level = get_log_level_from_verbosity(log_verbosity)

        if enable_cache_logging or effective_log_level == LogLevel.DEBUG.value:
            cache_level = LogLevel.DEBUG.value
        else:
            cache_level = effective_log_level

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": get_format_string(log_format),
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": cache_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                PACKAGE_LOGGER: {
                    "level": cache_level,
                    "handlers": ["console"],
                    "propagate": True,
                },
            },
        }

    @classmethod
    def configure(cls) -> None:
        """Configure the package logger based on environment variables.

        ``logging.config.dictConfig`` closes every registered handler, so the
        mapping from :meth:`build` is applied to the package logger directly.
        Calling this again replaces the package console handler.
        """
        logging_config = cls.build()
        formatter_config = logging_config["formatters"]["default"]
        handler_config = logging_config["handlers"]["console"]
        logger_config = logging_config["loggers"][PACKAGE_LOGGER]

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(package_logger.handlers):
            if handler.get_name() == cls.HANDLER_NAME:
                package_logger.removeHandler(handler)

        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(cls.HANDLER_NAME)
        handler.setLevel(handler_config["level"])
        handler.setFormatter(
            logging.Formatter(formatter_config["format"], formatter_config["datefmt"])
        )

        package_logger.addHandler(handler)
        package_logger.setLevel(logger_config["level"])
        package_logger.propagate = logger_config["propagate"]

        logging.getLogger(__name__).debug(
            "Logging configured: cache_level=%s", logger_config["level"]
        )


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Called once when the package is imported.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
