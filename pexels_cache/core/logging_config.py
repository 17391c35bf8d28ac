# pexels_cache/core/logging_config.py - Structured logging configuration
import logging
import os
import sys

from pythonjsonlogger import jsonlogger

from .config import get_config_value

PACKAGE_LOGGER = "pexels_cache"


def _settings(log_level: str | None, log_format: str | None) -> tuple[str, str]:
    """Arguments win over LOG_LEVEL/LOG_FORMAT, which win over config.yml"""
    level = log_level or os.getenv("LOG_LEVEL") or get_config_value("logging.level", "INFO")
    fmt = log_format or os.getenv("LOG_FORMAT") or get_config_value("logging.format", "json")
    return str(level).upper(), str(fmt).lower()


def setup_logging(
    log_level: str | None = None, log_format: str | None = None, logger_name: str = PACKAGE_LOGGER
) -> logging.Logger:
    """
    Attach one stdout handler to the package logger

    Module loggers (pexels_cache.*) propagate to it, so the cache, storage and
    client records share one format.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR
        log_format: json or text
        logger_name: Logger to configure (the package logger by default)

    Returns:
        Configured logger instance
    """
    level, fmt = _settings(log_level, log_format)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if fmt == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "module"},
            static_fields={"service": "pexels-cache"},
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, configuring the package logger on first use

    Args:
        name: Logger name (usually __name__)
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        setup_logging()
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context):
    """
    Log message with structured fields

    Context keys become top-level JSON fields (query_key, page, photo_id...).

    Example:
        log_with_context(logger, "warning", "Serving stale cache", query_key="nature", page=2)
    """
    getattr(logger, level.lower())(message, extra=context)
