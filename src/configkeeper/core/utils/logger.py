# configkeeper/core/utils/logger.py

"""
Logging for ConfigKeeper.

Everything logs through one package logger, ``configkeeper``, with messages
tagged by the component that wrote them::

    [PIPELINE] read only | Context: Config change denied: volume '50' -> '80'

The registry, change pipeline, codec and paths call the ``log_*`` helpers
rather than holding their own loggers, so tests can silence or inspect all
output by patching :func:`get_logger`. The CLI calls :func:`setup_logging`
once per invocation with the ``--log-level`` option.
"""

import logging
import os
import sys

_logger: logging.Logger | None = None

LOGGER_NAME = "configkeeper"
LOG_LEVEL_ENV = "CONFIGKEEPER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure the ``configkeeper`` logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to ``CONFIGKEEPER_LOG_LEVEL``, then INFO.
        log_file: Also write records to this file when given.
        format_string: Formatter pattern; defaults to timestamp, logger
            name, level and message.

    Handlers from an earlier call are removed first, so repeated CLI
    invocations in one process do not duplicate output.
    """
    global _logger

    resolved = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(resolved)
    logger.propagate = False

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)
    _attach(logger, logging.StreamHandler(sys.stdout), resolved, formatter)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), resolved, formatter)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """The package logger, configured with defaults on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    text = f"[{module.upper()}] {message}"
    if context:
        text += f" | Context: {context}"
    return text


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log an error tagged with ``module``.

    Args:
        module: Component name, shown upper-cased in brackets
        error: What went wrong
        context: Extra detail appended after ``| Context:``
        exception: Attached as ``exc_info`` so the traceback is logged
    """
    get_logger().error(_format(module, error, context), exc_info=exception)


def log_warning(module: str, warning: str, context: str = "") -> None:
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    get_logger().debug(_format(module, message, context))
