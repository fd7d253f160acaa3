"""
Logger service for SDK diagnostics.

Provides the logging sink used by the HTTP client and retry engine. Output
goes through the standard ``logging`` module; every argument is redacted
with DataMasker before it is emitted.
"""

import logging
from typing import Any, Dict, Optional, Protocol

from ..models.config import LogLevel
from ..utils.data_masker import DataMasker

LOGGER_NAME = "scalepad_client"
LOG_PREFIX = "[ScalePad SDK]"

_LEVEL_ORDER: Dict[str, int] = {
    "debug": 0,
    "info": 1,
    "warn": 2,
    "error": 3,
    "none": 4,
}

_STDLIB_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class Logger(Protocol):
    """Interface accepted wherever the SDK logs."""

    def debug(self, message: str, *args: Any) -> None: ...

    def info(self, message: str, *args: Any) -> None: ...

    def warn(self, message: str, *args: Any) -> None: ...

    def error(self, message: str, *args: Any) -> None: ...


class LoggerService:
    """Level-gated logger with redaction of sensitive data."""

    def __init__(self, level: LogLevel = "info", logger: Optional[logging.Logger] = None):
        """
        Initialize logger service.

        Args:
            level: Minimum level to emit
            logger: Standard library logger to write to (default: ``scalepad_client``)
        """
        self.level = level
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def should_log(self, level: LogLevel) -> bool:
        """Check whether a message at ``level`` passes the configured level."""
        return _LEVEL_ORDER[level] >= _LEVEL_ORDER[self.level]

    def _emit(self, level: LogLevel, message: str, args: tuple) -> None:
        if not self.should_log(level):
            return
        text = f"{LOG_PREFIX} {DataMasker.redact_string(message)}"
        if args:
            masked = [DataMasker.mask_sensitive_data(arg) for arg in args]
            text = " ".join([text, *(str(arg) for arg in masked)])
        self._logger.log(_STDLIB_LEVELS[level], text)

    def debug(self, message: str, *args: Any) -> None:
        self._emit("debug", message, args)

    def info(self, message: str, *args: Any) -> None:
        self._emit("info", message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._emit("warn", message, args)

    def error(self, message: str, *args: Any) -> None:
        self._emit("error", message, args)


class NoOpLogger:
    """Logger that discards all messages."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass


def create_logger(level: LogLevel = "info", custom_logger: Optional[Logger] = None) -> Logger:
    """
    Create the logger used by a client.

    Args:
        level: Minimum level to emit
        custom_logger: Caller-supplied logger; returned unchanged when given

    Returns:
        The custom logger, a NoOpLogger for level ``none``, or a LoggerService
    """
    if custom_logger is not None:
        return custom_logger
    if level == "none":
        return NoOpLogger()
    return LoggerService(level)
