"""Services for the ScalePad SDK."""

from .logger import Logger, LoggerService, NoOpLogger, create_logger

__all__ = ["Logger", "LoggerService", "NoOpLogger", "create_logger"]
