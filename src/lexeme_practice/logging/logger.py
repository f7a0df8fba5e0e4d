from abc import ABC, abstractmethod
from typing import Any

from lexeme_practice.logging.log_level import LogLevel


class Logger(ABC):
    """Abstract base for all loggers.

    Keyword arguments passed to the level methods are treated as structured
    context (e.g. ``word="makan"``) and rendered by the concrete logger.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO):
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel):
        self._level = value

    def should_log(self, level: LogLevel) -> bool:
        return level <= self._level

    @staticmethod
    def format_context(context: dict) -> str:
        return " ".join(f"{key}={value!r}" for key, value in context.items())

    @abstractmethod
    def _write(self, level: LogLevel, message: str, **context: Any) -> None:
        """Write a log message. Implementations must override this."""
        pass

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        if self.should_log(level):
            self._write(level, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def trace(self, message: str, **context: Any) -> None:
        self.log(LogLevel.TRACE, message, **context)

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)
