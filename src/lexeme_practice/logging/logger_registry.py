from typing import Optional

from lexeme_practice.logging.log_level import LogLevel
from lexeme_practice.logging.logger import Logger
from lexeme_practice.logging.console_logger import ConsoleLogger


class LoggerRegistry:
    """Global registry for the active logger instance."""

    _instance: Optional[Logger] = None

    @classmethod
    def get(cls) -> Logger:
        """Get the current logger, creating a default ConsoleLogger if none set."""
        if cls._instance is None:
            cls._instance = ConsoleLogger(level=LogLevel.WARNING)
        return cls._instance

    @classmethod
    def set(cls, logger: Logger) -> None:
        """Set the global logger instance."""
        cls._instance = logger

    @classmethod
    def reset(cls) -> None:
        """Reset to no logger (next get() will create default)."""
        cls._instance = None


def get_logger() -> Logger:
    """Convenience function to get the current logger."""
    return LoggerRegistry.get()
