from lexeme_practice.logging.log_level import LogLevel
from lexeme_practice.logging.logger import Logger
from lexeme_practice.logging.console_logger import ConsoleLogger
from lexeme_practice.logging.memory_logger import MemoryLogger
from lexeme_practice.logging.logger_registry import LoggerRegistry, get_logger

__all__ = [
    "LogLevel",
    "Logger",
    "ConsoleLogger",
    "MemoryLogger",
    "LoggerRegistry",
    "get_logger",
]
