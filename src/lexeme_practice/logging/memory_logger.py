from typing import Any, List, Tuple

from lexeme_practice.logging.log_level import LogLevel
from lexeme_practice.logging.logger import Logger


class MemoryLogger(Logger):
    """Logger that keeps records in memory for diagnostics and tests."""

    def __init__(self, level: LogLevel = LogLevel.DEBUG):
        super().__init__(level)
        self.records: List[Tuple[LogLevel, str, dict]] = []

    def _write(self, level: LogLevel, message: str, **context: Any) -> None:
        self.records.append((level, message, dict(context)))

    def messages(self, level: LogLevel = None) -> List[str]:
        return [message for record_level, message, _ in self.records if level is None or record_level == level]

    def clear(self) -> None:
        self.records.clear()
