from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels ordered by severity (lower = more severe)."""
    ERROR = 0
    WARNING = 1
    INFO = 2
    TRACE = 3
    DEBUG = 4

    @classmethod
    def from_name(cls, name: str, default: "LogLevel" = None) -> "LogLevel":
        """Parse a level name from configuration, case-insensitively."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            if default is not None:
                return default
            raise ValueError(f"Unknown log level: {name}")
