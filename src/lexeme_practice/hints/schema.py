import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class HintSource(str, Enum):
    REMOTE = "remote"
    FALLBACK = "fallback"

    @classmethod
    def parse(cls, value: str) -> "HintSource":
        # Payloads written before the rename stored "gpt" for remote hints
        if value == "gpt":
            return cls.REMOTE
        return cls(value)


class HintStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class Lexeme:
    text: str
    translations: Tuple[str, ...] = ()
    audio_url: str = ""
    is_new: bool = False
    phonetic: Optional[str] = None
    example: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Lexeme":
        return cls(
            text=data["text"],
            translations=tuple(data.get("translations", ())),
            audio_url=data.get("audioURL", ""),
            is_new=bool(data.get("isNew", False)),
            phonetic=data.get("phonetic"),
            example=data.get("example"),
        )


@dataclass(frozen=True)
class HintData:
    related_words: Tuple[str, ...]
    timestamp: int
    source: HintSource

    def to_dict(self) -> dict:
        return {
            "relatedWords": list(self.related_words),
            "timestamp": self.timestamp,
            "source": self.source.value,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "HintData":
        """Parse a persisted entry. Raises ValueError for entries in any other shape."""
        if not isinstance(data, dict):
            raise ValueError("Hint entry must be an object")
        related_words = data.get("relatedWords")
        if not isinstance(related_words, list) or not all(isinstance(w, str) for w in related_words):
            raise ValueError("Hint entry has no relatedWords list")
        timestamp = data.get("timestamp")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError("Hint entry has no numeric timestamp")
        if not math.isfinite(timestamp):
            raise ValueError(f"Hint entry timestamp is not finite: {timestamp}")
        return cls(
            related_words=tuple(related_words),
            timestamp=int(timestamp),
            source=HintSource.parse(data.get("source", HintSource.FALLBACK.value)),
        )

