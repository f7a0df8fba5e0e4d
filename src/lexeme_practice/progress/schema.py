import uuid
from dataclasses import dataclass, field
from typing import Optional, Tuple

from lexeme_practice.util.clock import now_ms

DEFAULT_EASINESS_FACTOR = 2.5


@dataclass(frozen=True)
class LexemeProgress:
    """Practice record for one lexeme, including its SM-2 review state."""

    text: str
    times_seen: int = 0
    times_correct: int = 0
    last_practiced_at: int = 0          # epoch ms
    mastered: bool = False
    easiness_factor: float = DEFAULT_EASINESS_FACTOR
    interval_days: int = 0
    next_due: int = 0                   # epoch ms
    consecutive_correct: int = 0

    @property
    def accuracy(self) -> float:
        return self.times_correct / self.times_seen if self.times_seen > 0 else 0.0

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "timesSeen": self.times_seen,
            "timesCorrect": self.times_correct,
            "lastPracticedAt": self.last_practiced_at,
            "mastered": self.mastered,
            "easinessFactor": self.easiness_factor,
            "intervalDays": self.interval_days,
            "nextDue": self.next_due,
            "consecutiveCorrect": self.consecutive_correct,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LexemeProgress":
        # Records written before review scheduling existed lack the SM-2 fields
        return cls(
            text=str(data["text"]),
            times_seen=int(data["timesSeen"]),
            times_correct=int(data["timesCorrect"]),
            last_practiced_at=int(data.get("lastPracticedAt", 0)),
            mastered=bool(data.get("mastered", False)),
            easiness_factor=float(data.get("easinessFactor", DEFAULT_EASINESS_FACTOR)),
            interval_days=int(data.get("intervalDays", 0)),
            next_due=int(data.get("nextDue", 0)),
            consecutive_correct=int(data.get("consecutiveCorrect", 0)),
        )


@dataclass(frozen=True)
class UserStats:
    total_seen: int = 0
    total_correct: int = 0
    last_practiced_at: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "totalSeen": self.total_seen,
            "totalCorrect": self.total_correct,
            "lastPracticedAt": self.last_practiced_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserStats":
        last = data.get("lastPracticedAt")
        return cls(
            total_seen=int(data["totalSeen"]),
            total_correct=int(data["totalCorrect"]),
            last_practiced_at=int(last) if last is not None else None,
        )


@dataclass(frozen=True)
class PracticeHistoryItem:
    """One answered card. Its ``id`` also keys the chat conversation about it."""

    word: str
    translation: Tuple[str, ...]
    is_correct: bool
    timestamp: int = field(default_factory=now_ms)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "word": self.word,
            "translation": list(self.translation),
            "isCorrect": self.is_correct,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PracticeHistoryItem":
        return cls(
            id=str(data["id"]),
            word=str(data["word"]),
            translation=tuple(data.get("translation", ())),
            is_correct=bool(data["isCorrect"]),
            timestamp=int(data["timestamp"]),
        )


@dataclass(frozen=True)
class AnswerRecord:
    """Everything ``ProgressTracker.record_answer`` wrote for one answer."""

    progress: LexemeProgress
    stats: UserStats
    history_item: PracticeHistoryItem
    quality: int
