import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from lexeme_practice.util.clock import now_ms


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: int = field(default_factory=now_ms)

    def to_dict(self) -> dict:
        return {"id": self.id, "role": self.role.value, "content": self.content, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: dict) -> "ChatMessage":
        return cls(
            role=ChatRole(data["role"]),
            content=data["content"],
            id=data["id"],
            timestamp=int(data["timestamp"]),
        )


@dataclass
class ChatConversation:
    history_item_id: str
    messages: List[ChatMessage]
    last_updated: int
    version: int = 0

    def to_dict(self) -> dict:
        return {
            "historyItemId": self.history_item_id,
            "messages": [m.to_dict() for m in self.messages],
            "lastUpdated": self.last_updated,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ChatConversation":
        return cls(
            history_item_id=data["historyItemId"],
            messages=[ChatMessage.from_dict(m) for m in data.get("messages", [])],
            last_updated=int(data.get("lastUpdated", 0)),
            version=int(data.get("version", 0)),
        )
