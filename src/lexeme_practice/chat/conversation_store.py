import threading
from typing import Dict, Optional

from lexeme_practice.caching.base_cache import BaseCache
from lexeme_practice.logging import get_logger
from lexeme_practice.util.clock import now_ms
from .schema import ChatConversation


class ConversationStore(BaseCache):
    """Chat conversations persisted as one JSON object keyed by history item id."""

    def __init__(self, cache_dir=None, cache_suffix='default'):
        super().__init__("chat_conversations", cache_dir, cache_suffix)
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, ChatConversation]:
        conversations = {}
        for key, value in self._load_payload().items():
            try:
                conversations[key] = ChatConversation.from_dict(value)
            except (KeyError, ValueError, TypeError) as e:
                get_logger().debug(f"Skipping unreadable conversation {key!r}: {e}")
        return conversations

    def get(self, history_item_id: str) -> Optional[ChatConversation]:
        with self._lock:
            return self._read_all().get(history_item_id)

    def save(self, conversation: ChatConversation) -> None:
        with self._lock:
            conversations = self._read_all()
            conversation.last_updated = now_ms()
            conversations[conversation.history_item_id] = conversation
            self._save_payload({key: value.to_dict() for key, value in conversations.items()})

    def clear_all(self) -> None:
        with self._lock:
            self._remove_payload()
