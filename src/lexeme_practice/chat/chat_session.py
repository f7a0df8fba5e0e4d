import threading
from typing import List, Optional

from lexeme_practice.logging import get_logger
from lexeme_practice.platforms.chat_completion_platform import ChatCompletionPlatform
from .conversation_store import ConversationStore
from .schema import ChatConversation, ChatMessage, ChatRole


class ChatSession:
    """Tutoring conversation tied to one practice history item.

    ``version`` increases on every local change. A conversation loaded from
    the store is applied only when it is strictly newer than the session,
    so a slow load can never overwrite messages typed in the meantime.
    """

    def __init__(self, history_item_id: str, system_prompt: str, platform: ChatCompletionPlatform,
                 model_id: str, store: Optional[ConversationStore] = None,
                 temperature: float = 0.7, max_tokens: int = 500):
        self.history_item_id = history_item_id
        self.platform = platform
        self.model_id = model_id
        self.store = store
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.messages: List[ChatMessage] = [ChatMessage(role=ChatRole.SYSTEM, content=system_prompt)]
        self.version = 0
        self.is_sending = False
        self._lock = threading.Lock()

    def visible_messages(self) -> List[ChatMessage]:
        return [m for m in self.messages if m.role != ChatRole.SYSTEM]

    def _append(self, message: ChatMessage) -> None:
        with self._lock:
            self.messages = self.messages + [message]
            self.version += 1

    def send_message(self, content: str) -> Optional[ChatMessage]:
        """Send a user message and return the assistant reply, or None if nothing was sent or the call failed."""
        logger = get_logger()
        if not content.strip() or self.is_sending:
            return None

        user_message = ChatMessage(role=ChatRole.USER, content=content)
        self._append(user_message)
        self.is_sending = True
        history = [{"role": m.role.value, "content": m.content} for m in self.messages]

        try:
            reply_text = self.platform.call_api(
                self.model_id, history, temperature=self.temperature, max_tokens=self.max_tokens
            )
        except Exception as e:
            logger.error(f"Failed to get AI response: {e}", history_item_id=self.history_item_id)
            self.is_sending = False
            self.persist()
            return None

        assistant_message = ChatMessage(role=ChatRole.ASSISTANT, content=reply_text)
        self._append(assistant_message)
        self.is_sending = False
        self.persist()
        return assistant_message

    def reset(self, system_prompt: str) -> None:
        with self._lock:
            self.messages = [ChatMessage(role=ChatRole.SYSTEM, content=system_prompt)]
            self.version += 1
        self.is_sending = False

    def snapshot(self) -> ChatConversation:
        with self._lock:
            return ChatConversation(
                history_item_id=self.history_item_id,
                messages=list(self.messages),
                last_updated=self.messages[-1].timestamp,
                version=self.version,
            )

    def persist(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(self.snapshot())
        except OSError as e:
            get_logger().error(f"Failed to save chat conversation: {e}", history_item_id=self.history_item_id)

    def apply_loaded(self, conversation: Optional[ChatConversation]) -> bool:
        """Adopt a loaded conversation if it is strictly newer. Returns True when applied."""
        logger = get_logger()
        if conversation is None:
            return False

        with self._lock:
            is_newer = conversation.version > self.version
            has_more = len(conversation.messages) > len(self.messages)
            if not (is_newer and has_more):
                logger.warning(
                    "Discarding stale conversation load",
                    history_item_id=self.history_item_id,
                    loaded_version=conversation.version,
                    current_version=self.version,
                    loaded_messages=len(conversation.messages),
                    current_messages=len(self.messages),
                )
                return False
            self.messages = list(conversation.messages)
            self.version = conversation.version
        logger.trace(f"Restored conversation with {len(conversation.messages)} messages",
                     history_item_id=self.history_item_id)
        return True

    def load_from_store(self) -> bool:
        if self.store is None:
            return False
        return self.apply_loaded(self.store.get(self.history_item_id))
