# platforms/chat_completion_platform.py
from abc import ABC, abstractmethod
from typing import List, Union

Messages = List[dict]


def to_messages(prompt: Union[str, Messages]) -> Messages:
    """Accept either a bare user prompt or a full message list."""
    if isinstance(prompt, str):
        return [{"role": "user", "content": prompt}]
    return [{"role": m["role"], "content": m["content"]} for m in prompt]


class ChatCompletionPlatform(ABC):
    """
    Abstract base class for chat-completion style APIs.
    """

    @abstractmethod
    def call_api(self, model: str, messages: Union[str, Messages], **kwargs) -> str:
        """
        Sends messages to the platform and returns a string response.
        messages: list of dicts, e.g. [{"role": "user", "content": "..."}], or a plain prompt
        kwargs: max_tokens, temperature and other platform-specific parameters
        """
        pass

    @abstractmethod
    def validate_credentials(self):
        """
        Optional: verify that API keys or auth are set correctly.
        """
        pass
