import time
from typing import List

from lexeme_practice.core.models.registry import ModelRegistry
from lexeme_practice.language.language_helper import get_language_name_in_english
from lexeme_practice.logging import get_logger
from lexeme_practice.platforms.chat_completion_platform import ChatCompletionPlatform
from lexeme_practice.platforms.platform_registry import PlatformRegistry
from lexeme_practice.util.json_utils import split_comma_list

SYSTEM_PROMPT_TEMPLATE = (
    "You are a language learning assistant helping English speakers learn {language_name}. "
    "Given a {language_name} word, list 3 to 5 related {language_name} words that a learner "
    "might associate with it (same topic, common collocations, word family). "
    "Do not include the word itself or any English translations. "
    "Return only the words as a single comma-separated list."
)


class RelatedWordsGenerator:
    """Asks a chat-completion model for words related to a vocabulary item."""

    def __init__(self, model_id: str, source_language_code: str = "id", max_tokens: int = 60,
                 platform: ChatCompletionPlatform = None):
        self.model_id = model_id
        self.max_tokens = max_tokens
        self.language_name = get_language_name_in_english(source_language_code)
        self._platform = platform

    @property
    def platform(self) -> ChatCompletionPlatform:
        if self._platform is None:
            model = ModelRegistry.get(self.model_id)
            self._platform = PlatformRegistry.get(model.platform_id)
        return self._platform

    def build_messages(self, word: str) -> List[dict]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT_TEMPLATE.format(language_name=self.language_name)},
            {"role": "user", "content": f'{self.language_name} word: "{word}"'},
        ]

    def generate(self, word: str) -> List[str]:
        """Return related words; raises on platform errors. May return an empty list."""
        logger = get_logger()
        messages = self.build_messages(word)
        logger.debug(f"Requesting related words for {word!r} from {self.model_id}")

        start_time = time.time()
        response_text = self.platform.call_api(self.model_id, messages, max_tokens=self.max_tokens)
        elapsed = time.time() - start_time

        related_words = split_comma_list(response_text)
        logger.trace(f"Related words for {word!r} in {elapsed:.2f}s: {related_words}")
        return related_words
