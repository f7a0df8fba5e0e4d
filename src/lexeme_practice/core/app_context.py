from dataclasses import dataclass
from typing import Optional

from lexeme_practice.caching.hint_cache import HintCache
from lexeme_practice.chat.chat_session import ChatSession
from lexeme_practice.chat.conversation_store import ConversationStore
from lexeme_practice.configuration.config_manager import ConfigManager
from lexeme_practice.core.bootstrap import bootstrap_all
from lexeme_practice.core.models.registry import ModelRegistry
from lexeme_practice.hints.generator import RelatedWordsGenerator
from lexeme_practice.hints.hint_loader import HintLoader
from lexeme_practice.hints.hint_service import HintService
from lexeme_practice.hints.rate_limiter import RateLimiter
from lexeme_practice.hints.schema import Lexeme
from lexeme_practice.logging import ConsoleLogger, LoggerRegistry
from lexeme_practice.platforms.platform_registry import PlatformRegistry
from lexeme_practice.progress.progress_store import ProgressStore
from lexeme_practice.progress.progress_tracker import ProgressTracker


@dataclass
class AppContext:
    """Composition root: owns the process-wide hint, chat and progress services."""

    config: ConfigManager
    hint_service: HintService
    conversation_store: ConversationStore
    progress_tracker: ProgressTracker

    @classmethod
    def create(cls, config: ConfigManager = None, cache_dir=None, configure_logging: bool = True) -> "AppContext":
        config = config or ConfigManager()
        if configure_logging:
            LoggerRegistry.set(ConsoleLogger(level=config.get_log_level()))

        chat_settings = config.get_chat_settings()
        bootstrap_all(openai_timeout=chat_settings.timeout_seconds)

        hint_settings = config.get_hint_settings()
        cache = HintCache(
            capacity=hint_settings.max_cache_size,
            cache_dir=cache_dir,
            cache_suffix=hint_settings.cache_key,
        )
        rate_limiter = RateLimiter(max_requests_per_minute=hint_settings.max_requests_per_minute)
        generator = RelatedWordsGenerator(
            model_id=hint_settings.model_id,
            source_language_code=hint_settings.source_language_code,
            max_tokens=hint_settings.max_tokens,
        )
        hint_service = HintService(cache, rate_limiter, generator)
        conversation_store = ConversationStore(cache_dir=cache_dir)
        progress_tracker = ProgressTracker(ProgressStore(cache_dir=cache_dir))
        return cls(config=config, hint_service=hint_service, conversation_store=conversation_store,
                   progress_tracker=progress_tracker)

    def hint_loader(self, lexeme: Lexeme, prefetch: bool = False) -> HintLoader:
        return HintLoader(self.hint_service, lexeme, prefetch=prefetch)

    def chat_session(self, history_item_id: str, system_prompt: str, model_id: Optional[str] = None) -> ChatSession:
        settings = self.config.get_chat_settings()
        model_id = model_id or settings.model_id
        platform = PlatformRegistry.get(ModelRegistry.get(model_id).platform_id)
        session = ChatSession(
            history_item_id=history_item_id,
            system_prompt=system_prompt,
            platform=platform,
            model_id=model_id,
            store=self.conversation_store,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )
        session.load_from_store()
        return session
