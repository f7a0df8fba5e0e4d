import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from lexeme_practice.logging import LogLevel
from lexeme_practice.util.paths import get_config_path

TIMEOUT_ENV_VAR = "LEXEME_PRACTICE_OPENAI_TIMEOUT_MS"


@dataclass(frozen=True)
class HintSettings:
    max_cache_size: int = 500
    cache_key: str = "cshs-hints"
    max_requests_per_minute: int = 20
    max_tokens: int = 60
    model_id: str = "gpt-4o"
    source_language_code: str = "id"


@dataclass(frozen=True)
class ChatSettings:
    model_id: str = "gpt-4o"
    temperature: float = 0.7
    max_tokens: int = 500
    timeout_seconds: float = 30.0


class ConfigManager:

    def __init__(self, config_path: Path = None, config_data: dict = None):
        self._config_path = Path(config_path) if config_path else get_config_path()
        self._config_data = config_data
        self._hint_settings: Optional[HintSettings] = None
        self._chat_settings: Optional[ChatSettings] = None

    @property
    def config_path(self):
        return self._config_path

    def load_config_data(self):
        if self._config_data is None:
            if not self._config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self._config_path}")

            with open(self._config_path, 'r', encoding='utf-8') as f:
                self._config_data = json.load(f)

        return self._config_data

    def get_hint_settings(self) -> HintSettings:
        if self._hint_settings is None:
            section = self.load_config_data().get('hint', {})
            defaults = HintSettings()
            self._hint_settings = HintSettings(
                max_cache_size=int(section.get('max_cache_size', defaults.max_cache_size)),
                cache_key=section.get('cache_key', defaults.cache_key),
                max_requests_per_minute=int(section.get('max_requests_per_minute', defaults.max_requests_per_minute)),
                max_tokens=int(section.get('max_tokens', defaults.max_tokens)),
                model_id=section.get('model_id', defaults.model_id),
                source_language_code=section.get('source_language_code', defaults.source_language_code),
            )
        return self._hint_settings

    def get_chat_settings(self) -> ChatSettings:
        if self._chat_settings is None:
            section = self.load_config_data().get('chat', {})
            defaults = ChatSettings()
            timeout_seconds = float(section.get('timeout_seconds', defaults.timeout_seconds))
            timeout_override = os.environ.get(TIMEOUT_ENV_VAR)
            if timeout_override:
                timeout_seconds = int(timeout_override) / 1000
            self._chat_settings = ChatSettings(
                model_id=section.get('model_id', defaults.model_id),
                temperature=float(section.get('temperature', defaults.temperature)),
                max_tokens=int(section.get('max_tokens', defaults.max_tokens)),
                timeout_seconds=timeout_seconds,
            )
        return self._chat_settings

    def get_log_level(self) -> LogLevel:
        return LogLevel.from_name(self.load_config_data().get('log_level', 'INFO'), default=LogLevel.INFO)
