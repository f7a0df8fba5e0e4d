from lexeme_practice.platforms.platform_registry import PlatformRegistry
from lexeme_practice.platforms.openai_platform import OpenAIPlatform
from lexeme_practice.platforms.gemini_platform import GeminiPlatform

from lexeme_practice.core.models.registry import ModelRegistry
from lexeme_practice.core.models.model_loader import load_models_from_yaml

_bootstrapped = False


def bootstrap_platform_registry(openai_timeout: float = None):
    if openai_timeout is None:
        PlatformRegistry.register(OpenAIPlatform())
    else:
        PlatformRegistry.register(OpenAIPlatform(timeout=openai_timeout))
    PlatformRegistry.register(GeminiPlatform())


def bootstrap_model_registry(models_config_path=None):
    for model in load_models_from_yaml(models_config_path):
        ModelRegistry.register(model)


def bootstrap_all(openai_timeout: float = None, models_config_path=None):
    global _bootstrapped
    if _bootstrapped:
        return
    bootstrap_platform_registry(openai_timeout)
    bootstrap_model_registry(models_config_path)
    _bootstrapped = True
