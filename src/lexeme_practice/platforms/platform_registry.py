from lexeme_practice.platforms.chat_completion_platform import ChatCompletionPlatform


class PlatformRegistry:
    _platforms: dict[str, ChatCompletionPlatform] = {}

    @classmethod
    def register(cls, platform: ChatCompletionPlatform):
        cls._platforms[platform.id] = platform

    @classmethod
    def get(cls, platform_id: str) -> ChatCompletionPlatform:
        if platform_id not in cls._platforms:
            raise KeyError(f"Unknown platform: {platform_id}")
        return cls._platforms[platform_id]

    @classmethod
    def list(cls):
        return cls._platforms.values()

    @classmethod
    def clear(cls):
        cls._platforms.clear()
