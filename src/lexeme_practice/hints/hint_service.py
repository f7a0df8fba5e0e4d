from typing import Callable, List, Optional, Protocol

from lexeme_practice.caching.hint_cache import HintCache
from lexeme_practice.logging import get_logger
from lexeme_practice.util.cancellation import CancellationToken, NONE_TOKEN
from lexeme_practice.util.clock import now_ms
from .fallback import generate_fallback_words
from .rate_limiter import RateLimiter
from .schema import HintData, HintSource, Lexeme


class HintGenerator(Protocol):
    def generate(self, word: str) -> List[str]:
        ...


class HintService:
    """Cache lookup, rate-limited remote generation and fallback for lexeme hints.

    ``get_hint`` never raises: any failure on the remote path (rate limit,
    platform error, empty answer) turns into a fallback hint, which is
    cached like a remote one.
    """

    def __init__(self, cache: HintCache, rate_limiter: RateLimiter, generator: Optional[HintGenerator],
                 clock: Callable[[], int] = now_ms):
        self.cache = cache
        self.rate_limiter = rate_limiter
        self.generator = generator
        self._clock = clock
        self.cache.add_clear_listener(self.rate_limiter.reset)

    def get_hint(self, lexeme: Lexeme, cancellation_token: CancellationToken = NONE_TOKEN) -> HintData:
        logger = get_logger()
        key = lexeme.text

        try:
            self.cache.ensure_loaded()
        except Exception as e:
            logger.error(f"Failed to load hint cache: {e}")

        cached = self.cache.get(key)
        if cached is not None:
            logger.trace(f"Hint cache hit for {key!r}")
            return cached

        if cancellation_token.is_cancelled:
            logger.debug(f"Hint request for {key!r} cancelled before generation")
            return HintData(related_words=generate_fallback_words(key), timestamp=self._clock(),
                            source=HintSource.FALLBACK)

        related_words = self._generate_remote(key)
        if related_words:
            hint = HintData(related_words=tuple(related_words), timestamp=self._clock(), source=HintSource.REMOTE)
        else:
            hint = HintData(related_words=generate_fallback_words(key), timestamp=self._clock(),
                            source=HintSource.FALLBACK)

        if cancellation_token.is_cancelled:
            logger.debug(f"Hint request for {key!r} was cancelled, result not cached")
            return hint

        self._store(key, hint)
        return hint

    def _generate_remote(self, word: str) -> Optional[List[str]]:
        logger = get_logger()
        if self.generator is None:
            return None

        if not self.rate_limiter.try_acquire():
            logger.warning(f"Hint rate limit reached ({self.rate_limiter.max_requests_per_minute}/min), using fallback",
                           word=word)
            return None

        try:
            related_words = self.generator.generate(word)
        except Exception as e:
            logger.error(f"Failed to generate hint: {e}", word=word)
            return None

        if not related_words:
            logger.warning("Invalid hint format: empty related words", word=word)
            return None
        return [str(w) for w in related_words]

    def _store(self, key: str, hint: HintData) -> None:
        try:
            self.cache.put(key, hint)
        except Exception as e:
            get_logger().error(f"Failed to save hint cache: {e}")

    def clear_cache(self) -> None:
        """Drop all cached hints, the durable payload and rate-limit history."""
        self.cache.clear()
