import threading
from typing import Callable, Dict, List, Optional

from lexeme_practice.caching.base_cache import BaseCache
from lexeme_practice.hints.schema import HintData
from lexeme_practice.logging import get_logger

DEFAULT_CAPACITY = 500


class HintCache(BaseCache):
    """Capacity-bounded hint store keyed by exact lexeme text.

    Only the ``capacity`` most recently produced entries (by timestamp) are
    kept, both in memory and in the durable payload. Loading from disk
    happens lazily, at most once per instance.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, cache_dir=None, cache_suffix='default',
                 cache_name: str = "hint_cache"):
        if capacity < 1:
            raise ValueError("Hint cache capacity must be at least 1")
        super().__init__(cache_name, cache_dir, cache_suffix)
        self.capacity = capacity
        self._entries: Dict[str, HintData] = {}
        self._loaded = False
        self._lock = threading.RLock()
        self._clear_listeners: List[Callable[[], None]] = []

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def add_clear_listener(self, listener: Callable[[], None]) -> None:
        self._clear_listeners.append(listener)

    def ensure_loaded(self) -> None:
        with self._lock:
            if not self._loaded:
                self.load()

    def load(self) -> None:
        """Replace memory with the durable payload, skipping entries that fail to parse."""
        logger = get_logger()
        with self._lock:
            payload = self._load_payload()
            entries = {}
            skipped = 0
            for key, value in payload.items():
                try:
                    entries[key] = HintData.from_dict(value)
                except (ValueError, TypeError, OverflowError):
                    skipped += 1
            if skipped:
                logger.debug(f"Skipped {skipped} unreadable or legacy hint entries")
            self._entries = self._most_recent(entries)
            self._loaded = True
            logger.trace(f"Loaded {len(self._entries)} hints from {self.cache_file.name}")

    def get(self, key: str) -> Optional[HintData]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: HintData) -> None:
        with self._lock:
            self._entries[key] = value
            self.persist()

    def persist(self) -> None:
        """Trim to capacity by timestamp and overwrite the durable payload."""
        with self._lock:
            self._entries = self._most_recent(self._entries)
            self._save_payload({key: value.to_dict() for key, value in self._entries.items()})

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._remove_payload()
            self._loaded = True
        for listener in self._clear_listeners:
            listener()

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def _most_recent(self, entries: Dict[str, HintData]) -> Dict[str, HintData]:
        ordered = sorted(entries.items(), key=lambda item: item[1].timestamp, reverse=True)
        return dict(ordered[:self.capacity])
