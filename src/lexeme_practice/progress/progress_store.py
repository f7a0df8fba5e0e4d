import threading
from typing import Dict, List, Optional

from lexeme_practice.caching.base_cache import BaseCache
from lexeme_practice.logging import get_logger
from .schema import LexemeProgress, PracticeHistoryItem, UserStats

DEFAULT_HISTORY_LIMIT = 100


class ProgressStore(BaseCache):
    """Per-lexeme progress, overall stats and practice history in one JSON payload.

    Payload shape::

        {"lexemeProgress": {text: {...}}, "userStats": {...} | null, "practiceHistory": [{...}]}

    The payload is read lazily once; every write rewrites the whole file.
    Unreadable records are skipped rather than failing the load.
    """

    def __init__(self, cache_dir=None, cache_suffix='default'):
        super().__init__("practice_progress", cache_dir, cache_suffix)
        self._lock = threading.RLock()
        self._loaded = False
        self._progress: Dict[str, LexemeProgress] = {}
        self._stats: Optional[UserStats] = None
        self._history: List[PracticeHistoryItem] = []

    def ensure_loaded(self) -> None:
        with self._lock:
            if not self._loaded:
                self._load()

    def _load(self) -> None:
        logger = get_logger()
        payload = self._load_payload()
        skipped = 0

        progress = {}
        raw_progress = payload.get("lexemeProgress")
        for key, value in (raw_progress.items() if isinstance(raw_progress, dict) else ()):
            try:
                progress[key] = LexemeProgress.from_dict(value)
            except (KeyError, ValueError, TypeError, OverflowError):
                skipped += 1

        stats = None
        if isinstance(payload.get("userStats"), dict):
            try:
                stats = UserStats.from_dict(payload["userStats"])
            except (KeyError, ValueError, TypeError, OverflowError):
                skipped += 1

        history = []
        raw_history = payload.get("practiceHistory")
        for value in (raw_history if isinstance(raw_history, list) else ()):
            try:
                history.append(PracticeHistoryItem.from_dict(value))
            except (KeyError, ValueError, TypeError, OverflowError):
                skipped += 1

        if skipped:
            logger.debug(f"Skipped {skipped} unreadable progress records")
        self._progress, self._stats, self._history = progress, stats, history
        self._loaded = True
        logger.trace(f"Loaded progress for {len(progress)} lexemes, {len(history)} history items")

    def _persist(self) -> None:
        self._save_payload({
            "lexemeProgress": {key: value.to_dict() for key, value in self._progress.items()},
            "userStats": self._stats.to_dict() if self._stats else None,
            "practiceHistory": [item.to_dict() for item in self._history],
        })

    def get_progress(self, text: str) -> Optional[LexemeProgress]:
        with self._lock:
            self.ensure_loaded()
            return self._progress.get(text)

    def all_progress(self) -> Dict[str, LexemeProgress]:
        with self._lock:
            self.ensure_loaded()
            return dict(self._progress)

    def put_progress(self, progress: LexemeProgress) -> None:
        with self._lock:
            self.ensure_loaded()
            self._progress[progress.text] = progress
            self._persist()

    def get_stats(self) -> Optional[UserStats]:
        with self._lock:
            self.ensure_loaded()
            return self._stats

    def put_stats(self, stats: UserStats) -> None:
        with self._lock:
            self.ensure_loaded()
            self._stats = stats
            self._persist()

    def add_history_item(self, item: PracticeHistoryItem) -> None:
        with self._lock:
            self.ensure_loaded()
            self._history.append(item)
            self._persist()

    def get_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> List[PracticeHistoryItem]:
        """Newest first."""
        with self._lock:
            self.ensure_loaded()
            ordered = sorted(self._history, key=lambda item: item.timestamp, reverse=True)
            return ordered[:limit]

    def clear_history(self) -> None:
        with self._lock:
            self.ensure_loaded()
            self._history = []
            self._persist()
