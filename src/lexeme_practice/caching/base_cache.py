import json
from pathlib import Path

from lexeme_practice.logging import get_logger
from lexeme_practice.util.json_utils import read_json_object
from lexeme_practice.util.paths import get_cache_dir


class BaseCache:
    """Base class for JSON-file caches addressed by a single fixed file name.

    The whole mapping is the durable payload: every save rewrites the file.
    """

    def __init__(self, cache_name: str, cache_dir=None, cache_suffix='default'):
        if cache_dir is None:
            cache_dir = get_cache_dir()
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.cache_file = self.cache_dir / f"{cache_name}_{cache_suffix}.json"

    def _load_payload(self) -> dict:
        """Read the durable payload; a missing or corrupt file reads as empty."""
        if not self.cache_file.exists():
            return {}
        try:
            return read_json_object(self.cache_file)
        except (json.JSONDecodeError, OSError, ValueError) as e:
            get_logger().warning(f"Ignoring unreadable cache file {self.cache_file.name}: {e}")
            return {}

    def _save_payload(self, payload: dict):
        with open(self.cache_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)

    def _remove_payload(self):
        self.cache_file.unlink(missing_ok=True)
