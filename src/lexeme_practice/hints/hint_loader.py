import threading
from typing import Optional

from lexeme_practice.logging import get_logger
from lexeme_practice.util.cancellation import CancellationSource
from .hint_service import HintService
from .schema import HintData, HintStatus, Lexeme


class HintLoader:
    """Hint state for one on-screen lexeme: status, loaded hint and last error.

    Each fetch gets its own cancellation source; switching lexemes cancels the
    in-flight one, so a late result is neither shown nor cached.
    """

    def __init__(self, service: HintService, lexeme: Lexeme, prefetch: bool = False):
        self.service = service
        self.lexeme = lexeme
        self.hint: Optional[HintData] = None
        self.status = HintStatus.IDLE
        self.error: Optional[str] = None
        self._source: Optional[CancellationSource] = None
        self._lock = threading.Lock()
        if prefetch:
            self.load()

    def fetch(self, source: CancellationSource, lexeme: Lexeme = None) -> None:
        lexeme = lexeme or self.lexeme
        with self._lock:
            if source.is_cancelled:
                return
            self.status = HintStatus.LOADING
            self.error = None

        try:
            hint = self.service.get_hint(lexeme, source.token)
        except Exception as e:
            if not source.is_cancelled:
                with self._lock:
                    self.error = str(e) or "Failed to generate hint"
                    self.status = HintStatus.ERROR
            get_logger().error(f"Hint fetch failed: {e}", word=lexeme.text)
            return

        with self._lock:
            if source.is_cancelled:
                return
            self.hint = hint
            self.status = HintStatus.READY

    def load(self) -> bool:
        """Start a fetch when idle or after an error. Returns True if one ran."""
        if self.status not in (HintStatus.IDLE, HintStatus.ERROR):
            return False
        self._source = CancellationSource()
        self.fetch(self._source)
        return True

    def load_in_background(self) -> Optional[threading.Thread]:
        """Like load, but run the fetch on a daemon thread and return it."""
        if self.status not in (HintStatus.IDLE, HintStatus.ERROR):
            return None
        self._source = CancellationSource()
        self.status = HintStatus.LOADING
        thread = threading.Thread(target=self.fetch, args=(self._source, self.lexeme), daemon=True)
        thread.start()
        return thread

    def cancel(self) -> None:
        if self._source is not None:
            self._source.cancel()

    def reset(self, lexeme: Lexeme) -> None:
        """Switch to another lexeme, abandoning any in-flight fetch."""
        self.cancel()
        with self._lock:
            self.lexeme = lexeme
            self.hint = None
            self.status = HintStatus.IDLE
            self.error = None
        self._source = None
