"""Cancellation support for hint fetches and other late-completing work."""

import threading
from typing import Callable, Optional


class CancellationToken:
    """Token to check whether cancellation of an operation was requested."""

    def __init__(self, is_cancelled_fn: Optional[Callable[[], bool]] = None):
        """
        Args:
            is_cancelled_fn: Optional callback that returns True if cancellation requested.
                           If None, cancellation is never triggered.
        """
        self._is_cancelled_fn = is_cancelled_fn or (lambda: False)

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation has been requested."""
        return self._is_cancelled_fn()


class CancellationSource:
    """Owns a cancellation flag and hands out tokens bound to it."""

    def __init__(self):
        self._event = threading.Event()
        self.token = CancellationToken(self._event.is_set)

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


# Default token that never cancels
NONE_TOKEN = CancellationToken()
