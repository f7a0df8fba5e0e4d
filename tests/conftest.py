import os
import sys

import pytest

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from lexeme_practice.logging import LoggerRegistry, MemoryLogger


@pytest.fixture
def memory_logger():
    logger = MemoryLogger()
    LoggerRegistry.set(logger)
    yield logger
    LoggerRegistry.reset()


class FakeClock:
    """Manually advanced epoch-millisecond clock."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
