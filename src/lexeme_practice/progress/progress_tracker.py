from dataclasses import replace
from typing import Callable, Iterable, List, Optional

from lexeme_practice.hints.schema import Lexeme
from lexeme_practice.logging import get_logger
from lexeme_practice.util.clock import now_ms
from .progress_store import ProgressStore
from .scheduler import (
    DAY_MS,
    DueStatistics,
    calculate_next_interval,
    calculate_quality,
    get_due_statistics,
    select_next_lexemes,
    update_easiness_factor,
)
from .schema import AnswerRecord, LexemeProgress, PracticeHistoryItem, UserStats

MASTERED_AFTER_CORRECT = 3


class ProgressTracker:
    """Records answers and picks what to practice next."""

    def __init__(self, store: ProgressStore, clock: Callable[[], int] = now_ms):
        self.store = store
        self._clock = clock

    def record_answer(self, lexeme: Lexeme, is_correct: bool, response_time_ms: Optional[int] = None) -> AnswerRecord:
        """Update the lexeme's counters and SM-2 schedule, the overall stats and the history.

        A lexeme counts as mastered once it has been answered correctly
        three times in total; mastery is never revoked.
        """
        now = self._clock()
        previous = self.store.get_progress(lexeme.text) or LexemeProgress(text=lexeme.text, last_practiced_at=now)

        quality = calculate_quality(is_correct, response_time_ms)
        easiness_factor = update_easiness_factor(previous.easiness_factor, quality)
        interval_days = calculate_next_interval(quality, previous.interval_days, easiness_factor)
        times_correct = previous.times_correct + (1 if is_correct else 0)

        progress = replace(
            previous,
            times_seen=previous.times_seen + 1,
            times_correct=times_correct,
            last_practiced_at=now,
            mastered=previous.mastered or times_correct >= MASTERED_AFTER_CORRECT,
            easiness_factor=easiness_factor,
            interval_days=interval_days,
            next_due=now + interval_days * DAY_MS,
            consecutive_correct=previous.consecutive_correct + 1 if is_correct else 0,
        )
        self.store.put_progress(progress)

        previous_stats = self.store.get_stats() or UserStats()
        stats = UserStats(
            total_seen=previous_stats.total_seen + 1,
            total_correct=previous_stats.total_correct + (1 if is_correct else 0),
            last_practiced_at=now,
        )
        self.store.put_stats(stats)

        history_item = PracticeHistoryItem(
            word=lexeme.text,
            translation=tuple(lexeme.translations),
            is_correct=is_correct,
            timestamp=now,
        )
        self.store.add_history_item(history_item)

        get_logger().trace(
            f"Recorded {'correct' if is_correct else 'incorrect'} answer",
            word=lexeme.text, quality=quality, interval_days=interval_days,
        )
        return AnswerRecord(progress=progress, stats=stats, history_item=history_item, quality=quality)

    def select_next(self, lexemes: Iterable[Lexeme], count: int = 50, recently_seen: Iterable[str] = ()) -> List[Lexeme]:
        return select_next_lexemes(lexemes, self.store.all_progress(), count=count,
                                   recently_seen=recently_seen, now=self._clock())

    def due_statistics(self, lexemes: List[Lexeme]) -> DueStatistics:
        return get_due_statistics(lexemes, self.store.all_progress(), self._clock())
