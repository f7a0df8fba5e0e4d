"""SM-2 spaced repetition and practice-order scoring."""

import math
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from lexeme_practice.hints.schema import Lexeme
from lexeme_practice.util.clock import now_ms
from .schema import LexemeProgress

MIN_EASINESS_FACTOR = 1.3
MAX_EASINESS_FACTOR = 2.6

# Priority weights; recency is a penalty
WEIGHTS = {
    "overdue": 10,
    "accuracy": 5,
    "difficulty": 3,
    "recency": -8,
    "new_word": 7,
}

HOUR_MS = 60 * 60 * 1000
DAY_MS = 24 * HOUR_MS
RECENCY_WINDOW_MS = 30 * 60 * 1000


def calculate_quality(is_correct: bool, response_time_ms: Optional[int] = None) -> int:
    """SM-2 quality (0-5) of one answer: 2 when wrong, 3-5 by speed when right."""
    if not is_correct:
        return 2
    if response_time_ms is None:
        return 4
    if response_time_ms < 3000:
        return 5
    if response_time_ms < 7000:
        return 4
    return 3


def update_easiness_factor(current: float, quality: int) -> float:
    new_factor = current + (0.1 - (5 - quality) * (0.08 + (5 - quality) * 0.02))
    return max(MIN_EASINESS_FACTOR, min(MAX_EASINESS_FACTOR, new_factor))


def calculate_next_interval(quality: int, previous_interval: int, easiness_factor: float) -> int:
    """Days until the next review: 1, then 6, then the previous interval times the factor."""
    if quality < 3:
        return 1
    if previous_interval == 0:
        return 1
    if previous_interval == 1:
        return 6
    # Half-up rounding
    return int(math.floor(previous_interval * easiness_factor + 0.5))


def score_lexeme(lexeme: Lexeme, progress: Optional[LexemeProgress], now: int) -> float:
    """Practice priority; higher means sooner. Unseen lexemes rank above almost everything."""
    if progress is None:
        return WEIGHTS["new_word"] * 10

    score = 0.0

    overdue_days = max(0.0, (now - progress.next_due) / DAY_MS)
    score += WEIGHTS["overdue"] * overdue_days

    score += WEIGHTS["accuracy"] * (1 - progress.accuracy)

    difficulty = (MAX_EASINESS_FACTOR - progress.easiness_factor) / (MAX_EASINESS_FACTOR - MIN_EASINESS_FACTOR)
    score += WEIGHTS["difficulty"] * difficulty

    since_last = now - progress.last_practiced_at
    if since_last < RECENCY_WINDOW_MS:
        score += WEIGHTS["recency"] * (1 - since_last / RECENCY_WINDOW_MS)

    if lexeme.is_new and progress.times_seen < 3:
        score += WEIGHTS["new_word"]

    return score


def select_next_lexemes(lexemes: Iterable[Lexeme], progress_map: Mapping[str, LexemeProgress], count: int = 50,
                        recently_seen: Iterable[str] = (), now: Optional[int] = None) -> List[Lexeme]:
    """Highest-priority lexemes first, skipping ``recently_seen`` texts. Ties keep input order."""
    now = now_ms() if now is None else now
    excluded = set(recently_seen)
    scored = [
        (score_lexeme(lexeme, progress_map.get(lexeme.text), now), lexeme)
        for lexeme in lexemes
        if lexeme.text not in excluded
    ]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [lexeme for _, lexeme in scored[:count]]


@dataclass(frozen=True)
class DueStatistics:
    due_now: int
    due_soon: int
    new_words: int
    mastered: int
    total_words: int


def get_due_statistics(lexemes: List[Lexeme], progress_map: Mapping[str, LexemeProgress], now: int) -> DueStatistics:
    due_now = due_soon = new_words = mastered = 0
    for lexeme in lexemes:
        progress = progress_map.get(lexeme.text)
        if progress is None:
            new_words += 1
            continue
        if progress.mastered:
            mastered += 1
        if is_due(progress, now):
            due_now += 1
        elif progress.next_due <= now + DAY_MS:
            due_soon += 1
    return DueStatistics(due_now=due_now, due_soon=due_soon, new_words=new_words, mastered=mastered,
                         total_words=len(lexemes))


def is_due(progress: Optional[LexemeProgress], now: int) -> bool:
    if progress is None:
        return True
    return progress.next_due <= now


def format_next_due(next_due: int, now: int) -> str:
    diff = next_due - now
    abs_diff = abs(diff)

    if diff < 0:
        if abs_diff < HOUR_MS:
            return f"{abs_diff // (60 * 1000)}m overdue"
        if abs_diff < DAY_MS:
            return f"{abs_diff // HOUR_MS}h overdue"
        return f"{abs_diff // DAY_MS}d overdue"

    if abs_diff < HOUR_MS:
        return "Due soon"
    if abs_diff < DAY_MS:
        return f"Due in {abs_diff // HOUR_MS}h"
    return f"Due in {abs_diff // DAY_MS}d"
