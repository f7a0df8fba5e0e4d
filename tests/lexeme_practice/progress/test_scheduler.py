#!/usr/bin/env python3
"""
Tests for SM-2 scheduling and practice-order scoring.
"""
from dataclasses import replace

import pytest

from lexeme_practice.hints.schema import Lexeme
from lexeme_practice.progress.scheduler import (
    DAY_MS,
    HOUR_MS,
    MAX_EASINESS_FACTOR,
    MIN_EASINESS_FACTOR,
    calculate_next_interval,
    calculate_quality,
    format_next_due,
    get_due_statistics,
    is_due,
    score_lexeme,
    select_next_lexemes,
    update_easiness_factor,
)
from lexeme_practice.progress.schema import LexemeProgress

NOW = 1_700_000_000_000


def test_quality_from_correctness_and_speed():
    assert calculate_quality(False) == 2
    assert calculate_quality(False, 500) == 2
    assert calculate_quality(True) == 4
    assert calculate_quality(True, 2999) == 5
    assert calculate_quality(True, 3000) == 4
    assert calculate_quality(True, 6999) == 4
    assert calculate_quality(True, 7000) == 3


def test_easiness_factor_update_is_clamped():
    assert update_easiness_factor(2.5, 5) == pytest.approx(2.6)
    assert update_easiness_factor(2.5, 4) == pytest.approx(2.5)
    assert update_easiness_factor(2.5, 2) == pytest.approx(2.18)
    assert update_easiness_factor(MAX_EASINESS_FACTOR, 5) == MAX_EASINESS_FACTOR
    assert update_easiness_factor(MIN_EASINESS_FACTOR, 0) == MIN_EASINESS_FACTOR


def test_next_interval_progression():
    assert calculate_next_interval(2, 15, 2.5) == 1
    assert calculate_next_interval(4, 0, 2.5) == 1
    assert calculate_next_interval(4, 1, 2.5) == 6
    assert calculate_next_interval(4, 6, 2.5) == 15
    # 3 * 2.5 = 7.5 rounds half up
    assert calculate_next_interval(4, 3, 2.5) == 8


def test_unseen_lexeme_outranks_seen_ones():
    lexeme = Lexeme(text="makan")
    assert score_lexeme(lexeme, None, NOW) == 70

    struggling = LexemeProgress(text="makan", times_seen=4, times_correct=0, last_practiced_at=NOW - DAY_MS,
                                easiness_factor=MIN_EASINESS_FACTOR, next_due=NOW)
    assert score_lexeme(lexeme, struggling, NOW) == pytest.approx(5 + 3)


def test_overdue_and_recency_weights():
    lexeme = Lexeme(text="makan")
    base = LexemeProgress(text="makan", times_seen=2, times_correct=2, last_practiced_at=NOW - 2 * DAY_MS,
                          easiness_factor=MAX_EASINESS_FACTOR, next_due=NOW)
    assert score_lexeme(lexeme, base, NOW) == pytest.approx(0)

    overdue = replace(base, next_due=NOW - 2 * DAY_MS)
    assert score_lexeme(lexeme, overdue, NOW) == pytest.approx(20)

    just_seen = replace(base, last_practiced_at=NOW)
    assert score_lexeme(lexeme, just_seen, NOW) == pytest.approx(-8)

    new_lexeme = Lexeme(text="makan", is_new=True)
    assert score_lexeme(new_lexeme, base, NOW) == pytest.approx(7)


def test_select_next_orders_by_priority_and_skips_recent():
    known = LexemeProgress(text="makan", times_seen=5, times_correct=5, last_practiced_at=NOW - DAY_MS,
                           easiness_factor=MAX_EASINESS_FACTOR, next_due=NOW + DAY_MS)
    lexemes = [Lexeme(text="makan"), Lexeme(text="minum"), Lexeme(text="tidur")]
    progress_map = {"makan": known}

    selected = select_next_lexemes(lexemes, progress_map, now=NOW)
    assert [l.text for l in selected] == ["minum", "tidur", "makan"]

    selected = select_next_lexemes(lexemes, progress_map, count=1, recently_seen={"minum"}, now=NOW)
    assert [l.text for l in selected] == ["tidur"]


def test_due_statistics_and_is_due():
    lexemes = [Lexeme(text=t) for t in ("a", "b", "c", "d")]
    progress_map = {
        "a": LexemeProgress(text="a", times_seen=1, next_due=NOW - 1),
        "b": LexemeProgress(text="b", times_seen=1, next_due=NOW + HOUR_MS, mastered=True),
        "c": LexemeProgress(text="c", times_seen=1, next_due=NOW + 3 * DAY_MS),
    }
    stats = get_due_statistics(lexemes, progress_map, NOW)
    assert (stats.due_now, stats.due_soon, stats.new_words, stats.mastered, stats.total_words) == (1, 1, 1, 1, 4)

    assert is_due(None, NOW)
    assert is_due(progress_map["a"], NOW)
    assert not is_due(progress_map["c"], NOW)


def test_format_next_due():
    assert format_next_due(NOW - 5 * 60 * 1000, NOW) == "5m overdue"
    assert format_next_due(NOW - 3 * HOUR_MS, NOW) == "3h overdue"
    assert format_next_due(NOW - 2 * DAY_MS, NOW) == "2d overdue"
    assert format_next_due(NOW + 10 * 60 * 1000, NOW) == "Due soon"
    assert format_next_due(NOW + 5 * HOUR_MS, NOW) == "Due in 5h"
    assert format_next_due(NOW + 6 * DAY_MS, NOW) == "Due in 6d"
