#!/usr/bin/env python3
"""
Tests for answer recording, persisted progress and practice history.
"""
import json

import pytest

from lexeme_practice.hints.schema import Lexeme
from lexeme_practice.progress.progress_store import ProgressStore
from lexeme_practice.progress.progress_tracker import ProgressTracker
from lexeme_practice.progress.scheduler import DAY_MS
from lexeme_practice.progress.schema import LexemeProgress, UserStats

MAKAN = Lexeme(text="makan", translations=("eat", "to eat"))


def make_tracker(tmp_path, clock):
    return ProgressTracker(ProgressStore(cache_dir=tmp_path), clock=clock)


def test_first_correct_answer(tmp_path, clock):
    tracker = make_tracker(tmp_path, clock)
    record = tracker.record_answer(MAKAN, True, response_time_ms=1000)

    assert record.quality == 5
    assert record.progress == LexemeProgress(
        text="makan", times_seen=1, times_correct=1, last_practiced_at=clock.now, mastered=False,
        easiness_factor=pytest.approx(2.6), interval_days=1, next_due=clock.now + DAY_MS, consecutive_correct=1,
    )
    assert record.stats == UserStats(total_seen=1, total_correct=1, last_practiced_at=clock.now)
    assert record.history_item.word == "makan"
    assert record.history_item.translation == ("eat", "to eat")
    assert record.history_item.is_correct
    assert record.history_item.timestamp == clock.now


def test_answers_update_schedule_streak_and_mastery(tmp_path, clock):
    tracker = make_tracker(tmp_path, clock)

    tracker.record_answer(MAKAN, True, response_time_ms=1000)
    wrong = tracker.record_answer(MAKAN, False).progress
    assert wrong.consecutive_correct == 0
    assert wrong.easiness_factor == pytest.approx(2.28)
    assert wrong.interval_days == 1

    second = tracker.record_answer(MAKAN, True).progress
    assert second.interval_days == 6
    assert second.consecutive_correct == 1
    assert not second.mastered

    third = tracker.record_answer(MAKAN, True).progress
    assert third.interval_days == 14
    assert third.times_correct == 3
    assert third.mastered

    after_miss = tracker.record_answer(MAKAN, False)
    assert after_miss.progress.mastered
    assert after_miss.progress.times_seen == 5
    assert after_miss.stats == UserStats(total_seen=5, total_correct=3, last_practiced_at=clock.now)


def test_progress_persists_across_stores(tmp_path, clock):
    tracker = make_tracker(tmp_path, clock)
    record = tracker.record_answer(MAKAN, True)

    reloaded = ProgressStore(cache_dir=tmp_path)
    assert reloaded.get_progress("makan") == record.progress
    assert reloaded.get_stats() == record.stats
    assert reloaded.get_history() == [record.history_item]


def test_history_is_newest_first_and_clearable(tmp_path, clock):
    tracker = make_tracker(tmp_path, clock)
    for text in ("satu", "dua", "tiga"):
        tracker.record_answer(Lexeme(text=text), True)
        clock.advance(1000)

    store = tracker.store
    assert [item.word for item in store.get_history()] == ["tiga", "dua", "satu"]
    assert [item.word for item in store.get_history(limit=2)] == ["tiga", "dua"]

    store.clear_history()
    assert store.get_history() == []
    assert store.get_progress("satu") is not None
    assert ProgressStore(cache_dir=tmp_path).get_history() == []


def test_legacy_and_unreadable_records(tmp_path, clock, memory_logger):
    store = ProgressStore(cache_dir=tmp_path)
    store.cache_file.write_text(json.dumps({
        "lexemeProgress": {
            "lama": {"text": "lama", "timesSeen": 4, "timesCorrect": 3, "lastPracticedAt": 5, "mastered": True},
            "rusak": {"text": "rusak"},
        },
        "userStats": {"totalSeen": 4},
        "practiceHistory": [
            {"id": "h1", "word": "lama", "translation": ["old"], "isCorrect": True, "timestamp": 5},
            {"id": "h2", "word": "x", "isCorrect": True, "timestamp": float("inf")},
        ],
    }), encoding="utf-8")

    legacy = store.get_progress("lama")
    assert legacy.times_seen == 4
    assert legacy.mastered
    assert legacy.easiness_factor == 2.5
    assert legacy.interval_days == 0
    assert store.get_progress("rusak") is None
    assert store.get_stats() is None
    assert [item.id for item in store.get_history()] == ["h1"]


def test_corrupt_file_reads_empty(tmp_path, clock):
    store = ProgressStore(cache_dir=tmp_path)
    store.cache_file.write_text("{not json", encoding="utf-8")
    tracker = ProgressTracker(store, clock=clock)

    assert tracker.store.all_progress() == {}
    record = tracker.record_answer(MAKAN, False)
    assert record.progress.times_seen == 1


def test_select_next_prefers_unseen_lexemes(tmp_path, clock):
    tracker = make_tracker(tmp_path, clock)
    tracker.record_answer(MAKAN, True)
    lexemes = [MAKAN, Lexeme(text="minum")]

    assert [l.text for l in tracker.select_next(lexemes)] == ["minum", "makan"]
    assert tracker.select_next(lexemes, recently_seen=["minum"]) == [MAKAN]

    stats = tracker.due_statistics(lexemes)
    assert (stats.new_words, stats.due_now, stats.due_soon) == (1, 0, 1)
