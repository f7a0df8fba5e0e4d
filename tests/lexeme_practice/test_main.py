#!/usr/bin/env python3
"""
Tests for the console practice loop and its command-line options, without network access.
"""
import pytest

from lexeme_practice.chat.prompt_templates import get_prompt_template
from lexeme_practice.chat.schema import ChatRole
from lexeme_practice.configuration.config_manager import ConfigManager
from lexeme_practice.core.app_context import AppContext
from lexeme_practice.hints.schema import Lexeme
from lexeme_practice.logging import LoggerRegistry
from lexeme_practice.main import practice, run_practice

MAKAN = Lexeme(text="makan", translations=("eat",))


@pytest.fixture
def context(tmp_path, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    ctx = AppContext.create(config=ConfigManager(config_data={}), cache_dir=tmp_path, configure_logging=False)
    yield ctx
    LoggerRegistry.reset()


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_practice_records_first_attempt_and_opens_tutor(context, monkeypatch, capsys):
    feed_input(monkeypatch, ["#explain-word", "minum", "#explain-word", "#nope", "makan", ""])
    practice([MAKAN], context)
    out = capsys.readouterr().out

    assert "Starting practice: 0 due, 1 new, 0 mastered" in out
    assert "Answer first" in out
    assert "Tutor is unavailable" in out  # no API key
    assert "#word-family" in out
    assert "Correct!" in out
    assert "Practice finished." in out

    history = context.progress_tracker.store.get_history()
    assert len(history) == 1
    assert history[0].word == "makan"
    assert not history[0].is_correct

    progress = context.progress_tracker.store.get_progress("makan")
    assert progress.times_seen == 1
    assert progress.times_correct == 0

    conversation = context.conversation_store.get(history[0].id)
    user_messages = [m.content for m in conversation.messages if m.role is ChatRole.USER]
    assert user_messages == [get_prompt_template("explain-word").build("makan")]
    assert '"makan"' in conversation.messages[0].content


def test_practice_moves_on_to_another_card(context, monkeypatch, capsys):
    feed_input(monkeypatch, ["makan", "minum", ""])
    practice([MAKAN, Lexeme(text="minum", translations=("drink",))], context)
    out = capsys.readouterr().out

    assert out.count("Correct!") == 2
    assert sorted(item.word for item in context.progress_tracker.store.get_history()) == ["makan", "minum"]


def test_list_models_option(context, capsys):
    run_practice(["--list-models"], context)
    out = capsys.readouterr().out
    assert "Model: gpt-4o" in out
    assert "Available: No" in out


def test_history_options(context, capsys):
    context.progress_tracker.record_answer(MAKAN, True)
    run_practice(["--history"], context)
    assert "+ makan" in capsys.readouterr().out

    run_practice(["--clear-history"], context)
    assert "Practice history cleared." in capsys.readouterr().out
    assert context.progress_tracker.store.get_history() == []
