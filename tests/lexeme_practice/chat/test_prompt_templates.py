#!/usr/bin/env python3
"""
Tests for chat quick-action prompt templates.
"""
from lexeme_practice.chat.prompt_templates import (
    CHAT_PROMPT_TEMPLATES,
    build_tutor_system_prompt,
    format_prompt,
    get_prompt_template,
)


def test_format_prompt_replaces_known_placeholders():
    assert format_prompt("Explain '{{currentWord}}'", {"currentWord": "makan"}) == "Explain 'makan'"


def test_format_prompt_keeps_unknown_or_empty_placeholders():
    assert format_prompt("{{a}} and {{b}}", {"a": "x"}) == "x and {{b}}"
    assert format_prompt("{{a}}", {"a": ""}) == "{{a}}"


def test_templates_are_unique_and_buildable():
    ids = [t.id for t in CHAT_PROMPT_TEMPLATES]
    assert len(ids) == len(set(ids))
    for template in CHAT_PROMPT_TEMPLATES:
        prompt = template.build("rumah")
        assert "rumah" in prompt
        assert "{{" not in prompt


def test_get_prompt_template():
    assert get_prompt_template("memory-tips").label == "Help me remember"
    assert get_prompt_template("missing") is None


def test_tutor_system_prompt_names_word_and_translations():
    prompt = build_tutor_system_prompt("makan", ("eat", "to eat"))
    assert 'the word "makan"' in prompt
    assert "(translations: eat, to eat)" in prompt
