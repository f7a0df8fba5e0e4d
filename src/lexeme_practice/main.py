import argparse
import json
from pathlib import Path
from typing import List, Optional

from lexeme_practice.chat.prompt_templates import CHAT_PROMPT_TEMPLATES, build_tutor_system_prompt, get_prompt_template
from lexeme_practice.core.app_context import AppContext
from lexeme_practice.core.models.registry import ModelRegistry
from lexeme_practice.hints.schema import HintSource, Lexeme
from lexeme_practice.matching.answer_checker import check_answer
from lexeme_practice.matching.letter_hint import LetterHint
from lexeme_practice.matching.phrase_matcher import match_phrase
from lexeme_practice.matching.schema import LetterColor, MatchResult
from lexeme_practice.platforms.platform_registry import PlatformRegistry
from lexeme_practice.progress.scheduler import format_next_due
from lexeme_practice.progress.schema import AnswerRecord
from lexeme_practice.util.clock import now_ms
from lexeme_practice.util.paths import get_data_dir

COLOR_CODES = {
    LetterColor.CORRECT: "\033[42m\033[30m",
    LetterColor.PRESENT: "\033[43m\033[30m",
    LetterColor.ABSENT: "\033[100m",
}
RESET = "\033[0m"


def render_feedback(letters: MatchResult) -> str:
    parts = []
    for colored in letters:
        if colored.color is LetterColor.SPACE:
            parts.append(" ")
        else:
            parts.append(f"{COLOR_CODES[colored.color]}{colored.letter}{RESET}")
    return "".join(parts)


def show_all_options():
    for model in ModelRegistry.list():
        platform = PlatformRegistry.get(model.platform_id)
        available = "Yes" if platform and platform.validate_credentials() else "No"
        print(f"Model: {model.id:20s}, Platform: {model.platform_id:10s}, Tier: {model.quality_tier:6s}, Available: {available}")


def show_history(context: AppContext, limit: int = 20):
    for item in context.progress_tracker.store.get_history(limit):
        mark = "+" if item.is_correct else "-"
        print(f"{mark} {item.word:20s} {', '.join(item.translation)}")


def load_lexemes(path: Path = None) -> List[Lexeme]:
    path = path or get_data_dir() / "inputs" / "lexemes.json"
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [Lexeme.from_dict(entry) for entry in data.get("learnedLexemes", [])]


def ask_tutor(context: AppContext, record: Optional[AnswerRecord], template_id: str):
    template = get_prompt_template(template_id)
    if template is None:
        print("Quick actions: " + ", ".join(f"#{t.id}" for t in CHAT_PROMPT_TEMPLATES))
        return
    if record is None:
        print("Answer first, then ask about the word.")
        return

    item = record.history_item
    session = context.chat_session(item.id, build_tutor_system_prompt(item.word, item.translation))
    reply = session.send_message(template.build(item.word))
    print(reply.content if reply else "Tutor is unavailable right now.")


def practice(lexemes: List[Lexeme], context: AppContext, reverse: bool = True):
    """Console drill: type the word for each translation.

    '?' shows related words, '!' reveals a letter, '#<action>' asks the tutor
    about the current word once it has been answered.
    """
    tracker = context.progress_tracker
    stats = tracker.due_statistics(lexemes)
    print(f"Starting practice: {stats.due_now} due, {stats.new_words} new, {stats.mastered} mastered. "
          f"Empty line to quit.")

    last_word = None
    while lexemes:
        # Avoid repeating the card just answered unless it is the only one
        recently_seen = [last_word] if last_word and len(lexemes) > 1 else []
        selected = tracker.select_next(lexemes, count=1, recently_seen=recently_seen)
        lexeme = selected[0] if selected else lexemes[0]
        last_word = lexeme.text

        hint_loader = context.hint_loader(lexeme)
        letter_hint = LetterHint(lexeme.text)
        record: Optional[AnswerRecord] = None
        shown_at = now_ms()
        print(f"\nTranslate: {', '.join(lexeme.translations)}")

        while True:
            answer = input("> ")
            if not answer:
                print("\nPractice finished.")
                return
            if answer == "?":
                hint_loader.load()
                if hint_loader.hint:
                    label = "related" if hint_loader.hint.source is HintSource.REMOTE else "generic"
                    print(f"Hint ({label}): {', '.join(hint_loader.hint.related_words)}")
                continue
            if answer == "!":
                if letter_hint.show:
                    letter_hint.reveal_more()
                else:
                    letter_hint.toggle()
                print(letter_hint.formatted())
                continue
            if answer.startswith("#"):
                ask_tutor(context, record, answer[1:].strip())
                continue

            print(render_feedback(match_phrase(answer, lexeme.text)))
            is_correct = check_answer(answer, lexeme, reverse=reverse)
            # Only the first attempt at a card counts towards progress
            if record is None:
                record = tracker.record_answer(lexeme, is_correct, response_time_ms=now_ms() - shown_at)
            if is_correct:
                print(f"Correct! Next review: {format_next_due(record.progress.next_due, now_ms())}")
                break


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Practice learned vocabulary in the console")
    parser.add_argument("lexemes", nargs="?", type=Path, help="Path to a lexemes JSON file")
    parser.add_argument("--list-models", action="store_true", help="List configured models and exit")
    parser.add_argument("--history", action="store_true", help="Show recent practice history and exit")
    parser.add_argument("--clear-history", action="store_true", help="Clear practice history and exit")
    return parser.parse_args(argv)


def run_practice(argv: Optional[List[str]] = None, context: Optional[AppContext] = None):
    args = parse_args(argv)
    context = context or AppContext.create()

    if args.list_models:
        show_all_options()
        return
    if args.history:
        show_history(context)
        return
    if args.clear_history:
        context.progress_tracker.store.clear_history()
        print("Practice history cleared.")
        return

    practice(load_lexemes(args.lexemes), context)


if __name__ == "__main__":
    run_practice()
