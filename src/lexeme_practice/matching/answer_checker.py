import re

from lexeme_practice.hints.schema import Lexeme

_PUNCTUATION = re.compile(r"[.,!?;:'\"]")
_WHITESPACE = re.compile(r"\s+")
_PARENTHETICAL = re.compile(r"\([^)]*\)")


def normalize_answer(text: str) -> str:
    """Lowercase, trim, drop punctuation and collapse whitespace."""
    text = text.lower().strip()
    text = _PUNCTUATION.sub("", text)
    return _WHITESPACE.sub(" ", text)


def _matches_translation(normalized_input: str, translation: str) -> bool:
    normalized_translation = normalize_answer(translation)
    if normalized_input == normalized_translation:
        return True

    main_part = _PARENTHETICAL.sub("", normalized_translation).strip()
    if normalized_input == main_part:
        return True

    # A single typed word may match one word of a compound translation
    input_words = normalized_input.split(" ")
    translation_words = main_part.split(" ")
    if len(translation_words) > 1 and len(input_words) == 1:
        return normalized_input in translation_words

    return False


def check_answer(user_answer: str, lexeme: Lexeme, reverse: bool = False) -> bool:
    """Decide whether ``user_answer`` is an accepted answer for ``lexeme``.

    In reverse mode the learner types the lexeme itself; otherwise any of its
    translations is accepted.
    """
    normalized_input = normalize_answer(user_answer)
    if reverse:
        return normalized_input == normalize_answer(lexeme.text)
    return any(_matches_translation(normalized_input, t) for t in lexeme.translations)
