"""Letter feedback for multi-word answers, one word pair at a time."""

from .letter_matcher import match
from .schema import ColoredLetter, LetterColor, MatchResult

SPACE_LETTER = ColoredLetter(letter=" ", color=LetterColor.SPACE)


def match_phrase(input_text: str, target: str) -> MatchResult:
    """Color a possibly multi-word input against a possibly multi-word target.

    Words are paired by position after splitting on single spaces. A missing
    word on either side is matched as the empty string, and a space marker
    precedes every word after the first when the previous input word exists
    or the current one is non-empty.
    """
    if not input_text:
        return []

    target_words = target.split(" ")
    input_words = input_text.split(" ")

    result: MatchResult = []
    for word_index in range(max(len(target_words), len(input_words))):
        target_word = target_words[word_index] if word_index < len(target_words) else ""
        input_word = input_words[word_index] if word_index < len(input_words) else ""

        previous_input_exists = word_index - 1 < len(input_words)
        if word_index > 0 and (previous_input_exists or input_word):
            result.append(SPACE_LETTER)

        result.extend(match(input_word, target_word))

    return result


def max_letters(target: str) -> int:
    """Number of revealable letters in ``target``, separators excluded."""
    return sum(len(word) for word in target.split())
