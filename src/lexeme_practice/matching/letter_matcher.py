"""Wordle-style per-letter feedback for a single typed word."""

from collections import Counter
from typing import List

from .schema import ColoredLetter, LetterColor, MatchResult


def _fold(text: str) -> List[str]:
    # Lowercase per character; a character whose lowercase form expands
    # (e.g. "İ") is kept as-is so positions stay aligned with the original.
    folded = []
    for char in text:
        lower = char.lower()
        folded.append(lower if len(lower) == 1 else char)
    return folded


def match(input_text: str, target: str) -> MatchResult:
    """Classify each character of ``input_text`` against ``target``.

    Comparison is case-insensitive; output letters keep the casing of
    ``input_text``. Exact positions are claimed first, then remaining letters
    are marked present while the target still has unclaimed copies of them.
    """
    if not input_text:
        return []

    normalized_input = _fold(input_text)
    normalized_target = _fold(target)

    available_counts = Counter(char for char in normalized_target if char != " ")
    consumed_counts: Counter = Counter()

    colors: List[LetterColor] = []
    for i, char in enumerate(normalized_input):
        if char == " ":
            colors.append(LetterColor.SPACE)
        elif i >= len(normalized_target):
            colors.append(LetterColor.ABSENT)
        elif char == normalized_target[i]:
            colors.append(LetterColor.CORRECT)
            consumed_counts[char] += 1
        else:
            colors.append(LetterColor.ABSENT)

    # Positions past the end of the target keep their pass-one verdict
    for i, char in enumerate(normalized_input[:len(normalized_target)]):
        if colors[i] is not LetterColor.ABSENT:
            continue
        if consumed_counts[char] < available_counts[char]:
            colors[i] = LetterColor.PRESENT
            consumed_counts[char] += 1

    return [ColoredLetter(letter=letter, color=color) for letter, color in zip(input_text, colors)]
