from lexeme_practice.matching.schema import ColoredLetter, LetterColor, MatchResult
from lexeme_practice.matching.letter_matcher import match
from lexeme_practice.matching.phrase_matcher import match_phrase, max_letters

__all__ = [
    "ColoredLetter",
    "LetterColor",
    "MatchResult",
    "match",
    "match_phrase",
    "max_letters",
]
