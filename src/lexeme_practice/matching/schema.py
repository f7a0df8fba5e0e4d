from dataclasses import dataclass
from enum import Enum
from typing import List


class LetterColor(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    SPACE = "space"


@dataclass(frozen=True)
class ColoredLetter:
    letter: str
    color: LetterColor


MatchResult = List[ColoredLetter]
