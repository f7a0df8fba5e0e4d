from .phrase_matcher import max_letters


def _format_word(word: str, letters_to_show: int) -> str:
    revealed = word[:letters_to_show]
    hidden = "_" * max(0, len(word) - letters_to_show)
    return " ".join(revealed + hidden)


class LetterHint:
    """Progressive letter reveal for the current target word or phrase."""

    def __init__(self, target_word: str, enabled: bool = True):
        self.target_word = target_word
        self.enabled = enabled
        self.max_letters = max_letters(target_word)
        self.show = False
        self.revealed = 1

    def reset(self) -> None:
        self.show = False
        self.revealed = 1

    def toggle(self) -> None:
        self.show = not self.show

    def reveal_more(self) -> None:
        self.revealed = min(self.revealed + 1, self.max_letters)

    def reveal_fewer(self) -> None:
        self.revealed = max(1, self.revealed - 1)

    def set_count(self, count: int) -> None:
        self.revealed = max(1, min(count, self.max_letters))

    def formatted(self) -> str:
        if not self.show or not self.enabled:
            return ""

        words = self.target_word.split(" ")
        if len(words) == 1:
            return _format_word(self.target_word, self.revealed)

        letters_to_reveal = self.revealed
        hint_words = []
        for word in words:
            letters_for_word = min(letters_to_reveal, len(word))
            letters_to_reveal = max(0, letters_to_reveal - len(word))
            hint_words.append(_format_word(word, letters_for_word))
        return "   ".join(hint_words)
