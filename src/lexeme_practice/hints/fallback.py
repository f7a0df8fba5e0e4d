from typing import Dict, Tuple

GENERIC_RELATED_WORDS: Dict[str, Tuple[str, ...]] = {
    "noun": ("object", "thing", "item", "place", "concept"),
    "verb": ("action", "movement", "activity", "doing", "process"),
    "adj": ("quality", "characteristic", "description", "property", "attribute"),
}

# Indonesian affixes: ber-/me- mark verbs, -an/-nya mostly nouns
VERB_PREFIXES = ("ber", "me")
NOUN_SUFFIXES = ("an", "nya")


def guess_word_type(text: str) -> str:
    word = text.strip().lower()
    if word.startswith(VERB_PREFIXES):
        return "verb"
    if word.endswith(NOUN_SUFFIXES):
        return "noun"
    return "noun"


def generate_fallback_words(text: str) -> Tuple[str, ...]:
    """Generic related words picked by a simple affix guess. Never raises."""
    try:
        return GENERIC_RELATED_WORDS[guess_word_type(text)]
    except (AttributeError, KeyError):
        return GENERIC_RELATED_WORDS["noun"]
