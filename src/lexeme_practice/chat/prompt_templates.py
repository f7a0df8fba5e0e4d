import re
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def format_prompt(template: str, variables: Dict[str, str]) -> str:
    """Replace ``{{name}}`` placeholders; unknown or empty values leave the placeholder as is."""
    return _PLACEHOLDER.sub(lambda m: variables.get(m.group(1)) or m.group(0), template)


@dataclass(frozen=True)
class PromptTemplate:
    id: str
    label: str
    prompt: str
    category: str

    def build(self, current_word: str) -> str:
        return format_prompt(self.prompt, {"currentWord": current_word})


CHAT_PROMPT_TEMPLATES: Tuple[PromptTemplate, ...] = (
    PromptTemplate(
        id="explain-word",
        label="Explain this word",
        prompt="Can you explain the Indonesian word '{{currentWord}}' including its meaning, usage, and any cultural context?",
        category="vocabulary",
    ),
    PromptTemplate(
        id="give-examples",
        label="Give me examples",
        prompt="Please provide 5 example sentences using the Indonesian word '{{currentWord}}' with English translations.",
        category="vocabulary",
    ),
    PromptTemplate(
        id="similar-words",
        label="Similar words",
        prompt="What are some Indonesian words similar to '{{currentWord}}'? Please explain the differences.",
        category="vocabulary",
    ),
    PromptTemplate(
        id="memory-tips",
        label="Help me remember",
        prompt="Can you give me memory tricks or mnemonics to remember the Indonesian word '{{currentWord}}'?",
        category="learning",
    ),
    PromptTemplate(
        id="grammar-explain",
        label="Explain grammar",
        prompt="Please explain the Indonesian grammar rules that apply to '{{currentWord}}' and how to use it correctly.",
        category="grammar",
    ),
    PromptTemplate(
        id="practice-sentences",
        label="Practice sentences",
        prompt="Give me 3 fill-in-the-blank sentences to practice using '{{currentWord}}'. Include the answers separately.",
        category="practice",
    ),
    PromptTemplate(
        id="common-mistakes",
        label="Common mistakes",
        prompt="What are common mistakes learners make with the Indonesian word '{{currentWord}}' and how to avoid them?",
        category="learning",
    ),
    PromptTemplate(
        id="word-family",
        label="Word family",
        prompt="Show me the word family of '{{currentWord}}' including its root, derivatives, and related forms in Indonesian.",
        category="vocabulary",
    ),
)


def get_prompt_template(template_id: str) -> Optional[PromptTemplate]:
    for template in CHAT_PROMPT_TEMPLATES:
        if template.id == template_id:
            return template
    return None


TUTOR_SYSTEM_PROMPT = (
    'You are an AI language tutor. The student is asking about the word "{{word}}" '
    "(translations: {{translations}}). Answer in a concise, friendly way with examples. "
    "Help them understand usage, pronunciation, grammar, and provide context."
)


def build_tutor_system_prompt(word: str, translations: Sequence[str]) -> str:
    return format_prompt(TUTOR_SYSTEM_PROMPT, {"word": word, "translations": ", ".join(translations)})
