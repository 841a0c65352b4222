from dataclasses import dataclass
from typing import Tuple

from utility.languages import display_name


@dataclass(frozen=True)
class InstructionTemplate:
    """
    Versioned translation instruction.
    Wording lives in the rule tuples; substitution happens only through the
    named slots {source_name}, {target_name} and {text}.
    """
    version: str
    header: str
    general_rules: Tuple[str, ...]
    english_header: str
    english_rules: Tuple[str, ...]
    user_template: str

    def render_system(self, source_name: str, target_name: str, english_target: bool = False) -> str:
        lines = [self.header.format(source_name=source_name, target_name=target_name)]
        lines.append("Follow these rules:")
        lines.extend(f"{i}. {rule}" for i, rule in enumerate(self.general_rules, start=1))

        if english_target:
            lines.append("")
            lines.append(self.english_header)
            lines.extend(f"- {rule}" for rule in self.english_rules)

        return "\n".join(lines)

    def render_user(self, source_name: str, target_name: str, text: str) -> str:
        return self.user_template.format(source_name=source_name, target_name=target_name, text=text)


ENGLISH_STYLE_RULES: Tuple[str, ...] = (
    'Write different questions as separate sentences: "Who are you?" and "How are you?" '
    '-> "Who are you? How are you?"',
    'In negative sentences, replace "also" with ", either." at the end of the sentence: '
    '"I also don\'t know you" -> "I don\'t know you, either."',
    'Start greetings with "Hello," or "Hi," and introduce yourself with "I\'m" or "my name is" '
    'instead of a literal translation.',
    'Render the Turkish "ama" emphasis as ", though." at the end of the sentence, '
    'not as a leading contrast word.',
    'In everyday speech prefer "How are you doing?" over a stiff "how are you".',
    'Translate short pronouns directly: "me" -> "me", "sen" -> "you".',
)

TRANSLATION_TEMPLATE_V1 = InstructionTemplate(
    version="1",
    header="You are a professional translator. Translate the given text from {source_name} to {target_name}.",
    general_rules=(
        "Preserve the meaning exactly.",
        "Use natural, fluent phrasing in the target language.",
        "Translate idioms and cultural expressions into their target-language equivalents.",
        "Translate technical terms correctly.",
        "Reorder the sentence structure to follow the target language grammar.",
        "Return only the translation. Do not add explanations or any other text.",
        "Even for short or incomplete text, give your best-effort translation. "
        "Never answer that the text is insufficient.",
    ),
    english_header="SPECIAL RULES FOR ENGLISH OUTPUT:",
    english_rules=ENGLISH_STYLE_RULES,
    user_template="Please translate the following text from {source_name} to {target_name}:\n\n{text}",
)


class PromptManager:
    """
    Stateless builder for translation prompts.
    """

    TEMPLATE: InstructionTemplate = TRANSLATION_TEMPLATE_V1

    @classmethod
    def build_prompt(cls, text: str, source_lang: str, target_lang: str) -> Tuple[str, str]:
        """
        Returns (system_instruction, user_message).
        English style rules are included only when translating into English.
        """
        source_name = display_name(source_lang)
        target_name = display_name(target_lang)

        system_instruction = cls.TEMPLATE.render_system(
            source_name, target_name, english_target=target_lang == "en"
        )
        user_message = cls.TEMPLATE.render_user(source_name, target_name, text)
        return system_instruction, user_message
