import re

from ..models import FormatterConfig
from .base import FormattingContext, TextRule, Transformation

KEYWORD_PAREN = re.compile(r"\b(if|for|while|switch|catch|synchronized)\(")
WORD_BRACE = re.compile(r"(?<=\w)\{")
PAREN_BRACE = re.compile(r"\)([ \t]*)\{")
BRACE_KEYWORD = re.compile(r"\}(?=(?:else|catch|finally)\b)")
COMMA = re.compile(r",(?=[^\s])")


class SpacingRule(TextRule):
    """Normalizes spacing around control keywords, braces and commas."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str:
        return "F005"

    @property
    def name(self) -> str:
        return "spacing"

    def analyze(self, context: FormattingContext) -> list[Transformation]:
        source = context.source
        transformations = []

        def insert_space(offset: int, anchor: int):
            if context.is_code(anchor):
                transformations.append(Transformation(offset, offset, " "))

        for m in KEYWORD_PAREN.finditer(source):
            insert_space(m.end(1), m.start())

        for m in WORD_BRACE.finditer(source):
            insert_space(m.start(), m.start())

        for m in BRACE_KEYWORD.finditer(source):
            insert_space(m.end(), m.start())

        for m in COMMA.finditer(source):
            insert_space(m.end(), m.start())

        for m in PAREN_BRACE.finditer(source):
            if m.group(1) == " " or not context.is_code(m.start()):
                continue
            transformations.append(Transformation(m.start(1), m.end(1), " "))

        return transformations
