import re

from ..models import FormatterConfig
from .base import FormattingContext, TextRule, Transformation


class WhitespaceCleanupRule(TextRule):
    """Strips trailing whitespace and guarantees a final newline."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str:
        return "F001"

    @property
    def name(self) -> str:
        return "whitespace-cleanup"

    def analyze(self, context: FormattingContext) -> list[Transformation]:
        transformations = []

        for m in re.finditer(r"[ \t]+$", context.source, re.MULTILINE):
            # Trailing blanks inside a multi-line string are part of its value
            if context.in_string(m.start()):
                continue
            transformations.append(Transformation(m.start(), m.end(), ""))

        if context.source and not context.source.endswith("\n"):
            end = len(context.source)
            transformations.append(Transformation(end, end, "\n"))

        return transformations
