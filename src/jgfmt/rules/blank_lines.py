import re

from ..models import FormatterConfig
from .base import FormattingContext, TextRule, Transformation

BLANK_RUN = re.compile(r"\n(?:[ \t]*\n)+")


class BlankLineRule(TextRule):
    """Limits runs of blank lines and removes them at block boundaries."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str:
        return "F004"

    @property
    def name(self) -> str:
        return "blank-lines"

    def analyze(self, context: FormattingContext) -> list[Transformation]:
        source = context.source
        transformations = []

        leading = re.match(r"(?:[ \t]*\n)+", source)
        if leading:
            transformations.append(Transformation(0, leading.end(), ""))

        for m in BLANK_RUN.finditer(source):
            if leading and m.start() < leading.end():
                continue
            if context.in_string(m.start()):
                continue

            blank = m.group().count("\n") - 1
            allowed = self.config.blank_lines_to_preserve

            before = m.start() - 1
            while before >= 0 and source[before] in " \t":
                before -= 1
            after = m.end()
            while after < len(source) and source[after] in " \t":
                after += 1

            if after >= len(source):
                allowed = 0
            elif before >= 0 and source[before] == "{" and context.is_code(before):
                allowed = 0
            elif source[after] == "}" and context.is_code(after):
                allowed = 0

            if blank > allowed:
                transformations.append(
                    Transformation(m.start(), m.end(), "\n" * (allowed + 1))
                )

        return transformations
