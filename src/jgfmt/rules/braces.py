import re
from dataclasses import dataclass

from ..lexer import BLOCK_COMMENT
from ..models import FormatterConfig
from .base import FormattingContext, TextRule, Transformation, reindent_line

SWITCH = re.compile(r"\bswitch\b")
CASE_LABEL = re.compile(r"(?:case\b[^>]*?|default\s*):")
BRACES = re.compile(r"[{}]")


@dataclass
class _Block:
    switch: bool = False
    in_case: bool = False


class BraceIndentationRule(TextRule):
    """Indents lines by the depth of the code braces enclosing them.

    Works without a parser, so it handles Groovy and any Java source the
    grammar rejects. Statements under a case/default label sit one level
    deeper than the label.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str:
        return "F003"

    @property
    def name(self) -> str:
        return "brace-indentation"

    def analyze(self, context: FormattingContext) -> list[Transformation]:
        unit = self.config.indent_unit
        transformations = []
        stack: list[_Block] = []
        pending_switch = False

        for row, line in enumerate(context.lines):
            start = context.line_starts[row]
            end = start + len(line)
            stripped = line.strip()
            if not stripped:
                continue

            first = start + len(line) - len(line.lstrip())
            region = context.region_at(first)

            if region is not None and region.start < first:
                # Continuation of a comment or string opened on an earlier line
                if region.kind == BLOCK_COMMENT and stripped.startswith("*"):
                    indent = unit * self._depth(stack) + " "
                    transformations.extend(reindent_line(context, row, indent))
                pending_switch = self._scan(context, stack, region.end, end, pending_switch)
                continue

            closes = 0
            while closes < len(stripped) and stripped[closes] == "}":
                closes += 1
            for _ in range(closes):
                if stack:
                    stack.pop()

            label = bool(stack and stack[-1].switch and CASE_LABEL.match(stripped))
            depth = self._depth(stack)
            if label and stack[-1].in_case:
                depth -= 1
            transformations.extend(reindent_line(context, row, unit * depth))

            if label:
                stack[-1].in_case = True

            pending_switch = self._scan(context, stack, first + closes, end, pending_switch)

        return transformations

    @staticmethod
    def _depth(stack: list[_Block]) -> int:
        return len(stack) + sum(1 for block in stack if block.in_case)

    @staticmethod
    def _scan(
        context: FormattingContext,
        stack: list[_Block],
        start: int,
        end: int,
        pending_switch: bool,
    ) -> bool:
        """Push and pop blocks for the code braces in source[start:end]."""
        segment = context.source[start:end]
        for m in SWITCH.finditer(segment):
            if context.is_code(start + m.start()):
                pending_switch = True
        for m in BRACES.finditer(segment):
            if not context.is_code(start + m.start()):
                continue
            if m.group() == "{":
                stack.append(_Block(switch=pending_switch))
                pending_switch = False
            elif stack:
                stack.pop()
        return pending_switch
