import bisect
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from ..lexer import Region
from ..models import Language


@dataclass
class Transformation:
    """Replace source[start_byte:end_byte] with new_content.

    Offsets are character offsets into the normalized source string.
    """

    start_byte: int
    end_byte: int
    new_content: str
    priority: int = 0


@dataclass
class FormattingContext:
    source: str
    file_path: str = ""
    language: Language = Language.JAVA
    regions: list[Region] = field(default_factory=list)
    tree: Any = None

    @cached_property
    def lines(self) -> list[str]:
        """Source lines with their trailing newline, split on '\\n' only."""
        parts = self.source.split("\n")
        lines = [p + "\n" for p in parts[:-1]]
        if parts[-1]:
            lines.append(parts[-1])
        return lines

    @cached_property
    def line_starts(self) -> list[int]:
        starts = [0]
        for line in self.lines[:-1]:
            starts.append(starts[-1] + len(line))
        return starts

    @cached_property
    def _region_starts(self) -> list[int]:
        return [r.start for r in self.regions]

    def region_at(self, offset: int) -> Region | None:
        """Return the comment or string region containing offset, if any."""
        idx = bisect.bisect_right(self._region_starts, offset) - 1
        if idx < 0:
            return None
        region = self.regions[idx]
        if region.start <= offset < region.end:
            return region
        return None

    def is_code(self, offset: int) -> bool:
        return self.region_at(offset) is None

    def in_string(self, offset: int) -> bool:
        region = self.region_at(offset)
        return region is not None and not region.is_comment


class FormattingRule(ABC):
    @property
    @abstractmethod
    def rule_id(self) -> str: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def analyze(self, context: FormattingContext) -> list[Transformation]:
        """Return the non-overlapping edits this rule wants applied."""


class TextRule(FormattingRule):
    """Rule working on source text and lexer regions only."""


class ASTRule(FormattingRule):
    """Rule that needs a syntax tree in the context."""


def reindent_line(context: FormattingContext, row: int, indent: str) -> list[Transformation]:
    """Replace the leading whitespace of a line when it differs from indent."""
    line = context.lines[row]
    current = line[: len(line) - len(line.lstrip(" \t"))]
    if current == indent:
        return []
    start = context.line_starts[row]
    return [Transformation(start_byte=start, end_byte=start + len(current), new_content=indent)]
