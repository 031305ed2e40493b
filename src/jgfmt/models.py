from dataclasses import dataclass, field
from enum import Enum


@dataclass
class FormatterConfig:
    indent_size: int = 4
    use_tabs: bool = False
    blank_lines_to_preserve: int = 1

    @property
    def indent_unit(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size


@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: list[str] = field(default_factory=list)


@dataclass
class FormatResults:
    results: list[FormatResult]
    total_files: int
    modified_files: int
    error_files: int


class Language(Enum):
    JAVA = "java"
    GROOVY = "groovy"
