import re
import traceback
from pathlib import Path

from .lexer import scan
from .models import FormatResult, FormatResults, FormatterConfig, Language
from .parser import JavaParser
from .rules.base import ASTRule, FormattingContext, FormattingRule, Transformation

LINE_ENDING = re.compile(r"\r?\n")


class FormatterEngine:
    """Core engine for formatting Java and Groovy sources through text transformations."""

    max_passes = 2

    def __init__(
        self,
        config: FormatterConfig,
        language: Language = Language.JAVA,
        indentation: FormattingRule | None = None,
    ):
        self.config = config
        self.language = language
        self.rules: list[FormattingRule] = []
        self.indentation = indentation
        self.parser = JavaParser() if language is Language.JAVA else None

    def add_rule(self, rule: FormattingRule) -> None:
        """Register a new formatting rule."""
        self.rules.append(rule)

    def format_string(self, source: str, file_path: str = "") -> FormatResult:
        """Formats a source string through structural passes and a final indentation pass.

        Line delimiters of the input are kept. When the line count is unchanged each
        line keeps its own delimiter; otherwise the delimiter used by most lines wins.
        On any rule failure the input is returned untouched with the error recorded.
        """
        endings = LINE_ENDING.findall(source)
        current_source = source.replace("\r\n", "\n")

        try:
            # Phase 1: Structural convergence
            for _ in range(self.max_passes):
                pass_modified = False
                for rule in self.rules:
                    context = self._context(current_source, file_path, rule)
                    transforms = rule.analyze(context)
                    if transforms:
                        new_source = self._apply_transformations(current_source, transforms)
                        if new_source != current_source:
                            current_source = new_source
                            pass_modified = True
                if not pass_modified:
                    break

            # Phase 2: Final indentation pass
            if self.indentation is not None:
                context = self._context(current_source, file_path, self.indentation)
                indent_transforms = self.indentation.analyze(context)
                if indent_transforms:
                    current_source = self._apply_transformations(current_source, indent_transforms)
        except Exception as e:
            return FormatResult(
                source=source, modified=False, errors=[f"{e}\n{traceback.format_exc()}"]
            )

        current_source = self._restore_line_endings(current_source, endings)

        return FormatResult(source=current_source, modified=current_source != source)

    def _context(self, source: str, file_path: str, rule: FormattingRule) -> FormattingContext:
        tree = None
        if isinstance(rule, ASTRule) and self.parser is not None:
            parsed = self.parser.parse_string(source)
            # Rules fall back to text heuristics on sources the grammar rejects
            if not parsed.has_errors:
                tree = parsed.tree
        return FormattingContext(
            source=source,
            file_path=file_path,
            language=self.language,
            regions=scan(source, self.language),
            tree=tree,
        )

    @staticmethod
    def _restore_line_endings(source: str, endings: list[str]) -> str:
        if "\r\n" not in endings:
            return source
        lines = source.split("\n")
        if len(lines) - 1 == len(endings):
            return "".join(line + ending for line, ending in zip(lines, endings)) + lines[-1]
        newline = "\r\n" if endings.count("\r\n") * 2 >= len(endings) else "\n"
        return source.replace("\n", newline)

    def _apply_transformations(self, source: str, transforms: list[Transformation]) -> str:
        """Applies non-overlapping character-based transformations in a single pass."""
        sorted_transforms = sorted(transforms, key=lambda t: (t.start_byte, t.end_byte, t.priority))
        result = []
        last_offset = 0
        for t in sorted_transforms:
            if t.start_byte < last_offset:
                continue
            result.append(source[last_offset : t.start_byte])
            result.append(t.new_content)
            last_offset = t.end_byte
        result.append(source[last_offset:])
        return "".join(result)

    def format_files(self, files: list[Path]) -> FormatResults:
        """Batch format multiple files on disk."""
        results = []
        modified_count = 0
        error_count = 0
        for file_path in files:
            file_path = Path(file_path)
            try:
                with open(file_path, newline="") as f:
                    source = f.read()
                result = self.format_string(source, str(file_path))
                results.append(result)
                if result.errors:
                    error_count += 1
                elif result.modified:
                    modified_count += 1
                    with open(file_path, "w", newline="") as f:
                        f.write(result.source)
            except (OSError, UnicodeDecodeError) as e:
                results.append(FormatResult(source="", modified=False, errors=[str(e)]))
                error_count += 1
        return FormatResults(
            results=results,
            total_files=len(files),
            modified_files=modified_count,
            error_files=error_count,
        )
