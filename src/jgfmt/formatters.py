import logging
from pathlib import Path
from typing import Protocol

from .engine import FormatterEngine
from .models import FormatterConfig, Language
from .registry import build_engine

logger = logging.getLogger("jgfmt")


class SourceFormatter(Protocol):
    """Formats one file in place and reports whether it changed anything."""

    language: Language

    def format(self, path: Path, text: str) -> bool: ...


class EngineFormatter:
    """SourceFormatter backed by a FormatterEngine."""

    def __init__(
        self,
        language: Language,
        engine: FormatterEngine,
        log: logging.Logger | None = None,
    ):
        self.language = language
        self.engine = engine
        self.log = log or logger

    def format(self, path: Path, text: str) -> bool:
        """Format text and write it back to path when it changed.

        Returns True only when the file on disk was rewritten.
        """
        result = self.engine.format_string(text, str(path))
        if result.errors:
            for error in result.errors:
                self.log.error("Error formatting %s: %s", path, error)
            return False

        if not result.modified:
            self.log.debug("%s is already formatted", path)
            return False

        try:
            with open(path, "w", newline="") as f:
                f.write(result.source)
        except OSError:
            self.log.error("Error occurred when writing %s", path, exc_info=True)
            return False

        self.log.debug("Formatted %s as %s", path, self.language.value)
        return True


def create_formatter(
    language: Language,
    config: FormatterConfig | None = None,
    log: logging.Logger | None = None,
) -> EngineFormatter:
    return EngineFormatter(language, build_engine(language, config), log)


def create_formatters(
    configs: dict[Language, FormatterConfig] | None = None,
    log: logging.Logger | None = None,
) -> dict[Language, SourceFormatter]:
    """Build one formatter per language, each with its own config when given."""
    configs = configs or {}
    return {language: create_formatter(language, configs.get(language), log) for language in Language}
