import logging
from collections.abc import Mapping
from pathlib import Path

from jgfmt.formatters import SourceFormatter, create_formatters
from jgfmt.models import Language

from .files import create_backup, read_source
from .models import FormatOptions

logger = logging.getLogger("jgfmt")

GROOVY_SHEBANG = "#!/usr/bin/env groovy"

EXTENSIONS = {
    "java": Language.JAVA,
    "groovy": Language.GROOVY,
}


def file_extension(path: Path) -> str:
    """Text after the last dot of the file name, or '' when there is none."""
    name = path.name
    dot = name.rfind(".")
    return name[dot + 1 :] if dot >= 0 else ""


class Dispatcher:
    """Routes files to the Java or Groovy formatter and keeps backups of changed files"""

    def __init__(
        self,
        formatters: Mapping[Language, SourceFormatter] | None = None,
        log: logging.Logger | None = None,
    ):
        self.log = log or logger
        self.formatters = formatters if formatters is not None else create_formatters(log=self.log)

    def process_target(self, path: Path, options: FormatOptions) -> bool:
        """Format a file, or every regular file directly inside a directory.

        Sub-directories are not entered. Entries are visited in name order.
        Returns False when the path is neither a file nor a readable directory.
        """
        path = Path(path)
        if path.is_dir():
            try:
                entries = sorted(path.iterdir())
            except OSError:
                self.log.error("Error occurred when listing %s", path)
                return False
            for entry in entries:
                if entry.is_file():
                    self.process_file(entry, options)
            return True

        if path.is_file():
            self.process_file(path, options)
            return True

        self.log.info("cannot format: %s.", path)
        return False

    def process_file(self, path: Path, options: FormatOptions) -> Path | None:
        """Format one file and return the backup path if a backup was written."""
        path = Path(path)
        extension = file_extension(path)
        if extension:
            language = EXTENSIONS.get(extension)
            if language is None or not options.enabled(language):
                return None
            return self._format(path, language, options)
        return self._format_by_shebang(path, options)

    def _format_by_shebang(self, path: Path, options: FormatOptions) -> Path | None:
        text = read_source(path, self.log)
        if text is None:
            return None
        line_break = text.find("\n")
        if line_break == -1:
            return None
        if GROOVY_SHEBANG in text[:line_break] and options.groovy_enabled:
            return self._format(path, Language.GROOVY, options, text)
        return None

    def _format(
        self,
        path: Path,
        language: Language,
        options: FormatOptions,
        text: str | None = None,
    ) -> Path | None:
        if text is None:
            text = read_source(path, self.log)
            if text is None:
                return None

        formatter = self.formatters.get(language)
        if formatter is None:
            self.log.debug("No %s formatter configured, skipping %s", language.value, path)
            return None

        # The formatter's own report decides whether a backup is due
        changed = formatter.format(path, text)
        if changed and options.backup:
            return create_backup(path, text, self.log)
        return None
