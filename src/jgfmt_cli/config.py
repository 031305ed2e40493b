import logging
import tomllib
from pathlib import Path

from jgfmt.models import FormatterConfig, Language
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .converters import settings_to_config

logger = logging.getLogger("jgfmt")


class EngineSettings(BaseModel):
    """Formatter settings as written in the [tool.jgfmt] table"""

    model_config = ConfigDict(extra="forbid")

    indent_size: int = Field(4, ge=1, le=16, description="Spaces per indentation level")
    use_tabs: bool = Field(False, description="Indent with tabs instead of spaces")
    blank_lines_to_preserve: int = Field(1, ge=0, description="Longest run of blank lines kept")


class FormatConfig:
    """Handles loading and validation of a jgfmt TOML configuration

    Shared keys live in [tool.jgfmt]; [tool.jgfmt.java] and [tool.jgfmt.groovy]
    override them for one language.
    """

    def __init__(self, config_path: Path | None = None, log: logging.Logger | None = None):
        self.log = log or logger
        self.settings: dict[Language, EngineSettings] = {
            language: EngineSettings() for language in Language
        }

        if config_path is not None:
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            section = data.get("tool", {}).get("jgfmt", {})
            shared = {k: v for k, v in section.items() if k not in ("java", "groovy")}
            self.settings = {
                language: EngineSettings.model_validate({**shared, **section.get(language.value, {})})
                for language in Language
            }
        except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
            # Fallback to defaults if loading fails
            self.log.error("Could not load config %s, using defaults: %s", path, e)

    def formatter_configs(self) -> dict[Language, FormatterConfig]:
        return {language: settings_to_config(s) for language, s in self.settings.items()}
