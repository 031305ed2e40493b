from typing import TYPE_CHECKING

from jgfmt.models import FormatterConfig

if TYPE_CHECKING:
    from .config import EngineSettings


def settings_to_config(settings: "EngineSettings") -> FormatterConfig:
    """Convert validated Pydantic settings to the engine's dataclass config"""
    return FormatterConfig(
        indent_size=settings.indent_size,
        use_tabs=settings.use_tabs,
        blank_lines_to_preserve=settings.blank_lines_to_preserve,
    )
