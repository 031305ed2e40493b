from .engine import FormatterEngine
from .formatters import EngineFormatter, SourceFormatter, create_formatter, create_formatters
from .models import FormatResult, FormatResults, FormatterConfig, Language
from .registry import build_engine

__version__ = "1.0.0"

__all__ = [
    "FormatterEngine",
    "FormatterConfig",
    "FormatResult",
    "FormatResults",
    "Language",
    "SourceFormatter",
    "EngineFormatter",
    "build_engine",
    "create_formatter",
    "create_formatters",
]
