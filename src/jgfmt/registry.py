from .engine import FormatterEngine
from .models import FormatterConfig, Language
from .rules import (
    BlankLineRule,
    BraceIndentationRule,
    FormattingRule,
    IndentationRule,
    SpacingRule,
    WhitespaceCleanupRule,
)


def default_rules(config: FormatterConfig) -> list[FormattingRule]:
    """Structural rules shared by the Java and Groovy engines, in application order."""
    return [
        WhitespaceCleanupRule(config),
        SpacingRule(config),
        BlankLineRule(config),
    ]


def indentation_rule(language: Language, config: FormatterConfig) -> FormattingRule:
    if language is Language.JAVA:
        return IndentationRule(config)
    return BraceIndentationRule(config)


def build_engine(language: Language, config: FormatterConfig | None = None) -> FormatterEngine:
    """Create a fully configured engine for one language."""
    config = config or FormatterConfig()
    engine = FormatterEngine(config, language=language, indentation=indentation_rule(language, config))
    for rule in default_rules(config):
        engine.add_rule(rule)
    return engine
