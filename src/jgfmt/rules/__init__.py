from .base import ASTRule, FormattingContext, FormattingRule, TextRule, Transformation
from .blank_lines import BlankLineRule
from .braces import BraceIndentationRule
from .indentation import IndentationRule
from .spacing import SpacingRule
from .whitespace import WhitespaceCleanupRule

__all__ = [
    "FormattingRule",
    "ASTRule",
    "TextRule",
    "FormattingContext",
    "Transformation",
    "WhitespaceCleanupRule",
    "SpacingRule",
    "BlankLineRule",
    "BraceIndentationRule",
    "IndentationRule",
]
