from .tokens import Category, LessGrammar, Token, TREE_SITTER_CSS
from .token_classifier import TokenClassifier
from .attribute_resolver import (
    AttributeResolver,
    ConfigurationError,
    LessHighlightingConfiguration,
)
from .highlighting import LessHighlighting
from .token_source import TokenSource
from .hl_groups import FORMAT_SPECS

# LessHighlighter needs a Qt binding, import it from lesscolor.highlighter

__all__ = [
    "AttributeResolver",
    "Category",
    "ConfigurationError",
    "FORMAT_SPECS",
    "LessGrammar",
    "LessHighlighting",
    "LessHighlightingConfiguration",
    "Token",
    "TokenClassifier",
    "TokenSource",
    "TREE_SITTER_CSS",
]
