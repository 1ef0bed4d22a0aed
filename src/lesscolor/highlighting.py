from __future__ import annotations
from typing import Iterable, Optional

from .attribute_resolver import AttributeResolver, LessHighlightingConfiguration
from .token_classifier import TokenClassifier
from .tokens import LessGrammar, Token, TREE_SITTER_CSS


class LessHighlighting:
    """Owns the classifier and the configured resolver

    Build one of these at startup and share it. Both parts are read-only once
    this constructor returns.
    """

    def __init__(
        self,
        grammar: LessGrammar = TREE_SITTER_CSS,
        attributes: Optional[LessHighlightingConfiguration] = None,
    ):
        if attributes is None:
            attributes = LessHighlightingConfiguration()
        self.classifier = TokenClassifier(grammar)
        self.resolver = AttributeResolver()
        self.resolver.configure(attributes)

    def attribute_for(self, token: Token) -> str:
        return self.resolver.resolve(self.classifier.classify(token))

    def highlight(self, tokens: Iterable[Token]) -> list[tuple[Token, str]]:
        """Classify each token and pair it with its attribute id"""
        out = []
        for token in self.classifier.classify_all(tokens):
            out.append((token, self.resolver.resolve(token.category)))
        return out
