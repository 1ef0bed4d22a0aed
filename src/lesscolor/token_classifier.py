from __future__ import annotations
import dataclasses
from typing import Collection, Iterable, Iterator

from .tokens import Category, LessGrammar, Token, TREE_SITTER_CSS

AT_KEYWORDS = frozenset({"@import", "@media", "@page", "@font-face", "@charset"})
MEDIA_QUERY_KEYWORDS = frozenset({"and", "only"})


class TokenClassifier:
    """Assigns a semantic Category to lexical tokens

    Keywords are matched on the keyword rule plus the exact token text, and
    take precedence over the terminal rule bindings. Anything that isn't
    matched is Category.DEFAULT.
    """

    def __init__(
        self,
        grammar: LessGrammar = TREE_SITTER_CSS,
        at_keywords: Collection[str] = AT_KEYWORDS,
        media_query_keywords: Collection[str] = MEDIA_QUERY_KEYWORDS,
    ):
        self.grammar = grammar
        self.at_keywords = frozenset(at_keywords)
        self.media_query_keywords = frozenset(media_query_keywords)
        self._terminals = {
            grammar.string_rule: Category.STRING,
            grammar.ml_comment_rule: Category.COMMENT,
            grammar.sl_comment_rule: Category.COMMENT,
        }

    def classify(self, token: Token) -> Category:
        if token.rule_name == self.grammar.keyword_rule:
            if token.text in self.at_keywords:
                return Category.AT_KEYWORD
            if token.text in self.media_query_keywords:
                return Category.MEDIA_QUERY_KEYWORD
        return self._terminals.get(token.rule_name, Category.DEFAULT)

    def annotate(self, token: Token) -> Token:
        """Return a copy of the token with its category filled in"""
        return dataclasses.replace(token, category=self.classify(token))

    def classify_all(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            yield self.annotate(token)
