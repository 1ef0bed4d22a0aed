from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Optional


class Category(enum.Enum):
    DEFAULT = "default"
    STRING = "string"
    COMMENT = "comment"
    AT_KEYWORD = "at_keyword"
    MEDIA_QUERY_KEYWORD = "media_query_keyword"


@dataclass(frozen=True)
class Token:
    """A lexical token as produced by a lexer

    Args:
        rule_name: The name of the grammar rule that matched the token
        text: The matched source text
        start: Character offset of the token in the source
        end: Character offset just past the token
        category: Filled in by the TokenClassifier
    """

    rule_name: str
    text: str
    start: int = 0
    end: int = 0
    category: Optional[Category] = None


@dataclass(frozen=True)
class LessGrammar:
    """Rule names of the grammar that produced the tokens"""

    string_rule: str
    ml_comment_rule: str
    sl_comment_rule: str
    keyword_rule: str


# tree-sitter-css node types. Anonymous nodes have no rule of their own,
# so the token source reports them all under a shared keyword rule.
TREE_SITTER_CSS = LessGrammar(
    string_rule="string_value",
    ml_comment_rule="comment",
    sl_comment_rule="js_comment",
    keyword_rule="keyword",
)
