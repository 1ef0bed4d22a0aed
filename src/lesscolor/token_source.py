from __future__ import annotations
import logging
import re
from typing import Optional

import tree_sitter_css as tscss
from tree_sitter import Language, Node, Parser, Tree

from .tokens import LessGrammar, Token, TREE_SITTER_CSS

logger = logging.getLogger(__name__)

# Named leaves that are really keywords, like @page or @font-face
KEYWORD_NODE_TYPES = frozenset({"at_keyword"})


def build_charmap(text: str) -> list[int]:
    """Build a mapping from utf8 byte index to character index as a list

    The list has one extra trailing entry so that an end byte offset of a
    token maps to the length of the text.
    """
    byte_splitter = re.compile(
        r"[\x00-\x7f]+|[\x80-\u07ff]+|[\u0800-\uffff]+|[\U00010000-\U0010ffff]+"
    )
    charmap = []
    charidx = 0
    for seg in byte_splitter.findall(text):
        bytesize = len(seg[0].encode("utf8"))
        for _ in range(len(seg)):
            charmap.extend([charidx] * bytesize)
            charidx += 1
    charmap.append(charidx)
    return charmap


def build_utf16map(text: str) -> list[int]:
    """Build a mapping from character index to UTF-16 code unit offset

    Qt counts text positions in UTF-16 code units, so characters outside the
    BMP take up two positions. Like build_charmap, the list has one trailing
    entry for the end of the text.
    """
    u16map = [0]
    for ch in text:
        u16map.append(u16map[-1] + (2 if ord(ch) > 0xFFFF else 1))
    return u16map


class TokenSource:
    """Lexes LESS source into Tokens using the tree-sitter css grammar

    Every call to tokenize() is a full parse. The tokens are the leaves of the
    tree in document order, except that strings and comments are reported
    whole.
    """

    def __init__(
        self,
        language: Optional[Language] = None,
        grammar: LessGrammar = TREE_SITTER_CSS,
    ):
        if language is None:
            language = Language(tscss.language())
        self.parser = Parser(language)
        if self.parser.language is None:
            raise RuntimeError("The tree parser must be properly set")
        self.grammar = grammar
        self._whole = frozenset(
            {grammar.string_rule, grammar.ml_comment_rule, grammar.sl_comment_rule}
        )
        self.tree: Optional[Tree] = None

    def tokenize(self, source: str) -> list[Token]:
        data = source.encode("utf8")
        self.tree = self.parser.parse(data)
        charmap = build_charmap(source)

        tokens = []
        stack = [self.tree.root_node]
        while stack:
            node = stack.pop()
            if node.start_byte == node.end_byte:
                # Missing nodes inserted by error recovery
                continue
            if node.type in self._whole or node.child_count == 0:
                tokens.append(self._make_token(node, data, charmap))
                continue
            stack.extend(reversed(node.children))

        logger.debug("Lexed %d tokens from %d bytes", len(tokens), len(data))
        return tokens

    def _make_token(self, node: Node, data: bytes, charmap: list[int]) -> Token:
        if not node.is_named or node.type in KEYWORD_NODE_TYPES:
            rule_name = self.grammar.keyword_rule
        else:
            rule_name = node.type
        return Token(
            rule_name=rule_name,
            text=data[node.start_byte : node.end_byte].decode("utf8"),
            start=charmap[node.start_byte],
            end=charmap[node.end_byte],
        )
