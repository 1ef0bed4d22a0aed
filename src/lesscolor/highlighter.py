from __future__ import annotations
import bisect
from typing import Any, Optional
from Qt.QtGui import QSyntaxHighlighter, QTextCharFormat, QTextDocument, QColor, QFont

from .highlighting import LessHighlighting
from .hl_groups import FORMAT_SPECS
from .token_source import TokenSource, build_utf16map
from .tokens import Token

ENC = "utf-16-le"


class LessHighlighter(QSyntaxHighlighter):
    """
    Highlights LESS source by styling every token with the format bound to its
    attribute id.
    """

    def __init__(
        self,
        document: QTextDocument,
        highlighting: LessHighlighting,
        format_specs: Optional[dict[str, dict[str, Any]]] = None,
        token_source: Optional[TokenSource] = None,
    ):
        super().__init__(document)
        self.highlighting = highlighting
        if token_source is None:
            token_source = TokenSource(grammar=highlighting.classifier.grammar)
        self.token_source = token_source
        if format_specs is None:
            format_specs = FORMAT_SPECS
        self.formats = self._compile_formats(format_specs)

        self._revision: Optional[int] = None
        self._tokens: list[tuple[Token, int, int]] = []
        self._ends: list[int] = []

    def setFormatSpecs(self, format_specs: dict[str, dict[str, Any]]):
        self.formats = self._compile_formats(format_specs)
        self.rehighlight()

    # ------------------------------------------------------------------
    # Text formats
    # ------------------------------------------------------------------

    def _compile_formats(
        self, format_specs: dict[str, dict[str, Any]]
    ) -> dict[str, QTextCharFormat]:
        """Convert user style specs -> QTextCharFormat instances."""
        out = {}

        for attribute_id, spec in format_specs.items():
            fmt = QTextCharFormat()
            if "color" in spec:
                fmt.setForeground(QColor(spec["color"]))
            if spec.get("bold"):
                fmt.setFontWeight(QFont.Bold)
            if spec.get("italic"):
                fmt.setFontItalic(True)
            if "background" in spec:
                fmt.setBackground(QColor(spec["background"]))
            out[attribute_id] = fmt

        return out

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _current_tokens(self) -> list[tuple[Token, int, int]]:
        """Tokens of the document along with their UTF-16 start and end"""
        doc = self.document()
        revision = doc.revision()
        if revision != self._revision:
            text = doc.toPlainText()
            u16map = build_utf16map(text)
            self._tokens = [
                (tok, u16map[tok.start], u16map[tok.end])
                for tok in self.token_source.tokenize(text)
            ]
            self._ends = [end for _tok, _start, end in self._tokens]
            self._revision = revision
        return self._tokens

    # ------------------------------------------------------------------
    # QSyntaxHighlighter entry point
    # ------------------------------------------------------------------

    def highlightBlock(self, text: str):
        block = self.currentBlock()
        if not block.isValid():
            return

        tokens = self._current_tokens()

        # Qt positions count UTF-16 code units
        block_len = len(text.encode(ENC)) // 2
        block_start = block.position()
        block_end = block_start + block_len

        # Tokens don't overlap, so their end offsets are sorted too
        idx = bisect.bisect_right(self._ends, block_start)
        for token, start, end in tokens[idx:]:
            if start >= block_end:
                break

            fmt = self.formats.get(self.highlighting.attribute_for(token))
            if fmt is None:
                continue

            # Convert to block-local and clamp to [0, block_len]
            local_start = max(0, start - block_start)
            local_end = min(block_len, end - block_start)
            if local_end > local_start:
                self.setFormat(local_start, local_end - local_start, fmt)
