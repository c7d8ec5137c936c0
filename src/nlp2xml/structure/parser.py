"""Token-to-tree structural parser.

Breaks the token stream into paragraphs and sentences and nests words
enclosed in quotes, parentheses, brackets or braces into group nodes.
There is no separate stack: the open groups are the ancestors of the
cursor, the node new children are appended to.
"""

from __future__ import annotations

import logging
from typing import Iterable

from nlp2xml.lexing import WORD_BYTES
from nlp2xml.structure.nodes import DocumentTree, GroupKind, NodeKind
from nlp2xml.structure.punctuation import (
    CLOSING_GROUPS,
    OPENING_GROUPS,
    PARAGRAPH_BREAKS,
    SENTENCE_TERMINATORS,
    SYMMETRIC_GROUPS,
    category_of,
    unknown_category,
)

logger = logging.getLogger(__name__)


def _is_word(token: str) -> bool:
    """True when the token starts with an ASCII letter or digit."""
    return ord(token[0]) in WORD_BYTES


class StructuralParser:
    """Single-use parser building one ``DocumentTree``."""

    def __init__(self) -> None:
        self.tree = DocumentTree()
        paragraph = self.tree.add_paragraph(self.tree.root)
        self.cursor = self.tree.add_sentence(paragraph)

    def feed(self, token: str) -> None:
        """Apply one token to the tree and move the cursor."""
        category = category_of(token)

        if category in PARAGRAPH_BREAKS:
            self._break_paragraph()
        elif category in SENTENCE_TERMINATORS:
            self.tree.add_punctuation(self.cursor, category)
            self._break_sentence()
        elif category in SYMMETRIC_GROUPS:
            self._toggle_group(SYMMETRIC_GROUPS[category])
        elif category in OPENING_GROUPS:
            self.cursor = self.tree.add_group(self.cursor, OPENING_GROUPS[category])
        elif category in CLOSING_GROUPS:
            self._close_group(CLOSING_GROUPS[category], token)
        elif _is_word(token):
            self.tree.add_word(self.cursor, token)
        else:
            self.tree.add_punctuation(self.cursor, category or unknown_category(token))

    def finish(self) -> DocumentTree:
        """Drop a trailing empty sentence and return the tree."""
        self._drop_if_empty_sentence(self.cursor)
        return self.tree

    def _drop_if_empty_sentence(self, index: int) -> None:
        """Unlink ``index`` if it is a sentence with no children.

        Args:
            index: Node to check, usually the cursor.
        """
        node = self.tree[index]
        if node.kind is NodeKind.SENTENCE and not node.children:
            self.tree.remove(index)

    def _break_paragraph(self) -> None:
        """Close the current paragraph and open a new one with an empty sentence.

        Any open groups are left behind: the cursor moves to the new sentence.
        """
        paragraph = self.tree.ancestor_of_kind(self.cursor, NodeKind.PARAGRAPH)
        self._drop_if_empty_sentence(self.cursor)
        parent = self.tree[paragraph].parent
        new_paragraph = self.tree.add_paragraph(parent)
        self.cursor = self.tree.add_sentence(new_paragraph)

    def _break_sentence(self) -> None:
        """Start a new sentence in the paragraph holding the cursor."""
        sentence = self.tree.ancestor_of_kind(self.cursor, NodeKind.SENTENCE)
        self.cursor = self.tree.add_sentence(self.tree[sentence].parent)

    def _toggle_group(self, group_kind: GroupKind) -> None:
        """Close the nearest open group of this kind, or open one.

        Args:
            group_kind: Kind of a symmetric delimiter (quotes).
        """
        group = self.tree.open_group(self.cursor, group_kind)
        if group is None:
            self.cursor = self.tree.add_group(self.cursor, group_kind)
        else:
            self.cursor = self.tree[group].parent

    def _close_group(self, group_kind: GroupKind, token: str) -> None:
        """Move the cursor above the nearest open group of ``group_kind``.

        Groups opened inside it are closed with it. A closer with no matching
        opener leaves the cursor where it is.

        Args:
            group_kind: Kind the closing delimiter belongs to.
            token: The delimiter itself, for the log message.
        """
        group = self.tree.open_group(self.cursor, group_kind)
        if group is None:
            logger.debug("Ignoring unmatched closing delimiter %r", token)
            return
        self.cursor = self.tree[group].parent


def parse(tokens: Iterable[str]) -> DocumentTree:
    """Build a document tree from a token sequence."""
    parser = StructuralParser()
    for token in tokens:
        parser.feed(token)
    return parser.finish()
