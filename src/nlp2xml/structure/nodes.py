"""Arena-backed document tree.

Every node lives in ``DocumentTree.nodes`` and is addressed by its index.
A node's ``children`` list holds indices in document order and ``parent``
points back up. Removing a node only unlinks its index from the parent, so
indices held elsewhere stay valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator


class NodeKind(str, Enum):
    DOCUMENT = "Document"
    PARAGRAPH = "Paragraph"
    SENTENCE = "Sentence"
    GROUP = "Group"
    WORD = "Word"
    PUNCTUATION = "Punctuation"


class GroupKind(str, Enum):
    """Bracketed or quoted span. Values are the serialized element names."""

    DOUBLE_QUOTE = "DoubleQuotes"
    SINGLE_QUOTE = "SingleQuote"
    PAREN = "OpenParenthesis"
    BRACKET = "OpeningBracket"
    BRACE = "OpeningBrace"


@dataclass
class Node:
    """A single tagged-variant tree node.

    Attributes:
        kind: Node discriminant.
        index: Position of the node in the owning arena.
        parent: Index of the parent, ``None`` for the root or a detached node.
        children: Child indices in document order.
        group_kind: Set only for ``GROUP`` nodes.
        text: Set only for ``WORD`` nodes.
        ner_score: Three-decimal score, set on ``WORD`` nodes marked as
            named entities.
        category: Punctuation name, set only for ``PUNCTUATION`` nodes.
    """

    kind: NodeKind
    index: int
    parent: int | None = None
    children: list[int] = field(default_factory=list)
    group_kind: GroupKind | None = None
    text: str | None = None
    ner_score: str | None = None
    category: str | None = None

    @property
    def name(self) -> str:
        """Element name used by serializers."""
        if self.kind is NodeKind.GROUP and self.group_kind is not None:
            return self.group_kind.value
        return self.kind.value

    @property
    def is_entity(self) -> bool:
        return self.kind is NodeKind.WORD and self.ner_score is not None


class DocumentTree:
    """Owns every node of one parsed document."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.root = self._new(NodeKind.DOCUMENT).index

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def _new(self, kind: NodeKind, **attrs) -> Node:
        node = Node(kind=kind, index=len(self.nodes), **attrs)
        self.nodes.append(node)
        return node

    def append(self, parent: int, kind: NodeKind, **attrs) -> int:
        """Create a node as the last child of ``parent`` and return its index."""
        node = self._new(kind, parent=parent, **attrs)
        self.nodes[parent].children.append(node.index)
        return node.index

    def add_paragraph(self, parent: int) -> int:
        return self.append(parent, NodeKind.PARAGRAPH)

    def add_sentence(self, paragraph: int) -> int:
        return self.append(paragraph, NodeKind.SENTENCE)

    def add_group(self, parent: int, group_kind: GroupKind) -> int:
        return self.append(parent, NodeKind.GROUP, group_kind=group_kind)

    def add_word(self, parent: int, text: str) -> int:
        return self.append(parent, NodeKind.WORD, text=text)

    def add_punctuation(self, parent: int, category: str) -> int:
        return self.append(parent, NodeKind.PUNCTUATION, category=category)

    def remove(self, index: int) -> None:
        """Unlink a node from its parent. The node stays in the arena."""
        node = self.nodes[index]
        if node.parent is None:
            raise ValueError("Cannot remove the root node")
        self.nodes[node.parent].children.remove(index)
        node.parent = None

    def ancestor(self, index: int, match: Callable[[Node], bool]) -> int | None:
        """Walk up from ``index`` (inclusive) to the first node ``match`` accepts."""
        current: int | None = index
        while current is not None:
            node = self.nodes[current]
            if match(node):
                return current
            current = node.parent
        return None

    def ancestor_of_kind(self, index: int, kind: NodeKind) -> int | None:
        return self.ancestor(index, lambda node: node.kind is kind)

    def open_group(self, index: int, group_kind: GroupKind) -> int | None:
        return self.ancestor(
            index,
            lambda node: node.kind is NodeKind.GROUP and node.group_kind is group_kind,
        )

    def walk(self, index: int | None = None) -> Iterator[Node]:
        """Yield attached nodes in document (pre-) order."""
        stack = [self.root if index is None else index]
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def children(self, index: int) -> list[Node]:
        return [self.nodes[child] for child in self.nodes[index].children]

    def words(self) -> Iterator[Node]:
        return (node for node in self.walk() if node.kind is NodeKind.WORD)
