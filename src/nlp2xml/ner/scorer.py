"""Heuristic named-entity scoring over a parsed document tree.

Each word is scored on:

a. whether it starts with a capital letter or a digit
b. whether it follows "a" or "the"
c. its length (longer words tend to be named entities)

Words scoring at or above the cutoff are marked, and runs of adjacent marked
words are merged into one multi-word entity.

An optional part-of-speech dictionary lifts nouns, noun phrases and
nominatives to the cutoff. Other tags carry no penalty.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from nlp2xml.ner.constants import (
    ARTICLES,
    CUTOFF,
    LENGTH_SCORES,
    NOMINAL_TAGS,
    STRONG,
    WEAK,
)
from nlp2xml.structure import DocumentTree, Node, NodeKind

logger = logging.getLogger(__name__)


def word_score(
    text: str,
    previous: str | None,
    dictionary: Mapping[str, str] | None = None,
) -> float:
    """Likelihood that ``text`` is (part of) a named entity."""
    score = 1.0
    first = text[0]
    score *= STRONG if first.isupper() or first.isdigit() else WEAK
    score *= STRONG if previous in ARTICLES else WEAK
    score *= LENGTH_SCORES[min(len(text), len(LENGTH_SCORES) - 1)]
    if dictionary and dictionary.get(text) in NOMINAL_TAGS:
        score = max(score, CUTOFF)
    return score


class EntityScorer:
    """Scores and merges the words of one tree in place."""

    def __init__(self, dictionary: Mapping[str, str] | None = None) -> None:
        self.dictionary = dictionary
        self.merged = 0

    def score(self, tree: DocumentTree) -> DocumentTree:
        """Annotate ``tree`` in place.

        Returns:
            The same tree, for chaining.
        """
        self._visit(tree, tree.root, None)
        return tree

    def _mark(self, word: Node, previous: Node | None) -> None:
        """Set ``word.ner_score`` when its score reaches the cutoff.

        Args:
            word: Word node to score.
            previous: Word before it at this level, or ``None``.
        """
        score = word_score(
            word.text,
            previous.text if previous is not None else None,
            self.dictionary,
        )
        if score >= CUTOFF:
            word.ner_score = f"{score:.3f}"

    def _visit(self, tree: DocumentTree, index: int, previous: Node | None) -> None:
        """Score the children of ``index`` and merge adjacent entities.

        A merged word is appended to the entity before it and unlinked from
        the tree. Non-word children are visited recursively.

        Args:
            tree: Tree being annotated in place.
            index: Node whose children are visited.
            previous: Last unmerged word of the enclosing level. It is read
                here but never handed back, so words inside a child subtree
                never become the anchor for words after it.
        """
        for child in list(tree[index].children):
            node = tree[child]
            if node.kind is not NodeKind.WORD:
                self._visit(tree, child, previous)
                continue
            self._mark(node, previous)
            if previous is not None and previous.is_entity and node.is_entity:
                previous.text = f"{previous.text} {node.text}"
                tree.remove(child)
                self.merged += 1
            else:
                previous = node


def score(
    tree: DocumentTree,
    dictionary: Mapping[str, str] | None = None,
) -> DocumentTree:
    """Mark likely named entities in ``tree`` and merge adjacent ones."""
    scorer = EntityScorer(dictionary)
    scorer.score(tree)
    logger.debug("Merged %d adjacent entity words", scorer.merged)
    return tree


def named_entities(tree: DocumentTree) -> list[str]:
    """Text of every marked word, in document order."""
    return [word.text for word in tree.words() if word.ner_score is not None]
