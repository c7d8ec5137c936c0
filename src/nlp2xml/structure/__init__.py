"""Document tree and the structural parser that builds it."""

from nlp2xml.structure.nodes import DocumentTree, GroupKind, Node, NodeKind
from nlp2xml.structure.parser import StructuralParser, parse
from nlp2xml.structure.punctuation import PUNCTUATION_NAMES, category_of

__all__ = [
    "DocumentTree",
    "GroupKind",
    "Node",
    "NodeKind",
    "StructuralParser",
    "parse",
    "PUNCTUATION_NAMES",
    "category_of",
]
