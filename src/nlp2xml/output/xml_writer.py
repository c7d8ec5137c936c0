"""Serialize a document tree to indented XML."""

from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from pathlib import Path

from nlp2xml.structure import DocumentTree, Node, NodeKind

DEFAULT_INDENT = 4


def _element(node: Node) -> ET.Element:
    element = ET.Element(node.name)
    if node.kind is NodeKind.WORD:
        element.set("text", node.text)
        if node.ner_score is not None:
            element.set("NER", node.ner_score)
    elif node.kind is NodeKind.PUNCTUATION:
        element.set("type", node.category)
    return element


def to_xml(tree: DocumentTree) -> ET.Element:
    """Build an ElementTree mirror of the attached nodes."""
    root = _element(tree[tree.root])
    stack = [(tree.root, root)]
    while stack:
        index, element = stack.pop()
        for child in tree[index].children:
            child_element = _element(tree[child])
            element.append(child_element)
            stack.append((child, child_element))
    return root


def render_xml(tree: DocumentTree, indent: int = DEFAULT_INDENT) -> str:
    root = to_xml(tree)
    ET.indent(root, space=" " * indent)
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def write_xml(
    tree: DocumentTree,
    path: str | Path | None = None,
    indent: int = DEFAULT_INDENT,
) -> None:
    """Write the tree to ``path``, or to stdout when no path is given."""
    text = render_xml(tree, indent)
    if path is None:
        sys.stdout.write(text)
        return
    Path(path).write_text(text, encoding="utf-8")
