"""Document pipeline: bytes → tokens → tree → annotated tree.

``process_file`` is the only function here that touches the filesystem; it
turns read failures into ``InputError`` before the core runs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from nlp2xml.errors import InputError
from nlp2xml.lexing import tokenize
from nlp2xml.ner import named_entities, score
from nlp2xml.structure import DocumentTree, parse

logger = logging.getLogger(__name__)


@dataclass
class DocumentResult:
    source: str
    tree: DocumentTree
    token_count: int
    entities: list[str] = field(default_factory=list)


def build_tree(data: bytes, *, legacy_boundaries: bool = False) -> DocumentTree:
    """Tokenize and parse without scoring."""
    return parse(tokenize(data, legacy_boundaries=legacy_boundaries))


def process_bytes(
    data: bytes,
    *,
    source: str = "<bytes>",
    dictionary: Mapping[str, str] | None = None,
    recognize: bool = True,
    legacy_boundaries: bool = False,
) -> DocumentResult:
    """Run the full pipeline on one document.

    Args:
        data: Raw document bytes.
        source: Name used in logs and results.
        dictionary: Optional part-of-speech lookup, shared read-only.
        recognize: Score and merge named entities. When off, the tree
            carries structure only.
        legacy_boundaries: Passed through to the tokenizer.

    Returns:
        DocumentResult with the tree and, when recognizing, the entities.
    """
    tokens = tokenize(data, legacy_boundaries=legacy_boundaries)
    tree = parse(tokens)
    result = DocumentResult(source=source, tree=tree, token_count=len(tokens))
    if recognize:
        score(tree, dictionary)
        result.entities = named_entities(tree)
    logger.debug(
        "%s: %d bytes, %d tokens, %d entities",
        source, len(data), len(tokens), len(result.entities),
    )
    return result


def read_input(path: str | Path) -> bytes:
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InputError(path, exc.strerror or str(exc)) from exc


def process_file(
    path: str | Path,
    *,
    dictionary: Mapping[str, str] | None = None,
    recognize: bool = True,
    legacy_boundaries: bool = False,
) -> DocumentResult:
    """Read ``path`` and run it through the pipeline."""
    data = read_input(path)
    return process_bytes(
        data,
        source=str(path),
        dictionary=dictionary,
        recognize=recognize,
        legacy_boundaries=legacy_boundaries,
    )
