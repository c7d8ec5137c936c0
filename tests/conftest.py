"""Shared test fixtures."""
import zipfile

import pytest

from nlp2xml.ner import parse_dictionary
from nlp2xml.structure import DocumentTree, NodeKind


@pytest.fixture
def sample_text():
    return (
        b"The Detective met Harold Wilson in London. He said \"Stop.\" "
        b"(Nobody listened.)\n\n"
        b"A Tiger escaped from the Zoo... Nobody knew -- or cared!\n"
    )


@pytest.fixture
def pos_dictionary():
    return parse_dictionary(
        b"cat\xd7N\n"
        b"queen\xd7h\n"
        b"it\xd7o\n"
        b"run\xd7V\n",
        source="pos.txt",
    )


@pytest.fixture
def text_archive(tmp_path):
    path = tmp_path / "stories.zip"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("stories/", "")
        archive.writestr("stories/first.txt", b"Run fast. The Zebra ran.")
        archive.writestr("second.txt", b"Harold Wilson met a Tiger (in London).")
        archive.writestr("stories/.hidden.txt", b"Ignored.")
        archive.writestr("README.md", b"# Not text")
    return path


def _assert_well_formed(tree: DocumentTree) -> None:
    """Structural invariants every finished tree must satisfy."""
    container_kinds = {
        NodeKind.DOCUMENT,
        NodeKind.PARAGRAPH,
        NodeKind.SENTENCE,
        NodeKind.GROUP,
    }
    for node in tree.walk():
        parent = tree[node.parent] if node.parent is not None else None
        if node.kind is NodeKind.SENTENCE:
            assert parent.kind is NodeKind.PARAGRAPH
            assert node.children, "empty sentence left in tree"
        elif node.kind is NodeKind.PARAGRAPH:
            assert parent.kind is NodeKind.DOCUMENT
        elif node.kind is NodeKind.GROUP:
            current = parent
            while current is not None:
                assert current.kind in container_kinds
                current = tree[current.parent] if current.parent is not None else None
        elif node.kind in (NodeKind.WORD, NodeKind.PUNCTUATION):
            assert not node.children


@pytest.fixture
def assert_well_formed():
    return _assert_well_formed
