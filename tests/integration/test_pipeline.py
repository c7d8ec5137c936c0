"""Integration tests for the document pipeline."""
import pytest

from nlp2xml import InputError, build_tree, process_bytes, process_file
from nlp2xml.output import render_xml
from nlp2xml.structure import NodeKind


def test_process_bytes_end_to_end(sample_text, assert_well_formed):
    result = process_bytes(sample_text, source="sample.txt")
    assert result.source == "sample.txt"
    assert result.token_count > 0
    assert result.entities == [
        "Detective", "Harold Wilson", "London", "Nobody listened", "Tiger escaped", "Nobody",
    ]
    assert_well_formed(result.tree)


def test_paragraph_and_sentence_counts(sample_text):
    tree = build_tree(sample_text)
    kinds = [node.kind for node in tree.walk()]
    assert kinds.count(NodeKind.PARAGRAPH) == 3
    assert kinds.count(NodeKind.SENTENCE) == 4


def test_recognize_off_leaves_tree_unscored(sample_text):
    result = process_bytes(sample_text, recognize=False)
    assert result.entities == []
    assert all(word.ner_score is None for word in result.tree.words())


def test_dictionary_threads_through(pos_dictionary):
    result = process_bytes(b"My queen saw it.", dictionary=pos_dictionary)
    assert result.entities == ["queen", "it"]


def test_legacy_boundaries_threads_through():
    fixed = process_bytes(b"Wait... Zebra", recognize=False)
    legacy = process_bytes(b"Wait... Zebra", recognize=False, legacy_boundaries=True)
    assert [w.text for w in fixed.tree.words()] == ["Wait", "Zebra"]
    assert [w.text for w in legacy.tree.words()] == ["Zebra"]


def test_zebra_xml():
    result = process_bytes(b"the Zebra")
    assert render_xml(result.tree) == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<Document>\n"
        "    <Paragraph>\n"
        "        <Sentence>\n"
        '            <Word text="the" />\n'
        '            <Word text="Zebra" NER="0.243" />\n'
        "        </Sentence>\n"
        "    </Paragraph>\n"
        "</Document>\n"
    )


def test_process_file(tmp_path):
    path = tmp_path / "story.txt"
    path.write_bytes(b"Harold Wilson sat.")
    result = process_file(path)
    assert result.source == str(path)
    assert result.entities == ["Harold Wilson"]


def test_process_file_missing(tmp_path):
    with pytest.raises(InputError) as exc_info:
        process_file(tmp_path / "nope.txt")
    assert "nope.txt" in str(exc_info.value)
