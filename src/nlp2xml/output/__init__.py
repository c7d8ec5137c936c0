"""Serializers for annotated document trees."""

from nlp2xml.output.entities import concatenate_files, write_entities
from nlp2xml.output.xml_writer import DEFAULT_INDENT, render_xml, to_xml, write_xml

__all__ = [
    "DEFAULT_INDENT",
    "to_xml",
    "render_xml",
    "write_xml",
    "write_entities",
    "concatenate_files",
]
