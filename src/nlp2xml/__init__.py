"""nlp2xml - heuristic text structuring and named-entity annotation."""

from nlp2xml.errors import FormatError, InputError, Nlp2XmlError, OutputError
from nlp2xml.pipeline import DocumentResult, build_tree, process_bytes, process_file

__version__ = "0.1.0"

__all__ = [
    "build_tree",
    "process_bytes",
    "process_file",
    "DocumentResult",
    "Nlp2XmlError",
    "InputError",
    "FormatError",
    "OutputError",
]
