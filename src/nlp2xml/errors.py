"""Exception types raised by nlp2xml."""

from __future__ import annotations

from pathlib import Path


class Nlp2XmlError(Exception):
    """Base class for all nlp2xml errors."""


class InputError(Nlp2XmlError):
    """Input bytes could not be obtained from a file, archive or stream."""

    def __init__(self, source: str | Path, reason: str) -> None:
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Can't read input {self.source}: {reason}")


class FormatError(Nlp2XmlError):
    """A part-of-speech dictionary line has no word/tag delimiter."""

    def __init__(self, source: str, line_number: int, line: bytes) -> None:
        self.source = source
        self.line_number = line_number
        self.line = line
        preview = line[:40].decode("latin-1")
        super().__init__(
            f"{source}:{line_number}: missing 0xD7 delimiter in {preview!r}"
        )


class OutputError(Nlp2XmlError):
    """An output file or directory could not be written."""

    def __init__(self, target: str | Path, reason: str) -> None:
        self.target = str(target)
        self.reason = reason
        super().__init__(f"Can't write output {self.target}: {reason}")
