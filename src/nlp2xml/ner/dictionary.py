"""Part-of-speech dictionary loading.

The dictionary file holds one ``WORD<0xD7>TAG`` record per line. It is read
once, before any document is scored, and shared read-only afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from nlp2xml.errors import FormatError, InputError
from nlp2xml.ner.constants import POS_DELIMITER

logger = logging.getLogger(__name__)


class PartsOfSpeech(Mapping):
    """Immutable word → tag mapping plus the lines rejected while loading."""

    def __init__(
        self,
        entries: dict[str, str] | None = None,
        errors: list[FormatError] | None = None,
    ) -> None:
        self._entries = MappingProxyType(dict(entries or {}))
        self.errors: tuple[FormatError, ...] = tuple(errors or ())

    def __getitem__(self, word: str) -> str:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PartsOfSpeech(entries={len(self)}, errors={len(self.errors)})"


def parse_dictionary(
    data: bytes,
    *,
    source: str = "<bytes>",
    strict: bool = False,
) -> PartsOfSpeech:
    """Parse raw dictionary bytes.

    Args:
        data: File contents.
        source: Name used in error messages.
        strict: Raise on the first malformed line instead of skipping it.

    Returns:
        The loaded dictionary. Later duplicates overwrite earlier ones.

    Raises:
        FormatError: A line has no delimiter and ``strict`` is set.
    """
    entries: dict[str, str] = {}
    errors: list[FormatError] = []
    for line_number, line in enumerate(data.splitlines(), 1):
        fields = line.split(POS_DELIMITER)
        if len(fields) < 2:
            error = FormatError(source, line_number, line)
            if strict:
                raise error
            logger.warning("Skipping dictionary entry: %s", error)
            errors.append(error)
            continue
        entries[fields[0].decode("latin-1")] = fields[1].decode("latin-1")

    logger.debug(
        "Loaded %d part-of-speech entries from %s (%d rejected)",
        len(entries), source, len(errors),
    )
    return PartsOfSpeech(entries, errors)


def load_dictionary(path: str | Path, *, strict: bool = False) -> PartsOfSpeech:
    """Read and parse a dictionary file."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputError(path, exc.strerror or str(exc)) from exc
    return parse_dictionary(data, source=str(path), strict=strict)
