"""Plain-text outputs: entity lists and aggregated batch files."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)


@contextmanager
def _open_target(path: str | Path | None) -> Iterator[TextIO]:
    if path is None:
        yield sys.stdout
        return
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        yield handle


def write_entities(entities: Iterable[str], path: str | Path | None = None) -> None:
    """One entity per line, to ``path`` or stdout."""
    with _open_target(path) as out:
        for entity in entities:
            out.write(entity + "\n")


def concatenate_files(
    target: str | Path | None,
    sources: Iterable[str | Path],
) -> None:
    """Append every source to ``target``, each preceded by ``FILE:<name>``.

    A source that cannot be read is logged and left out.
    """
    with _open_target(target) as out:
        for source in sources:
            out.write(f"FILE:{source}\n")
            try:
                with open(source, encoding="utf-8") as handle:
                    for line in handle:
                        out.write(line.rstrip("\r\n") + "\n")
            except OSError as exc:
                logger.error("Cannot concatenate %s: %s", source, exc)
