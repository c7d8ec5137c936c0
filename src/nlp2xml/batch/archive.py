"""Parallel processing of the text files inside a zip archive.

Every ``*.txt`` member becomes one task on a thread pool. A task owns its
document tree from tokenizing to writing; the only object the tasks share is
the part-of-speech dictionary, which is built before the pool starts and is
read-only. For ``dir/chapter1.txt`` the task writes ``chapter1.xml`` and
``chapter1.ner`` into the output directory (by default next to the archive).
"""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Callable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from nlp2xml.errors import InputError
from nlp2xml.output import DEFAULT_INDENT, write_entities, write_xml
from nlp2xml.pipeline import process_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveDocument:
    name: str
    stem: str
    data: bytes


@dataclass
class DocumentOutput:
    name: str
    xml_path: Path
    ner_path: Path
    entity_count: int = 0
    error: str | None = None


@dataclass
class BatchResult:
    outputs: list[DocumentOutput] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def failed(self) -> list[DocumentOutput]:
        return [o for o in self.outputs if o.error is not None]

    @property
    def xml_paths(self) -> list[Path]:
        return [o.xml_path for o in self.outputs if o.error is None]

    @property
    def ner_paths(self) -> list[Path]:
        return [o.ner_path for o in self.outputs if o.error is None]

    @property
    def total_entities(self) -> int:
        return sum(o.entity_count for o in self.outputs)


def is_text_member(name: str) -> bool:
    basename = PurePosixPath(name).name
    return not basename.startswith(".") and basename.endswith(".txt")


def iter_archive_documents(
    zip_path: str | Path,
    skipped: list[str] | None = None,
) -> Iterator[ArchiveDocument]:
    """Yield the text members of an archive in archive order.

    Args:
        zip_path: Archive to read.
        skipped: If given, names of members that are not text files are
            appended to it.

    Raises:
        InputError: The archive is missing, unreadable or not a zip file.
    """
    try:
        archive = zipfile.ZipFile(zip_path)
    except (OSError, zipfile.BadZipFile) as exc:
        raise InputError(zip_path, str(exc)) from exc

    with archive:
        for info in archive.infolist():
            if info.is_dir() or not is_text_member(info.filename):
                logger.info("SKIP %s", info.filename)
                if skipped is not None:
                    skipped.append(info.filename)
                continue
            yield ArchiveDocument(
                name=info.filename,
                stem=PurePosixPath(info.filename).stem,
                data=archive.read(info),
            )


def _process_document(
    document: ArchiveDocument,
    output_dir: Path,
    dictionary: Mapping[str, str] | None,
    legacy_boundaries: bool,
    indent: int,
) -> int:
    result = process_bytes(
        document.data,
        source=document.name,
        dictionary=dictionary,
        legacy_boundaries=legacy_boundaries,
    )
    write_xml(result.tree, output_dir / f"{document.stem}.xml", indent)
    write_entities(result.entities, output_dir / f"{document.stem}.ner")
    return len(result.entities)


def process_archive(
    zip_path: str | Path,
    *,
    dictionary: Mapping[str, str] | None = None,
    workers: int = 4,
    legacy_boundaries: bool = False,
    output_dir: str | Path | None = None,
    indent: int = DEFAULT_INDENT,
    on_document: Callable[[DocumentOutput, int, int], None] | None = None,
) -> BatchResult:
    """Process every text file of ``zip_path`` on a thread pool.

    Args:
        zip_path: Input archive.
        dictionary: Optional part-of-speech lookup shared by all tasks.
        workers: Thread pool size.
        legacy_boundaries: Passed through to the tokenizer.
        output_dir: Where per-document outputs go. Defaults to the
            archive's directory.
        indent: XML indentation width.
        on_document: Called on the calling thread as each task finishes,
            with the number of finished tasks and the total.

    Returns:
        BatchResult listing outputs in archive order. Failed documents carry
        an error message instead of raising.
    """
    zip_path = Path(zip_path)
    out_dir = Path(output_dir) if output_dir is not None else zip_path.parent
    out_dir.mkdir(parents=True, exist_ok=True)

    result = BatchResult()
    documents = list(iter_archive_documents(zip_path, result.skipped))
    for document in documents:
        output = DocumentOutput(
            name=document.name,
            xml_path=out_dir / f"{document.stem}.xml",
            ner_path=out_dir / f"{document.stem}.ner",
        )
        result.outputs.append(output)
        logger.info(
            "A new task has been added: %s -> %s, %s",
            document.name, output.xml_path, output.ner_path,
        )

    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = {
            executor.submit(
                _process_document,
                document,
                out_dir,
                dictionary,
                legacy_boundaries,
                indent,
            ): output
            for document, output in zip(documents, result.outputs)
        }
        for finished, future in enumerate(as_completed(futures), 1):
            output = futures[future]
            exc = future.exception()
            if exc is not None:
                logger.error("Task %s failed: %s", output.name, exc)
                output.error = str(exc)
            else:
                output.entity_count = future.result()
                logger.info("Task %s Done", output.name)
            if on_document is not None:
                on_document(output, finished, len(futures))

    return result
