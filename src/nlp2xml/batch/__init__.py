"""Multi-document processing: zip archives and watched directories."""

from nlp2xml.batch.archive import (
    ArchiveDocument,
    BatchResult,
    DocumentOutput,
    is_text_member,
    iter_archive_documents,
    process_archive,
)
from nlp2xml.batch.watcher import DirectoryWatcher, TextFileHandler, is_watched_file

__all__ = [
    "ArchiveDocument",
    "BatchResult",
    "DocumentOutput",
    "is_text_member",
    "iter_archive_documents",
    "process_archive",
    "DirectoryWatcher",
    "TextFileHandler",
    "is_watched_file",
]
