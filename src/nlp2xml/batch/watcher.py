"""Directory watcher that converts text files as they arrive.

- Only ``*.txt`` files are picked up; dotfiles and ``.tmp`` files are ignored
  (atomic write pattern: process only when renamed to the final name)
- Bursts of events are debounced into one batch
- Each file is written as ``<stem>.xml`` and ``<stem>.ner`` in the output
  directory; a file that fails is logged and left in place
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from nlp2xml.errors import Nlp2XmlError
from nlp2xml.output import DEFAULT_INDENT, write_entities, write_xml
from nlp2xml.pipeline import process_file

logger = logging.getLogger(__name__)


def is_watched_file(path: Path) -> bool:
    return not path.name.startswith(".") and path.suffix == ".txt"


class TextFileHandler(FileSystemEventHandler):
    """Collects new text files and hands them over after a quiet period."""

    def __init__(
        self,
        on_files_ready: Callable[[list[Path]], None],
        debounce_seconds: float = 1.0,
    ) -> None:
        super().__init__()
        self.on_files_ready = on_files_ready
        self.debounce_seconds = debounce_seconds
        self._pending: dict[str, Path] = {}
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def on_created(self, event) -> None:
        if not event.is_directory:
            self._queue(_event_path(event.src_path))

    def on_moved(self, event) -> None:
        if not event.is_directory:
            self._queue(_event_path(event.dest_path))

    def _queue(self, path: Path) -> None:
        if not is_watched_file(path):
            logger.debug("[Watcher] Ignoring %s", path)
            return
        with self._lock:
            self._pending[str(path)] = path
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.debounce_seconds, self.flush)
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> None:
        """Hand every pending file to the callback now."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            files = list(self._pending.values())
            self._pending.clear()
        if files:
            self.on_files_ready(files)


def _event_path(raw: str | bytes) -> Path:
    return Path(raw.decode("utf-8") if isinstance(raw, bytes) else raw)


class DirectoryWatcher:
    """Watches a directory and converts each new text file."""

    def __init__(
        self,
        watch_dir: str | Path,
        output_dir: str | Path | None = None,
        *,
        dictionary: Mapping[str, str] | None = None,
        legacy_boundaries: bool = False,
        indent: int = DEFAULT_INDENT,
        debounce_seconds: float = 1.0,
        process_existing: bool = False,
    ) -> None:
        self.watch_dir = Path(watch_dir)
        self.output_dir = Path(output_dir) if output_dir is not None else self.watch_dir
        self.dictionary = dictionary
        self.legacy_boundaries = legacy_boundaries
        self.indent = indent
        self.process_existing = process_existing
        self.processed: list[Path] = []
        self.failed: list[Path] = []

        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._handler = TextFileHandler(self.process_batch, debounce_seconds)
        self._observer = Observer()
        self._running = False

    def start(self) -> None:
        if self._running:
            return
        if self.process_existing:
            existing = sorted(p for p in self.watch_dir.glob("*.txt") if is_watched_file(p))
            if existing:
                logger.info("[Watcher] Processing %d existing files", len(existing))
                self.process_batch(existing)
        self._observer.schedule(self._handler, str(self.watch_dir), recursive=False)
        self._observer.start()
        self._running = True
        logger.info("[Watcher] Started watching %s", self.watch_dir)

    def stop(self) -> None:
        """Stop watching after converting anything still pending."""
        if not self._running:
            return
        self._handler.flush()
        self._observer.stop()
        self._observer.join(timeout=5.0)
        self._running = False
        logger.info("[Watcher] Stopped")

    def process_batch(self, files: list[Path]) -> None:
        for path in files:
            try:
                self.process_one(path)
            except (Nlp2XmlError, OSError) as exc:
                logger.error("[Watcher] Failed to process %s: %s", path, exc)
                self.failed.append(path)
            else:
                self.processed.append(path)

    def process_one(self, path: Path) -> None:
        result = process_file(
            path,
            dictionary=self.dictionary,
            legacy_boundaries=self.legacy_boundaries,
        )
        write_xml(result.tree, self.output_dir / f"{path.stem}.xml", self.indent)
        write_entities(result.entities, self.output_dir / f"{path.stem}.ner")
        logger.info("[Watcher] %s: %d entities", path.name, len(result.entities))
