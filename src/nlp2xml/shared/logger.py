from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TextIO

TRACE = 5

_LABELS = {
    TRACE: "TRACE",
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}


class PipelineLogger:
    """Run logger for the command-line tools.

    Every line goes to up to three sinks, each gated on its own:

    - console   : ``min_level`` and up, on stderr (stdout may carry XML)
    - info_file : INFO and up
    - trace_file: every line

    Levels are the stdlib ``logging`` numbers plus ``TRACE`` below DEBUG.
    """

    def __init__(
        self,
        log_file: str | Path | None = None,
        trace_file: str | Path | None = None,
        console: bool = True,
        min_level: int | str = logging.INFO,
        stream: TextIO | None = None,
    ) -> None:
        self.console = console
        self.min_level = _level_number(min_level)
        self.stream = stream if stream is not None else sys.stderr
        self.metrics: dict[str, Any] = {}
        self._start = time.perf_counter()
        self._bridges: list[tuple[logging.Logger, logging.Handler]] = []
        self._info_file = _open_sink(log_file, "NLP2XML Log")
        self._trace_file = _open_sink(trace_file, "NLP2XML Trace Log")

    def log(self, level: int, msg: str, label: str | None = None) -> None:
        elapsed = time.perf_counter() - self._start
        tag = label or _LABELS.get(level, "INFO")
        self._write(f"[{time.strftime('%H:%M:%S')}] [{elapsed:7.2f}s] {tag:6} | {msg}", level)

    def _write(self, line: str, level: int) -> None:
        if self.console and level >= self.min_level:
            print(line, file=self.stream, flush=True)
        if self._info_file is not None and level >= logging.INFO:
            self._info_file.write(line + "\n")
        if self._trace_file is not None:
            self._trace_file.write(line + "\n")

    def trace(self, msg: str) -> None:
        self.log(TRACE, msg)

    def debug(self, msg: str) -> None:
        self.log(logging.DEBUG, msg)

    def info(self, msg: str) -> None:
        self.log(logging.INFO, msg)

    def warn(self, msg: str) -> None:
        self.log(logging.WARNING, msg)

    def error(self, msg: str) -> None:
        self.log(logging.ERROR, msg)

    def section(self, title: str) -> None:
        rule = "=" * 60
        for line in (rule, f"  {title}", rule):
            self._write(line, logging.INFO)

    def progress(self, done: int, total: int, label: str = "") -> None:
        """One-line bar, e.g. ``[   3/12] #####............... 25.0%  a.txt``."""
        ratio = done / total if total else 0.0
        bar = "#" * int(20 * ratio)
        line = f"[{done:>4}/{total}] {bar:.<20} {ratio * 100:5.1f}%"
        self.log(logging.INFO, f"{line}  {label}" if label else line, "PROG")

    def metric(self, name: str, value: Any, unit: str = "") -> None:
        self.metrics[name] = value
        shown = f"{value:.3f}" if isinstance(value, float) else str(value)
        if unit:
            shown += f" {unit}"
        self.log(logging.INFO, f"{name} = {shown}", "METRIC")

    @contextmanager
    def timer(self, name: str):
        started = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - started
            self.log(logging.INFO, f"timer:{name} = {elapsed:.3f}s", "METRIC")

    def install_stdlib_bridge(self, root_logger: str = "", level: int = logging.INFO) -> None:
        """Forward stdlib records from ``root_logger`` until ``close()``."""
        root = logging.getLogger(root_logger)
        root.setLevel(min(root.level or logging.DEBUG, level))
        handler = _BridgeHandler(self)
        handler.setLevel(level)
        root.addHandler(handler)
        self._bridges.append((root, handler))

    def close(self) -> None:
        while self._bridges:
            root, handler = self._bridges.pop()
            root.removeHandler(handler)
        for sink in (self._info_file, self._trace_file):
            if sink is not None:
                sink.close()
        self._info_file = self._trace_file = None

    def __enter__(self) -> "PipelineLogger":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


def _level_number(level: int | str) -> int:
    if isinstance(level, int):
        return level
    name = level.upper()
    if name == "TRACE":
        return TRACE
    number = logging.getLevelName("WARNING" if name == "WARN" else name)
    return number if isinstance(number, int) else logging.INFO


def _open_sink(path: str | Path | None, title: str) -> TextIO | None:
    if not path:
        return None
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    sink = open(path, "w", encoding="utf-8", buffering=1)
    sink.write(f"{title} - {time.strftime('%Y-%m-%d %H:%M:%S')}\n\n")
    return sink


class _BridgeHandler(logging.Handler):
    def __init__(self, target: PipelineLogger) -> None:
        super().__init__()
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.target.log(record.levelno, f"[{record.name}] {self.format(record)}")
        except Exception:
            self.handleError(record)
