"""Command-line interface.

Usage:
    nlp2xml parse story.txt story.xml
    nlp2xml ner story.txt story.xml story.ner --pos pos.txt
    nlp2xml batch stories.zip all.xml all.ner --pos pos.txt --workers 8
    nlp2xml watch inbox/ --output outbox/

Output files that are not given go to stdout. Log lines go to stderr.
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import NoReturn

import click

from nlp2xml.batch import DirectoryWatcher, DocumentOutput, process_archive
from nlp2xml.config import PipelineConfig
from nlp2xml.errors import Nlp2XmlError, OutputError
from nlp2xml.ner import PartsOfSpeech, load_dictionary
from nlp2xml.output import concatenate_files, write_entities, write_xml
from nlp2xml.pipeline import process_file
from nlp2xml.shared import PipelineLogger

_path = click.Path(path_type=Path)
_existing = click.Path(path_type=Path, exists=True, dir_okay=False)


def _open_logger(ctx: click.Context) -> PipelineLogger:
    config: PipelineConfig = ctx.obj
    log = PipelineLogger(log_file=config.log_file, trace_file=config.trace_file)
    log.install_stdlib_bridge(root_logger="nlp2xml", level=logging.DEBUG)
    ctx.call_on_close(log.close)
    return log


def _fail(log: PipelineLogger, exc: Exception) -> NoReturn:
    log.error(str(exc))
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def _output_error(target: Path | None, exc: OSError) -> OutputError:
    return OutputError(target or "<stdout>", exc.strerror or str(exc))


def _load_pos(config: PipelineConfig, log: PipelineLogger) -> PartsOfSpeech | None:
    if config.pos_path is None:
        return None
    log.info(f"PartsOfSpeech: {config.pos_path}")
    dictionary = load_dictionary(config.pos_path, strict=config.strict_pos)
    log.metric("pos_entries", len(dictionary))
    if dictionary.errors:
        log.warn(f"{len(dictionary.errors)} malformed dictionary lines skipped")
    return dictionary


@click.group()
@click.option("--log-file", type=_path, default=None, help="INFO+ log file.")
@click.option("--trace-file", type=_path, default=None, help="Full trace log file.")
@click.option(
    "--legacy-boundaries",
    is_flag=True,
    help="Drop a word directly before '...', '--' or a blank line, "
    "as the legacy tokenizer did.",
)
@click.option("--strict-pos", is_flag=True, help="Fail on a malformed dictionary line.")
@click.pass_context
def main(
    ctx: click.Context,
    log_file: Path | None,
    trace_file: Path | None,
    legacy_boundaries: bool,
    strict_pos: bool,
) -> None:
    """Structure plain text as XML and flag likely named entities."""
    ctx.obj = PipelineConfig.from_env().override(
        log_file=log_file,
        trace_file=trace_file,
        legacy_boundaries=legacy_boundaries,
        strict_pos=strict_pos,
    )


@main.command()
@click.argument("input_file", type=_path)
@click.argument("output", type=_path, required=False)
@click.pass_context
def parse(ctx: click.Context, input_file: Path, output: Path | None) -> None:
    """Parse INPUT_FILE into paragraphs, sentences and groups."""
    config: PipelineConfig = ctx.obj
    log = _open_logger(ctx)
    log.info(f"Input: {input_file}")
    try:
        result = process_file(
            input_file,
            recognize=False,
            legacy_boundaries=config.legacy_boundaries,
        )
    except Nlp2XmlError as exc:
        _fail(log, exc)
    if output is not None:
        log.info(f"Output: {output}")
    try:
        write_xml(result.tree, output, config.xml_indent)
    except OSError as exc:
        _fail(log, _output_error(output, exc))
    log.info("Done")


@main.command()
@click.argument("input_file", type=_path)
@click.argument("output", type=_path, required=False)
@click.argument("ner_file", type=_path, required=False)
@click.option("-p", "--pos", "pos_path", type=_existing, default=None,
              help="Part-of-speech dictionary (WORD<0xD7>TAG per line).")
@click.pass_context
def ner(
    ctx: click.Context,
    input_file: Path,
    output: Path | None,
    ner_file: Path | None,
    pos_path: Path | None,
) -> None:
    """Parse INPUT_FILE and annotate likely named entities."""
    config: PipelineConfig = ctx.obj.override(pos_path=pos_path)
    log = _open_logger(ctx)
    log.info(f"Input: {input_file}")
    try:
        dictionary = _load_pos(config, log)
        result = process_file(
            input_file,
            dictionary=dictionary,
            legacy_boundaries=config.legacy_boundaries,
        )
    except Nlp2XmlError as exc:
        _fail(log, exc)
    log.metric("entities", len(result.entities))
    if output is not None:
        log.info(f"Output: {output}")
    try:
        write_xml(result.tree, output, config.xml_indent)
    except OSError as exc:
        _fail(log, _output_error(output, exc))
    if ner_file is not None:
        log.info(f"NER: {ner_file}")
    try:
        write_entities(result.entities, ner_file)
    except OSError as exc:
        _fail(log, _output_error(ner_file, exc))
    log.info("Done")


@main.command()
@click.argument("archive", type=_path)
@click.argument("aggregate_xml", type=_path, required=False)
@click.argument("aggregate_ner", type=_path, required=False)
@click.option("-p", "--pos", "pos_path", type=_existing, default=None,
              help="Part-of-speech dictionary (WORD<0xD7>TAG per line).")
@click.option("--workers", type=int, default=None, help="Thread pool size.")
@click.option("--output-dir", type=_path, default=None,
              help="Directory for per-document outputs (default: next to ARCHIVE).")
@click.pass_context
def batch(
    ctx: click.Context,
    archive: Path,
    aggregate_xml: Path | None,
    aggregate_ner: Path | None,
    pos_path: Path | None,
    workers: int | None,
    output_dir: Path | None,
) -> None:
    """Process every .txt file in the zip ARCHIVE in parallel."""
    config: PipelineConfig = ctx.obj.override(pos_path=pos_path, workers=workers)
    log = _open_logger(ctx)
    log.section("NLP2XML Batch")
    log.info(f"Input Zip file={archive}")
    log.info(f"Workers: {config.workers}")

    def _report(output: DocumentOutput, finished: int, total: int) -> None:
        log.progress(finished, total, output.name)

    try:
        # Built once, before any worker starts.
        dictionary = _load_pos(config, log)
        with log.timer("batch"):
            result = process_archive(
                archive,
                dictionary=dictionary,
                workers=config.workers,
                legacy_boundaries=config.legacy_boundaries,
                output_dir=output_dir,
                indent=config.xml_indent,
                on_document=_report,
            )
    except Nlp2XmlError as exc:
        _fail(log, exc)
    except OSError as exc:
        _fail(log, _output_error(output_dir or archive.parent, exc))

    for target, sources in ((aggregate_xml, result.xml_paths), (aggregate_ner, result.ner_paths)):
        log.info(f"Concatenate to {target or '<stdout>'}")
        try:
            concatenate_files(target, sources)
        except OSError as exc:
            _fail(log, _output_error(target, exc))

    log.metric("documents", len(result.outputs))
    log.metric("skipped", len(result.skipped))
    log.metric("failed", len(result.failed))
    log.metric("entities", result.total_entities)
    for output in result.failed:
        log.error(f"  {output.name}: {output.error}")
    log.info("DONE")
    if result.failed:
        sys.exit(1)


@main.command()
@click.argument("directory", type=click.Path(path_type=Path, exists=True, file_okay=False))
@click.option("--output", "output_dir", type=_path, default=None,
              help="Directory for outputs (default: DIRECTORY).")
@click.option("-p", "--pos", "pos_path", type=_existing, default=None,
              help="Part-of-speech dictionary (WORD<0xD7>TAG per line).")
@click.option("--process-existing", is_flag=True, help="Convert files already present.")
@click.pass_context
def watch(
    ctx: click.Context,
    directory: Path,
    output_dir: Path | None,
    pos_path: Path | None,
    process_existing: bool,
) -> None:
    """Convert .txt files as they appear in DIRECTORY until interrupted."""
    config: PipelineConfig = ctx.obj.override(pos_path=pos_path)
    log = _open_logger(ctx)
    try:
        dictionary = _load_pos(config, log)
    except Nlp2XmlError as exc:
        _fail(log, exc)

    try:
        watcher = DirectoryWatcher(
            directory,
            output_dir,
            dictionary=dictionary,
            legacy_boundaries=config.legacy_boundaries,
            indent=config.xml_indent,
            process_existing=process_existing,
        )
    except OSError as exc:
        _fail(log, _output_error(output_dir or directory, exc))
    watcher.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()
    log.metric("processed", len(watcher.processed))
    log.metric("failed", len(watcher.failed))


if __name__ == "__main__":
    main()
