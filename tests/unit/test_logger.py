import io
import logging

from nlp2xml.shared import PipelineLogger


def make_logger(**kwargs):
    stream = io.StringIO()
    return PipelineLogger(stream=stream, **kwargs), stream


class TestConsole:
    def test_info_reaches_console(self):
        log, stream = make_logger()
        log.info("hello")
        assert "INFO   | hello" in stream.getvalue()

    def test_debug_filtered_by_default(self):
        log, stream = make_logger()
        log.debug("hidden")
        assert stream.getvalue() == ""

    def test_min_level(self):
        log, stream = make_logger(min_level="DEBUG")
        log.debug("shown")
        log.trace("still hidden")
        assert "shown" in stream.getvalue()
        assert "still hidden" not in stream.getvalue()

    def test_console_off(self):
        log, stream = make_logger(console=False)
        log.error("quiet")
        assert stream.getvalue() == ""


class TestFiles:
    def test_info_and_trace_files(self, tmp_path):
        info = tmp_path / "logs" / "run.log"
        trace = tmp_path / "logs" / "trace.log"
        log, _ = make_logger(log_file=info, trace_file=trace)
        log.trace("deep detail")
        log.info("milestone")
        log.close()
        info_text = info.read_text(encoding="utf-8")
        trace_text = trace.read_text(encoding="utf-8")
        assert info_text.startswith("NLP2XML Log")
        assert "milestone" in info_text
        assert "deep detail" not in info_text
        assert "deep detail" in trace_text
        assert "milestone" in trace_text


class TestHelpers:
    def test_metric_recorded(self):
        log, stream = make_logger()
        log.metric("entities", 3)
        log.metric("ratio", 0.5)
        assert log.metrics == {"entities": 3, "ratio": 0.5}
        assert "entities = 3" in stream.getvalue()
        assert "ratio = 0.500" in stream.getvalue()

    def test_progress_bar(self):
        log, stream = make_logger()
        log.progress(5, 10, "doc.txt")
        assert "[   5/10] ##########.......... " in stream.getvalue()
        assert "doc.txt" in stream.getvalue()

    def test_progress_zero_total(self):
        log, stream = make_logger()
        log.progress(0, 0)
        assert "...................." in stream.getvalue()

    def test_timer(self):
        log, stream = make_logger()
        with log.timer("parse"):
            pass
        assert "timer:parse = " in stream.getvalue()

    def test_section(self):
        log, stream = make_logger()
        log.section("Batch")
        assert "  Batch" in stream.getvalue().splitlines()


class TestStdlibBridge:
    def test_records_forwarded_until_close(self):
        log, stream = make_logger()
        log.install_stdlib_bridge(root_logger="nlp2xml.bridge_test")
        logging.getLogger("nlp2xml.bridge_test.child").warning("careful")
        assert "[nlp2xml.bridge_test.child] careful" in stream.getvalue()
        log.close()
        logging.getLogger("nlp2xml.bridge_test.child").warning("after close")
        assert "after close" not in stream.getvalue()

    def test_context_manager_closes(self, tmp_path):
        path = tmp_path / "run.log"
        with PipelineLogger(log_file=path, console=False) as log:
            log.info("inside")
        assert "inside" in path.read_text(encoding="utf-8")
