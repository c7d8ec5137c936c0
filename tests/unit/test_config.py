from pathlib import Path

import pytest

from nlp2xml.config import PipelineConfig


class TestFromEnv:
    def test_defaults(self):
        config = PipelineConfig.from_env({})
        assert config == PipelineConfig()
        assert config.workers == 4
        assert config.xml_indent == 4
        assert config.pos_path is None
        assert not config.legacy_boundaries

    def test_all_variables(self):
        config = PipelineConfig.from_env({
            "NLP2XML_POS_FILE": "data/pos.txt",
            "NLP2XML_WORKERS": "8",
            "NLP2XML_LEGACY_BOUNDARIES": "true",
            "NLP2XML_STRICT_POS": "1",
            "NLP2XML_XML_INDENT": "2",
            "NLP2XML_LOG_FILE": "logs/run.log",
            "NLP2XML_TRACE_FILE": "logs/trace.log",
        })
        assert config.pos_path == Path("data/pos.txt")
        assert config.workers == 8
        assert config.legacy_boundaries
        assert config.strict_pos
        assert config.xml_indent == 2
        assert config.log_file == Path("logs/run.log")
        assert config.trace_file == Path("logs/trace.log")

    @pytest.mark.parametrize("value", ["false", "0", "no", ""])
    def test_false_flags(self, value):
        assert not PipelineConfig.from_env({"NLP2XML_STRICT_POS": value}).strict_pos

    def test_flag_case_insensitive(self):
        assert PipelineConfig.from_env({"NLP2XML_STRICT_POS": " YES "}).strict_pos

    def test_blank_path_is_none(self):
        assert PipelineConfig.from_env({"NLP2XML_POS_FILE": "  "}).pos_path is None

    def test_bad_integer(self):
        with pytest.raises(ValueError, match="NLP2XML_WORKERS"):
            PipelineConfig.from_env({"NLP2XML_WORKERS": "many"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("NLP2XML_WORKERS", "3")
        assert PipelineConfig.from_env().workers == 3


class TestOverride:
    def test_values_replace(self):
        config = PipelineConfig().override(workers=2, pos_path=Path("pos.txt"))
        assert config.workers == 2
        assert config.pos_path == Path("pos.txt")

    def test_none_and_false_keep_current(self):
        base = PipelineConfig(workers=6, legacy_boundaries=True)
        config = base.override(workers=None, legacy_boundaries=False)
        assert config == base

    def test_is_a_copy(self):
        base = PipelineConfig()
        base.override(workers=9)
        assert base.workers == 4
