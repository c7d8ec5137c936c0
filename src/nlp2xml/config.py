"""Run configuration.

Environment Variables:
    NLP2XML_POS_FILE: Part-of-speech dictionary path (default: none)
    NLP2XML_WORKERS: Thread pool size for batch mode (default: 4)
    NLP2XML_LEGACY_BOUNDARIES: "true" to drop words before ``...``/``--``
        like the legacy tokenizer (default: false)
    NLP2XML_STRICT_POS: "true" to fail on a malformed dictionary line
        (default: false)
    NLP2XML_XML_INDENT: XML indentation width (default: 4)
    NLP2XML_LOG_FILE: INFO+ log file (default: none)
    NLP2XML_TRACE_FILE: full trace log file (default: none)

Command-line flags override the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

_TRUE = {"1", "true", "yes", "on"}


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "false").strip().lower() in _TRUE


def _path(env: Mapping[str, str], name: str) -> Path | None:
    value = env.get(name, "").strip()
    return Path(value) if value else None


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    value = env.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class PipelineConfig:
    pos_path: Path | None = None
    workers: int = 4
    legacy_boundaries: bool = False
    strict_pos: bool = False
    xml_indent: int = 4
    log_file: Path | None = None
    trace_file: Path | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "PipelineConfig":
        env = os.environ if env is None else env
        return cls(
            pos_path=_path(env, "NLP2XML_POS_FILE"),
            workers=_int(env, "NLP2XML_WORKERS", 4),
            legacy_boundaries=_flag(env, "NLP2XML_LEGACY_BOUNDARIES"),
            strict_pos=_flag(env, "NLP2XML_STRICT_POS"),
            xml_indent=_int(env, "NLP2XML_XML_INDENT", 4),
            log_file=_path(env, "NLP2XML_LOG_FILE"),
            trace_file=_path(env, "NLP2XML_TRACE_FILE"),
        )

    def override(self, **changes) -> "PipelineConfig":
        """Copy with every non-``None``, non-``False`` change applied."""
        return replace(
            self,
            **{k: v for k, v in changes.items() if v is not None and v is not False},
        )
