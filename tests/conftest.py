from __future__ import annotations

import textwrap

import pytest

from aiscan.core.analyzer import Analyzer
from aiscan.models.config import EngineConfig
from aiscan.patterns.catalog import compile_catalog

FURTHERMORE_TEXT = "Furthermore, this is furthermore notable."

HUMAN_TEXT = (
    "The bridge collapsed at 3:47 a.m. on a Tuesday. "
    "River water pushed through the gap in under a minute. "
    "Two cars stopped short of the edge. A third did not."
)


@pytest.fixture
def furthermore_catalog():
    return compile_catalog({2: [r"\bfurthermore\b"]})


@pytest.fixture
def mixed_catalog():
    return compile_catalog({
        3: [r"\bdelve into\b", r"\btapestry\b"],
        2: [r"\bfurthermore\b", r"\bmoreover\b"],
        -3: [r"\blol\b"],
    })


@pytest.fixture
def analyzer(furthermore_catalog):
    return Analyzer(furthermore_catalog, EngineConfig(chunk_size=1024, scale=1.75))


@pytest.fixture
def patterns_dir(tmp_path):
    d = tmp_path / "patterns"
    d.mkdir()
    (d / "patterns.yaml").write_text(
        textwrap.dedent(
            r"""
            2:
              - '\bfurthermore\b'
            -2:
              - '\blol\b'
            """
        ),
        encoding="utf-8",
    )
    (d / "_engine.yaml").write_text(
        textwrap.dedent(
            """
            engine:
              chunk_size: 1024
              scale: 1.75
              scale_profiles:
                article: 2.25
            labels:
              likely_ai: 0.5
              likely_human: 0.2
            allowlist:
              - blocked.example
              - example.org/private
            """
        ),
        encoding="utf-8",
    )
    return d
