"""Tests for typecensus.orchestrator."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from typecensus.config import LIBRARY_INDEX_ENV, TypeCensusConfig
from typecensus.errors import UnitParseError
from typecensus.orchestrator import CorpusAnalyzer


@pytest.fixture(autouse=True)
def _clear_index_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LIBRARY_INDEX_ENV, raising=False)


def _analyzer(tmp_path: Path, **overrides) -> CorpusAnalyzer:
    return CorpusAnalyzer(config=TypeCensusConfig(root=tmp_path, **overrides))


def test_analyze_source_skips_scaffolding_namespaces(tmp_path: Path) -> None:
    analyzer = _analyzer(tmp_path)
    functions = analyzer.analyze_source(
        textwrap.dedent(
            """
            mod laertes_rt {
                pub fn helper(x: &str) {}
            }

            mod __laertes_array {
                pub fn get(v: &[u8]) {}
            }

            fn main() {}
            """
        ),
        "lib.rs",
    )
    assert [entry.name for entry in functions] == ["main"]
    assert functions[0].unit == "lib.rs"
    assert functions[0].labels == frozenset()


def test_analyze_source_propagates_parse_errors(tmp_path: Path) -> None:
    analyzer = _analyzer(tmp_path)
    with pytest.raises(UnitParseError):
        analyzer.analyze_source("fn broken(", "broken.rs")


def test_run_aggregates_corpus_and_recovers_from_bad_units(corpus_builder) -> None:
    corpus_builder.write(
        {
            "src/strings.rs": """
                fn takes_str(x: &str) {}
                fn takes_string(s: String) -> usize { 0 }
            """,
            "src/ffi.rs": """
                pub unsafe fn write(fd: libc::c_int, buf: &[u8]) -> libc::ssize_t { 0 }
                pub unsafe fn close(fd: libc::c_int) -> libc::c_int { 0 }
            """,
            "src/plain.rs": """
                fn nothing(x: u32) -> u32 { x }
            """,
            "src/broken.rs": "fn broken(x: &str {\n",
        }
    )

    analyzer = CorpusAnalyzer(config=TypeCensusConfig(root=corpus_builder.path()))
    result = analyzer.run(str(corpus_builder.path()))

    assert result.units == 3
    assert result.failed_units == ["src/broken.rs"]

    histogram = result.histogram
    assert histogram.total_functions == 5
    assert histogram.labelled_functions == 4
    assert histogram.empty_functions == 1
    assert histogram.native_functions == 2
    assert histogram.foreign_functions == 1
    assert histogram.mixed_functions == 1
    assert histogram.labels.counts == {
        "primitive::ref": 2,
        "primitive::str": 1,
        "primitive::slice": 1,
        "alloc::string::String": 1,
        "libc::c_int": 2,
        "libc::ssize_t": 1,
    }
    assert histogram.foreign.total == 3
    assert histogram.foreign.distinct == 2


def test_run_respects_exclude_paths(corpus_builder) -> None:
    corpus_builder.write(
        {
            "tinycc/bitfields.rs": "fn bits(x: &str) {}\n",
            "tinycc/tcc.rs": "fn tcc(x: &[u8]) {}\n",
        }
    )
    config = TypeCensusConfig(root=corpus_builder.path(), exclude_paths=["tinycc/bitfields.rs"])
    result = CorpusAnalyzer(config=config).run(str(corpus_builder.path()))

    assert [entry.name for entry in result.functions] == ["tcc"]


def test_run_accepts_a_single_file(tmp_path: Path) -> None:
    source = tmp_path / "main.rs"
    source.write_text("fn main(args: Vec<String>) {}\n", encoding="utf-8")

    result = _analyzer(tmp_path).run(str(source))

    assert result.units == 1
    assert result.functions[0].labels == {"alloc::vec::Vec", "alloc::string::String"}


def test_run_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _analyzer(tmp_path).run(str(tmp_path / "missing"))


def test_lenient_parsing_keeps_partial_units(corpus_builder) -> None:
    corpus_builder.write(
        {
            "lib.rs": """
                fn good(x: &str) {}

                fn broken(x: &str {
            """,
        }
    )
    config = TypeCensusConfig(root=corpus_builder.path(), strict_parse=False)
    result = CorpusAnalyzer(config=config).run(str(corpus_builder.path()))

    assert result.failed_units == []
    assert "good" in {entry.name for entry in result.functions}


def test_for_path_reads_corpus_configuration(corpus_builder) -> None:
    corpus_builder.write(
        {
            ".typecensus.yml": "foreign_libraries: [winapi]\n",
            "lib.rs": "fn f(x: winapi::DWORD, y: libc::c_int) {}\n",
        }
    )

    analyzer = CorpusAnalyzer.for_path(str(corpus_builder.path()))
    result = analyzer.run(str(corpus_builder.path()))

    assert result.functions[0].labels == {"winapi::DWORD"}
    assert result.histogram.foreign_functions == 1
