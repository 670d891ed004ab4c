"""Helper utilities for constructing temporary Rust corpora in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from typecensus.corpus import CorpusScanner
from typecensus.models import CorpusManifest


class CorpusBuilder:
    """Utility for writing sources into a throwaway corpus and rescanning it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "corpus"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the corpus."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def scan(self, *exclude_paths: str) -> CorpusManifest:
        """Return a fresh manifest of the corpus contents."""
        return CorpusScanner(exclude_paths).scan(str(self.root))

    def path(self) -> Path:
        """Return the corpus root path."""
        return self.root


__all__ = ["CorpusBuilder"]
