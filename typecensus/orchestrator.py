"""Pipeline orchestration: scan, resolve, visit and aggregate a corpus."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .analysis import AggregationEngine, ForeignClassifier, TypeCanonicalizer, TypeReferenceVisitor
from .config import TypeCensusConfig, load_config, resolve_library_index
from .corpus import CorpusScanner
from .errors import UnitParseError
from .frontend import SemanticResolutionFrontend, build_library_index
from .logging import get_logger
from .models import CorpusHistogram, FunctionLabels, ResolvedUnit


@dataclass
class RunResult:
    """Outcome of analysing a corpus."""

    functions: List[FunctionLabels] = field(default_factory=list)
    histogram: CorpusHistogram = field(default_factory=CorpusHistogram)
    units: int = 0
    failed_units: List[str] = field(default_factory=list)


class CorpusAnalyzer:
    """Coordinates the front end and the label pipeline over a set of units."""

    def __init__(
        self,
        config: TypeCensusConfig | None = None,
        frontend: SemanticResolutionFrontend | None = None,
        scanner: CorpusScanner | None = None,
        visitor: TypeReferenceVisitor | None = None,
        classifier: ForeignClassifier | None = None,
    ) -> None:
        self.config = config or TypeCensusConfig(root=Path.cwd())
        self.logger = get_logger("orchestrator")
        self.frontend = frontend or self._build_frontend(self.config)
        self.scanner = scanner or CorpusScanner(self.config.exclude_paths)
        self.visitor = visitor or TypeReferenceVisitor(
            TypeCanonicalizer(
                core_libraries=self.config.core_libraries,
                reserved_namespaces=self.config.reserved_namespaces,
                foreign_libraries=self.config.foreign_libraries,
            )
        )
        self.classifier = classifier or ForeignClassifier(self.config.classifier_prefixes())

    @classmethod
    def for_path(cls, path: str, config_path: Optional[str] = None) -> "CorpusAnalyzer":
        """Build an analyzer configured from ``config_path`` or the corpus root."""
        target = Path(path).expanduser().resolve()
        if config_path is not None:
            source = Path(config_path)
        else:
            source = target if target.is_dir() else target.parent
        return cls(config=load_config(source))

    def analyze_source(self, source: str, name: str = "main.rs") -> List[FunctionLabels]:
        """Resolve one unit and return the label set of each of its functions."""
        return self.analyze_unit(self.frontend.resolve(source, name))

    def analyze_unit(self, unit: ResolvedUnit) -> List[FunctionLabels]:
        results: List[FunctionLabels] = []
        for signature in unit.functions:
            if self._is_scaffolding(signature.qualified_name):
                self.logger.debug("Skipping scaffolding function %s", signature.qualified_name)
                continue
            labels = self.visitor.collect(signature)
            results.append(FunctionLabels(name=signature.name, labels=labels, unit=unit.name))
        return results

    def run(self, path: str) -> RunResult:
        """Analyse every Rust source below ``path`` (or the single file it names)."""
        target = Path(path).expanduser().resolve()
        if not target.exists():
            raise FileNotFoundError(f"Corpus path not found: {path}")

        if target.is_file():
            root = target.parent
            relative_paths = [target.name]
        else:
            root = target
            manifest = self.scanner.scan(str(target))
            relative_paths = [source.path for source in manifest.files]
        self.logger.info("Analysing %d Rust sources under %s", len(relative_paths), root)

        engine = AggregationEngine(self.classifier)
        result = RunResult()
        for rel_path in relative_paths:
            try:
                source = (root / rel_path).read_text(encoding="utf-8")
                functions = self.analyze_source(source, rel_path)
            except (UnitParseError, OSError, UnicodeDecodeError) as exc:
                self.logger.warning("Skipping %s: %s", rel_path, exc)
                result.failed_units.append(rel_path)
                continue
            result.units += 1
            result.functions.extend(functions)
            engine.extend(functions)

        result.histogram = engine.summary()
        self.logger.debug(
            "Collected %d functions from %d units (%d failed)",
            result.histogram.total_functions,
            result.units,
            len(result.failed_units),
        )
        return result

    def _is_scaffolding(self, qualified_name: str) -> bool:
        return _starts_with_namespace(qualified_name, self.config.scaffolding_namespaces)

    @staticmethod
    def _build_frontend(config: TypeCensusConfig) -> SemanticResolutionFrontend:
        index = build_library_index(
            config.core_libraries,
            config.foreign_libraries,
            resolve_library_index(config),
        )
        return SemanticResolutionFrontend(
            index,
            crate_name=config.crate_name,
            strict=config.strict_parse,
        )


def _starts_with_namespace(qualified_name: str, namespaces: Sequence[str]) -> bool:
    for namespace in namespaces:
        prefix = "::" + namespace.strip(":") + "::"
        if qualified_name.startswith(prefix):
            return True
    return False


__all__ = ["CorpusAnalyzer", "RunResult"]
