"""Core data models shared across typecensus components."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple, Union


@dataclass
class SourceFile:
    """Metadata for an individual corpus source file."""

    path: str


@dataclass
class CorpusManifest:
    """Normalized view of the corpus for the analysis driver."""

    root: str
    files: List[SourceFile]


@dataclass(frozen=True)
class ResolvedDefinition:
    """Handle for a definition produced by name resolution."""

    crate: str
    path: Tuple[str, ...]
    local: bool = False
    kind: str = "item"

    def is_local(self) -> bool:
        return self.local

    def qualified_path(self) -> str:
        """Return the definition path prefixed by its owning library."""
        return "::".join((self.crate,) + self.path)


class ResolutionKind(str, Enum):
    DEF = "def"
    PRIMITIVE = "primitive"
    ERR = "err"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a path in type or trait position."""

    kind: ResolutionKind
    definition: Optional[ResolvedDefinition] = None
    primitive: Optional[str] = None

    @classmethod
    def of(cls, definition: ResolvedDefinition) -> "Resolution":
        return cls(kind=ResolutionKind.DEF, definition=definition)

    @classmethod
    def primitive_type(cls, name: str) -> "Resolution":
        return cls(kind=ResolutionKind.PRIMITIVE, primitive=name)

    @classmethod
    def error(cls) -> "Resolution":
        return cls(kind=ResolutionKind.ERR)


@dataclass(frozen=True)
class SliceType:
    element: "TypeNode"


@dataclass(frozen=True)
class ReferenceType:
    referent: "TypeNode"
    mutable: bool = False


@dataclass(frozen=True)
class NeverType:
    pass


@dataclass(frozen=True)
class TupleType:
    elements: Tuple["TypeNode", ...] = ()


@dataclass(frozen=True)
class PathType:
    """A path in type position together with the generic arguments applied to it."""

    resolution: Resolution
    arguments: Tuple["TypeNode", ...] = ()
    text: str = ""


@dataclass(frozen=True)
class TraitRef:
    """A trait reference from a bound, a where clause or trait-object syntax."""

    resolution: Resolution
    arguments: Tuple["TypeNode", ...] = ()
    text: str = ""


@dataclass(frozen=True)
class OtherType:
    """Any type form without a structural label; nested types are still reachable."""

    children: Tuple["TypeNode", ...] = ()
    bounds: Tuple[TraitRef, ...] = ()
    text: str = ""


TypeNode = Union[SliceType, ReferenceType, NeverType, TupleType, PathType, OtherType]


@dataclass
class FunctionSignature:
    """Declared interface of one free function item."""

    name: str
    def_path: Tuple[str, ...]
    parameters: List[TypeNode] = field(default_factory=list)
    return_type: Optional[TypeNode] = None
    bounds: List[TraitRef] = field(default_factory=list)
    generic_types: List[TypeNode] = field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        return "::" + "::".join(self.def_path)


@dataclass
class ResolvedUnit:
    """Front-end output for a single compilation unit."""

    name: str
    functions: List[FunctionSignature] = field(default_factory=list)
    partial: bool = False


@dataclass(frozen=True)
class FunctionLabels:
    """Deduplicated canonical labels gathered from one function signature."""

    name: str
    labels: FrozenSet[str]
    unit: str = ""


@dataclass
class LabelHistogram:
    """Occurrence counts keyed by canonical label."""

    counts: Counter = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def distinct(self) -> int:
        return len(self.counts)

    def merge(self, other: "LabelHistogram") -> "LabelHistogram":
        return LabelHistogram(counts=self.counts + other.counts)


@dataclass
class CorpusHistogram:
    """Corpus-wide label frequencies plus categorical function counts."""

    total_functions: int = 0
    empty_functions: int = 0
    native_functions: int = 0
    foreign_functions: int = 0
    mixed_functions: int = 0
    labels: LabelHistogram = field(default_factory=LabelHistogram)
    native: LabelHistogram = field(default_factory=LabelHistogram)
    foreign: LabelHistogram = field(default_factory=LabelHistogram)

    @property
    def labelled_functions(self) -> int:
        return self.total_functions - self.empty_functions

    def merge(self, other: "CorpusHistogram") -> "CorpusHistogram":
        return CorpusHistogram(
            total_functions=self.total_functions + other.total_functions,
            empty_functions=self.empty_functions + other.empty_functions,
            native_functions=self.native_functions + other.native_functions,
            foreign_functions=self.foreign_functions + other.foreign_functions,
            mixed_functions=self.mixed_functions + other.mixed_functions,
            labels=self.labels.merge(other.labels),
            native=self.native.merge(other.native),
            foreign=self.foreign.merge(other.foreign),
        )
