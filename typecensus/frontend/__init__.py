"""Rust front end: parsing, name resolution and signature lowering."""

from __future__ import annotations

from .library_index import LibraryIndex, build_library_index, load_index_extension
from .resolver import NameResolver
from .scope import ModuleScope, RustPath
from .semantic import SemanticResolutionFrontend

__all__ = [
    "LibraryIndex",
    "ModuleScope",
    "NameResolver",
    "RustPath",
    "SemanticResolutionFrontend",
    "build_library_index",
    "load_index_extension",
]
