"""Canonical labels for resolved type and trait references."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..models import ResolvedDefinition

STRUCTURAL_NAMESPACE = "primitive::"

SLICE_LABEL = "primitive::slice"
REFERENCE_LABEL = "primitive::ref"
NEVER_LABEL = "primitive::never"
TUPLE_LABEL = "primitive::tuple"
STR_LABEL = "primitive::str"

CORE_LIBRARIES: Tuple[str, ...] = ("std", "alloc", "core")
# Foreign-ABI aliases re-exported under native-looking paths.
RESERVED_NAMESPACES: Tuple[str, ...] = ("std::os::raw::", "core::ffi::")
FOREIGN_LIBRARIES: Tuple[str, ...] = ("libc",)


class TypeCanonicalizer:
    """Maps resolved definitions to stable labels under the inclusion policy."""

    def __init__(
        self,
        core_libraries: Iterable[str] = CORE_LIBRARIES,
        reserved_namespaces: Iterable[str] = RESERVED_NAMESPACES,
        foreign_libraries: Iterable[str] = FOREIGN_LIBRARIES,
    ) -> None:
        self.core_libraries = tuple(core_libraries)
        self.reserved_namespaces = tuple(reserved_namespaces)
        self.foreign_libraries = tuple(foreign_libraries)
        self._tracked = frozenset(self.core_libraries) | frozenset(self.foreign_libraries)

    def canonicalize(self, definition: ResolvedDefinition) -> Optional[str]:
        """Return the label for ``definition`` or None when policy excludes it."""
        if definition.is_local():
            return None
        if definition.crate not in self._tracked:
            return None
        label = definition.qualified_path()
        if label.startswith(self.reserved_namespaces):
            return None
        return label


def is_structural(label: str) -> bool:
    return label.startswith(STRUCTURAL_NAMESPACE)


__all__ = [
    "CORE_LIBRARIES",
    "FOREIGN_LIBRARIES",
    "NEVER_LABEL",
    "REFERENCE_LABEL",
    "RESERVED_NAMESPACES",
    "SLICE_LABEL",
    "STRUCTURAL_NAMESPACE",
    "STR_LABEL",
    "TUPLE_LABEL",
    "TypeCanonicalizer",
    "is_structural",
]
