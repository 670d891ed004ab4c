"""Native versus foreign-ABI classification of canonical labels."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, Iterable, Tuple

from .canonical import FOREIGN_LIBRARIES, is_structural

DEFAULT_FOREIGN_PREFIXES: Tuple[str, ...] = tuple(f"{name}::" for name in FOREIGN_LIBRARIES)

EMPTY = "empty"
NATIVE = "native"
FOREIGN = "foreign"
MIXED = "mixed"


class ForeignClassifier:
    """Partitions labels by the textual namespace they live in."""

    def __init__(self, prefixes: Iterable[str] = DEFAULT_FOREIGN_PREFIXES) -> None:
        self.prefixes = tuple(_normalise_prefix(prefix) for prefix in prefixes if prefix)

    def is_foreign(self, label: str) -> bool:
        if not self.prefixes or is_structural(label):
            return False
        return label.startswith(self.prefixes)

    def is_native(self, label: str) -> bool:
        return not self.is_foreign(label)

    def partition(self, labels: Iterable[str]) -> Tuple[FrozenSet[str], FrozenSet[str]]:
        native = set()
        foreign = set()
        for label in labels:
            (foreign if self.is_foreign(label) else native).add(label)
        return frozenset(native), frozenset(foreign)

    def category(self, labels: Iterable[str]) -> str:
        return categorize(*self.partition(labels))


def categorize(native: AbstractSet[str], foreign: AbstractSet[str]) -> str:
    """Name the category of a function from its partitioned labels."""
    if not native and not foreign:
        return EMPTY
    if native and foreign:
        return MIXED
    return FOREIGN if foreign else NATIVE


def _normalise_prefix(prefix: str) -> str:
    return prefix if prefix.endswith("::") else f"{prefix}::"


__all__ = [
    "DEFAULT_FOREIGN_PREFIXES",
    "EMPTY",
    "FOREIGN",
    "ForeignClassifier",
    "MIXED",
    "NATIVE",
    "categorize",
]
