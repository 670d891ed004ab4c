"""Corpus-wide aggregation of per-function label sets."""

from __future__ import annotations

import copy
from collections import Counter
from typing import AbstractSet, Iterable, Tuple, Union

from ..models import CorpusHistogram, FunctionLabels, LabelHistogram
from .classifier import EMPTY, FOREIGN, MIXED, NATIVE, ForeignClassifier, categorize

FunctionEntry = Union[FunctionLabels, Tuple[str, AbstractSet[str]]]


class AggregationEngine:
    """Single-pass accumulator of label frequencies and function categories.

    Each label counts once per function that references it. Merging is
    commutative, so partial engines built over disjoint shards of a corpus
    can be combined in any order.
    """

    def __init__(self, classifier: ForeignClassifier | None = None) -> None:
        self.classifier = classifier or ForeignClassifier()
        self._total = 0
        self._categories: Counter = Counter()
        self._labels: Counter = Counter()
        self._native: Counter = Counter()
        self._foreign: Counter = Counter()

    def add(self, name: str, labels: AbstractSet[str]) -> str:
        """Record one function and return the category it was counted under."""
        native, foreign = self.classifier.partition(labels)
        self._total += 1
        self._labels.update(native | foreign)
        self._native.update(native)
        self._foreign.update(foreign)
        category = categorize(native, foreign)
        self._categories[category] += 1
        return category

    def extend(self, functions: Iterable[FunctionEntry]) -> None:
        for entry in functions:
            if isinstance(entry, FunctionLabels):
                self.add(entry.name, entry.labels)
            else:
                name, labels = entry
                self.add(name, labels)

    def merge(self, other: "AggregationEngine") -> None:
        self._total += other._total
        self._categories.update(other._categories)
        self._labels.update(other._labels)
        self._native.update(other._native)
        self._foreign.update(other._foreign)

    @property
    def total_functions(self) -> int:
        return self._total

    def summary(self) -> CorpusHistogram:
        return CorpusHistogram(
            total_functions=self._total,
            empty_functions=self._categories[EMPTY],
            native_functions=self._categories[NATIVE],
            foreign_functions=self._categories[FOREIGN],
            mixed_functions=self._categories[MIXED],
            labels=LabelHistogram(counts=copy.copy(self._labels)),
            native=LabelHistogram(counts=copy.copy(self._native)),
            foreign=LabelHistogram(counts=copy.copy(self._foreign)),
        )


__all__ = ["AggregationEngine"]
