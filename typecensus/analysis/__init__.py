"""Signature type-reference extraction, classification and aggregation."""

from __future__ import annotations

from .aggregate import AggregationEngine
from .canonical import TypeCanonicalizer
from .classifier import ForeignClassifier
from .visitor import TypeReferenceVisitor

__all__ = [
    "AggregationEngine",
    "ForeignClassifier",
    "TypeCanonicalizer",
    "TypeReferenceVisitor",
]
