"""Signature walker that discovers every labelled type reference."""

from __future__ import annotations

from typing import FrozenSet, Set

from ..logging import get_logger
from ..models import (
    FunctionSignature,
    NeverType,
    OtherType,
    PathType,
    ReferenceType,
    Resolution,
    ResolutionKind,
    SliceType,
    TraitRef,
    TupleType,
    TypeNode,
)
from .canonical import (
    NEVER_LABEL,
    REFERENCE_LABEL,
    SLICE_LABEL,
    STR_LABEL,
    TUPLE_LABEL,
    TypeCanonicalizer,
)

_LOGGER = get_logger("visitor")


class TypeReferenceVisitor:
    """Collects the canonical label set for a function's declared interface.

    Parameters, the return type, types reached through generics and every
    trait bound are walked independently into one shared set. Only the
    reference site is inspected; the fields of a referenced definition are
    never followed.
    """

    def __init__(self, canonicalizer: TypeCanonicalizer | None = None) -> None:
        self.canonicalizer = canonicalizer or TypeCanonicalizer()

    def collect(self, signature: FunctionSignature) -> FrozenSet[str]:
        labels: Set[str] = set()
        for parameter in signature.parameters:
            self.visit_type(parameter, labels)
        if signature.return_type is not None:
            self.visit_type(signature.return_type, labels)
        for generic in signature.generic_types:
            self.visit_type(generic, labels)
        for bound in signature.bounds:
            self.visit_trait_ref(bound, labels)
        return frozenset(labels)

    def visit_type(self, node: TypeNode, labels: Set[str]) -> None:
        if isinstance(node, SliceType):
            labels.add(SLICE_LABEL)
            self.visit_type(node.element, labels)
        elif isinstance(node, ReferenceType):
            labels.add(REFERENCE_LABEL)
            self.visit_type(node.referent, labels)
        elif isinstance(node, NeverType):
            labels.add(NEVER_LABEL)
        elif isinstance(node, TupleType):
            if len(node.elements) >= 2:
                labels.add(TUPLE_LABEL)
            for element in node.elements:
                self.visit_type(element, labels)
        elif isinstance(node, PathType):
            self._add_resolution(node.resolution, node.text, labels)
            for argument in node.arguments:
                self.visit_type(argument, labels)
        elif isinstance(node, OtherType):
            for child in node.children:
                self.visit_type(child, labels)
            for bound in node.bounds:
                self.visit_trait_ref(bound, labels)

    def visit_trait_ref(self, trait_ref: TraitRef, labels: Set[str]) -> None:
        if trait_ref.resolution.kind is ResolutionKind.DEF:
            self._add_resolution(trait_ref.resolution, trait_ref.text, labels)
        for argument in trait_ref.arguments:
            self.visit_type(argument, labels)

    def _add_resolution(self, resolution: Resolution, text: str, labels: Set[str]) -> None:
        if resolution.kind is ResolutionKind.DEF and resolution.definition is not None:
            label = self.canonicalizer.canonicalize(resolution.definition)
            if label is not None:
                labels.add(label)
        elif resolution.kind is ResolutionKind.PRIMITIVE:
            if resolution.primitive == "str":
                labels.add(STR_LABEL)
        else:
            _LOGGER.debug("Unresolved reference %s", text or "<anonymous>")


__all__ = ["TypeReferenceVisitor"]
