"""Lower tree-sitter type syntax into resolved type trees."""

from __future__ import annotations

from typing import List, Optional, Tuple

from tree_sitter import Node

from ..models import (
    NeverType,
    OtherType,
    PathType,
    ReferenceType,
    Resolution,
    SliceType,
    TraitRef,
    TupleType,
    TypeNode,
)
from .parser import first_child_of_type, named_children, node_text
from .resolver import GenericScope, NameResolver
from .scope import ModuleScope, RustPath

_TYPE_NODES = frozenset(
    {
        "abstract_type",
        "array_type",
        "bounded_type",
        "bracketed_type",
        "dynamic_type",
        "function_type",
        "generic_type",
        "macro_invocation",
        "metavariable",
        "never_type",
        "pointer_type",
        "primitive_type",
        "reference_type",
        "scoped_type_identifier",
        "tuple_type",
        "type_identifier",
        "unit_type",
    }
)

_PATH_NODES = frozenset(
    {"type_identifier", "scoped_type_identifier", "scoped_identifier", "generic_type"}
)
_SCOPED_NODES = frozenset({"scoped_type_identifier", "scoped_identifier"})
_GENERIC_NODES = frozenset({"generic_type", "generic_type_with_turbofish"})
_SEGMENT_NODES = frozenset(
    {"identifier", "type_identifier", "primitive_type", "crate", "self", "super"}
)


def generic_parameter_names(type_parameters: Optional[Node], source_bytes: bytes) -> List[str]:
    """Return the names of the type parameters declared in ``<...>``."""
    names: List[str] = []
    if type_parameters is None:
        return names
    for child in named_children(type_parameters):
        if child.type == "type_identifier":
            names.append(node_text(child, source_bytes))
        elif child.type in ("type_parameter", "optional_type_parameter"):
            names.append(node_text(child.child_by_field_name("name"), source_bytes))
        elif child.type == "constrained_type_parameter":
            left = child.child_by_field_name("left")
            if left is not None and left.type == "type_identifier":
                names.append(node_text(left, source_bytes))
    return [name for name in names if name]


class TypeLowering:
    """Builds TypeNode and TraitRef trees for one function signature."""

    def __init__(
        self,
        resolver: NameResolver,
        scope: ModuleScope,
        generics: GenericScope,
        source_bytes: bytes,
    ) -> None:
        self.resolver = resolver
        self.scope = scope
        self.generics = generics
        self.source_bytes = source_bytes

    def lower_type(self, node: Optional[Node]) -> TypeNode:
        if node is None:
            return OtherType()
        kind = node.type
        text = node_text(node, self.source_bytes)

        if kind in ("type_identifier", "primitive_type", "scoped_type_identifier", "generic_type"):
            resolution, arguments = self._resolve_path(node)
            return PathType(resolution=resolution, arguments=arguments, text=text)
        if kind == "reference_type":
            mutable = first_child_of_type(node, "mutable_specifier") is not None
            return ReferenceType(self.lower_type(node.child_by_field_name("type")), mutable)
        if kind == "pointer_type":
            return OtherType(children=(self.lower_type(node.child_by_field_name("type")),), text=text)
        if kind == "array_type":
            element = self.lower_type(node.child_by_field_name("element"))
            if node.child_by_field_name("length") is None:
                return SliceType(element)
            return OtherType(children=(element,), text=text)
        if kind == "tuple_type":
            return TupleType(tuple(self._lower_children(node)))
        if kind == "unit_type":
            return TupleType(())
        if kind == "never_type":
            return NeverType()
        if kind == "function_type":
            if node.child_by_field_name("trait") is not None:
                bound = self.lower_bound(node)
                return OtherType(bounds=(bound,) if bound else (), text=text)
            return OtherType(children=tuple(self._function_types(node)), text=text)
        if kind in ("dynamic_type", "abstract_type", "bounded_type"):
            return OtherType(bounds=tuple(self._object_bounds(node)), text=text)
        return OtherType(children=tuple(self._lower_children(node)), text=text)

    def lower_parameters(self, parameters: Optional[Node]) -> List[TypeNode]:
        """Lower the declared types of a function's parameter list."""
        types: List[TypeNode] = []
        if parameters is None:
            return types
        for child in named_children(parameters):
            if child.type == "parameter":
                types.append(self.lower_type(child.child_by_field_name("type")))
            elif child.type in _TYPE_NODES:
                types.append(self.lower_type(child))
        return types

    def lower_arguments(self, type_arguments: Optional[Node]) -> List[TypeNode]:
        """Lower generic arguments, including associated type bindings."""
        arguments: List[TypeNode] = []
        if type_arguments is None:
            return arguments
        for child in named_children(type_arguments):
            if child.type == "type_binding":
                arguments.extend(self.lower_arguments(child.child_by_field_name("type_arguments")))
                arguments.append(self.lower_type(child.child_by_field_name("type")))
            elif child.type == "trait_bounds":
                arguments.append(OtherType(bounds=tuple(self.lower_trait_bounds(child))))
            elif child.type in _TYPE_NODES:
                arguments.append(self.lower_type(child))
        return arguments

    def lower_trait_bounds(self, bounds: Optional[Node]) -> List[TraitRef]:
        refs: List[TraitRef] = []
        if bounds is None:
            return refs
        for child in named_children(bounds):
            trait_ref = self.lower_bound(child)
            if trait_ref is not None:
                refs.append(trait_ref)
        return refs

    def lower_bound(self, node: Optional[Node]) -> Optional[TraitRef]:
        """Lower a single bound; lifetimes and unsupported forms yield None."""
        if node is None:
            return None
        kind = node.type
        text = node_text(node, self.source_bytes)
        if kind == "removed_trait_bound":
            return self.lower_bound(next(named_children(node), None))
        if kind == "higher_ranked_trait_bound":
            return self.lower_bound(node.child_by_field_name("type"))
        if kind == "function_type":
            trait = node.child_by_field_name("trait")
            if trait is None:
                return None
            resolution, arguments = self._resolve_path(trait)
            return TraitRef(
                resolution=resolution,
                arguments=arguments + tuple(self._function_types(node)),
                text=text,
            )
        if kind in _PATH_NODES:
            resolution, arguments = self._resolve_path(node)
            return TraitRef(resolution=resolution, arguments=arguments, text=text)
        return None

    def lower_generics(
        self, type_parameters: Optional[Node], where_clause: Optional[Node]
    ) -> Tuple[List[TraitRef], List[TypeNode]]:
        """Return the bounds and the generic-only types of a function's generics."""
        bounds: List[TraitRef] = []
        generic_types: List[TypeNode] = []

        if type_parameters is not None:
            for child in named_children(type_parameters):
                kind = child.type
                if kind in ("type_parameter", "constrained_type_parameter"):
                    bounds.extend(self.lower_trait_bounds(child.child_by_field_name("bounds")))
                if kind in ("type_parameter", "optional_type_parameter"):
                    default = child.child_by_field_name("default_type")
                    if default is not None:
                        generic_types.append(self.lower_type(default))
                elif kind == "const_parameter":
                    generic_types.append(self.lower_type(child.child_by_field_name("type")))

        if where_clause is not None:
            for predicate in named_children(where_clause):
                if predicate.type != "where_predicate":
                    continue
                left = predicate.child_by_field_name("left")
                if left is not None and left.type == "higher_ranked_trait_bound":
                    left = left.child_by_field_name("type")
                if left is not None and left.type in _TYPE_NODES:
                    generic_types.append(self.lower_type(left))
                bounds.extend(self.lower_trait_bounds(predicate.child_by_field_name("bounds")))

        return bounds, generic_types

    # ------------------------------------------------------------------
    # Internal helpers

    def _lower_children(self, node: Node) -> List[TypeNode]:
        return [self.lower_type(child) for child in named_children(node) if child.type in _TYPE_NODES]

    def _function_types(self, node: Node) -> List[TypeNode]:
        types = self.lower_parameters(node.child_by_field_name("parameters"))
        return_type = node.child_by_field_name("return_type")
        if return_type is not None:
            types.append(self.lower_type(return_type))
        return types

    def _object_bounds(self, node: Node) -> List[TraitRef]:
        """Flatten ``dyn A + B`` and ``impl A + 'a`` into their trait refs."""
        kind = node.type
        if kind in ("dynamic_type", "abstract_type"):
            trait = node.child_by_field_name("trait")
            if trait is not None and trait.type == "bounded_type":
                return self._object_bounds(trait)
            bound = self.lower_bound(trait)
            return [bound] if bound is not None else []
        if kind == "bounded_type":
            refs: List[TraitRef] = []
            for child in named_children(node):
                refs.extend(self._object_bounds(child))
            return refs
        bound = self.lower_bound(node)
        return [bound] if bound is not None else []

    def _resolve_path(self, node: Node) -> Tuple[Resolution, Tuple[TypeNode, ...]]:
        arguments: List[TypeNode] = []
        if node.type in _GENERIC_NODES:
            arguments.extend(self.lower_arguments(node.child_by_field_name("type_arguments")))
            base = node.child_by_field_name("type")
            if base is None:
                return Resolution.error(), tuple(arguments)
            node = base

        if node.type in _SCOPED_NODES:
            prefix = node.child_by_field_name("path")
            qualified = self._qualified_type(prefix)
            if qualified is not None:
                self_type = qualified.child_by_field_name("type")
                arguments.append(self.lower_type(self_type))
                trait_path = self._collect_path(qualified.child_by_field_name("alias"), arguments)
                name = node_text(node.child_by_field_name("name"), self.source_bytes)
                if trait_path is None or not name:
                    return Resolution.error(), tuple(arguments)
                resolution = self.resolver.resolve_associated(
                    trait_path, name, self.scope, self.generics
                )
                return resolution, tuple(arguments)

        path = self._collect_path(node, arguments)
        if path is None:
            return Resolution.error(), tuple(arguments)
        return self.resolver.resolve(path, self.scope, self.generics), tuple(arguments)

    def _collect_path(self, node: Optional[Node], arguments: List[TypeNode]) -> Optional[RustPath]:
        """Return the written path of ``node``; None when it is type-relative."""
        if node is None:
            return None
        kind = node.type
        if kind in _SCOPED_NODES:
            name = node_text(node.child_by_field_name("name"), self.source_bytes)
            prefix = node.child_by_field_name("path")
            if prefix is None:
                return RustPath((name,), is_global=True)
            if prefix.type in _GENERIC_NODES or prefix.type == "bracketed_type":
                arguments.extend(self._lower_children(prefix))
                arguments.extend(self.lower_arguments(prefix.child_by_field_name("type_arguments")))
                return None
            base = self._collect_path(prefix, arguments)
            return base.join(name) if base is not None else None
        if kind in _GENERIC_NODES:
            arguments.extend(self.lower_arguments(node.child_by_field_name("type_arguments")))
            return self._collect_path(node.child_by_field_name("type"), arguments)
        if kind in _SEGMENT_NODES:
            return RustPath((node_text(node, self.source_bytes),))
        return None

    @staticmethod
    def _qualified_type(prefix: Optional[Node]) -> Optional[Node]:
        if prefix is None or prefix.type != "bracketed_type":
            return None
        return first_child_of_type(prefix, "qualified_type")


__all__ = ["TypeLowering", "generic_parameter_names"]
