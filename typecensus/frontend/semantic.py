"""Semantic resolution front end producing resolved function signatures."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from tree_sitter import Node

from ..errors import UnitParseError
from ..logging import get_logger
from ..models import FunctionSignature, ResolvedDefinition, ResolvedUnit
from .library_index import LibraryIndex
from .lowering import TypeLowering, generic_parameter_names
from .parser import create_parser, first_child_of_type, first_error_position, node_text, parse_unit
from .resolver import NameResolver
from .scope import ModuleScope, collect_declarations, iter_items

_LOGGER = get_logger("frontend")

_IMPL_CONTAINERS = frozenset({"impl_item", "trait_item"})
_NESTED_ITEMS = _IMPL_CONTAINERS | {"function_item", "mod_item"}


class SemanticResolutionFrontend:
    """Parses one compilation unit and resolves the signatures of its free functions."""

    def __init__(
        self,
        index: Optional[LibraryIndex] = None,
        *,
        crate_name: str = "main",
        strict: bool = True,
    ) -> None:
        self.index = index or LibraryIndex()
        self.crate_name = crate_name
        self.strict = strict
        self.resolver = NameResolver(self.index, crate_name)
        self._parser = create_parser()

    def resolve(self, source: str, name: str = "main.rs") -> ResolvedUnit:
        """Resolve ``source`` and return every free function it defines.

        Raises UnitParseError when the unit has syntax errors and the front
        end is strict. Otherwise erroneous subtrees are skipped and the unit
        is marked partial.
        """
        tree, source_bytes = parse_unit(self._parser, source)
        root = tree.root_node
        partial = False
        if root.has_error:
            position = first_error_position(root)
            if self.strict:
                raise UnitParseError(name, position)
            _LOGGER.debug("Skipping syntax errors in %s", name)
            partial = True

        scope = ModuleScope()
        collect_declarations(root, scope, source_bytes)
        functions: List[FunctionSignature] = []
        self._collect_functions(root, scope, (), source_bytes, functions)
        _LOGGER.debug("Resolved %d functions in %s", len(functions), name)
        return ResolvedUnit(name=name, functions=functions, partial=partial)

    # ------------------------------------------------------------------
    # Internal helpers

    def _collect_functions(
        self,
        container: Node,
        scope: ModuleScope,
        owner: Tuple[str, ...],
        source_bytes: bytes,
        functions: List[FunctionSignature],
    ) -> None:
        for item in iter_items(container, source_bytes):
            kind = item.type
            if kind == "function_item":
                name = node_text(item.child_by_field_name("name"), source_bytes)
                if not name:
                    continue
                functions.append(self._signature(item, name, scope, owner, source_bytes))
                self._walk_body(item, scope, owner + (name,), source_bytes, functions)
            elif kind == "mod_item":
                name = node_text(item.child_by_field_name("name"), source_bytes)
                body = item.child_by_field_name("body")
                if name and body is not None:
                    module = scope.add_module(name)
                    self._collect_functions(body, module, owner + (name,), source_bytes, functions)
            elif kind in _IMPL_CONTAINERS:
                # Methods are not free functions, but items nested in their bodies are.
                body = item.child_by_field_name("body")
                if body is None:
                    continue
                for method in iter_items(body, source_bytes):
                    if method.type == "function_item":
                        method_name = node_text(method.child_by_field_name("name"), source_bytes)
                        self._walk_body(method, scope, owner + (method_name,), source_bytes, functions)

    def _walk_body(
        self,
        function: Node,
        scope: ModuleScope,
        owner: Tuple[str, ...],
        source_bytes: bytes,
        functions: List[FunctionSignature],
    ) -> None:
        body = function.child_by_field_name("body")
        if body is not None:
            self._walk_block(body, scope, owner, source_bytes, functions)

    def _walk_block(
        self,
        node: Node,
        scope: ModuleScope,
        owner: Tuple[str, ...],
        source_bytes: bytes,
        functions: List[FunctionSignature],
    ) -> None:
        if node.type == "block":
            block = scope.block()
            collect_declarations(node, block, source_bytes)
            self._collect_functions(node, block, owner, source_bytes, functions)
            scope = block
        for child in node.named_children:
            if child.type in _NESTED_ITEMS:
                continue
            self._walk_block(child, scope, owner, source_bytes, functions)

    def _signature(
        self,
        item: Node,
        name: str,
        scope: ModuleScope,
        owner: Tuple[str, ...],
        source_bytes: bytes,
    ) -> FunctionSignature:
        type_parameters = item.child_by_field_name("type_parameters")
        generics: Dict[str, ResolvedDefinition] = {
            param: self.resolver.local_definition(owner + (name, param), "type_param")
            for param in generic_parameter_names(type_parameters, source_bytes)
        }
        lowering = TypeLowering(self.resolver, scope, generics, source_bytes)
        where_clause = item.child_by_field_name("where_clause") or first_child_of_type(
            item, "where_clause"
        )
        bounds, generic_types = lowering.lower_generics(type_parameters, where_clause)
        return_node = item.child_by_field_name("return_type")
        return FunctionSignature(
            name=name,
            def_path=owner + (name,),
            parameters=lowering.lower_parameters(item.child_by_field_name("parameters")),
            return_type=lowering.lower_type(return_node) if return_node is not None else None,
            bounds=bounds,
            generic_types=generic_types,
        )


__all__ = ["SemanticResolutionFrontend"]
