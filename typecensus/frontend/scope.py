"""Module and block scopes built from item declarations and use trees."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from tree_sitter import Node

from .parser import COMMENT_NODES, first_child_of_type, named_children, node_text

_CFG_TEST = re.compile(r"^#\[\s*cfg\s*\(\s*test\s*\)\s*\]$")

_TYPE_ITEMS = {
    "struct_item": "struct",
    "enum_item": "enum",
    "union_item": "union",
    "type_item": "alias",
    "trait_item": "trait",
}

_PATH_KEYWORDS = frozenset({"crate", "self", "super"})


@dataclass(frozen=True)
class RustPath:
    """A path as written: its segments and whether it starts with ``::``."""

    segments: Tuple[str, ...]
    is_global: bool = False

    def join(self, name: str) -> "RustPath":
        return RustPath(self.segments + (name,), self.is_global)

    def __str__(self) -> str:
        prefix = "::" if self.is_global else ""
        return prefix + "::".join(self.segments)


@dataclass(eq=False)
class ModuleScope:
    """Names visible in a module, or in a block nested inside a function body."""

    path: Tuple[str, ...] = ()
    parent: Optional["ModuleScope"] = None
    lexical_parent: Optional["ModuleScope"] = None
    is_block: bool = False
    items: Dict[str, str] = field(default_factory=dict)
    modules: Dict[str, "ModuleScope"] = field(default_factory=dict)
    imports: Dict[str, RustPath] = field(default_factory=dict)
    globs: List[RustPath] = field(default_factory=list)
    extern_crates: Dict[str, str] = field(default_factory=dict)

    def define(self, name: str, kind: str) -> None:
        if name:
            self.items[name] = kind

    def add_module(self, name: str) -> "ModuleScope":
        module = self.modules.get(name)
        if module is None:
            module = ModuleScope(path=self.module().path + (name,), parent=self.module())
            self.modules[name] = module
        return module

    def block(self) -> "ModuleScope":
        return ModuleScope(
            path=self.path,
            parent=self.module(),
            lexical_parent=self,
            is_block=True,
        )

    def module(self) -> "ModuleScope":
        """Return the nearest enclosing module scope."""
        scope = self
        while scope.is_block and scope.parent is not None:
            scope = scope.parent
        return scope

    def root(self) -> "ModuleScope":
        scope = self.module()
        while scope.parent is not None:
            scope = scope.parent
        return scope


def iter_items(container: Node, source_bytes: bytes) -> Iterator[Node]:
    """Yield the declarations of ``container``, dropping ``#[cfg(test)]`` items."""
    strip_next = False
    for child in container.named_children:
        if child.type in COMMENT_NODES:
            continue
        if child.type == "attribute_item":
            if _CFG_TEST.match("".join(node_text(child, source_bytes).split())):
                strip_next = True
            continue
        if strip_next:
            strip_next = False
            continue
        yield child


def collect_declarations(container: Node, scope: ModuleScope, source_bytes: bytes) -> None:
    """Record the items, imports and submodules declared directly in ``container``."""
    for item in iter_items(container, source_bytes):
        kind = item.type
        if kind in _TYPE_ITEMS:
            scope.define(node_text(item.child_by_field_name("name"), source_bytes), _TYPE_ITEMS[kind])
        elif kind == "mod_item":
            name = node_text(item.child_by_field_name("name"), source_bytes)
            if not name:
                continue
            module = scope.add_module(name)
            body = item.child_by_field_name("body")
            if body is not None:
                collect_declarations(body, module, source_bytes)
        elif kind == "foreign_mod_item":
            body = item.child_by_field_name("body") or first_child_of_type(item, "declaration_list")
            if body is None:
                continue
            for foreign in iter_items(body, source_bytes):
                if foreign.type == "type_item":
                    scope.define(
                        node_text(foreign.child_by_field_name("name"), source_bytes),
                        "foreign_type",
                    )
        elif kind == "use_declaration":
            argument = item.child_by_field_name("argument")
            if argument is not None:
                _collect_use(argument, RustPath(()), scope, source_bytes)
        elif kind == "extern_crate_declaration":
            name = node_text(item.child_by_field_name("name"), source_bytes)
            alias = node_text(item.child_by_field_name("alias"), source_bytes) or name
            if name and alias != "_":
                scope.extern_crates[alias] = name


def use_path(node: Node, source_bytes: bytes) -> RustPath:
    """Convert a ``use`` path or expression path node into a RustPath."""
    kind = node.type
    if kind in ("scoped_identifier", "scoped_type_identifier"):
        prefix = node.child_by_field_name("path")
        name = node_text(node.child_by_field_name("name"), source_bytes)
        if prefix is None:
            return RustPath((name,), is_global=True)
        return use_path(prefix, source_bytes).join(name)
    return RustPath((node_text(node, source_bytes),))


def _collect_use(node: Node, prefix: RustPath, scope: ModuleScope, source_bytes: bytes) -> None:
    kind = node.type
    if kind == "use_list":
        for child in named_children(node):
            _collect_use(child, prefix, scope, source_bytes)
    elif kind == "scoped_use_list":
        path_node = node.child_by_field_name("path")
        list_node = node.child_by_field_name("list")
        if path_node is None:
            nested = RustPath(prefix.segments, True)
        else:
            nested = _extend(prefix, use_path(path_node, source_bytes))
        if list_node is not None:
            _collect_use(list_node, nested, scope, source_bytes)
    elif kind == "use_wildcard":
        path_node = next(named_children(node), None)
        if path_node is None:
            scope.globs.append(prefix)
        else:
            scope.globs.append(_extend(prefix, use_path(path_node, source_bytes)))
    elif kind == "use_as_clause":
        path_node = node.child_by_field_name("path")
        alias = node_text(node.child_by_field_name("alias"), source_bytes)
        if path_node is not None and alias and alias != "_":
            scope.imports[alias] = _extend(prefix, use_path(path_node, source_bytes))
    else:
        path = _extend(prefix, use_path(node, source_bytes))
        segments = path.segments
        # `use a::b::{self}` and `use a::b::self` bind `b`.
        if len(segments) >= 2 and segments[-1] == "self":
            path = RustPath(segments[:-1], path.is_global)
        name = path.segments[-1] if path.segments else ""
        if name and name not in _PATH_KEYWORDS:
            scope.imports[name] = path


def _extend(prefix: RustPath, path: RustPath) -> RustPath:
    return RustPath(prefix.segments + path.segments, prefix.is_global or path.is_global)


__all__ = [
    "ModuleScope",
    "RustPath",
    "collect_declarations",
    "iter_items",
    "use_path",
]
