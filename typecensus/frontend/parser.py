"""Tree-sitter parser setup and small node helpers for Rust sources."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import tree_sitter_rust
from tree_sitter import Language, Node, Parser, Tree

RUST_LANGUAGE = Language(tree_sitter_rust.language())

COMMENT_NODES = frozenset({"line_comment", "block_comment"})


def create_parser() -> Parser:
    """Return a parser bound to the Rust grammar."""
    return Parser(RUST_LANGUAGE)


def parse_unit(parser: Parser, source: str) -> Tuple[Tree, bytes]:
    source_bytes = source.encode("utf-8")
    return parser.parse(source_bytes), source_bytes


def node_text(node: Optional[Node], source_bytes: bytes) -> str:
    if node is None:
        return ""
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


def named_children(node: Node) -> Iterator[Node]:
    """Yield named children, skipping comments."""
    for child in node.named_children:
        if child.type not in COMMENT_NODES:
            yield child


def first_child_of_type(node: Node, node_type: str) -> Optional[Node]:
    for child in node.children:
        if child.type == node_type:
            return child
    return None


def first_error_position(node: Node) -> Optional[Tuple[int, int]]:
    """Return the (row, column) of the first syntax error below ``node``."""
    if node.type == "ERROR" or node.is_missing:
        return (node.start_point[0], node.start_point[1])
    for child in node.children:
        if child.has_error or child.is_missing:
            position = first_error_position(child)
            if position is not None:
                return position
    return None


__all__ = [
    "COMMENT_NODES",
    "RUST_LANGUAGE",
    "create_parser",
    "first_child_of_type",
    "first_error_position",
    "named_children",
    "node_text",
    "parse_unit",
]
