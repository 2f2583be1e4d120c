from __future__ import annotations

from functools import lru_cache

from ..constants import ENCODING_UTF8
from ..types_defs import ASTNode, NodePredicate, TreeSitterNodeProtocol


@lru_cache(maxsize=10000)
def _cached_decode_bytes(text_bytes: bytes) -> str:
    return text_bytes.decode(ENCODING_UTF8)


def safe_decode_text(node: ASTNode | TreeSitterNodeProtocol | None) -> str | None:
    if node is None or node.text is None:
        return None
    text_bytes = node.text
    if isinstance(text_bytes, bytes):
        return _cached_decode_bytes(text_bytes)
    return str(text_bytes)


def get_children(node: ASTNode) -> list[ASTNode]:
    return list(node.children)


def find_child(node: ASTNode, predicate: NodePredicate) -> ASTNode | None:
    return next((child for child in node.children if predicate(child)), None)


def find_children(node: ASTNode, predicate: NodePredicate) -> list[ASTNode]:
    return [child for child in node.children if predicate(child)]


def find_descendant(node: ASTNode, predicate: NodePredicate) -> ASTNode | None:
    stack = [node]
    while stack:
        current = stack.pop()
        if predicate(current):
            return current
        stack.extend(reversed(current.children))
    return None


def find_descendants(node: ASTNode, predicate: NodePredicate) -> list[ASTNode]:
    found: list[ASTNode] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if predicate(current):
            found.append(current)
        stack.extend(reversed(current.children))
    return found


def node_type_is(*node_types: str) -> NodePredicate:
    def predicate(node: ASTNode) -> bool:
        return node.type in node_types

    return predicate
