from .utils import (
    find_child,
    find_children,
    find_descendant,
    find_descendants,
    get_children,
    node_type_is,
    safe_decode_text,
)

__all__ = [
    "find_child",
    "find_children",
    "find_descendant",
    "find_descendants",
    "get_children",
    "node_type_is",
    "safe_decode_text",
]
