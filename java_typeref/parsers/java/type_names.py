from __future__ import annotations

from loguru import logger

from ... import constants as cs
from ... import logs as ls
from ...models import TypeReference
from ...types_defs import ASTNode
from ..utils import safe_decode_text


def _delegation_target(node: ASTNode) -> ASTNode:
    current = node
    while current.type in cs.JAVA_DELEGATING_NODE_TYPES:
        parent = current.parent
        if parent is None or parent.type not in cs.JAVA_TYPE_NAME_BEARING_PARENTS:
            break
        current = parent
    return current


def _own_reference(node: ASTNode) -> TypeReference | None:
    if name := safe_decode_text(node):
        return TypeReference(name=name, node=node)
    return None


def _is_type_naming_identifier(node: ASTNode) -> bool:
    parent = node.parent
    if parent is None:
        return False
    return (
        parent.type in cs.JAVA_DECLARATION_NAME_PARENTS
        or parent.type in cs.JAVA_ANNOTATION_NAME_PARENTS
    )


def _is_type_parameter_name(node: ASTNode) -> bool:
    parent = node.parent
    return parent is not None and parent.type == cs.TS_TYPE_PARAMETER


def _field_access_reference(node: ASTNode) -> TypeReference | None:
    parent = node.parent
    if parent is not None and parent.type == cs.TS_FIELD_ACCESS:
        return None
    if not node.children:
        return None
    first = node.children[0]
    if first.type != cs.TS_IDENTIFIER:
        return None
    return _own_reference(first)


def extract_type_reference(node: ASTNode) -> TypeReference | None:
    """Return the type-name occurrence denoted by ``node``, if any.

    Name parts of a compound name defer to their enclosing name, so a node
    anywhere inside ``java.util.List`` yields the whole scoped name. Plain
    identifiers count only as declaration names or annotation names, and a
    type parameter declaration such as the ``T`` in ``<T>`` is never a reference.
    ``Outer.CONSTANT`` style field accesses yield their leftmost identifier.
    """
    target = _delegation_target(node)
    match target.type:
        case cs.TS_TYPE_IDENTIFIER | cs.TS_SCOPED_TYPE_IDENTIFIER:
            if _is_type_parameter_name(target):
                return None
            return _own_reference(target)
        case _ if target.type in cs.JAVA_PRIMITIVE_TYPE_NODES:
            return _own_reference(target)
        case cs.TS_IDENTIFIER | cs.TS_SCOPED_IDENTIFIER:
            if _is_type_naming_identifier(target):
                return _own_reference(target)
            return None
        case cs.TS_FIELD_ACCESS:
            return _field_access_reference(target)
        case _:
            return None


def collect_type_references(root: ASTNode) -> list[TypeReference]:
    references: list[TypeReference] = []
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if (ref := extract_type_reference(node)) is not None:
            # (H) An occurrence is a leaf: its inner name parts are not reported
            if ref.node.id not in seen:
                seen.add(ref.node.id)
                references.append(ref)
            continue
        stack.extend(reversed(node.children))

    logger.debug(ls.REFERENCES_COLLECTED.format(count=len(references)))
    return references
