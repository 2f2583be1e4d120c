from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ... import constants as cs
from ... import logs as ls
from ...models import CompilationUnit, ImportInfo, TypeInfo
from ...types_defs import ASTNode, PendingNode
from ..utils import find_child, node_type_is, safe_decode_text

if TYPE_CHECKING:
    from tree_sitter import Tree

_is_name_node = node_type_is(*cs.JAVA_NAME_NODE_TYPES)


def extract_package_name(package_node: ASTNode) -> str | None:
    if package_node.type != cs.TS_PACKAGE_DECLARATION:
        return None
    return safe_decode_text(find_child(package_node, _is_name_node))


def extract_import_info(import_node: ASTNode) -> ImportInfo | None:
    if import_node.type != cs.TS_IMPORT_DECLARATION:
        return None

    imported_name = safe_decode_text(find_child(import_node, _is_name_node))
    if not imported_name:
        return None

    is_module = is_static = on_demand = False
    for child in import_node.children:
        match child.type:
            case cs.TS_MODULE:
                is_module = True
            case cs.TS_STATIC:
                is_static = True
            case cs.TS_ASTERISK:
                on_demand = True

    if is_module:
        kind = cs.ImportKind.MODULE
    elif is_static:
        kind = cs.ImportKind.STATIC
    elif on_demand:
        kind = cs.ImportKind.WILDCARD
    else:
        kind = cs.ImportKind.TYPE

    return ImportInfo(
        kind=kind, imported_name=imported_name, node=import_node, on_demand=on_demand
    )


def extract_type_parameters(declaration_node: ASTNode) -> tuple[str, ...]:
    type_params_node = find_child(
        declaration_node, node_type_is(cs.TS_TYPE_PARAMETERS)
    )
    if not type_params_node:
        return ()

    type_parameters: list[str] = []
    for child in type_params_node.children:
        if child.type != cs.TS_TYPE_PARAMETER:
            continue
        definition = find_child(
            child, node_type_is(cs.TS_TYPE_IDENTIFIER, cs.TS_IDENTIFIER)
        )
        if param_name := safe_decode_text(definition):
            type_parameters.append(param_name)
    return tuple(type_parameters)


def extract_declaration_name(declaration_node: ASTNode) -> str | None:
    name_node = declaration_node.child_by_field_name(cs.TS_FIELD_NAME)
    if name_node is None:
        name_node = find_child(declaration_node, _is_name_node)
    return safe_decode_text(name_node) or None


def find_declaration_body(declaration_node: ASTNode) -> ASTNode | None:
    body = declaration_node.child_by_field_name(cs.TS_FIELD_BODY)
    if body is not None:
        return body
    return find_child(declaration_node, node_type_is(*cs.JAVA_TYPE_BODY_NODE_TYPES))


def qualify(prefix: str, name: str) -> str:
    return f"{prefix}{cs.SEPARATOR_DOT}{name}" if prefix else name


class CompilationUnitBuilder:
    """Accumulates package, imports and type declarations over one tree walk.

    The walk is pre-order and carries the qualification prefix of the
    innermost enclosing type declaration. Declarations found anywhere,
    including method bodies and anonymous class bodies, are recorded.
    """

    def __init__(self) -> None:
        self.package_name: str | None = None
        self.imports: list[ImportInfo] = []
        self.types: list[TypeInfo] = []

    def visit(self, node: ASTNode, qualified_prefix: str = "") -> None:
        stack = [PendingNode(node, qualified_prefix)]
        while stack:
            current, prefix = stack.pop()
            stack.extend(reversed(self._process(current, prefix)))

    def _process(self, node: ASTNode, prefix: str) -> list[PendingNode]:
        match node.type:
            case cs.TS_PACKAGE_DECLARATION:
                if package_name := extract_package_name(node):
                    logger.debug(ls.PACKAGE_FOUND.format(name=package_name))
                    self.package_name = package_name
                return []
            case cs.TS_IMPORT_DECLARATION:
                if import_info := extract_import_info(node):
                    logger.debug(
                        ls.IMPORT_FOUND.format(
                            kind=import_info.kind, name=import_info.imported_name
                        )
                    )
                    self.imports.append(import_info)
                else:
                    logger.debug(ls.IMPORT_SKIPPED.format(start=node.start_byte))
                return []
            case _ if node.type in cs.JAVA_TYPE_DECLARATION_KINDS:
                if (pending := self._process_declaration(node, prefix)) is not None:
                    return pending
                logger.debug(
                    ls.TYPE_WITHOUT_NAME.format(
                        node_type=node.type, start=node.start_byte
                    )
                )
            case _:
                pass

        return [PendingNode(child, prefix) for child in node.children]

    def _process_declaration(
        self, node: ASTNode, prefix: str
    ) -> list[PendingNode] | None:
        name = extract_declaration_name(node)
        if name is None:
            return None

        type_info = TypeInfo(
            kind=cs.JAVA_TYPE_DECLARATION_KINDS[node.type],
            name=name,
            qualified_name=qualify(prefix, name),
            node=node,
            type_parameters=extract_type_parameters(node),
        )
        logger.debug(
            ls.TYPE_FOUND.format(
                kind=type_info.kind,
                name=type_info.name,
                qualified_name=type_info.qualified_name,
            )
        )
        self.types.append(type_info)

        body = find_declaration_body(node)
        if body is None:
            return []
        return [PendingNode(child, type_info.qualified_name) for child in body.children]

    def build(self, tree: Tree, source: str) -> CompilationUnit:
        unit = CompilationUnit(
            tree=tree,
            source=source,
            package_name=self.package_name,
            imports=tuple(self.imports),
            types=tuple(self.types),
        )
        logger.debug(
            ls.UNIT_BUILT.format(
                package=unit.package_name,
                imports=len(unit.imports),
                types=len(unit.types),
            )
        )
        return unit


def parse_unit(tree: Tree, source: str) -> CompilationUnit:
    builder = CompilationUnitBuilder()
    builder.visit(tree.root_node)
    return builder.build(tree, source)
