from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
from loguru import logger
from tree_sitter import Parser

from java_typeref.models import CompilationUnit
from java_typeref.parser_loader import load_java_parser
from java_typeref.parsers.java import (
    TypeReferenceResolver,
    create_type_reference_resolver,
    parse_unit,
)


@dataclass(eq=False)
class MockNode:
    node_type: str
    node_children: list[MockNode] = field(default_factory=list)
    node_parent: MockNode | None = None
    node_fields: dict[str, MockNode | None] = field(default_factory=dict)
    node_text: bytes = b""
    start_byte: int = 0

    @property
    def type(self) -> str:
        return self.node_type

    @property
    def children(self) -> list[MockNode]:
        return self.node_children

    @property
    def parent(self) -> MockNode | None:
        return self.node_parent

    @parent.setter
    def parent(self, value: MockNode | None) -> None:
        self.node_parent = value

    @property
    def text(self) -> bytes:
        return self.node_text

    @property
    def id(self) -> int:
        return id(self)

    def child_by_field_name(self, name: str) -> MockNode | None:
        return self.node_fields.get(name)


def create_mock_node(
    node_type: str,
    text: str = "",
    fields: dict[str, MockNode | None] | None = None,
    children: list[MockNode] | None = None,
    parent: MockNode | None = None,
) -> MockNode:
    node = MockNode(
        node_type=node_type,
        node_children=children or [],
        node_parent=parent,
        node_fields=fields or {},
        node_text=text.encode(),
    )
    for child in node.node_children:
        child.node_parent = node
    return node


logger.remove()


@pytest.fixture(scope="session")
def java_parser() -> Parser:
    return load_java_parser()


@pytest.fixture
def build_unit(java_parser: Parser) -> Callable[[str], CompilationUnit]:
    """Parses Java source text and summarizes it into a compilation unit."""

    def _build(source: str) -> CompilationUnit:
        tree = java_parser.parse(source.encode("utf-8"))
        return parse_unit(tree, source)

    return _build


@pytest.fixture
def build_resolver(
    build_unit: Callable[[str], CompilationUnit],
) -> Callable[..., TypeReferenceResolver]:
    """Builds a resolver over freshly parsed Java source text."""

    def _build(source: str, external_refs=()) -> TypeReferenceResolver:
        return create_type_reference_resolver(build_unit(source), external_refs)

    return _build
