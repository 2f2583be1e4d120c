from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, NamedTuple, Protocol, Self, TypeAlias

if TYPE_CHECKING:
    from tree_sitter import Node

ASTNode: TypeAlias = "Node"
NodePredicate: TypeAlias = Callable[["ASTNode"], bool]
LanguageLoader: TypeAlias = Callable[[], object]


class TreeSitterNodeProtocol(Protocol):
    @property
    def type(self) -> str: ...
    @property
    def children(self) -> Sequence[Self]: ...
    @property
    def parent(self) -> Self | None: ...
    @property
    def text(self) -> bytes | None: ...
    def child_by_field_name(self, name: str) -> Self | None: ...


class PendingNode(NamedTuple):
    node: ASTNode
    qualified_prefix: str
