from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import ImportKind, ResolutionKind, TypeKind

if TYPE_CHECKING:
    from tree_sitter import Tree

    from .types_defs import ASTNode


@dataclass(frozen=True)
class ImportInfo:
    kind: ImportKind
    imported_name: str
    node: ASTNode
    on_demand: bool = False


@dataclass(frozen=True)
class TypeInfo:
    kind: TypeKind
    name: str
    qualified_name: str
    node: ASTNode
    type_parameters: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompilationUnit:
    """Package, imports and type declarations of one parsed Java file.

    The tree and the source text are borrowed from the caller and must
    outlive the unit.
    """

    tree: Tree
    source: str
    package_name: str | None = None
    imports: tuple[ImportInfo, ...] = ()
    types: tuple[TypeInfo, ...] = ()


@dataclass(frozen=True)
class TypeReference:
    name: str
    node: ASTNode


@dataclass(frozen=True)
class ExternalTypeReference:
    name: str
    qualified_name: str
    package_name: str | None = None


@dataclass(frozen=True)
class ResolvedType:
    kind: ResolutionKind
    name: str
    ref: TypeReference = field(compare=False)
    qualified_name: str | None = None
    declaration: ASTNode | None = field(default=None, compare=False)
