from .constants import ImportKind, ResolutionKind, Side, TypeKind
from .models import (
    CompilationUnit,
    ExternalTypeReference,
    ImportInfo,
    ResolvedType,
    TypeInfo,
    TypeReference,
)
from .parsers.java import (
    CompilationUnitBuilder,
    TypeReferenceResolver,
    collect_type_references,
    create_type_reference_resolver,
    extract_type_reference,
    parse_unit,
    resolve_type_reference,
)

__all__ = [
    "CompilationUnit",
    "CompilationUnitBuilder",
    "ExternalTypeReference",
    "ImportInfo",
    "ImportKind",
    "ResolutionKind",
    "ResolvedType",
    "Side",
    "TypeInfo",
    "TypeKind",
    "TypeReference",
    "TypeReferenceResolver",
    "collect_type_references",
    "create_type_reference_resolver",
    "extract_type_reference",
    "parse_unit",
    "resolve_type_reference",
]
