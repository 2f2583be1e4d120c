from .type_names import collect_type_references, extract_type_reference
from .type_resolver import (
    TypeReferenceResolver,
    create_type_reference_resolver,
    resolve_type_reference,
)
from .unit import CompilationUnitBuilder, parse_unit

__all__ = [
    "CompilationUnitBuilder",
    "TypeReferenceResolver",
    "collect_type_references",
    "create_type_reference_resolver",
    "extract_type_reference",
    "parse_unit",
    "resolve_type_reference",
]
