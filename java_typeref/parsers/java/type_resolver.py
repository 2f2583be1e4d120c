from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ... import constants as cs
from ... import logs as ls
from ...models import (
    CompilationUnit,
    ExternalTypeReference,
    ImportInfo,
    ResolvedType,
    TypeInfo,
    TypeReference,
)
from ...types_defs import ASTNode
from .type_names import collect_type_references, extract_type_reference


def _first_segment(name: str) -> str:
    return name.split(cs.SEPARATOR_DOT, 1)[0]


def _last_segment(name: str) -> str:
    return name.rsplit(cs.SEPARATOR_DOT, 1)[-1]


def _package_qualified(package_name: str | None, qualified_name: str) -> str:
    if package_name:
        return f"{package_name}{cs.SEPARATOR_DOT}{qualified_name}"
    return qualified_name


def _find_declared(name: str, unit: CompilationUnit) -> TypeInfo | None:
    return next(
        (
            type_info
            for type_info in unit.types
            if name in (type_info.name, type_info.qualified_name)
        ),
        None,
    )


def _find_explicit_import(segment: str, unit: CompilationUnit) -> ImportInfo | None:
    for import_info in unit.imports:
        if import_info.on_demand:
            continue
        if import_info.kind not in (cs.ImportKind.TYPE, cs.ImportKind.STATIC):
            continue
        if _last_segment(import_info.imported_name) == segment:
            return import_info
    return None


def _find_external(
    segment: str,
    package_name: str | None,
    external_refs: Sequence[ExternalTypeReference],
) -> ExternalTypeReference | None:
    # (H) None and "" both denote the default package
    wanted = package_name or ""
    return next(
        (
            external
            for external in external_refs
            if external.name == segment and (external.package_name or "") == wanted
        ),
        None,
    )


def _find_wildcard_import(
    segment: str,
    unit: CompilationUnit,
    external_refs: Sequence[ExternalTypeReference],
) -> ExternalTypeReference | None:
    for import_info in unit.imports:
        if not import_info.on_demand:
            continue
        if match := _find_external(segment, import_info.imported_name, external_refs):
            return match
    return None


def resolve_type_reference(
    ref: TypeReference,
    unit: CompilationUnit,
    external_refs: Sequence[ExternalTypeReference] = (),
) -> ResolvedType:
    """
    Classifies a type reference against one compilation unit.

    Lookup order is builtin, declared in this file, explicit import,
    wildcard import, then same package. Only the first dotted segment of
    the name takes part in the builtin and import lookups; declarations
    are matched on the full name.
    """
    resolved = _resolve(ref, unit, external_refs)
    logger.debug(
        ls.REFERENCE_RESOLVED.format(
            name=resolved.name,
            kind=resolved.kind,
            qualified_name=resolved.qualified_name,
        )
    )
    return resolved


def _resolve(
    ref: TypeReference,
    unit: CompilationUnit,
    external_refs: Sequence[ExternalTypeReference],
) -> ResolvedType:
    segment = _first_segment(ref.name)

    if segment in cs.JAVA_BUILTIN_TYPES:
        return ResolvedType(kind=cs.ResolutionKind.BUILTIN, name=ref.name, ref=ref)

    if declared := _find_declared(ref.name, unit):
        return ResolvedType(
            kind=cs.ResolutionKind.DECLARED,
            name=ref.name,
            ref=ref,
            qualified_name=_package_qualified(
                unit.package_name, declared.qualified_name
            ),
            declaration=declared.node,
        )

    if import_info := _find_explicit_import(segment, unit):
        return ResolvedType(
            kind=cs.ResolutionKind.IMPORTED,
            name=ref.name,
            ref=ref,
            qualified_name=import_info.imported_name,
        )

    external = _find_wildcard_import(segment, unit, external_refs) or _find_external(
        segment, unit.package_name, external_refs
    )
    if external is not None:
        return ResolvedType(
            kind=cs.ResolutionKind.IMPORTED,
            name=ref.name,
            ref=ref,
            qualified_name=external.qualified_name,
        )

    return ResolvedType(kind=cs.ResolutionKind.UNRESOLVED, name=ref.name, ref=ref)


class TypeReferenceResolver:
    def __init__(
        self,
        unit: CompilationUnit,
        external_refs: Sequence[ExternalTypeReference] = (),
    ) -> None:
        self.unit = unit
        self.external_refs = tuple(external_refs)

    def _node_at(self, offset: int, side: cs.Side) -> ASTNode | None:
        source = self.unit.source
        if offset < 0 or offset > len(source):
            logger.debug(
                ls.OFFSET_OUT_OF_RANGE.format(offset=offset, length=len(source))
            )
            return None

        if side == cs.Side.BEFORE and offset > 0:
            offset -= 1
        # (H) tree-sitter positions are UTF-8 byte offsets
        byte_offset = len(source[:offset].encode(cs.ENCODING_UTF8))
        return self.unit.tree.root_node.named_descendant_for_byte_range(
            byte_offset, byte_offset
        )

    def resolve_reference_at(
        self, offset: int, side: cs.Side = cs.Side.EXACT
    ) -> TypeReference | None:
        node = self._node_at(offset, side)
        if node is None:
            return None
        ref = extract_type_reference(node)
        if ref is None:
            logger.debug(ls.NO_TYPE_AT_OFFSET.format(offset=offset, node_type=node.type))
        return ref

    def resolve(self, ref: TypeReference) -> ResolvedType:
        return resolve_type_reference(ref, self.unit, self.external_refs)

    def resolve_at(
        self, offset: int, side: cs.Side = cs.Side.EXACT
    ) -> ResolvedType | None:
        ref = self.resolve_reference_at(offset, side)
        if ref is None:
            return None
        return self.resolve(ref)

    def collect_all_references(self) -> list[TypeReference]:
        return collect_type_references(self.unit.tree.root_node)

    def resolve_all(self) -> list[ResolvedType]:
        return [self.resolve(ref) for ref in self.collect_all_references()]


def create_type_reference_resolver(
    unit: CompilationUnit,
    external_refs: Sequence[ExternalTypeReference] = (),
) -> TypeReferenceResolver:
    return TypeReferenceResolver(unit, external_refs)
