from enum import IntEnum, StrEnum


class ImportKind(StrEnum):
    TYPE = "type"
    WILDCARD = "wildcard"
    STATIC = "static"
    MODULE = "module"


class TypeKind(StrEnum):
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "annotation"
    MODULE = "module"
    RECORD = "record"


class ResolutionKind(StrEnum):
    DECLARED = "declared"
    IMPORTED = "imported"
    BUILTIN = "builtin"
    UNRESOLVED = "unresolved"


class Side(IntEnum):
    BEFORE = -1
    EXACT = 0
    AFTER = 1


# (H) Encoding
ENCODING_UTF8 = "utf-8"

# (H) Qualified name separators
SEPARATOR_DOT = "."

# (H) Grammar binding defaults
JAVA_LANGUAGE = "java"
JAVA_GRAMMAR_MODULE = "tree_sitter_java"
JAVA_GRAMMAR_ATTR = "language"

# (H) Tree-sitter Java node types
TS_PACKAGE_DECLARATION = "package_declaration"
TS_IMPORT_DECLARATION = "import_declaration"
TS_STATIC = "static"
TS_ASTERISK = "asterisk"
TS_MODULE = "module"
TS_IDENTIFIER = "identifier"
TS_SCOPED_IDENTIFIER = "scoped_identifier"
TS_TYPE_IDENTIFIER = "type_identifier"
TS_SCOPED_TYPE_IDENTIFIER = "scoped_type_identifier"
TS_INTEGRAL_TYPE = "integral_type"
TS_FLOATING_POINT_TYPE = "floating_point_type"
TS_BOOLEAN_TYPE = "boolean_type"
TS_VOID_TYPE = "void_type"
TS_FIELD_ACCESS = "field_access"
TS_MARKER_ANNOTATION = "marker_annotation"
TS_ANNOTATION = "annotation"
TS_CLASS_DECLARATION = "class_declaration"
TS_INTERFACE_DECLARATION = "interface_declaration"
TS_ENUM_DECLARATION = "enum_declaration"
TS_ANNOTATION_TYPE_DECLARATION = "annotation_type_declaration"
TS_RECORD_DECLARATION = "record_declaration"
TS_MODULE_DECLARATION = "module_declaration"
TS_CONSTRUCTOR_DECLARATION = "constructor_declaration"
TS_COMPACT_CONSTRUCTOR_DECLARATION = "compact_constructor_declaration"
TS_LOCAL_VARIABLE_DECLARATION = "local_variable_declaration"
TS_CLASS_BODY = "class_body"
TS_INTERFACE_BODY = "interface_body"
TS_ENUM_BODY = "enum_body"
TS_ANNOTATION_TYPE_BODY = "annotation_type_body"
TS_MODULE_BODY = "module_body"
TS_TYPE_PARAMETERS = "type_parameters"
TS_TYPE_PARAMETER = "type_parameter"

# (H) Tree-sitter field names
TS_FIELD_NAME = "name"
TS_FIELD_BODY = "body"

JAVA_TYPE_DECLARATION_KINDS: dict[str, TypeKind] = {
    TS_CLASS_DECLARATION: TypeKind.CLASS,
    TS_INTERFACE_DECLARATION: TypeKind.INTERFACE,
    TS_ENUM_DECLARATION: TypeKind.ENUM,
    TS_ANNOTATION_TYPE_DECLARATION: TypeKind.ANNOTATION,
    TS_MODULE_DECLARATION: TypeKind.MODULE,
    TS_RECORD_DECLARATION: TypeKind.RECORD,
}

JAVA_TYPE_BODY_NODE_TYPES = frozenset(
    {
        TS_CLASS_BODY,
        TS_INTERFACE_BODY,
        TS_ENUM_BODY,
        TS_ANNOTATION_TYPE_BODY,
        TS_MODULE_BODY,
    }
)

JAVA_NAME_NODE_TYPES = frozenset({TS_IDENTIFIER, TS_SCOPED_IDENTIFIER})

JAVA_PRIMITIVE_TYPE_NODES = frozenset(
    {TS_INTEGRAL_TYPE, TS_FLOATING_POINT_TYPE, TS_BOOLEAN_TYPE, TS_VOID_TYPE}
)

JAVA_TYPE_NAME_NODES = frozenset({TS_TYPE_IDENTIFIER, TS_SCOPED_TYPE_IDENTIFIER})

# (H) Node kinds that may hand the type-name decision to their parent
JAVA_DELEGATING_NODE_TYPES = JAVA_TYPE_NAME_NODES | JAVA_NAME_NODE_TYPES

# (H) Versioned allow-list: revisit when the grammar gains new type-bearing forms
JAVA_TYPE_NAME_BEARING_PARENTS = (
    JAVA_TYPE_NAME_NODES
    | JAVA_PRIMITIVE_TYPE_NODES
    | JAVA_NAME_NODE_TYPES
    | frozenset({TS_FIELD_ACCESS})
)

JAVA_DECLARATION_NAME_PARENTS = frozenset(
    {
        TS_ENUM_DECLARATION,
        TS_CLASS_DECLARATION,
        TS_CONSTRUCTOR_DECLARATION,
        TS_COMPACT_CONSTRUCTOR_DECLARATION,
        TS_INTERFACE_DECLARATION,
        TS_RECORD_DECLARATION,
        TS_LOCAL_VARIABLE_DECLARATION,
    }
)

JAVA_ANNOTATION_NAME_PARENTS = frozenset(
    {TS_MARKER_ANNOTATION, TS_ANNOTATION, TS_ANNOTATION_TYPE_DECLARATION}
)

JAVA_BUILTIN_TYPES = frozenset(
    {"byte", "short", "int", "long", "char", "float", "double", "boolean", "void"}
)
