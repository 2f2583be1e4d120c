from __future__ import annotations

# (H) Parser loader logs
IMPORTING_MODULE = "Attempting to import grammar module: {module}"
GRAMMAR_LOADED = "Successfully loaded {lang} grammar."
GRAMMAR_LOAD_FAILED = "Failed to load {lang} grammar: {error}"

# (H) Compilation unit logs
PACKAGE_FOUND = "Found package: {name}"
IMPORT_FOUND = "Found {kind} import: {name}"
IMPORT_SKIPPED = "Skipping import declaration without a name at byte {start}"
TYPE_FOUND = "Found {kind}: {name} (qn: {qualified_name})"
TYPE_WITHOUT_NAME = "Declaration {node_type} at byte {start} has no name, walking it as plain node"
UNIT_BUILT = "Built compilation unit: package={package}, {imports} imports, {types} types"

# (H) Type reference logs
OFFSET_OUT_OF_RANGE = "Offset {offset} outside source of length {length}"
NO_TYPE_AT_OFFSET = "No type reference at offset {offset} (node: {node_type})"
REFERENCES_COLLECTED = "Collected {count} type references"
REFERENCE_RESOLVED = "Resolved '{name}' as {kind} ({qualified_name})"
