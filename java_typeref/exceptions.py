# (H) Parser errors
GRAMMAR_UNAVAILABLE = (
    "Tree-sitter Java grammar not available from module '{module}'. "
    "Install it with: pip install tree-sitter-java"
)
GRAMMAR_NO_ATTR = "Grammar module '{module}' has no attribute '{attr}'."
