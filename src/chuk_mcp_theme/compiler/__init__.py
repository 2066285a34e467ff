"""
Compilation pipeline - transforms theme records into a theme object.

The pipeline:
    ThemeValues (+ groups) → token buckets
    → ThemeComponents / ThemeVariants → component buckets
    → Theme (plain dict for the style-application runtime)
"""

from chuk_mcp_theme.compiler.errors import (
    DanglingReferenceError,
    MissingInputError,
    ShapeConflictError,
    ThemeError,
    UnknownStylePropertyError,
)
from chuk_mcp_theme.compiler.theme import (
    Theme,
    ThemeCompiler,
    compile_theme,
    empty_theme,
    looks_like_id,
    sort_ascending,
    summarize_theme,
)

__all__ = [
    # Compiler
    "Theme",
    "ThemeCompiler",
    "compile_theme",
    "empty_theme",
    "looks_like_id",
    "sort_ascending",
    "summarize_theme",
    # Errors
    "DanglingReferenceError",
    "MissingInputError",
    "ShapeConflictError",
    "ThemeError",
    "UnknownStylePropertyError",
]
