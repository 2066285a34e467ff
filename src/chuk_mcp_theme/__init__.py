"""
Design system theme compiler.

Compiles theme values (design tokens), groups, component default styles
and component variants into a single nested theme object for a
style-application runtime.
"""

from chuk_mcp_theme.compiler import (
    DanglingReferenceError,
    MissingInputError,
    ShapeConflictError,
    Theme,
    ThemeCompiler,
    ThemeError,
    UnknownStylePropertyError,
    compile_theme,
)
from chuk_mcp_theme.constants import ComponentKind, TokenKind
from chuk_mcp_theme.factory import (
    create_group,
    create_token,
    create_variant,
    make_available_name,
)
from chuk_mcp_theme.models import ThemeComponent, ThemeGroup, ThemeValue, ThemeVariant
from chuk_mcp_theme.schema import (
    bucket_for_component_kind,
    bucket_for_token_kind,
    property_for_style,
)

__all__ = [
    "ComponentKind",
    "DanglingReferenceError",
    "MissingInputError",
    "ShapeConflictError",
    "Theme",
    "ThemeCompiler",
    "ThemeComponent",
    "ThemeError",
    "ThemeGroup",
    "ThemeValue",
    "ThemeVariant",
    "TokenKind",
    "UnknownStylePropertyError",
    "bucket_for_component_kind",
    "bucket_for_token_kind",
    "compile_theme",
    "create_group",
    "create_token",
    "create_variant",
    "make_available_name",
    "property_for_style",
]
