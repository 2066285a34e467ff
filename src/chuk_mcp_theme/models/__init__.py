"""
Pydantic models for the theme system.

This module provides:
- ThemeValue: A single design token
- ThemeGroup: Named aggregation of same-kind tokens
- ThemeComponent: Default styles for a component kind
- ThemeVariant: Named style bundle for a component kind
"""

from chuk_mcp_theme.models.tokens import (
    StyleValue,
    ThemeComponent,
    ThemeGroup,
    ThemeValue,
    ThemeVariant,
    VariantStyle,
)

__all__ = [
    "StyleValue",
    "ThemeComponent",
    "ThemeGroup",
    "ThemeValue",
    "ThemeVariant",
    "VariantStyle",
]
