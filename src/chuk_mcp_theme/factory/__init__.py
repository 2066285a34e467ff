"""
Record factory - the authoring side of the theme system.

Creates tokens, groups and variants with generated ids and
collision-free names.
"""

from chuk_mcp_theme.factory.records import (
    TOKEN_DEFAULTS,
    create_group,
    create_id,
    create_token,
    create_variant,
    make_available_name,
    random_hex_color,
    token_defaults,
)

__all__ = [
    "TOKEN_DEFAULTS",
    "create_group",
    "create_id",
    "create_token",
    "create_variant",
    "make_available_name",
    "random_hex_color",
    "token_defaults",
]
