"""
Schema registry - the fixed shape of a compiled theme.

Bucket names and their list/named classification are a contract with the
style-application runtime; change them only together with it.
"""

from chuk_mcp_theme.schema.registry import (
    BUCKET_SHAPES,
    COMPONENT_KIND_BUCKETS,
    CUSTOM_THEME_PROPS,
    DEFAULT_VARIANT_NAME,
    LIST_TOKEN_KINDS,
    LITERAL_STYLE_PROPERTIES,
    THEME_SPEC,
    TOKEN_KIND_BUCKETS,
    bucket_for_component_kind,
    bucket_for_token_kind,
    is_list_bucket,
    is_named_bucket,
    is_style_property,
    property_for_style,
    uses_names,
)

__all__ = [
    "BUCKET_SHAPES",
    "COMPONENT_KIND_BUCKETS",
    "CUSTOM_THEME_PROPS",
    "DEFAULT_VARIANT_NAME",
    "LIST_TOKEN_KINDS",
    "LITERAL_STYLE_PROPERTIES",
    "THEME_SPEC",
    "TOKEN_KIND_BUCKETS",
    "bucket_for_component_kind",
    "bucket_for_token_kind",
    "is_list_bucket",
    "is_named_bucket",
    "is_style_property",
    "property_for_style",
    "uses_names",
]
