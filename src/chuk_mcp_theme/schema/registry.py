"""
Schema Registry - static lookup tables for the theme shape.

The tables answer three questions:
1. Which theme bucket does a token kind land in?
2. Which bucket backs a given style property?
3. Which bucket holds the styles for a component kind?

Keeping "which style properties exist" apart from "which token kind backs
them" lets new style properties reuse existing token pools without touching
the compiler. Tables are built once at import time and are read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from chuk_mcp_theme.constants import BucketShape, ComponentKind, TokenKind

# Name of the variant a style-application runtime applies by default
DEFAULT_VARIANT_NAME = "Primary"

# Custom style properties that read from a theme bucket, e.g.
# <Button hoverColor="primary"> reads theme.colors.primary
CUSTOM_THEME_PROPS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "colors": (
            "hoverColor",
            "hoverBackgroundColor",
            "hoverBorderColor",
            "activeColor",
            "activeBackgroundColor",
            "activeBorderColor",
            "visitedColor",
            "visitedBackgroundColor",
            "visitedBorderColor",
            "fill",
        ),
    }
)

# Bucket -> style properties it backs
THEME_SPEC: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "breakpoints": (),
        "space": (
            "top", "right", "bottom", "left",
            "margin", "m",
            "marginTop", "mt",
            "marginRight", "mr",
            "marginBottom", "mb",
            "marginLeft", "ml",
            "marginX", "mx",
            "marginY", "my",
            "padding", "p",
            "paddingTop", "pt",
            "paddingRight", "pr",
            "paddingBottom", "pb",
            "paddingLeft", "pl",
            "paddingX", "px",
            "paddingY", "py",
        ),
        "fontSizes": ("fontSize",),
        "fonts": ("fontFamily",),
        "fontWeights": ("fontWeight",),
        "lineHeights": ("lineHeight",),
        "letterSpacings": ("letterSpacing",),
        "colors": (
            "color", "bg", "backgroundColor",
            "borderColor",
            "borderTopColor",
            "borderRightColor",
            "borderBottomColor",
            "borderLeftColor",
            *CUSTOM_THEME_PROPS["colors"],
        ),
        "sizes": (
            "width", "height",
            "minWidth", "minHeight",
            "maxWidth", "maxHeight",
            "size",
        ),
        "grid": ("gridGap", "gridColumnGap", "gridRowGap"),
        "borders": (
            "border",
            "borderTop",
            "borderRight",
            "borderBottom",
            "borderLeft",
            "borderX", "borderY",
        ),
        "borderWidths": (
            "borderWidth",
            "borderTopWidth",
            "borderRightWidth",
            "borderBottomWidth",
            "borderLeftWidth",
        ),
        "borderStyles": (
            "borderStyle",
            "borderTopStyle",
            "borderRightStyle",
            "borderBottomStyle",
            "borderLeftStyle",
        ),
        "radii": (
            "borderRadius",
            "borderTopLeftRadius", "borderTopRightRadius",
            "borderBottomLeftRadius", "borderBottomRightRadius",
        ),
        "shadows": ("textShadow", "boxShadow"),
        "zIndices": ("zIndex",),
    }
)

# Style properties with no token representation; variants pass their
# values through as literals
LITERAL_STYLE_PROPERTIES: frozenset[str] = frozenset(
    {
        "textTransform",
        "textDecoration",
        "textAlign",
        "fontStyle",
        "whiteSpace",
        "cursor",
        "display",
        "opacity",
        "overflow",
        "position",
        "transition",
        "verticalAlign",
        "alignItems",
        "justifyContent",
        "flexDirection",
        "flexWrap",
    }
)

TOKEN_KIND_BUCKETS: Mapping[TokenKind, str] = MappingProxyType(
    {
        TokenKind.BREAKPOINT: "breakpoints",
        TokenKind.SPACE: "space",
        TokenKind.SIZE: "sizes",
        TokenKind.COLOR: "colors",
        TokenKind.FONT: "fonts",
        TokenKind.FONT_SIZE: "fontSizes",
        TokenKind.FONT_WEIGHT: "fontWeights",
        TokenKind.LINE_HEIGHT: "lineHeights",
        TokenKind.LETTER_SPACING: "letterSpacings",
        TokenKind.BORDER: "borders",
        TokenKind.BORDER_STYLE: "borderStyles",
        TokenKind.BORDER_WIDTH: "borderWidths",
        TokenKind.RADIUS: "radii",
        TokenKind.SHADOW: "shadows",
        TokenKind.Z_INDEX: "zIndices",
        TokenKind.GRID: "grid",
    }
)

# Kinds whose bucket is an ordered scale rather than a name mapping
LIST_TOKEN_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.BREAKPOINT,
        TokenKind.SPACE,
        TokenKind.FONT_SIZE,
        TokenKind.LINE_HEIGHT,
        TokenKind.LETTER_SPACING,
        TokenKind.Z_INDEX,
    }
)

COMPONENT_KIND_BUCKETS: Mapping[ComponentKind, str] = MappingProxyType(
    {
        ComponentKind.BUTTON: "buttons",
        ComponentKind.TEXT: "texts",
        ComponentKind.HEADING: "headings",
        ComponentKind.LABEL: "labels",
        ComponentKind.LINK: "links",
        ComponentKind.ICON: "icons",
        ComponentKind.INPUT: "inputs",
        ComponentKind.RADIO: "radios",
        ComponentKind.CHECKBOX: "checkboxes",
        ComponentKind.SELECT: "selects",
        ComponentKind.SLIDER: "sliders",
        ComponentKind.TOGGLE: "toggles",
        ComponentKind.TEXTAREA: "textareas",
    }
)

BUCKET_SHAPES: Mapping[str, BucketShape] = MappingProxyType(
    {
        bucket: BucketShape.LIST if kind in LIST_TOKEN_KINDS else BucketShape.NAMED
        for kind, bucket in TOKEN_KIND_BUCKETS.items()
    }
)

# Reverse index built once; each style property belongs to exactly one bucket
_STYLE_PROPERTY_BUCKETS: Mapping[str, str] = MappingProxyType(
    {
        style_property: bucket
        for bucket, style_properties in THEME_SPEC.items()
        for style_property in style_properties
    }
)


def property_for_style(style_property: str) -> str | None:
    """
    Get the theme bucket that backs a style property.

    Args:
        style_property: Style property name (e.g. 'backgroundColor', 'mt')

    Returns:
        Bucket name, or None if the property is not token-backed
    """
    return _STYLE_PROPERTY_BUCKETS.get(style_property)


def is_style_property(style_property: str) -> bool:
    """Check whether a style property is known, token-backed or literal."""
    return style_property in _STYLE_PROPERTY_BUCKETS or style_property in LITERAL_STYLE_PROPERTIES


def bucket_for_token_kind(kind: TokenKind | str) -> str:
    """Get the theme bucket for a token kind."""
    return TOKEN_KIND_BUCKETS[TokenKind(kind)]


def bucket_for_component_kind(kind: ComponentKind | str) -> str:
    """Get the theme bucket for a component or variant kind."""
    return COMPONENT_KIND_BUCKETS[ComponentKind(kind)]


def is_list_bucket(bucket: str) -> bool:
    """Check whether a token bucket is an ordered scale."""
    return BUCKET_SHAPES.get(bucket) == BucketShape.LIST


def is_named_bucket(bucket: str) -> bool:
    """Check whether a token bucket is a name mapping."""
    return BUCKET_SHAPES.get(bucket) == BucketShape.NAMED


def uses_names(kind: TokenKind | str) -> bool:
    """Check whether tokens of this kind are keyed by name."""
    return TokenKind(kind) not in LIST_TOKEN_KINDS
