"""
Constants and enums for the theme system.

No magic strings - use enums and Literal types for constrained values.
"""

import re
from enum import Enum
from typing import Literal


class TokenKind(str, Enum):
    """
    Kinds of theme values (design tokens).

    The value is the ``type`` tag used in token records.
    """

    BREAKPOINT = "breakpoint"
    SPACE = "space"
    SIZE = "size"
    COLOR = "color"
    FONT = "font"
    FONT_SIZE = "fontSize"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    BORDER = "border"
    BORDER_STYLE = "borderStyle"
    BORDER_WIDTH = "borderWidth"
    RADIUS = "radius"
    SHADOW = "shadow"
    Z_INDEX = "zIndex"
    GRID = "grid"


class ComponentKind(str, Enum):
    """Components that can receive default styles and variants from the theme."""

    BUTTON = "button"
    TEXT = "text"
    HEADING = "heading"
    LABEL = "label"
    LINK = "link"
    ICON = "icon"
    INPUT = "input"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    SELECT = "select"
    SLIDER = "slider"
    TOGGLE = "toggle"
    TEXTAREA = "textarea"


class BucketShape(str, Enum):
    """How a theme bucket stores its values."""

    LIST = "list"  # Ordered scale, e.g. space[2]
    NAMED = "named"  # Name -> value mapping, e.g. colors.primary


# Record type tags
GroupTag = Literal["group"]
ComponentTag = Literal["component"]
VariantTag = Literal["variant"]

# Name of the project config file
CONFIG_FILENAME = ".idsconfig.json"

# Shape of a generated record id (uuid4). Values matching this are treated
# as token references inside variant styles; anything else is a literal.
ID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


class ErrorMessages:
    """Standardized error messages."""

    NO_TOKENS = "No theme values were passed to the theme compiler."
    GROUP_MEMBER_NOT_FOUND = (
        "Could not find theme value with id '{token_id}' "
        "for group '{group_type}.{group_name}' with id '{group_id}'."
    )
    UNKNOWN_STYLE_PROPERTY = (
        "Could not find a theme property for style property '{style_property}' "
        "in {owner}."
    )
    COMPONENT_VALUE_NOT_FOUND = (
        "Could not find theme value with id '{token_id}' for style property "
        "'{style_property}' in component '{component}'."
    )
    VARIANT_VALUE_NOT_FOUND = (
        "Could not find theme value with id '{token_id}' for style property "
        "'{style_property}' in variant '{variant}' for variant type '{variant_type}'."
    )
    NAMED_INTO_LIST = (
        "Cannot assign theme value with id '{token_id}' to theme property "
        "'{bucket}', because '{bucket}' holds a list and the value has a name."
    )
    UNNAMED_INTO_NAMED = (
        "Cannot assign theme value with id '{token_id}' to theme property "
        "'{bucket}', because the theme value does not have a name."
    )
    CONFIG_FIELD_MISSING = "Property '{field}' is not configured in '{filename}' config file."
