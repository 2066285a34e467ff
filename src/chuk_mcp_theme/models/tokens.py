"""
Theme record models - the authoring data the compiler reads.

Records:
- ThemeValue: a single design token (color, space step, font, ...)
- ThemeGroup: a named aggregation of same-kind tokens
- ThemeComponent: default styles for a component kind
- ThemeVariant: a named bundle of styles for a component kind

Records are frozen; authoring tools replace them rather than mutate them.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theme.constants import ComponentKind, ComponentTag, GroupTag, TokenKind, VariantTag

# A raw style value as it appears in a theme
StyleValue = Union[str, int, float]

# A variant style entry: id/literal, array of either, or a selector mapping
VariantStyle = Union[StyleValue, list[StyleValue], dict[str, Any], None]


class ThemeValue(BaseModel):
    """
    A design token.

    Named kinds (colors, borders, ...) carry a ``name``; scale kinds
    (space, font sizes, breakpoints, ...) do not.
    """

    id: str = Field(..., min_length=1, description="Globally unique id")
    type: TokenKind = Field(..., description="Token kind")
    value: StyleValue = Field(..., description="Raw style value")
    name: str | None = Field(None, description="Name within its bucket (named kinds only)")
    groups: list[str] | None = Field(None, description="Group ids (color tokens only)")

    model_config = {"frozen": True}

    @property
    def has_name(self) -> bool:
        """True if this token is assigned by name rather than appended."""
        return bool(self.name)

    def shares_group_with(self, group_ids: list[str]) -> bool:
        """Check whether this token belongs to any of the given groups."""
        return bool(self.groups) and any(g in group_ids for g in self.groups)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain record, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class ThemeGroup(BaseModel):
    """A named, ordered aggregation of same-kind tokens."""

    id: str = Field(..., min_length=1)
    type: GroupTag = "group"
    group_type: TokenKind = Field(..., alias="groupType")
    name: str = Field(..., description="Unique per group type")
    members: list[str] = Field(default_factory=list, description="Member token ids")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ThemeComponent(BaseModel):
    """
    Default (non-variant) styles for a component kind.

    Each style maps a style property to a token id; an empty id means unset.
    """

    id: str | None = None
    type: ComponentTag = "component"
    name: ComponentKind = Field(..., description="Component kind")
    styles: dict[str, str | None] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ThemeVariant(BaseModel):
    """
    A named, reusable bundle of style values for one component kind.

    Style values may be token ids, literal raw values (e.g. text-transform
    keywords), arrays of either, or selector mappings like
    ``{"&:hover": {"color": "<token id>"}}``.
    """

    id: str = Field(..., min_length=1)
    type: VariantTag = "variant"
    variant_type: ComponentKind = Field(..., alias="variantType")
    name: str = Field(..., description="Unique per variant type")
    styles: dict[str, VariantStyle] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Variant names become theme keys, so they must not be blank."""
        if not v.strip():
            raise ValueError("Variant name must not be empty")
        return v

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
