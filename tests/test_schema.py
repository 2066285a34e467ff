"""
Tests for the schema registry.

Tests cover:
- Style property to theme property lookup
- Token kind and component kind bucket tables
- Bucket shape classification
"""

import pytest

from chuk_mcp_theme.constants import ComponentKind, TokenKind
from chuk_mcp_theme.schema import (
    COMPONENT_KIND_BUCKETS,
    DEFAULT_VARIANT_NAME,
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


class TestPropertyForStyle:
    """Tests for style property lookup."""

    @pytest.mark.parametrize(
        ("style_property", "bucket"),
        [
            ("color", "colors"),
            ("backgroundColor", "colors"),
            ("hoverBackgroundColor", "colors"),
            ("fill", "colors"),
            ("mt", "space"),
            ("paddingX", "space"),
            ("fontSize", "fontSizes"),
            ("fontFamily", "fonts"),
            ("borderRadius", "radii"),
            ("boxShadow", "shadows"),
            ("zIndex", "zIndices"),
            ("gridGap", "grid"),
            ("maxWidth", "sizes"),
        ],
    )
    def test_known_properties(self, style_property: str, bucket: str) -> None:
        """Known style properties map to their bucket."""
        assert property_for_style(style_property) == bucket

    def test_unknown_property(self) -> None:
        """Unknown style properties return None."""
        assert property_for_style("notAProperty") is None

    def test_literal_property_is_not_token_backed(self) -> None:
        """Literal-only properties are known but have no bucket."""
        assert property_for_style("textTransform") is None
        assert is_style_property("textTransform") is True

    def test_each_style_property_has_one_bucket(self) -> None:
        """No style property is declared under two buckets."""
        seen: set[str] = set()
        for style_properties in THEME_SPEC.values():
            for style_property in style_properties:
                assert style_property not in seen
                seen.add(style_property)

    def test_literal_properties_do_not_overlap(self) -> None:
        """Literal-only properties are not also token-backed."""
        for style_property in LITERAL_STYLE_PROPERTIES:
            assert property_for_style(style_property) is None


class TestBuckets:
    """Tests for bucket tables."""

    def test_every_token_kind_has_bucket(self) -> None:
        """The token kind table is total."""
        for kind in TokenKind:
            assert bucket_for_token_kind(kind) in THEME_SPEC

    def test_every_component_kind_has_bucket(self) -> None:
        """The component kind table is total."""
        for kind in ComponentKind:
            assert bucket_for_component_kind(kind) == COMPONENT_KIND_BUCKETS[kind]

    def test_lookup_by_string(self) -> None:
        """Lookups accept the raw type tags."""
        assert bucket_for_token_kind("fontWeight") == "fontWeights"
        assert bucket_for_token_kind("radius") == "radii"
        assert bucket_for_component_kind("checkbox") == "checkboxes"

    def test_unknown_kind_raises(self) -> None:
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError):
            bucket_for_token_kind("gradient")

    def test_bucket_shapes(self) -> None:
        """Scale buckets are lists, the rest are named."""
        for bucket in ["breakpoints", "space", "fontSizes", "lineHeights", "letterSpacings"]:
            assert is_list_bucket(bucket)
        for bucket in ["colors", "sizes", "borders", "radii", "shadows", "grid"]:
            assert is_named_bucket(bucket)
        assert is_list_bucket("zIndices")
        assert not is_list_bucket("buttons")

    def test_uses_names(self) -> None:
        """Named kinds are the kinds with named buckets."""
        for kind, bucket in TOKEN_KIND_BUCKETS.items():
            assert uses_names(kind) == is_named_bucket(bucket)

    def test_tables_are_read_only(self) -> None:
        """Schema tables cannot be modified at runtime."""
        with pytest.raises(TypeError):
            TOKEN_KIND_BUCKETS[TokenKind.COLOR] = "paints"  # type: ignore[index]

    def test_default_variant_name(self) -> None:
        """The default variant name is exported with the schema."""
        assert DEFAULT_VARIANT_NAME == "Primary"
