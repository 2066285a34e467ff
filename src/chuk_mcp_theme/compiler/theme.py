"""
Theme Compiler - compiles theme records into a nested theme object.

This is the central compilation pipeline:
    ThemeValues + ThemeGroups + ThemeComponents + ThemeVariants → Theme

The compiler:
1. Initialises every bucket to its empty form
2. Merges group members into their buckets
3. Merges every token (after groups, so the flat pass wins on name clashes)
4. Sorts list buckets ascending
5. Resolves component default styles into component buckets
6. Resolves variant styles into component buckets

Compilation is stateless: every call builds a fresh theme, and any error
aborts the whole call.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from chuk_mcp_theme.compiler.errors import (
    DanglingReferenceError,
    MissingInputError,
    ShapeConflictError,
    UnknownStylePropertyError,
)
from chuk_mcp_theme.constants import ID_PATTERN, ErrorMessages
from chuk_mcp_theme.models import ThemeComponent, ThemeGroup, ThemeValue, ThemeVariant
from chuk_mcp_theme.schema import (
    COMPONENT_KIND_BUCKETS,
    TOKEN_KIND_BUCKETS,
    bucket_for_component_kind,
    bucket_for_token_kind,
    is_list_bucket,
    is_style_property,
    property_for_style,
)

logger = logging.getLogger(__name__)

Theme = dict[str, Any]
TokenIndex = dict[str, ThemeValue]


def looks_like_id(value: Any) -> bool:
    """
    Check whether a style value has the shape of a generated record id.

    This is a heuristic: a literal that happens to look like a uuid is
    treated as a token reference, and a hand-written id is not.
    """
    return isinstance(value, str) and ID_PATTERN.match(value) is not None


def empty_theme() -> Theme:
    """Create a theme with every bucket in its empty form."""
    theme: Theme = {}
    for bucket in TOKEN_KIND_BUCKETS.values():
        theme[bucket] = [] if is_list_bucket(bucket) else {}
    for bucket in COMPONENT_KIND_BUCKETS.values():
        theme[bucket] = {}
    return theme


def _numeric_key(value: Any) -> float | None:
    """Sort key for a finite number or plain numeric string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        key = float(value)
    elif isinstance(value, str) and "_" not in value:
        try:
            key = float(value)
        except ValueError:
            return None
    else:
        return None
    return key if math.isfinite(key) else None


def sort_ascending(values: list[Any]) -> None:
    """Sort a list bucket in place if every entry is numeric, else leave it."""
    keys = [_numeric_key(v) for v in values]
    if any(k is None for k in keys):
        return
    ordered = [v for _, v in sorted(zip(keys, values), key=lambda pair: pair[0])]
    values[:] = ordered


class ThemeCompiler:
    """
    Compiles theme records into a Theme.

    The theme is a plain dict keyed by bucket name, ready to hand to a
    style-application runtime.
    """

    def compile(
        self,
        tokens: Iterable[ThemeValue | dict[str, Any]] | None,
        groups: Iterable[ThemeGroup | dict[str, Any]] | None = None,
        components: (
            Iterable[ThemeComponent | dict[str, Any]] | Mapping[str, Mapping[str, Any]] | None
        ) = None,
        variants: Iterable[ThemeVariant | dict[str, Any]] | None = None,
    ) -> Theme:
        """
        Compile theme records into a theme.

        Args:
            tokens: Theme values (required, non-empty)
            groups: Optional groups of same-kind tokens
            components: Optional component default styles, either records or
                a mapping of component name to styles
            variants: Optional variants

        Returns:
            The compiled theme

        Raises:
            MissingInputError: If no tokens are supplied
            DanglingReferenceError: If a referenced token id does not exist
            UnknownStylePropertyError: If a style property is not in the schema
            ShapeConflictError: If a token does not fit its bucket's shape
        """
        values = _coerce(tokens, ThemeValue)
        if not values:
            raise MissingInputError(ErrorMessages.NO_TOKENS)

        index = self._build_index(values)
        theme = empty_theme()

        if groups:
            for group in _coerce(groups, ThemeGroup):
                self._merge_group(theme, group, index)

        for token in values:
            self._assign_token(theme, bucket_for_token_kind(token.type), token)

        for bucket in TOKEN_KIND_BUCKETS.values():
            if isinstance(theme[bucket], list):
                sort_ascending(theme[bucket])

        if components:
            for component in _coerce_components(components):
                self._apply_component(theme, component, index)

        if variants:
            for variant in _coerce(variants, ThemeVariant):
                self._apply_variant(theme, variant, index)

        logger.debug(f"Compiled theme from {len(values)} theme values")
        return theme

    def _build_index(self, values: list[ThemeValue]) -> TokenIndex:
        """Index tokens by id; the first token with a given id wins."""
        index: TokenIndex = {}
        for token in values:
            index.setdefault(token.id, token)
        return index

    def _merge_group(self, theme: Theme, group: ThemeGroup, index: TokenIndex) -> None:
        """Merge each group member into the group type's bucket."""
        bucket = bucket_for_token_kind(group.group_type)

        for member_id in group.members:
            member = index.get(member_id)
            if member is None:
                raise DanglingReferenceError(
                    ErrorMessages.GROUP_MEMBER_NOT_FOUND.format(
                        token_id=member_id,
                        group_type=group.group_type.value,
                        group_name=group.name,
                        group_id=group.id,
                    ),
                    member_id,
                )
            if member.type != group.group_type:
                logger.warning(
                    f"Group '{group.name}' ({group.group_type.value}) contains "
                    f"{member.type.value} value '{member_id}'"
                )
            self._assign_token(theme, bucket, member)

    def _assign_token(self, theme: Theme, bucket: str, token: ThemeValue) -> None:
        """Assign a token by name, or append it to a list bucket."""
        target = theme[bucket]

        if token.has_name:
            if not isinstance(target, dict):
                raise ShapeConflictError(
                    ErrorMessages.NAMED_INTO_LIST.format(token_id=token.id, bucket=bucket),
                    bucket,
                )
            target[token.name] = token.value
        else:
            if not isinstance(target, list):
                raise ShapeConflictError(
                    ErrorMessages.UNNAMED_INTO_NAMED.format(token_id=token.id, bucket=bucket),
                    bucket,
                )
            target.append(token.value)

    def _apply_component(
        self, theme: Theme, component: ThemeComponent, index: TokenIndex
    ) -> None:
        """Resolve a component's default styles into its component bucket."""
        name = component.name.value
        target = theme[bucket_for_component_kind(component.name)]

        for style_property, token_id in component.styles.items():
            if token_id is None or token_id == "":
                continue

            if property_for_style(style_property) is None:
                raise UnknownStylePropertyError(
                    ErrorMessages.UNKNOWN_STYLE_PROPERTY.format(
                        style_property=style_property,
                        owner=f"component '{name}'",
                    ),
                    style_property,
                )

            token = index.get(token_id)
            if token is None:
                raise DanglingReferenceError(
                    ErrorMessages.COMPONENT_VALUE_NOT_FOUND.format(
                        token_id=token_id,
                        style_property=style_property,
                        component=name,
                    ),
                    token_id,
                )

            target.setdefault(name, {})[style_property] = token.value

    def _apply_variant(self, theme: Theme, variant: ThemeVariant, index: TokenIndex) -> None:
        """Resolve a variant's styles into its component bucket."""
        target = theme[bucket_for_component_kind(variant.variant_type)]

        for style_property, style_value in variant.styles.items():
            if style_value is None or style_value == "":
                continue

            if isinstance(style_value, Mapping):
                # Selector block, e.g. {"&:hover": {"color": <id>}}
                resolved: Any = {}
                for inner_property, inner_value in style_value.items():
                    if inner_value is None or inner_value == "":
                        continue
                    self._check_variant_property(inner_property, variant)
                    resolved[inner_property] = self._resolve_variant_value(
                        inner_value, index, inner_property, variant
                    )
            else:
                self._check_variant_property(style_property, variant)
                resolved = self._resolve_variant_value(style_value, index, style_property, variant)

            target.setdefault(variant.name, {})[style_property] = resolved

    def _check_variant_property(self, style_property: str, variant: ThemeVariant) -> None:
        if not is_style_property(style_property):
            raise UnknownStylePropertyError(
                ErrorMessages.UNKNOWN_STYLE_PROPERTY.format(
                    style_property=style_property,
                    owner=f"variant '{variant.name}' for variant type "
                    f"'{variant.variant_type.value}'",
                ),
                style_property,
            )

    def _resolve_variant_value(
        self,
        style_value: Any,
        index: TokenIndex,
        style_property: str,
        variant: ThemeVariant,
    ) -> Any:
        """
        Resolve a variant style value.

        Strings that match a token id resolve to the token's value. Unmatched
        strings that look like ids are errors; anything else is a literal.
        """
        if isinstance(style_value, list):
            return [
                self._resolve_variant_value(item, index, style_property, variant)
                for item in style_value
            ]

        if not isinstance(style_value, str):
            return style_value

        token = index.get(style_value)
        if token is not None:
            return token.value

        if looks_like_id(style_value):
            raise DanglingReferenceError(
                ErrorMessages.VARIANT_VALUE_NOT_FOUND.format(
                    token_id=style_value,
                    style_property=style_property,
                    variant=variant.name,
                    variant_type=variant.variant_type.value,
                ),
                style_value,
            )

        return style_value


def _coerce(records: Iterable[Any] | None, model: type[Any]) -> list[Any]:
    """Validate plain dicts into models; models pass through."""
    if records is None:
        return []
    return [r if isinstance(r, model) else model.model_validate(r) for r in records]


def _coerce_components(
    components: Iterable[ThemeComponent | dict[str, Any]] | Mapping[str, Mapping[str, Any]],
) -> list[ThemeComponent]:
    if isinstance(components, Mapping):
        return [
            ThemeComponent(name=name, styles=dict(styles)) for name, styles in components.items()
        ]
    return _coerce(components, ThemeComponent)


def compile_theme(
    tokens: Iterable[ThemeValue | dict[str, Any]] | None,
    groups: Iterable[ThemeGroup | dict[str, Any]] | None = None,
    components: (
        Iterable[ThemeComponent | dict[str, Any]] | Mapping[str, Mapping[str, Any]] | None
    ) = None,
    variants: Iterable[ThemeVariant | dict[str, Any]] | None = None,
) -> Theme:
    """
    Convenience function to compile a theme.

    Args:
        tokens: Theme values
        groups: Optional groups
        components: Optional component default styles
        variants: Optional variants

    Returns:
        The compiled theme
    """
    return ThemeCompiler().compile(tokens, groups, components, variants)


def summarize_theme(theme: Theme) -> dict[str, int]:
    """Count the entries in every non-empty bucket."""
    return {bucket: len(values) for bucket, values in theme.items() if values}
