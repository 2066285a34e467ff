"""
Record factory - creates tokens, groups and variants for authoring tools.

Every created record gets a fresh id (unless one is supplied) and a name
that does not collide with its siblings. Existing collections are never
mutated; callers append the returned record themselves.
"""

from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Iterable
from typing import Any, Callable, Mapping

from chuk_mcp_theme.constants import ComponentKind, TokenKind
from chuk_mcp_theme.models import ThemeGroup, ThemeValue, ThemeVariant

logger = logging.getLogger(__name__)

NEW_GROUP_NAME = "New Group"
NEW_VARIANT_NAME = "New Variant"


def random_hex_color() -> str:
    """Generate a random '#RRGGBB' color."""
    return f"#{random.randint(0, 0xFFFFFF):06X}"


# Kind -> default record fields; colors get a fresh random value each time
TOKEN_DEFAULTS: Mapping[TokenKind, Callable[[], dict[str, Any]]] = {
    TokenKind.BREAKPOINT: lambda: {"value": "60em"},
    TokenKind.SIZE: lambda: {"value": "60px", "name": "New Size"},
    TokenKind.SPACE: lambda: {"value": 32},
    TokenKind.COLOR: lambda: {"value": random_hex_color(), "name": "New Color", "groups": []},
    TokenKind.FONT: lambda: {"value": "Times", "name": "New Font"},
    TokenKind.FONT_SIZE: lambda: {"value": 24},
    TokenKind.FONT_WEIGHT: lambda: {"value": 600, "name": "New Font Weight"},
    TokenKind.LINE_HEIGHT: lambda: {"value": 1},
    TokenKind.LETTER_SPACING: lambda: {"value": 0},
    TokenKind.BORDER: lambda: {"value": "2px solid black", "name": "New Border"},
    TokenKind.BORDER_STYLE: lambda: {"value": "solid", "name": "New Border Style"},
    TokenKind.BORDER_WIDTH: lambda: {"value": "2px", "name": "New Border Width"},
    TokenKind.RADIUS: lambda: {"value": "8px", "name": "New Radius"},
    TokenKind.SHADOW: lambda: {
        "value": "0 1px 3px rgba(0, 0, 0, 0.12), 0 1px 2px rgba(0, 0, 0, 0.24)",
        "name": "New Shadow",
    },
    TokenKind.Z_INDEX: lambda: {"value": 10},
    TokenKind.GRID: lambda: {"value": "", "name": "New Grid"},
}


def token_defaults(kind: TokenKind | str) -> dict[str, Any]:
    """Get a fresh default record body for a token kind."""
    return TOKEN_DEFAULTS[TokenKind(kind)]()


def create_id() -> str:
    """Generate a record id."""
    return str(uuid.uuid4())


def make_available_name(name: str, unavailable_names: Iterable[str]) -> str:
    """
    Return a name that is not in the unavailable set.

    The desired name is returned unchanged when free; otherwise a numeric
    suffix is appended, starting at 2: 'Primary' -> 'Primary 2'.

    Args:
        name: Desired name
        unavailable_names: Names already taken

    Returns:
        An available name
    """
    taken = set(unavailable_names)
    if name not in taken:
        return name

    n = 2
    while f"{name} {n}" in taken:
        n += 1
    return f"{name} {n}"


def _coerce_tokens(tokens: Iterable[ThemeValue | dict[str, Any]]) -> list[ThemeValue]:
    return [t if isinstance(t, ThemeValue) else ThemeValue.model_validate(t) for t in tokens]


def create_token(
    existing_tokens: Iterable[ThemeValue | dict[str, Any]],
    kind: TokenKind | str,
    overrides: dict[str, Any] | None = None,
) -> ThemeValue:
    """
    Create a new token of the given kind.

    If the token has a name, it is made unique amongst same-kind tokens, or
    amongst same-kind tokens sharing a group when the token has groups.

    Args:
        existing_tokens: Current token collection (not modified)
        kind: Token kind to create
        overrides: Record fields to use instead of the defaults

    Returns:
        The new ThemeValue
    """
    kind = TokenKind(kind)
    props = dict(overrides or {})

    record: dict[str, Any] = {
        "id": props.pop("id", None) or create_id(),
        **token_defaults(kind),
        **props,
        "type": kind,
    }

    if record.get("name") is not None:
        groups: list[str] = record.get("groups") or []
        unavailable: list[str] = []

        for token in _coerce_tokens(existing_tokens):
            if token.type != kind or token.name is None:
                continue
            if not groups or token.shares_group_with(groups):
                unavailable.append(token.name)

        record["name"] = make_available_name(record["name"], unavailable)

    token = ThemeValue.model_validate(record)
    logger.debug(f"Created {kind.value} token {token.id} ({token.name})")
    return token


def create_group(
    existing_groups: Iterable[ThemeGroup | dict[str, Any]],
    group_type: TokenKind | str,
    overrides: dict[str, Any] | None = None,
) -> ThemeGroup:
    """
    Create a new group of the given type.

    The name is made unique amongst groups of the same group type.

    Args:
        existing_groups: Current group collection (not modified)
        group_type: Token kind the group aggregates
        overrides: Record fields to use instead of the defaults

    Returns:
        The new ThemeGroup
    """
    group_type = TokenKind(group_type)
    props = overrides or {}

    groups = [
        g if isinstance(g, ThemeGroup) else ThemeGroup.model_validate(g) for g in existing_groups
    ]
    unavailable = [g.name for g in groups if g.group_type == group_type]

    return ThemeGroup(
        id=props.get("id") or create_id(),
        group_type=group_type,
        name=make_available_name(props.get("name") or NEW_GROUP_NAME, unavailable),
        members=list(props.get("members") or []),
    )


def create_variant(
    existing_variants: Iterable[ThemeVariant | dict[str, Any]],
    variant_type: ComponentKind | str,
    overrides: dict[str, Any] | None = None,
) -> ThemeVariant:
    """
    Create a new variant of the given variant type.

    The name is made unique amongst variants of the same variant type only.

    Args:
        existing_variants: Current variant collection (not modified)
        variant_type: Component kind the variant styles
        overrides: Record fields to use instead of the defaults

    Returns:
        The new ThemeVariant
    """
    variant_type = ComponentKind(variant_type)
    props = overrides or {}

    variants = [
        v if isinstance(v, ThemeVariant) else ThemeVariant.model_validate(v)
        for v in existing_variants
    ]
    unavailable = [v.name for v in variants if v.variant_type == variant_type]

    return ThemeVariant(
        id=props.get("id") or create_id(),
        variant_type=variant_type,
        name=make_available_name(props.get("name") or NEW_VARIANT_NAME, unavailable),
        styles=dict(props.get("styles") or {}),
    )
