"""
Record tools - MCP tools for authoring theme records.

Tools for listing tokens, creating tokens, groups and variants, and
looking up which bucket backs a style property.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theme.constants import TokenKind
from chuk_mcp_theme.project import ThemeProject
from chuk_mcp_theme.schema import LITERAL_STYLE_PROPERTIES, property_for_style

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_record_tools(
    mcp: ChukMCPServer,
    project: ThemeProject,
) -> dict[str, Any]:
    """
    Register record authoring tools with the MCP server.

    Args:
        mcp: The MCP server instance
        project: The theme project

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theme_list_tokens(kind: str | None = None) -> str:
        """
        List the project's theme values.

        Args:
            kind: Optional token kind filter (e.g. 'color', 'space')

        Returns:
            JSON string with list of tokens

        Example:
            theme_list_tokens(kind="color")
        """
        try:
            await project.ensure_loaded()
            tokens = project.tokens
            if kind:
                token_kind = TokenKind(kind)
                tokens = [t for t in tokens if t.type == token_kind]

            return json.dumps(
                {
                    "status": "success",
                    "tokens": [t.to_dict() for t in tokens],
                    "count": len(tokens),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_list_tokens"] = theme_list_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def theme_create_token(
        kind: str,
        name: str | None = None,
        value: str | float | None = None,
        groups: list[str] | None = None,
    ) -> str:
        """
        Create a theme value.

        Unset fields take the kind's defaults. A clashing name gets a
        numeric suffix ('Primary' -> 'Primary 2').

        Args:
            kind: Token kind (e.g. 'color', 'space', 'fontSize')
            name: Optional name (named kinds only)
            value: Optional raw style value
            groups: Optional group ids (color tokens only)

        Returns:
            JSON string with the created token

        Example:
            theme_create_token(kind="color", name="Primary", value="#0055FF")
        """
        try:
            overrides: dict[str, Any] = {}
            if name is not None:
                overrides["name"] = name
            if value is not None:
                overrides["value"] = value
            if groups is not None:
                overrides["groups"] = groups

            token = await project.create_token(kind, overrides)
            return json.dumps(
                {
                    "status": "success",
                    "token": token.to_dict(),
                    "message": f"Created {token.type.value} '{token.name or token.value}'",
                }
            )
        except Exception as e:
            logger.exception("Failed to create token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_create_token"] = theme_create_token

    @mcp.tool  # type: ignore[arg-type]
    async def theme_create_group(
        group_type: str,
        name: str | None = None,
        members: list[str] | None = None,
    ) -> str:
        """
        Create a group of same-kind theme values.

        Args:
            group_type: Token kind the group holds (e.g. 'color')
            name: Optional group name
            members: Optional member token ids, in order

        Returns:
            JSON string with the created group

        Example:
            theme_create_group(group_type="color", name="Brand")
        """
        try:
            group = await project.create_group(
                group_type, {"name": name, "members": members or []}
            )
            return json.dumps(
                {
                    "status": "success",
                    "group": group.to_dict(),
                    "message": f"Created group '{group.name}'",
                }
            )
        except Exception as e:
            logger.exception("Failed to create group")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_create_group"] = theme_create_group

    @mcp.tool  # type: ignore[arg-type]
    async def theme_create_variant(
        variant_type: str,
        name: str | None = None,
        styles: dict[str, Any] | None = None,
    ) -> str:
        """
        Create a component variant.

        Style values may be token ids or literal values.

        Args:
            variant_type: Component kind (e.g. 'button', 'text')
            name: Optional variant name
            styles: Optional style property to token id / literal mapping

        Returns:
            JSON string with the created variant

        Example:
            theme_create_variant(variant_type="button", name="Primary")
        """
        try:
            variant = await project.create_variant(
                variant_type, {"name": name, "styles": styles or {}}
            )
            return json.dumps(
                {
                    "status": "success",
                    "variant": variant.to_dict(),
                    "message": f"Created {variant.variant_type.value} variant '{variant.name}'",
                }
            )
        except Exception as e:
            logger.exception("Failed to create variant")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_create_variant"] = theme_create_variant

    @mcp.tool  # type: ignore[arg-type]
    async def theme_lookup_style(style_property: str) -> str:
        """
        Look up which theme property backs a style property.

        Args:
            style_property: Style property name (e.g. 'backgroundColor')

        Returns:
            JSON string with the theme property, or literal/unknown status

        Example:
            theme_lookup_style(style_property="mt")
        """
        bucket = property_for_style(style_property)
        return json.dumps(
            {
                "status": "success",
                "style_property": style_property,
                "theme_property": bucket,
                "literal": style_property in LITERAL_STYLE_PROPERTIES,
                "known": bucket is not None or style_property in LITERAL_STYLE_PROPERTIES,
            }
        )

    tools["theme_lookup_style"] = theme_lookup_style

    return tools
