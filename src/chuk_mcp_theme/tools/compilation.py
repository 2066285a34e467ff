"""
Compilation tools - MCP tools for theme compilation.

Tools for compiling a project's records into a theme and writing it out.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theme.compiler import ThemeError, summarize_theme
from chuk_mcp_theme.project import ThemeProject

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_compilation_tools(
    mcp: ChukMCPServer,
    project: ThemeProject,
) -> dict[str, Any]:
    """
    Register compilation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        project: The theme project

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theme_compile(write: bool = True) -> str:
        """
        Compile the project's theme.

        Reloads the record files, compiles them and (by default) writes the
        theme to the configured output file.

        Args:
            write: Write the theme to the output file

        Returns:
            JSON string with the compiled theme and bucket counts

        Example:
            theme_compile()
        """
        try:
            await project.load()

            theme = await project.compile()
            output_path = project.write_theme(theme) if write else None

            counts = summarize_theme(theme)
            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path) if output_path else None,
                    "theme": theme,
                    "buckets": counts,
                    "message": f"Compiled theme with {sum(counts.values())} entries",
                }
            )
        except Exception as e:
            logger.exception("Failed to compile theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_compile"] = theme_compile

    @mcp.tool  # type: ignore[arg-type]
    async def theme_validate() -> str:
        """
        Check that the project's records compile.

        Reports the first error that would stop compilation, without
        writing anything.

        Returns:
            JSON string with validation result

        Example:
            theme_validate()
        """
        try:
            await project.load()
            await project.compile()
            return json.dumps(
                {
                    "status": "success",
                    "is_valid": True,
                    "counts": {
                        "values": len(project.tokens),
                        "groups": len(project.groups),
                        "components": len(project.components),
                        "variants": len(project.variants),
                    },
                }
            )
        except ThemeError as e:
            return json.dumps(
                {
                    "status": "success",
                    "is_valid": False,
                    "error": {"type": type(e).__name__, "message": str(e)},
                }
            )
        except Exception as e:
            logger.exception("Failed to validate theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_validate"] = theme_validate

    return tools
