"""
MCP tool implementations.

Tools are organized by domain:
- records - Token, group and variant authoring
- compilation - Theme compilation and validation
"""

from chuk_mcp_theme.tools.compilation import register_compilation_tools
from chuk_mcp_theme.tools.records import register_record_tools

__all__ = [
    "register_compilation_tools",
    "register_record_tools",
]
