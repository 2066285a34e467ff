#!/usr/bin/env python3
"""
Async Theme MCP Server using chuk-mcp-server

This server provides MCP tools for authoring and compiling design system
themes. A project keeps its theme values, groups, component styles and
variants in record files listed in `.idsconfig.json`.

The server provides tools for:
- Listing and creating theme values (design tokens)
- Creating groups and component variants
- Looking up which theme property backs a style property
- Compiling and validating the project's theme
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theme.project import ThemeProject
from chuk_mcp_theme.tools import register_compilation_tools, register_record_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theme")

# Project root - the directory holding .idsconfig.json
PROJECT_DIR = Path(os.environ.get("CHUK_THEME_PROJECT", Path.cwd()))

project = ThemeProject(PROJECT_DIR)

# Register all tools
record_tools = register_record_tools(mcp, project)
compilation_tools = register_compilation_tools(mcp, project)

# Export tool functions for direct access
theme_list_tokens = record_tools["theme_list_tokens"]
theme_create_token = record_tools["theme_create_token"]
theme_create_group = record_tools["theme_create_group"]
theme_create_variant = record_tools["theme_create_variant"]
theme_lookup_style = record_tools["theme_lookup_style"]

theme_compile = compilation_tools["theme_compile"]
theme_validate = compilation_tools["theme_validate"]

logger.info("CHUK Theme MCP Server initialized")
logger.info(f"  Project dir: {PROJECT_DIR}")
logger.info(f"  Output: {project.path_for('output')}")
