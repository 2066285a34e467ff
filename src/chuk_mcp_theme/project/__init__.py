"""
Project management - config, record files and the build step.

This module provides:
- ThemeConfig / load_config: The project's `.idsconfig.json`
- load_records / save_records: JSON or YAML record files
- ThemeProject: Record lifecycle for a configured project
- build_theme: Compile a project and write its theme
"""

from chuk_mcp_theme.project.build import build_theme
from chuk_mcp_theme.project.config import (
    REQUIRED_FIELDS,
    ConfigValidation,
    ThemeConfig,
    check_config,
    load_config,
    validate_config,
)
from chuk_mcp_theme.project.manager import ThemeProject
from chuk_mcp_theme.project.records import load_records, save_records

__all__ = [
    "REQUIRED_FIELDS",
    "ConfigValidation",
    "ThemeConfig",
    "ThemeProject",
    "build_theme",
    "check_config",
    "load_config",
    "load_records",
    "save_records",
    "validate_config",
]
