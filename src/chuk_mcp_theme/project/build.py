#!/usr/bin/env python3
"""
Build step - compiles a configured project and writes its theme.

Usage:
    chuk-theme-build --project path/to/project
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from chuk_mcp_theme.compiler import ThemeError
from chuk_mcp_theme.constants import CONFIG_FILENAME
from chuk_mcp_theme.project.config import load_config
from chuk_mcp_theme.project.manager import ThemeProject

logger = logging.getLogger(__name__)


async def build_theme(project_dir: Path) -> Path | None:
    """
    Build a project's theme.

    Args:
        project_dir: Project root containing the config file

    Returns:
        Path to the written theme, or None if the config is invalid
    """
    config = load_config(project_dir)
    if config is None:
        return None

    project = ThemeProject(project_dir, config)
    return await project.build()


def main() -> None:
    """Command line entry point."""
    parser = argparse.ArgumentParser(description="Compile a design system theme")
    parser.add_argument(
        "--project",
        type=Path,
        default=Path.cwd(),
        help=f"Project directory containing {CONFIG_FILENAME} (default: cwd)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        output_path = asyncio.run(build_theme(args.project))
    except (FileNotFoundError, ThemeError) as e:
        logger.error(str(e))
        sys.exit(1)

    if output_path is None:
        logger.error(f"Theme not built: {CONFIG_FILENAME} is invalid")
        sys.exit(1)


if __name__ == "__main__":
    main()
