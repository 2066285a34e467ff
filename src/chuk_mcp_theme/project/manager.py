"""
Theme Project - handles the record lifecycle for a configured project.

Provides async operations for loading, creating, saving and compiling a
project's theme records. File locations come from the project config.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from chuk_mcp_theme.compiler import Theme, compile_theme
from chuk_mcp_theme.constants import CONFIG_FILENAME, ComponentKind, TokenKind
from chuk_mcp_theme.factory import create_group, create_token, create_variant
from chuk_mcp_theme.models import ThemeComponent, ThemeGroup, ThemeValue, ThemeVariant
from chuk_mcp_theme.project.config import ThemeConfig, load_config
from chuk_mcp_theme.project.records import load_records, save_records

logger = logging.getLogger(__name__)


class ThemeProject:
    """
    Manages a project's theme records with file persistence.

    Records are loaded lazily on first use and kept in memory; every
    create operation persists the affected collection.
    """

    def __init__(self, project_dir: Path, config: ThemeConfig | None = None):
        """
        Initialize the project.

        Args:
            project_dir: Project root (paths in the config are relative to it)
            config: Project config; loaded from the config file when omitted

        Raises:
            ValueError: If the config file is invalid
        """
        self.project_dir = project_dir
        if config is None:
            config = load_config(project_dir)
            if config is None:
                raise ValueError(f"Invalid {CONFIG_FILENAME} in {project_dir}")
        self.config = config

        self.tokens: list[ThemeValue] = []
        self.groups: list[ThemeGroup] = []
        self.components: list[ThemeComponent] = []
        self.variants: list[ThemeVariant] = []
        self._loaded = False

    def path_for(self, field_name: str) -> Path | None:
        """Get the resolved path for a config field."""
        return self.config.resolve(self.project_dir, field_name)

    async def load(self) -> None:
        """Load every configured record file."""
        self.tokens = [ThemeValue.model_validate(r) for r in self._load_field("values")]
        self.groups = [ThemeGroup.model_validate(r) for r in self._load_field("groups")]
        self.components = [
            ThemeComponent.model_validate(r) for r in self._load_field("components")
        ]
        self.variants = [ThemeVariant.model_validate(r) for r in self._load_field("variants")]
        self._loaded = True

        logger.debug(
            f"Loaded {len(self.tokens)} values, {len(self.groups)} groups, "
            f"{len(self.components)} components, {len(self.variants)} variants"
        )

    async def save(self) -> None:
        """Write every configured record file."""
        self._save_field("values", [t.to_dict() for t in self.tokens])
        self._save_field("groups", [g.to_dict() for g in self.groups])
        self._save_field("components", [c.to_dict() for c in self.components])
        self._save_field("variants", [v.to_dict() for v in self.variants])

    async def ensure_loaded(self) -> None:
        """Load records if they have not been loaded yet."""
        if not self._loaded:
            await self.load()

    async def create_token(
        self, kind: TokenKind | str, overrides: dict[str, Any] | None = None
    ) -> ThemeValue:
        """
        Create a token, add it to the project and persist the values file.

        Args:
            kind: Token kind
            overrides: Record fields to use instead of the defaults

        Returns:
            The created ThemeValue
        """
        await self.ensure_loaded()
        token = create_token(self.tokens, kind, overrides)
        self.tokens.append(token)
        self._save_field("values", [t.to_dict() for t in self.tokens])
        return token

    async def create_group(
        self, group_type: TokenKind | str, overrides: dict[str, Any] | None = None
    ) -> ThemeGroup:
        """
        Create a group, add it to the project and persist the groups file.

        Raises:
            ValueError: If no groups file is configured
        """
        if self.path_for("groups") is None:
            raise ValueError(f"No groups file configured in {CONFIG_FILENAME}")

        await self.ensure_loaded()
        group = create_group(self.groups, group_type, overrides)
        self.groups.append(group)
        self._save_field("groups", [g.to_dict() for g in self.groups])
        return group

    async def create_variant(
        self, variant_type: ComponentKind | str, overrides: dict[str, Any] | None = None
    ) -> ThemeVariant:
        """Create a variant, add it to the project and persist the variants file."""
        await self.ensure_loaded()
        variant = create_variant(self.variants, variant_type, overrides)
        self.variants.append(variant)
        self._save_field("variants", [v.to_dict() for v in self.variants])
        return variant

    async def compile(self) -> Theme:
        """Compile the project's records into a theme."""
        await self.ensure_loaded()
        return compile_theme(
            self.tokens,
            groups=self.groups,
            components=self.components,
            variants=self.variants,
        )

    async def build(self) -> Path:
        """
        Compile the project and write the theme to the configured output.

        Returns:
            Path to the written theme file
        """
        return self.write_theme(await self.compile())

    def write_theme(self, theme: Theme) -> Path:
        """Write a compiled theme to the configured output file."""
        output_path = self.path_for("output")
        if output_path is None:
            raise ValueError(f"No output file configured in {CONFIG_FILENAME}")
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump(theme, f, indent=2)
            f.write("\n")

        logger.info(f"Wrote theme to {output_path}")
        return output_path

    def _load_field(self, field_name: str) -> list[dict[str, Any]]:
        path = self.path_for(field_name)
        if path is None:
            return []
        return load_records(path)

    def _save_field(self, field_name: str, records: list[dict[str, Any]]) -> None:
        path = self.path_for(field_name)
        if path is None:
            return
        save_records(path, records)
