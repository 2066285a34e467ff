"""
Project config - locates the theme record files for a project.

Every project that uses the design system has a `.idsconfig.json` at its
root. Each property is a file path, relative to the config file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_theme.constants import CONFIG_FILENAME, ErrorMessages

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("values", "variants", "output")


class ThemeConfig(BaseModel):
    """Paths to a project's theme records and output."""

    values: str = Field(..., description="Theme values file")
    variants: str = Field(..., description="Theme variants file")
    output: str = Field(..., description="Compiled theme output file")

    # Optional
    groups: str | None = Field(None, description="Theme groups file")
    components: str | None = Field(None, description="Component default styles file")
    entry: str | None = Field(None, description="Application entry point")
    icons: str | None = Field(None, description="Icons directory")

    model_config = {"frozen": True, "extra": "ignore"}

    def resolve(self, base_dir: Path, field_name: str) -> Path | None:
        """Resolve a configured path against the project directory."""
        value = getattr(self, field_name)
        if not value:
            return None
        path = Path(value)
        return path if path.is_absolute() else base_dir / path


@dataclass
class ConfigValidation:
    """Result of validating config data. Every missing field is collected."""

    missing: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.missing

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.missing:
            return "Config is valid"
        return "\n".join(
            ErrorMessages.CONFIG_FIELD_MISSING.format(field=name, filename=CONFIG_FILENAME)
            for name in self.missing
        )


def check_config(data: dict[str, Any]) -> ConfigValidation:
    """Check that every required path is a non-empty string."""
    result = ConfigValidation()
    for name in REQUIRED_FIELDS:
        value = data.get(name)
        if not value or not isinstance(value, str):
            result.missing.append(name)
    return result


def validate_config(data: dict[str, Any]) -> ThemeConfig | None:
    """
    Validate config data.

    Logs one error per missing required field.

    Args:
        data: Parsed config file contents

    Returns:
        ThemeConfig if valid, None if invalid
    """
    result = check_config(data)
    if not result:
        for name in result.missing:
            logger.error(
                ErrorMessages.CONFIG_FIELD_MISSING.format(field=name, filename=CONFIG_FILENAME)
            )
        return None

    return ThemeConfig.model_validate(data)


def load_config(project_dir: Path) -> ThemeConfig | None:
    """
    Load and validate a project's config file.

    Args:
        project_dir: Project root containing the config file

    Returns:
        ThemeConfig if valid, None if invalid

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    path = project_dir / CONFIG_FILENAME
    if not path.exists():
        raise FileNotFoundError(f"No {CONFIG_FILENAME} found in {project_dir}")

    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        logger.error(f"Config file {path} must contain a JSON object")
        return None

    return validate_config(data)
