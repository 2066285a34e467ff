"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path

import pytest

RED_ID = "0b6f3c1e-2a4d-4c8e-9f10-1a2b3c4d5e6f"
BLUE_ID = "7d9e8f7a-6b5c-4d3e-8f2a-0b1c2d3e4f50"
SPACE_SMALL_ID = "1c2d3e4f-5a6b-4c7d-8e9f-a0b1c2d3e4f5"
SPACE_LARGE_ID = "2d3e4f5a-6b7c-4d8e-9fa0-b1c2d3e4f5a6"


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_values() -> list[dict]:
    """A small set of theme values covering named and list kinds."""
    return [
        {"id": RED_ID, "type": "color", "name": "Red", "value": "#FF0000", "groups": []},
        {"id": BLUE_ID, "type": "color", "name": "Blue", "value": "#0000FF", "groups": []},
        {"id": SPACE_LARGE_ID, "type": "space", "value": 32},
        {"id": SPACE_SMALL_ID, "type": "space", "value": 8},
    ]


@pytest.fixture
def project_dir(temp_dir: Path, sample_values: list[dict]) -> Path:
    """A project directory with a config file and record files."""
    config = {
        "values": "theme/values.json",
        "groups": "theme/groups.json",
        "components": "theme/components.json",
        "variants": "theme/variants.yaml",
        "output": "build/theme.json",
    }
    (temp_dir / ".idsconfig.json").write_text(json.dumps(config))

    theme_dir = temp_dir / "theme"
    theme_dir.mkdir()
    (theme_dir / "values.json").write_text(json.dumps(sample_values))
    (theme_dir / "components.json").write_text(
        json.dumps([{"type": "component", "name": "button", "styles": {"color": RED_ID}}])
    )
    (theme_dir / "variants.yaml").write_text(
        "- id: 9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d\n"
        "  type: variant\n"
        "  variantType: text\n"
        "  name: Loud\n"
        "  styles:\n"
        f"    color: {BLUE_ID}\n"
        "    textTransform: uppercase\n"
    )
    return temp_dir
