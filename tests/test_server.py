"""
Tests for the server entry point.

Tests cover:
- Startup without a project config
- Startup with an invalid project config
"""

import json
import logging
import sys
from pathlib import Path

import pytest

from chuk_mcp_theme import server


@pytest.fixture
def run_main(monkeypatch: pytest.MonkeyPatch):
    """Run server.main for a project directory, without a cached server module."""

    def run(project: Path) -> None:
        monkeypatch.setenv("CHUK_THEME_PROJECT", str(project))
        monkeypatch.delitem(sys.modules, "chuk_mcp_theme.async_server", raising=False)
        monkeypatch.setattr(sys, "argv", ["chuk-mcp-theme", "--project", str(project)])
        server.main()

    return run


class TestStartup:
    """Tests for server startup."""

    def test_missing_config_exits(self, temp_dir: Path, run_main, caplog):
        """A project without a config file exits with status 1."""
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            run_main(temp_dir)

        assert exc_info.value.code == 1
        assert any(".idsconfig.json" in r.getMessage() for r in caplog.records)

    def test_invalid_config_exits(self, temp_dir: Path, run_main, caplog):
        """A config missing required fields exits with status 1."""
        (temp_dir / ".idsconfig.json").write_text(json.dumps({"values": "values.json"}))

        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            run_main(temp_dir)

        assert exc_info.value.code == 1
        messages = [r.getMessage() for r in caplog.records]
        assert any("'variants'" in m for m in messages)
        assert any("Invalid .idsconfig.json" in m for m in messages)
