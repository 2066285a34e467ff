"""
Tests for MCP tools.

Tests the MCP tool implementations for record authoring and compilation.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_theme.project import ThemeProject, load_records
from chuk_mcp_theme.tools import register_compilation_tools, register_record_tools

from .conftest import BLUE_ID, RED_ID


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def project(project_dir: Path) -> ThemeProject:
    """Theme project for the sample project directory."""
    return ThemeProject(project_dir)


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self, project: ThemeProject):
        """Every tool is registered with the server."""
        mcp = MockMCPServer("test")
        record_tools = register_record_tools(mcp, project)
        compilation_tools = register_compilation_tools(mcp, project)

        assert set(mcp.tools) == set(record_tools) | set(compilation_tools)
        assert "theme_compile" in mcp.tools
        assert "theme_create_variant" in mcp.tools


class TestRecordTools:
    """Tests for record authoring tools."""

    @pytest.mark.asyncio
    async def test_list_tokens(self, project: ThemeProject):
        """List every token."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_list_tokens"]())
        assert data["status"] == "success"
        assert data["count"] == 4

    @pytest.mark.asyncio
    async def test_list_tokens_by_kind(self, project: ThemeProject):
        """Filter tokens by kind."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_list_tokens"](kind="color"))
        assert [t["name"] for t in data["tokens"]] == ["Red", "Blue"]

    @pytest.mark.asyncio
    async def test_list_tokens_unknown_kind(self, project: ThemeProject):
        """Unknown kinds are reported as errors."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_list_tokens"](kind="gradient"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_create_token(self, project: ThemeProject, project_dir: Path):
        """Create a token with a clashing name."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(
            await tools["theme_create_token"](kind="color", name="Blue", value="#0000EE")
        )
        assert data["status"] == "success"
        assert data["token"]["name"] == "Blue 2"
        assert data["token"]["value"] == "#0000EE"
        assert len(load_records(project_dir / "theme" / "values.json")) == 5

    @pytest.mark.asyncio
    async def test_create_token_defaults(self, project: ThemeProject):
        """Unset fields take the kind's defaults."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_create_token"](kind="fontWeight"))
        assert data["token"]["name"] == "New Font Weight"
        assert data["token"]["value"] == 600

    @pytest.mark.asyncio
    async def test_create_group(self, project: ThemeProject):
        """Create a group."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(
            await tools["theme_create_group"](group_type="color", members=[RED_ID, BLUE_ID])
        )
        assert data["status"] == "success"
        assert data["group"]["name"] == "New Group"
        assert data["group"]["groupType"] == "color"
        assert data["group"]["members"] == [RED_ID, BLUE_ID]

    @pytest.mark.asyncio
    async def test_create_variant(self, project: ThemeProject):
        """Create a variant with a clashing name."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(
            await tools["theme_create_variant"](
                variant_type="text", name="Loud", styles={"fontStyle": "italic"}
            )
        )
        assert data["status"] == "success"
        assert data["variant"]["name"] == "Loud 2"
        assert data["variant"]["variantType"] == "text"

    @pytest.mark.asyncio
    async def test_create_variant_unknown_type(self, project: ThemeProject):
        """Unknown component kinds are reported as errors."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_create_variant"](variant_type="carousel"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_lookup_style(self, project: ThemeProject):
        """Look up token-backed, literal and unknown style properties."""
        tools = register_record_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_lookup_style"](style_property="backgroundColor"))
        assert data["theme_property"] == "colors"
        assert data["known"] is True

        data = json.loads(await tools["theme_lookup_style"](style_property="textTransform"))
        assert data["theme_property"] is None
        assert data["literal"] is True

        data = json.loads(await tools["theme_lookup_style"](style_property="glow"))
        assert data["known"] is False


class TestCompilationTools:
    """Tests for compilation tools."""

    @pytest.mark.asyncio
    async def test_compile(self, project: ThemeProject, project_dir: Path):
        """Compile and write the theme."""
        tools = register_compilation_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_compile"]())
        assert data["status"] == "success"
        assert data["theme"]["buttons"]["button"]["color"] == "#FF0000"
        assert data["buckets"]["colors"] == 2
        assert Path(data["path"]) == project_dir / "build" / "theme.json"
        assert Path(data["path"]).exists()

    @pytest.mark.asyncio
    async def test_compile_without_write(self, project: ThemeProject, project_dir: Path):
        """Compile without writing."""
        tools = register_compilation_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_compile"](write=False))
        assert data["status"] == "success"
        assert data["path"] is None
        assert not (project_dir / "build" / "theme.json").exists()

    @pytest.mark.asyncio
    async def test_compile_error(self, project: ThemeProject):
        """Compilation errors are reported."""
        await project.create_group("color", {"name": "Broken", "members": ["missing"]})
        tools = register_compilation_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_compile"]())
        assert data["status"] == "error"
        assert "missing" in data["message"]

    @pytest.mark.asyncio
    async def test_validate(self, project: ThemeProject):
        """A valid project reports record counts."""
        tools = register_compilation_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_validate"]())
        assert data["is_valid"] is True
        assert data["counts"] == {"values": 4, "groups": 0, "components": 1, "variants": 1}

    @pytest.mark.asyncio
    async def test_validate_reports_error_type(self, project: ThemeProject):
        """An invalid project reports the error type."""
        await project.create_variant("button", {"name": "Odd", "styles": {"glow": "1"}})
        tools = register_compilation_tools(MockMCPServer("test"), project)

        data = json.loads(await tools["theme_validate"]())
        assert data["status"] == "success"
        assert data["is_valid"] is False
        assert data["error"]["type"] == "UnknownStylePropertyError"
