"""Tests for the FastMCP server binding."""

from __future__ import annotations

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from freelo_mcp.guards.permissions import ALL_TOOLS
from freelo_mcp.server import SERVER_NAME, create_server


@pytest.fixture
def unconfigured(monkeypatch, tmp_path):
    monkeypatch.delenv("FREELO_EMAIL", raising=False)
    monkeypatch.delenv("FREELO_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


def test_server_name():
    assert create_server().name == SERVER_NAME


@pytest.mark.asyncio
async def test_lists_every_tool_with_schema(unconfigured):
    async with Client(create_server()) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == ALL_TOOLS
    get_task = next(tool for tool in tools if tool.name == "freelo_get_task")
    assert get_task.inputSchema["required"] == ["task_id"]


@pytest.mark.asyncio
async def test_tool_call_without_credentials_is_an_error(unconfigured):
    async with Client(create_server()) as client:
        with pytest.raises(ToolError, match="FREELO_EMAIL and FREELO_API_KEY"):
            await client.call_tool("freelo_list_projects", {})
