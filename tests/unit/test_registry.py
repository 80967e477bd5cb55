"""Tests for the tool registry and dispatcher."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel, Field

from freelo_mcp.errors import (
    ClientNotConfiguredError,
    InvalidParamsError,
    ReadOnlyModeError,
    ToolExecutionError,
    UnknownToolError,
)
from freelo_mcp.freelo.errors import FreeloNotFoundError
from freelo_mcp.guards.permissions import ALL_TOOLS, READ_TOOLS, WRITE_TOOLS
from freelo_mcp.registry import ToolDefinition, ToolRegistry, registry


class EchoInput(BaseModel):
    item_id: int = Field(gt=0)
    label: str = "default"


@pytest.fixture
def local_registry():
    reg = ToolRegistry()
    handler = AsyncMock(return_value={"ok": True})
    reg.register(ToolDefinition("echo", "Echo the input", EchoInput, handler))
    return reg, handler


class TestListTools:
    def test_lists_name_description_and_schema(self, local_registry):
        reg, _ = local_registry
        [tool] = reg.list_tools()
        assert tool["name"] == "echo"
        assert tool["description"] == "Echo the input"
        assert tool["input_schema"]["required"] == ["item_id"]
        assert tool["input_schema"]["properties"]["label"]["default"] == "default"

    def test_list_is_repeatable(self):
        assert registry.list_tools() == registry.list_tools()

    def test_every_tool_has_an_object_schema(self):
        for tool in registry.list_tools():
            assert tool["input_schema"]["type"] == "object"

    def test_permission_sets_cover_registered_tools(self):
        assert {definition.name for definition in registry} == ALL_TOOLS
        assert not READ_TOOLS & WRITE_TOOLS

    def test_duplicate_registration_rejected(self, local_registry):
        reg, handler = local_registry
        with pytest.raises(ValueError, match="already registered"):
            reg.register(ToolDefinition("echo", "Again", EchoInput, handler))


class TestCallTool:
    @pytest.mark.asyncio
    async def test_unknown_tool_never_reaches_handler(self, local_registry, mock_client):
        reg, handler = local_registry
        with pytest.raises(UnknownToolError, match="Unknown tool: nope"):
            await reg.call_tool("nope", {"item_id": 1}, mock_client)
        handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_client_reports_config_error(self, local_registry):
        reg, handler = local_registry
        with pytest.raises(ClientNotConfiguredError, match="FREELO_EMAIL"):
            await reg.call_tool(
                "echo",
                {"item_id": "not-even-valid"},
                None,
                config_error="FREELO_EMAIL and FREELO_API_KEY environment variables are required",
            )
        handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_client_has_default_message(self, local_registry):
        reg, _ = local_registry
        with pytest.raises(ClientNotConfiguredError, match="not initialized"):
            await reg.call_tool("echo", {"item_id": 1}, None)

    @pytest.mark.asyncio
    async def test_missing_required_field_lists_the_field(self, mock_client):
        with pytest.raises(InvalidParamsError) as exc_info:
            await registry.call_tool("freelo_get_project", {}, mock_client)
        assert exc_info.value.violations == ["project_id: Field required"]
        assert mock_client.method_calls == []

    @pytest.mark.asyncio
    async def test_each_bad_field_is_reported(self, local_registry, mock_client):
        reg, handler = local_registry
        with pytest.raises(InvalidParamsError) as exc_info:
            await reg.call_tool("echo", {"item_id": 0, "label": 5}, mock_client)
        fields = [v.split(":")[0] for v in exc_info.value.violations]
        assert fields == ["item_id", "label"]
        assert str(exc_info.value).startswith("Invalid parameters: item_id:")
        handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handler_gets_validated_input_with_defaults(self, local_registry, mock_client):
        reg, handler = local_registry
        text = await reg.call_tool("echo", {"item_id": "7"}, mock_client)

        params, client = handler.await_args.args
        assert params == EchoInput(item_id=7, label="default")
        assert client is mock_client
        assert json.loads(text) == {"ok": True}
        assert text == json.dumps({"ok": True}, indent=2)

    @pytest.mark.asyncio
    async def test_none_arguments_treated_as_empty(self, mock_client):
        text = await registry.call_tool("freelo_stop_timer", None, mock_client)
        assert json.loads(text)["success"] is True

    @pytest.mark.asyncio
    async def test_api_error_wrapped_with_original_message(self, local_registry, mock_client):
        reg, handler = local_registry
        handler.side_effect = FreeloNotFoundError("Task not found", 404, "Not Found")
        with pytest.raises(ToolExecutionError) as exc_info:
            await reg.call_tool("echo", {"item_id": 1}, mock_client)
        assert "Task not found" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FreeloNotFoundError)

    @pytest.mark.asyncio
    async def test_messageless_error_uses_fallback(self, local_registry, mock_client):
        reg, handler = local_registry
        handler.side_effect = RuntimeError()
        with pytest.raises(ToolExecutionError, match="Unknown error occurred"):
            await reg.call_tool("echo", {"item_id": 1}, mock_client)

    @pytest.mark.asyncio
    async def test_read_only_blocks_write_tools(self, mock_client):
        with pytest.raises(ReadOnlyModeError, match="READ_ONLY_MODE"):
            await registry.call_tool(
                "freelo_delete_task", {"task_id": 1, "confirm": True}, mock_client, read_only=True
            )
        mock_client.delete_task.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_only_allows_read_tools(self, mock_client):
        mock_client.get_users.return_value = []
        text = await registry.call_tool("freelo_list_users", {}, mock_client, read_only=True)
        assert json.loads(text) == {"count": 0, "users": []}
