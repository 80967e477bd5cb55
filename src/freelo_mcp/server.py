"""FastMCP server instance exposing every registry tool."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult

import freelo_mcp.tools  # noqa: F401
from freelo_mcp.errors import FreeloMCPError
from freelo_mcp.lifespan import get_config_error, get_freelo_client, is_read_only, lifespan
from freelo_mcp.registry import registry

SERVER_NAME = "freelo-mcp"


class RegistryTool(Tool):
    """Adapter running a registry tool under FastMCP.

    Dispatch errors become ``ToolError`` so the caller receives an error
    result carrying the dispatcher's message.
    """

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            text = await registry.call_tool(
                self.name,
                arguments,
                get_freelo_client(),
                config_error=get_config_error(),
                read_only=is_read_only(),
            )
        except FreeloMCPError as e:
            raise ToolError(str(e)) from e
        return ToolResult(content=text)


def create_server() -> FastMCP:
    server = FastMCP(SERVER_NAME, lifespan=lifespan)
    for definition in registry:
        server.add_tool(
            RegistryTool(
                name=definition.name,
                description=definition.description,
                parameters=definition.json_schema(),
            )
        )
    return server


mcp = create_server()
