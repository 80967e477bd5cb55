"""Freelo MCP server: the Freelo project-management API as MCP tools."""

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.registry import ToolDefinition, ToolRegistry, registry
from freelo_mcp.settings import FreeloSettings

__all__ = ["FreeloClient", "FreeloSettings", "ToolDefinition", "ToolRegistry", "registry"]
