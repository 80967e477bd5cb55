"""Shared pytest configuration."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest

import freelo_mcp.tools  # noqa: F401
from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.registry import registry


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if "integration" not in (config.getoption("-m", default="") or ""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


@pytest.fixture
def mock_client():
    return AsyncMock(spec=FreeloClient)


@pytest.fixture
def call_tool(mock_client):
    """Run a registered tool against ``mock_client`` and decode its JSON output."""

    async def _call(name: str, arguments: dict[str, Any] | None = None) -> Any:
        return json.loads(await registry.call_tool(name, arguments or {}, mock_client))

    return _call
