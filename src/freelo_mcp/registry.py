"""Tool registry and dispatcher.

Tools are declared with :meth:`ToolRegistry.tool`, pairing a pydantic input
model with an async handler. :meth:`ToolRegistry.call_tool` is the single
dispatch path: lookup, configuration check, validation, read-only guard,
handler, serialization.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterator

from pydantic import BaseModel, ValidationError

from freelo_mcp.errors import (
    ClientNotConfiguredError,
    InvalidParamsError,
    ToolExecutionError,
    UnknownToolError,
)
from freelo_mcp.guards.read_only import check_read_only

if TYPE_CHECKING:
    from freelo_mcp.freelo.client import FreeloClient

logger = logging.getLogger("freelo_mcp")

Handler = Callable[[Any, "FreeloClient"], Awaitable[Any]]

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_model: type[BaseModel]
    handler: Handler

    def json_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()


def format_violations(error: ValidationError) -> list[str]:
    violations = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "arguments"
        violations.append(f"{field}: {detail['msg']}")
    return violations


def serialize_result(result: Any) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False, default=str)


class ToolRegistry:
    """Name-indexed collection of tool definitions."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, definition: ToolDefinition) -> ToolDefinition:
        if definition.name in self._tools:
            raise ValueError(f"Tool already registered: {definition.name}")
        self._tools[definition.name] = definition
        return definition

    def tool(
        self, name: str, description: str, input_model: type[BaseModel]
    ) -> Callable[[Handler], Handler]:
        """Decorator registering ``handler(params, client)`` as a tool."""

        def decorator(handler: Handler) -> Handler:
            self.register(ToolDefinition(name, description, input_model, handler))
            return handler

        return decorator

    def get(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def list_tools(self) -> list[dict[str, Any]]:
        return [
            {
                "name": definition.name,
                "description": definition.description,
                "input_schema": definition.json_schema(),
            }
            for definition in self._tools.values()
        ]

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any] | None,
        client: FreeloClient | None,
        *,
        config_error: str | None = None,
        read_only: bool = False,
    ) -> str:
        """Validate ``arguments``, run the tool and return its result as JSON text."""
        definition = self.get(name)

        if client is None:
            logger.error("Tool %s called without a configured client: %s", name, config_error)
            raise ClientNotConfiguredError(config_error)

        try:
            params = definition.input_model.model_validate(arguments or {})
        except ValidationError as e:
            raise InvalidParamsError(format_violations(e)) from e

        check_read_only(name, read_only)

        logger.info("Tool called: %s", name)
        logger.debug("Validated input for %s: %s", name, params.model_dump(exclude_none=True))
        start = time.monotonic()
        try:
            result = await definition.handler(params, client)
        except Exception as e:
            logger.warning("Tool %s failed: %r", name, e)
            raise ToolExecutionError(str(e) or UNKNOWN_ERROR_MESSAGE) from e
        finally:
            logger.debug("%s completed in %.3fs", name, time.monotonic() - start)

        return serialize_result(result)


registry = ToolRegistry()
