"""Errors raised by the tool dispatcher."""

from __future__ import annotations


class FreeloMCPError(Exception):
    """Base exception for tool dispatch failures."""


class ConfigurationError(FreeloMCPError):
    """Raised when settings are missing or invalid."""


class ClientNotConfiguredError(ConfigurationError):
    """Raised on a tool call while no Freelo client could be created."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Freelo client not initialized")


class UnknownToolError(FreeloMCPError):
    """Raised when no tool is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidParamsError(FreeloMCPError):
    """Raised when tool arguments fail validation.

    ``violations`` holds one ``"<field>: <problem>"`` entry per failed field.
    """

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__(f"Invalid parameters: {', '.join(violations)}")


class ReadOnlyModeError(FreeloMCPError):
    """Raised when a write tool is called while FREELO_READ_ONLY_MODE is enabled."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Write operation blocked: {name} is disabled because FREELO_READ_ONLY_MODE is enabled.")


class ToolExecutionError(FreeloMCPError):
    """Raised when a tool handler fails, wrapping the original error's message."""
