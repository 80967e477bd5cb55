"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from freelo_mcp.freelo.client import DEFAULT_BASE_URL
from freelo_mcp.guards.rate_limit import DEFAULT_MAX_CALLS, DEFAULT_PERIOD

MISSING_CREDENTIALS = "FREELO_EMAIL and FREELO_API_KEY environment variables are required"


class FreeloSettings(BaseSettings):
    """Freelo MCP server settings.

    All settings are loaded from environment variables prefixed with FREELO_,
    or from a ``.env`` file in the working directory. Credentials default to
    empty so the server can start without them and report the problem on
    each tool call instead.
    """

    model_config = SettingsConfigDict(
        env_prefix="FREELO_", env_file=".env", extra="ignore"
    )

    # Required for tool calls
    email: str = ""
    api_key: str = ""

    # Optional
    user_agent: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    rate_limit_calls: int = DEFAULT_MAX_CALLS
    rate_limit_period: float = DEFAULT_PERIOD
    read_only_mode: bool = False
    log_level: str = "INFO"

    def credentials_error(self) -> str | None:
        if not self.email or not self.api_key:
            return MISSING_CREDENTIALS
        return None
