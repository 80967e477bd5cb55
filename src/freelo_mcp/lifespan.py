"""Server lifespan: creates FreeloClient on startup, closes on shutdown.

A missing or invalid configuration does not stop the server. The error
message is kept and reported by every tool call until the configuration is
fixed and the server restarted.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from pydantic import ValidationError

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.guards.rate_limit import RateLimiter
from freelo_mcp.logging.logger import setup_logger
from freelo_mcp.settings import FreeloSettings

_client: FreeloClient | None = None
_settings: FreeloSettings | None = None
_config_error: str | None = None


def get_freelo_client() -> FreeloClient | None:
    """Return the active FreeloClient, or None if it could not be created."""
    return _client


def get_settings() -> FreeloSettings | None:
    return _settings


def get_config_error() -> str | None:
    return _config_error


def is_read_only() -> bool:
    return bool(_settings and _settings.read_only_mode)


def create_client(settings: FreeloSettings) -> FreeloClient:
    return FreeloClient(
        email=settings.email,
        api_key=settings.api_key,
        user_agent=settings.user_agent,
        base_url=settings.base_url,
        timeout=settings.timeout,
        rate_limiter=RateLimiter(settings.rate_limit_calls, settings.rate_limit_period),
    )


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Async context manager that manages the FreeloClient lifecycle."""
    global _client, _settings, _config_error

    try:
        _settings = FreeloSettings()
    except ValidationError as e:
        _settings = None
        _config_error = f"Invalid Freelo configuration: {e}"

    logger = setup_logger(level=_settings.log_level if _settings else "INFO")

    if _settings is not None:
        _config_error = _settings.credentials_error()
        if _config_error is None:
            _client = create_client(_settings)

    if _client is None:
        logger.error("Freelo client not initialized: %s", _config_error)
    else:
        logger.info(
            "Starting freelo-mcp server (url=%s, email=***, read_only=%s)",
            _settings.base_url,
            _settings.read_only_mode,
        )

    try:
        yield
    finally:
        logger.info("Shutting down freelo-mcp server")
        if _client is not None:
            await _client.close()
        _client = None
        _settings = None
        _config_error = None
