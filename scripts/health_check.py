#!/usr/bin/env python3
"""Validate Freelo MCP configuration and test connectivity."""

import asyncio
import sys

import httpx
from pydantic import ValidationError

from freelo_mcp.freelo.errors import FreeloAPIError
from freelo_mcp.lifespan import create_client
from freelo_mcp.settings import FreeloSettings


async def main() -> int:
    print("Loading settings...")
    try:
        settings = FreeloSettings()
    except ValidationError as e:
        print(f"FAIL: Could not load settings: {e}")
        return 1

    error = settings.credentials_error()
    if error:
        print(f"FAIL: {error}")
        return 1

    print(f"  FREELO_BASE_URL: {settings.base_url}")
    print(f"  FREELO_EMAIL: {settings.email}")
    print(f"  FREELO_API_KEY: {'*' * 8}...{settings.api_key[-4:]}")
    print(f"  FREELO_READ_ONLY_MODE: {settings.read_only_mode}")

    print("\nTesting connectivity...")
    client = create_client(settings)

    try:
        projects = await client.get_projects()
        print(f"  OK: Found {len(projects)} active projects")
        for p in projects[:5]:
            print(f"    - {p.get('id')}: {p.get('name')}")
        if len(projects) > 5:
            print(f"    ... and {len(projects) - 5} more")
        return 0
    except (FreeloAPIError, httpx.HTTPError) as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
