"""Logging setup for the freelo_mcp package."""
