"""Entry point for running the Freelo MCP server: python -m freelo_mcp"""

from freelo_mcp.server import mcp


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
