"""Guard that blocks write tools when read-only mode is enabled."""

from freelo_mcp.errors import ReadOnlyModeError
from freelo_mcp.guards.permissions import WRITE_TOOLS


def check_read_only(tool_name: str, read_only_mode: bool) -> None:
    """Raise ReadOnlyModeError if ``tool_name`` writes and FREELO_READ_ONLY_MODE is true."""
    if read_only_mode and tool_name in WRITE_TOOLS:
        raise ReadOnlyModeError(tool_name)
