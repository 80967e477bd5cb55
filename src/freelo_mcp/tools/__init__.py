"""Tool modules. Importing this package registers every tool with the registry."""

from freelo_mcp.tools import (  # noqa: F401
    comments,
    files,
    projects,
    tasklists,
    tasks,
    timetracking,
    workspace,
)
