"""Workspace tools: users, notifications and full-text search."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.freelo.listing import paginate
from freelo_mcp.freelo.models import Notification, User
from freelo_mcp.registry import registry
from freelo_mcp.tools.validators import PageIndex, PositiveInt


class ListUsersInput(BaseModel):
    pass


class ListNotificationsInput(BaseModel):
    project_ids: list[int] | None = Field(None, description="Filter by project IDs")
    user_ids: list[int] | None = Field(None, description="Filter by user IDs")
    team_uuids: list[str] | None = Field(None, description="Filter by team UUIDs")
    notification_types: list[str] | None = Field(
        None, description="Filter by notification types"
    )
    only_unread: bool | None = Field(None, description="Only unread notifications")
    page: PageIndex = 0


class NotificationIdInput(BaseModel):
    notification_id: PositiveInt = Field(description="Notification ID")


class SearchInput(BaseModel):
    query: str = Field(min_length=1, description="Search query")
    size: PositiveInt | None = Field(None, description="Maximum number of results")
    offset: int | None = Field(None, ge=0, description="Number of results to skip")
    project_ids: list[int] | None = Field(None, description="Filter by project IDs")
    user_ids: list[int] | None = Field(None, description="Filter by user IDs")
    types: list[str] | None = Field(
        None, description="Filter by entity types (e.g. task, project, comment)"
    )


@registry.tool(
    "freelo_list_users", "List users in the workspace (IDs are used to assign tasks)", ListUsersInput
)
async def list_users(params: ListUsersInput, client: FreeloClient) -> dict[str, Any]:
    users = [User.model_validate(u) for u in await client.get_users()]
    return {
        "count": len(users),
        "users": [{"id": u.id, "name": u.name, "email": u.email} for u in users],
    }


@registry.tool(
    "freelo_list_notifications", "List notifications with filters", ListNotificationsInput
)
async def list_notifications(
    params: ListNotificationsInput, client: FreeloClient
) -> dict[str, Any]:
    response = await client.get_notifications(
        projects_ids=params.project_ids,
        users_ids=params.user_ids,
        teams_uuids=params.team_uuids,
        notification_types=params.notification_types,
        only_unread=params.only_unread,
        page=params.page,
    )
    result = paginate(response, params.page)
    notifications = [Notification.model_validate(n) for n in result.data]
    return {
        "total": result.total,
        "count": result.count,
        "page": result.page,
        "per_page": result.per_page,
        "unread_count": sum(1 for n in notifications if not n.is_read),
        "notifications": [
            {
                "id": n.id,
                "type": n.type,
                "project_id": n.project_id,
                "task_id": n.task_id,
                "is_read": n.is_read,
                "created_at": n.created_at,
                "data": n.data,
            }
            for n in notifications
        ],
    }


@registry.tool(
    "freelo_mark_notification_read", "Mark a notification as read", NotificationIdInput
)
async def mark_notification_read(
    params: NotificationIdInput, client: FreeloClient
) -> dict[str, Any]:
    await client.mark_notification_as_read(params.notification_id)
    return {
        "success": True,
        "message": f"Notification {params.notification_id} has been marked as read",
    }


@registry.tool("freelo_search", "Full-text search across projects, tasks and comments", SearchInput)
async def search(params: SearchInput, client: FreeloClient) -> Any:
    filters = {
        key: value
        for key, value in (
            ("projects_ids", params.project_ids),
            ("users_ids", params.user_ids),
            ("types", params.types),
        )
        if value
    }
    return await client.search(
        params.query, size=params.size, offset=params.offset, filters=filters or None
    )
