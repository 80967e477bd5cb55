"""Tasklist tools: list, inspect and create tasklists."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.freelo.listing import paginate
from freelo_mcp.freelo.models import Tasklist
from freelo_mcp.registry import registry
from freelo_mcp.tools.validators import PageIndex, PositiveInt, SortOrder


class ListTasklistsInput(BaseModel):
    project_ids: list[int] | None = Field(None, description="Filter by project IDs")
    order_by: str | None = Field(None, description="Field to order by")
    order: SortOrder | None = Field(None, description="Order direction")
    page: PageIndex = 0


class TasklistIdInput(BaseModel):
    tasklist_id: PositiveInt = Field(description="Tasklist ID")


class CreateTasklistInput(BaseModel):
    project_id: PositiveInt = Field(description="Project ID")
    name: str = Field(min_length=1, description="Tasklist name")


@registry.tool(
    "freelo_list_tasklists", "List all tasklists across projects", ListTasklistsInput
)
async def list_tasklists(params: ListTasklistsInput, client: FreeloClient) -> dict[str, Any]:
    response = await client.get_tasklists(
        projects_ids=params.project_ids,
        order_by=params.order_by,
        order=params.order,
        page=params.page,
    )
    result = paginate(response, params.page)
    return {
        "total": result.total,
        "count": result.count,
        "page": result.page,
        "per_page": result.per_page,
        "tasklists": [
            {
                "id": t.id,
                "project_id": t.project_id,
                "name": t.name,
                "position": t.position,
                "tasks_count": t.tasks_count or 0,
                "finished_tasks_count": t.finished_tasks_count or 0,
                "created_at": t.created_at,
            }
            for t in (Tasklist.model_validate(item) for item in result.data)
        ],
    }


@registry.tool(
    "freelo_get_tasklist",
    "Get detailed information about a specific tasklist",
    TasklistIdInput,
)
async def get_tasklist(params: TasklistIdInput, client: FreeloClient) -> dict[str, Any]:
    tasklist = Tasklist.model_validate(await client.get_tasklist(params.tasklist_id))
    tasks_count = tasklist.tasks_count or 0
    finished = tasklist.finished_tasks_count or 0
    return {
        "id": tasklist.id,
        "project_id": tasklist.project_id,
        "name": tasklist.name,
        "created_at": tasklist.created_at,
        "updated_at": tasklist.updated_at,
        "position": tasklist.position,
        "tasks_count": tasks_count,
        "finished_tasks_count": finished,
        "unfinished_tasks_count": tasks_count - finished,
    }


@registry.tool(
    "freelo_create_tasklist", "Create a new tasklist in a project", CreateTasklistInput
)
async def create_tasklist(params: CreateTasklistInput, client: FreeloClient) -> dict[str, Any]:
    tasklist = Tasklist.model_validate(
        await client.create_tasklist(params.project_id, params.name)
    )
    return {
        "success": True,
        "tasklist": {
            "id": tasklist.id,
            "project_id": tasklist.project_id,
            "name": tasklist.name,
            "position": tasklist.position,
        },
    }
