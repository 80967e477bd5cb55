"""Task tools: list, search, inspect, create, update, finish/activate, move and delete tasks."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.freelo.listing import paginate
from freelo_mcp.freelo.models import Task, User, name_of
from freelo_mcp.registry import registry
from freelo_mcp.tools.projects import DELETE_NOT_CONFIRMED
from freelo_mcp.tools.validators import DateString, PageIndex, PositiveInt, SortOrder

# Task detail fields the API sends that are not part of the Task model.
_TASK_DETAIL_EXTRAS = {
    "priority": "priority_enum",
    "state": "state",
    "cost": "cost",
    "minutes": "minutes",
    "total_time_estimate": "total_time_estimate",
    "count_subtasks": "count_subtasks",
    "custom_fields": "custom_fields",
    "project": "project",
    "tasklist": "tasklist",
}


def _person(user: User | None) -> dict[str, Any] | None:
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "email": user.email}


class ListTasksInput(BaseModel):
    project_id: PositiveInt = Field(description="Project ID")
    tasklist_id: PositiveInt = Field(description="Tasklist ID")
    order_by: str | None = Field(None, description="Field to order by")
    order: SortOrder | None = Field(None, description="Order direction")


class GetAllTasksInput(BaseModel):
    search_query: str | None = Field(None, description="Search query")
    state_id: int | None = Field(None, description="State ID (1=active, 2=finished)")
    project_ids: list[int] | None = Field(None, description="Filter by project IDs")
    tasklist_ids: list[int] | None = Field(None, description="Filter by tasklist IDs")
    worker_id: int | None = Field(None, description="Filter by assigned worker ID")
    with_label: str | None = Field(None, description="Filter by label name")
    due_date_range: str | None = Field(
        None, description="Due date range (YYYY-MM-DD..YYYY-MM-DD)"
    )
    order_by: str | None = Field(None, description="Field to order by")
    order: SortOrder | None = Field(None, description="Order direction")
    page: PageIndex = 0


class TaskIdInput(BaseModel):
    task_id: PositiveInt = Field(description="Task ID")


class CreateTaskInput(BaseModel):
    project_id: PositiveInt = Field(description="Project ID")
    tasklist_id: PositiveInt = Field(description="Tasklist ID")
    name: str = Field(min_length=1, description="Task name")
    content: str | None = Field(None, description="Task description")
    worker_id: PositiveInt | None = Field(None, description="Assigned worker ID")
    due_date: DateString | None = Field(None, description="Due date (ISO 8601 format)")
    due_date_end: DateString | None = Field(None, description="Due date end (ISO 8601 format)")
    labels: list[int] | None = Field(None, description="Label IDs to assign")
    subtasks: list[str] | None = Field(None, description="Subtask names")
    is_private: bool | None = Field(None, description="Make task private")


class UpdateTaskInput(BaseModel):
    task_id: PositiveInt = Field(description="Task ID")
    name: str | None = Field(None, description="New task name")
    content: str | None = Field(None, description="New task description")
    worker_id: PositiveInt | None = Field(None, description="New worker ID (null to unassign)")
    due_date: DateString | None = Field(None, description="New due date (null to remove)")
    due_date_end: DateString | None = Field(
        None, description="New due date end (null to remove)"
    )
    labels: list[int] | None = Field(None, description="New label IDs (replaces existing)")
    is_private: bool | None = Field(None, description="Update private status")

    @field_validator("name", "content", "labels", "is_private", mode="before")
    @classmethod
    def _not_clearable(cls, value: Any) -> Any:
        # Only worker_id and the due dates can be cleared with null; the rest may be omitted.
        if value is None:
            raise ValueError("cannot be null")
        return value


class MoveTaskInput(BaseModel):
    task_id: PositiveInt = Field(description="Task ID to move")
    tasklist_id: PositiveInt = Field(description="Target tasklist ID")


class DeleteTaskInput(BaseModel):
    task_id: PositiveInt = Field(description="Task ID to delete")
    confirm: bool = Field(False, description="Confirm deletion (must be true)")


@registry.tool("freelo_list_tasks", "List tasks in a specific tasklist", ListTasksInput)
async def list_tasks(params: ListTasksInput, client: FreeloClient) -> dict[str, Any]:
    tasks = [
        Task.model_validate(t)
        for t in await client.get_tasks(
            params.project_id, params.tasklist_id, order_by=params.order_by, order=params.order
        )
    ]
    return {
        "count": len(tasks),
        "tasks": [
            {
                "id": t.id,
                "name": t.name,
                "worker": t.worker_name,
                "due_date": t.due_date,
                "is_finished": t.is_finished,
                "labels": t.label_names,
                "comments_count": t.comments_count or 0,
                "attachments_count": t.attachments_count or 0,
            }
            for t in tasks
        ],
    }


@registry.tool(
    "freelo_get_all_tasks",
    "Search and list tasks across all projects with filters",
    GetAllTasksInput,
)
async def get_all_tasks(params: GetAllTasksInput, client: FreeloClient) -> dict[str, Any]:
    response = await client.get_all_tasks(
        search_query=params.search_query,
        state_id=params.state_id,
        projects_ids=params.project_ids,
        tasklists_ids=params.tasklist_ids,
        order_by=params.order_by,
        order=params.order,
        with_label=params.with_label,
        due_date_range=params.due_date_range,
        worker_id=params.worker_id,
        page=params.page,
    )
    result = paginate(response, params.page)
    tasks = [Task.model_validate(t) for t in result.data]
    return {
        "total": result.total,
        "count": result.count,
        "page": result.page,
        "per_page": result.per_page,
        "tasks": [
            {
                "id": t.id,
                "name": t.name,
                "project_id": t.project_id,
                "tasklist_id": t.tasklist_id,
                "worker": t.worker_name,
                "author": name_of(t.author),
                "due_date": t.due_date,
                "is_finished": t.is_finished,
                "finished_at": t.finished_at,
                "labels": t.label_names,
            }
            for t in tasks
        ],
    }


@registry.tool(
    "freelo_get_task",
    "Get detailed information about a specific task",
    TaskIdInput,
)
async def get_task(params: TaskIdInput, client: FreeloClient) -> dict[str, Any]:
    """Task details.

    Older API responses use ``date_add``, ``date_edited_at`` and
    ``date_finished`` instead of the ``*_at`` names; both are accepted.
    """
    task = Task.model_validate(await client.get_task(params.task_id))
    detail: dict[str, Any] = {
        "id": task.id,
        "name": task.name,
        "content": task.content,
        "project_id": task.project_id,
        "tasklist_id": task.tasklist_id,
        "created_at": task.created_at or task.get_extra("date_add"),
        "updated_at": task.updated_at or task.get_extra("date_edited_at"),
        "finished_at": task.finished_at or task.get_extra("date_finished"),
        "due_date": task.due_date,
        "due_date_end": task.due_date_end,
        "worker": _person(task.worker),
        "author": _person(task.author),
        "labels": [
            {"id": label.id, "name": label.name, "color": label.color}
            for label in task.labels or []
        ],
        "subtasks": [
            {
                "id": s.id,
                "name": s.name,
                "is_finished": s.is_finished,
                "worker": name_of(s.worker),
            }
            for s in task.subtasks or []
        ],
        "comments": task.get_extra("comments") or [],
    }
    for key, source in _TASK_DETAIL_EXTRAS.items():
        detail[key] = task.get_extra(source)
    detail.update(
        is_finished=task.is_finished,
        is_private=task.is_private,
        comments_count=task.comments_count or 0,
        attachments_count=task.attachments_count or 0,
    )
    return detail


@registry.tool("freelo_create_task", "Create a new task in a tasklist", CreateTaskInput)
async def create_task(params: CreateTaskInput, client: FreeloClient) -> dict[str, Any]:
    fields = params.model_dump(exclude={"project_id", "tasklist_id"}, exclude_none=True)
    task = Task.model_validate(
        await client.create_task(params.project_id, params.tasklist_id, fields)
    )
    return {
        "success": True,
        "task": {
            "id": task.id,
            "name": task.name,
            "worker": task.worker_name,
            "due_date": task.due_date,
            "labels": task.label_names,
        },
    }


@registry.tool("freelo_update_task", "Update an existing task", UpdateTaskInput)
async def update_task(params: UpdateTaskInput, client: FreeloClient) -> dict[str, Any]:
    # Only fields the caller sent; an explicit null clears the field.
    fields = params.model_dump(exclude={"task_id"}, exclude_unset=True)
    task = Task.model_validate(await client.update_task(params.task_id, fields) or {})
    return {
        "success": True,
        "task": {
            "id": task.id if task.id is not None else params.task_id,
            "name": task.name,
            "worker": task.worker_name,
            "due_date": task.due_date,
            "is_private": task.is_private,
        },
    }


@registry.tool("freelo_finish_task", "Mark a task as finished", TaskIdInput)
async def finish_task(params: TaskIdInput, client: FreeloClient) -> dict[str, Any]:
    await client.finish_task(params.task_id)
    return {"success": True, "message": f"Task {params.task_id} has been marked as finished"}


@registry.tool("freelo_activate_task", "Reactivate a finished task", TaskIdInput)
async def activate_task(params: TaskIdInput, client: FreeloClient) -> dict[str, Any]:
    await client.activate_task(params.task_id)
    return {"success": True, "message": f"Task {params.task_id} has been reactivated"}


@registry.tool("freelo_move_task", "Move a task to a different tasklist", MoveTaskInput)
async def move_task(params: MoveTaskInput, client: FreeloClient) -> dict[str, Any]:
    await client.move_task(params.task_id, params.tasklist_id)
    return {
        "success": True,
        "message": f"Task {params.task_id} has been moved to tasklist {params.tasklist_id}",
    }


@registry.tool(
    "freelo_delete_task",
    "Delete a task permanently. Requires confirm=true.",
    DeleteTaskInput,
)
async def delete_task(params: DeleteTaskInput, client: FreeloClient) -> dict[str, Any]:
    if not params.confirm:
        return {"success": False, "error": DELETE_NOT_CONFIRMED}
    await client.delete_task(params.task_id)
    return {"success": True, "message": f"Task {params.task_id} has been permanently deleted"}
