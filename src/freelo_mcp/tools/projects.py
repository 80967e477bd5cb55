"""Project tools: list, inspect, create, archive/activate and delete projects."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.freelo.listing import paginate
from freelo_mcp.freelo.models import Currency, Project, name_of
from freelo_mcp.registry import registry
from freelo_mcp.tools.validators import CurrencyCode, PageIndex, PositiveInt, SortOrder
from freelo_mcp.utils.formatters import parse_currency

DELETE_NOT_CONFIRMED = "Deletion not confirmed. Set confirm to true to delete."


def _money(value: Currency | None) -> dict[str, Any] | None:
    """Currency block with the cent-encoded amount decoded alongside."""
    if value is None:
        return None
    money = value.model_dump(exclude_none=True)
    amount = value.amount
    if isinstance(amount, int) or (isinstance(amount, str) and amount.lstrip("-").isdigit()):
        money["value"] = parse_currency(amount)
    return money


class ListProjectsInput(BaseModel):
    order_by: str | None = Field(None, description="Field to order by")
    order: SortOrder | None = Field(None, description="Order direction (asc or desc)")


class GetAllProjectsInput(BaseModel):
    page: PageIndex = 0
    order_by: str | None = Field(None, description="Field to order by")
    order: SortOrder | None = Field(None, description="Order direction")
    tags: list[str] | None = Field(None, description="Filter by tags")
    states_ids: list[int] | None = Field(None, description="Filter by state IDs")
    users_ids: list[int] | None = Field(None, description="Filter by user IDs")
    created_in_range: str | None = Field(
        None, description="Date range in format: YYYY-MM-DD..YYYY-MM-DD"
    )


class ProjectIdInput(BaseModel):
    project_id: PositiveInt = Field(description="Project ID")


class CreateProjectInput(BaseModel):
    name: str = Field(min_length=1, description="Project name")
    currency: CurrencyCode = Field(description="Project currency (CZK, EUR, or USD)")
    owner_id: PositiveInt | None = Field(
        None, description="Project owner user ID (defaults to current user)"
    )


class DeleteProjectInput(BaseModel):
    project_id: PositiveInt = Field(description="Project ID to delete")
    confirm: bool = Field(False, description="Confirm deletion (must be true)")


@registry.tool("freelo_list_projects", "List active projects in Freelo", ListProjectsInput)
async def list_projects(params: ListProjectsInput, client: FreeloClient) -> dict[str, Any]:
    projects = [
        Project.model_validate(p)
        for p in await client.get_projects(order_by=params.order_by, order=params.order)
    ]
    return {
        "count": len(projects),
        "projects": [
            {
                "id": p.id,
                "name": p.name,
                "owner": name_of(p.project_owner),
                "currency": p.currency.currency if p.currency else None,
                "workers_count": len(p.workers or []),
                "tasklists_count": len(p.tasklists or []),
                "is_archived": p.is_archived,
                "is_template": p.is_template,
            }
            for p in projects
        ],
    }


@registry.tool(
    "freelo_get_all_projects",
    "Get all projects (active, archived, templates) with pagination",
    GetAllProjectsInput,
)
async def get_all_projects(params: GetAllProjectsInput, client: FreeloClient) -> dict[str, Any]:
    response = await client.get_all_projects(
        order_by=params.order_by,
        order=params.order,
        tags=params.tags,
        states_ids=params.states_ids,
        users_ids=params.users_ids,
        created_in_range=params.created_in_range,
        page=params.page,
    )
    result = paginate(response, params.page)
    projects = [Project.model_validate(p) for p in result.data]
    return {
        "total": result.total,
        "count": result.count,
        "page": result.page,
        "per_page": result.per_page,
        "projects": [
            {
                "id": p.id,
                "name": p.name,
                "owner": name_of(p.project_owner),
                "currency": p.currency.currency if p.currency else None,
                "state_id": p.state_id,
                "is_archived": p.is_archived,
                "is_template": p.is_template,
                "created_at": p.created_at,
            }
            for p in projects
        ],
    }


@registry.tool(
    "freelo_get_project",
    "Get detailed information about a specific project",
    ProjectIdInput,
)
async def get_project(params: ProjectIdInput, client: FreeloClient) -> dict[str, Any]:
    """Project details with owner, workers, tasklists and decoded money amounts."""
    project = Project.model_validate(await client.get_project(params.project_id))
    owner = project.project_owner
    return {
        "id": project.id,
        "name": project.name,
        "created_at": project.created_at,
        "updated_at": project.updated_at,
        "owner": {"id": owner.id, "name": owner.name, "email": owner.email} if owner else None,
        "currency": _money(project.currency),
        "budget": _money(project.budget),
        "color": project.color,
        "workers": [
            {"id": w.id, "name": w.name, "email": w.email} for w in project.workers or []
        ],
        "tasklists": [
            {
                "id": t.id,
                "name": t.name,
                "tasks_count": t.tasks_count,
                "finished_tasks_count": t.finished_tasks_count,
            }
            for t in project.tasklists or []
        ],
        "state_id": project.state_id,
        "is_archived": project.is_archived,
        "is_template": project.is_template,
    }


@registry.tool("freelo_create_project", "Create a new project in Freelo", CreateProjectInput)
async def create_project(params: CreateProjectInput, client: FreeloClient) -> dict[str, Any]:
    project = Project.model_validate(
        await client.create_project(
            name=params.name,
            currency_iso=params.currency,
            project_owner_id=params.owner_id,
        )
    )
    return {
        "success": True,
        "project": {
            "id": project.id,
            "name": project.name,
            "currency": project.currency.currency if project.currency else params.currency,
            "owner": name_of(project.project_owner),
        },
    }


@registry.tool("freelo_archive_project", "Archive an active project", ProjectIdInput)
async def archive_project(params: ProjectIdInput, client: FreeloClient) -> dict[str, Any]:
    await client.archive_project(params.project_id)
    return {"success": True, "message": f"Project {params.project_id} has been archived"}


@registry.tool("freelo_activate_project", "Activate an archived project", ProjectIdInput)
async def activate_project(params: ProjectIdInput, client: FreeloClient) -> dict[str, Any]:
    await client.activate_project(params.project_id)
    return {"success": True, "message": f"Project {params.project_id} has been activated"}


@registry.tool(
    "freelo_delete_project",
    "Permanently delete a project (use with caution). Requires confirm=true.",
    DeleteProjectInput,
)
async def delete_project(params: DeleteProjectInput, client: FreeloClient) -> dict[str, Any]:
    if not params.confirm:
        return {"success": False, "error": DELETE_NOT_CONFIRMED}
    await client.delete_project(params.project_id)
    return {
        "success": True,
        "message": f"Project {params.project_id} has been permanently deleted",
    }
