"""Time tracking tools: start/stop the timer and manage work reports."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.freelo.listing import paginate
from freelo_mcp.freelo.models import WorkReport
from freelo_mcp.registry import registry
from freelo_mcp.tools.validators import DateString, PageIndex, PositiveInt


def _hours(minutes: int) -> str:
    return f"{minutes / 60:.2f}"


class StartTimerInput(BaseModel):
    task_id: PositiveInt = Field(description="Task ID to track time for")
    note: str | None = Field(None, description="Optional note for time tracking")


class StopTimerInput(BaseModel):
    pass


class CreateWorkReportInput(BaseModel):
    task_id: PositiveInt = Field(description="Task ID")
    minutes: PositiveInt = Field(description="Time spent in minutes")
    note: str | None = Field(None, description="Work description")
    date_reported: DateString = Field(description="Date of work (ISO 8601 format)")


class ListWorkReportsInput(BaseModel):
    project_ids: list[int] | None = Field(None, description="Filter by project IDs")
    user_ids: list[int] | None = Field(None, description="Filter by user IDs")
    task_ids: list[int] | None = Field(None, description="Filter by task IDs")
    task_labels: list[str] | None = Field(None, description="Filter by task labels")
    date_reported_range: str | None = Field(
        None, description="Date range (YYYY-MM-DD..YYYY-MM-DD)"
    )
    page: PageIndex = 0


@registry.tool("freelo_start_timer", "Start time tracking for a task", StartTimerInput)
async def start_timer(params: StartTimerInput, client: FreeloClient) -> dict[str, Any]:
    await client.start_time_tracking(params.task_id, note=params.note)
    return {
        "success": True,
        "message": f"Started time tracking for task {params.task_id}",
        "note": params.note,
    }


@registry.tool("freelo_stop_timer", "Stop the currently running time tracker", StopTimerInput)
async def stop_timer(params: StopTimerInput, client: FreeloClient) -> dict[str, Any]:
    await client.stop_time_tracking()
    return {"success": True, "message": "Time tracking stopped"}


@registry.tool(
    "freelo_create_work_report", "Create a work report for a task", CreateWorkReportInput
)
async def create_work_report(
    params: CreateWorkReportInput, client: FreeloClient
) -> dict[str, Any]:
    report = WorkReport.model_validate(
        await client.create_work_report(
            params.task_id,
            minutes=params.minutes,
            date_reported=params.date_reported,
            note=params.note,
        )
    )
    return {
        "success": True,
        "work_report": {
            "id": report.id,
            "task_id": report.task_id,
            "minutes": report.minutes,
            "note": report.note,
            "date_reported": report.date_reported,
            "created_at": report.created_at,
        },
    }


@registry.tool("freelo_list_work_reports", "List work reports with filters", ListWorkReportsInput)
async def list_work_reports(
    params: ListWorkReportsInput, client: FreeloClient
) -> dict[str, Any]:
    """List work reports with per-report hours and page totals.

    Totals cover the returned page only.
    """
    response = await client.get_work_reports(
        projects_ids=params.project_ids,
        users_ids=params.user_ids,
        tasks_ids=params.task_ids,
        tasks_labels=params.task_labels,
        date_reported_range=params.date_reported_range,
        page=params.page,
    )
    result = paginate(response, params.page)
    reports = [WorkReport.model_validate(r) for r in result.data]
    total_minutes = sum(r.minutes for r in reports)
    return {
        "total": result.total,
        "count": result.count,
        "page": result.page,
        "per_page": result.per_page,
        "work_reports": [
            {
                "id": r.id,
                "task_id": r.task_id,
                "user_id": r.user_id,
                "minutes": r.minutes,
                "hours": _hours(r.minutes),
                "note": r.note,
                "date_reported": r.date_reported,
                "created_at": r.created_at,
            }
            for r in reports
        ],
        "total_minutes": total_minutes,
        "total_hours": _hours(total_minutes),
    }
