"""Async Freelo REST API v1 client using httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from freelo_mcp.freelo.errors import (
    FreeloAPIError,
    FreeloAuthenticationError,
    FreeloNotFoundError,
    FreeloPermissionError,
    FreeloRateLimitError,
    FreeloValidationError,
)
from freelo_mcp.guards.rate_limit import RateLimiter

logger = logging.getLogger("freelo_mcp")

DEFAULT_BASE_URL = "https://api.freelo.io/v1"

_ERROR_MAP: dict[int, type[FreeloAPIError]] = {
    400: FreeloValidationError,
    401: FreeloAuthenticationError,
    403: FreeloPermissionError,
    404: FreeloNotFoundError,
    422: FreeloValidationError,
    429: FreeloRateLimitError,
}

_LOG_BODY_LIMIT = 200


def _query(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset values and use the ``key[]`` convention for list values."""
    if not params:
        return None
    query: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            query[f"{key}[]"] = list(value)
        else:
            query[key] = value
    return query or None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return "Unknown error"
    if isinstance(body, dict):
        if body.get("message"):
            return str(body["message"])
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e) for e in errors)
        if isinstance(errors, str) and errors:
            return errors
    return "Unknown error"


class FreeloClient:
    """Async wrapper around the Freelo REST API v1.

    Every request passes through the client's own rate limiter and carries
    basic-auth credentials (account email and API key).
    """

    def __init__(
        self,
        email: str,
        api_key: str,
        user_agent: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        rate_limiter: RateLimiter | None = None,
    ):
        self.rate_limiter = rate_limiter or RateLimiter()
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            auth=(email, api_key),
            headers={
                "User-Agent": user_agent or f"FreeloMCP/1.0 ({email})",
                "Accept": "application/json",
            },
            timeout=timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> FreeloClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        files: dict[str, Any] | None = None,
        binary: bool = False,
    ) -> Any:
        await self.rate_limiter.acquire()

        headers: dict[str, str] = {}
        if binary:
            headers["Accept"] = "*/*"
        elif files is None:
            headers["Content-Type"] = "application/json"

        query = _query(params)
        logger.debug("HTTP %s %s %s", method, path, query or "")
        response = await self._client.request(
            method, path, params=query, json=json, files=files, headers=headers
        )
        self._log_response(method, path, response, binary)

        if response.status_code >= 400:
            error_cls = _ERROR_MAP.get(response.status_code, FreeloAPIError)
            raise error_cls(
                message=_error_message(response),
                status_code=response.status_code,
                error=response.reason_phrase,
            )
        if binary:
            return response.content
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _log_response(method: str, path: str, response: httpx.Response, binary: bool) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        if binary:
            preview = f"<{len(response.content)} bytes>"
        else:
            preview = response.text
            if len(preview) > _LOG_BODY_LIMIT:
                preview = preview[:_LOG_BODY_LIMIT] + "..."
        logger.debug("HTTP %s %s -> %d: %s", method, path, response.status_code, preview)

    async def _get(self, path: str, **params: Any) -> Any:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, json: Any = None) -> Any:
        return await self._request("POST", path, json=json)

    async def _delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def get_projects(
        self, order_by: str | None = None, order: str | None = None
    ) -> list[dict[str, Any]]:
        return await self._get("/projects", order_by=order_by, order=order)

    async def get_all_projects(
        self,
        order_by: str | None = None,
        order: str | None = None,
        tags: list[str] | None = None,
        states_ids: list[int] | None = None,
        users_ids: list[int] | None = None,
        created_in_range: str | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        return await self._get(
            "/all-projects",
            order_by=order_by,
            order=order,
            tags=tags,
            states_ids=states_ids,
            users_ids=users_ids,
            created_in_range=created_in_range,
            p=page,
        )

    async def get_project(self, project_id: int) -> dict[str, Any]:
        return await self._get(f"/project/{project_id}")

    async def create_project(
        self, name: str, currency_iso: str, project_owner_id: int | None = None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": name, "currency_iso": currency_iso}
        if project_owner_id is not None:
            payload["project_owner_id"] = project_owner_id
        return await self._post("/projects", json=payload)

    async def archive_project(self, project_id: int) -> None:
        await self._post(f"/project/{project_id}/archive")

    async def activate_project(self, project_id: int) -> None:
        await self._post(f"/project/{project_id}/activate")

    async def delete_project(self, project_id: int) -> None:
        await self._delete(f"/project/{project_id}")

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def get_tasks(
        self,
        project_id: int,
        tasklist_id: int,
        order_by: str | None = None,
        order: str | None = None,
    ) -> list[dict[str, Any]]:
        return await self._get(
            f"/project/{project_id}/tasklist/{tasklist_id}/tasks",
            order_by=order_by,
            order=order,
        )

    async def get_all_tasks(
        self,
        search_query: str | None = None,
        state_id: int | None = None,
        projects_ids: list[int] | None = None,
        tasklists_ids: list[int] | None = None,
        order_by: str | None = None,
        order: str | None = None,
        with_label: str | None = None,
        due_date_range: str | None = None,
        worker_id: int | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        return await self._get(
            "/all-tasks",
            search_query=search_query,
            state_id=state_id,
            projects_ids=projects_ids,
            tasklists_ids=tasklists_ids,
            order_by=order_by,
            order=order,
            with_label=with_label,
            due_date_range=due_date_range,
            worker_id=worker_id,
            p=page,
        )

    async def get_task(self, task_id: int) -> dict[str, Any]:
        return await self._get(f"/task/{task_id}")

    async def create_task(
        self, project_id: int, tasklist_id: int, fields: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._post(
            f"/project/{project_id}/tasklist/{tasklist_id}/tasks", json=fields
        )

    async def update_task(self, task_id: int, fields: dict[str, Any]) -> dict[str, Any]:
        """Update a task. A ``None`` value in ``fields`` clears that field."""
        return await self._post(f"/task/{task_id}", json=fields)

    async def finish_task(self, task_id: int) -> None:
        await self._post(f"/task/{task_id}/finish")

    async def activate_task(self, task_id: int) -> None:
        await self._post(f"/task/{task_id}/activate")

    async def move_task(self, task_id: int, tasklist_id: int) -> None:
        await self._post(f"/task/{task_id}/move/{tasklist_id}")

    async def delete_task(self, task_id: int) -> None:
        await self._delete(f"/task/{task_id}")

    # ------------------------------------------------------------------
    # Tasklists
    # ------------------------------------------------------------------

    async def get_tasklists(
        self,
        projects_ids: list[int] | None = None,
        order_by: str | None = None,
        order: str | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        return await self._get(
            "/all-tasklists",
            projects_ids=projects_ids,
            order_by=order_by,
            order=order,
            p=page,
        )

    async def get_tasklist(self, tasklist_id: int) -> dict[str, Any]:
        return await self._get(f"/tasklist/{tasklist_id}")

    async def create_tasklist(self, project_id: int, name: str) -> dict[str, Any]:
        return await self._post(f"/project/{project_id}/tasklists", json={"name": name})

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def create_comment(
        self, task_id: int, content: str, attachments: list[str] | None = None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"content": content}
        if attachments:
            payload["attachments"] = attachments
        return await self._post(f"/task/{task_id}/comments", json=payload)

    async def get_all_comments(
        self,
        projects_ids: list[int] | None = None,
        type: str | None = None,
        order_by: str | None = None,
        order: str | None = None,
        page: int | None = None,
    ) -> Any:
        """List comments. The API answers with either a bare list or a paginated envelope."""
        return await self._get(
            "/all-comments",
            projects_ids=projects_ids,
            type=type,
            order_by=order_by,
            order=order,
            p=page,
        )

    # ------------------------------------------------------------------
    # Time tracking and work reports
    # ------------------------------------------------------------------

    async def start_time_tracking(self, task_id: int, note: str | None = None) -> None:
        payload: dict[str, Any] = {"task_id": task_id}
        if note is not None:
            payload["note"] = note
        await self._post("/timetracking/start", json=payload)

    async def stop_time_tracking(self) -> None:
        await self._post("/timetracking/stop")

    async def create_work_report(
        self, task_id: int, minutes: int, date_reported: str, note: str | None = None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"minutes": minutes, "date_reported": date_reported}
        if note is not None:
            payload["note"] = note
        return await self._post(f"/task/{task_id}/work-reports", json=payload)

    async def get_work_reports(
        self,
        projects_ids: list[int] | None = None,
        users_ids: list[int] | None = None,
        tasks_ids: list[int] | None = None,
        tasks_labels: list[str] | None = None,
        date_reported_range: str | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        return await self._get(
            "/work-reports",
            projects_ids=projects_ids,
            users_ids=users_ids,
            tasks_ids=tasks_ids,
            tasks_labels=tasks_labels,
            date_reported_range=date_reported_range,
            p=page,
        )

    # ------------------------------------------------------------------
    # Users and notifications
    # ------------------------------------------------------------------

    async def get_users(self) -> list[dict[str, Any]]:
        return await self._get("/users")

    async def get_notifications(
        self,
        projects_ids: list[int] | None = None,
        users_ids: list[int] | None = None,
        teams_uuids: list[str] | None = None,
        notification_types: list[str] | None = None,
        only_unread: bool | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        return await self._get(
            "/all-notifications",
            projects_ids=projects_ids,
            users_ids=users_ids,
            teams_uuids=teams_uuids,
            notification_types=notification_types,
            only_unread=only_unread,
            p=page,
        )

    async def mark_notification_as_read(self, notification_id: int) -> None:
        await self._post(f"/notification/{notification_id}/mark-as-read")

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(
        self,
        query: str,
        size: int | None = None,
        offset: int | None = None,
        filters: dict[str, Any] | None = None,
    ) -> Any:
        payload: dict[str, Any] = {"query": query}
        if size is not None:
            payload["size"] = size
        if offset is not None:
            payload["from"] = offset
        if filters:
            payload["filters"] = filters
        return await self._post("/search", json=payload)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    async def upload_file(self, content: bytes, filename: str) -> dict[str, Any]:
        return await self._request("POST", "/file/upload", files={"file": (filename, content)})

    async def download_file(self, file_uuid: str) -> bytes:
        return await self._request("GET", f"/file/{file_uuid}", binary=True)
