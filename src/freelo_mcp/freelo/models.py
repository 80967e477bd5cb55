"""Pydantic models for Freelo API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FreeloModel(BaseModel):
    """Lenient base: unknown fields are kept, every field has a default."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        """A declared field sent as null takes its default."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None or k not in cls.model_fields}
        return data

    def get_extra(self, key: str, default: Any = None) -> Any:
        """Return a field the API sent that the model does not declare."""
        return (self.model_extra or {}).get(key, default)


class User(FreeloModel):
    id: int | None = None
    email: str | None = None
    name: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    avatar: str | None = None


class Currency(FreeloModel):
    amount: str | int | float | None = None
    currency: str | None = None


class Label(FreeloModel):
    id: int | None = None
    name: str | None = None
    color: str | None = None


class Subtask(FreeloModel):
    id: int | None = None
    task_id: int | None = None
    name: str | None = None
    position: int | None = None
    is_finished: bool = False
    worker: User | None = None


class Tasklist(FreeloModel):
    id: int | None = None
    project_id: int | None = None
    name: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    position: int | None = None
    tasks_count: int | None = None
    finished_tasks_count: int | None = None


class Project(FreeloModel):
    id: int | None = None
    name: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    currency: Currency | None = None
    budget: Currency | None = None
    color: str | None = None
    project_owner: User | None = None
    workers: list[User] | None = None
    tasklists: list[Tasklist] | None = None
    state_id: int | None = None
    is_template: bool = False
    is_archived: bool = False


class Task(FreeloModel):
    id: int | None = None
    project_id: int | None = None
    tasklist_id: int | None = None
    name: str | None = None
    content: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    finished_at: str | None = None
    due_date: str | None = None
    due_date_end: str | None = None
    position: int | None = None
    worker: User | None = None
    author: User | None = None
    labels: list[Label] | None = None
    subtasks: list[Subtask] | None = None
    comments_count: int | None = None
    attachments_count: int | None = None
    is_finished: bool = False
    is_private: bool = False

    @property
    def worker_name(self) -> str:
        return self.worker.name if self.worker and self.worker.name else "Unassigned"

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels or []]


class Attachment(FreeloModel):
    uuid: str | None = None
    name: str | None = None
    size: int | None = None
    mime_type: str | None = None
    url: str | None = None


class Comment(FreeloModel):
    id: int | None = None
    task_id: int | None = None
    project_id: int | None = None
    content: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    author: User | None = None
    attachments: list[Attachment] | None = None


class WorkReport(FreeloModel):
    id: int | None = None
    task_id: int | None = None
    user_id: int | None = None
    minutes: int = 0
    note: str | None = None
    date_reported: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Notification(FreeloModel):
    id: int | None = None
    type: str | None = None
    project_id: int | None = None
    task_id: int | None = None
    is_read: bool = False
    created_at: str | None = None
    data: Any = None


class PaginatedResult(FreeloModel):
    """One page of a remote listing."""

    total: int = 0
    count: int = 0
    page: int = 0
    per_page: int = 0
    data: list[dict[str, Any]] = Field(default_factory=list)


def name_of(user: User | None) -> str | None:
    return user.name if user else None
