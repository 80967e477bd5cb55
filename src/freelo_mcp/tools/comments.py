"""Comment tools: add comments to tasks and list comments across projects."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.freelo.listing import normalize_listing, parse_listing
from freelo_mcp.freelo.models import Comment, name_of
from freelo_mcp.registry import registry
from freelo_mcp.tools.validators import PageIndex, PositiveInt, SortOrder


class AddCommentInput(BaseModel):
    task_id: PositiveInt = Field(description="Task ID")
    content: str = Field(min_length=1, description="Comment content")
    attachment_uuids: list[str] | None = Field(
        None, description="Attachment UUIDs from file uploads"
    )


class ListCommentsInput(BaseModel):
    project_ids: list[int] | None = Field(None, description="Filter by project IDs")
    type: str | None = Field(None, description="Comment type filter")
    order_by: str | None = Field(None, description="Field to order by")
    order: SortOrder | None = Field(None, description="Order direction")
    page: PageIndex = 0


@registry.tool("freelo_add_comment", "Add a comment to a task", AddCommentInput)
async def add_comment(params: AddCommentInput, client: FreeloClient) -> dict[str, Any]:
    """Add a comment, optionally linking files uploaded with freelo_upload_file.

    Returns:
        The created comment with author name and attachment metadata.
    """
    comment = Comment.model_validate(
        await client.create_comment(
            params.task_id, params.content, attachments=params.attachment_uuids
        )
    )
    return {
        "success": True,
        "comment": {
            "id": comment.id,
            "task_id": comment.task_id,
            "author": name_of(comment.author),
            "content": comment.content,
            "created_at": comment.created_at,
            "attachments": [
                {"name": a.name, "size": a.size, "mime_type": a.mime_type}
                for a in comment.attachments or []
            ],
        },
    }


@registry.tool("freelo_list_comments", "List all comments across projects", ListCommentsInput)
async def list_comments(params: ListCommentsInput, client: FreeloClient) -> dict[str, Any]:
    """List comments.

    ``/all-comments`` answers with a bare array or a paginated envelope;
    both come out in the same paginated shape.
    """
    response = await client.get_all_comments(
        projects_ids=params.project_ids,
        type=params.type,
        order_by=params.order_by,
        order=params.order,
        page=params.page,
    )
    result = normalize_listing(parse_listing(response), params.page)
    comments = [Comment.model_validate(c) for c in result.data]
    return {
        "total": result.total,
        "count": result.count,
        "page": result.page,
        "per_page": result.per_page,
        "comments": [
            {
                "id": c.id,
                "task_id": c.task_id,
                "project_id": c.project_id,
                "author": name_of(c.author),
                "content": c.content,
                "created_at": c.created_at,
                "attachments_count": len(c.attachments or []),
            }
            for c in comments
        ],
    }
