"""Tests for comment tools using a mocked FreeloClient."""

from __future__ import annotations

import pytest

from freelo_mcp.errors import ToolExecutionError

COMMENTS = [
    {"id": 1, "task_id": 10, "content": "First", "author": {"name": "Eva"}},
    {"id": 2, "task_id": 10, "content": "Second", "attachments": [{"uuid": "a"}]},
    {"id": 3, "task_id": 11, "content": "Third"},
]


@pytest.mark.asyncio
async def test_list_comments_bare_array_is_normalized(call_tool, mock_client):
    mock_client.get_all_comments.return_value = COMMENTS

    result = await call_tool("freelo_list_comments")

    assert result["total"] == 3
    assert result["count"] == 3
    assert result["per_page"] == 3
    assert result["page"] == 0
    assert [c["id"] for c in result["comments"]] == [1, 2, 3]
    assert result["comments"][0]["author"] == "Eva"
    assert result["comments"][1]["attachments_count"] == 1


@pytest.mark.asyncio
async def test_list_comments_bare_and_envelope_agree(call_tool, mock_client):
    """Both response shapes produce the same output for the same items."""
    mock_client.get_all_comments.return_value = COMMENTS
    bare = await call_tool("freelo_list_comments")

    mock_client.get_all_comments.return_value = {
        "total": 3,
        "count": 3,
        "page": 0,
        "per_page": 3,
        "data": COMMENTS,
    }
    envelope = await call_tool("freelo_list_comments")

    assert bare == envelope


@pytest.mark.asyncio
async def test_list_comments_passes_filters(call_tool, mock_client):
    mock_client.get_all_comments.return_value = []

    await call_tool("freelo_list_comments", {"project_ids": [1, 2], "order": "asc", "page": 3})

    mock_client.get_all_comments.assert_awaited_once_with(
        projects_ids=[1, 2], type=None, order_by=None, order="asc", page=3
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", ["oops", {"data": "nope"}, None])
async def test_list_comments_rejects_malformed_payload(call_tool, mock_client, payload):
    mock_client.get_all_comments.return_value = payload

    with pytest.raises(ToolExecutionError, match="Invalid listing response"):
        await call_tool("freelo_list_comments")


@pytest.mark.asyncio
async def test_add_comment_with_attachments(call_tool, mock_client):
    mock_client.create_comment.return_value = {
        "id": 50,
        "task_id": 10,
        "content": "See file",
        "author": {"name": "Eva"},
        "attachments": [{"uuid": "abc", "name": "brief.pdf", "size": 120, "mime_type": "application/pdf"}],
    }

    result = await call_tool(
        "freelo_add_comment",
        {"task_id": 10, "content": "See file", "attachment_uuids": ["abc"]},
    )

    assert result["comment"]["author"] == "Eva"
    assert result["comment"]["attachments"] == [
        {"name": "brief.pdf", "size": 120, "mime_type": "application/pdf"}
    ]
    mock_client.create_comment.assert_awaited_once_with(10, "See file", attachments=["abc"])
