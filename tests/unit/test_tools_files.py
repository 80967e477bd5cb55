"""Tests for file tools using a mocked FreeloClient."""

from __future__ import annotations

import base64
import tempfile
from pathlib import Path

import pytest

from freelo_mcp.errors import InvalidParamsError, ToolExecutionError


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "gettempdir", lambda: str(tmp_path))
    return tmp_path


@pytest.mark.asyncio
async def test_download_returns_base64(call_tool, mock_client):
    mock_client.download_file.return_value = b"\x00\x01binary"

    result = await call_tool("freelo_download_file", {"file_uuid": "abc"})

    assert base64.b64decode(result["content_base64"]) == b"\x00\x01binary"
    assert result["size_bytes"] == 8
    assert "saved_to" not in result


@pytest.mark.asyncio
async def test_download_saves_to_temp_dir(call_tool, mock_client, temp_dir):
    mock_client.download_file.return_value = b"report"

    result = await call_tool(
        "freelo_download_file", {"file_uuid": "abc", "save_to_file": True, "filename": "report.pdf"}
    )

    assert result["saved_to"] == str(temp_dir / "report.pdf")
    assert (temp_dir / "report.pdf").read_bytes() == b"report"


@pytest.mark.asyncio
async def test_download_strips_directories_from_filename(call_tool, mock_client, temp_dir):
    mock_client.download_file.return_value = b"x"

    result = await call_tool(
        "freelo_download_file",
        {"file_uuid": "abc", "save_to_file": True, "filename": "../../etc/passwd"},
    )

    assert Path(result["saved_to"]) == temp_dir / "passwd"


@pytest.mark.asyncio
async def test_download_default_filename(call_tool, mock_client, temp_dir):
    mock_client.download_file.return_value = b"x"

    result = await call_tool("freelo_download_file", {"file_uuid": "abc", "save_to_file": True})

    assert Path(result["saved_to"]) == temp_dir / "freelo_abc"


@pytest.mark.asyncio
async def test_upload_base64_content(call_tool, mock_client):
    mock_client.upload_file.return_value = {"uuid": "u-1", "name": "notes.txt"}

    result = await call_tool(
        "freelo_upload_file",
        {"content_base64": base64.b64encode(b"hello").decode(), "filename": "notes.txt"},
    )

    assert result["attachment"] == {
        "uuid": "u-1",
        "name": "notes.txt",
        "size": 5,
        "mime_type": None,
    }
    mock_client.upload_file.assert_awaited_once_with(b"hello", "notes.txt")


@pytest.mark.asyncio
async def test_upload_local_file(call_tool, mock_client, tmp_path):
    source = tmp_path / "diagram.png"
    source.write_bytes(b"png-bytes")
    mock_client.upload_file.return_value = {"uuid": "u-2", "size": 9}

    result = await call_tool("freelo_upload_file", {"file_path": str(source)})

    assert result["attachment"]["name"] == "diagram.png"
    mock_client.upload_file.assert_awaited_once_with(b"png-bytes", "diagram.png")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments",
    [
        {},
        {"file_path": "/tmp/a", "content_base64": "aGk=", "filename": "a"},
        {"content_base64": "aGk="},
    ],
)
async def test_upload_input_validation(call_tool, mock_client, arguments):
    with pytest.raises(InvalidParamsError):
        await call_tool("freelo_upload_file", arguments)
    mock_client.upload_file.assert_not_awaited()


@pytest.mark.asyncio
async def test_upload_rejects_invalid_base64(call_tool, mock_client):
    with pytest.raises(ToolExecutionError, match="not valid base64"):
        await call_tool("freelo_upload_file", {"content_base64": "***", "filename": "a.txt"})
    mock_client.upload_file.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("filename", ["..", ".", "sub/.."])
async def test_download_dot_filename_uses_default(call_tool, mock_client, temp_dir, filename):
    mock_client.download_file.return_value = b"x"

    result = await call_tool(
        "freelo_download_file", {"file_uuid": "abc", "save_to_file": True, "filename": filename}
    )

    assert Path(result["saved_to"]) == temp_dir / "freelo_abc"
    assert (temp_dir / "freelo_abc").read_bytes() == b"x"
