"""File tools: download attachments and upload files for use in comments."""

from __future__ import annotations

import asyncio
import base64
import binascii
import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from freelo_mcp.freelo.client import FreeloClient
from freelo_mcp.freelo.models import Attachment
from freelo_mcp.registry import registry


class DownloadFileInput(BaseModel):
    file_uuid: str = Field(min_length=1, description="File UUID from attachment")
    save_to_file: bool = Field(
        False,
        description="If true, save to temp file and return path. "
        "If false (default), return base64 content.",
    )
    filename: str | None = Field(
        None, description="Optional filename for saved file (used with save_to_file)"
    )


class UploadFileInput(BaseModel):
    file_path: str | None = Field(None, description="Path of a local file to upload")
    content_base64: str | None = Field(None, description="Base64-encoded file content")
    filename: str | None = Field(
        None, description="Filename to store (defaults to the name of file_path)"
    )

    @model_validator(mode="after")
    def _one_source(self) -> UploadFileInput:
        if (self.file_path is None) == (self.content_base64 is None):
            raise ValueError("Provide exactly one of file_path or content_base64")
        if self.content_base64 is not None and not self.filename:
            raise ValueError("filename is required with content_base64")
        return self


@registry.tool(
    "freelo_download_file",
    "Download a file attachment from Freelo by its UUID. Returns base64 by default, "
    "or saves to temp file if save_to_file is true.",
    DownloadFileInput,
)
async def download_file(params: DownloadFileInput, client: FreeloClient) -> dict[str, Any]:
    content = await client.download_file(params.file_uuid)

    if params.save_to_file:
        # Only the basename is used so the file always lands in the temp directory.
        name = Path(params.filename).name if params.filename else ""
        if name in ("", ".", ".."):
            name = f"freelo_{params.file_uuid}"
        target = Path(tempfile.gettempdir()) / name
        await asyncio.to_thread(target.write_bytes, content)
        return {
            "success": True,
            "file_uuid": params.file_uuid,
            "saved_to": str(target),
            "size_bytes": len(content),
        }

    return {
        "success": True,
        "file_uuid": params.file_uuid,
        "content_base64": base64.b64encode(content).decode("ascii"),
        "size_bytes": len(content),
    }


@registry.tool(
    "freelo_upload_file",
    "Upload a file to Freelo. Returns the attachment UUID to pass to freelo_add_comment.",
    UploadFileInput,
)
async def upload_file(params: UploadFileInput, client: FreeloClient) -> dict[str, Any]:
    if params.file_path is not None:
        path = Path(params.file_path).expanduser()
        content = await asyncio.to_thread(path.read_bytes)
        filename = params.filename or path.name
    else:
        try:
            content = base64.b64decode(params.content_base64, validate=True)
        except binascii.Error as e:
            raise ValueError(f"content_base64 is not valid base64: {e}") from e
        filename = params.filename

    attachment = Attachment.model_validate(await client.upload_file(content, filename))
    return {
        "success": True,
        "attachment": {
            "uuid": attachment.uuid,
            "name": attachment.name or filename,
            "size": attachment.size if attachment.size is not None else len(content),
            "mime_type": attachment.mime_type,
        },
    }
