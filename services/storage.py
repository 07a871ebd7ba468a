"""Blob storage for job attachments and résumés."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Protocol

from fastapi.concurrency import run_in_threadpool
from googleapiclient.http import MediaIoBaseUpload

from app.config import DRIVE_FOLDER_ID
from services.google_api import GoogleClient

logger = logging.getLogger(__name__)


@dataclass
class StoredBlob:
    file_id: str | None
    name: str
    link: str


class BlobStore(Protocol):
    async def upload(self, name: str, mime_type: str | None, data: bytes) -> StoredBlob:
        ...


class GoogleDriveBlobStore:
    """Upload files into a fixed Drive folder and return their view links."""

    def __init__(
        self,
        credentials_file: Path | None,
        *,
        folder_id: str = DRIVE_FOLDER_ID,
        service: Any = None,
        http_factory: Callable[[], Any] | None = None,
    ) -> None:
        self.folder_id = folder_id
        self.client = GoogleClient("drive", "v3", credentials_file, service=service, http_factory=http_factory)

    async def upload(self, name: str, mime_type: str | None, data: bytes) -> StoredBlob:
        return await run_in_threadpool(self._upload_sync, name, mime_type, data)

    def _upload_sync(self, name: str, mime_type: str | None, data: bytes) -> StoredBlob:
        media = MediaIoBaseUpload(io.BytesIO(data), mimetype=mime_type or "application/octet-stream")
        request = (
            self.client.service()
            .files()
            .create(
                body={"name": name, "parents": [self.folder_id]},
                media_body=media,
                fields="id, webViewLink",
            )
        )
        created = self.client.execute(request)
        logger.info("Uploaded %s to Drive as %s", name, created.get("id"))
        return StoredBlob(file_id=created.get("id"), name=name, link=created["webViewLink"])
