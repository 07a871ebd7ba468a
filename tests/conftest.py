from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from services.storage import StoredBlob


class FakeBlobStore:
    def __init__(self) -> None:
        self.uploads: list[tuple[str, str | None, bytes]] = []

    async def upload(self, name: str, mime_type: str | None, data: bytes) -> StoredBlob:
        self.uploads.append((name, mime_type, data))
        index = len(self.uploads)
        return StoredBlob(file_id=f"file-{index}", name=name, link=f"https://drive.test/{index}/{name}")


class FailingBlobStore:
    async def upload(self, name: str, mime_type: str | None, data: bytes) -> StoredBlob:
        raise RuntimeError("drive unavailable")


class FakeRowAppender:
    def __init__(self, fail: bool = False) -> None:
        self.rows: list[tuple[str, list[str]]] = []
        self.fail = fail

    async def append_row(self, sheet_range: str, values: list[str]) -> None:
        if self.fail:
            raise RuntimeError("sheets unavailable")
        self.rows.append((sheet_range, values))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        data_directory=tmp_path,
        google_credentials=None,
    )


@pytest.fixture
def blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def row_appender() -> FakeRowAppender:
    return FakeRowAppender()


@pytest.fixture
def app(settings, blob_store, row_appender):
    return create_app(settings, blob_store=blob_store, row_appender=row_appender)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
