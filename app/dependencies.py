"""FastAPI dependency helpers.

Everything here reads from ``app.state``, which ``create_app`` fills in.
"""
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from services import BlobStore, RowAppender


async def db_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.sessionmaker() as session:
        yield session


def blob_store_provider(request: Request) -> BlobStore:
    return request.app.state.blob_store


def row_appender_provider(request: Request) -> RowAppender:
    return request.app.state.row_appender
