"""Ledger of blob uploads, written before the record that owns them."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import BlobUpload
from services.storage import StoredBlob

UPLOADED = "uploaded"
ATTACHED = "attached"


class UploadLedger:
    """Track uploads so files whose owner never got saved can be found later.

    ``record`` commits immediately; ``attach`` only stages the status change
    so it lands in the same commit as the owning record.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def record(self, blob: StoredBlob, *, owner_kind: str) -> BlobUpload:
        entry = BlobUpload(
            file_id=blob.file_id,
            name=blob.name,
            link=blob.link,
            owner_kind=owner_kind,
            status=UPLOADED,
        )
        self.session.add(entry)
        await self.session.commit()
        return entry

    def attach(self, entries: Iterable[BlobUpload], owner_id: str) -> None:
        for entry in entries:
            entry.owner_id = owner_id
            entry.status = ATTACHED
            self.session.add(entry)

    async def pending(self) -> list[BlobUpload]:
        """Uploads whose owner record was never written."""

        stmt = select(BlobUpload).where(BlobUpload.status == UPLOADED).order_by(BlobUpload.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
