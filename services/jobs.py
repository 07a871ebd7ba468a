"""Job postings: creation with attachments and retrieval."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import UploadFile
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import BlobUpload, Job, new_id, today_iso
from app.schemas import JobCreate
from services.storage import BlobStore
from services.uploads import UploadLedger

logger = logging.getLogger(__name__)


class JobService:
    """Persist job postings and upload their attachments to the blob store."""

    def __init__(self, blob_store: BlobStore) -> None:
        self.blob_store = blob_store

    async def create_job(
        self,
        session: AsyncSession,
        payload: JobCreate,
        attachments: Sequence[UploadFile] = (),
    ) -> Job:
        ledger = UploadLedger(session)
        uploads: list[BlobUpload] = []

        # One at a time, in submission order.
        for attachment in attachments:
            data = await attachment.read()
            blob = await self.blob_store.upload(attachment.filename or "attachment", attachment.content_type, data)
            uploads.append(await ledger.record(blob, owner_kind="job"))

        job = Job(
            id=new_id(),
            **payload.model_dump(),
            attachment_links=[upload.link for upload in uploads],
            date_posted=today_iso(),
        )
        session.add(job)
        ledger.attach(uploads, job.id)
        await session.commit()
        await session.refresh(job)
        logger.info("Created job %s with %d attachment(s)", job.job_id, len(uploads))
        return job

    async def list_jobs(self, session: AsyncSession) -> list[Job]:
        result = await session.execute(select(Job).order_by(Job.created_at))
        return list(result.scalars().all())

    async def get_job(self, session: AsyncSession, job_pk: str) -> Job | None:
        """Look up by the store's own id, not the caller-supplied ``jobId``."""

        return await session.get(Job, job_pk)
