"""Candidate applications: submission with résumé upload, retrieval with job enrichment."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from fastapi import UploadFile
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Candidate, Job, new_id
from app.schemas import CandidateCreate
from services.storage import BlobStore
from services.uploads import UploadLedger

logger = logging.getLogger(__name__)


class CandidateService:
    def __init__(self, blob_store: BlobStore) -> None:
        self.blob_store = blob_store

    async def create_candidate(
        self,
        session: AsyncSession,
        payload: CandidateCreate,
        resume: UploadFile | None = None,
    ) -> Candidate:
        ledger = UploadLedger(session)
        uploads = []
        resume_link = None

        if resume is not None:
            data = await resume.read()
            blob = await self.blob_store.upload(payload.resume_filename, resume.content_type, data)
            uploads.append(await ledger.record(blob, owner_kind="candidate"))
            resume_link = blob.link

        candidate = Candidate(id=new_id(), **payload.model_dump(), resume_link=resume_link)
        session.add(candidate)
        ledger.attach(uploads, candidate.id)
        await session.commit()
        await session.refresh(candidate)
        logger.info("Stored application of candidate %s for job %s", candidate.candidate_id, candidate.job_id)
        return candidate

    async def list_candidates(self, session: AsyncSession) -> list[tuple[Candidate, Job | None]]:
        result = await session.execute(select(Candidate).order_by(Candidate.created_at))
        candidates = list(result.scalars().all())
        jobs = await self._jobs_by_business_id(session, (c.job_id for c in candidates))
        return [(candidate, jobs.get(candidate.job_id)) for candidate in candidates]

    async def get_by_candidate_id(
        self, session: AsyncSession, candidate_id: str
    ) -> tuple[Candidate, Job | None] | None:
        stmt = (
            select(Candidate)
            .where(Candidate.candidate_id == candidate_id)
            .order_by(Candidate.created_at)
            .limit(1)
        )
        result = await session.execute(stmt)
        candidate = result.scalar_one_or_none()
        if candidate is None:
            return None
        jobs = await self._jobs_by_business_id(session, [candidate.job_id])
        return candidate, jobs.get(candidate.job_id)

    @staticmethod
    async def _jobs_by_business_id(session: AsyncSession, job_ids: Iterable[str | None]) -> dict[str, Job]:
        """Map each referenced ``jobId`` to the earliest job carrying it."""

        wanted = {job_id for job_id in job_ids if job_id}
        if not wanted:
            return {}
        result = await session.execute(select(Job).where(Job.job_id.in_(wanted)).order_by(Job.created_at))
        jobs: dict[str, Job] = {}
        for job in result.scalars().all():
            jobs.setdefault(job.job_id, job)
        return jobs
