"""Structured evaluation results keyed by candidate id."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.coercion import as_list, is_blank
from app.models import Evaluation
from app.schemas import EvaluationCreate


class MissingEvaluationFields(ValueError):
    pass


class EvaluationService:
    """Store evaluations as submitted.

    Only ``candidateId`` and ``evaluationResults`` are checked. ``ScoresFactor``
    is passed through, so an omitted value falls back to the column default
    (an empty list). Neither the candidate's existence nor an earlier
    evaluation for the same candidate is checked.
    """

    async def save(self, session: AsyncSession, payload: EvaluationCreate) -> Evaluation:
        if not payload.candidate_id or is_blank(payload.evaluation_results):
            raise MissingEvaluationFields("candidateId and evaluationResults are required")

        evaluation = Evaluation(
            candidate_id=str(payload.candidate_id),
            evaluation_results=as_list(payload.evaluation_results),
        )
        if payload.scores_factor is not None:
            evaluation.scores_factor = as_list(payload.scores_factor)
        session.add(evaluation)
        await session.commit()
        await session.refresh(evaluation)
        return evaluation

    async def get_for_candidate(self, session: AsyncSession, candidate_id: str) -> Evaluation | None:
        """Earliest stored evaluation for the candidate."""

        stmt = (
            select(Evaluation)
            .where(Evaluation.candidate_id == candidate_id)
            .order_by(Evaluation.created_at)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
