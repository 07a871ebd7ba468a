"""Pydantic schemas shared across services.

Wire names are camelCase; Python attributes stay snake_case.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.coercion import as_list


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_record(cls, record: Any, **extra: Any):
        """Build from an ORM row by reading attributes named like the fields."""

        values = {name: getattr(record, name) for name in cls.model_fields if hasattr(record, name)}
        values.update(extra)
        return cls(**values)


class JobCreate(CamelModel):
    job_id: str | None = None
    position_title: str | None = None
    job_classification: str | None = None
    experience: str | None = None
    education: str | None = None
    location_zip: str | None = None
    organization_level: str | None = None
    attitude: str | None = None
    comments: str | None = None
    job_description: str | None = None
    certifications: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)

    @field_validator("certifications", "tools", mode="before")
    @classmethod
    def _single_or_list(cls, value: Any) -> list[Any]:
        return as_list(value)


class JobOut(CamelModel):
    id: str = Field(alias="_id")
    job_id: str | None = None
    position_title: str | None = None
    job_classification: str | None = None
    experience: str | None = None
    education: str | None = None
    location_zip: str | None = None
    organization_level: str | None = None
    attitude: str | None = None
    comments: str | None = None
    job_description: str | None = None
    certifications: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    attachment_links: list[str] = Field(default_factory=list)
    date_posted: str


class JobCreated(CamelModel):
    message: str = "Job created successfully"
    job_id: str | None = None
    attachment_links: list[str]


class CandidateCreate(CamelModel):
    job_id: str | None = None
    candidate_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    education: str | None = None
    experience: str | None = None
    linkedin: str | None = None
    address: str | None = None
    total_score: float | None = None
    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)

    @field_validator("skills", "certifications", "tools", mode="before")
    @classmethod
    def _single_or_list(cls, value: Any) -> list[Any]:
        return as_list(value)

    @field_validator("total_score", mode="before")
    @classmethod
    def _empty_score(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def resume_filename(self) -> str:
        return f"{self.first_name or ''}_{self.last_name or ''}_Resume.pdf"


class JobSummary(CamelModel):
    """Fields of the referenced job joined into a candidate."""

    id: str = Field(alias="_id")
    job_classification: str | None = None
    position_title: str | None = None


class CandidateOut(CamelModel):
    id: str = Field(alias="_id")
    job_id: str | None = None
    candidate_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    education: str | None = None
    experience: str | None = None
    linkedin: str | None = None
    address: str | None = None
    total_score: int | float | None = None
    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    resume_link: str | None = None
    job: JobSummary | None = None

    @field_validator("total_score", mode="before")
    @classmethod
    def _integral_score(cls, value: Any) -> Any:
        # The column is a float; whole scores go back out as integers.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class CandidateCreated(CamelModel):
    message: str = "Candidate applied successfully!"
    resume_link: str | None = None


class CandidateEnvelope(BaseModel):
    success: bool = True
    data: CandidateOut


class EvaluationCreate(BaseModel):
    candidate_id: Any = Field(default=None, alias="candidateId")
    evaluation_results: Any = Field(default=None, alias="evaluationResults")
    scores_factor: Any = Field(default=None, alias="ScoresFactor")

    model_config = ConfigDict(populate_by_name=True)


class EvaluationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    candidate_id: str = Field(alias="candidateId")
    evaluation_results: list[Any] = Field(alias="evaluationResults")
    scores_factor: list[Any] = Field(alias="ScoresFactor")
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: Any) -> EvaluationOut:
        return cls(
            id=record.id,
            candidate_id=record.candidate_id,
            evaluation_results=record.evaluation_results,
            scores_factor=record.scores_factor,
            created_at=record.created_at,
        )


class Message(BaseModel):
    message: str


class CandidateSheetRow(CamelModel):
    """Column order of the candidate summary sheet."""

    candidate_id: Any = None
    first_name: Any = None
    last_name: Any = None
    email: Any = None
    phone: Any = None
    education: Any = None
    experience: Any = None
    linkedin: Any = None
    address: Any = None
    total_score: Any = None
    skills: Any = None
    certifications: Any = None
    tools: Any = None


class AssessmentSheetRow(CamelModel):
    """Column order of the personality/assessment profile sheet."""

    candidate_id: Any = None
    agreeableness: Any = None
    communication_skills: Any = None
    conscientiousness: Any = None
    critical_thinking: Any = None
    emotional_stability: Any = None
    extroversion: Any = None
    leadership_ability: Any = None
    openness: Any = None
    professional_culture_profile: Any = None


class SurveySheetRow(CamelModel):
    """Column order of the survey response sheet."""

    q1: Any = None
    q1_details: Any = None
    q2: Any = None
    q3: Any = None
    q3_details: Any = None
    q4: Any = None
    q4_details: Any = None
    q5: Any = None
    q6: Any = None
    q6_details: Any = None
    q7: Any = None
