"""Service layer for jobs, candidates, evaluations and reporting exports."""

from .candidates import CandidateService
from .evaluations import EvaluationService, MissingEvaluationFields
from .jobs import JobService
from .sheets import (
    ASSESSMENT_PROFILE,
    CANDIDATE_SUMMARY,
    SURVEY_RESPONSE,
    GoogleSheetsRowAppender,
    RowAppender,
    SheetExporter,
)
from .storage import BlobStore, GoogleDriveBlobStore, StoredBlob
from .uploads import UploadLedger

__all__ = [
    "ASSESSMENT_PROFILE",
    "CANDIDATE_SUMMARY",
    "SURVEY_RESPONSE",
    "BlobStore",
    "CandidateService",
    "EvaluationService",
    "GoogleDriveBlobStore",
    "GoogleSheetsRowAppender",
    "JobService",
    "MissingEvaluationFields",
    "RowAppender",
    "SheetExporter",
    "StoredBlob",
    "UploadLedger",
]
