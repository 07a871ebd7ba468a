"""FastAPI entrypoint wiring services together."""
from __future__ import annotations

import logging

import uvicorn
from fastapi import APIRouter, Body, Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, configure_logging, get_settings
from app.database import create_engine, create_sessionmaker, init_models
from app.dependencies import blob_store_provider, db_session, row_appender_provider
from app.schemas import (
    AssessmentSheetRow,
    CandidateCreate,
    CandidateCreated,
    CandidateEnvelope,
    CandidateOut,
    CandidateSheetRow,
    EvaluationCreate,
    EvaluationOut,
    JobCreate,
    JobCreated,
    JobOut,
    JobSummary,
    Message,
    SurveySheetRow,
)
from services import (
    ASSESSMENT_PROFILE,
    CANDIDATE_SUMMARY,
    SURVEY_RESPONSE,
    BlobStore,
    CandidateService,
    EvaluationService,
    GoogleDriveBlobStore,
    GoogleSheetsRowAppender,
    JobService,
    MissingEvaluationFields,
    RowAppender,
    SheetExporter,
)

logger = logging.getLogger(__name__)

SHEET_SUCCESS = "Data added to Google Sheet successfully"
SHEET_FAILURE = "Failed to submit the data in the google sheet"
SHEET_PATHS = {"/api/candidateToSheet", "/api/assessmentosheet", "/api/submitForm"}


def _error(status_code: int, **content: object) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content)


def job_form(
    job_id: str | None = Form(None, alias="jobId"),
    position_title: str | None = Form(None, alias="positionTitle"),
    job_classification: str | None = Form(None, alias="jobClassification"),
    experience: str | None = Form(None),
    education: str | None = Form(None),
    location_zip: str | None = Form(None, alias="locationZip"),
    organization_level: str | None = Form(None, alias="organizationLevel"),
    attitude: str | None = Form(None),
    comments: str | None = Form(None),
    job_description: str | None = Form(None, alias="jobDescription"),
    certifications: list[str] | None = Form(None),
    tools: list[str] | None = Form(None),
) -> JobCreate:
    return JobCreate(
        job_id=job_id,
        position_title=position_title,
        job_classification=job_classification,
        experience=experience,
        education=education,
        location_zip=location_zip,
        organization_level=organization_level,
        attitude=attitude,
        comments=comments,
        job_description=job_description,
        certifications=certifications,
        tools=tools,
    )


def candidate_form(
    job_id: str | None = Form(None, alias="jobId"),
    candidate_id: str | None = Form(None, alias="candidateId"),
    first_name: str | None = Form(None, alias="firstName"),
    last_name: str | None = Form(None, alias="lastName"),
    email: str | None = Form(None),
    phone: str | None = Form(None),
    education: str | None = Form(None),
    experience: str | None = Form(None),
    linkedin: str | None = Form(None),
    address: str | None = Form(None),
    total_score: str | None = Form(None, alias="totalScore"),
    skills: list[str] | None = Form(None),
    certifications: list[str] | None = Form(None),
    tools: list[str] | None = Form(None),
) -> CandidateCreate:
    return CandidateCreate(
        job_id=job_id,
        candidate_id=candidate_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        education=education,
        experience=experience,
        linkedin=linkedin,
        address=address,
        total_score=total_score,
        skills=skills,
        certifications=certifications,
        tools=tools,
    )


def create_app(
    settings: Settings | None = None,
    *,
    blob_store: BlobStore | None = None,
    row_appender: RowAppender | None = None,
    auth_router: APIRouter | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Hiring Pipeline Backend", version="0.1.0")

    engine = create_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = create_sessionmaker(engine)
    app.state.blob_store = blob_store or GoogleDriveBlobStore(settings.google_credentials)
    app.state.row_appender = row_appender or GoogleSheetsRowAppender(settings.google_credentials)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def _startup() -> None:  # pragma: no cover - framework hook
        if settings.database_url.startswith("sqlite"):
            settings.data_directory.mkdir(parents=True, exist_ok=True)
        await init_models(engine)
        logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))

    @app.on_event("shutdown")
    async def _shutdown() -> None:  # pragma: no cover - framework hook
        await engine.dispose()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("Incoming request: %s %s", request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(ValidationError)
    async def _invalid_submission(request: Request, exc: ValidationError) -> JSONResponse:
        logger.error("Rejected submission to %s: %s", request.url.path, exc)
        return _error(500, error="Internal Server Error")

    @app.exception_handler(RequestValidationError)
    async def _unreadable_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.error("Unreadable request to %s: %s", request.url.path, exc.errors())
        if request.url.path in SHEET_PATHS:
            return _error(500, message=SHEET_FAILURE)
        return _error(500, error="Internal Server Error")

    if auth_router is not None:
        app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])

    @app.get("/", tags=["Health"])
    async def root() -> dict[str, str]:
        return {"status": "OK", "service": "Hiring pipeline backend is running"}

    # Jobs

    @app.post("/api/jobs", status_code=201, response_model=JobCreated)
    async def create_job(
        payload: JobCreate = Depends(job_form),
        attachments: list[UploadFile] | None = File(None),
        session: AsyncSession = Depends(db_session),
        store: BlobStore = Depends(blob_store_provider),
    ):
        try:
            job = await JobService(store).create_job(session, payload, attachments or [])
        except Exception:
            logger.exception("Error creating job")
            return _error(500, error="Internal Server Error")
        return JobCreated(job_id=job.job_id, attachment_links=job.attachment_links)

    @app.get("/api/getJobs", response_model=list[JobOut])
    async def list_jobs(
        session: AsyncSession = Depends(db_session),
        store: BlobStore = Depends(blob_store_provider),
    ):
        try:
            jobs = await JobService(store).list_jobs(session)
        except Exception:
            logger.exception("Error fetching jobs")
            return _error(500, error="Failed to fetch jobs")
        return [JobOut.from_record(job) for job in jobs]

    @app.get("/api/jobs/{job_pk}", response_model=JobOut)
    async def get_job(
        job_pk: str,
        session: AsyncSession = Depends(db_session),
        store: BlobStore = Depends(blob_store_provider),
    ):
        try:
            job = await JobService(store).get_job(session, job_pk)
        except Exception:
            logger.exception("Error fetching job details")
            return _error(500, error="Failed to fetch job details")
        if job is None:
            return _error(404, error="Job not found")
        return JobOut.from_record(job)

    # Candidates

    @app.post("/api/candidates", status_code=201, response_model=CandidateCreated)
    async def create_candidate(
        payload: CandidateCreate = Depends(candidate_form),
        resume: UploadFile | None = File(None),
        session: AsyncSession = Depends(db_session),
        store: BlobStore = Depends(blob_store_provider),
    ):
        try:
            candidate = await CandidateService(store).create_candidate(session, payload, resume)
        except Exception:
            logger.exception("Error submitting candidate")
            return _error(500, error="Internal Server Error")
        return CandidateCreated(resume_link=candidate.resume_link)

    @app.get("/api/candidates", response_model=list[CandidateOut], response_model_exclude_unset=True)
    async def list_candidates(
        session: AsyncSession = Depends(db_session),
        store: BlobStore = Depends(blob_store_provider),
    ):
        try:
            rows = await CandidateService(store).list_candidates(session)
        except Exception:
            logger.exception("Error fetching candidates")
            return _error(500, error="Internal Server Error")

        candidates = []
        for candidate, job in rows:
            if job is None:
                candidates.append(CandidateOut.from_record(candidate))
            else:
                summary = JobSummary(id=job.id, job_classification=job.job_classification)
                candidates.append(CandidateOut.from_record(candidate, job=summary))
        return candidates

    @app.get(
        "/api/getCandidate/{candidate_id}",
        response_model=CandidateEnvelope,
        response_model_exclude_unset=True,
    )
    async def get_candidate(
        candidate_id: str,
        session: AsyncSession = Depends(db_session),
        store: BlobStore = Depends(blob_store_provider),
    ):
        try:
            found = await CandidateService(store).get_by_candidate_id(session, candidate_id)
        except Exception:
            logger.exception("Error fetching candidate details")
            return _error(500, success=False, error="Internal Server Error")
        if found is None:
            return _error(404, success=False, message="Candidate not found.")

        candidate, job = found
        if job is None:
            data = CandidateOut.from_record(candidate)
        else:
            data = CandidateOut.from_record(candidate, job=JobSummary.from_record(job))
        return CandidateEnvelope(success=True, data=data)

    # Evaluations

    @app.post("/api/saveEvaluation", status_code=201, response_model=Message)
    async def save_evaluation(
        payload: EvaluationCreate | None = Body(None),
        session: AsyncSession = Depends(db_session),
    ):
        try:
            await EvaluationService().save(session, payload or EvaluationCreate())
        except MissingEvaluationFields:
            return _error(400, error="Missing required fields")
        except Exception:
            logger.exception("Error saving evaluation")
            return _error(500, error="Internal Server Error")
        return Message(message="Evaluation saved successfully!")

    @app.get("/api/getEvaluation/{candidate_id}", response_model=EvaluationOut)
    async def get_evaluation(candidate_id: str, session: AsyncSession = Depends(db_session)):
        try:
            evaluation = await EvaluationService().get_for_candidate(session, candidate_id)
        except Exception:
            logger.exception("Error fetching evaluation")
            return _error(500, error="Internal Server Error")
        if evaluation is None:
            return _error(404, error="Evaluation not found")
        return EvaluationOut.from_record(evaluation)

    # Reporting exports

    @app.post("/api/candidateToSheet", response_model=Message)
    async def candidate_to_sheet(
        payload: CandidateSheetRow | None = Body(None),
        appender: RowAppender = Depends(row_appender_provider),
    ):
        try:
            await SheetExporter(appender).export(CANDIDATE_SUMMARY, payload or CandidateSheetRow())
        except Exception:
            logger.exception("Failed to append candidate row to Google Sheet")
            return _error(500, message=SHEET_FAILURE)
        return Message(message=SHEET_SUCCESS)

    @app.post("/api/assessmentosheet", response_model=Message)
    async def assessment_to_sheet(
        payload: AssessmentSheetRow | None = Body(None),
        appender: RowAppender = Depends(row_appender_provider),
    ):
        try:
            await SheetExporter(appender).export(ASSESSMENT_PROFILE, payload or AssessmentSheetRow())
        except Exception:
            logger.exception("Failed to append assessment row to Google Sheet")
            return _error(500, message=SHEET_FAILURE)
        return Message(message=SHEET_SUCCESS)

    @app.post("/api/submitForm", response_model=Message)
    async def submit_survey(
        payload: SurveySheetRow | None = Body(None),
        appender: RowAppender = Depends(row_appender_provider),
    ):
        try:
            await SheetExporter(appender).export(SURVEY_RESPONSE, payload or SurveySheetRow())
        except Exception:
            logger.exception("Failed to append survey row to Google Sheet")
            return _error(500, message=SHEET_FAILURE)
        return Message(message=SHEET_SUCCESS)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
