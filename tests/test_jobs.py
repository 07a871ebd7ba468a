from datetime import datetime, timezone

from fastapi.testclient import TestClient

from app.main import create_app
from tests.conftest import FailingBlobStore


def _files(*names):
    return [("attachments", (name, f"content of {name}".encode(), "application/pdf")) for name in names]


def _all_jobs(client):
    response = client.get("/api/getJobs")
    assert response.status_code == 200
    return response.json()


def test_create_job_uploads_attachments_in_order(client, blob_store):
    response = client.post(
        "/api/jobs",
        data={"jobId": "J-100", "positionTitle": "Data Engineer", "jobClassification": "Engineering"},
        files=_files("brief.pdf", "benefits.pdf", "org-chart.pdf"),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Job created successfully"
    assert body["jobId"] == "J-100"
    assert body["attachmentLinks"] == [
        "https://drive.test/1/brief.pdf",
        "https://drive.test/2/benefits.pdf",
        "https://drive.test/3/org-chart.pdf",
    ]
    assert [name for name, _, _ in blob_store.uploads] == ["brief.pdf", "benefits.pdf", "org-chart.pdf"]
    assert blob_store.uploads[0][1] == "application/pdf"

    [job] = _all_jobs(client)
    assert job["attachmentLinks"] == body["attachmentLinks"]
    assert job["positionTitle"] == "Data Engineer"


def test_create_job_without_attachments(client, blob_store):
    response = client.post("/api/jobs", data={"jobId": "J-1"})

    assert response.status_code == 201
    assert response.json()["attachmentLinks"] == []
    assert blob_store.uploads == []


def test_single_certification_and_tool_become_lists(client):
    client.post("/api/jobs", data={"jobId": "J-2", "certifications": "AWS SA", "tools": "Airflow"})

    [job] = _all_jobs(client)
    assert job["certifications"] == ["AWS SA"]
    assert job["tools"] == ["Airflow"]


def test_repeated_certifications_keep_their_order(client):
    client.post(
        "/api/jobs",
        data={"jobId": "J-3", "certifications": ["CKA", "PMP"], "tools": ["dbt", "Spark", "Kafka"]},
    )

    [job] = _all_jobs(client)
    assert job["certifications"] == ["CKA", "PMP"]
    assert job["tools"] == ["dbt", "Spark", "Kafka"]


def test_missing_lists_are_stored_empty(client):
    client.post("/api/jobs", data={"jobId": "J-4"})

    [job] = _all_jobs(client)
    assert job["certifications"] == []
    assert job["tools"] == []


def test_date_posted_is_today(client):
    client.post("/api/jobs", data={"jobId": "J-5"})

    [job] = _all_jobs(client)
    assert job["datePosted"] == datetime.now(timezone.utc).date().isoformat()


def test_get_job_by_native_id(client):
    client.post("/api/jobs", data={"jobId": "J-6", "locationZip": "30301", "organizationLevel": "L3"})
    [listed] = _all_jobs(client)

    response = client.get(f"/api/jobs/{listed['_id']}")

    assert response.status_code == 200
    assert response.json() == listed
    assert response.json()["locationZip"] == "30301"


def test_get_job_by_business_id_is_not_found(client):
    client.post("/api/jobs", data={"jobId": "J-7"})

    response = client.get("/api/jobs/J-7")

    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


def test_get_unknown_job_is_not_found(client):
    response = client.get("/api/jobs/does-not-exist")

    assert response.status_code == 404


def test_duplicate_job_ids_are_both_stored(client):
    client.post("/api/jobs", data={"jobId": "J-8", "positionTitle": "First"})
    client.post("/api/jobs", data={"jobId": "J-8", "positionTitle": "Second"})

    jobs = _all_jobs(client)
    assert [job["positionTitle"] for job in jobs] == ["First", "Second"]


def test_upload_failure_reports_generic_error(settings, row_appender):
    app = create_app(settings, blob_store=FailingBlobStore(), row_appender=row_appender)
    with TestClient(app) as client:
        response = client.post("/api/jobs", data={"jobId": "J-9"}, files=_files("brief.pdf"))

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
        assert _all_jobs(client) == []
