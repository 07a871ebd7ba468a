from fastapi.testclient import TestClient

from app.main import create_app
from tests.conftest import FakeRowAppender

NS = "Not Specified"


def test_candidate_row_defaults(client, row_appender):
    response = client.post("/api/candidateToSheet", json={"candidateId": "C1", "firstName": "Ada"})

    assert response.status_code == 200
    assert response.json() == {"message": "Data added to Google Sheet successfully"}
    [(sheet_range, row)] = row_appender.rows
    assert sheet_range == "Sheet1!A1"
    assert row == ["C1", "Ada", NS, NS, NS, NS, NS, NS, NS, "0", NS, NS, NS]


def test_candidate_row_joins_lists(client, row_appender):
    client.post(
        "/api/candidateToSheet",
        json={
            "candidateId": "C2",
            "totalScore": 91,
            "skills": ["python", "sql"],
            "certifications": "PMP",
            "tools": [],
        },
    )

    [(_, row)] = row_appender.rows
    assert row[9] == "91"
    assert row[10] == "python, sql"
    assert row[11] == "PMP"
    assert row[12] == ""


def test_zero_score_uses_score_default(client, row_appender):
    client.post("/api/candidateToSheet", json={"totalScore": 0})

    assert row_appender.rows[0][1][9] == "0"


def test_assessment_row(client, row_appender):
    response = client.post(
        "/api/assessmentosheet",
        json={
            "candidateId": "C1",
            "agreeableness": 7,
            "communicationSkills": "High",
            "criticalThinking": 8.5,
            "openness": 6.0,
            "professionalCultureProfile": "Collaborative",
        },
    )

    assert response.status_code == 200
    [(sheet_range, row)] = row_appender.rows
    assert sheet_range == "Sheet2"
    assert row == ["C1", "7", "High", NS, "8.5", NS, NS, NS, "6", "Collaborative"]


def test_survey_row(client, row_appender):
    response = client.post(
        "/api/submitForm",
        json={"q1": "Yes", "q1Details": "Referral", "q3": "No", "q6Details": "Weekends", "q7": "Great process"},
    )

    assert response.status_code == 200
    [(sheet_range, row)] = row_appender.rows
    assert sheet_range == "Sheet3"
    assert row == ["Yes", "Referral", NS, "No", NS, NS, NS, NS, NS, "Weekends", "Great process"]


def test_unknown_fields_are_ignored(client, row_appender):
    client.post("/api/submitForm", json={"q2": "Maybe", "unexpected": "value"})

    [(_, row)] = row_appender.rows
    assert len(row) == 11
    assert row[2] == "Maybe"


def test_append_failure_reports_generic_error(settings, blob_store):
    app = create_app(settings, blob_store=blob_store, row_appender=FakeRowAppender(fail=True))
    with TestClient(app) as client:
        for path in ("/api/candidateToSheet", "/api/assessmentosheet", "/api/submitForm"):
            response = client.post(path, json={"candidateId": "C1"})

            assert response.status_code == 500
            assert response.json() == {"message": "Failed to submit the data in the google sheet"}


def test_missing_body_appends_default_row(client, row_appender):
    response = client.post("/api/candidateToSheet")

    assert response.status_code == 200
    [(_, row)] = row_appender.rows
    assert row == [NS] * 9 + ["0"] + [NS] * 3


def test_malformed_json_reports_sheet_failure(client, row_appender):
    response = client.post(
        "/api/submitForm", content=b"{bad", headers={"content-type": "application/json"}
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to submit the data in the google sheet"}
    assert row_appender.rows == []
