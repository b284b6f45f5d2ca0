"""Flask endpoints: upload, analyze, PDF report, error mapping."""

import io
import json

import pytest

from app import app as flask_app
from resume_scoring import analyze
from resume_scoring.validation import validate_analysis

RESUME_TEXT = """Jane Doe
jane@example.com | 555.123.4567
Summary
Developer with five years of Python and SQL experience.
Experience
- Developed reporting tools. Improved query speed by 40%.
Education
BSc Computer Science, 2018"""


@pytest.fixture
def client(audit_dir):
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


def _audit_entries(audit_dir):
    lines = (audit_dir / "audit.log").read_text(encoding="utf-8").splitlines()
    return [json.loads(line) for line in lines]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_index_lists_endpoints(client):
    data = client.get("/").get_json()
    assert "/api/analyze" in data["endpoints"]


def test_analyze_text(client, audit_dir):
    resp = client.post("/api/analyze", json={"resume_text": RESUME_TEXT})
    assert resp.status_code == 200
    data = resp.get_json()
    validate_analysis(data)
    assert data == {**analyze(RESUME_TEXT).to_dict(), "resume_hash": data["resume_hash"], "filename": None}
    assert len(data["resume_hash"]) == 64

    entry = _audit_entries(audit_dir)[-1]
    assert entry["action"] == "analyze"
    assert entry["status"] == "success"
    assert entry["overall_score"] == data["overall_score"]
    assert "Jane" not in json.dumps(entry)
    assert (audit_dir / "analysis_results.jsonl").exists()
    assert (audit_dir / "analysis_results.csv").exists()


def test_analyze_requires_text(client):
    resp = client.post("/api/analyze", json={"resume_text": "   "})
    assert resp.status_code == 400
    resp = client.post("/api/analyze", json={})
    assert resp.status_code == 400


def test_analyze_uploaded_file(client):
    resp = client.post(
        "/api/analyze",
        data={"file": (io.BytesIO(RESUME_TEXT.encode("utf-8")), "resume.txt")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["filename"] == "resume.txt"
    assert data["overall_score"] == analyze(RESUME_TEXT.strip()).overall_score


def test_upload_text_file(client):
    resp = client.post(
        "/api/upload",
        data={"file": (io.BytesIO(b"  Skills\nPython  \n"), "resume.txt")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["text"] == "Skills\nPython"
    assert data["char_count"] == len("Skills\nPython")
    assert data["word_count"] == 2


def test_upload_without_file(client):
    resp = client.post("/api/upload", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400


def test_upload_unsupported_type(client, audit_dir):
    resp = client.post(
        "/api/upload",
        data={"file": (io.BytesIO(b"\x89PNG"), "photo.png")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 415
    assert resp.get_json()["code"] == "UNSUPPORTED_FILE_TYPE"
    entry = _audit_entries(audit_dir)[-1]
    assert entry["status"] == "error"
    assert entry["error_type"] == "UNSUPPORTED_FILE_TYPE"


def test_upload_malformed_pdf(client):
    resp = client.post(
        "/api/upload",
        data={"file": (io.BytesIO(b"not a pdf"), "resume.pdf")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 422
    assert resp.get_json()["code"] == "EXTRACTION_FAILED"


def test_report_pdf(client):
    resp = client.post("/api/report-pdf", json={"resume_text": RESUME_TEXT, "filename": "Jane Doe.pdf"})
    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.data.startswith(b"%PDF")
    assert "Jane_Doe_analysis.pdf" in resp.headers["Content-Disposition"]


def test_report_pdf_requires_text(client):
    resp = client.post("/api/report-pdf", json={})
    assert resp.status_code == 400


@pytest.mark.parametrize("body", [["python"], {"resume_text": 42}, "resume"])
def test_analyze_rejects_malformed_json(client, body):
    resp = client.post("/api/analyze", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


@pytest.mark.parametrize("body", [["python"], {"resume_text": ["Python"]}, {"resume_text": "Python", "filename": 7}])
def test_report_pdf_rejects_malformed_json(client, body):
    resp = client.post("/api/report-pdf", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
