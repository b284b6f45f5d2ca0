"""Shared fixtures: redirect audit and application logs into temporary directories."""

import os
import tempfile

# Set before resume_analyzer is imported so that importing `app` never writes under <repo>/logs
os.environ["RESUME_LOG_DIR"] = tempfile.mkdtemp(prefix="resume_analyzer_logs_")

import pytest

from resume_analyzer import audit


@pytest.fixture
def audit_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(audit, "AUDIT_DIR", tmp_path)
    monkeypatch.setattr(audit, "AUDIT_FILE", tmp_path / "audit.log")
    monkeypatch.setattr(audit, "APP_LOG_FILE", tmp_path / "app.log")
    monkeypatch.setattr(audit, "ANALYSIS_JSONL", tmp_path / "analysis_results.jsonl")
    monkeypatch.setattr(audit, "ANALYSIS_CSV", tmp_path / "analysis_results.csv")
    return tmp_path
