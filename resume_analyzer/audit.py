"""Audit trail for analyses and API operations."""

import csv
import json
import logging

from resume_analyzer import config
from resume_scoring.models import ResumeAnalysis
from resume_scoring.utils import iso_now

AUDIT_DIR = config.LOG_DIR
AUDIT_FILE = AUDIT_DIR / "audit.log"
APP_LOG_FILE = AUDIT_DIR / "app.log"
ANALYSIS_JSONL = AUDIT_DIR / "analysis_results.jsonl"
ANALYSIS_CSV = AUDIT_DIR / "analysis_results.csv"

CSV_HEADERS = [
    "timestamp",
    "source",
    "filename",
    "resume_hash",
    "resume_char_count",
    "keyword_set_version",
    "overall_score",
    "formatting",
    "keywords",
    "grammar",
    "readability",
    "word_count",
    "reading_level",
    "matched_keyword_count",
    "matched_keywords",
    "suggestions",
]


def _ensure_log_dir():
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)


def log_analysis_result(
    *,
    analysis: ResumeAnalysis,
    source: str,
    resume_hash: str,
    resume_char_count: int,
    keyword_set_version: str,
    filename: str | None = None,
):
    """
    Log one analysis for later review: when, what was scored, and how.
    Appends to analysis_results.jsonl and analysis_results.csv.
    """
    _ensure_log_dir()
    ts = iso_now()
    scores = analysis.scores

    entry = {
        "timestamp": ts,
        "source": source,
        "filename": filename,
        "resume_hash": resume_hash,
        "resume_char_count": resume_char_count,
        "keyword_set_version": keyword_set_version,
        **analysis.to_dict(),
        "matched_keyword_count": len(analysis.matched_keywords),
    }
    with open(ANALYSIS_JSONL, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")

    csv_exists = ANALYSIS_CSV.exists()
    with open(ANALYSIS_CSV, "a", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
        if not csv_exists:
            writer.writeheader()
        writer.writerow({
            "timestamp": ts,
            "source": source,
            "filename": filename or "",
            "resume_hash": resume_hash,
            "resume_char_count": resume_char_count,
            "keyword_set_version": keyword_set_version,
            "overall_score": analysis.overall_score,
            "formatting": scores.formatting,
            "keywords": scores.keywords,
            "grammar": scores.grammar,
            "readability": scores.readability,
            "word_count": analysis.word_count,
            "reading_level": analysis.reading_level.value,
            "matched_keyword_count": len(analysis.matched_keywords),
            "matched_keywords": json.dumps(list(analysis.matched_keywords)),
            "suggestions": json.dumps(list(analysis.suggestions)),
        })


def audit_log(
    action: str,
    status: str,
    *,
    resume_char_count: int | None = None,
    overall_score: int | None = None,
    filename: str | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if resume_char_count is not None:
        entry["resume_char_count"] = resume_char_count
    if overall_score is not None:
        entry["overall_score"] = overall_score
    if filename:
        entry["filename"] = filename
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(AUDIT_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    _ensure_log_dir()
    logger = logging.getLogger("resume_analyzer")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(APP_LOG_FILE, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    # Core engine logs under its own package name
    logging.getLogger("resume_scoring").setLevel(logging.DEBUG)
    for handler in logger.handlers:
        logging.getLogger("resume_scoring").addHandler(handler)

    return logger
