"""Generate run_report.json for auditability."""

import json
from pathlib import Path

from resume_scoring.keywords import KeywordSet
from resume_scoring.models import ResumeAnalysis
from resume_scoring.utils import iso_now
from resume_scoring.validation import validate_analysis

ENGINE_VERSION = "1.0.0"


def build_run_report(
    run_id: str,
    resume_hash: str,
    resume_char_count: int,
    keyword_set: KeywordSet,
    analysis: ResumeAnalysis,
    source: str | None = None,
) -> dict:
    """Assemble the report dict. The serialized analysis is schema-validated first."""
    analysis_dict = analysis.to_dict()
    validate_analysis(analysis_dict)
    return {
        "run_id": run_id,
        "timestamp": iso_now(),
        "engine_version": ENGINE_VERSION,
        "source": source,
        "resume_hash": resume_hash,
        "resume_char_count": resume_char_count,
        "keyword_set_version": keyword_set.version,
        "keyword_set_hash": keyword_set.digest,
        "keyword_set_size": len(keyword_set),
        "matched_keyword_count": len(analysis.matched_keywords),
        "analysis": analysis_dict,
    }


def write_run_report(output_path: Path, **report_fields) -> dict:
    """
    Write run_report.json with hashes, versions and scores.
    No résumé text beyond its hash and length.
    """
    report = build_run_report(**report_fields)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return report
