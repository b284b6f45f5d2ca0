"""Run reports and PDF analysis reports."""

import io
import json

from pypdf import PdfReader

from resume_analyzer.report_pdf import POOR_COLOR, generate_report_pdf, score_color, write_report_pdf
from resume_scoring import DEFAULT_KEYWORD_SET, analyze
from resume_scoring.run_report import write_run_report
from resume_scoring.utils import hash_text

RESUME_TEXT = "Summary\nPython developer. Led agile teams & improved delivery <fast>.\nSkills: SQL, Docker"


def test_write_run_report(tmp_path):
    analysis = analyze(RESUME_TEXT)
    path = tmp_path / "reports" / "run_report_abc.json"
    write_run_report(
        path,
        run_id="abc",
        resume_hash=hash_text(RESUME_TEXT),
        resume_char_count=len(RESUME_TEXT),
        keyword_set=DEFAULT_KEYWORD_SET,
        analysis=analysis,
        source="resume.txt",
    )
    report = json.loads(path.read_text(encoding="utf-8"))
    assert report["run_id"] == "abc"
    assert report["resume_hash"] == hash_text(RESUME_TEXT)
    assert report["keyword_set_size"] == len(DEFAULT_KEYWORD_SET)
    assert report["keyword_set_hash"] == DEFAULT_KEYWORD_SET.digest
    assert report["analysis"] == analysis.to_dict()
    assert RESUME_TEXT not in path.read_text(encoding="utf-8")


def test_generate_report_pdf():
    analysis = analyze(RESUME_TEXT)
    pdf_bytes = generate_report_pdf(analysis, "resume <draft>.pdf")
    assert pdf_bytes.startswith(b"%PDF")

    text = "".join(page.extract_text() for page in PdfReader(io.BytesIO(pdf_bytes)).pages)
    assert "Resume Analysis" in text
    assert "Detailed Analysis" in text
    assert str(analysis.overall_score) in text


def test_report_pdf_without_keywords_or_suggestions():
    analysis = analyze("")
    assert generate_report_pdf(analysis).startswith(b"%PDF")


def test_write_report_pdf(tmp_path):
    path = write_report_pdf(analyze(RESUME_TEXT), tmp_path / "out" / "report.pdf")
    assert path.read_bytes().startswith(b"%PDF")


def test_score_color_bands():
    assert score_color(90) != score_color(89)
    assert score_color(80) != score_color(79)
    assert score_color(69) == POOR_COLOR
