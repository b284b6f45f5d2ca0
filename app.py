#!/usr/bin/env python3
"""Flask web app for the Resume Analyzer: upload, score, download a PDF report."""

from io import BytesIO
from pathlib import Path

from flask import Flask, request, jsonify, send_file
from werkzeug.exceptions import RequestEntityTooLarge

from resume_analyzer import config
from resume_analyzer.audit import audit_log, log_analysis_result, setup_app_logging
from resume_analyzer.report_pdf import generate_report_pdf
from resume_analyzer.text_extractor import (
    extract_text,
    format_size,
    ExtractionFailed,
    FileTooLarge,
    UnsupportedFileType,
)
from resume_scoring import __version__, analyze
from resume_scoring.utils import hash_text, text_stats
from resume_scoring.validation import validate_analysis

log = setup_app_logging()

app = Flask(__name__)
# Multipart framing adds overhead on top of the file itself
app.config["MAX_CONTENT_LENGTH"] = config.MAX_FILE_SIZE + 1024 * 1024

EXTRACTION_STATUS = {
    UnsupportedFileType: (415, "UNSUPPORTED_FILE_TYPE"),
    FileTooLarge: (413, "FILE_TOO_LARGE"),
    ExtractionFailed: (422, "EXTRACTION_FAILED"),
}


def _extraction_error_response(e: Exception, filename: str | None):
    status, code = EXTRACTION_STATUS[type(e)]
    audit_log(action="upload", status="error", filename=filename, error=str(e), extra={"error_type": code})
    log.warning("Upload rejected: filename=%s code=%s", filename, code)
    return jsonify({"error": str(e), "code": code}), status


def _read_upload():
    """Extract text from the request's multipart `file`. Returns (text, filename)."""
    file = request.files["file"]
    text = extract_text(file.read(), file.filename, file.mimetype)
    return text, file.filename


def _json_field(data, key: str):
    """String field from a JSON object body; None when the body or value has the wrong shape."""
    if not isinstance(data, dict):
        return None
    value = data.get(key) or ""
    return value.strip() if isinstance(value, str) else None


def _run_analysis(resume_text: str, source: str, filename: str | None = None):
    keyword_set = config.get_keyword_set()
    analysis = analyze(resume_text, keyword_set)
    resume_hash = hash_text(resume_text)
    log_analysis_result(
        analysis=analysis,
        source=source,
        resume_hash=resume_hash,
        resume_char_count=len(resume_text),
        keyword_set_version=keyword_set.version,
        filename=filename,
    )
    return analysis, resume_hash


@app.errorhandler(RequestEntityTooLarge)
def handle_request_too_large(e):
    audit_log(action="upload", status="error", error="request too large", extra={"error_type": "FILE_TOO_LARGE"})
    limit = format_size(config.MAX_FILE_SIZE)
    return jsonify({"error": f"File size must be less than {limit}", "code": "FILE_TOO_LARGE"}), 413


@app.route("/")
def index():
    return jsonify({
        "service": "Resume Analyzer",
        "version": __version__,
        "endpoints": ["/api/upload", "/api/analyze", "/api/report-pdf", "/health"],
        "supported_formats": ["pdf", "doc", "docx", "txt"],
    })


@app.route("/health")
def health():
    return jsonify({"status": "ok", "version": __version__})


@app.route("/api/upload", methods=["POST"])
def api_upload():
    """Extract text from uploaded PDF, Word or TXT file."""
    if "file" not in request.files:
        return jsonify({"error": "No file provided"}), 400

    file = request.files["file"]
    if file.filename == "":
        return jsonify({"error": "No file selected"}), 400

    log.info("Upload started: filename=%s", file.filename)
    try:
        text, filename = _read_upload()
    except (UnsupportedFileType, FileTooLarge, ExtractionFailed) as e:
        return _extraction_error_response(e, file.filename)
    except Exception as e:
        audit_log(action="upload", status="error", filename=file.filename, error=str(e))
        log.exception("Upload failed")
        return jsonify({"error": str(e)}), 500

    audit_log(action="upload", status="success", filename=filename, resume_char_count=len(text))
    log.info("Upload complete: filename=%s, chars=%d", filename, len(text))
    return jsonify({"text": text, "filename": filename, **text_stats(text)})


@app.route("/api/analyze", methods=["POST"])
def api_analyze():
    """Score résumé text (JSON resume_text) or an uploaded file (multipart file)."""
    filename = None
    if "file" in request.files:
        if request.files["file"].filename == "":
            return jsonify({"error": "No file selected"}), 400
        try:
            resume_text, filename = _read_upload()
        except (UnsupportedFileType, FileTooLarge, ExtractionFailed) as e:
            return _extraction_error_response(e, request.files["file"].filename)
        source = "upload"
    else:
        data = request.get_json(silent=True) or {}
        resume_text = _json_field(data, "resume_text")
        if resume_text is None:
            return jsonify({"error": "resume_text must be a string in a JSON object"}), 400
        source = "paste"

    if not resume_text.strip():
        return jsonify({"error": "Résumé text is required"}), 400

    log.info("Analyze started (source=%s, resume_chars=%d)", source, len(resume_text))
    try:
        analysis, resume_hash = _run_analysis(resume_text, source, filename)
        result = analysis.to_dict()
        validate_analysis(result)
    except Exception as e:
        audit_log(action="analyze", status="error", resume_char_count=len(resume_text), filename=filename, error=str(e))
        log.exception("Analyze failed")
        return jsonify({"error": str(e)}), 500

    audit_log(
        action="analyze",
        status="success",
        resume_char_count=len(resume_text),
        overall_score=analysis.overall_score,
        filename=filename,
        extra={"resume_hash": resume_hash, "source": source},
    )
    log.info("Analyze complete: overall_score=%d reading_level=%s", analysis.overall_score, analysis.reading_level.value)
    return jsonify({**result, "resume_hash": resume_hash, "filename": filename})


@app.route("/api/report-pdf", methods=["POST"])
def api_report_pdf():
    """Score résumé text and return the analysis as a PDF attachment."""
    data = request.get_json(silent=True) or {}
    resume_text = _json_field(data, "resume_text")
    source_name = _json_field(data, "filename")
    if resume_text is None or source_name is None:
        return jsonify({"error": "resume_text and filename must be strings in a JSON object"}), 400
    source_name = source_name or None

    if not resume_text:
        return jsonify({"error": "Résumé text is required"}), 400

    log.info("Report PDF started (resume_chars=%d)", len(resume_text))
    try:
        analysis, resume_hash = _run_analysis(resume_text, "report", source_name)
        pdf_bytes = generate_report_pdf(analysis, source_name)
    except Exception as e:
        audit_log(action="report_pdf", status="error", resume_char_count=len(resume_text), error=str(e))
        log.exception("Report PDF failed")
        return jsonify({"error": str(e)}), 500

    stem = Path(source_name).stem if source_name else "resume"
    download_name = f"{stem.replace(' ', '_')}_analysis.pdf"
    audit_log(
        action="report_pdf",
        status="success",
        resume_char_count=len(resume_text),
        overall_score=analysis.overall_score,
        filename=download_name,
        extra={"resume_hash": resume_hash, "pdf_bytes": len(pdf_bytes)},
    )
    return send_file(
        BytesIO(pdf_bytes),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=download_name,
    )


if __name__ == "__main__":
    log.info(
        "Resume Analyzer starting on http://127.0.0.1:%d | Logs: %s | Keyword set: %s",
        config.PORT,
        config.LOG_DIR,
        config.KEYWORDS_FILE or "default",
    )
    app.run(debug=config.DEBUG, port=config.PORT)
