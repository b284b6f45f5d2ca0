"""Resume Analyzer - upload handling, audit trail and reports around the scoring engine."""

from resume_analyzer.text_extractor import (
    extract_text,
    extract_text_from_file,
    extract_text_from_pdf,
    ExtractionError,
    ExtractionFailed,
    FileTooLarge,
    UnsupportedFileType,
)
from resume_analyzer.report_pdf import generate_report_pdf, write_report_pdf

__all__ = [
    "extract_text",
    "extract_text_from_file",
    "extract_text_from_pdf",
    "ExtractionError",
    "ExtractionFailed",
    "FileTooLarge",
    "UnsupportedFileType",
    "generate_report_pdf",
    "write_report_pdf",
]
