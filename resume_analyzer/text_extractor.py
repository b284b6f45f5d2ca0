"""Text extraction for uploaded résumés: PDF, Word and plain text."""

import io
import logging
from pathlib import Path

import docx2txt
from pypdf import PdfReader

from resume_analyzer import config

log = logging.getLogger(__name__)

PDF_TYPE = "application/pdf"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_TYPE = "application/msword"
TEXT_TYPE = "text/plain"

SUPPORTED_TYPES = (PDF_TYPE, DOCX_TYPE, DOC_TYPE, TEXT_TYPE)
WORD_TYPES = (DOCX_TYPE, DOC_TYPE)

EXTENSION_TYPES = {
    ".pdf": PDF_TYPE,
    ".docx": DOCX_TYPE,
    ".doc": DOC_TYPE,
    ".txt": TEXT_TYPE,
}


class ExtractionError(ValueError):
    """Base class for upload and extraction failures."""


class UnsupportedFileType(ExtractionError):
    """File type is not PDF, Word or plain text."""


class FileTooLarge(ExtractionError):
    """File exceeds the configured size limit."""


class ExtractionFailed(ExtractionError):
    """The file could not be decoded (malformed PDF or Word document)."""


def resolve_content_type(filename: str | None, content_type: str | None) -> str:
    """
    Trust an explicit supported content type; otherwise infer from the file extension.
    Browsers often send application/octet-stream for .docx.
    """
    ctype = (content_type or "").split(";")[0].strip().lower()
    if ctype in SUPPORTED_TYPES:
        return ctype
    if filename and (not ctype or ctype == "application/octet-stream"):
        inferred = EXTENSION_TYPES.get(Path(filename).suffix.lower())
        if inferred:
            return inferred
    return ctype


def format_size(num_bytes: int) -> str:
    """Human-readable size limit: 10MB, 512KB, 100 bytes."""
    for unit, scale in (("MB", 1024 * 1024), ("KB", 1024)):
        if num_bytes >= scale:
            return f"{num_bytes / scale:g}{unit}"
    return f"{num_bytes} bytes"


def validate_file(size: int, content_type: str, max_size: int | None = None) -> None:
    """Raise FileTooLarge or UnsupportedFileType. Size is checked first."""
    max_size = config.MAX_FILE_SIZE if max_size is None else max_size
    if size > max_size:
        raise FileTooLarge(f"File size must be less than {format_size(max_size)}")
    if content_type not in SUPPORTED_TYPES:
        raise UnsupportedFileType(
            "File type not supported. Please upload a PDF, Word document, or text file."
        )


def _pdf_to_text(stream) -> str:
    reader = PdfReader(stream)
    text_parts = []
    for page in reader.pages:
        page_text = page.extract_text()
        if page_text:
            text_parts.append(page_text)
    return "\n\n".join(text_parts)


def extract_text(
    data: bytes,
    filename: str | None = None,
    content_type: str | None = None,
    max_size: int | None = None,
) -> str:
    """
    Extract plain text from an uploaded file's bytes.

    Args:
        data: Raw file content.
        filename: Original file name, used to infer the type when content_type is missing.
        content_type: MIME type reported by the client.
        max_size: Override for the configured size limit (bytes).

    Returns:
        Extracted text, trimmed of leading/trailing whitespace.

    Raises:
        FileTooLarge, UnsupportedFileType: the file fails validation.
        ExtractionFailed: the document could not be decoded.
    """
    ctype = resolve_content_type(filename, content_type)
    validate_file(len(data), ctype, max_size)

    try:
        if ctype == PDF_TYPE:
            text = _pdf_to_text(io.BytesIO(data))
        elif ctype in WORD_TYPES:
            text = docx2txt.process(io.BytesIO(data))
        else:
            text = data.decode("utf-8", errors="replace")
    except Exception as e:
        log.warning("Extraction failed for %s (%s): %s", filename or "<upload>", ctype, e)
        kind = "PDF file" if ctype == PDF_TYPE else "Word document"
        raise ExtractionFailed(
            f"Failed to process {kind}. Please try again or use a different format."
        ) from e

    text = (text or "").strip()
    log.debug("Extracted %d chars from %s (%s)", len(text), filename or "<upload>", ctype)
    return text


def extract_text_from_pdf(pdf_path: str | Path) -> str:
    """
    Extract text from a PDF file (e.g., résumé).

    Note:
        Scanned PDFs (image-only) will return minimal or empty text.
    """
    path = Path(pdf_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {path}")
    return extract_text(path.read_bytes(), path.name, PDF_TYPE)


def extract_text_from_file(path: str | Path) -> str:
    """Extract text from a PDF, Word or text file on disk, typed by extension."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return extract_text(path.read_bytes(), path.name)
