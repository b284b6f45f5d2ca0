"""Formatting score: section headers, bullets, contact details, dates."""

import re

BASE_SCORE = 60
SECTION_HEADERS = ("experience", "education", "skills", "summary", "objective")
SECTION_HEADER_POINTS = 8
BULLET_GLYPHS = ("•", "-", "*")
BULLET_POINTS = 10
EMAIL_POINTS = 5
PHONE_POINTS = 5
DATE_POINTS = 10

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII)
PHONE_RE = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b", re.ASCII)
# No trailing boundary: "January", "Sept" and "Mar-2020" all count.
MONTH_RE = re.compile(r"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)", re.ASCII | re.IGNORECASE)


def find_section_headers(text: str) -> list[str]:
    """Section header words present anywhere in text (case-insensitive)."""
    lowered = text.lower()
    return [h for h in SECTION_HEADERS if h in lowered]


def has_bullets(text: str) -> bool:
    return any(glyph in text for glyph in BULLET_GLYPHS)


def has_dates(text: str) -> bool:
    return bool(YEAR_RE.search(text) or MONTH_RE.search(text))


def calculate_formatting_score(text: str) -> int:
    """
    Additive formatting score on the original (case-preserved) text.
    Base 60, capped at 100.
    """
    text = text or ""
    score = BASE_SCORE
    score += len(find_section_headers(text)) * SECTION_HEADER_POINTS
    if has_bullets(text):
        score += BULLET_POINTS
    if EMAIL_RE.search(text):
        score += EMAIL_POINTS
    if PHONE_RE.search(text):
        score += PHONE_POINTS
    if has_dates(text):
        score += DATE_POINTS
    return min(score, 100)
