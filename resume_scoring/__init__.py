"""Rule-based résumé quality scoring."""

from resume_scoring.keywords import DEFAULT_KEYWORD_SET, KeywordSet, load_keyword_set
from resume_scoring.models import ReadingLevel, ResumeAnalysis, ScoreBundle
from resume_scoring.scoring import analyze

__version__ = "1.0.0"

__all__ = [
    "analyze",
    "DEFAULT_KEYWORD_SET",
    "KeywordSet",
    "load_keyword_set",
    "ReadingLevel",
    "ResumeAnalysis",
    "ScoreBundle",
]
