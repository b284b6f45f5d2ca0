"""Deterministic scoring engine. Pure code: text in, ResumeAnalysis out."""

import logging
import math

from resume_scoring.keywords import DEFAULT_KEYWORD_SET, KeywordSet
from resume_scoring.models import ReadingLevel, ResumeAnalysis, ScoreBundle, SuggestionContext
from resume_scoring.pipeline.normalize import normalize_text, tokenize
from resume_scoring.scoring.formatting import calculate_formatting_score
from resume_scoring.scoring.grammar import calculate_grammar_score
from resume_scoring.scoring.keywords import calculate_keyword_score, find_matched_keywords
from resume_scoring.scoring.readability import calculate_readability_score
from resume_scoring.scoring.suggestions import generate_suggestions

log = logging.getLogger(__name__)

WEIGHTS = {
    "formatting": 0.20,
    "keywords": 0.30,
    "grammar": 0.25,
    "readability": 0.25,
}

# (minimum score, level), checked top to bottom
READING_LEVEL_THRESHOLDS = (
    (90, ReadingLevel.EXCELLENT),
    (80, ReadingLevel.VERY_GOOD),
    (70, ReadingLevel.GOOD),
    (60, ReadingLevel.FAIR),
)


def compute_overall_score(scores: ScoreBundle) -> int:
    """Weighted sum of the sub-scores, rounded half up and kept within [0, 100]."""
    weighted = (
        scores.formatting * WEIGHTS["formatting"]
        + scores.keywords * WEIGHTS["keywords"]
        + scores.grammar * WEIGHTS["grammar"]
        + scores.readability * WEIGHTS["readability"]
    )
    return max(0, min(math.floor(weighted + 0.5), 100))


def determine_reading_level(readability_score: int) -> ReadingLevel:
    for threshold, level in READING_LEVEL_THRESHOLDS:
        if readability_score >= threshold:
            return level
    return ReadingLevel.NEEDS_IMPROVEMENT


def analyze(text: str, keyword_set: KeywordSet | None = None) -> ResumeAnalysis:
    """
    Score résumé text. Total over all strings, including the empty string;
    same input and keyword set always yield an equal result.
    """
    text = text or ""
    if keyword_set is None:
        keyword_set = DEFAULT_KEYWORD_SET

    clean_text = normalize_text(text)
    words = tokenize(clean_text)

    scores = ScoreBundle(
        formatting=calculate_formatting_score(text),
        keywords=calculate_keyword_score(clean_text, keyword_set),
        grammar=calculate_grammar_score(text),
        readability=calculate_readability_score(words, text),
    )
    matched = find_matched_keywords(clean_text, keyword_set)
    suggestions = generate_suggestions(
        SuggestionContext(scores=scores, word_count=len(words), matched_keywords=matched)
    )
    overall = compute_overall_score(scores)

    log.debug(
        "Analyzed %d chars: overall=%d formatting=%d keywords=%d grammar=%d readability=%d matched=%d",
        len(text), overall, scores.formatting, scores.keywords, scores.grammar, scores.readability, len(matched),
    )

    return ResumeAnalysis(
        overall_score=overall,
        scores=scores,
        suggestions=suggestions,
        matched_keywords=matched,
        word_count=len(words),
        reading_level=determine_reading_level(scores.readability),
    )
