"""Heuristic grammar score. Pattern based, no language model."""

import re

from resume_scoring.pipeline.normalize import split_sentences

BASE_SCORE = 85
MIN_SCORE = 30
PENALTY_PER_ERROR = 2
SENTENCE_LENGTH_PENALTY = 5
MIN_AVG_SENTENCE_CHARS = 10
MAX_AVG_SENTENCE_CHARS = 30

ERROR_PATTERNS = {
    # ASCII word boundary only; the trailing \s still matches non-breaking spaces
    "lowercase_i": re.compile(r"(?a:\b)i\s"),
    "repeated_whitespace": re.compile(r"\s{2,}"),
    "repeated_punctuation": re.compile(r"[.!?]{2,}"),
    "lowercase_line_start": re.compile(r"^\s*[a-z]", re.MULTILINE),
}


def count_errors(text: str) -> dict[str, int]:
    """Occurrences of each heuristic error pattern."""
    return {name: len(pattern.findall(text)) for name, pattern in ERROR_PATTERNS.items()}


def average_sentence_length(text: str) -> float:
    """Characters of the whole text per sentence; 0 when there are no sentences."""
    sentences = split_sentences(text)
    if not sentences:
        return 0.0
    return len(text) / len(sentences)


def calculate_grammar_score(text: str) -> int:
    """
    Start at 85, subtract 2 per heuristic error and 5 for an average sentence
    length outside [10, 30] characters. Clamped to [30, 100].
    """
    text = text or ""
    score = BASE_SCORE
    score -= PENALTY_PER_ERROR * sum(count_errors(text).values())

    if split_sentences(text):
        avg = average_sentence_length(text)
        if avg < MIN_AVG_SENTENCE_CHARS or avg > MAX_AVG_SENTENCE_CHARS:
            score -= SENTENCE_LENGTH_PENALTY

    return min(max(score, MIN_SCORE), 100)
