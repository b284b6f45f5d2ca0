"""Result types produced by the scoring engine."""

from dataclasses import dataclass
from enum import Enum


class ReadingLevel(str, Enum):
    """Five-tier label derived from the readability sub-score."""

    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_IMPROVEMENT = "Needs Improvement"


@dataclass(frozen=True)
class ScoreBundle:
    formatting: int
    keywords: int
    grammar: int
    readability: int

    def to_dict(self) -> dict:
        return {
            "formatting": self.formatting,
            "keywords": self.keywords,
            "grammar": self.grammar,
            "readability": self.readability,
        }


@dataclass(frozen=True)
class SuggestionContext:
    """Everything the suggestion rules look at, passed by value."""

    scores: ScoreBundle
    word_count: int
    matched_keywords: tuple[str, ...]


@dataclass(frozen=True)
class ResumeAnalysis:
    """Complete, immutable result of one analyze() call."""

    overall_score: int
    scores: ScoreBundle
    suggestions: tuple[str, ...]
    matched_keywords: tuple[str, ...]
    word_count: int
    reading_level: ReadingLevel

    def to_dict(self) -> dict:
        """JSON-ready representation (snake_case keys, plain lists)."""
        return {
            "overall_score": self.overall_score,
            "scores": self.scores.to_dict(),
            "suggestions": list(self.suggestions),
            "matched_keywords": list(self.matched_keywords),
            "word_count": self.word_count,
            "reading_level": self.reading_level.value,
        }
