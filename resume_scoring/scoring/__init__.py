"""Deterministic résumé scoring engine."""

from resume_scoring.scoring.engine import analyze, compute_overall_score, determine_reading_level

__all__ = ["analyze", "compute_overall_score", "determine_reading_level"]
