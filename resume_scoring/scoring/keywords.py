"""Keyword matching and keyword relevance score."""

from resume_scoring.keywords import DEFAULT_KEYWORD_SET, KeywordSet

DENSITY_MULTIPLIER = 300
DENSITY_CAP = 80


def find_matched_keywords(normalized_text: str, keyword_set: KeywordSet | None = None) -> tuple[str, ...]:
    """
    Keywords contained in normalized text as plain substrings, in keyword-set order.
    Multi-word keywords ("project management") match literally.
    """
    if keyword_set is None:
        keyword_set = DEFAULT_KEYWORD_SET
    return tuple(k for k in keyword_set.terms if k in normalized_text)


def category_bonus(matched: tuple[str, ...], keyword_set: KeywordSet) -> int:
    """Sum of bonus-group points for every group with at least one matched member."""
    matched_set = set(matched)
    return sum(g.points for g in keyword_set.bonus_groups if g.terms & matched_set)


def calculate_keyword_score(normalized_text: str, keyword_set: KeywordSet | None = None) -> int:
    """
    base = floor(min(density * 300, 80)) where density = matched / len(keyword_set),
    plus category bonuses, capped at 100.
    """
    if keyword_set is None:
        keyword_set = DEFAULT_KEYWORD_SET
    matched = find_matched_keywords(normalized_text, keyword_set)
    # Integer arithmetic keeps floor() exact at thresholds like 9/54 * 300 == 50.
    base = min(len(matched) * DENSITY_MULTIPLIER // len(keyword_set), DENSITY_CAP)
    return min(base + category_bonus(matched, keyword_set), 100)
