"""Improvement suggestions, generated in a fixed rule order."""

from resume_scoring.models import SuggestionContext

MAX_SUGGESTIONS = 6
MIN_WORD_COUNT = 200
MAX_WORD_COUNT = 800
MIN_MATCHED_KEYWORDS = 5

FORMATTING_SUGGESTIONS = (
    "Add clear section headers like 'Experience', 'Education', and 'Skills'",
    "Use bullet points to organize your achievements and responsibilities",
    "Include your contact information (email and phone number)",
)
KEYWORD_SUGGESTIONS = (
    "Include more relevant industry keywords and technical skills",
    "Use action verbs like 'achieved', 'improved', 'developed', 'managed'",
    "Add specific technologies, tools, or methodologies you've used",
)
GRAMMAR_SUGGESTIONS = (
    "Review for grammar and spelling errors",
    "Ensure proper capitalization and punctuation",
    "Vary your sentence structure and length",
)
READABILITY_SUGGESTIONS = (
    "Keep sentences concise and clear (10-20 words per sentence)",
    "Use simple, professional language",
    "Break up long paragraphs into shorter, scannable sections",
)
EXPAND_SUGGESTION = "Expand your resume with more detailed descriptions of your experience"
CONDENSE_SUGGESTION = "Consider condensing your resume to focus on the most relevant information"
RESEARCH_KEYWORDS_SUGGESTION = "Research job descriptions in your field and include relevant keywords"


def generate_suggestions(context: SuggestionContext) -> tuple[str, ...]:
    """
    Evaluate every rule in order and keep the first six suggestions.
    Rules are independent; only the length pair (expand/condense) is exclusive.
    """
    scores = context.scores
    suggestions: list[str] = []

    if scores.formatting < 70:
        suggestions.extend(FORMATTING_SUGGESTIONS)
    if scores.keywords < 60:
        suggestions.extend(KEYWORD_SUGGESTIONS)
    if scores.grammar < 80:
        suggestions.extend(GRAMMAR_SUGGESTIONS)
    if scores.readability < 70:
        suggestions.extend(READABILITY_SUGGESTIONS)

    if context.word_count < MIN_WORD_COUNT:
        suggestions.append(EXPAND_SUGGESTION)
    elif context.word_count > MAX_WORD_COUNT:
        suggestions.append(CONDENSE_SUGGESTION)

    if len(context.matched_keywords) < MIN_MATCHED_KEYWORDS:
        suggestions.append(RESEARCH_KEYWORDS_SUGGESTION)

    return tuple(suggestions[:MAX_SUGGESTIONS])
