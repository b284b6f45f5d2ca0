"""Readability score from sentence length, word length and transition words."""

from resume_scoring.pipeline.normalize import split_sentences

BASE_SCORE = 70
TRANSITION_WORDS = ("however", "therefore", "additionally", "furthermore", "moreover")


def average_words_per_sentence(words: list[str], text: str) -> float:
    sentences = split_sentences(text)
    if not sentences:
        return 0.0
    return len(words) / len(sentences)


def average_word_length(words: list[str]) -> float:
    if not words:
        return 0.0
    return sum(len(w) for w in words) / len(words)


def has_transitions(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in TRANSITION_WORDS)


def calculate_readability_score(words: list[str], text: str) -> int:
    """
    Base 70.
    +15 for 10-20 words per sentence, -10 above 25 (20-25 is neutral),
    +10 for an average word length of 4-6, +5 for any transition word.
    """
    text = text or ""
    score = BASE_SCORE

    avg_wps = average_words_per_sentence(words, text)
    if 10 <= avg_wps <= 20:
        score += 15
    elif avg_wps > 25:
        score -= 10

    avg_len = average_word_length(words)
    if 4 <= avg_len <= 6:
        score += 10

    if has_transitions(text):
        score += 5

    # Lowest reachable value is 60, so no floor is needed.
    return min(score, 100)
