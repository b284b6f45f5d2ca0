"""Text normalization: lower-casing, punctuation stripping, tokenization, sentence split."""

import re

NON_WORD_RE = re.compile(r"[^0-9A-Za-z_\s]")
WHITESPACE_RE = re.compile(r"\s+")
SENTENCE_END_RE = re.compile(r"[.!?]+")


def normalize_text(text: str) -> str:
    """
    Lower-case and replace every non-word, non-whitespace character with one space.
    Length is preserved; runs of spaces are not collapsed.
    """
    return NON_WORD_RE.sub(" ", (text or "").lower())


def tokenize(normalized: str) -> list[str]:
    """Split on runs of whitespace, dropping empty tokens."""
    return [w for w in WHITESPACE_RE.split(normalized) if w]


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and discard whitespace-only fragments."""
    return [s for s in SENTENCE_END_RE.split(text or "") if s.strip()]
