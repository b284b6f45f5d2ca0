"""Text preparation shared by the scorers."""

from resume_scoring.pipeline.normalize import normalize_text, tokenize, split_sentences

__all__ = ["normalize_text", "tokenize", "split_sentences"]
