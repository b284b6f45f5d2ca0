"""Small helpers for audit metadata. Résumé text is referenced by hash, never stored."""

import hashlib
from datetime import datetime, timezone


def hash_text(text: str) -> str:
    """SHA256 hex digest of the UTF-8 text. Deterministic."""
    return hashlib.sha256((text or "").encode("utf-8")).hexdigest()


def iso_now() -> str:
    """Current UTC time, millisecond precision, 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def text_stats(text: str) -> dict:
    """Character count and a whitespace-split word estimate, for display alongside uploads."""
    return {"char_count": len(text), "word_count": len(text.split())}
