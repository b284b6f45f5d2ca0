"""Environment-driven settings for the web app and CLI."""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from resume_scoring.keywords import DEFAULT_KEYWORD_SET, KeywordSet, load_keyword_set

load_dotenv()

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PROJECT_ROOT = Path(__file__).resolve().parent.parent

MAX_FILE_SIZE = int(os.environ.get("RESUME_MAX_FILE_BYTES") or DEFAULT_MAX_FILE_SIZE)
KEYWORDS_FILE = os.environ.get("RESUME_KEYWORDS_FILE") or None
LOG_DIR = Path(os.environ.get("RESUME_LOG_DIR") or PROJECT_ROOT / "logs")
PORT = int(os.environ.get("PORT", "5000"))
DEBUG = os.environ.get("FLASK_DEBUG", "").lower() in ("1", "true", "yes")


@lru_cache(maxsize=None)
def get_keyword_set(path: str | None = None) -> KeywordSet:
    """Keyword set from `path`, else RESUME_KEYWORDS_FILE, else the packaged default. Loaded once."""
    path = path or KEYWORDS_FILE
    if not path:
        return DEFAULT_KEYWORD_SET
    return load_keyword_set(path)
