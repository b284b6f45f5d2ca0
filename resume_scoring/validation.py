"""Schema validation for keyword sets and serialized analyses."""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


@lru_cache(maxsize=None)
def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_keyword_set(data: dict) -> None:
    """Validate a keyword-set document. Raises jsonschema.ValidationError if invalid."""
    jsonschema.validate(data, _load_schema("keyword_set"))


def validate_analysis(data: dict) -> None:
    """Validate a serialized ResumeAnalysis (to_dict output). Raises jsonschema.ValidationError if invalid."""
    jsonschema.validate(data, _load_schema("resume_analysis"))
