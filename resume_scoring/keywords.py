"""Reference keyword sets: immutable, loaded once, injectable into analyze()."""

import json
from dataclasses import dataclass
from pathlib import Path

import jsonschema

from resume_scoring.utils import hash_text
from resume_scoring.validation import validate_keyword_set

DEFAULT_KEYWORDS_PATH = Path(__file__).resolve().parent / "data" / "keywords.json"


class KeywordSetError(ValueError):
    """Raised when a keyword-set document is malformed or inconsistent."""


@dataclass(frozen=True)
class BonusGroup:
    """Subset of the keyword set that earns `points` once if any member matched."""

    name: str
    points: int
    terms: frozenset[str]


@dataclass(frozen=True)
class KeywordSet:
    version: str
    categories: tuple[tuple[str, tuple[str, ...]], ...]
    bonus_groups: tuple[BonusGroup, ...] = ()
    digest: str = ""

    @property
    def terms(self) -> tuple[str, ...]:
        """All keywords in declaration order, duplicates dropped."""
        ordered = (term for _, terms in self.categories for term in terms)
        return tuple(dict.fromkeys(ordered))

    def category_of(self, term: str) -> str | None:
        for name, terms in self.categories:
            if term in terms:
                return name
        return None

    def __len__(self) -> int:
        return len(self.terms)


def keyword_set_from_dict(data: dict) -> KeywordSet:
    """
    Build a KeywordSet from a parsed document.
    Validates against schema; every bonus term must be a member of the set.
    Raises KeywordSetError if invalid.
    """
    try:
        validate_keyword_set(data)
    except jsonschema.ValidationError as e:
        raise KeywordSetError(f"Invalid keyword set: {e.message}") from e

    categories = tuple(
        (name, tuple(term.lower() for term in terms))
        for name, terms in data["categories"].items()
    )
    all_terms = {term for _, terms in categories for term in terms}
    if not all_terms:
        raise KeywordSetError("Keyword set has no terms")

    groups = []
    for g in data.get("bonus_groups", []):
        terms = frozenset(t.lower() for t in g["terms"])
        unknown = sorted(terms - all_terms)
        if unknown:
            raise KeywordSetError(
                f"Bonus group '{g['name']}' references terms outside the keyword set: {', '.join(unknown)}"
            )
        groups.append(BonusGroup(name=g["name"], points=g["points"], terms=terms))

    digest = hash_text(json.dumps(data, sort_keys=True))
    return KeywordSet(
        version=data["version"],
        categories=categories,
        bonus_groups=tuple(groups),
        digest=digest,
    )


def load_keyword_set(path: str | Path) -> KeywordSet:
    """Load and validate a keyword-set JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Keyword set not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise KeywordSetError(f"Keyword set {path.name} is not valid JSON: {e}") from e
    return keyword_set_from_dict(data)


DEFAULT_KEYWORD_SET = load_keyword_set(DEFAULT_KEYWORDS_PATH)
