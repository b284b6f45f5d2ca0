"""Formatting score: additive bonuses over a base of 60, capped at 100."""

import pytest

from resume_scoring.scoring.formatting import calculate_formatting_score, find_section_headers


def test_plain_text_gets_base_score():
    assert calculate_formatting_score("Alex Smith worked at Initech") == 60


def test_empty_text_gets_base_score():
    assert calculate_formatting_score("") == 60


def test_all_section_headers_add_forty():
    """Adding every header word raises the score by exactly 40."""
    base = "Alex Smith worked at Initech"
    with_headers = base + " experience education skills summary objective"
    assert calculate_formatting_score(with_headers) - calculate_formatting_score(base) == 40


def test_section_headers_case_insensitive_substring():
    assert find_section_headers("WORK EXPERIENCE and Skillset") == ["experience", "skills"]


def test_each_header_counted_once():
    assert calculate_formatting_score("Skills skills SKILLS") == 68


@pytest.mark.parametrize("glyph", ["•", "-", "*"])
def test_bullet_glyph_adds_ten(glyph):
    assert calculate_formatting_score(f"{glyph} Shipped things") == 70


def test_email_adds_five():
    assert calculate_formatting_score("Contact alex.smith@example.com") == 65


def test_email_requires_alphabetic_tld():
    assert calculate_formatting_score("Contact alex@example") == 60


def test_phone_adds_five():
    assert calculate_formatting_score("Call 555.123.4567") == 65
    assert calculate_formatting_score("Call 5551234567") == 65


def test_dashed_phone_also_counts_as_bullet():
    """'-' is a bullet glyph, so a dashed phone number earns both bonuses."""
    assert calculate_formatting_score("Call 555-123-4567") == 75


def test_year_adds_ten():
    assert calculate_formatting_score("Graduated 2019") == 70
    assert calculate_formatting_score("Born 1987") == 70


def test_year_outside_19xx_20xx_ignored():
    assert calculate_formatting_score("Founded 1850") == 60


def test_month_abbreviation_adds_ten():
    assert calculate_formatting_score("Started in sep") == 70
    assert calculate_formatting_score("Started in January") == 70


def test_year_and_month_counted_once():
    assert calculate_formatting_score("Jan 2020") == 70


def test_score_capped_at_100():
    text = (
        "Summary Objective Experience Education Skills\n"
        "• jane@example.com 555.123.4567 Jan 2020"
    )
    assert calculate_formatting_score(text) == 100


def test_month_match_has_no_trailing_boundary():
    """Any word starting with a month abbreviation counts ("Jane", "Marketing")."""
    assert calculate_formatting_score("Jane") == 70
    assert calculate_formatting_score("Marketing") == 70
