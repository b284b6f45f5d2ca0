"""Determinism test: same résumé analyzed 10x → identical results."""

from resume_scoring import analyze


SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | 555-123-4567

Summary
Senior developer with 6 years of experience in Python. However, I focus on clean code.

Experience
- Developed data pipelines using Python and SQL, processing 1TB/day.
- Led a squad of 4 engineers; improved release cadence by 30%.

Education
B.S. Computer Science, State University, May 2017

Skills
Python, React, Docker, AWS, Agile, Communication"""


def test_analyze_determinism():
    """Same input → identical analysis across 10 runs."""
    results = [analyze(SAMPLE_RESUME) for _ in range(10)]

    first = results[0]
    for r in results[1:]:
        assert r == first
        assert r.to_dict() == first.to_dict()
        assert r.overall_score == first.overall_score
        assert r.matched_keywords == first.matched_keywords
        assert r.suggestions == first.suggestions


def test_analyze_does_not_leak_state_between_calls():
    """Analyzing other text in between does not change the result."""
    before = analyze(SAMPLE_RESUME)
    analyze("")
    analyze("python javascript react " * 100)
    after = analyze(SAMPLE_RESUME)
    assert before == after
