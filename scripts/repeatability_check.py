#!/usr/bin/env python3
"""
Repeatability harness: score the same résumé N times; assert identical results.
Exits 0 if stable, 1 if unstable. Prints a variance report on failure and
provenance (resume_hash, keyword set version/hash) on success.

Usage: python scripts/repeatability_check.py RESUME [--runs 10] [--keywords path]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from resume_analyzer import config
from resume_analyzer.text_extractor import extract_text_from_file
from resume_scoring import analyze
from resume_scoring.utils import hash_text

DEFAULT_RUNS = 10


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("resume", type=Path)
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--keywords", default=None, help="Alternate keyword-set JSON")
    args = parser.parse_args()

    if not args.resume.exists():
        print(f"Error: Resume file not found: {args.resume}", file=sys.stderr)
        sys.exit(1)

    resume_text = extract_text_from_file(args.resume)
    keyword_set = config.get_keyword_set(args.keywords)

    print(f"Running analyze {args.runs} times...")
    results = [analyze(resume_text, keyword_set).to_dict() for _ in range(args.runs)]

    first = results[0]
    variances = []
    for run_num, r in enumerate(results[1:], start=2):
        for field in first:
            if r[field] != first[field]:
                variances.append((field, run_num, f"{r[field]!r} != {first[field]!r}"))

    if variances:
        scores = [x["overall_score"] for x in results]
        print("\n=== VARIANCE REPORT ===\n")
        print(f"Runs: {args.runs}")
        print(f"Score range: min={min(scores)}, max={max(scores)}")
        print()
        for field, run, detail in variances:
            print(f"  Run {run} - {field}: {detail}")
        print("\nRepeatability check FAILED.")
        sys.exit(1)

    print("\nPASS: Repeatability check passed.")
    print("\n--- Provenance ---")
    print(f"  resume_hash: {hash_text(resume_text)}")
    print(f"  resume_char_count: {len(resume_text)}")
    print(f"  keyword_set_version: {keyword_set.version}")
    print(f"  keyword_set_hash: {keyword_set.digest}")
    print("\n--- Run metrics ---")
    print(f"  runs: {args.runs}")
    print(f"  overall_score: {first['overall_score']}")
    print(f"  scores: {first['scores']}")
    print(f"  reading_level: {first['reading_level']}")
    print(f"  matched_keywords: {len(first['matched_keywords'])}")
    sys.exit(0)


if __name__ == "__main__":
    main()
