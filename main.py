#!/usr/bin/env python3
"""CLI for the Resume Analyzer."""

import argparse
import json
import sys
import uuid
from pathlib import Path

from resume_analyzer import config
from resume_analyzer.report_pdf import write_report_pdf
from resume_analyzer.text_extractor import extract_text_from_file, ExtractionError
from resume_scoring import analyze
from resume_scoring.keywords import KeywordSetError
from resume_scoring.run_report import write_run_report
from resume_scoring.utils import hash_text


def _print_summary(analysis, keyword_set) -> None:
    print("=== Resume Analysis ===\n")
    print(f"Overall score: {analysis.overall_score}/100")
    for name, value in analysis.scores.to_dict().items():
        print(f"  {name.title()}: {value}")
    print(f"Reading level: {analysis.reading_level.value}")
    print(f"Word count: {analysis.word_count}\n")

    print(f"Keywords found ({len(analysis.matched_keywords)}):")
    by_category = {}
    for kw in analysis.matched_keywords:
        by_category.setdefault(keyword_set.category_of(kw), []).append(kw)
    for category, terms in by_category.items():
        print(f"  • {category}: {', '.join(terms)}")
    print()

    if analysis.suggestions:
        print("Suggestions:")
        for s in analysis.suggestions:
            print(f"  • {s}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Score a résumé for formatting, keywords, grammar and readability."
    )
    parser.add_argument(
        "resume",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the résumé (PDF, DOCX or TXT)",
    )
    parser.add_argument(
        "--text",
        type=str,
        help="Résumé as inline text (overrides the resume file if set)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output analysis as JSON",
    )
    parser.add_argument(
        "--pdf",
        type=Path,
        default=None,
        help="Write a PDF report of the analysis to this path",
    )
    parser.add_argument(
        "--report-dir",
        type=Path,
        default=None,
        help="Directory for run_report_<run_id>.json",
    )
    parser.add_argument(
        "--keywords",
        type=str,
        default=None,
        help="Alternate keyword-set JSON (or set RESUME_KEYWORDS_FILE)",
    )

    args = parser.parse_args(argv)

    # Load résumé text
    source_name = None
    if args.text:
        resume_text = args.text
    elif args.resume:
        source_name = args.resume.name
        try:
            resume_text = extract_text_from_file(args.resume)
        except (FileNotFoundError, ExtractionError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print("Error: Provide a résumé file or --text", file=sys.stderr)
        sys.exit(1)

    if not resume_text.strip():
        print("Warning: No text could be extracted from the résumé.", file=sys.stderr)

    try:
        keyword_set = config.get_keyword_set(args.keywords)
    except (FileNotFoundError, KeywordSetError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    analysis = analyze(resume_text, keyword_set)

    if args.json:
        print(json.dumps(analysis.to_dict(), indent=2))
    else:
        _print_summary(analysis, keyword_set)

    if args.report_dir:
        run_id = str(uuid.uuid4())[:8]
        report_path = args.report_dir / f"run_report_{run_id}.json"
        write_run_report(
            report_path,
            run_id=run_id,
            resume_hash=hash_text(resume_text),
            resume_char_count=len(resume_text),
            keyword_set=keyword_set,
            analysis=analysis,
            source=source_name,
        )
        print(f"Run report: {report_path}", file=sys.stderr)

    if args.pdf:
        try:
            write_report_pdf(analysis, args.pdf, source_name)
            print(f"PDF report saved to: {args.pdf}", file=sys.stderr)
        except Exception as e:
            print(f"Error generating PDF: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
