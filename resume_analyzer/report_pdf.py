"""PDF rendering of a résumé analysis."""

from io import BytesIO
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from resume_scoring.models import ResumeAnalysis
from resume_scoring.scoring import determine_reading_level

SCORE_COLORS = (
    (90, HexColor("#16a34a")),  # excellent
    (80, HexColor("#2563eb")),  # good
    (70, HexColor("#d97706")),  # needs improvement
)
POOR_COLOR = HexColor("#dc2626")

SUB_SCORES = (
    ("Formatting", "formatting", "Structure & layout"),
    ("Keywords", "keywords", "Industry relevance"),
    ("Grammar", "grammar", "Language quality"),
    ("Readability", "readability", "Clarity & flow"),
)


def score_color(score: int):
    for threshold, color in SCORE_COLORS:
        if score >= threshold:
            return color
    return POOR_COLOR


def _styles() -> dict:
    styles = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "ReportTitle",
            parent=styles["Heading1"],
            fontSize=18,
            spaceAfter=6,
            alignment=TA_CENTER,
        ),
        "subtitle": ParagraphStyle(
            "ReportSubtitle",
            parent=styles["Normal"],
            alignment=TA_CENTER,
            textColor=HexColor("#64748b"),
        ),
        "overall": ParagraphStyle(
            "OverallScore",
            parent=styles["Heading1"],
            fontSize=36,
            leading=42,
            alignment=TA_CENTER,
        ),
        "heading": ParagraphStyle(
            "ReportHeading",
            parent=styles["Heading2"],
            fontSize=12,
            spaceBefore=12,
            spaceAfter=6,
        ),
        "body": styles["Normal"],
    }


def _scores_table(analysis: ResumeAnalysis) -> Table:
    rows = [["Category", "Score", "Measures"]]
    for label, attr, description in SUB_SCORES:
        rows.append([label, f"{getattr(analysis.scores, attr)}/100", description])

    table = Table(rows, colWidths=[1.6 * inch, 1.0 * inch, 2.8 * inch])
    style = [
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.black),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]
    for row, (_, attr, _) in enumerate(SUB_SCORES, start=1):
        style.append(("TEXTCOLOR", (1, row), (1, row), score_color(getattr(analysis.scores, attr))))
    table.setStyle(TableStyle(style))
    return table


def build_report_story(analysis: ResumeAnalysis, source_name: str | None = None) -> list:
    """Flowables for the report, in page order."""
    st = _styles()
    overall_level = determine_reading_level(analysis.overall_score)
    story = [Paragraph("Resume Analysis", st["title"])]
    if source_name:
        story.append(Paragraph(f"Analysis for: {escape(source_name)}", st["subtitle"]))
    story.append(Spacer(1, 0.3 * inch))

    color = score_color(analysis.overall_score).hexval()[2:]
    story.append(Paragraph(f'<font color="#{color}">{analysis.overall_score}</font>', st["overall"]))
    story.append(
        Paragraph(
            f"<b>{overall_level.value}</b> - your resume scores {analysis.overall_score}/100",
            st["subtitle"],
        )
    )
    story.append(Spacer(1, 0.3 * inch))

    story.append(Paragraph("Detailed Analysis", st["heading"]))
    story.append(_scores_table(analysis))
    story.append(Spacer(1, 0.2 * inch))
    story.append(
        Paragraph(
            f"<b>Reading level:</b> {analysis.reading_level.value} &nbsp;&nbsp; "
            f"<b>Word count:</b> {analysis.word_count}",
            st["body"],
        )
    )

    story.append(Paragraph(f"Keywords Found ({len(analysis.matched_keywords)})", st["heading"]))
    if analysis.matched_keywords:
        story.append(Paragraph(escape(", ".join(analysis.matched_keywords)), st["body"]))
    else:
        story.append(Paragraph("No keywords from the reference list were found.", st["body"]))

    if analysis.suggestions:
        story.append(Paragraph("Improvement Suggestions", st["heading"]))
        for suggestion in analysis.suggestions:
            story.append(Paragraph(f"• {escape(suggestion)}", st["body"]))

    return story


def generate_report_pdf(analysis: ResumeAnalysis, source_name: str | None = None) -> bytes:
    """Render the analysis as a one-page PDF and return its bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        rightMargin=inch,
        leftMargin=inch,
        topMargin=inch,
        bottomMargin=inch,
        title="Resume Analysis",
    )
    doc.build(build_report_story(analysis, source_name))
    return buffer.getvalue()


def write_report_pdf(analysis: ResumeAnalysis, output_path: str | Path, source_name: str | None = None) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(generate_report_pdf(analysis, source_name))
    return output_path
