"""
PDF rendering of athlete and team reports using ReportLab.
"""

import io
from xml.sax.saxutils import escape
from typing import List, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from schemas.report import AthleteReport, TeamReport

HEADER_COLOR = colors.HexColor("#333333")
GRID_COLOR = colors.HexColor("#dddddd")
HEADER_BACKGROUND = colors.HexColor("#f2f2f2")
SUMMARY_BACKGROUND = colors.HexColor("#f9f9f9")


def _styles():
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontSize=22,
        textColor=HEADER_COLOR,
        alignment=1,  # Center
        spaceAfter=6,
    )
    subtitle_style = ParagraphStyle(
        "ReportSubtitle",
        parent=styles["Heading2"],
        alignment=1,
        spaceAfter=4,
    )
    heading_style = ParagraphStyle(
        "ReportHeading",
        parent=styles["Heading2"],
        fontSize=14,
        textColor=HEADER_COLOR,
        spaceBefore=18,
        spaceAfter=8,
    )
    centered_style = ParagraphStyle("Centered", parent=styles["Normal"], alignment=1)
    return styles, title_style, subtitle_style, heading_style, centered_style


def _metric_table(rows: List[Tuple[str, str]], header: Tuple[str, str] = ("Metric", "Value")) -> Table:
    table = Table([list(header)] + [list(row) for row in rows], colWidths=[3.5 * inch, 2.5 * inch])
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_BACKGROUND),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("GRID", (0, 0), (-1, -1), 0.5, GRID_COLOR),
                ("PADDING", (0, 0), (-1, -1), 8),
            ]
        )
    )
    return table


def _optional_row(rows: list, label: str, value: Optional[float], fmt: str = "{:.1f}") -> None:
    """Rows for sport-specific figures are shown only when there is a non-zero value."""
    if value:
        rows.append((label, fmt.format(value)))


def _document(buffer: io.BytesIO) -> SimpleDocTemplate:
    return SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=0.75 * inch,
        leftMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
    )


def render_athlete_report(report: AthleteReport) -> bytes:
    """
    Render an athlete progress report.

    Returns PDF as bytes for download.
    """
    buffer = io.BytesIO()
    doc = _document(buffer)
    styles, title_style, subtitle_style, heading_style, centered_style = _styles()
    elements = []

    # Header
    elements.append(Paragraph("Athlete Progress Report", title_style))
    elements.append(Paragraph(escape(report.athlete.name), subtitle_style))
    elements.append(
        Paragraph(f"{report.athlete.sport} &bull; {escape(report.athlete.position or 'N/A')}", centered_style)
    )
    elements.append(Spacer(1, 12))

    # Period
    period = report.report_period
    elements.append(Paragraph("Report Period", heading_style))
    elements.append(Paragraph(f"<b>From:</b> {period.start_date:%b %d, %Y}", styles["Normal"]))
    elements.append(Paragraph(f"<b>To:</b> {period.end_date:%b %d, %Y}", styles["Normal"]))
    elements.append(Paragraph(f"<b>Generated:</b> {period.generated_at:%b %d, %Y}", styles["Normal"]))

    # Performance statistics
    analytics = report.stats.analytics
    stat_rows = [("Total Games", str(report.stats.total_games))]
    _optional_row(stat_rows, "Average Points", analytics.average_points)
    _optional_row(stat_rows, "Average Rebounds", analytics.average_rebounds)
    _optional_row(stat_rows, "Average Assists", analytics.average_assists)
    _optional_row(stat_rows, "Field Goal %", analytics.average_field_goal_percentage)
    _optional_row(stat_rows, "Total Goals", analytics.total_goals, "{:g}")
    _optional_row(stat_rows, "Total Assists", analytics.total_assists, "{:g}")
    _optional_row(stat_rows, "Pass Accuracy %", analytics.average_pass_accuracy)
    _optional_row(stat_rows, "Passing Yards", analytics.total_passing_yards, "{:g}")
    _optional_row(stat_rows, "Rushing Yards", analytics.total_rushing_yards, "{:g}")
    _optional_row(stat_rows, "Touchdowns", analytics.total_touchdowns, "{:g}")
    elements.append(Paragraph("Performance Statistics", heading_style))
    elements.append(_metric_table(stat_rows))

    # Goals
    goals = report.goals
    elements.append(Paragraph("Goal Progress", heading_style))
    elements.append(
        _metric_table(
            [
                ("Total Goals", str(goals.total)),
                ("Active Goals", str(goals.active)),
                ("Completed Goals", str(goals.completed)),
                ("Overdue Goals", str(goals.overdue)),
                ("Average Progress", f"{goals.progress.average_progress}%"),
            ]
        )
    )

    # Summary
    elements.append(Paragraph("Summary", heading_style))
    summary = Table([[Paragraph(escape(report.summary or "No activity in this period."), styles["Normal"])]],
                    colWidths=[6 * inch])
    summary.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), SUMMARY_BACKGROUND),
                ("PADDING", (0, 0), (-1, -1), 12),
            ]
        )
    )
    elements.append(summary)

    doc.build(elements)
    buffer.seek(0)
    return buffer.getvalue()


def render_team_report(report: TeamReport) -> bytes:
    """
    Render a team progress report with team averages and one block per athlete.
    """
    buffer = io.BytesIO()
    doc = _document(buffer)
    styles, title_style, subtitle_style, heading_style, centered_style = _styles()
    elements = []

    elements.append(Paragraph("Team Progress Report", title_style))
    elements.append(Paragraph(escape(report.team.name), subtitle_style))
    elements.append(
        Paragraph(f"{report.team.sport} &bull; {report.team.athlete_count} Athletes", centered_style)
    )

    averages = report.team_averages
    average_rows = [
        ("Games per Athlete", f"{averages.total_games:.1f}"),
        ("Average Goal Progress", f"{averages.average_goal_progress:.1f}%"),
    ]
    _optional_row(average_rows, "Average Points", averages.average_points)
    _optional_row(average_rows, "Average Rebounds", averages.average_rebounds)
    _optional_row(average_rows, "Average Assists", averages.average_assists)
    _optional_row(average_rows, "Total Team Goals", averages.total_goals, "{:g}")
    _optional_row(average_rows, "Total Team Assists", averages.total_assists, "{:g}")
    _optional_row(average_rows, "Total Touchdowns", averages.total_touchdowns, "{:g}")
    elements.append(Paragraph("Team Averages", heading_style))
    elements.append(_metric_table(average_rows, header=("Metric", "Average")))

    elements.append(Paragraph("Individual Athletes", heading_style))
    athlete_rows = [["Athlete", "Position", "Games Played", "Goal Progress"]]
    for athlete in report.athletes:
        athlete_rows.append(
            [athlete.name, athlete.position or "N/A", str(athlete.total_games), f"{athlete.goals.average_progress}%"]
        )
    athlete_table = Table(athlete_rows, colWidths=[2 * inch, 1.5 * inch, 1.25 * inch, 1.25 * inch])
    athlete_table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_BACKGROUND),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("GRID", (0, 0), (-1, -1), 0.5, GRID_COLOR),
                ("PADDING", (0, 0), (-1, -1), 8),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ]
        )
    )
    elements.append(athlete_table)

    doc.build(elements)
    buffer.seek(0)
    return buffer.getvalue()
