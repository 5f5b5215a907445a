"""Builds athlete and team report records for rendering."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from config.settings import settings
from schemas.analytics import AnalyticsSummary, AthleteGoals, AthleteSummary, GoalProgressSummary
from schemas.athlete import AthleteIdentity
from schemas.enums import GoalStatus
from schemas.goal import Goal
from schemas.metric_record import MetricRecord
from schemas.report import AthleteReport, ReportGoals, ReportPeriod, ReportStats, TeamHeader, TeamReport
from services.analytics import BASKETBALL, FOOTBALL, SOCCER, summarize, team_summarize
from services.goal_engine import summarize_goals
from utils.helpers import utcnow


@dataclass
class TeamMember:
    """One athlete's inputs to a team report."""
    name: str
    sport: str
    position: Optional[str] = None
    records: List[MetricRecord] = field(default_factory=list)
    goals: List[Goal] = field(default_factory=list)


def report_period(
    start_date: Optional[datetime],
    end_date: Optional[datetime],
    default_days: int,
    now: Optional[datetime] = None,
) -> ReportPeriod:
    """Resolve a reporting window; a missing start falls back to default_days before the end."""
    now = now or utcnow()
    end = end_date or now
    start = start_date or end - timedelta(days=default_days)
    return ReportPeriod(start_date=start, end_date=end, generated_at=now)


def generate_summary(analytics: AnalyticsSummary, goal_progress: GoalProgressSummary, sport: str) -> str:
    """Plain-language summary; sentences whose condition fails are left out."""
    sentences = []

    if analytics.total_games > 0:
        sentences.append(f"Played {analytics.total_games} games in the reporting period.")

        if sport == BASKETBALL:
            sentences.append(
                f"Averaged {analytics.average_points or 0:.1f} points, "
                f"{analytics.average_rebounds or 0:.1f} rebounds, and "
                f"{analytics.average_assists or 0:.1f} assists per game."
            )
        elif sport == SOCCER:
            sentences.append(
                f"Scored {analytics.total_goals or 0:g} goals and provided "
                f"{analytics.total_assists or 0:g} assists."
            )
        elif sport == FOOTBALL:
            sentences.append(
                f"Totaled {analytics.total_passing_yards or 0:g} passing yards, "
                f"{analytics.total_rushing_yards or 0:g} rushing yards, and "
                f"{analytics.total_touchdowns or 0:g} touchdowns."
            )

    if goal_progress.total_goals > 0:
        sentences.append(
            f"Working on {goal_progress.active_goals} active goals with "
            f"{goal_progress.average_progress}% average progress."
        )
    if goal_progress.completed_goals > 0:
        sentences.append(f"Successfully completed {goal_progress.completed_goals} goals.")

    return " ".join(sentences)


def compose(
    athlete: AthleteIdentity,
    records: Sequence[MetricRecord],
    goals: Sequence[Goal],
    period: ReportPeriod,
) -> AthleteReport:
    """Combine analytics, goal progress and identity into one report."""
    records = list(records)
    goals = list(goals)

    analytics = summarize(records, athlete.sport)
    goal_progress = summarize_goals(goals)

    return AthleteReport(
        athlete=athlete,
        report_period=period,
        stats=ReportStats(
            total_games=len(records),
            analytics=analytics,
            recent_games=records[-settings.recent_games_limit:],
        ),
        goals=ReportGoals(
            total=len(goals),
            active=goal_progress.active_goals,
            completed=goal_progress.completed_goals,
            overdue=sum(1 for g in goals if g.status == GoalStatus.OVERDUE),
            progress=goal_progress,
        ),
        summary=generate_summary(analytics, goal_progress, athlete.sport),
    )


def compose_team(team_name: str, members: Sequence[TeamMember], period: ReportPeriod) -> TeamReport:
    """Team report: one summary line per athlete plus team averages."""
    sport = members[0].sport if members else ""
    athletes = []
    for member in members:
        analytics = summarize(member.records, member.sport)
        goal_progress = summarize_goals(member.goals)
        athletes.append(
            AthleteSummary(
                name=member.name,
                position=member.position,
                total_games=len(member.records),
                analytics=analytics,
                goals=AthleteGoals(total=len(member.goals), average_progress=goal_progress.average_progress),
            )
        )

    return TeamReport(
        team=TeamHeader(name=team_name, athlete_count=len(members), sport=sport),
        report_period=period,
        athletes=athletes,
        team_averages=team_summarize(athletes, sport),
    )
