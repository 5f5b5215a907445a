from datetime import datetime, timedelta

from schemas.analytics import AnalyticsSummary, GoalProgressSummary
from schemas.athlete import AthleteIdentity
from services.report_composer import TeamMember, compose, compose_team, generate_summary, report_period
from tests.factories import make_basketball, make_goal, make_soccer

NOW = datetime(2026, 6, 1, 12, 0)


def _period():
    return report_period(None, None, 90, now=NOW)


def test_report_period_defaults_to_window_before_end():
    period = report_period(None, None, 90, now=NOW)

    assert period.end_date == NOW
    assert period.start_date == NOW - timedelta(days=90)
    assert period.generated_at == NOW


def test_report_period_keeps_explicit_start():
    start = datetime(2026, 1, 1)
    end = datetime(2026, 2, 1)

    period = report_period(start, end, 90, now=NOW)

    assert period.start_date == start
    assert period.end_date == end


def test_summary_omits_goal_sentences_without_goals():
    analytics = AnalyticsSummary(total_games=2, average_points=25, average_rebounds=4, average_assists=3.5)

    summary = generate_summary(analytics, GoalProgressSummary(), "basketball")

    assert summary == (
        "Played 2 games in the reporting period. "
        "Averaged 25.0 points, 4.0 rebounds, and 3.5 assists per game."
    )


def test_summary_omits_completed_clause_when_none_completed():
    progress = GoalProgressSummary(total_goals=2, active_goals=2, completed_goals=0, average_progress=45)

    summary = generate_summary(AnalyticsSummary(total_games=0), progress, "basketball")

    assert summary == "Working on 2 active goals with 45% average progress."
    assert "completed" not in summary


def test_summary_includes_completed_goals():
    progress = GoalProgressSummary(total_goals=3, active_goals=1, completed_goals=2, average_progress=80)

    summary = generate_summary(AnalyticsSummary(total_games=0), progress, "soccer")

    assert summary.endswith("Successfully completed 2 goals.")


def test_soccer_and_football_sentences():
    soccer = generate_summary(AnalyticsSummary(total_games=3, total_goals=4, total_assists=2), GoalProgressSummary(), "soccer")
    football = generate_summary(
        AnalyticsSummary(total_games=1, total_passing_yards=250, total_rushing_yards=35, total_touchdowns=3),
        GoalProgressSummary(),
        "football",
    )

    assert soccer == "Played 3 games in the reporting period. Scored 4 goals and provided 2 assists."
    assert football == (
        "Played 1 games in the reporting period. "
        "Totaled 250 passing yards, 35 rushing yards, and 3 touchdowns."
    )


def test_empty_summary():
    assert generate_summary(AnalyticsSummary(total_games=0), GoalProgressSummary(), "basketball") == ""


def test_compose_athlete_report():
    records = [
        make_basketball(NOW - timedelta(days=20 - i), points=10 + i, field_goals_made=4, field_goals_attempted=8)
        for i in range(12)
    ]
    goals = [
        make_goal(progress={"percentage": 50}),
        make_goal(status="completed", progress={"percentage": 100}),
        make_goal(status="overdue", progress={"percentage": 30}),
    ]
    identity = AthleteIdentity(name="Alex Rivera", sport="basketball", position="Guard", coach="Carla Diaz")

    report = compose(identity, records, goals, _period())

    assert report.stats.total_games == 12
    assert len(report.stats.recent_games) == 10
    assert report.stats.recent_games[-1].id == records[-1].id
    assert report.stats.analytics.average_field_goal_percentage == 50
    assert report.goals.total == 3
    assert report.goals.active == 1
    assert report.goals.completed == 1
    assert report.goals.overdue == 1
    assert report.goals.progress.average_progress == 60
    assert report.summary.startswith("Played 12 games in the reporting period.")
    assert report.summary.endswith("Successfully completed 1 goals.")


def test_compose_team_report():
    members = [
        TeamMember(
            name="Alex Rivera",
            sport="soccer",
            position="Forward",
            records=[make_soccer(NOW - timedelta(days=3), goals=2, assists=1)],
            goals=[make_goal(sport="soccer", progress={"percentage": 40})],
        ),
        TeamMember(name="Sam Lee", sport="soccer", records=[], goals=[]),
    ]

    report = compose_team("Tigers", members, _period())

    assert report.team.name == "Tigers"
    assert report.team.athlete_count == 2
    assert report.team.sport == "soccer"
    assert [a.name for a in report.athletes] == ["Alex Rivera", "Sam Lee"]
    assert report.athletes[0].goals.average_progress == 40
    assert report.athletes[1].total_games == 0
    assert report.team_averages.total_goals == 2
    assert report.team_averages.total_games == 0.5
    assert report.team_averages.average_goal_progress == 20
