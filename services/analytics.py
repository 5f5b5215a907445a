"""Per-sport statistical summaries over metric records."""

from typing import Callable, Iterator, List, Sequence

from schemas.analytics import AnalyticsSummary, AthleteSummary, BestGame, TeamAnalyticsSummary, TrendPoint
from schemas.metric_record import BasketballStats, FootballStats, MetricRecord, SoccerStats
from utils.helpers import mean

BASKETBALL = "basketball"
SOCCER = "soccer"
FOOTBALL = "football"


def _counter(stats_type: type, name: str) -> Callable[[MetricRecord], float]:
    """Read one counter or derived ratio; records of another sport give 0."""
    def read(record: MetricRecord) -> float:
        if isinstance(record.stats, stats_type):
            return getattr(record.stats, name) or 0
        return 0
    return read


def _average(records: Sequence[MetricRecord], read: Callable[[MetricRecord], float]) -> float:
    return mean(read(record) for record in records)


def _total(records: Sequence[MetricRecord], read: Callable[[MetricRecord], float]) -> float:
    return sum(read(record) for record in records)


def best_game(records: Sequence[MetricRecord]) -> BestGame:
    """Highest-scoring basketball record; ties keep the earlier one."""
    points = _counter(BasketballStats, "points")
    best = BestGame()
    for record in records:
        if points(record) > best.points:
            best = BestGame(
                record_id=record.id,
                date=record.game_date,
                opponent=record.opponent,
                points=points(record),
            )
    return best


def _basketball(records: Sequence[MetricRecord]) -> dict:
    return {
        "average_points": _average(records, _counter(BasketballStats, "points")),
        "average_rebounds": _average(records, _counter(BasketballStats, "rebounds")),
        "average_assists": _average(records, _counter(BasketballStats, "assists")),
        "average_field_goal_percentage": _average(records, _counter(BasketballStats, "field_goal_percentage")),
        "average_three_point_percentage": _average(records, _counter(BasketballStats, "three_point_percentage")),
        "average_free_throw_percentage": _average(records, _counter(BasketballStats, "free_throw_percentage")),
        "best_game": best_game(records),
    }


def _soccer(records: Sequence[MetricRecord]) -> dict:
    return {
        "total_goals": _total(records, _counter(SoccerStats, "goals")),
        "total_assists": _total(records, _counter(SoccerStats, "assists")),
        "average_pass_accuracy": _average(records, _counter(SoccerStats, "pass_accuracy")),
        "average_shots": _average(records, _counter(SoccerStats, "shots")),
    }


def _football(records: Sequence[MetricRecord]) -> dict:
    return {
        "total_passing_yards": _total(records, _counter(FootballStats, "passing_yards")),
        "total_rushing_yards": _total(records, _counter(FootballStats, "rushing_yards")),
        "total_receiving_yards": _total(records, _counter(FootballStats, "receiving_yards")),
        "total_touchdowns": _total(records, _counter(FootballStats, "touchdowns")),
        "average_pass_completion_percentage": _average(
            records, _counter(FootballStats, "pass_completion_percentage")
        ),
    }


SPORT_FIELDS = {
    BASKETBALL: _basketball,
    SOCCER: _soccer,
    FOOTBALL: _football,
}


def summarize(records: Sequence[MetricRecord], sport: str) -> AnalyticsSummary:
    """Summarize records for a sport.

    Percentages are averaged per game, not over summed makes and attempts,
    so every game carries equal weight. Sports without a field set only
    report ``total_games``.
    """
    records = list(records)
    if not records:
        return AnalyticsSummary(total_games=0)

    fields = SPORT_FIELDS.get(getattr(sport, "value", sport))
    if fields is None:
        return AnalyticsSummary(total_games=len(records))
    return AnalyticsSummary(total_games=len(records), **fields(records))


class TrendSeries:
    """Chart points for records in input order; iterate as often as needed."""

    def __init__(self, records: Sequence[MetricRecord]):
        self._records = records

    def __iter__(self) -> Iterator[TrendPoint]:
        for record in self._records:
            yield TrendPoint(
                date=record.game_date,
                points=_counter(BasketballStats, "points")(record),
                rebounds=_counter(BasketballStats, "rebounds")(record),
                assists=_counter(BasketballStats, "assists")(record),
                goals=_counter(SoccerStats, "goals")(record),
                pass_accuracy=_counter(SoccerStats, "pass_accuracy")(record),
            )

    def __len__(self) -> int:
        return len(self._records)


def trend_data(records: Sequence[MetricRecord]) -> TrendSeries:
    return TrendSeries(records)


def team_summarize(athletes: List[AthleteSummary], sport: str) -> TeamAnalyticsSummary:
    """Roll per-athlete summaries up to team level.

    Basketball figures are averaged across athletes; soccer and football
    totals are summed, matching the per-athlete convention. An empty team
    yields a zero-valued summary.
    """
    if not athletes:
        return TeamAnalyticsSummary()

    def avg(read: Callable[[AthleteSummary], float]) -> float:
        return mean(read(athlete) or 0 for athlete in athletes)

    def total(read: Callable[[AthleteSummary], float]) -> float:
        return sum(read(athlete) or 0 for athlete in athletes)

    summary = TeamAnalyticsSummary(
        total_games=avg(lambda a: a.total_games),
        average_goal_progress=avg(lambda a: a.goals.average_progress),
    )

    sport = getattr(sport, "value", sport)
    if sport == BASKETBALL:
        summary.average_points = avg(lambda a: a.analytics.average_points)
        summary.average_rebounds = avg(lambda a: a.analytics.average_rebounds)
        summary.average_assists = avg(lambda a: a.analytics.average_assists)
    elif sport == SOCCER:
        summary.total_goals = total(lambda a: a.analytics.total_goals)
        summary.total_assists = total(lambda a: a.analytics.total_assists)
    elif sport == FOOTBALL:
        summary.total_passing_yards = total(lambda a: a.analytics.total_passing_yards)
        summary.total_rushing_yards = total(lambda a: a.analytics.total_rushing_yards)
        summary.total_touchdowns = total(lambda a: a.analytics.total_touchdowns)

    return summary
