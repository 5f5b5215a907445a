"""Report routes: athlete and team progress reports as JSON or PDF."""

import re
from datetime import datetime
from typing import Literal, Optional
from urllib.parse import quote
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from api.dependencies import CurrentActor, RepositoryDep, require, require_coach_or_admin
from config.settings import settings
from schemas.athlete import Athlete, AthleteIdentity
from schemas.enums import GoalStatus
from services import policy
from services.pdf_renderer import render_athlete_report, render_team_report
from services.report_composer import TeamMember, compose, compose_team, report_period
from services.policy import Actor
from utils.helpers import to_naive_utc
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])

ReportFormat = Literal["json", "pdf"]


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback name and the full name per RFC 5987."""
    fallback = re.sub(r"[^A-Za-z0-9._-]+", "_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )


def _optional_utc(value: Optional[datetime]) -> Optional[datetime]:
    return to_naive_utc(value) if value else None


async def _display_name(repository, user_id: Optional[str]) -> Optional[str]:
    if not user_id:
        return None
    user = await repository.get_user(user_id)
    return user.full_name if user else None


async def _identity(repository, athlete: Athlete) -> AthleteIdentity:
    return AthleteIdentity(
        name=await _display_name(repository, athlete.user_id) or "Unknown Athlete",
        sport=athlete.sport,
        position=athlete.position,
        age=athlete.age,
        team=athlete.team,
        coach=await _display_name(repository, athlete.coach_id),
    )


@router.get("/athlete/{athlete_id}")
async def athlete_report(
    athlete_id: str,
    actor: CurrentActor,
    repository: RepositoryDep,
    format: ReportFormat = Query("json", description="json or pdf"),
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
):
    """
    Generate an athlete progress report.
    Defaults to the last report_default_days days.
    """
    try:
        athlete = await repository.get_athlete(athlete_id)
        if not athlete:
            raise HTTPException(status_code=404, detail="Athlete not found")
        require(policy.can_report_on(actor, athlete))

        period = report_period(
            _optional_utc(start_date), _optional_utc(end_date), settings.report_default_days
        )
        records = await repository.find_metric_records(
            athlete.id, start_date=period.start_date, end_date=period.end_date
        )
        goals = await repository.find_goals(
            athlete.id, active_between=(period.start_date, period.end_date)
        )

        report = compose(await _identity(repository, athlete), records, goals, period)
        logger.info(
            f"Generated athlete report for {athlete.id}: {len(records)} records, {len(goals)} goals"
        )

        if format == "pdf":
            filename = f"{report.athlete.name}_Report.pdf"
            return _pdf_response(render_athlete_report(report), filename)
        return {"report": report}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating athlete report for {athlete_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error generating report: {str(e)}")


@router.get("/team/{team_name}")
async def team_report(
    team_name: str,
    repository: RepositoryDep,
    actor: Actor = Depends(require_coach_or_admin),
    format: ReportFormat = Query("json", description="json or pdf"),
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
):
    """
    Generate a team progress report (coaches and admins).
    Goal figures count active goals only.
    """
    try:
        athletes = await repository.find_athletes(team_name=team_name)
        if not athletes:
            raise HTTPException(status_code=404, detail="Team not found or no athletes")

        period = report_period(
            _optional_utc(start_date), _optional_utc(end_date), settings.team_report_default_days
        )

        members = []
        for athlete in athletes:
            members.append(
                TeamMember(
                    name=await _display_name(repository, athlete.user_id) or "Unknown Athlete",
                    sport=athlete.sport,
                    position=athlete.position,
                    records=await repository.find_metric_records(
                        athlete.id, start_date=period.start_date, end_date=period.end_date
                    ),
                    goals=await repository.find_goals(athlete.id, status=GoalStatus.ACTIVE.value),
                )
            )

        report = compose_team(team_name, members, period)
        logger.info(f"Generated team report for {team_name} ({len(members)} athletes) by {actor.id}")

        if format == "pdf":
            return _pdf_response(render_team_report(report), f"{team_name}_Team_Report.pdf")
        return {"report": report}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating team report for {team_name}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error generating team report: {str(e)}")
