"""Athlete collection schema."""

from pydantic import BaseModel, Field
from typing import List, Optional
from schemas.common import Document, Schema
from schemas.enums import AthleteSport, TeamLevel


class Height(Schema):
    feet: Optional[int] = Field(None, ge=3, le=8)
    inches: Optional[int] = Field(None, ge=0, le=11)


class TeamInfo(Schema):
    name: Optional[str] = None
    level: Optional[TeamLevel] = None
    season: Optional[str] = None


class Athlete(Document):
    """Athlete collection model: one user account extended with sport and team data."""
    user_id: str = Field(..., description="Owning user identifier")
    sport: AthleteSport = Field(..., description="Primary sport")
    position: Optional[str] = None
    age: Optional[int] = Field(None, ge=8, le=100)
    height: Optional[Height] = None
    weight: Optional[float] = Field(None, ge=0)
    team: Optional[TeamInfo] = None
    coach_id: Optional[str] = Field(None, description="Assigned coach user identifier")
    parent_ids: List[str] = Field(default_factory=list)


class AthleteIdentity(BaseModel):
    """Who a report is about."""
    name: str
    sport: str
    position: Optional[str] = None
    age: Optional[int] = None
    team: Optional[TeamInfo] = None
    coach: Optional[str] = Field(None, description="Coach display name")


class AthleteProfileUpdate(BaseModel):
    """Fields an athlete may change on their own profile."""
    sport: Optional[AthleteSport] = None
    position: Optional[str] = None
    age: Optional[int] = Field(None, ge=8, le=100)
    height: Optional[Height] = None
    weight: Optional[float] = Field(None, ge=0)
    team: Optional[TeamInfo] = None
