"""Capability checks: pure (actor, resource) -> allowed functions."""

from dataclasses import dataclass
from typing import Optional

from schemas.athlete import Athlete
from schemas.enums import Role
from schemas.goal import Goal
from schemas.user import User


@dataclass(frozen=True)
class Actor:
    """The authenticated caller."""
    id: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "Actor":
        return cls(id=user.id, role=getattr(user.role, "value", user.role))

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_coach(self) -> bool:
        return self.role == Role.COACH

    @property
    def is_athlete(self) -> bool:
        return self.role == Role.ATHLETE


def can_manage_for_others(actor: Actor) -> bool:
    """Coaches and admins act on a named athlete; athletes only on themselves."""
    return actor.is_coach or actor.is_admin


def is_own_profile(actor: Actor, athlete: Athlete) -> bool:
    return athlete.user_id == actor.id


def is_athletes_coach(actor: Actor, athlete: Athlete) -> bool:
    return actor.is_coach and athlete.coach_id is not None and athlete.coach_id == actor.id


def can_access_athlete(actor: Actor, athlete: Athlete) -> bool:
    return (
        actor.is_admin
        or is_own_profile(actor, athlete)
        or is_athletes_coach(actor, athlete)
        or actor.id in athlete.parent_ids
    )


def can_report_on(actor: Actor, athlete: Athlete) -> bool:
    """Athletes see their own reports; coaches and admins any athlete's."""
    return can_manage_for_others(actor) or is_own_profile(actor, athlete)


def can_manage_record(actor: Actor, athlete: Athlete) -> bool:
    """View, edit or delete an athlete's metric records."""
    return actor.is_admin or is_own_profile(actor, athlete) or is_athletes_coach(actor, athlete)


def can_view_goal(actor: Actor, goal: Goal, athlete: Optional[Athlete] = None) -> bool:
    return (
        actor.is_admin
        or actor.id in goal.permissions.can_view
        or (athlete is not None and is_own_profile(actor, athlete))
    )


def can_edit_goal(actor: Actor, goal: Goal) -> bool:
    return actor.is_admin or actor.id in goal.permissions.can_edit


def can_delete_goal(actor: Actor, goal: Goal) -> bool:
    return can_edit_goal(actor, goal) or goal.created_by == actor.id


def can_give_feedback(actor: Actor, athlete: Athlete) -> bool:
    return actor.is_admin or is_athletes_coach(actor, athlete)
