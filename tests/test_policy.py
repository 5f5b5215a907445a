import pytest

from services import policy
from services.policy import Actor
from tests.factories import make_athlete, make_goal, make_user

ATHLETE = Actor(id="user-1", role="athlete")
OTHER_ATHLETE = Actor(id="user-2", role="athlete")
COACH = Actor(id="coach-1", role="coach")
OTHER_COACH = Actor(id="coach-2", role="coach")
ADMIN = Actor(id="admin-1", role="admin")
PARENT = Actor(id="parent-1", role="athlete")


@pytest.fixture
def athlete():
    return make_athlete(parent_ids=["parent-1"])


def test_actor_from_user():
    actor = Actor.from_user(make_user(_id="coach-1", role="coach"))

    assert actor == COACH
    assert actor.is_coach
    assert not actor.is_admin


@pytest.mark.parametrize(
    "actor,expected",
    [(ATHLETE, True), (COACH, True), (OTHER_COACH, False), (ADMIN, True), (PARENT, True), (OTHER_ATHLETE, False)],
)
def test_can_access_athlete(athlete, actor, expected):
    assert policy.can_access_athlete(actor, athlete) is expected


@pytest.mark.parametrize(
    "actor,expected",
    [(ATHLETE, True), (COACH, True), (OTHER_COACH, False), (ADMIN, True), (PARENT, False)],
)
def test_can_manage_record(athlete, actor, expected):
    assert policy.can_manage_record(actor, athlete) is expected


def test_unassigned_athlete_has_no_coach():
    athlete = make_athlete(coach_id=None)

    assert not policy.is_athletes_coach(COACH, athlete)
    assert not policy.can_give_feedback(COACH, athlete)


def test_report_access():
    athlete = make_athlete()

    assert policy.can_report_on(ATHLETE, athlete)
    assert policy.can_report_on(OTHER_COACH, athlete)
    assert not policy.can_report_on(OTHER_ATHLETE, athlete)


def test_goal_view_and_edit():
    goal = make_goal(permissions={"can_edit": ["coach-1"], "can_view": ["coach-1"]})
    athlete = make_athlete()

    assert policy.can_view_goal(ATHLETE, goal, athlete)
    assert not policy.can_edit_goal(ATHLETE, goal)
    assert policy.can_edit_goal(COACH, goal)
    assert policy.can_edit_goal(ADMIN, goal)
    assert not policy.can_view_goal(OTHER_COACH, goal, athlete)


def test_creator_may_delete_without_edit_rights():
    goal = make_goal(created_by="coach-2", permissions={"can_edit": ["user-1"], "can_view": ["user-1"]})

    assert policy.can_delete_goal(OTHER_COACH, goal)
    assert policy.can_delete_goal(ATHLETE, goal)
    assert not policy.can_delete_goal(COACH, goal)


def test_feedback_limited_to_own_coach_and_admin(athlete):
    assert policy.can_give_feedback(COACH, athlete)
    assert policy.can_give_feedback(ADMIN, athlete)
    assert not policy.can_give_feedback(OTHER_COACH, athlete)
    assert not policy.can_give_feedback(ATHLETE, athlete)
