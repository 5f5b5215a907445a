from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.dependencies import get_current_user
from api.main import app
from services.repository import get_repository
from tests.factories import make_athlete, make_user
from tests.stubs import StubRepository


@pytest.fixture
def repository() -> StubRepository:
    """
    Seeded in-memory repository: a coach with one athlete on the Tigers,
    a second unassigned Tigers athlete, a parent and an admin.
    """
    return StubRepository().add(
        make_user(),
        make_user(_id="user-2", first_name="Sam", last_name="Lee", email="sam@example.com"),
        make_user(_id="coach-1", first_name="Carla", last_name="Diaz", role="coach"),
        make_user(_id="coach-2", first_name="Ben", last_name="Okafor", role="coach"),
        make_user(_id="admin-1", first_name="Ada", last_name="Admin", role="admin"),
        make_user(_id="parent-1", first_name="Pat", last_name="Rivera", role="athlete"),
        make_athlete(parent_ids=["parent-1"]),
        make_athlete(_id="athlete-2", user_id="user-2", position="Center", coach_id=None),
    )


@pytest.fixture
def login(repository):
    """Authenticate subsequent requests as the given user id."""

    def _login(user_id: str):
        user = repository.users[user_id]
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _login


@pytest_asyncio.fixture
async def client(repository) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient with the app and the repository dependency overridden.
    """
    app.dependency_overrides[get_repository] = lambda: repository

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
