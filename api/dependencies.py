"""Request-scoped dependencies: authenticated caller and repository access."""

from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config.settings import settings
from schemas.athlete import Athlete
from schemas.user import User
from services.policy import Actor
from services.repository import Repository, get_repository
from utils.logger import setup_logger

logger = setup_logger(__name__)

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    repository: Annotated[Repository, Depends(get_repository)],
) -> User:
    """Verify the bearer token and load the user it names."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Token is not valid",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected token: {e}")
        raise credentials_exception

    user_id = payload.get("user_id")
    if not user_id:
        raise credentials_exception

    user = await repository.get_user(user_id)
    if not user:
        raise credentials_exception
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account is deactivated",
        )
    return user


async def get_actor(user: Annotated[User, Depends(get_current_user)]) -> Actor:
    return Actor.from_user(user)


def require(allowed: bool, detail: str = "Access denied") -> None:
    """Turn a policy decision into a 403."""
    if not allowed:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def require_coach_or_admin(actor: Annotated[Actor, Depends(get_actor)]) -> Actor:
    require(actor.is_coach or actor.is_admin, "Insufficient permissions")
    return actor


async def get_own_athlete(
    actor: Annotated[Actor, Depends(get_actor)],
    repository: Annotated[Repository, Depends(get_repository)],
) -> Athlete:
    """The athlete profile belonging to the caller."""
    athlete = await repository.get_athlete_by_user(actor.id)
    if not athlete:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete profile not found")
    return athlete


async def resolve_target_athlete(
    actor: Actor,
    repository: Repository,
    athlete_id: str | None,
) -> Athlete:
    """Athletes act on their own profile; coaches and admins must name an athlete."""
    if actor.is_athlete:
        athlete = await repository.get_athlete_by_user(actor.id)
        if not athlete:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete profile not found")
        return athlete

    require(actor.is_coach or actor.is_admin)
    if not athlete_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Athlete ID required for coaches/admins",
        )
    athlete = await repository.get_athlete(athlete_id)
    if not athlete:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found")
    return athlete


def create_access_token(user_id: str) -> str:
    """Sign a token carrying the user id claim get_current_user expects."""
    return jwt.encode({"user_id": user_id}, settings.jwt_secret, algorithm=settings.jwt_algorithm)


CurrentActor = Annotated[Actor, Depends(get_actor)]
RepositoryDep = Annotated[Repository, Depends(get_repository)]
