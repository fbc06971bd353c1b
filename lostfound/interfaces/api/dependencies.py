"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from lostfound.domain.entities import User
from lostfound.infrastructure.database import get_db
from lostfound.infrastructure.realtime import NotificationDispatcher
from lostfound.infrastructure.repositories import UserRepository
from lostfound.infrastructure.security import user_id_from_token

bearer_scheme = HTTPBearer(auto_error=False)


def resolve_user_from_token(token: str | None, db: Session) -> User:
    """Return the live user identified by ``token``.

    Raises ``ValueError`` when the token is missing, invalid, expired or
    belongs to a deleted user.
    """

    if not token:
        raise ValueError("Missing credentials")
    user_id = user_id_from_token(token)
    user = UserRepository(db).get(user_id)
    if user is None:
        raise ValueError("User not found")
    return user


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the bearer token."""

    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        return resolve_user_from_token(credentials.credentials, db)
    except ValueError as exc:
        raise _unauthorized("Invalid credentials") from exc


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return current_user


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.notification_dispatcher
