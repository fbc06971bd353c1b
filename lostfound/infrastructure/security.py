"""Security helpers for token generation and validation."""

from datetime import timedelta

from jose import JWTError, jwt

from lostfound.config import get_settings
from lostfound.domain.entities import User
from lostfound.utils import now_utc

ALGORITHM = "HS256"


def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Return a signed JWT identifying ``user``."""

    settings = get_settings()
    expire = now_utc() + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {
        "sub": str(user.id),
        "email": user.email or "",
        "role": user.role_name or "",
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "exp": expire,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def user_id_from_token(token: str) -> int:
    """Decode ``token`` and return the user id stored in ``sub``."""

    payload = decode_access_token(token)
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError) as exc:
        raise ValueError("Could not validate credentials") from exc


__all__ = ["create_access_token", "decode_access_token", "user_id_from_token"]
